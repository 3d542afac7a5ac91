"""Core value types for regular polygons.

This module defines the fundamental geometric types used throughout polylab:
- Point: A 2D point on a drawing surface
- PolygonSpec: Side count and side length of a regular polygon
- PolygonProperties: Scalar properties derived from a PolygonSpec
"""

import math
from dataclasses import dataclass
from typing import Any

from polylab.exceptions import InvalidPolygonError

MIN_SIDES = 3


def circumradius(side_count: int, side_length: float) -> float:
    """Distance from the centre to a vertex of a regular polygon."""
    return side_length / (2 * math.sin(math.pi / side_count))


def interior_angle_sum(side_count: int) -> float:
    """Sum of the interior angles of any simple polygon, in degrees."""
    return (side_count - 2) * 180.0


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Coordinates follow the raster convention used by
    drawing surfaces: x grows to the right, y grows downwards.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def offset(self, dx: float, dy: float) -> "Point":
        """Return a copy of this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class PolygonSpec:
    """Side count and side length of a regular polygon.

    A spec with fewer than three sides cannot be constructed. The side length
    is not validated; zero or negative lengths give degenerate geometry.

    Attributes:
        side_count: Number of sides (at least 3)
        side_length: Length of every side
    """

    side_count: int
    side_length: float = 1.0

    def __post_init__(self) -> None:
        if self.side_count < MIN_SIDES:
            raise InvalidPolygonError(self.side_count)


@dataclass(frozen=True, slots=True)
class PolygonProperties:
    """Scalar properties of a regular polygon.

    Recomputed on demand and never cached. Angles are in degrees.
    ``central_angle`` equals ``exterior_angle`` numerically for every regular
    polygon; both are kept since they name different geometric ideas.

    Attributes:
        side_count: Number of sides the properties were computed for
        side_length: Side length the properties were computed for
        interior_angle: Angle between adjacent sides, inside the polygon
        exterior_angle: Turning angle at each vertex
        central_angle: Angle subtended at the centre by one side
        perimeter: Sum of the side lengths
        area: Enclosed area
        apothem: Distance from the centre to the midpoint of a side
    """

    side_count: int
    side_length: float
    interior_angle: float
    exterior_angle: float
    central_angle: float
    perimeter: float
    area: float
    apothem: float

    @property
    def interior_angle_sum(self) -> float:
        """Sum of all interior angles in degrees."""
        return interior_angle_sum(self.side_count)

    @property
    def circumradius(self) -> float:
        """Distance from the centre to any vertex."""
        return circumradius(self.side_count, self.side_length)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary.

        Returns:
            Dictionary of every property including the derived ones
        """
        return {
            "side_count": self.side_count,
            "side_length": self.side_length,
            "interior_angle": self.interior_angle,
            "exterior_angle": self.exterior_angle,
            "central_angle": self.central_angle,
            "interior_angle_sum": self.interior_angle_sum,
            "perimeter": self.perimeter,
            "area": self.area,
            "apothem": self.apothem,
            "circumradius": self.circumradius,
        }
