"""Geometric operations for regular polygons.

This module provides the mathematical core of polylab:
- Scalar properties (angles, perimeter, area, apothem)
- Vertex ring generation
- Solving the side length from another known quantity
- Naming helpers used when presenting results

All functions are pure and stateless.
"""

import math

from polylab.domain import (
    MIN_SIDES,
    Apothem,
    Area,
    KnownQuantity,
    Perimeter,
    Point,
    PolygonProperties,
    PolygonSpec,
    SideLength,
)
from polylab.domain.polygon import circumradius, interior_angle_sum  # noqa: F401  (re-exported)
from polylab.exceptions import InvalidPolygonError

# Every ring starts straight up from the centre (screen coordinates, y down).
START_ANGLE = -math.pi / 2

ANGLE_TOLERANCE = 0.1

_POLYGON_NAMES = {
    3: "Triangle",
    4: "Quadrilateral",
    5: "Pentagon",
    6: "Hexagon",
    7: "Heptagon",
    8: "Octagon",
    9: "Nonagon",
    10: "Decagon",
}


def compute_properties(side_count: int, side_length: float = 1.0) -> PolygonProperties | None:
    """Compute the scalar properties of a regular polygon.

    Args:
        side_count: Number of sides
        side_length: Length of each side

    Returns:
        The polygon's properties, or None when side_count is below 3

    Examples:
        >>> props = compute_properties(4, 1.0)
        >>> props.interior_angle, round(props.area, 9)
        (90.0, 1.0)
        >>> compute_properties(2) is None
        True
    """
    if side_count < MIN_SIDES:
        return None

    interior_angle = (side_count - 2) * 180 / side_count
    exterior_angle = 360 / side_count
    central_angle = 360 / side_count
    perimeter = side_count * side_length
    apothem = side_length / (2 * math.tan(math.pi / side_count))
    area = 0.5 * perimeter * apothem

    return PolygonProperties(
        side_count=side_count,
        side_length=side_length,
        interior_angle=interior_angle,
        exterior_angle=exterior_angle,
        central_angle=central_angle,
        perimeter=perimeter,
        area=area,
        apothem=apothem,
    )


def properties_of(spec: PolygonSpec) -> PolygonProperties:
    """Compute properties for an already validated spec."""
    props = compute_properties(spec.side_count, spec.side_length)
    if props is None:
        raise InvalidPolygonError(spec.side_count)
    return props


def vertex_ring(
    side_count: int,
    center: Point,
    radius: float,
    rotation: float = 0.0,
) -> list[Point]:
    """Generate the closed ring of vertices of a regular polygon.

    The first vertex sits directly above the centre and the ring advances
    clockwise on screen in steps of 360/side_count degrees. The ring has
    side_count + 1 points; the last one is the first point repeated exactly.

    Args:
        side_count: Number of sides
        center: Centre of the circumscribed circle
        radius: Circumradius
        rotation: Extra rotation in degrees applied to every vertex

    Returns:
        List of side_count + 1 points forming a closed drawing path
    """
    offset = START_ANGLE + math.radians(rotation)
    points = []
    for i in range(side_count):
        angle = (i * 2 * math.pi) / side_count + offset
        points.append(
            Point(
                center.x + radius * math.cos(angle),
                center.y + radius * math.sin(angle),
            )
        )
    points.append(points[0])
    return points


def side_length_from_perimeter(side_count: int, perimeter: float) -> float:
    return perimeter / side_count


def side_length_from_apothem(side_count: int, apothem: float) -> float:
    return 2 * apothem * math.tan(math.pi / side_count)


def side_length_from_area(side_count: int, area: float) -> float:
    """Solve the side length of a regular polygon with the given area.

    Substituting L = 2 * a * tan(pi / n) into area = n * L * a / 2 gives
    area = n * a**2 * tan(pi / n), so the apothem has a closed form. The
    often quoted a = sqrt(2 * area / (n * tan(pi / n))) overstates the side by
    a factor of sqrt(2) and is not used.
    """
    tan_term = math.tan(math.pi / side_count)
    apothem = math.sqrt(area / (side_count * tan_term))
    return 2 * apothem * tan_term


def solve_side_length(side_count: int, known: KnownQuantity) -> float:
    """Solve the side length from one known quantity.

    Args:
        side_count: Number of sides
        known: The known quantity and its value

    Returns:
        Side length of the regular polygon

    Raises:
        TypeError: If known is not a KnownQuantity variant
    """
    match known:
        case SideLength(value):
            return value
        case Perimeter(value):
            return side_length_from_perimeter(side_count, value)
        case Area(value):
            return side_length_from_area(side_count, value)
        case Apothem(value):
            return side_length_from_apothem(side_count, value)
        case _:
            raise TypeError(f"Unsupported known quantity: {known!r}")


def polygon_name(side_count: int) -> str:
    """Common English name of a polygon with the given number of sides."""
    return _POLYGON_NAMES.get(side_count, f"{side_count}-sided polygon")


def angles_match(expected: float, guess: float, tolerance: float = ANGLE_TOLERANCE) -> bool:
    """Check a guessed angle against the expected one."""
    return abs(guess - expected) < tolerance
