"""Art composition models.

An art composition is an ordered, caller-owned collection of regular polygons
sharing one centre. Polygons are drawn in order, so later entries paint over
earlier ones.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from polylab.domain.polygon import MIN_SIDES
from polylab.exceptions import InvalidPolygonError

DEFAULT_PALETTE: tuple[str, ...] = ("#ff6384", "#36a2eb", "#4bc0c0", "#ffcd56", "#9966ff")


@dataclass(frozen=True, slots=True)
class ArtPolygon:
    """One polygon of an art composition.

    Attributes:
        sides: Number of sides
        size: Relative size; multiplied by the art size scale to get a radius
        rotation: Rotation in degrees added to every vertex angle
        color: Base colour as "#rrggbb"
    """

    sides: int = 6
    size: float = 1.0
    rotation: float = 0.0
    color: str = DEFAULT_PALETTE[0]

    def __post_init__(self) -> None:
        if self.sides < MIN_SIDES:
            raise InvalidPolygonError(self.sides)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "sides": self.sides,
            "size": self.size,
            "rotation": self.rotation,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArtPolygon":
        """Deserialize from dictionary."""
        return cls(
            sides=int(data["sides"]),
            size=float(data["size"]),
            rotation=float(data["rotation"]),
            color=str(data["color"]),
        )


@dataclass
class ArtComposition:
    """Ordered collection of art polygons.

    Attributes:
        polygons: Polygons in drawing order
        palette: Colours handed out to newly added polygons by index
    """

    polygons: list[ArtPolygon] = field(default_factory=list)
    palette: tuple[str, ...] = DEFAULT_PALETTE

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self):
        return iter(self.polygons)

    def resize(self, count: int, default_sides: int = 6) -> None:
        """Grow or shrink the composition to exactly ``count`` polygons.

        Existing polygons keep their settings. New polygons get the default
        side count, size 1.0, no rotation and the palette colour for their
        index.
        """
        while len(self.polygons) < count:
            index = len(self.polygons)
            self.polygons.append(
                ArtPolygon(
                    sides=default_sides,
                    color=self.palette[index % len(self.palette)],
                )
            )
        del self.polygons[max(count, 0):]

    def update(self, index: int, **changes: Any) -> ArtPolygon:
        """Replace the polygon at ``index`` with a modified copy.

        Returns:
            The new polygon
        """
        polygon = replace(self.polygons[index], **changes)
        self.polygons[index] = polygon
        return polygon

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "polygons": [p.to_dict() for p in self.polygons],
            "palette": list(self.palette),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArtComposition":
        """Deserialize from dictionary."""
        return cls(
            polygons=[ArtPolygon.from_dict(p) for p in data["polygons"]],
            palette=tuple(data.get("palette", DEFAULT_PALETTE)),
        )
