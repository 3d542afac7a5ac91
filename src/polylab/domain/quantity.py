"""Known quantities from which a side length can be solved.

Each case of the tagged variant is its own frozen dataclass carrying the
known value, so callers dispatch with ``match`` instead of comparing strings.
"""

from dataclasses import dataclass
from enum import Enum


class QuantityKind(str, Enum):
    """Name of a quantity a caller may know about a regular polygon."""

    SIDE = "side"
    PERIMETER = "perimeter"
    AREA = "area"
    APOTHEM = "apothem"


@dataclass(frozen=True, slots=True)
class SideLength:
    """Side length is known directly."""

    value: float


@dataclass(frozen=True, slots=True)
class Perimeter:
    """Perimeter is known."""

    value: float


@dataclass(frozen=True, slots=True)
class Area:
    """Enclosed area is known."""

    value: float


@dataclass(frozen=True, slots=True)
class Apothem:
    """Apothem is known."""

    value: float


KnownQuantity = SideLength | Perimeter | Area | Apothem

_BY_KIND: dict[QuantityKind, type[KnownQuantity]] = {
    QuantityKind.SIDE: SideLength,
    QuantityKind.PERIMETER: Perimeter,
    QuantityKind.AREA: Area,
    QuantityKind.APOTHEM: Apothem,
}


def known_quantity(kind: QuantityKind | str, value: float) -> KnownQuantity:
    """Build a known quantity from its kind tag.

    Args:
        kind: Quantity kind or its string value ("side", "perimeter", ...)
        value: The known value

    Returns:
        The matching KnownQuantity variant

    Raises:
        ValueError: If kind is not a recognised quantity name
    """
    return _BY_KIND[QuantityKind(kind)](value)
