"""Domain models for polylab.

This module contains the value types describing regular polygons, the
quantities a side length can be solved from, and art compositions. Models
are immutable where possible (frozen dataclasses) and independent of the
drawing backend.

Key classes:
- Point: A 2D point
- PolygonSpec: Side count and side length of a regular polygon
- PolygonProperties: Derived angles, perimeter, area and apothem
- SideLength, Perimeter, Area, Apothem: Known-quantity variants
- ArtPolygon, ArtComposition: Polygon art
"""

from polylab.domain.art import DEFAULT_PALETTE, ArtComposition, ArtPolygon
from polylab.domain.polygon import MIN_SIDES, Point, PolygonProperties, PolygonSpec
from polylab.domain.quantity import (
    Apothem,
    Area,
    KnownQuantity,
    Perimeter,
    QuantityKind,
    SideLength,
    known_quantity,
)

__all__: list[str] = [
    # Constants
    "DEFAULT_PALETTE",
    "MIN_SIDES",
    # Enums
    "QuantityKind",
    # Core types
    "Point",
    "PolygonSpec",
    "PolygonProperties",
    # Known quantities
    "Apothem",
    "Area",
    "KnownQuantity",
    "Perimeter",
    "SideLength",
    "known_quantity",
    # Art
    "ArtPolygon",
    "ArtComposition",
]
