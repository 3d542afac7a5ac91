"""Redraw passes built on the geometry and renderer.

Each scene clears the surface and then draws one complete picture. Scenes
are plain functions of their inputs; callers own any state such as the art
composition and decide when to redraw.
"""

import logging
import random

from polylab.config import ArtConfig, CanvasConfig, RenderConfig
from polylab.core.geometry import (
    circumradius,
    compute_properties,
    solve_side_length,
    vertex_ring,
)
from polylab.core.renderer import PolygonRenderer, Surface
from polylab.domain import ArtComposition, ArtPolygon, KnownQuantity, PolygonProperties
from polylab.exceptions import InvalidPolygonError

logger = logging.getLogger(__name__)


class SceneRenderer:
    """Draws the standard polygon scenes onto a surface.

    Args:
        render: Styling for polygons and vertex annotations
        canvas: Radius and scale used to size polygons
        art: Sizing used for art compositions
    """

    def __init__(
        self,
        render: RenderConfig | None = None,
        canvas: CanvasConfig | None = None,
        art: ArtConfig | None = None,
    ) -> None:
        self.renderer = PolygonRenderer(render)
        self.canvas = canvas or CanvasConfig()
        self.art = art or ArtConfig()

    def render_intro(self, surface: Surface, sides: int) -> PolygonProperties:
        """Draw a fixed-size polygon with labelled vertices and its centre.

        Raises:
            InvalidPolygonError: If sides is below 3
        """
        props = _require_properties(sides, 1.0)
        style = self.renderer.config
        center = surface.center

        self.renderer.clear(surface)
        ring = vertex_ring(sides, center, self.canvas.polygon_radius)
        self.renderer.draw_filled_polygon(surface, ring, style.fill_color, style.stroke_color, 2)
        self.renderer.draw_vertex_labels(surface, ring)
        self.renderer.draw_center_marker(surface, center, radius=5, label="Center")

        logger.debug("Rendered intro scene: sides=%d", sides)
        return props

    def render_explorer(self, surface: Surface, sides: int, side_length: float) -> PolygonProperties:
        """Draw a polygon scaled by its side length, with its centre marked."""
        props = _require_properties(sides, side_length)
        style = self.renderer.config
        center = surface.center

        self.renderer.clear(surface)
        radius = circumradius(sides, side_length) * self.canvas.unit_scale
        ring = vertex_ring(sides, center, radius)
        self.renderer.draw_filled_polygon(surface, ring, style.fill_color, style.stroke_color, 3)
        self.renderer.draw_vertex_labels(surface, ring)
        self.renderer.draw_center_marker(surface, center, radius=6)

        logger.debug("Rendered explorer scene: sides=%d side_length=%.3f", sides, side_length)
        return props

    def render_calculator(self, surface: Surface, sides: int, known: KnownQuantity) -> PolygonProperties:
        """Solve the side length from a known quantity and draw the result."""
        side_length = solve_side_length(sides, known)
        props = _require_properties(sides, side_length)
        style = self.renderer.config

        self.renderer.clear(surface)
        radius = circumradius(sides, side_length) * self.canvas.unit_scale
        ring = vertex_ring(sides, surface.center, radius)
        self.renderer.draw_filled_polygon(surface, ring, style.fill_color, style.stroke_color, 3)
        self.renderer.draw_vertex_labels(surface, ring)

        logger.debug("Rendered calculator scene: sides=%d known=%r", sides, known)
        return props

    def render_art(self, surface: Surface, composition: ArtComposition) -> None:
        """Draw every polygon of a composition around the surface centre, in order."""
        self.renderer.clear(surface)
        center = surface.center
        for polygon in composition:
            radius = polygon.size * self.art.size_scale
            ring = vertex_ring(polygon.sides, center, radius, rotation=polygon.rotation)
            self.renderer.draw_filled_polygon(
                surface,
                ring,
                fill=polygon.color + self.art.fill_alpha,
                stroke=polygon.color,
                line_width=2,
            )

        logger.debug("Rendered art scene: polygons=%d", len(composition))


def randomize(
    composition: ArtComposition,
    rng: random.Random | None = None,
    config: ArtConfig | None = None,
) -> None:
    """Give every polygon random sides, size and rotation, keeping its colour.

    Args:
        composition: Composition to modify in place
        rng: Random source; pass a seeded instance for repeatable art
        config: Ranges for sides, size and rotation
    """
    rng = rng or random.Random()
    config = config or ArtConfig()
    rotation_slots = 360 // config.rotation_step

    for index, polygon in enumerate(composition.polygons):
        composition.polygons[index] = ArtPolygon(
            sides=rng.randint(config.min_sides, config.max_sides),
            size=rng.uniform(config.min_size, config.max_size),
            rotation=float(rng.randrange(rotation_slots) * config.rotation_step),
            color=polygon.color,
        )


def _require_properties(sides: int, side_length: float) -> PolygonProperties:
    props = compute_properties(sides, side_length)
    if props is None:
        raise InvalidPolygonError(sides)
    return props
