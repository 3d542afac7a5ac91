"""Core algorithms for polylab.

This module contains:

- Geometry operations (properties, vertex rings, side-length solving)
- Rendering onto raster surfaces (filled polygons, labelled vertices)
- Scenes that combine both into complete redraw passes

Geometry functions are pure. Rendering mutates only the surface passed in.

Key functions:
- compute_properties: Angles, perimeter, area and apothem of a regular polygon
- vertex_ring: Closed ring of vertex coordinates
- solve_side_length: Side length from a known perimeter, area or apothem
- clear_surface, draw_filled_polygon, draw_labeled_vertex: Drawing primitives

Key classes:
- Surface: RGBA raster drawing surface
- PolygonRenderer: Styled drawing operations
- SceneRenderer: Introduction, explorer, calculator and art scenes
"""

from polylab.core.geometry import (
    angles_match,
    circumradius,
    compute_properties,
    interior_angle_sum,
    polygon_name,
    properties_of,
    side_length_from_apothem,
    side_length_from_area,
    side_length_from_perimeter,
    solve_side_length,
    vertex_ring,
)
from polylab.core.renderer import (
    PolygonRenderer,
    Surface,
    clear_surface,
    draw_filled_polygon,
    draw_labeled_vertex,
    parse_color,
)
from polylab.core.scenes import SceneRenderer, randomize

__all__ = [
    # Renderer classes
    "PolygonRenderer",
    "SceneRenderer",
    "Surface",
    # Geometry functions
    "angles_match",
    "circumradius",
    "compute_properties",
    "interior_angle_sum",
    "polygon_name",
    "properties_of",
    "side_length_from_apothem",
    "side_length_from_area",
    "side_length_from_perimeter",
    "solve_side_length",
    "vertex_ring",
    # Drawing functions
    "clear_surface",
    "draw_filled_polygon",
    "draw_labeled_vertex",
    "parse_color",
    "randomize",
]
