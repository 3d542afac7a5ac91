"""Raster rendering of polygons and vertex annotations.

This module provides the drawing half of polylab:
- Surface: a transparent RGBA raster backed by a Pillow image
- PolygonRenderer: draws filled polygons, labelled vertices and centre markers
- parse_color: colour strings as used by web canvases, converted for Pillow

Every drawing operation composites onto the surface, so translucent fills
blend with whatever was drawn before. Callers clear the surface before each
redraw.
"""

import logging
import re
from collections.abc import Sequence

from PIL import Image, ImageColor, ImageDraw, ImageFont

from polylab.config import RenderConfig
from polylab.domain import Point
from polylab.exceptions import ColorParseError

logger = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]
TRANSPARENT: RGBA = (0, 0, 0, 0)

_RGBA_FUNC = re.compile(
    r"^rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*([0-9]*\.?[0-9]+)\s*\)$",
    re.IGNORECASE,
)

_FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")


def parse_color(color: str | Sequence[int]) -> RGBA:
    """Convert a colour to an RGBA tuple.

    Accepts everything Pillow's ImageColor understands (names, "#rgb",
    "#rrggbb", "#rrggbbaa", "rgb(...)", "hsl(...)") plus CSS style
    "rgba(r, g, b, a)" with alpha between 0 and 1. Tuples of 3 or 4 ints are
    passed through.

    Args:
        color: Colour string or RGB(A) tuple

    Returns:
        (red, green, blue, alpha) with every channel in 0..255

    Raises:
        ColorParseError: If the colour cannot be interpreted
    """
    if not isinstance(color, str):
        channels = tuple(int(c) for c in color)
        if len(channels) == 3:
            return (*channels, 255)
        if len(channels) == 4:
            return channels  # type: ignore[return-value]
        raise ColorParseError(str(color), "expected 3 or 4 channels")

    match = _RGBA_FUNC.match(color.strip())
    if match:
        red, green, blue = (int(match.group(i)) for i in range(1, 4))
        alpha = float(match.group(4))
        if max(red, green, blue) > 255 or alpha > 1.0:
            raise ColorParseError(color, "channel out of range")
        return (red, green, blue, round(alpha * 255))

    try:
        return ImageColor.getcolor(color, "RGBA")  # type: ignore[return-value]
    except ValueError as e:
        raise ColorParseError(color, str(e)) from e


def load_label_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a bold sans-serif font for labels, falling back to Pillow's default."""
    for name in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("No bold TrueType font found, using Pillow default at size %d", size)
    return ImageFont.load_default(size=size)


class Surface:
    """A transparent RGBA drawing surface.

    Attributes:
        image: Backing Pillow image
    """

    def __init__(self, width: int, height: int) -> None:
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def center(self) -> Point:
        """Centre of the surface in pixel coordinates."""
        return Point(self.width / 2, self.height / 2)

    def is_blank(self) -> bool:
        """True if every pixel is fully transparent black."""
        return all(high == 0 for _, high in self.image.getextrema())

    def pixel(self, x: int, y: int) -> RGBA:
        """Read one pixel."""
        return self.image.getpixel((x, y))  # type: ignore[return-value]

    def composite(self, layer: Image.Image) -> None:
        """Alpha-composite a same-sized layer over the surface in place."""
        self.image.alpha_composite(layer)

    def new_layer(self) -> tuple[Image.Image, ImageDraw.ImageDraw]:
        """Create a transparent layer the size of the surface and a drawer for it."""
        layer = Image.new("RGBA", self.size, TRANSPARENT)
        return layer, ImageDraw.Draw(layer)


class PolygonRenderer:
    """Draws polygons and annotations onto a Surface.

    The renderer holds styling only; it keeps no drawing state between calls.

    Example:
        renderer = PolygonRenderer()
        surface = Surface(300, 300)
        ring = vertex_ring(3, surface.center, 100)
        renderer.clear(surface)
        renderer.draw_filled_polygon(surface, ring, "rgba(100, 150, 255, 0.3)", "#001f5c")
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self._font: ImageFont.FreeTypeFont | ImageFont.ImageFont | None = None

    @property
    def font(self) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        if self._font is None:
            self._font = load_label_font(self.config.font_size)
        return self._font

    def clear(self, surface: Surface) -> None:
        """Reset every pixel of the surface to transparent."""
        surface.image.paste(TRANSPARENT, (0, 0, surface.width, surface.height))

    def draw_filled_polygon(
        self,
        surface: Surface,
        ring: Sequence[Point],
        fill: str | Sequence[int],
        stroke: str | Sequence[int],
        line_width: int = 2,
    ) -> None:
        """Fill and outline the path through ``ring``.

        The path visits every point in order and is closed back to the first
        point. The fill is painted first, then the outline on top. A path with
        fewer than three distinct points encloses no area and is only stroked;
        a single point draws nothing.

        Args:
            surface: Surface to draw on
            ring: Non-empty sequence of points
            fill: Fill colour
            stroke: Outline colour
            line_width: Outline width in pixels
        """
        path = [p.to_tuple() for p in ring]
        if path[-1] != path[0]:
            path.append(path[0])
        if len(path) < 2:
            logger.debug("Skipping path with a single point %s", path[0])
            return

        layer, draw = surface.new_layer()
        if len(path) > 3:
            draw.polygon(path, fill=parse_color(fill))
        draw.line(path, fill=parse_color(stroke), width=line_width, joint="curve")
        surface.composite(layer)

    def draw_labeled_vertex(self, surface: Surface, point: Point, label: str) -> None:
        """Mark a vertex with a small disc and write its label beside it."""
        self._draw_disc(surface, point, self.config.vertex_radius, self.config.vertex_color)
        dx, dy = self.config.label_offset
        self._draw_text(surface, point.offset(dx, dy), label, self.config.label_color)

    def draw_vertex_labels(self, surface: Surface, ring: Sequence[Point], prefix: str = "V") -> None:
        """Label every distinct vertex of a closed ring as V1, V2, ..."""
        for index, point in enumerate(ring[:-1], start=1):
            self.draw_labeled_vertex(surface, point, f"{prefix}{index}")

    def draw_center_marker(
        self,
        surface: Surface,
        center: Point,
        radius: float = 5.0,
        label: str | None = None,
    ) -> None:
        """Mark the polygon centre with a black disc and an optional label."""
        self._draw_disc(surface, center, radius, self.config.label_color)
        if label:
            dx, dy = self.config.center_label_offset
            self._draw_text(surface, center.offset(dx, dy), label, self.config.label_color)

    def _draw_disc(self, surface: Surface, center: Point, radius: float, color: str) -> None:
        layer, draw = surface.new_layer()
        draw.ellipse(
            (center.x - radius, center.y - radius, center.x + radius, center.y + radius),
            fill=parse_color(color),
        )
        surface.composite(layer)

    def _draw_text(self, surface: Surface, origin: Point, text: str, color: str) -> None:
        if not text:
            return
        # Anchor on the baseline so offsets match canvas fillText placement
        anchor = "ls" if isinstance(self.font, ImageFont.FreeTypeFont) else None
        layer, draw = surface.new_layer()
        draw.text(origin.to_tuple(), text, fill=parse_color(color), font=self.font, anchor=anchor)
        surface.composite(layer)


_default_renderer = PolygonRenderer()


def clear_surface(surface: Surface) -> None:
    """Reset the whole surface to transparent. Call before every redraw."""
    _default_renderer.clear(surface)


def draw_filled_polygon(
    surface: Surface,
    ring: Sequence[Point],
    fill: str | Sequence[int],
    stroke: str | Sequence[int],
    line_width: int = 2,
) -> None:
    """Fill and outline a vertex ring using default styling."""
    _default_renderer.draw_filled_polygon(surface, ring, fill, stroke, line_width)


def draw_labeled_vertex(surface: Surface, point: Point, label: str) -> None:
    """Draw a vertex disc and label using default styling."""
    _default_renderer.draw_labeled_vertex(surface, point, label)
