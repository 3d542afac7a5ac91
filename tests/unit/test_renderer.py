"""Unit tests for the polygon renderer."""

import pytest

from polylab.config import RenderConfig
from polylab.core.geometry import vertex_ring
from polylab.core.renderer import (
    PolygonRenderer,
    Surface,
    clear_surface,
    draw_filled_polygon,
    draw_labeled_vertex,
    parse_color,
)
from polylab.domain import Point
from polylab.exceptions import ColorParseError

FILL = "rgba(100, 150, 255, 0.3)"
STROKE = "#001f5c"
STROKE_RGBA = (0, 31, 92, 255)


def _alpha_bbox(surface: Surface, box: tuple[int, int, int, int]):
    """Bounding box of non-transparent pixels inside box, or None."""
    return surface.image.crop(box).getchannel("A").getbbox()


class TestParseColor:
    """Tests for parse_color."""

    def test_hex(self) -> None:
        """Test #rrggbb colours are opaque."""
        assert parse_color("#ff4444") == (255, 68, 68, 255)

    def test_hex_with_alpha(self) -> None:
        """Test #rrggbbaa colours as used by art fills."""
        assert parse_color("#ff638466") == (255, 99, 132, 102)

    def test_named(self) -> None:
        """Test colour names."""
        assert parse_color("black") == (0, 0, 0, 255)

    def test_css_rgba_alpha_fraction(self) -> None:
        """Test rgba() with alpha between 0 and 1."""
        assert parse_color("rgba(10, 20, 30, 1)") == (10, 20, 30, 255)
        assert parse_color("rgba(10,20,30,0)") == (10, 20, 30, 0)
        assert parse_color(FILL)[:3] == (100, 150, 255)
        assert parse_color(FILL)[3] in (76, 77)

    def test_tuples(self) -> None:
        """Test tuples pass through."""
        assert parse_color((1, 2, 3)) == (1, 2, 3, 255)
        assert parse_color((1, 2, 3, 4)) == (1, 2, 3, 4)

    @pytest.mark.parametrize("color", ["not-a-colour", "rgba(300, 0, 0, 0.5)", "rgba(0, 0, 0, 2)"])
    def test_invalid(self, color: str) -> None:
        """Test invalid colours raise ColorParseError."""
        with pytest.raises(ColorParseError) as exc_info:
            parse_color(color)
        assert exc_info.value.color == color

    def test_wrong_channel_count(self) -> None:
        """Test tuples of the wrong length."""
        with pytest.raises(ColorParseError):
            parse_color((1, 2))


class TestSurface:
    """Tests for Surface."""

    def test_new_surface_is_blank(self) -> None:
        """Test a fresh surface is fully transparent."""
        surface = Surface(300, 200)
        assert surface.size == (300, 200)
        assert surface.width == 300
        assert surface.height == 200
        assert surface.is_blank()

    def test_center(self) -> None:
        """Test the surface centre."""
        assert Surface(300, 200).center == Point(150, 100)


class TestDrawFilledPolygon:
    """Tests for drawing filled polygons."""

    def test_fills_interior(self) -> None:
        """Test the centre of a triangle is filled."""
        surface = Surface(300, 300)
        ring = vertex_ring(3, Point(150, 150), 100)
        draw_filled_polygon(surface, ring, FILL, STROKE)

        red, green, blue, alpha = surface.pixel(150, 150)
        assert alpha > 0
        assert blue > red

    def test_outside_untouched(self) -> None:
        """Test pixels outside the polygon stay transparent."""
        surface = Surface(300, 300)
        draw_filled_polygon(surface, vertex_ring(3, Point(150, 150), 100), FILL, STROKE)
        assert surface.pixel(5, 5) == (0, 0, 0, 0)
        assert surface.pixel(295, 295) == (0, 0, 0, 0)

    def test_strokes_outline(self) -> None:
        """Test the bottom edge of the triangle carries the stroke colour."""
        surface = Surface(300, 300)
        draw_filled_polygon(surface, vertex_ring(3, Point(150, 150), 100), FILL, STROKE, 2)
        # Bottom edge runs horizontally at y = 200
        column = [surface.pixel(150, y) for y in range(197, 204)]
        assert STROKE_RGBA in column

    def test_open_path_is_closed(self) -> None:
        """Test a ring without its closing point still fills."""
        surface = Surface(100, 100)
        square = [Point(10, 10), Point(90, 10), Point(90, 90), Point(10, 90)]
        draw_filled_polygon(surface, square, "#00ff00", "#000000", 1)
        assert surface.pixel(50, 50) == (0, 255, 0, 255)

    def test_single_point_draws_nothing(self) -> None:
        """Test a one-point ring is accepted and leaves the surface blank."""
        surface = Surface(50, 50)
        draw_filled_polygon(surface, [Point(10, 10)], "#ff0000", "#000000")
        assert surface.is_blank()

    def test_two_points_stroke_without_fill(self) -> None:
        """Test a two-point ring draws only the segment between them."""
        surface = Surface(100, 100)
        draw_filled_polygon(surface, [Point(10, 50), Point(90, 50)], "#00ff00", "#000000", 1)
        assert surface.pixel(50, 50) == (0, 0, 0, 255)
        assert surface.pixel(50, 40) == (0, 0, 0, 0)
        colours = {colour for _, colour in surface.image.getcolors()}
        assert (0, 255, 0, 255) not in colours

    def test_translucent_fills_blend(self) -> None:
        """Test overlapping translucent fills accumulate alpha."""
        surface = Surface(100, 100)
        ring = vertex_ring(4, Point(50, 50), 40)
        draw_filled_polygon(surface, ring, "#ff000066", "#ff0000")
        once = surface.pixel(50, 50)[3]
        draw_filled_polygon(surface, ring, "#ff000066", "#ff0000")
        assert surface.pixel(50, 50)[3] > once


class TestClearSurface:
    """Tests for clearing."""

    def test_clear_after_draw_restores_empty_state(self) -> None:
        """Test draw then clear leaves the surface as it was before drawing."""
        surface = Surface(300, 300)
        pristine = surface.image.tobytes()

        draw_filled_polygon(surface, vertex_ring(3, Point(150, 150), 100), FILL, STROKE)
        assert not surface.is_blank()

        clear_surface(surface)
        assert surface.is_blank()
        assert surface.image.tobytes() == pristine

    def test_clear_keeps_same_image(self) -> None:
        """Test clearing mutates the surface in place."""
        surface = Surface(50, 50)
        image = surface.image
        clear_surface(surface)
        assert surface.image is image


class TestVertexAnnotations:
    """Tests for vertex discs, labels and centre markers."""

    def test_labeled_vertex_disc(self) -> None:
        """Test the vertex disc uses the vertex colour."""
        surface = Surface(200, 200)
        draw_labeled_vertex(surface, Point(50, 50), "V1")
        assert surface.pixel(50, 50) == (255, 68, 68, 255)

    def test_labeled_vertex_text(self) -> None:
        """Test the label is drawn to the right of the vertex."""
        surface = Surface(200, 200)
        draw_labeled_vertex(surface, Point(50, 50), "V1")
        assert _alpha_bbox(surface, (58, 30, 120, 62)) is not None

    def test_custom_vertex_style(self) -> None:
        """Test vertex colour and radius come from the config."""
        renderer = PolygonRenderer(RenderConfig(vertex_color="#00ff00", vertex_radius=8))
        surface = Surface(100, 100)
        renderer.draw_labeled_vertex(surface, Point(30, 30), "")
        assert surface.pixel(30, 30) == (0, 255, 0, 255)
        assert surface.pixel(36, 30) == (0, 255, 0, 255)

    def test_vertex_labels_mark_every_vertex(self) -> None:
        """Test each distinct vertex gets a disc."""
        renderer = PolygonRenderer()
        surface = Surface(300, 300)
        ring = vertex_ring(5, Point(150, 150), 100)
        renderer.draw_vertex_labels(surface, ring)
        for point in ring[:-1]:
            assert surface.pixel(round(point.x), round(point.y)) == (255, 68, 68, 255)

    def test_center_marker(self) -> None:
        """Test the centre marker is a black disc with an optional label."""
        renderer = PolygonRenderer()
        surface = Surface(200, 200)
        renderer.draw_center_marker(surface, Point(100, 100), label="Center")
        assert surface.pixel(100, 100) == (0, 0, 0, 255)
        assert _alpha_bbox(surface, (108, 70, 200, 92)) is not None

    def test_center_marker_without_label(self) -> None:
        """Test no text is drawn without a label."""
        renderer = PolygonRenderer()
        surface = Surface(200, 200)
        renderer.draw_center_marker(surface, Point(100, 100), radius=6)
        assert _alpha_bbox(surface, (108, 70, 200, 92)) is None
