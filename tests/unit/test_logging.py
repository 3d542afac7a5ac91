"""Unit tests for logging helpers."""

import logging
from pathlib import Path

from polylab.utils.logging import (
    CONSOLE_HANDLER_NAME,
    RenderLogger,
    RenderStats,
    configure_logging,
)


class TestRenderStats:
    """Tests for RenderStats."""

    def test_duration_without_times(self) -> None:
        """Test duration is zero until both times are known."""
        assert RenderStats().duration_seconds == 0.0

    def test_duration(self) -> None:
        """Test duration from start and end times."""
        assert RenderStats(start_time=10.0, end_time=12.5).duration_seconds == 2.5


class TestRenderLogger:
    """Tests for RenderLogger."""

    def test_counts(self, tmp_path: Path) -> None:
        """Test counters follow logged events."""
        render_logger = RenderLogger(configure_logging(log_file=tmp_path / "log.txt", quiet=True))

        render_logger.log_scene_rendered("intro", 6, 1.25)
        render_logger.log_scene_rendered("art", 3, 2.5)
        render_logger.log_image_saved(tmp_path / "a.png", 10, 10)
        render_logger.log_error("a.png", ValueError("boom"))

        stats = render_logger.finish()
        assert stats.rendered_count == 2
        assert stats.saved_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("a.png", "boom")]
        assert stats.duration_seconds >= 0.0

    def test_configure_twice_does_not_stack_handlers(self) -> None:
        """Test repeated configuration replaces the console handler."""
        configure_logging()
        configure_logging()
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(CONSOLE_HANDLER_NAME) == 1
        configure_logging(quiet=True)
