"""Logging utilities for Polylab."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

FILE_HANDLER_NAME = "polylab.file"
CONSOLE_HANDLER_NAME = "polylab.console"


@dataclass
class RenderStats:
    """Statistics from a rendering session."""

    rendered_count: int = 0
    saved_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate session duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polylab")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking rendered scenes and saved images."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats(start_time=time.perf_counter())

    def log_scene_rendered(self, scene: str, sides: int, duration_ms: float) -> None:
        """Log a completed redraw."""
        self._logger.info(
            "Scene rendered",
            scene=scene,
            sides=sides,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1

    def log_image_saved(self, path: Path, width: int, height: int) -> None:
        """Log a saved image."""
        self._logger.info("Image saved", path=str(path), width=width, height=height)
        self._stats.saved_count += 1

    def log_error(self, context: str, error: Exception) -> None:
        """Log a failure."""
        self._logger.error(
            "Rendering failed",
            context=context,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((context, str(error)))

    def finish(self) -> RenderStats:
        """Stamp the end time and return the final statistics."""
        self._stats.end_time = time.perf_counter()
        return self._stats

    @property
    def stats(self) -> RenderStats:
        """Get current statistics."""
        return self._stats
