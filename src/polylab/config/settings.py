"""Configuration settings for Polylab."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from polylab.domain.art import DEFAULT_PALETTE


class RenderConfig(BaseModel):
    """Styling used when drawing polygons and vertex annotations."""

    vertex_radius: float = Field(
        default=5.0,
        ge=1.0,
        le=20.0,
        description="Radius of the disc drawn on each vertex (pixels)",
    )
    vertex_color: str = Field(
        default="#ff4444",
        description="Fill colour of vertex discs",
    )
    label_color: str = Field(
        default="#000000",
        description="Colour of vertex labels",
    )
    label_offset: tuple[int, int] = Field(
        default=(10, 5),
        description="Pixel offset of a vertex label from its vertex",
    )
    center_label_offset: tuple[int, int] = Field(
        default=(10, -10),
        description="Pixel offset of the centre marker label",
    )
    font_size: int = Field(
        default=14,
        ge=6,
        le=72,
        description="Label font size (pixels)",
    )
    fill_color: str = Field(
        default="rgba(100, 150, 255, 0.3)",
        description="Default polygon fill colour",
    )
    stroke_color: str = Field(
        default="#001f5c",
        description="Default polygon outline colour",
    )


class CanvasConfig(BaseModel):
    """Canvas dimensions and scene scaling."""

    width: int = Field(
        default=400,
        ge=50,
        le=4096,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=400,
        ge=50,
        le=4096,
        description="Canvas height in pixels",
    )
    polygon_radius: float = Field(
        default=150.0,
        gt=0.0,
        description="Circumradius used by the introduction scene (pixels)",
    )
    unit_scale: float = Field(
        default=150.0,
        gt=0.0,
        description="Pixels per unit of side length in explorer/calculator scenes",
    )


class ArtConfig(BaseModel):
    """Settings for polygon art compositions."""

    palette: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        min_length=1,
        description="Colours assigned to new polygons in order",
    )
    default_sides: int = Field(default=6, ge=3, le=12)
    min_sides: int = Field(default=3, ge=3)
    max_sides: int = Field(default=12, ge=3)
    min_size: float = Field(default=0.3, gt=0.0)
    max_size: float = Field(default=2.0, gt=0.0)
    rotation_step: int = Field(
        default=15,
        ge=1,
        le=360,
        description="Random rotations are multiples of this many degrees",
    )
    size_scale: float = Field(
        default=100.0,
        gt=0.0,
        description="Pixels of circumradius per unit of polygon size",
    )
    fill_alpha: str = Field(
        default="66",
        pattern=r"^[0-9a-fA-F]{2}$",
        description="Hex alpha appended to a polygon colour for its fill",
    )


class LogLevel(str, Enum):
    """Log levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class PolylabSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    art: ArtConfig = Field(default_factory=ArtConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolylabSettings:
    """Get default application settings."""
    return PolylabSettings()
