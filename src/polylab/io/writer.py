"""Image writer for saving rendered surfaces.

This module provides the SurfaceWriter class for writing surfaces to image
files, optionally flattened onto an opaque background.
"""

from pathlib import Path

from PIL import Image

from polylab.core.geometry import polygon_name
from polylab.core.renderer import Surface, parse_color
from polylab.exceptions import ImageSaveError

SUPPORTED_SUFFIXES = (".png", ".webp", ".tiff", ".gif")


class SurfaceWriter:
    """Writes surfaces to image files.

    PNG keeps the surface's transparency. A background colour flattens the
    image onto an opaque fill first.

    Example:
        writer = SurfaceWriter(background="white")
        writer.save(surface, Path("hexagon.png"))
    """

    def __init__(self, background: str | None = None) -> None:
        """Initialize writer.

        Args:
            background: Optional colour to place behind the drawing
        """
        self._background = parse_color(background) if background else None

    def to_image(self, surface: Surface) -> Image.Image:
        """Produce the image that would be written for a surface."""
        if self._background is None:
            return surface.image.copy()
        flattened = Image.new("RGBA", surface.size, self._background)
        flattened.alpha_composite(surface.image)
        return flattened

    def save(self, surface: Surface, output_path: Path) -> Path:
        """Save a surface to disk.

        Args:
            surface: Surface to save
            output_path: Destination; the suffix selects the format

        Returns:
            The path written

        Raises:
            ImageSaveError: If the format is unsupported or writing fails
        """
        suffix = output_path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise ImageSaveError(
                str(output_path),
                f"unsupported format '{suffix}' (use one of {', '.join(SUPPORTED_SUFFIXES)})",
            )

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.to_image(surface).save(output_path)
        except OSError as e:
            raise ImageSaveError(str(output_path), str(e)) from e

        return output_path

    @staticmethod
    def get_default_path(sides: int, scene: str, directory: Path | None = None) -> Path:
        """Build the default output path, e.g. ``hexagon-intro.png``.

        Args:
            sides: Number of sides of the drawn polygon
            scene: Scene name
            directory: Output directory (current directory if None)

        Returns:
            Path for the output image
        """
        stem = polygon_name(sides).lower().replace(" ", "-")
        return (directory or Path(".")) / f"{stem}-{scene}.png"
