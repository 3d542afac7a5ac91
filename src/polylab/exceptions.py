"""Exception hierarchy for Polylab."""


class PolylabError(Exception):
    """Base exception for all Polylab errors."""

    pass


class GeometryError(PolylabError):
    """Errors in geometric calculations."""

    pass


class InvalidPolygonError(GeometryError):
    """Side count does not describe a polygon."""

    def __init__(self, side_count: int) -> None:
        self.side_count = side_count
        super().__init__(
            f"A polygon needs at least 3 sides, got {side_count}"
        )


class RenderError(PolylabError):
    """Errors related to drawing onto a surface."""

    pass


class ColorParseError(RenderError):
    """Colour string could not be understood."""

    def __init__(self, color: str, reason: str) -> None:
        self.color = color
        self.reason = reason
        super().__init__(f"Invalid color '{color}': {reason}")


class OutputError(PolylabError):
    """Errors related to writing rendered output."""

    pass


class ImageSaveError(OutputError):
    """Error saving a rendered image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")
