"""Image output for polylab.

Key classes:
- SurfaceWriter: Saves rendered surfaces as image files
"""

from polylab.io.writer import SUPPORTED_SUFFIXES, SurfaceWriter

__all__ = [
    "SUPPORTED_SUFFIXES",
    "SurfaceWriter",
]
