"""Polylab - Regular polygon geometry and rendering.

Polylab computes the properties of regular polygons (angles, perimeter, area,
apothem), generates their vertex coordinates and renders them onto raster
surfaces with labelled vertices.

Example:
    $ polylab properties 6 --side-length 2

This prints the interior and exterior angles, perimeter, area and apothem of
a regular hexagon with sides of length 2.
"""

__version__ = "0.1.0"
__author__ = "Polylab Contributors"

__all__ = ["__author__", "__version__"]
