"""
ip411 - Locate an IP address on a terminal world map

Looks up geolocation details for an IP address (or your own) via
ipinfo.io and marks the spot on a braille world map in the terminal.
"""

__version__ = "1.0.0"

from .location import LocationRecord
from .projection import CanvasSpace, GeoProjector, Point
from .raster import MapPlotter, rasterize, render_map
from .app import run

__all__ = [
    "CanvasSpace",
    "GeoProjector",
    "LocationRecord",
    "MapPlotter",
    "Point",
    "rasterize",
    "render_map",
    "run",
]
