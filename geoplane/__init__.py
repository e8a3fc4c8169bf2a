"""
Geo-plane mapper

Converts between a square local map plane and geographic coordinates, and
builds static map image URLs for the plane's texture.

Example:
    >>> from geoplane import plane_to_lat_lng, lat_lng_to_plane
    >>> p = plane_to_lat_lng(10, -20, 40.7128, -74.006, 1000)
    >>> q = lat_lng_to_plane(p.lat, p.lng, 40.7128, -74.006, 1000)
    >>> round(q.x, 6), round(q.y, 6)
    (10.0, -20.0)
"""

from .errors import InvalidArgument
from .plane import LatLng, PlanePoint, lat_lng_to_plane, map_extent_meters, plane_to_lat_lng
from .static_map import build_static_map_url
from .zoom import meters_per_pixel, zoom_from_height

__version__ = "1.0.0"

__all__ = [
    "InvalidArgument",
    "LatLng",
    "PlanePoint",
    "build_static_map_url",
    "lat_lng_to_plane",
    "map_extent_meters",
    "meters_per_pixel",
    "plane_to_lat_lng",
    "zoom_from_height",
]
