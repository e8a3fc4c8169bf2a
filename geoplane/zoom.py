"""
Zoom level heuristics for Web Mercator static maps.
"""

from math import cos, floor, isinf, log2, radians

from .constants import (
    DEFAULT_LATITUDE,
    EARTH_CIRCUMFERENCE_M,
    MAX_ZOOM,
    METERS_PER_PIXEL_ZOOM_0,
    MIN_ZOOM,
    ZOOM_OFFSET,
)
from .errors import InvalidArgument


def zoom_from_height(height: float, lat: float = DEFAULT_LATITUDE) -> int:
    """
    Estimate a map zoom level from a viewing height.

    The Earth's circumference is shrunk by cos(lat) to account for meridian
    convergence, then compared against the height on a log2 scale.

    Args:
        height: Viewing height in meters
        lat: Latitude of the map center in degrees

    Returns:
        Zoom level clamped to [0, 21]

    Raises:
        InvalidArgument: If height is not positive

    Example:
        >>> zoom_from_height(1000, 40.7128)
        7
    """
    if height <= 0:
        raise InvalidArgument(f"height must be positive, got {height}")

    adjusted_circumference = EARTH_CIRCUMFERENCE_M * cos(radians(lat))
    if adjusted_circumference <= 0:
        return MIN_ZOOM

    zoom = log2(adjusted_circumference / height) - ZOOM_OFFSET
    if isinf(zoom):
        return MAX_ZOOM
    # Halves round up
    return min(max(floor(zoom + 0.5), MIN_ZOOM), MAX_ZOOM)


def meters_per_pixel(lat: float, zoom: int) -> float:
    """Ground distance covered by one pixel at the given latitude and zoom."""
    return METERS_PER_PIXEL_ZOOM_0 * cos(radians(lat)) / 2 ** zoom
