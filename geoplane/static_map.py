"""
Static map image URL construction.

Only builds the URL; fetching and rendering the image is up to the caller.
"""

import logging

from .constants import IMAGE_SCALE, MAP_TYPE, MAX_IMAGE_SIZE_PX, STATIC_MAP_BASE_URL
from .errors import InvalidArgument
from .zoom import zoom_from_height

logger = logging.getLogger(__name__)


def build_static_map_url(lat: float, lng: float, height: float, api_key: str, size: int) -> str:
    """
    Build a square satellite static map URL centered on (lat, lng).

    Args:
        lat: Center latitude in degrees
        lng: Center longitude in degrees
        height: Viewing height in meters, used to derive the zoom
        api_key: Static map API key
        size: Requested image side in pixels, clamped to 640

    Returns:
        URL string with center, zoom, size, scale=2, maptype and key

    Raises:
        InvalidArgument: If height or size is not positive
    """
    if size < 1:
        raise InvalidArgument(f"size must be at least 1 pixel, got {size}")

    zoom = zoom_from_height(height, lat)
    constrained_size = min(int(size), MAX_IMAGE_SIZE_PX)
    if constrained_size < size:
        logger.debug(f"Requested map size {size} clamped to {constrained_size}")

    return (
        f"{STATIC_MAP_BASE_URL}?center={lat},{lng}&zoom={zoom}"
        f"&size={constrained_size}x{constrained_size}&scale={IMAGE_SCALE}"
        f"&maptype={MAP_TYPE}&key={api_key}"
    )
