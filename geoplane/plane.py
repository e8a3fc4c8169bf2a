"""
Conversions between a square map plane and geographic coordinates.

The plane is a flat map image of side ``plane_size`` centered at (0, 0), so
in-bounds local coordinates lie in [-plane_size/2, +plane_size/2]. Local X
runs east/west (longitude) and local Y runs north/south (latitude); the plane
was laid flat by rotating its Y axis onto the scene's -Z axis.

Both directions derive zoom, ground resolution and map extent from the
center latitude and height only, so they are exact inverses of each other.
"""

from dataclasses import dataclass
from math import cos, radians

from .constants import DEFAULT_PLANE_SIZE, MAX_IMAGE_SIZE_PX, METERS_PER_DEGREE_LAT
from .errors import InvalidArgument
from .zoom import meters_per_pixel, zoom_from_height


@dataclass(frozen=True)
class LatLng:
    """Geographic position in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class PlanePoint:
    """Position in the plane's local coordinate space."""

    x: float
    y: float


def map_extent_meters(center_lat: float, height: float) -> float:
    """
    Ground distance spanned by one side of the map image.

    Args:
        center_lat: Latitude of the map center in degrees
        height: Viewing height in meters

    Returns:
        Extent in meters
    """
    zoom = zoom_from_height(height, center_lat)
    return meters_per_pixel(center_lat, zoom) * MAX_IMAGE_SIZE_PX


def _degrees_per_meter(center_lat: float) -> tuple[float, float]:
    """(lat, lng) degrees per meter around center_lat."""
    lat_per_meter = 1 / METERS_PER_DEGREE_LAT
    lng_per_meter = 1 / (METERS_PER_DEGREE_LAT * cos(radians(center_lat)))
    return lat_per_meter, lng_per_meter


def _check_plane_size(plane_size: float) -> None:
    if plane_size <= 0:
        raise InvalidArgument(f"plane_size must be positive, got {plane_size}")


def plane_to_lat_lng(
    local_x: float,
    local_y: float,
    center_lat: float,
    center_lng: float,
    height: float,
    plane_size: float = DEFAULT_PLANE_SIZE
) -> LatLng:
    """
    Convert a point on the plane to latitude/longitude.

    Points outside the plane are extrapolated, not rejected.

    Args:
        local_x: X in the plane's local space (east/west)
        local_y: Y in the plane's local space (north/south)
        center_lat: Latitude of the map center
        center_lng: Longitude of the map center
        height: Viewing height in meters, used to derive zoom
        plane_size: Side length of the plane

    Returns:
        LatLng of the point

    Example:
        >>> plane_to_lat_lng(0, 0, 40.7128, -74.006, 1000)
        LatLng(lat=40.7128, lng=-74.006)
    """
    _check_plane_size(plane_size)
    map_meters = map_extent_meters(center_lat, height)
    lat_per_meter, lng_per_meter = _degrees_per_meter(center_lat)

    offset_meters_x = local_x / plane_size * map_meters
    offset_meters_y = local_y / plane_size * map_meters

    return LatLng(
        lat=center_lat + offset_meters_y * lat_per_meter,
        lng=center_lng + offset_meters_x * lng_per_meter,
    )


def lat_lng_to_plane(
    target_lat: float,
    target_lng: float,
    center_lat: float,
    center_lng: float,
    height: float,
    plane_size: float = DEFAULT_PLANE_SIZE
) -> PlanePoint:
    """
    Convert latitude/longitude to a point on the plane.

    Inverse of plane_to_lat_lng for the same center, height and plane size.

    Returns:
        PlanePoint in the plane's local space
    """
    _check_plane_size(plane_size)
    map_meters = map_extent_meters(center_lat, height)
    lat_per_meter, lng_per_meter = _degrees_per_meter(center_lat)

    offset_meters_y = (target_lat - center_lat) / lat_per_meter
    offset_meters_x = (target_lng - center_lng) / lng_per_meter

    return PlanePoint(
        x=offset_meters_x / map_meters * plane_size,
        y=offset_meters_y / map_meters * plane_size,
    )
