"""
Constants for mapping a square map plane onto geographic coordinates.
"""

# Earth geometry
EARTH_CIRCUMFERENCE_M = 40075016  # equatorial circumference, meters
METERS_PER_PIXEL_ZOOM_0 = 156543.03392  # Web Mercator ground resolution at zoom 0
METERS_PER_DEGREE_LAT = 111320

# Zoom
MIN_ZOOM = 0
MAX_ZOOM = 21
ZOOM_OFFSET = 8
DEFAULT_LATITUDE = 40.7128  # New York City

# Static map image
STATIC_MAP_BASE_URL = "https://maps.googleapis.com/maps/api/staticmap"
MAX_IMAGE_SIZE_PX = 640  # per-request limit of the static map service
IMAGE_SCALE = 2
MAP_TYPE = "satellite"

# Local plane
DEFAULT_PLANE_SIZE = 100
