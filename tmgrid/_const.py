"""
Constants declarations for tmgrid
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0

# Universal Transverse Mercator
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only
UTM_ZONE_WIDTH = 6.0  # Degrees of longitude
UTM_MIN_ZONE = 1
UTM_MAX_ZONE = 60

# SWEREF 99 TM stretches UTM zone 33 across all of Sweden (true zones 32-35)
SWEREF99_TM_ZONE = 33

# Round trip gate, in meters
DEFAULT_ROUND_TRIP_TOLERANCE = 0.1

# Lantmateriet property register
LANTMATERIET_REGISTRY_URL = (
    'https://kso.etjanster.lantmateriet.se/sercxi-fastighet/registerenhetsreferensV2?buffer=1'
)
LANTMATERIET_TIMEOUT_SECONDS = 5.0
