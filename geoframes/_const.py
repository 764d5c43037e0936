"""
Constants declarations for geoframes
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Equatorial axis (meters)
WGS84_B = 6356752.314245  # Polar axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0
