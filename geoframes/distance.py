"""
Great-circle distance between geodetic points.
"""

__all__ = ['haversine_distance']

import math

from geoframes._const import EARTH_RADIUS_METERS


def haversine_distance(
        lat_a: float,
        lon_a: float,
        lat_b: float,
        lon_b: float,
) -> float:
    """
    Calculate distance using the Haversine formula (spherical earth).

    Spherical, so expect errors of a few tenths of a percent against an
    ellipsoidal geodesic.

    Args:
        lat_a: Latitude of the first point, in radians
        lon_a: Longitude of the first point, in radians
        lat_b: Latitude of the second point, in radians
        lon_b: Longitude of the second point, in radians

    Returns:
        (float) the distance in meters
    """
    dlat = lat_b - lat_a
    dlon = lon_b - lon_a

    a = (math.sin(dlat / 2) ** 2 +
         math.sin(dlon / 2) ** 2 * math.cos(lat_a) * math.cos(lat_b))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c
