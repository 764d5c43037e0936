"""Conversions between geodetic (latitude, longitude, elevation) and ECEF coordinates.

Latitude and longitude are in radians, elevation and all Cartesian
components in meters. The ellipsoid defaults to WGS84:

- Semi-major axis (a): 6378137.0 m
- Semi-minor axis (b): 6356752.314245 m
- Flattening (f): 1/298.257223563
"""

__all__ = [
    'ELLIPSOIDS', 'Ellipsoid', 'WGS84',
    'ecef_to_geodetic', 'geodetic_to_ecef', 'prime_vertical_radius',
]

import math
from typing import Dict, NamedTuple

import numpy as np
from numpy.typing import NDArray

from geoframes._const import WGS84_A, WGS84_B, WGS84_F
from geoframes.frames import SurfaceType

# Distance from the polar axis (meters) below which a point is treated as on it
_POLAR_AXIS_TOLERANCE = 1e-10


class Ellipsoid(NamedTuple):
    """
    Reference ellipsoid of revolution.

    Attributes:
        semi_major_axis: Equatorial radius in meters.
        semi_minor_axis: Polar radius in meters.
        flattening: (a - b) / a
    """

    semi_major_axis: float
    semi_minor_axis: float
    flattening: float

    @property
    def eccentricity(self) -> float:
        """First eccentricity, sqrt(1 - b²/a²)"""
        return math.sqrt(1.0 - self.semi_minor_axis ** 2 / self.semi_major_axis ** 2)

    @property
    def second_eccentricity(self) -> float:
        """Second eccentricity, sqrt(a²/b² - 1)"""
        return math.sqrt(self.semi_major_axis ** 2 / self.semi_minor_axis ** 2 - 1.0)


WGS84 = Ellipsoid(WGS84_A, WGS84_B, WGS84_F)

ELLIPSOIDS: Dict[SurfaceType, Ellipsoid] = {
    SurfaceType.EARTH_WGS84: WGS84,
}


def prime_vertical_radius(latitude: float, ellipsoid: Ellipsoid = WGS84) -> float:
    """
    Radius of curvature in the prime vertical, N(lat) = a / sqrt(1 - e² sin²(lat))

    Args:
        latitude:
            Geodetic latitude, in radians

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        (float) the radius in meters
    """
    e = ellipsoid.eccentricity
    return ellipsoid.semi_major_axis / math.sqrt(1.0 - e * e * math.sin(latitude) ** 2)


def geodetic_to_ecef(
    latitude: float,
    longitude: float,
    elevation: float,
    ellipsoid: Ellipsoid = WGS84,
) -> NDArray[np.float64]:
    """Convert geodetic coordinates to ECEF Cartesian coordinates.

    Args:
        latitude: Latitude in radians (positive north).
        longitude: Longitude in radians (positive east).
        elevation: Height above the ellipsoid in meters.
        ellipsoid: Reference ellipsoid, WGS84 unless specified.

    Returns:
        ECEF coordinates as numpy array [x, y, z] in meters.

    Example:
        >>> xyz = geodetic_to_ecef(0.0, 0.0, 0.0)
        >>> float(xyz[0])
        6378137.0
    """
    a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
    cos_lat, sin_lat = math.cos(latitude), math.sin(latitude)
    cos_lon, sin_lon = math.cos(longitude), math.sin(longitude)

    curvature = prime_vertical_radius(latitude, ellipsoid)

    return np.array(
        [
            (elevation + curvature) * cos_lat * cos_lon,
            (elevation + curvature) * cos_lat * sin_lon,
            ((b * b) / (a * a) * curvature + elevation) * sin_lat,
        ],
        dtype=np.float64,
    )


def ecef_to_geodetic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Ellipsoid = WGS84,
) -> NDArray[np.float64]:
    """Convert ECEF Cartesian coordinates to geodetic coordinates.

    Uses Bowring's closed-form solution, which is accurate well below a
    millimeter for points within a few tens of kilometers of the surface.
    Points on the polar axis are handled separately since their longitude
    is undefined (zero is reported).

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.
        ellipsoid: Reference ellipsoid, WGS84 unless specified.

    Returns:
        Geodetic coordinates as numpy array [latitude, longitude, elevation],
        latitude and longitude in radians, elevation in meters.

    Raises:
        ValueError: The point lies too close to the Earth's center for a
            geodetic latitude to be recovered.
    """
    a, b = ellipsoid.semi_major_axis, ellipsoid.semi_minor_axis
    e, ep = ellipsoid.eccentricity, ellipsoid.second_eccentricity

    # Distance from the polar axis
    p = math.sqrt(x * x + y * y)

    if p < _POLAR_AXIS_TOLERANCE:
        if abs(z) < _POLAR_AXIS_TOLERANCE:
            raise ValueError(
                f"Cannot compute geodetic coordinates at the Earth's center: ({x}, {y}, {z})"
            )
        # Longitude is undefined on the axis
        latitude, longitude = math.copysign(math.pi / 2.0, z), 0.0
    else:
        # Parametric latitude
        theta = math.atan((z * a) / (p * b))

        denominator = p - e ** 2 * a * math.cos(theta) ** 3
        if denominator <= 0.0:
            raise ValueError(
                "Cannot compute geodetic coordinates this close to the Earth's center: "
                f"({x}, {y}, {z})"
            )

        latitude = math.atan((z + ep ** 2 * b * math.sin(theta) ** 3) / denominator)
        longitude = math.atan2(y, x)

    # Projection onto the normal; stays well conditioned up to the poles, where
    # p / cos(latitude) - N does not. a²/N = a * sqrt(1 - e² sin²(latitude))
    sin_lat = math.sin(latitude)
    elevation = (
        p * math.cos(latitude) + z * sin_lat - a * math.sqrt(1.0 - e * e * sin_lat * sin_lat)
    )

    return np.array([latitude, longitude, elevation], dtype=np.float64)
