"""
Tags identifying the planetary surface model and the reference frames
that a position or velocity may be expressed in.
"""

__all__ = ['CoordinateType', 'SurfaceType']

from enum import IntEnum


class SurfaceType(IntEnum):
    """
    Ellipsoid/body model a set of spherical coordinates refers to.

    Engines store whatever integer they are given, so values outside this
    enumeration may show up wherever a SurfaceType is expected.
    """

    EARTH_WGS84 = 1


class CoordinateType(IntEnum):
    """
    Reference frames understood by SphericalCoordinates.

    Attributes:
        SPHERICAL:
            Geodetic latitude, longitude (radians) and elevation (meters)

        ECEF:
            Earth-Centered Earth-Fixed Cartesian frame

        GLOBAL:
            East-North-Up tangent plane anchored at the reference point

        LOCAL:
            GLOBAL rotated about the vertical axis by the heading offset
    """

    SPHERICAL = 1
    ECEF = 2
    GLOBAL = 3
    LOCAL = 4
