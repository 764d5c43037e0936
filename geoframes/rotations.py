"""Rotation matrices between the ECEF, GLOBAL (East-North-Up) and LOCAL frames"""

__all__ = ['ecef_to_global_matrix', 'local_to_global_matrix']

import math

import numpy as np
from numpy.typing import NDArray


def ecef_to_global_matrix(latitude: float, longitude: float) -> NDArray[np.float64]:
    """
    Rotation taking ECEF axes onto the East-North-Up axes of the tangent plane
    at the given geodetic point. Its transpose performs the inverse rotation.

    Args:
        latitude:
            Geodetic latitude of the tangent point, in radians

        longitude:
            Longitude of the tangent point, in radians

    Returns:
        3x3 numpy array
    """
    cos_lat, sin_lat = math.cos(latitude), math.sin(latitude)
    cos_lon, sin_lon = math.cos(longitude), math.sin(longitude)

    return np.array(
        [
            [-sin_lon, cos_lon, 0.0],
            [-cos_lon * sin_lat, -sin_lon * sin_lat, cos_lat],
            [cos_lon * cos_lat, sin_lon * cos_lat, sin_lat],
        ],
        dtype=np.float64,
    )


def local_to_global_matrix(heading: float) -> NDArray[np.float64]:
    """
    Rotation about the vertical axis taking LOCAL (heading-aligned) vectors
    into GLOBAL East-North-Up. With a heading of pi/2, local +X points North
    and local +Y points West.

    Args:
        heading:
            The heading offset, in radians

    Returns:
        3x3 numpy array
    """
    cos_h, sin_h = math.cos(heading), math.sin(heading)
    return np.array(
        [
            [cos_h, -sin_h, 0.0],
            [sin_h, cos_h, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
