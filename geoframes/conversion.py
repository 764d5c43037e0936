"""
Module for surface type label conversions
"""
__all__ = ['convert_surface_name', 'convert_surface_type']

from typing import Union

from geoframes.frames import SurfaceType
from geoframes.utils.logging import warn_once

_DEFAULT_SURFACE = SurfaceType.EARTH_WGS84


def convert_surface_name(name: str) -> SurfaceType:
    """
    Converts a surface label to its SurfaceType.

    Never fails; unrecognized labels resolve to EARTH_WGS84.

    Args:
        name (str): The surface label, e.g. 'EARTH_WGS84'. Matching is exact.

    Returns:
        SurfaceType
    """
    surfaces = {
        'EARTH_WGS84': SurfaceType.EARTH_WGS84,
    }

    if name in surfaces:
        return surfaces[name]

    warn_once(
        f'SurfaceType string {name!r} not recognized, '
        f'{_DEFAULT_SURFACE.name} returned by default'
    )
    return _DEFAULT_SURFACE


def convert_surface_type(surface: Union[SurfaceType, int]) -> str:
    """
    Converts a SurfaceType (or raw integer) to its label.

    Args:
        surface (SurfaceType or int): The surface type.

    Returns:
        str: The label. Unrecognized values yield 'EARTH_WGS84'.
    """
    labels = {
        SurfaceType.EARTH_WGS84: 'EARTH_WGS84',
    }

    if surface in labels:
        return labels[surface]

    warn_once(
        f'SurfaceType {surface!r} not recognized, '
        f'{_DEFAULT_SURFACE.name} returned by default'
    )
    return _DEFAULT_SURFACE.name
