from geoframes._version import __version__  # noqa: F401
from geoframes.utils.logging import LOGGER
from geoframes.frames import CoordinateType, SurfaceType
from geoframes.ellipsoid import WGS84, Ellipsoid, ecef_to_geodetic, geodetic_to_ecef
from geoframes.distance import haversine_distance
from geoframes.coordinates import SphericalCoordinates

__all__ = [
    'CoordinateType',
    'Ellipsoid',
    'SphericalCoordinates',
    'SurfaceType',
    'WGS84',
    'ecef_to_geodetic',
    'geodetic_to_ecef',
    'haversine_distance',
    'LOGGER',
]
