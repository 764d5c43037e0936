"""
Conversion of positions and velocities between spherical (geodetic), ECEF,
GLOBAL (East-North-Up) and LOCAL (heading-aligned) reference frames
"""

__all__ = ['SphericalCoordinates']

import math
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from geoframes.conversion import convert_surface_name, convert_surface_type
from geoframes.distance import haversine_distance
from geoframes.ellipsoid import ELLIPSOIDS, WGS84, ecef_to_geodetic, geodetic_to_ecef
from geoframes.frames import CoordinateType, SurfaceType
from geoframes.rotations import ecef_to_global_matrix, local_to_global_matrix
from geoframes.utils.logging import LOGGER, warn_once

VectorLike = Union[Sequence[float], NDArray[np.float64]]

# Frames in hop order; every transform walks this chain between its endpoints
_FRAME_CHAIN = (
    CoordinateType.SPHERICAL,
    CoordinateType.ECEF,
    CoordinateType.GLOBAL,
    CoordinateType.LOCAL,
)


def _as_vector(vector: VectorLike) -> NDArray[np.float64]:
    """Copies a 3-component sequence into a new float array"""
    arr = np.array(vector, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f'Expected a 3-component vector, received shape {arr.shape}')
    return arr


def _frame_name(frame) -> str:
    return str(getattr(frame, 'name', frame))


class SphericalCoordinates:
    """
    Converts positions and velocities between reference frames anchored at a
    configurable point on the surface of a planet.

    The reference configuration consists of the surface type, the geodetic
    latitude/longitude of the GLOBAL frame's origin (radians), its elevation
    (meters), and the heading offset (radians) of the LOCAL frame relative to
    GLOBAL.

    Transforms are pure functions of their inputs and the current
    configuration. Instances are not synchronized; mutating one from another
    thread while transforms are running must be serialized by the caller.

    Args:
        surface:
            (Default EARTH_WGS84) The surface model. Stored verbatim, even if
            unrecognized.

        latitude_reference:
            (Default 0.0) Reference latitude, in radians

        longitude_reference:
            (Default 0.0) Reference longitude, in radians

        elevation_reference:
            (Default 0.0) Reference elevation, in meters

        heading_offset:
            (Default 0.0) Rotation of LOCAL relative to GLOBAL, in radians
    """

    def __init__(
        self,
        surface: Union[SurfaceType, int] = SurfaceType.EARTH_WGS84,
        latitude_reference: float = 0.0,
        longitude_reference: float = 0.0,
        elevation_reference: float = 0.0,
        heading_offset: float = 0.0,
    ):
        self._ellipsoid = WGS84
        self._surface = surface
        self._latitude_reference = latitude_reference
        self._longitude_reference = longitude_reference
        self._elevation_reference = elevation_reference
        self._heading_offset = heading_offset

        self._select_ellipsoid()
        self.update_transformation_matrix()

    def __eq__(self, other):
        if not isinstance(other, SphericalCoordinates):
            return False

        return (
            self._surface == other._surface and
            self._latitude_reference == other._latitude_reference and
            self._longitude_reference == other._longitude_reference and
            self._elevation_reference == other._elevation_reference and
            self._heading_offset == other._heading_offset
        )

    def __repr__(self):
        return (
            f'<SphericalCoordinates({_frame_name(self._surface)}, '
            f'{self._latitude_reference}, {self._longitude_reference}, '
            f'{self._elevation_reference}, {self._heading_offset})>'
        )

    @property
    def surface(self) -> Union[SurfaceType, int]:
        """The surface type, exactly as last assigned"""
        return self._surface

    @surface.setter
    def surface(self, surface: Union[SurfaceType, int]):
        self._surface = surface
        self._select_ellipsoid()
        self.update_transformation_matrix()

    @property
    def latitude_reference(self) -> float:
        """Geodetic latitude of the GLOBAL origin, in radians"""
        return self._latitude_reference

    @latitude_reference.setter
    def latitude_reference(self, angle: float):
        self._latitude_reference = angle
        self.update_transformation_matrix()

    @property
    def longitude_reference(self) -> float:
        """Longitude of the GLOBAL origin, in radians"""
        return self._longitude_reference

    @longitude_reference.setter
    def longitude_reference(self, angle: float):
        self._longitude_reference = angle
        self.update_transformation_matrix()

    @property
    def elevation_reference(self) -> float:
        """Elevation of the GLOBAL origin above the ellipsoid, in meters"""
        return self._elevation_reference

    @elevation_reference.setter
    def elevation_reference(self, elevation: float):
        self._elevation_reference = elevation
        self.update_transformation_matrix()

    @property
    def heading_offset(self) -> float:
        """Rotation of LOCAL relative to GLOBAL, in radians"""
        return self._heading_offset

    @heading_offset.setter
    def heading_offset(self, angle: float):
        self._heading_offset = angle
        self.update_transformation_matrix()

    def copy(self) -> 'SphericalCoordinates':
        """Returns an independent copy of this configuration"""
        return SphericalCoordinates(
            self._surface,
            self._latitude_reference,
            self._longitude_reference,
            self._elevation_reference,
            self._heading_offset,
        )

    def _select_ellipsoid(self):
        """Picks the ellipsoid for the current surface; unknown surfaces keep the last one"""
        ellipsoid = ELLIPSOIDS.get(self._surface)
        if ellipsoid is None:
            warn_once(
                f'Unknown surface type [{_frame_name(self._surface)}]; '
                'conversions keep using the previous ellipsoid.'
            )
            return

        self._ellipsoid = ellipsoid

    def update_transformation_matrix(self):
        """
        Recomputes the cached ECEF origin and rotation matrices. Called by every
        setter, so only needed when the configuration was altered some other way.
        """
        self._origin = geodetic_to_ecef(
            self._latitude_reference,
            self._longitude_reference,
            self._elevation_reference,
            self._ellipsoid,
        )
        self._rot_ecef_to_global = ecef_to_global_matrix(
            self._latitude_reference,
            self._longitude_reference,
        )
        self._rot_global_to_ecef = self._rot_ecef_to_global.T
        self._rot_local_to_global = local_to_global_matrix(self._heading_offset)
        self._rot_global_to_local = self._rot_local_to_global.T

    # -------------------------------------------------------------------------
    # Single-hop conversions
    # -------------------------------------------------------------------------

    def _spherical_to_ecef(self, position):
        return geodetic_to_ecef(position[0], position[1], position[2], self._ellipsoid)

    def _ecef_to_spherical(self, position):
        return ecef_to_geodetic(position[0], position[1], position[2], self._ellipsoid)

    def _ecef_to_global_position(self, position):
        return self._rot_ecef_to_global @ (position - self._origin)

    def _global_to_ecef_position(self, position):
        return self._origin + self._rot_global_to_ecef @ position

    def _ecef_to_global_velocity(self, velocity):
        return self._rot_ecef_to_global @ velocity

    def _global_to_ecef_velocity(self, velocity):
        return self._rot_global_to_ecef @ velocity

    def _global_to_local(self, vector):
        return self._rot_global_to_local @ vector

    def _local_to_global(self, vector):
        return self._rot_local_to_global @ vector

    _POSITION_HOPS = {
        (CoordinateType.SPHERICAL, CoordinateType.ECEF): _spherical_to_ecef,
        (CoordinateType.ECEF, CoordinateType.SPHERICAL): _ecef_to_spherical,
        (CoordinateType.ECEF, CoordinateType.GLOBAL): _ecef_to_global_position,
        (CoordinateType.GLOBAL, CoordinateType.ECEF): _global_to_ecef_position,
        (CoordinateType.GLOBAL, CoordinateType.LOCAL): _global_to_local,
        (CoordinateType.LOCAL, CoordinateType.GLOBAL): _local_to_global,
    }

    # Velocities have no geodetic representation and no translation
    _VELOCITY_HOPS = {
        (CoordinateType.ECEF, CoordinateType.GLOBAL): _ecef_to_global_velocity,
        (CoordinateType.GLOBAL, CoordinateType.ECEF): _global_to_ecef_velocity,
        (CoordinateType.GLOBAL, CoordinateType.LOCAL): _global_to_local,
        (CoordinateType.LOCAL, CoordinateType.GLOBAL): _local_to_global,
    }

    def _transform(self, vector, from_frame, to_frame, hops, kind: str) -> NDArray[np.float64]:
        """
        Walks the frame chain from `from_frame` to `to_frame`, applying one hop
        per step. Any unknown frame, missing hop or failed hop yields a copy
        of the input.
        """
        vector = _as_vector(vector)
        if from_frame == to_frame:
            return vector

        if from_frame not in _FRAME_CHAIN or to_frame not in _FRAME_CHAIN:
            warn_once(
                f'Invalid coordinate type in {kind} transform '
                f'[{_frame_name(from_frame)} -> {_frame_name(to_frame)}]; '
                'input returned unchanged.'
            )
            return vector

        start, end = _FRAME_CHAIN.index(from_frame), _FRAME_CHAIN.index(to_frame)
        step = 1 if end > start else -1

        result = vector
        for idx in range(start, end, step):
            hop = hops.get((_FRAME_CHAIN[idx], _FRAME_CHAIN[idx + step]))
            if hop is None:
                warn_once(
                    f'Unsupported {kind} transform '
                    f'[{_frame_name(from_frame)} -> {_frame_name(to_frame)}]; '
                    'input returned unchanged.'
                )
                return vector

            try:
                result = hop(self, result)
            except ValueError as exc:
                LOGGER.debug(exc)
                warn_once(
                    f'{kind.capitalize()} transform '
                    f'[{_frame_name(from_frame)} -> {_frame_name(to_frame)}] '
                    'cannot be inverted to geodetic coordinates; input returned unchanged.'
                )
                return vector

        return result

    def position_transform(
        self,
        position: VectorLike,
        from_frame: Union[CoordinateType, int],
        to_frame: Union[CoordinateType, int],
    ) -> NDArray[np.float64]:
        """
        Converts a position between any two of the SPHERICAL, ECEF, GLOBAL and
        LOCAL frames. SPHERICAL positions are (latitude, longitude, elevation)
        with angles in radians.

        Unknown frame tags, or an ECEF position that cannot be inverted to
        geodetic coordinates, return the input unchanged (as a new array).

        Args:
            position:
                The position, 3 components

            from_frame:
                Frame the position is expressed in

            to_frame:
                Frame to express the position in

        Returns:
            numpy array of 3 components
        """
        return self._transform(position, from_frame, to_frame, self._POSITION_HOPS, 'position')

    def velocity_transform(
        self,
        velocity: VectorLike,
        from_frame: Union[CoordinateType, int],
        to_frame: Union[CoordinateType, int],
    ) -> NDArray[np.float64]:
        """
        Rotates a velocity between the ECEF, GLOBAL and LOCAL frames.

        SPHERICAL is not a valid endpoint for velocities; naming it, or any
        unknown frame tag, returns the input unchanged (as a new array).

        Args:
            velocity:
                The velocity, 3 components

            from_frame:
                Frame the velocity is expressed in

            to_frame:
                Frame to express the velocity in

        Returns:
            numpy array of 3 components
        """
        if from_frame != to_frame and CoordinateType.SPHERICAL in (from_frame, to_frame):
            warn_once('Spherical velocities are not supported; input returned unchanged.')
            return _as_vector(velocity)

        return self._transform(velocity, from_frame, to_frame, self._VELOCITY_HOPS, 'velocity')

    def spherical_from_local_position(self, xyz: VectorLike) -> NDArray[np.float64]:
        """
        Converts a LOCAL position to (latitude, longitude, elevation), with
        latitude and longitude in degrees.

        The LOCAL frame is a flat tangent plane, so large offsets leave the
        ellipsoid surface and show up as added elevation.
        """
        result = self.position_transform(xyz, CoordinateType.LOCAL, CoordinateType.SPHERICAL)
        result[0] = math.degrees(result[0])
        result[1] = math.degrees(result[1])
        return result

    def local_from_spherical_position(self, latlonelev: VectorLike) -> NDArray[np.float64]:
        """
        Converts (latitude, longitude, elevation), with latitude and longitude
        in degrees, to a LOCAL position.
        """
        position = _as_vector(latlonelev)
        position[0] = math.radians(position[0])
        position[1] = math.radians(position[1])
        return self.position_transform(position, CoordinateType.SPHERICAL, CoordinateType.LOCAL)

    def global_from_local_velocity(self, xyz: VectorLike) -> NDArray[np.float64]:
        """Rotates a LOCAL velocity into GLOBAL (East, North, Up)"""
        return self.velocity_transform(xyz, CoordinateType.LOCAL, CoordinateType.GLOBAL)

    def local_from_global_velocity(self, enu: VectorLike) -> NDArray[np.float64]:
        """Rotates a GLOBAL (East, North, Up) velocity into LOCAL"""
        return self.velocity_transform(enu, CoordinateType.GLOBAL, CoordinateType.LOCAL)

    @staticmethod
    def convert(value: Union[str, SurfaceType, int]) -> Union[SurfaceType, str]:
        """
        Converts between surface labels and SurfaceTypes.

        Strings are parsed to a SurfaceType, anything else is converted to its
        label. Unrecognized input resolves to EARTH_WGS84 rather than failing.

        Args:
            value:
                A surface label (e.g. 'EARTH_WGS84') or a SurfaceType

        Returns:
            The SurfaceType for a label, or the label for a SurfaceType
        """
        if isinstance(value, str):
            return convert_surface_name(value)

        return convert_surface_type(value)

    @staticmethod
    def distance(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
        """
        Great-circle (haversine) distance in meters between two points, given
        in radians. Independent of any configuration.
        """
        return haversine_distance(lat_a, lon_a, lat_b, lon_b)
