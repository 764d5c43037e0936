import math

import numpy as np
from pytest import approx

from geoframes.rotations import *

from tests.functions import assert_vectors_equal


def test_ecef_to_global_matrix_orthonormal():
    for lat, lon in ((0., 0.), (0.3, -1.2), (-1.1, 2.7), (math.pi / 2, 0.4)):
        rot = ecef_to_global_matrix(lat, lon)
        assert np.allclose(rot @ rot.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(rot) == approx(1.)


def test_ecef_to_global_matrix_axes():
    # At the equator/prime meridian: East is ECEF +Y, North is +Z, Up is +X
    rot = ecef_to_global_matrix(0., 0.)
    assert_vectors_equal(rot @ [0., 1., 0.], [1., 0., 0.])
    assert_vectors_equal(rot @ [0., 0., 1.], [0., 1., 0.])
    assert_vectors_equal(rot @ [1., 0., 0.], [0., 0., 1.])

    # At the north pole Up is ECEF +Z
    rot = ecef_to_global_matrix(math.pi / 2, 0.)
    assert_vectors_equal(rot @ [0., 0., 1.], [0., 0., 1.])


def test_local_to_global_matrix():
    rot = local_to_global_matrix(0.)
    assert np.array_equal(rot, np.eye(3))

    # Quarter turn: local X is North, local Y is West
    rot = local_to_global_matrix(math.pi / 2)
    assert_vectors_equal(rot @ [1., 0., 0.], [0., 1., 0.])
    assert_vectors_equal(rot @ [0., 1., 0.], [-1., 0., 0.])
    assert_vectors_equal(rot @ [0., 0., 1.], [0., 0., 1.])

    # Inverse is the transpose
    assert np.allclose(rot.T, local_to_global_matrix(-math.pi / 2))
