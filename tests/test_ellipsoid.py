import math

import pytest
from pytest import approx

from geoframes.ellipsoid import *

from tests.functions import assert_geodetic_equal, assert_vectors_equal


def test_wgs84_parameters():
    assert WGS84.semi_major_axis == 6378137.0
    assert WGS84.semi_minor_axis == approx(6356752.314245, abs=1e-6)
    assert WGS84.flattening == approx(1 / 298.257223563)
    assert WGS84.eccentricity ** 2 == approx(0.00669437999014, rel=1e-9)
    assert WGS84.second_eccentricity ** 2 == approx(0.00673949674228, rel=1e-9)

    # Flattening is consistent with the two axes
    a, b = WGS84.semi_major_axis, WGS84.semi_minor_axis
    assert (a - b) / a == approx(WGS84.flattening, rel=1e-9)


def test_prime_vertical_radius():
    assert prime_vertical_radius(0.) == WGS84.semi_major_axis
    # At the poles N = a² / b
    assert prime_vertical_radius(math.pi / 2) == approx(
        WGS84.semi_major_axis ** 2 / WGS84.semi_minor_axis, abs=1e-6
    )


def test_geodetic_to_ecef():
    assert_vectors_equal(geodetic_to_ecef(0., 0., 0.), [6378137., 0., 0.])
    assert_vectors_equal(geodetic_to_ecef(0., math.pi / 2, 10.), [0., 6378147., 0.])
    assert_vectors_equal(
        geodetic_to_ecef(math.pi / 2, 0., 0.),
        [0., 0., WGS84.semi_minor_axis],
    )

    # gdaltransform -s_srs WGS84 -t_srs EPSG:4978
    actual = geodetic_to_ecef(math.radians(37.4216719), math.radians(-122.0821853), 30.)
    assert_vectors_equal(
        actual, [-2693766.71906146, -4297199.59926038, 3854681.81878812], abs_tol=1e-2
    )


def test_ecef_to_geodetic():
    assert_geodetic_equal(ecef_to_geodetic(6378137., 0., 0.), [0., 0., 0.])
    assert_geodetic_equal(ecef_to_geodetic(0., -6378237., 0.), [0., -math.pi / 2, 100.])

    # gdaltransform -s_srs EPSG:4978 -t_srs WGS84
    actual = ecef_to_geodetic(-2693701.91434394, -4299942.14687992, 3851691.0393571)
    assert math.degrees(actual[0]) == approx(37.3877349, abs=1e-7)
    assert math.degrees(actual[1]) == approx(-122.0651166, abs=1e-7)
    assert actual[2] == approx(32., abs=1e-2)


def test_ecef_to_geodetic_poles():
    b = WGS84.semi_minor_axis
    assert_geodetic_equal(ecef_to_geodetic(0., 0., b + 100.), [math.pi / 2, 0., 100.])
    assert_geodetic_equal(ecef_to_geodetic(0., 0., -b), [-math.pi / 2, 0., 0.])


def test_round_trip_near_poles():
    for offset in (1e-6, 1e-8, 1e-10, 1e-12):
        for sign in (1., -1.):
            lat = sign * (math.pi / 2 - offset)
            xyz = geodetic_to_ecef(lat, 0.7, 100.)
            assert_geodetic_equal(
                ecef_to_geodetic(*xyz), [lat, 0.7, 100.],
                angle_tol=1e-6, elevation_tol=1e-2,
            )
            assert ecef_to_geodetic(*xyz)[0] == approx(lat, abs=1e-9)


def test_ecef_to_geodetic_off_axis():
    b = WGS84.semi_minor_axis
    for p in (1e-3, 1e-5, 1e-6, 1e-8):
        lat, lon, elev = ecef_to_geodetic(p, 0., b + 100.)
        assert lat == approx(math.pi / 2, abs=1e-9)
        assert lon == 0.
        assert elev == approx(100., abs=1e-2)


def test_ecef_to_geodetic_near_center():
    with pytest.raises(ValueError):
        ecef_to_geodetic(0., 0., 0.)

    with pytest.raises(ValueError):
        ecef_to_geodetic(1., 2., 3.)


def test_round_trip():
    for lat, lon, elev in (
        (0.3, -1.2, 354.1),
        (-0.8, 2.9, -120.),
        (1.4, 0.1, 8848.),
        (-1.5, -3.1, 0.),
    ):
        xyz = geodetic_to_ecef(lat, lon, elev)
        assert_geodetic_equal(ecef_to_geodetic(*xyz), [lat, lon, elev], elevation_tol=1e-3)


def test_against_proj():
    pyproj = pytest.importorskip('pyproj')
    transformer = pyproj.Transformer.from_crs('EPSG:4979', 'EPSG:4978', always_xy=True)

    for lat, lon, elev in ((46.250944, -122.249972, 2549.), (-33.8688, 151.2093, 58.)):
        expected = transformer.transform(lon, lat, elev)
        actual = geodetic_to_ecef(math.radians(lat), math.radians(lon), elev)
        assert_vectors_equal(actual, expected, abs_tol=1e-3)

        back = ecef_to_geodetic(*expected)
        assert math.degrees(back[0]) == approx(lat, abs=1e-9)
        assert math.degrees(back[1]) == approx(lon, abs=1e-9)
        assert back[2] == approx(elev, abs=1e-3)
