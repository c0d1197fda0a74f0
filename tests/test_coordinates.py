import astropy.units as u
import numpy as np
import pytest

from galaxyview.util import cartesian_to_azimuth, cyl_to_cartesian, tilt_orbital_plane


def test_cyl_to_cartesian_axes():
    np.testing.assert_allclose(cyl_to_cartesian(0, 10, 2), [10, 2, 0], atol=1e-12)
    np.testing.assert_allclose(cyl_to_cartesian(90, 10, -3), [0, -3, 10], atol=1e-12)
    np.testing.assert_allclose(cyl_to_cartesian(180, 4, 0), [-4, 0, 0], atol=1e-12)


def test_cyl_to_cartesian_accepts_quantities():
    np.testing.assert_allclose(
        cyl_to_cartesian(np.pi / 2 * u.rad, 5, 1), cyl_to_cartesian(90, 5, 1)
    )


def test_elevation_is_the_up_axis():
    pos = cyl_to_cartesian(37, 12, 4.25)
    assert pos[1] == 4.25
    assert np.hypot(pos[0], pos[2]) == pytest.approx(12)


@pytest.mark.parametrize("azimuth", [0, 45, 170, 270, 359.5, -30, 725])
def test_azimuth_round_trip(azimuth):
    x, _, z = cyl_to_cartesian(azimuth, 7.5, 0)
    recovered = cartesian_to_azimuth(x, z)
    assert recovered.unit == u.deg
    assert recovered.value == pytest.approx(azimuth % 360, abs=1e-9)


def test_tilt_moves_z_into_y():
    inc = 30
    tilted = tilt_orbital_plane(np.array([1.0, 0.0, 2.0]), inc)
    np.testing.assert_allclose(
        tilted, [1.0, 2 * np.sin(np.radians(inc)), 2 * np.cos(np.radians(inc))]
    )
