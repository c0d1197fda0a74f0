import numpy as np
import pytest

from galaxyview import GalaxyView, compute_orbit_scale, compute_star_layout, from_records


@pytest.fixture
def galaxy():
    systems = [
        {
            "id": "bin",
            "name": "Binary",
            "systemType": "binary",
            "position": {"azimuth": 45, "distance": 30, "elevation": -2},
            "stars": [
                {"name": "Primary", "mass": 2, "radius": 1, "spectralClass": "G"},
                {"name": "Secondary", "mass": 1, "radius": 0.5, "spectralClass": "M"},
            ],
        }
    ]
    planets = [
        {
            "id": "p",
            "name": "Terra",
            "starSystemId": "bin",
            "orbit": {
                "semiMajorAxis": 4,
                "eccentricity": 0.2,
                "inclination": 0,
                "currentAngle": 0,
            },
            "render": {"radius": 1, "primaryColor": "#2255aa"},
        }
    ]
    return from_records(systems, planets, world_id="world")


def test_binary_scenario(galaxy):
    system = galaxy.get_system("bin")
    planets = galaxy.planets_for(system)

    layout = compute_star_layout(system.stars)
    r0, r1 = layout.orbit_radii
    assert r0 == pytest.approx(layout.k / 2)
    assert r1 == pytest.approx(layout.k / 1)
    assert r0 < r1

    scale = compute_orbit_scale(layout.max_extent, planets)
    assert scale >= 1

    pos = planets[0].calc_position(scale)
    assert pos[0] == pytest.approx(np.sqrt(4) * 9 * scale)
    assert pos[1] == pytest.approx(0)
    assert pos[2] == pytest.approx(0)


def test_binary_scenario_through_view(galaxy):
    view = GalaxyView(galaxy)
    pose = view.select_system("bin")
    scene = view.scene()
    center = galaxy.get_system("bin").world_position()
    assert scene.orbit_scale == 1
    assert scene.extent == pytest.approx(18)
    np.testing.assert_allclose(pose.look_at, center)
    assert np.linalg.norm(pose.position - center) == pytest.approx(
        18 * 1.35 / np.tan(np.radians(27.5))
    )
