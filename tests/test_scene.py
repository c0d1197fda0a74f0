import numpy as np
import pytest

from galaxyview.scene import build_galaxy_markers, build_system_scene


def test_single_star_without_planets(single_system):
    scene = build_system_scene(single_system, [])
    assert scene.orbit_scale == 1
    assert scene.planets == ()
    assert scene.trails == ()
    assert scene.extent == pytest.approx(1.6)
    (star,) = scene.stars
    np.testing.assert_allclose(star.position, single_system.world_position())
    assert star.light_intensity == 8
    assert star.glow_radius == pytest.approx(1.6 * 1.5)


def test_positions_are_offset_to_world(binary_system, planet_factory):
    planet = planet_factory(4, e=0.2)
    scene = build_system_scene(binary_system, [planet])
    center = binary_system.world_position()
    np.testing.assert_allclose(scene.center, center)
    np.testing.assert_allclose(scene.planets[0].position - center, [18, 0, 0], atol=1e-9)
    np.testing.assert_allclose(
        scene.planets[0].path - center, planet.orbit_path(scene.orbit_scale),
        atol=1e-9,
    )
    np.testing.assert_allclose(
        scene.stars[0].position - center, scene.layout.positions()[0]
    )
    for trail in scene.trails:
        radii = np.linalg.norm((trail.points - center)[:, [0, 2]], axis=1)
        np.testing.assert_allclose(radii, trail.radius)


def test_companions_get_dimmer_lights(binary_system):
    scene = build_system_scene(binary_system, [])
    assert [s.light_intensity for s in scene.stars] == [8, 5]
    assert [s.color for s in scene.stars] == ["#ffe44d", "#ff4500"]


def test_close_planets_are_pushed_out(binary_system, planet_factory):
    planets = [planet_factory(0.01), planet_factory(0.05, e=0.5)]
    scene = build_system_scene(binary_system, planets)
    assert scene.orbit_scale > 1
    boundary = scene.layout.max_extent + 1.5
    closest = min(p.perihelion(scene.orbit_scale) for p in planets)
    assert closest == pytest.approx(boundary)
    assert scene.extent >= scene.layout.max_extent


def test_camera_looks_at_system(binary_system):
    scene = build_system_scene(binary_system, [])
    np.testing.assert_array_equal(scene.camera.look_at, scene.center)
    assert scene.camera.position[1] > scene.center[1]


def test_galaxy_markers(binary_system, single_system):
    markers = build_galaxy_markers([binary_system, single_system])
    assert [m.system_id for m in markers] == ["sys-1", "sys-2"]
    castor = markers[0]
    assert castor.color == "#ffe44d"
    assert castor.display_radius == pytest.approx(0.12)
    assert castor.hit_radius == pytest.approx(0.7)
    np.testing.assert_allclose(castor.position, binary_system.world_position())
    sol = markers[1]
    assert sol.display_radius == pytest.approx(0.24)
    assert sol.hit_radius == pytest.approx(0.7)


def test_render_records_carry_rgb(binary_system, planet_factory):
    scene = build_system_scene(binary_system, [planet_factory(4)])
    assert [s.rgb for s in scene.stars] == [(255, 228, 77), (255, 69, 0)]
    assert scene.planets[0].rgb == (51, 102, 255)


def test_highlighted_marker(binary_system, single_system):
    plain, lit = build_galaxy_markers(
        [binary_system, single_system], highlighted_id="sys-2"
    )
    assert not plain.highlighted
    assert plain.glow_scale == pytest.approx(2.2)
    assert plain.light_intensity == pytest.approx(0.6)
    assert plain.rgb == (255, 228, 77)
    assert lit.highlighted
    assert lit.glow_scale == pytest.approx(3.5)
    assert lit.light_intensity == pytest.approx(2.0)
    assert lit.ring_radii == pytest.approx((0.24 * 1.6, 0.24 * 2.0))
