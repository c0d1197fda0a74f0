import numpy as np
import pytest

from galaxyview.base import Galaxy
from galaxyview.camera import galaxy_pose
from galaxyview.config import DEFAULT_CONFIG
from galaxyview.view import GalaxyView, ViewState


@pytest.fixture
def view(binary_system, single_system, planet_factory):
    planets = [planet_factory(4, system_id="sys-1"), planet_factory(2, system_id="sys-2")]
    return GalaxyView(Galaxy([binary_system, single_system], planets, world_id="w"))


def test_starts_in_galaxy_view(view):
    assert view.state is ViewState.GALAXY
    assert view.selected_system is None
    assert view.scene() is None
    assert view.camera_target == galaxy_pose()
    assert len(view.markers()) == 2


def test_select_and_back(view, binary_system):
    pose = view.select_system("sys-1")
    assert view.state is ViewState.SYSTEM
    assert view.selected_system.id == "sys-1"
    np.testing.assert_allclose(pose.look_at, binary_system.world_position())
    assert view.markers() == []
    assert [p.id for p in view.scene().planets] == ["p-4-0.0"]

    pose = view.back()
    assert view.state is ViewState.GALAXY
    assert pose == galaxy_pose(DEFAULT_CONFIG)


def test_switch_systems_directly(view, single_system):
    view.select_system("sys-1")
    pose = view.select_system("sys-2")
    assert view.selected_system.id == "sys-2"
    np.testing.assert_allclose(pose.look_at, single_system.world_position())


def test_back_in_galaxy_view_is_noop(view):
    assert view.back() == galaxy_pose()
    assert view.state is ViewState.GALAXY


def test_unknown_system(view):
    with pytest.raises(KeyError):
        view.select_system("nope")
    assert view.state is ViewState.GALAXY


def test_target_is_deterministic(view):
    first = view.select_system("sys-1")
    view.back()
    assert view.select_system("sys-1") == first


def test_markers_follow_highlight(view):
    markers = view.markers(highlighted_id="sys-1")
    assert [m.highlighted for m in markers] == [True, False]
