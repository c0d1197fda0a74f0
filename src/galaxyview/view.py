"""Galaxy / system view state.

Two states only: the galaxy overview and one selected system. Every
transition yields the camera pose the renderer should animate towards.
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

from galaxyview.base.universe import Galaxy
from galaxyview.camera import CameraPose, galaxy_pose
from galaxyview.config import DEFAULT_CONFIG, LayoutConfig
from galaxyview.scene import SystemScene, build_galaxy_markers, build_system_scene

log = logging.getLogger(__name__)


class ViewState(enum.Enum):
    GALAXY = "galaxy"
    SYSTEM = "system"


class GalaxyView:
    """Selection state over a :class:`Galaxy` snapshot."""

    def __init__(self, galaxy: Galaxy, config: LayoutConfig = DEFAULT_CONFIG):
        self.galaxy = galaxy
        self.config = config
        self.state = ViewState.GALAXY
        self.selected_system = None
        self._scene: Optional[SystemScene] = None

    def __repr__(self):
        selected = self.selected_system.name if self.selected_system else None
        return f"{type(self).__name__}({self.state.value}, selected={selected})"

    @property
    def camera_target(self) -> CameraPose:
        if self._scene is None:
            return galaxy_pose(self.config)
        return self._scene.camera

    def select_system(self, system_id: str) -> CameraPose:
        """Enter (or switch to) the system view. Raises KeyError for an unknown id."""
        system = self.galaxy.get_system(system_id)
        planets = self.galaxy.planets_for(system)
        self._scene = build_system_scene(system, planets, config=self.config)
        self.selected_system = system
        self.state = ViewState.SYSTEM
        log.debug(
            "Selected system %r, orbit scale %g, extent %g",
            system.name,
            self._scene.orbit_scale,
            self._scene.extent,
        )
        return self.camera_target

    def back(self) -> CameraPose:
        """Return to the galaxy overview, a no-op there."""
        self._scene = None
        self.selected_system = None
        self.state = ViewState.GALAXY
        return self.camera_target

    def scene(self) -> Optional[SystemScene]:
        return self._scene

    def markers(self, highlighted_id: Optional[str] = None):
        """Galaxy markers, empty while a system is selected"""
        if self.state is ViewState.SYSTEM:
            return []
        return build_galaxy_markers(
            self.galaxy.systems, highlighted_id=highlighted_id, config=self.config
        )
