"""Geometry for galaxy and star system views of world-building data.

>>> from galaxyview import from_records, GalaxyView
"""

from galaxyview.base import Galaxy, Planet, Star, StarSystem
from galaxyview.camera import CameraPose, frame_system, galaxy_pose, system_extent
from galaxyview.config import DEFAULT_CONFIG, TRANSITION_SECONDS, LayoutConfig
from galaxyview.layout import StarLayout, compute_orbit_scale, compute_star_layout
from galaxyview.loaders import from_json, from_records
from galaxyview.scene import SystemScene, build_galaxy_markers, build_system_scene
from galaxyview.view import GalaxyView, ViewState

__version__ = "0.1.0"

__all__ = [
    "CameraPose",
    "DEFAULT_CONFIG",
    "Galaxy",
    "GalaxyView",
    "LayoutConfig",
    "Planet",
    "Star",
    "StarLayout",
    "StarSystem",
    "SystemScene",
    "TRANSITION_SECONDS",
    "ViewState",
    "build_galaxy_markers",
    "build_system_scene",
    "compute_orbit_scale",
    "compute_star_layout",
    "frame_system",
    "from_json",
    "from_records",
    "galaxy_pose",
    "system_extent",
]
