"""Camera framing for the galaxy and system views.

Only target poses are computed here. Interpolating the live camera towards
a target over :data:`galaxyview.config.TRANSITION_SECONDS` is left to the
renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import astropy.units as u
import numpy as np

from galaxyview.base.planet import Planet
from galaxyview.config import DEFAULT_CONFIG, LayoutConfig
from galaxyview.layout import StarLayout


@dataclass(frozen=True, eq=False)
class CameraPose:
    position: np.ndarray  # (3,)
    look_at: np.ndarray  # (3,)
    max_distance: float

    def __eq__(self, other):
        if not isinstance(other, CameraPose):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.look_at, other.look_at)
            and self.max_distance == other.max_distance
        )


def system_extent(
    layout: StarLayout,
    planets: Sequence[Planet],
    orbit_scale: float,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """Outer visual bound of a system: star layout and every scaled planet orbit."""
    extents = [layout.max_extent]
    extents.extend(
        planet.display_sma(orbit_scale, config=config) for planet in planets
    )
    extent = float(max(extents))
    if not extent > 0:
        return config.default_extent
    return extent


def framing_distance(extent: float, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Camera distance keeping ``extent`` on screen with some padding."""
    half_fov = (config.fov_deg / 2 * u.deg).to(u.rad).value
    dist = extent * config.frame_padding / np.tan(half_fov)
    return float(
        np.clip(dist, config.camera_min_distance, config.camera_max_distance)
    )


def max_orbit_distance(extent: float, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """How far the user may zoom out while a system is selected."""
    return float(
        min(
            config.system_max_orbit_distance,
            max(config.galaxy_max_orbit_distance, extent * 4),
        )
    )


def frame_system(
    center: Sequence[float], extent: float, config: LayoutConfig = DEFAULT_CONFIG
) -> CameraPose:
    """Pose above and behind a system, looking at its center.

    Args:
        center: World position of the system.
        extent: Visual radius of the system, see :func:`system_extent`.
        config: Camera constants.
    """
    if not extent > 0:
        extent = config.default_extent
    center = np.asarray(center, dtype=float)
    dist = framing_distance(extent, config=config)
    direction = np.array(
        [0.0, config.camera_elevation_frac, config.camera_forward_frac]
    )
    direction /= np.linalg.norm(direction)
    return CameraPose(
        position=center + dist * direction,
        look_at=center.copy(),
        max_distance=max_orbit_distance(extent, config=config),
    )


def galaxy_pose(config: LayoutConfig = DEFAULT_CONFIG) -> CameraPose:
    """Fixed overview pose of the whole galaxy."""
    return CameraPose(
        position=np.array(config.galaxy_camera_position, dtype=float),
        look_at=np.array(config.galaxy_look_at, dtype=float),
        max_distance=config.galaxy_max_orbit_distance,
    )
