"""Tunable constants for the galaxy map geometry.

Every public computation takes an optional ``config`` argument and falls
back to :data:`DEFAULT_CONFIG`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LayoutConfig:
    # Galaxy markers
    marker_base_radius: float = 0.12
    marker_radius_clamp: Tuple[float, float] = (0.6, 2.0)
    marker_hit_radius: float = 0.7
    marker_glow_scale: float = 2.2
    marker_selected_glow_scale: float = 3.5
    marker_light_intensity: float = 0.6
    marker_selected_light_intensity: float = 2.0
    selection_ring: Tuple[float, float] = (1.6, 2.0)  # inner, outer x radius

    # System view star sizes, max(min, sqrt(r) * factor)
    primary_min_radius: float = 0.6
    primary_radius_factor: float = 0.8
    companion_min_radius: float = 0.4
    companion_radius_factor: float = 0.6
    star_glow_scale: float = 1.5
    primary_light_intensity: float = 8.0
    companion_light_intensity: float = 5.0

    # Multi-star layout
    safety_factor: float = 2.5
    data_orbit_scale: float = 20.0
    star_trail_precision: int = 4

    # Planet orbits
    orbit_base_unit: float = 9.0
    exclusion_buffer: float = 1.5
    orbit_segments: int = 96
    planet_min_radius: float = 0.25
    planet_radius_factor: float = 0.45
    atmosphere_threshold: float = 0.05
    atmosphere_scale: float = 1.12
    atmosphere_opacity: float = 0.4

    # Camera
    fov_deg: float = 55.0
    frame_padding: float = 1.35
    camera_min_distance: float = 10.0
    camera_max_distance: float = 200.0
    camera_elevation_frac: float = 0.55
    camera_forward_frac: float = 0.75
    default_extent: float = 5.0
    galaxy_camera_position: Tuple[float, float, float] = (0.0, 30.0, 35.0)
    galaxy_look_at: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    galaxy_max_orbit_distance: float = 80.0
    system_max_orbit_distance: float = 300.0

    def replace(self, **overrides) -> "LayoutConfig":
        """Copy of this config with some fields swapped out"""
        return dataclasses.replace(self, **overrides)


DEFAULT_CONFIG = LayoutConfig()

# Seconds the external camera animator spends interpolating between poses
TRANSITION_SECONDS = 1.5
