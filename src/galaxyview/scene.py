"""Assemble everything a renderer needs to draw the galaxy or one system.

The system pipeline runs star layout -> orbit scale -> planet geometry ->
camera framing. All positions are in world coordinates, i.e. offset by the
system's position in the galaxy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from galaxyview.base.planet import Planet
from galaxyview.base.system import StarSystem
from galaxyview.camera import CameraPose, frame_system, system_extent
from galaxyview.config import DEFAULT_CONFIG, LayoutConfig
from galaxyview.layout import (
    OrbitTrail,
    StarLayout,
    compute_orbit_scale,
    compute_star_layout,
)
from galaxyview.util.spectral import hex_to_rgb


@dataclass(frozen=True)
class StarRender:
    name: str
    position: np.ndarray
    display_radius: float
    color: str
    rgb: Tuple[int, int, int]
    light_intensity: float
    glow_radius: float


@dataclass(frozen=True)
class PlanetRender:
    id: str
    name: str
    position: np.ndarray
    display_radius: float
    path: np.ndarray
    primary_color: str
    secondary_color: str
    rgb: Tuple[int, int, int]
    atmosphere: dict


@dataclass(frozen=True)
class SystemScene:
    system_id: str
    center: np.ndarray
    layout: StarLayout
    stars: Tuple[StarRender, ...]
    trails: Tuple[OrbitTrail, ...]
    planets: Tuple[PlanetRender, ...]
    orbit_scale: float
    extent: float
    camera: CameraPose


@dataclass(frozen=True)
class StarMarker:
    system_id: str
    name: str
    position: np.ndarray
    display_radius: float
    hit_radius: float
    color: str
    rgb: Tuple[int, int, int]
    highlighted: bool
    glow_scale: float
    light_intensity: float
    ring_radii: Tuple[float, float]  # inner, outer; drawn only when highlighted


def build_system_scene(
    system: StarSystem,
    planets: Sequence[Planet],
    phase: float = 0.0,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> SystemScene:
    """Lay out one selected system.

    Args:
        system: The selected system.
        planets: Its planets, may be empty.
        phase: Rotation phase of the star orbits [rad].
        config: Layout constants.

    Returns:
        :class:`SystemScene` with world-space geometry and the camera target.
    """
    center = system.world_position()
    layout = compute_star_layout(system.stars, config=config)
    orbit_scale = compute_orbit_scale(layout.max_extent, planets, config=config)

    star_positions = layout.positions(phase) + center
    stars = tuple(
        StarRender(
            name=star.name,
            position=pos,
            display_radius=entry.display_radius,
            color=entry.color,
            rgb=hex_to_rgb(entry.color),
            light_intensity=(
                config.primary_light_intensity
                if i == 0
                else config.companion_light_intensity
            ),
            glow_radius=entry.display_radius * config.star_glow_scale,
        )
        for i, (star, entry, pos) in enumerate(
            zip(system.stars, layout.entries, star_positions)
        )
    )

    trails = tuple(
        OrbitTrail(radius=t.radius, color=t.color, points=t.points + center)
        for t in layout.orbit_trails(
            config.orbit_segments, precision=config.star_trail_precision
        )
    )

    planet_renders = tuple(
        PlanetRender(
            id=planet.id,
            name=planet.name,
            position=planet.calc_position(orbit_scale, config=config) + center,
            display_radius=planet.display_radius(config=config),
            path=planet.orbit_path(orbit_scale, config=config) + center,
            primary_color=planet.primary_color,
            secondary_color=planet.secondary_color,
            rgb=hex_to_rgb(planet.primary_color),
            atmosphere=planet.atmosphere(config=config),
        )
        for planet in planets
    )

    extent = system_extent(layout, planets, orbit_scale, config=config)
    return SystemScene(
        system_id=system.id,
        center=center,
        layout=layout,
        stars=stars,
        trails=trails,
        planets=planet_renders,
        orbit_scale=orbit_scale,
        extent=extent,
        camera=frame_system(center, extent, config=config),
    )


def build_galaxy_markers(
    systems: Sequence[StarSystem],
    highlighted_id: Optional[str] = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[StarMarker]:
    """One marker per system, sized and colored after its primary star.

    The marker of ``highlighted_id`` (pre-selection, before the system view is
    entered) gets the larger glow, the brighter light and a selection ring.
    """
    inner, outer = config.selection_ring
    markers = []
    for system in systems:
        radius = system.marker_radius(config=config)
        color = system.primary.color
        highlighted = system.id == highlighted_id
        markers.append(
            StarMarker(
                system_id=system.id,
                name=system.name,
                position=system.world_position(),
                display_radius=radius,
                hit_radius=max(radius * 2, config.marker_hit_radius),
                color=color,
                rgb=hex_to_rgb(color),
                highlighted=highlighted,
                glow_scale=(
                    config.marker_selected_glow_scale
                    if highlighted
                    else config.marker_glow_scale
                ),
                light_intensity=(
                    config.marker_selected_light_intensity
                    if highlighted
                    else config.marker_light_intensity
                ),
                ring_radii=(radius * inner, radius * outer),
            )
        )
    return markers
