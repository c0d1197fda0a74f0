"""Multi-star placement and planet orbit scaling.

Stars of a system circle a common barycenter at the origin, equally spaced
in angle, each at a radius inversely proportional to its mass so that
``sum(m_i * r_i)`` vanishes at every rotation phase. Planet orbits are then
pushed outward uniformly until none of them dips into the stars' exclusion
zone.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from galaxyview.base.planet import Planet
from galaxyview.base.star import Star
from galaxyview.config import DEFAULT_CONFIG, LayoutConfig
from galaxyview.util.misc import closed_circle

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StarLayoutEntry:
    display_radius: float
    color: str
    mass: float
    orbit_radius: float
    phase_offset: float  # radians, 2*pi*i/N


@dataclass(frozen=True)
class OrbitTrail:
    radius: float
    color: str
    points: np.ndarray  # (segments + 1, 3), closed


@dataclass(frozen=True)
class StarLayout:
    entries: Tuple[StarLayoutEntry, ...]
    k: float
    max_extent: float

    @property
    def orbit_radii(self) -> np.ndarray:
        return np.array([entry.orbit_radius for entry in self.entries])

    @property
    def display_radii(self) -> np.ndarray:
        return np.array([entry.display_radius for entry in self.entries])

    @property
    def masses(self) -> np.ndarray:
        return np.array([entry.mass for entry in self.entries])

    def positions(self, phase: float = 0.0) -> np.ndarray:
        """Star positions around the barycenter at a rotation phase [rad], shape ``(N, 3)``."""
        radii = self.orbit_radii
        angles = phase + np.array([entry.phase_offset for entry in self.entries])
        return np.stack(
            [radii * np.cos(angles), np.zeros_like(radii), radii * np.sin(angles)],
            axis=1,
        )

    def orbit_trails(
        self, segments: int = DEFAULT_CONFIG.orbit_segments, precision: int = 4
    ) -> list[OrbitTrail]:
        """Circular trails of the star orbits, one per distinct radius."""
        if len(self.entries) < 2:
            return []
        seen: dict[float, OrbitTrail] = {}
        for entry in self.entries:
            key = round(entry.orbit_radius, precision)
            if key not in seen:
                seen[key] = OrbitTrail(
                    radius=entry.orbit_radius,
                    color=entry.color,
                    points=closed_circle(entry.orbit_radius, segments),
                )
        return list(seen.values())


def _pair_distance_coeff(m_i: float, m_j: float, angle: float) -> float:
    """Separation of two stars at radii k/m_i, k/m_j per unit of k (law of cosines)."""
    return np.sqrt(
        1 / (m_i * m_i) + 1 / (m_j * m_j) - 2 * np.cos(angle) / (m_i * m_j)
    )


def collision_bound(
    display_radii: Sequence[float],
    masses: Sequence[float],
    safety_factor: float = DEFAULT_CONFIG.safety_factor,
) -> float:
    """Smallest k keeping every pair of disks apart at any rotation phase.

    Pairs are separated by a fixed angle ``2*pi*(j - i)/N`` as the whole
    configuration rotates rigidly, so checking each pair once covers every
    phase.

    Args:
        display_radii: Display radius of each star.
        masses: Effective (positive) mass of each star.
        safety_factor: Required separation in units of the summed radii.

    Returns:
        Lower bound on k, 0 for fewer than two stars.
    """
    n = len(masses)
    if n < 2:
        return 0.0
    angle_step = 2 * np.pi / n
    min_k = 0.0
    for i, j in itertools.combinations(range(n), 2):
        required = (display_radii[i] + display_radii[j]) * safety_factor
        coeff = _pair_distance_coeff(masses[i], masses[j], angle_step * (j - i))
        if coeff > 0:
            min_k = max(min_k, required / coeff)
    return float(min_k)


def data_bound(
    stars: Sequence[Star],
    masses: Sequence[float],
    data_orbit_scale: float = DEFAULT_CONFIG.data_orbit_scale,
) -> float:
    """Smallest k honouring the largest author-given orbit separation."""
    n = len(masses)
    max_separation = max(
        [0.0] + [(star.orbit_radius or 0.0) * data_orbit_scale for star in stars]
    )
    if n < 2 or max_separation <= 0:
        return 0.0
    total_mass = float(np.sum(masses))
    if n == 2:
        # r0 + r1 = k (1/m0 + 1/m1) = k M / (m0 m1)
        return max_separation * masses[0] * masses[1] / total_mass
    return max_separation * total_mass / n


def compute_star_layout(
    stars: Sequence[Star], config: LayoutConfig = DEFAULT_CONFIG
) -> StarLayout:
    """Place the stars of one system around their barycenter.

    Args:
        stars: Stars of the system, the first one is the primary.
        config: Layout constants.

    Returns:
        :class:`StarLayout` with per-star radius, color and orbit radius.
    """
    n = len(stars)
    display_radii = [
        star.system_display_radius(primary=(i == 0), config=config)
        for i, star in enumerate(stars)
    ]
    masses = [star.effective_mass for star in stars]
    colors = [star.color for star in stars]

    if n <= 1:
        entries = tuple(
            StarLayoutEntry(r, c, m, 0.0, 0.0)
            for r, c, m in zip(display_radii, colors, masses)
        )
        max_extent = display_radii[0] if display_radii else config.primary_min_radius
        return StarLayout(entries=entries, k=0.0, max_extent=float(max_extent))

    min_k = collision_bound(display_radii, masses, config.safety_factor)
    data_k = data_bound(stars, masses, config.data_orbit_scale)
    k = max(min_k, data_k)
    log.debug("Star layout for %d stars: collision k=%g, data k=%g", n, min_k, data_k)

    entries = tuple(
        StarLayoutEntry(
            display_radius=float(r),
            color=c,
            mass=float(m),
            orbit_radius=float(k / m),
            phase_offset=2 * np.pi * i / n,
        )
        for i, (r, c, m) in enumerate(zip(display_radii, colors, masses))
    )
    max_extent = max(entry.orbit_radius + entry.display_radius for entry in entries)
    return StarLayout(entries=entries, k=float(k), max_extent=float(max_extent))


def compute_orbit_scale(
    max_extent: float, planets: Sequence[Planet], config: LayoutConfig = DEFAULT_CONFIG
) -> float:
    """Uniform outward scale pushing every perihelion out of the exclusion zone.

    The exclusion radius is the star layout extent plus a buffer. With the
    returned scale applied, the innermost perihelion sits exactly on it.

    Returns:
        Scale factor, always >= 1.
    """
    if len(planets) == 0:
        return 1.0
    exclusion_radius = max_extent + config.exclusion_buffer
    perihelia = [planet.perihelion(1, config=config) for planet in planets]
    # No scale moves an orbit that sits on the barycenter
    perihelia = [p for p in perihelia if p > 0]
    if not perihelia:
        return 1.0
    min_perihelion = min(perihelia)
    if min_perihelion >= exclusion_radius:
        return 1.0
    scale = exclusion_radius / min_perihelion
    log.debug(
        "Perihelion %g inside exclusion radius %g, scaling orbits by %g",
        min_perihelion,
        exclusion_radius,
        scale,
    )
    return float(scale)
