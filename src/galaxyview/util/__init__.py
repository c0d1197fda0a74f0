__all__ = [
    "cyl_to_cartesian",
    "cartesian_to_azimuth",
    "rotate_vectors",
    "tilt_orbital_plane",
    "closed_circle",
    "as_float",
    "spectral_letter",
    "spectral_color",
    "star_display_radius",
    "system_display_radius",
    "planet_display_radius",
    "hex_to_rgb",
]

from .misc import (
    cyl_to_cartesian,
    cartesian_to_azimuth,
    rotate_vectors,
    tilt_orbital_plane,
    closed_circle,
    as_float,
)
from .spectral import (
    spectral_letter,
    spectral_color,
    star_display_radius,
    system_display_radius,
    planet_display_radius,
    hex_to_rgb,
)
