import logging

import numpy as np

from galaxyview.config import DEFAULT_CONFIG

log = logging.getLogger(__name__)

# Harvard classes, hot to cool
SPECTRAL_COLORS = {
    "O": "#5c7aff",
    "B": "#7a9fff",
    "A": "#a4bfff",
    "F": "#f5f0ff",
    "G": "#ffe44d",
    "K": "#ff8c00",
    "M": "#ff4500",
}
FALLBACK_COLOR = "#ffffff"

# Marker size multiplier relative to a G star
SPECTRAL_SCALE = {
    "O": 1.6,
    "B": 1.6,
    "F": 1.2,
    "G": 1.0,
    "K": 0.85,
    "M": 0.65,
}


def spectral_letter(spectral_class):
    """
    Normalize a spectral classification to its upper case class letter,
    "G2V" -> "G". Returns "" for missing or non-string values.
    """
    if not isinstance(spectral_class, str):
        return ""
    spectral_class = spectral_class.strip()
    return spectral_class[:1].upper()


def spectral_color(spectral_class):
    """
    Display color for a spectral class as a '#rrggbb' string, white for
    anything unrecognized
    """
    letter = spectral_letter(spectral_class)
    if letter not in SPECTRAL_COLORS:
        log.debug("No color for spectral class %r, using fallback", spectral_class)
    return SPECTRAL_COLORS.get(letter, FALLBACK_COLOR)


def star_display_radius(spectral_class, physical_radius, config=DEFAULT_CONFIG):
    """
    Galaxy-view marker radius of a star.

    The physical radius is clamped so a single extreme star can't dominate
    the view.

    Args:
        spectral_class (str):
            Spectral class, only the first letter is used
        physical_radius (float):
            Stellar radius in solar radii
        config (LayoutConfig):
            Size constants

    Returns:
        radius (float):
            Marker radius in scene units
    """
    scale = SPECTRAL_SCALE.get(spectral_letter(spectral_class), 1.0)
    lo, hi = config.marker_radius_clamp
    return config.marker_base_radius * scale * float(np.clip(physical_radius, lo, hi))


def system_display_radius(physical_radius, primary=True, config=DEFAULT_CONFIG):
    """
    System-view radius of a star, square root compressed with a floor. The
    primary gets a larger floor and factor than its companions.
    """
    root = np.sqrt(max(physical_radius, 0.0))
    if primary:
        return max(config.primary_min_radius, root * config.primary_radius_factor)
    return max(config.companion_min_radius, root * config.companion_radius_factor)


def planet_display_radius(render_radius, config=DEFAULT_CONFIG):
    """System-view radius of a planet sphere"""
    root = np.sqrt(max(render_radius, 0.0))
    return max(config.planet_min_radius, root * config.planet_radius_factor)


def hex_to_rgb(hex_str):
    """Convert '#rrggbb', 'rrggbb' or '#rgb' to an (r, g, b) tuple, white if malformed"""
    if not isinstance(hex_str, str) or not hex_str:
        return (255, 255, 255)
    s = hex_str.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        return (255, 255, 255)
    try:
        return tuple(int(s[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return (255, 255, 255)
