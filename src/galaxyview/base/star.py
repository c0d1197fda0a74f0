import logging

from galaxyview.config import DEFAULT_CONFIG
from galaxyview.util.misc import as_float
from galaxyview.util.spectral import (
    spectral_color,
    spectral_letter,
    star_display_radius,
    system_display_radius,
)

log = logging.getLogger(__name__)


class Star:
    """
    A star of a system, built from a star record of the world data store
    """

    def __init__(self, star_dict):
        self.name = star_dict.get("name", "")
        self.spectral_class = spectral_letter(star_dict.get("spectralClass"))
        self.luminosity_class = star_dict.get("luminosityClass", "")
        self.surface_temperature = as_float(star_dict.get("surfaceTemperature"), None)
        self.radius = as_float(star_dict.get("radius"), 1.0)
        self.mass = as_float(star_dict.get("mass"), None)

        # Author-given placement hints, only ever a lower bound on the layout
        self.orbit_radius = as_float(star_dict.get("orbitRadius"), None)
        self.orbit_angle = as_float(star_dict.get("orbitAngle"), None)

    def __repr__(self):
        return (
            f"{type(self).__name__} object\n{self.name}\t"
            f"Type:{self.spectral_class or '?'}\tmass:{self.mass}\tradius:{self.radius}"
        )

    @property
    def effective_mass(self):
        """Mass used by the layout, non-positive or missing masses count as 1"""
        if self.mass is None or self.mass <= 0:
            log.debug("Star %r has mass %r, defaulting to 1", self.name, self.mass)
            return 1.0
        return self.mass

    @property
    def color(self):
        return spectral_color(self.spectral_class)

    def marker_radius(self, config=DEFAULT_CONFIG):
        """Radius of the galaxy-view marker for a system with this primary"""
        return star_display_radius(self.spectral_class, self.radius, config=config)

    def system_display_radius(self, primary=True, config=DEFAULT_CONFIG):
        """Radius of this star inside the system view"""
        return system_display_radius(self.radius, primary=primary, config=config)

    def dump_params(self):
        return {
            "name": self.name,
            "spectral_class": self.spectral_class,
            "luminosity_class": self.luminosity_class,
            "surface_temperature": self.surface_temperature,
            "radius": self.radius,
            "mass": self.mass,
            "orbit_radius": self.orbit_radius,
            "orbit_angle": self.orbit_angle,
        }
