import warnings

import astropy.units as u
import numpy as np
import pandas as pd

import galaxyview.util.misc as misc
from galaxyview.config import DEFAULT_CONFIG
from galaxyview.util.spectral import planet_display_radius


class Planet:
    """
    Class for a planet of a star system.

    The orbit is drawn as an ellipse centered on the system barycenter with
    square root compressed semi-major axis, so distant planets don't dominate
    the view.
    """

    def __init__(self, planet_dict) -> None:
        self.id = planet_dict.get("id", "")
        self.name = planet_dict.get("name", self.id)
        self.star_system_id = planet_dict.get("starSystemId")
        self.type = planet_dict.get("type", "")
        self.habitability = planet_dict.get("habitability", "")

        orbit = planet_dict.get("orbit") or {}
        self.sma = misc.as_float(orbit.get("semiMajorAxis"), 1.0)
        self.e = misc.as_float(orbit.get("eccentricity"), 0.0)
        self.inc = misc.as_float(orbit.get("inclination"), 0.0) * u.deg
        self.current_angle = misc.as_float(orbit.get("currentAngle"), 0.0) * u.deg
        self.period = misc.as_float(orbit.get("orbitalPeriod"), None)

        render = planet_dict.get("render") or {}
        self.render_radius = misc.as_float(render.get("radius"), 1.0)
        self.primary_color = render.get("primaryColor", "#ffffff")
        self.secondary_color = render.get("secondaryColor", self.primary_color)
        self.atmosphere_color = render.get("atmosphereColor", self.primary_color)
        self.atmosphere_intensity = float(
            np.clip(misc.as_float(render.get("atmosphereIntensity"), 0.0), 0, 1)
        )

        if not 0 <= self.e < 1:
            warnings.warn(
                f"Planet {self.name!r} has eccentricity {self.e}, only closed "
                "orbits (0 <= e < 1) have a defined geometry.",
                UserWarning,
                stacklevel=2,
            )

    def __repr__(self):
        """
        Make dataframe with planet attributes
        """
        params = self.dump_params()
        res = {}
        for key, val in params.items():
            if type(val) == u.Quantity:
                res[key] = val.value
            else:
                res[key] = val
        p_df = pd.DataFrame(res, index=[0])

        return f"{type(self).__name__} object\n{p_df}"

    def dump_params(self):
        params = {
            "id": self.id,
            "star_system_id": self.star_system_id,
            "a": self.sma,
            "e": self.e,
            "inc": self.inc,
            "current_angle": self.current_angle,
            "radius": self.render_radius,
            "atmosphere_intensity": self.atmosphere_intensity,
        }
        return params

    def display_sma(self, orbit_scale=1, config=DEFAULT_CONFIG):
        """Semi-major axis in scene units"""
        return np.sqrt(self.sma) * config.orbit_base_unit * orbit_scale

    def display_semi_minor(self, orbit_scale=1, config=DEFAULT_CONFIG):
        a = self.display_sma(orbit_scale, config=config)
        return a * np.sqrt(1 - self.e**2)

    def perihelion(self, orbit_scale=1, config=DEFAULT_CONFIG):
        """Closest approach to the barycenter in scene units"""
        return self.display_sma(orbit_scale, config=config) * (1 - self.e)

    def calc_position(self, orbit_scale=1, angle=None, config=DEFAULT_CONFIG):
        """
        Position of the planet in the system frame

        Args:
            orbit_scale (float):
                Uniform outward scale applied to the orbit
            angle (float or astropy Quantity):
                Orbital angle to evaluate at, degrees if a bare number.
                Defaults to the planet's current angle
            config (LayoutConfig):
                Orbit constants

        Returns:
            r (np.array):
                [x, y, z] position relative to the system barycenter
        """
        if angle is None:
            angle = self.current_angle
        theta = u.Quantity(angle, u.deg).to(u.rad).value
        a = self.display_sma(orbit_scale, config=config)
        b = self.display_semi_minor(orbit_scale, config=config)
        r = np.array([a * np.cos(theta), 0.0, b * np.sin(theta)])
        return misc.tilt_orbital_plane(r, self.inc)

    def orbit_path(self, orbit_scale=1, segments=None, config=DEFAULT_CONFIG):
        """
        Closed polyline of the whole orbit for drawing

        Returns:
            path (np.array):
                (segments + 1) x 3 array, the last point repeats the first
        """
        if segments is None:
            segments = config.orbit_segments
        theta = np.linspace(0, 2 * np.pi, segments + 1)
        a = self.display_sma(orbit_scale, config=config)
        b = self.display_semi_minor(orbit_scale, config=config)
        flat = np.stack(
            [a * np.cos(theta), np.zeros_like(theta), b * np.sin(theta)], axis=1
        )
        flat[-1] = flat[0]
        return misc.tilt_orbital_plane(flat, self.inc)

    def display_radius(self, config=DEFAULT_CONFIG):
        return planet_display_radius(self.render_radius, config=config)

    def atmosphere(self, config=DEFAULT_CONFIG):
        """
        Atmosphere glow parameters for the renderer
        """
        return {
            "color": self.atmosphere_color,
            "intensity": self.atmosphere_intensity,
            "visible": self.atmosphere_intensity > config.atmosphere_threshold,
            "opacity": self.atmosphere_intensity * config.atmosphere_opacity,
            "radius": self.display_radius(config=config) * config.atmosphere_scale,
        }
