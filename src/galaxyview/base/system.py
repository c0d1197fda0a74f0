import astropy.units as u
import numpy as np
import pandas as pd

import galaxyview.util.misc as misc
from galaxyview.base.star import Star
from galaxyview.config import DEFAULT_CONFIG


class StarSystem:
    """
    Class for a single star system. Must have at least one star, the first
    one is the primary.
    """

    def __init__(self, system_dict) -> None:
        self.id = system_dict.get("id", "")
        self.name = system_dict.get("name", self.id)
        self.description = system_dict.get("description", "")
        self.system_type = system_dict.get("systemType", "")

        self.stars = [
            star if isinstance(star, Star) else Star(star)
            for star in system_dict.get("stars") or []
        ]
        if not self.stars:
            raise ValueError(f"Star system {self.id!r} has no stars")

        position = system_dict.get("position") or {}
        self.azimuth = misc.as_float(position.get("azimuth"), 0.0) * u.deg
        self.distance = misc.as_float(position.get("distance"), 0.0)
        self.elevation = misc.as_float(position.get("elevation"), 0.0)

        if not self.system_type:
            self.system_type = self.classify()

    def __repr__(self):
        return (
            f"{self.name}\tType:{self.system_type}\t"
            f"Primary:{self.primary.spectral_class or '?'}\n\n"
            f"Stars:\n{self.get_s_df()}"
        )

    @property
    def primary(self):
        return self.stars[0]

    def classify(self):
        """Single, binary or multi, from the number of stars"""
        if len(self.stars) == 1:
            return "single"
        if len(self.stars) == 2:
            return "binary"
        return "multi"

    def world_position(self):
        """Scene position of the system's barycenter"""
        return misc.cyl_to_cartesian(self.azimuth, self.distance, self.elevation)

    def getsattr(self, attr):
        # Array of an attribute of all the stars, e.g. all masses
        return np.array([getattr(star, attr) for star in self.stars])

    def get_s_df(self):
        s_df = pd.DataFrame([star.dump_params() for star in self.stars])
        s_df["effective_mass"] = self.getsattr("effective_mass")
        s_df["color"] = self.getsattr("color")
        return s_df

    def marker_radius(self, config=DEFAULT_CONFIG):
        return self.primary.marker_radius(config=config)
