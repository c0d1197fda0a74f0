import pandas as pd


class Galaxy:
    """
    The star systems and planets of one world, a read-only snapshot for the
    duration of a visualization session
    """

    def __init__(self, systems, planets=None, world_id=None) -> None:
        self.world_id = world_id
        self.systems = list(systems)
        self.planets = list(planets or [])
        self._systems_by_id = {system.id: system for system in self.systems}

    def __repr__(self):
        str = f"Galaxy of world {self.world_id}\n"
        str += f"{len(self.systems)} systems, {len(self.planets)} planets loaded"
        return str

    def __len__(self):
        return len(self.systems)

    def get_system(self, system_id):
        """Raises KeyError for an unknown id"""
        return self._systems_by_id[system_id]

    def planets_for(self, system):
        """Planets belonging to a system, given the system or its id"""
        system_id = getattr(system, "id", system)
        return [p for p in self.planets if p.star_system_id == system_id]

    def get_systems_df(self):
        rows = []
        for system in self.systems:
            x, y, z = system.world_position()
            rows.append(
                {
                    "id": system.id,
                    "name": system.name,
                    "type": system.system_type,
                    "n_stars": len(system.stars),
                    "n_planets": len(self.planets_for(system)),
                    "primary": system.primary.spectral_class,
                    "x": x,
                    "y": y,
                    "z": z,
                }
            )
        return pd.DataFrame(rows)
