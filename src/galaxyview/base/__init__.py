__all__ = ["Galaxy", "Planet", "Star", "StarSystem"]

from .planet import Planet
from .star import Star
from .system import StarSystem
from .universe import Galaxy
