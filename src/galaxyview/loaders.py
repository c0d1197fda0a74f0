"""Build :class:`Galaxy` snapshots from world data store records.

Records are plain dicts with the store's camelCase field names, as handed
over by the data-access layer. Missing optional fields get defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from galaxyview.base.planet import Planet
from galaxyview.base.system import StarSystem
from galaxyview.base.universe import Galaxy

log = logging.getLogger(__name__)

SYSTEMS_KEY = "star-systems"
PLANETS_KEY = "planets"


def _load_systems(records: Iterable[dict]) -> list[StarSystem]:
    systems = []
    for record in records:
        try:
            systems.append(StarSystem(record))
        except ValueError as err:
            log.warning("Skipping star system: %s", err)
    return systems


def _load_planets(records: Iterable[dict], system_ids: set) -> list[Planet]:
    planets = []
    for record in records:
        planet = Planet(record)
        if planet.star_system_id not in system_ids:
            log.warning(
                "Planet %r references unknown star system %r",
                planet.name,
                planet.star_system_id,
            )
        planets.append(planet)
    return planets


def from_records(
    system_records: Iterable[dict],
    planet_records: Optional[Iterable[dict]] = None,
    world_id: Optional[str] = None,
) -> Galaxy:
    """Create a :class:`Galaxy` from star system and planet records.

    Args:
        system_records: Star system records, each with a ``stars`` list.
        planet_records: Planet records, linked by ``starSystemId``.
        world_id: Id of the world the records belong to.

    Returns:
        :class:`Galaxy` snapshot. Systems without stars are dropped.
    """
    systems = _load_systems(system_records)
    planets = _load_planets(planet_records or [], {s.id for s in systems})
    log.info(
        "Loaded %d star systems and %d planets for world %s",
        len(systems),
        len(planets),
        world_id,
    )
    return Galaxy(systems, planets, world_id=world_id)


def from_json(path: Union[str, Path]) -> Galaxy:
    """Load a JSON snapshot ``{"worldId", "star-systems", "planets"}``."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return from_records(
        data.get(SYSTEMS_KEY, []),
        data.get(PLANETS_KEY, []),
        world_id=data.get("worldId"),
    )
