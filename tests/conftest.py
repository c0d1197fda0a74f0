import pytest

from galaxyview.base import Planet, StarSystem


def make_planet(sma, e=0.0, inc=0.0, angle=0.0, system_id="sys-1", **render):
    return Planet(
        {
            "id": f"p-{sma}-{e}",
            "name": f"Planet {sma}",
            "starSystemId": system_id,
            "orbit": {
                "semiMajorAxis": sma,
                "eccentricity": e,
                "inclination": inc,
                "currentAngle": angle,
            },
            "render": {
                "radius": render.get("radius", 1.0),
                "primaryColor": "#3366ff",
                "atmosphereColor": "#aaccff",
                "atmosphereIntensity": render.get("atmosphereIntensity", 0.5),
            },
        }
    )


@pytest.fixture
def binary_records():
    return {
        "id": "sys-1",
        "name": "Castor",
        "position": {"azimuth": 30.0, "distance": 20.0, "elevation": 1.5},
        "stars": [
            {"name": "Castor A", "spectralClass": "G", "mass": 2, "radius": 1},
            {"name": "Castor B", "spectralClass": "M", "mass": 1, "radius": 0.5},
        ],
    }


@pytest.fixture
def binary_system(binary_records):
    return StarSystem(binary_records)


@pytest.fixture
def single_system():
    return StarSystem(
        {
            "id": "sys-2",
            "name": "Sol",
            "position": {"azimuth": 0.0, "distance": 0.0, "elevation": 0.0},
            "stars": [{"name": "Sol", "spectralClass": "G", "mass": 1, "radius": 4}],
        }
    )


@pytest.fixture
def planet_factory():
    return make_planet
