"""Earth-Moon pair orbiting the Sun."""

from typing import List

from euler_orbits.physics.body import Body
from euler_orbits.presets.base import Preset
from euler_orbits.presets.earth_moon import (
    EARTH_MASS,
    EARTH_MOON_DISTANCE,
    EARTH_RECOIL_SPEED,
    MOON_MASS,
    MOON_ORBITAL_SPEED,
)

SUN_MASS = 1.98892e30  # kg
ASTRONOMICAL_UNIT = 1.495978707e11  # m
EARTH_ORBITAL_SPEED = 29780.0  # m/s


class SunEarthMoon(Preset):
    """Three-body variant: the Earth-Moon system on its heliocentric orbit.

    Earth and Moon come first so per-step records still report their
    separation. The Sun is listed last and starts at rest at the origin.
    """

    @property
    def name(self) -> str:
        return "sun_earth_moon"

    def generate(self) -> List[Body]:
        return [
            Body(
                "Earth",
                EARTH_MASS,
                position=(ASTRONOMICAL_UNIT, 0.0),
                velocity=(0.0, EARTH_ORBITAL_SPEED + EARTH_RECOIL_SPEED),
            ),
            Body(
                "Moon",
                MOON_MASS,
                position=(ASTRONOMICAL_UNIT + EARTH_MOON_DISTANCE, 0.0),
                velocity=(0.0, EARTH_ORBITAL_SPEED + MOON_ORBITAL_SPEED),
            ),
            Body("Sun", SUN_MASS, position=(0.0, 0.0), velocity=(0.0, 0.0)),
        ]
