"""Earth-Moon reference scenario."""

from typing import List

from euler_orbits.physics.body import Body
from euler_orbits.presets.base import Preset

EARTH_MASS = 5.9722e24  # kg
MOON_MASS = 7.342e22  # kg
EARTH_MOON_DISTANCE = 384405000.0  # m, mean orbital distance
MOON_ORBITAL_SPEED = 1022.0  # m/s
# Earth moves opposite to the Moon so total momentum is close to zero
EARTH_RECOIL_SPEED = -12.5  # m/s


class EarthMoon(Preset):
    """Earth at the origin and the Moon on the +x axis, orbiting counter-clockwise."""

    @property
    def name(self) -> str:
        return "earth_moon"

    def generate(self) -> List[Body]:
        return [
            Body("Earth", EARTH_MASS, position=(0.0, 0.0), velocity=(0.0, EARTH_RECOIL_SPEED)),
            Body("Moon", MOON_MASS, position=(EARTH_MOON_DISTANCE, 0.0), velocity=(0.0, MOON_ORBITAL_SPEED)),
        ]
