"""Preset scenario generators."""

from euler_orbits.presets.base import Preset
from euler_orbits.presets.earth_moon import EarthMoon
from euler_orbits.presets.sun_earth_moon import SunEarthMoon

PRESETS = {
    'earth_moon': EarthMoon,
    'sun_earth_moon': SunEarthMoon,
}


def get_preset(name: str) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower()) if isinstance(name, str) else None
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class()


__all__ = ["Preset", "EarthMoon", "SunEarthMoon", "PRESETS", "get_preset"]
