"""Tests for preset scenarios."""

import numpy as np
import pytest
from euler_orbits.physics.simulator import Simulator
from euler_orbits.presets import EarthMoon, SunEarthMoon, get_preset
from euler_orbits.utils.config import SimulationConfig


def test_earth_moon():
    """Test the reference initial conditions."""
    preset = EarthMoon()
    earth, moon = preset.generate()

    assert preset.name == "earth_moon"
    assert earth.name == "Earth"
    assert earth.mass == 5.9722e24
    assert np.array_equal(earth.position, [0.0, 0.0])
    assert np.array_equal(earth.velocity, [0.0, -12.5])
    assert moon.name == "Moon"
    assert moon.mass == 7.342e22
    assert np.array_equal(moon.position, [384405000.0, 0.0])
    assert np.array_equal(moon.velocity, [0.0, 1022.0])


def test_generate_returns_fresh_bodies():
    """Test mutating one generated list does not leak into the next."""
    preset = EarthMoon()
    first = preset.generate()
    first[0].position[0] = 1.0

    second = preset.generate()
    assert second[0].position[0] == 0.0


def test_sun_earth_moon():
    """Test the three-body preset keeps Earth and Moon as the reported pair."""
    preset = SunEarthMoon()
    bodies = preset.generate()

    assert preset.name == "sun_earth_moon"
    assert [body.name for body in bodies] == ["Earth", "Moon", "Sun"]
    earth, moon, _ = bodies
    assert moon.position[0] - earth.position[0] == pytest.approx(384405000.0)
    assert moon.velocity[1] - earth.velocity[1] == pytest.approx(1034.5)


def test_sun_earth_moon_runs():
    """Test a short three-body run keeps the Earth-Moon pair bound."""
    records = []
    sim = Simulator(SimulationConfig(step_count=24 * 30), on_record=records.append)
    sim.initialize(SunEarthMoon().generate())
    sim.run()

    assert len(records) == 24 * 30
    distances = np.array([record.distance for record in records])
    assert np.all(np.abs(distances - 384405000.0) / 384405000.0 < 0.1)


def test_get_preset():
    """Test preset lookup by name."""
    assert isinstance(get_preset("earth_moon"), EarthMoon)
    assert isinstance(get_preset("SUN_EARTH_MOON"), SunEarthMoon)
    with pytest.raises(ValueError):
        get_preset("jupiter")
