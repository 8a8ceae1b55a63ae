"""Tests for configuration loading and saving."""

import json

import pytest
from euler_orbits.physics.errors import InvalidConfigError
from euler_orbits.physics.integrators import IntegrationMethod
from euler_orbits.utils.config import SimulationConfig, load_config, save_config


def test_defaults_match_reference_run():
    """Test default config is one year of one-hour steps."""
    config = SimulationConfig()

    assert config.time_step == 3600.0
    assert config.step_count == 8760
    assert config.gravitational_constant == 6.674e-11
    assert config.resolve_method() is IntegrationMethod.SYMPLECTIC
    assert config.preset == "earth_moon"


def test_save_load_json(tmp_path):
    """Test JSON round trip, with the method enum stored as its token."""
    config = SimulationConfig(time_step=60.0, step_count=10, method=IntegrationMethod.NAIVE)
    path = tmp_path / "config.json"

    save_config(config, str(path))

    assert json.loads(path.read_text())["method"] == "naive"
    loaded = load_config(str(path))
    assert loaded.time_step == 60.0
    assert loaded.step_count == 10
    assert loaded.resolve_method() is IntegrationMethod.NAIVE


def test_save_load_yaml(tmp_path):
    """Test YAML round trip."""
    pytest.importorskip("yaml")
    config = SimulationConfig(gravitational_constant=1.0, preset="sun_earth_moon")
    path = tmp_path / "config.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_unknown_keys_rejected(tmp_path):
    """Test typos in config files are reported instead of ignored."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"timestep": 60.0}))

    with pytest.raises(InvalidConfigError):
        load_config(str(path))


def test_unreadable_config_rejected(tmp_path):
    """Test missing files, malformed JSON and non-mapping documents."""
    with pytest.raises(InvalidConfigError):
        load_config(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{time_step: 60")
    with pytest.raises(InvalidConfigError):
        load_config(str(broken))

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2, 3]")
    with pytest.raises(InvalidConfigError):
        load_config(str(listing))


def test_malformed_yaml_rejected(tmp_path):
    """Test YAML syntax errors are configuration errors."""
    pytest.importorskip("yaml")
    path = tmp_path / "config.yaml"
    path.write_text("time_step: [60\n")

    with pytest.raises(InvalidConfigError):
        load_config(str(path))
