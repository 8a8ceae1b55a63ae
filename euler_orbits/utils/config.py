"""Configuration management."""

import json
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Union

from euler_orbits.physics.errors import InvalidConfigError
from euler_orbits.physics.integrators.base import IntegrationMethod

SECONDS_PER_HOUR = 3600.0
HOURS_PER_YEAR = 24 * 365


@dataclass
class SimulationConfig:
    """Simulation configuration.

    Defaults reproduce the Earth-Moon reference run: one-hour steps for one
    year.
    """
    time_step: float = SECONDS_PER_HOUR
    step_count: int = HOURS_PER_YEAR
    gravitational_constant: float = 6.674e-11
    method: Union[str, IntegrationMethod] = IntegrationMethod.SYMPLECTIC.value

    # CLI only
    preset: str = "earth_moon"

    def resolve_method(self) -> IntegrationMethod:
        return IntegrationMethod.from_token(self.method)

    def to_dict(self) -> dict:
        data = asdict(self)
        if isinstance(data["method"], Enum):
            data["method"] = data["method"].value
        return data


def _load_yaml(f) -> dict:
    try:
        import yaml
    except ImportError:
        raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
    try:
        return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(str(e)) from e


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        SimulationConfig object

    Raises:
        InvalidConfigError: If the file cannot be read or parsed, is not a
            mapping, or contains unknown keys
    """
    config_path = Path(config_path)

    try:
        with open(config_path, 'r') as f:
            if config_path.suffix in ('.yaml', '.yml'):
                data = _load_yaml(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise InvalidConfigError(f"Cannot read config file {config_path}: {e}") from e
    except ValueError as e:
        # json.JSONDecodeError and yaml.YAMLError (re-raised as ValueError)
        raise InvalidConfigError(f"Cannot parse config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

    known = {field.name for field in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidConfigError(f"Unknown configuration keys in {config_path}: {', '.join(unknown)}")

    return SimulationConfig(**data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = config.to_dict()

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
