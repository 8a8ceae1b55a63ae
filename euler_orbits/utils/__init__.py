"""Configuration utilities."""

from euler_orbits.utils.config import SimulationConfig, load_config, save_config

__all__ = ["SimulationConfig", "load_config", "save_config"]
