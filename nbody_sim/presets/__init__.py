"""Preset scenario generators for N-body simulations."""

from nbody_sim.presets.base import Preset
from nbody_sim.presets.solar_system import SolarSystem
from nbody_sim.presets.two_body import TwoBody

PRESETS = {
    "solar_system": SolarSystem,
    "two_body": TwoBody,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name.
    
    Raises:
        ValueError: If the name is unknown
    """
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = ["Preset", "SolarSystem", "TwoBody", "PRESETS", "get_preset"]
