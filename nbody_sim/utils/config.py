"""Configuration management."""

import json
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict
from nbody_sim.physics import constants


@dataclass
class Config:
    """Simulation configuration."""
    # Simulation parameters
    dt: float = 0.01
    dt_min: float = 0.001
    dt_max: float = 0.1
    steps: int = 1000
    integrator: str = "leapfrog"
    force_method: str = "pairwise"
    G: float = constants.G
    
    # Preset parameters
    preset: str = "solar_system"
    preset_params: Dict[str, Any] = None
    
    # Reporting / output
    report_every: int = 100
    save_state: Optional[str] = None
    
    def __post_init__(self):
        if self.preset_params is None:
            self.preset_params = {}
        if self.dt_min > self.dt_max:
            raise ValueError(f"dt_min ({self.dt_min}) must not exceed dt_max ({self.dt_max})")
    
    def clamp_timestep(self, dt: float) -> float:
        """Clamp dt to [dt_min, dt_max]."""
        return min(max(float(dt), self.dt_min), self.dt_max)
    
    def timestep_in_range(self, dt: float) -> bool:
        return self.dt_min <= dt <= self.dt_max


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    return Config(**(data or {}))


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
