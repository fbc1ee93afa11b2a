"""Tests for configuration management."""

import os
import tempfile
import pytest
from nbody_sim.utils.config import Config, load_config, save_config


def test_defaults():
    """Test default configuration."""
    config = Config()
    
    assert config.dt == 0.01
    assert (config.dt_min, config.dt_max) == (0.001, 0.1)
    assert config.integrator == "leapfrog"
    assert config.force_method == "pairwise"
    assert config.preset_params == {}


def test_clamp_timestep():
    """Test the caller-side time step bound."""
    config = Config()
    
    assert config.clamp_timestep(5.0) == 0.1
    assert config.clamp_timestep(0.0) == 0.001
    assert config.clamp_timestep(0.05) == 0.05
    assert config.timestep_in_range(0.05)
    assert not config.timestep_in_range(0.5)


def test_invalid_range():
    """Test inconsistent bounds."""
    with pytest.raises(ValueError):
        Config(dt_min=1.0, dt_max=0.1)


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_save_load_roundtrip(suffix):
    """Test saving and loading JSON and YAML configs."""
    config = Config(dt=0.05, steps=42, preset="two_body", preset_params={"radius": 2.0})
    
    with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as f:
        temp_path = f.name
    
    try:
        save_config(config, temp_path)
        loaded = load_config(temp_path)
        
        assert loaded == config
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_unknown_key():
    """Test that unknown keys are rejected."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        f.write('{"dt": 0.01, "softening": 0.1}')
        temp_path = f.name
    
    try:
        with pytest.raises(TypeError):
            load_config(temp_path)
    finally:
        os.remove(temp_path)
