"""Smoke tests for the command-line driver."""

import os
import tempfile
import numpy as np
import pytest
import yaml
from nbody_sim.cli.main import main
from nbody_sim.io.state_io import load_state, save_state


@pytest.fixture
def tmp_state():
    with tempfile.TemporaryDirectory() as tmp:
        yield os.path.join(tmp, "final.json")


def test_cli_run_and_save(tmp_state, capsys):
    """Test a short two-body run with a large time step."""
    with pytest.warns(UserWarning):
        main(['--preset', 'two_body', '--steps', '4', '--dt', '3600',
              '--report-every', '2', '--save-state', tmp_state])
    
    out = capsys.readouterr().out
    assert "Simulation complete!" in out
    assert "Integrator: leapfrog" in out
    
    positions, velocities, masses, metadata = load_state(tmp_state)
    assert positions.shape == (2, 3)
    assert metadata["steps"] == 4
    assert metadata["names"] == ["central", "satellite"]


def test_cli_clamp_dt(tmp_state):
    """Test that --clamp-dt bounds the time step."""
    main(['--preset', 'solar_system', '--steps', '2', '--dt', '5', '--clamp-dt',
          '--force-method', 'vectorized', '--save-state', tmp_state])
    
    _, _, masses, metadata = load_state(tmp_state)
    assert metadata["dt"] == 0.1
    assert metadata["time"] == pytest.approx(0.2)
    assert len(masses) == 4


def test_cli_config_and_load_state(tmp_state):
    """Test a YAML config and restarting from a saved state."""
    config_path = os.path.join(os.path.dirname(tmp_state), "run.yaml")
    with open(config_path, 'w') as f:
        yaml.safe_dump({
            'steps': 3,
            'dt': 0.05,
            'integrator': 'euler',
            'preset_params': {'include_asteroid': False},
        }, f)
    
    main(['--config', config_path, '--save-state', tmp_state])
    positions, _, masses, metadata = load_state(tmp_state)
    assert len(masses) == 3
    assert metadata["integrator"] == "euler"
    
    restart_path = os.path.join(os.path.dirname(tmp_state), "restart.npz")
    main(['--load-state', tmp_state, '--steps', '1', '--save-state', restart_path])
    restarted, _, _, restart_meta = load_state(restart_path)
    assert restart_meta["names"] == ["sun", "earth", "jupiter"]
    assert not np.array_equal(restarted, positions)


def test_cli_bad_integrator_in_config(tmp_state):
    """Test that an unknown integrator exits with status 1."""
    config_path = os.path.join(os.path.dirname(tmp_state), "bad.json")
    with open(config_path, 'w') as f:
        f.write('{"integrator": "rk4"}')
    
    with pytest.raises(SystemExit) as exc_info:
        main(['--config', config_path])
    assert exc_info.value.code == 1


@pytest.mark.parametrize("settings", [
    {"preset": "spiral"},
    {"force_method": "barnes_hut"},
])
def test_cli_unknown_names_in_config(tmp_state, settings, capsys):
    """Test that an unknown preset or force method in a config exits with status 1."""
    config_path = os.path.join(os.path.dirname(tmp_state), "bad.yaml")
    with open(config_path, 'w') as f:
        yaml.safe_dump(settings, f)
    
    with pytest.raises(SystemExit) as exc_info:
        main(['--config', config_path])
    assert exc_info.value.code == 1
    assert list(settings.values())[0] in capsys.readouterr().out


def test_cli_load_state_with_invalid_mass(tmp_state):
    """Test that a saved state holding a zero mass exits with status 1."""
    save_state(np.zeros((1, 3)), np.zeros((1, 3)), np.array([0.0]), tmp_state)
    
    with pytest.raises(SystemExit) as exc_info:
        main(['--load-state', tmp_state, '--steps', '1'])
    assert exc_info.value.code == 1
