"""Tests for numerical integrators."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body
from nbody_sim.physics.nbody import NBodySystem
from nbody_sim.physics.integrators import (
    EulerIntegrator, LeapfrogIntegrator, get_integrator
)


def _single_body(mass=2.0, position=(1.0, -2.0, 0.5), velocity=(0.3, 0.0, -1.0)):
    system = NBodySystem()
    system.initialize([Body(mass=mass, position=position, velocity=velocity)])
    return system


def test_leapfrog_kick_then_drift():
    """Test that velocity is kicked before position drifts with the new velocity."""
    system = _single_body()
    force = np.array([4.0, 1.0, -2.0])
    system.forces[0] = force
    x0 = system.positions[0].copy()
    v0 = system.velocities[0].copy()
    dt = 0.05
    
    integrator = LeapfrogIntegrator()
    integrator.step(system, dt)
    
    a = force / 2.0
    assert np.allclose(system.accelerations[0], a)
    assert np.allclose(system.velocities[0], v0 + a * dt)
    assert np.allclose(system.positions[0], x0 + (v0 + a * dt) * dt)
    assert integrator.name == "leapfrog"
    assert integrator.order == 2


def test_euler_uses_old_velocity():
    """Test Euler integrator."""
    system = _single_body()
    force = np.array([4.0, 1.0, -2.0])
    system.forces[0] = force
    x0 = system.positions[0].copy()
    v0 = system.velocities[0].copy()
    dt = 0.05
    
    integrator = EulerIntegrator()
    integrator.step(system, dt)
    
    a = force / 2.0
    assert np.allclose(system.velocities[0], v0 + a * dt)
    assert np.allclose(system.positions[0], x0 + v0 * dt)
    assert integrator.name == "euler"
    assert integrator.order == 1


def test_zero_force_moves_in_straight_line():
    """Test free motion."""
    system = _single_body(velocity=(1.0, 2.0, 3.0))
    x0 = system.positions[0].copy()
    
    integrator = LeapfrogIntegrator()
    for _ in range(10):
        system.forces.fill(0.0)
        integrator.step(system, 0.1)
    
    assert np.allclose(system.positions[0], x0 + np.array([1.0, 2.0, 3.0]))


def test_get_integrator():
    """Test lookup by name."""
    assert isinstance(get_integrator("leapfrog"), LeapfrogIntegrator)
    assert isinstance(get_integrator("EULER"), EulerIntegrator)
    with pytest.raises(ValueError):
        get_integrator("rk4")
