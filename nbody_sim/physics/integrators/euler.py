"""Euler method integrator (baseline, O(h) accuracy)."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.nbody import NBodySystem


class EulerIntegrator(Integrator):
    """Explicit Euler - simple first-order integrator.
    
    Positions advance with the velocity from the start of the step, so energy
    drifts systematically. Good for baseline comparisons against leapfrog.
    """
    
    @property
    def name(self) -> str:
        return "euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, system: NBodySystem, dt: float):
        """Euler step: r_new = r + v*dt, v_new = v + a*dt."""
        self.update_accelerations(system)
        old_velocities = system.velocities.copy()
        system.velocities += system.accelerations * dt
        system.positions += old_velocities * dt
