"""Leapfrog integrator (kick-drift form, symplectic, O(h²) accuracy)."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.nbody import NBodySystem


class LeapfrogIntegrator(Integrator):
    """Kick-drift leapfrog.
    
    1. a = F / m
    2. v(t+dt/2) = v(t-dt/2) + a(t)*dt   (kick)
    3. x(t+dt) = x(t) + v(t+dt/2)*dt     (drift, with the updated velocity)
    
    Velocities are effectively staggered half a step from positions. The
    ordering is what bounds long-term energy drift; do not fuse the updates.
    """
    
    @property
    def name(self) -> str:
        return "leapfrog"
    
    @property
    def order(self) -> int:
        return 2
    
    def step(self, system: NBodySystem, dt: float):
        self.update_accelerations(system)
        system.velocities += system.accelerations * dt
        system.positions += system.velocities * dt
