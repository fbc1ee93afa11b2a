"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from nbody_sim.physics.nbody import NBodySystem


class Integrator(ABC):
    """Abstract interface for numerical integrators.
    
    Integrators consume the forces already accumulated on the system and
    advance velocities and positions in place. The same dt is applied to
    every body within one step.
    """
    
    @abstractmethod
    def step(self, system: NBodySystem, dt: float):
        """Perform one integration step.
        
        Args:
            system: N-body system with freshly computed forces
            dt: Time step
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (e.g., 1 for Euler, 2 for leapfrog)."""
        pass
    
    @staticmethod
    def update_accelerations(system: NBodySystem):
        """a = F / m, stored on the system."""
        system.accelerations[:] = system.forces / system.masses[:, None]
