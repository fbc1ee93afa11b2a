"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenarios."""
    
    def __init__(self, G: float = constants.G):
        """Initialize preset.
        
        Args:
            G: Gravitational constant used to derive orbital velocities
                (must match the simulator's)
        """
        self.G = G
    
    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.
        
        Returns:
            List of bodies in index order
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
