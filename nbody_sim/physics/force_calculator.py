"""Newtonian gravitational force accumulation.

Brute-force O(N^2): every unordered pair is evaluated once per call. Coincident
bodies (zero separation) contribute no force; there is no softening.
"""

from typing import Literal, Optional
import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.nbody import NBodySystem

FORCE_METHODS = ("pairwise", "vectorized")


def pair_force(
    position_i: np.ndarray,
    position_j: np.ndarray,
    mass_i: float,
    mass_j: float,
    G: float = constants.G,
) -> Optional[np.ndarray]:
    """Force exerted on body i by body j.

    F = G * m_i * m_j / |r|^2 along r = r_j - r_i. The force on j is the exact
    negative.

    Returns:
        Force vector (3,), or None if the bodies coincide
    """
    r_vector = position_j - position_i
    r_sq = float(np.dot(r_vector, r_vector))
    if r_sq == 0.0:
        return None
    r = np.sqrt(r_sq)
    f_magnitude = G * (mass_i * mass_j) / r_sq
    return (r_vector / r) * f_magnitude


class ForceCalculator:
    """Accumulates net gravitational force on every body of an NBodySystem."""

    def __init__(
        self,
        method: Literal["pairwise", "vectorized"] = "pairwise",
        G: float = constants.G,
    ):
        """Initialize force calculator.

        Args:
            method: 'pairwise' walks i<j pairs in index order (deterministic
                summation); 'vectorized' uses numpy broadcasting
            G: Gravitational constant
        """
        if method not in FORCE_METHODS:
            raise ValueError(f"Unknown force method '{method}'. Available: {list(FORCE_METHODS)}")
        self.method = method
        self.G = G

    def compute_forces(self, system: NBodySystem) -> np.ndarray:
        """Reset and recompute system.forces in place.

        Returns:
            The system's (n, 3) force array
        """
        system.forces.fill(0.0)
        if system.n_bodies < 2:
            return system.forces
        if self.method == "pairwise":
            self._compute_forces_pairwise(system)
        else:
            self._compute_forces_vectorized(system)
        return system.forces

    def _compute_forces_pairwise(self, system: NBodySystem):
        positions = system.positions
        masses = system.masses
        forces = system.forces
        n = system.n_bodies
        for i in range(n):
            for j in range(i + 1, n):
                f = pair_force(positions[i], positions[j], masses[i], masses[j], self.G)
                if f is None:
                    continue
                # Newton's third law
                forces[i] += f
                forces[j] -= f

    def _compute_forces_vectorized(self, system: NBodySystem):
        """Vectorized calculation; diagonal and coincident pairs masked to zero."""
        positions = system.positions
        masses = system.masses
        n = system.n_bodies
        # r_diff[i, j] = r_j - r_i, shape (n, n, 3)
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        r_sq = np.sum(r_diff ** 2, axis=2)
        nonzero = r_sq > 0.0
        r_cubed = np.where(nonzero, r_sq * np.sqrt(r_sq), 1.0)
        m_ij = masses[:, np.newaxis] * masses[np.newaxis, :]
        coefficient = np.where(nonzero, self.G * m_ij / r_cubed, 0.0)
        system.forces[:] = np.sum(coefficient[:, :, np.newaxis] * r_diff, axis=1)
