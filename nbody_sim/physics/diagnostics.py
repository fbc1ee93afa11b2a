"""Diagnostics for N-body simulations."""

import numpy as np
from typing import Tuple
from nbody_sim.physics import constants


class Diagnostics:
    """Conserved-quantity diagnostics matching the unsoftened force law."""

    def __init__(self, G: float = constants.G):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant (must match force calculation)
        """
        self.G = G

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        U = -G * Σ_{i<j} m_i * m_j / r_ij

        Coincident pairs are skipped, as in force accumulation.

        Args:
            positions: Body positions (n, 3)
            velocities: Body velocities (n, 3)
            masses: Body masses (n,)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()

        # Kinetic energy: K = 0.5 * Σ m_i * v_i^2
        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)

        U = 0.0
        n = len(masses)
        if n > 1:
            i_idx, j_idx = np.triu_indices(n, k=1)
            r = np.linalg.norm(positions[j_idx] - positions[i_idx], axis=1)
            valid = r > 0.0
            U = -self.G * np.sum(masses[i_idx][valid] * masses[j_idx][valid] / r[valid])

        return float(K), float(U), float(K + U)

    def compute_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum P = Σ m_i v_i."""
        masses = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses[:, np.newaxis] * np.asarray(velocities, dtype=np.float64), axis=0)

    def compute_angular_momentum(self, positions, velocities, masses) -> np.ndarray:
        """Total angular momentum about the origin, L = Σ m_i r_i × v_i."""
        masses = np.asarray(masses, dtype=np.float64).flatten()
        L = np.cross(np.asarray(positions, dtype=np.float64), np.asarray(velocities, dtype=np.float64))
        return np.sum(masses[:, np.newaxis] * L, axis=0)

    def compute_center_of_mass(self, positions, velocities, masses) -> Tuple[np.ndarray, np.ndarray]:
        """Centre-of-mass position and velocity."""
        masses = np.asarray(masses, dtype=np.float64).flatten()
        total_mass = np.sum(masses)
        com = np.sum(masses[:, np.newaxis] * np.asarray(positions, dtype=np.float64), axis=0) / total_mass
        com_v = np.sum(masses[:, np.newaxis] * np.asarray(velocities, dtype=np.float64), axis=0) / total_mass
        return com, com_v
