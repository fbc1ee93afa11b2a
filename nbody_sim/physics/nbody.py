"""Body state store for N-body simulations."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np
from nbody_sim.physics.body import Body, BodyState


def _frozen_copy(array: np.ndarray) -> np.ndarray:
    copy = np.array(array, dtype=np.float64)
    copy.setflags(write=False)
    return copy


@dataclass(frozen=True, eq=False)
class InitialConditions:
    """Immutable copy of the system taken right after construction.

    Arrays are independent of the live system and write-protected; restoring
    copies out of them.
    """
    masses: np.ndarray
    positions: np.ndarray
    velocities: np.ndarray
    names: Tuple[str, ...]
    colors: Tuple[int, ...]
    base_radii: Tuple[float, ...]

    @property
    def n_bodies(self) -> int:
        return self.masses.shape[0]

    def to_bodies(self) -> List[Body]:
        """Rebuild construction records from the snapshot."""
        return [
            Body(
                mass=self.masses[i],
                position=self.positions[i],
                velocity=self.velocities[i],
                name=self.names[i],
                color=self.colors[i],
                base_radius=self.base_radii[i],
            )
            for i in range(self.n_bodies)
        ]


class NBodySystem:
    """Gravitational N-body system state.

    Holds masses, positions, velocities, accelerations and force accumulators
    as parallel arrays indexed in construction order. Index order is stable, so
    pairwise iteration and floating-point summation order are reproducible.
    """

    def __init__(self):
        self.masses = np.empty(0, dtype=np.float64)
        self.positions = np.empty((0, 3), dtype=np.float64)
        self.velocities = np.empty((0, 3), dtype=np.float64)
        self.accelerations = np.empty((0, 3), dtype=np.float64)
        self.forces = np.empty((0, 3), dtype=np.float64)
        self.names: List[str] = []
        self.colors: List[int] = []
        self.base_radii: List[float] = []
        self.n_bodies = 0

    def initialize(self, bodies: Sequence[Body]):
        """Populate the system from body records.

        Args:
            bodies: Bodies in the order they should be indexed
        """
        bodies = list(bodies)
        n = len(bodies)
        # Masses never change during a run
        self.masses = _frozen_copy([b.mass for b in bodies])
        self.positions = np.array([b.position for b in bodies], dtype=np.float64).reshape(n, 3)
        self.velocities = np.array([b.velocity for b in bodies], dtype=np.float64).reshape(n, 3)
        self.accelerations = np.zeros((n, 3), dtype=np.float64)
        self.forces = np.zeros((n, 3), dtype=np.float64)
        self.names = [b.name or f"body{i}" for i, b in enumerate(bodies)]
        self.colors = [b.color for b in bodies]
        self.base_radii = [float(b.base_radius) for b in bodies]
        self.n_bodies = n

    def snapshot(self) -> InitialConditions:
        """Take an independent copy of the current state."""
        return InitialConditions(
            masses=_frozen_copy(self.masses),
            positions=_frozen_copy(self.positions),
            velocities=_frozen_copy(self.velocities),
            names=tuple(self.names),
            colors=tuple(self.colors),
            base_radii=tuple(self.base_radii),
        )

    def restore(self, snapshot: InitialConditions):
        """Overwrite the live state with a snapshot (the snapshot is left untouched).

        Transient accelerations and forces are cleared.
        """
        n = snapshot.n_bodies
        self.masses = _frozen_copy(snapshot.masses)
        self.positions = np.array(snapshot.positions, dtype=np.float64, copy=True)
        self.velocities = np.array(snapshot.velocities, dtype=np.float64, copy=True)
        self.accelerations = np.zeros((n, 3), dtype=np.float64)
        self.forces = np.zeros((n, 3), dtype=np.float64)
        self.names = list(snapshot.names)
        self.colors = list(snapshot.colors)
        self.base_radii = list(snapshot.base_radii)
        self.n_bodies = n

    def get_bodies(self) -> List[BodyState]:
        """Read-only per-body views of the current state."""
        return [
            BodyState(
                index=i,
                name=self.names[i],
                mass=float(self.masses[i]),
                position=_frozen_copy(self.positions[i]),
                velocity=_frozen_copy(self.velocities[i]),
                acceleration=_frozen_copy(self.accelerations[i]),
                color=self.colors[i],
                base_radius=self.base_radii[i],
            )
            for i in range(self.n_bodies)
        ]

    def get_state(self):
        """Get current state (positions, velocities, masses).

        Returns:
            Tuple of (positions, velocities, masses) as numpy array copies
        """
        return self.positions.copy(), self.velocities.copy(), self.masses.copy()
