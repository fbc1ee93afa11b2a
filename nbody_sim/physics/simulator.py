"""Main simulator controller."""

from typing import Callable, List, Optional, Sequence
import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body, BodyState
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator
from nbody_sim.physics.nbody import InitialConditions, NBodySystem


class Simulator:
    """Main simulation controller.

    Owns the body state, the force calculator and the integrator. Ticks are
    driven from outside: call step() from a render loop, timer or test. The
    simulator does no timing or threading of its own.
    """

    def __init__(
        self,
        integrator: Optional[Integrator] = None,
        dt: float = 0.01,
        G: float = constants.G,
        force_method: str = "pairwise",
    ):
        """Initialize simulator.

        Args:
            integrator: Integrator to use (default: leapfrog)
            dt: Time step used when step() is called without one
            G: Gravitational constant
            force_method: 'pairwise' or 'vectorized'
        """
        self.integrator = integrator or LeapfrogIntegrator()
        self.dt = dt
        self.G = G
        self.force_calculator = ForceCalculator(method=force_method, G=G)
        self.diagnostics = Diagnostics(G=G)

        self.system = NBodySystem()
        self.initial_conditions: Optional[InitialConditions] = None
        self.time = 0.0
        self.paused = False
        self.step_count = 0

        self.on_step_callback: Optional[Callable] = None

    def initialize(self, bodies: Sequence[Body]):
        """Load bodies and capture the initial-condition snapshot.

        Args:
            bodies: Body records in index order
        """
        bodies = list(bodies)
        if not bodies:
            raise ValueError("Cannot initialize a simulation with no bodies")
        self.system.initialize(bodies)
        self.initial_conditions = self.system.snapshot()
        self.time = 0.0
        self.step_count = 0

    def _require_initialized(self):
        if self.initial_conditions is None:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")

    def step(self, dt: Optional[float] = None):
        """Advance one tick: accumulate all forces, then integrate every body.

        Does nothing while paused.

        Args:
            dt: Time step for this tick (default: self.dt)
        """
        self._require_initialized()
        if self.paused:
            return
        dt = self.dt if dt is None else float(dt)

        self.force_calculator.compute_forces(self.system)
        self.integrator.step(self.system, dt)

        self.time += dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def reset(self, pause: bool = False):
        """Restore the initial conditions, discarding all evolution.

        Args:
            pause: Also pause the simulation (as the interactive viewer does)
        """
        self._require_initialized()
        self.system.restore(self.initial_conditions)
        self.time = 0.0
        self.step_count = 0
        if pause:
            self.paused = True

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def toggle_pause(self) -> bool:
        """Flip the pause flag; returns the new value."""
        self.paused = not self.paused
        return self.paused

    def set_timestep(self, dt: float):
        """Set time step for subsequent ticks.

        No bounds are enforced here; see Config.clamp_timestep.

        Args:
            dt: New time step
        """
        self.dt = float(dt)

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self.integrator = integrator

    def get_bodies(self) -> List[BodyState]:
        """Read-only views of the current body states."""
        return self.system.get_bodies()

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        pos, vel, mass = self.system.get_state()
        return pos, vel, mass, self.time, self.step_count

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        return self.diagnostics.compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )[2]

    def get_kinetic_energy(self) -> float:
        """Get current kinetic energy."""
        return self.diagnostics.compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )[0]

    def get_potential_energy(self) -> float:
        """Get current potential energy."""
        return self.diagnostics.compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )[1]

    def get_momentum(self) -> np.ndarray:
        """Get total linear momentum vector."""
        return self.diagnostics.compute_momentum(self.system.velocities, self.system.masses)

    def get_angular_momentum(self) -> np.ndarray:
        """Get total angular momentum vector about the origin."""
        return self.diagnostics.compute_angular_momentum(
            self.system.positions, self.system.velocities, self.system.masses
        )
