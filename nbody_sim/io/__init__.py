"""I/O utilities for state management."""

from nbody_sim.io.state_io import save_state, load_state, save_system, load_bodies

__all__ = ["save_state", "load_state", "save_system", "load_bodies"]
