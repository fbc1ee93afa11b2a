"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body, BodyState
from nbody_sim.physics.errors import InvalidBodyError
from nbody_sim.physics.nbody import NBodySystem, InitialConditions
from nbody_sim.physics.force_calculator import ForceCalculator, pair_force
from nbody_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "BodyState",
    "InvalidBodyError",
    "NBodySystem",
    "InitialConditions",
    "ForceCalculator",
    "pair_force",
    "Simulator",
]
