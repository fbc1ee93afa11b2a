"""
N-Body Simulator - real-time gravitational N-body engine.

Features:
- Brute-force Newtonian force accumulation (pairwise or vectorized)
- Leapfrog (kick-drift) and Euler integrators
- Snapshot-based reset to initial conditions
- Keplerian preset scenarios (solar system, two-body)
- State export to NPZ/JSON
- Headless CLI
"""

__version__ = "0.1.0"

from nbody_sim.physics.body import Body, BodyState
from nbody_sim.physics.errors import InvalidBodyError
from nbody_sim.physics.simulator import Simulator
from nbody_sim.presets import SolarSystem, TwoBody, get_preset

__all__ = [
    "Body",
    "BodyState",
    "InvalidBodyError",
    "Simulator",
    "SolarSystem",
    "TwoBody",
    "get_preset",
]
