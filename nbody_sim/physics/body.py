"""Body records: construction input and read-only state views."""

from dataclasses import dataclass, field
import numpy as np
from nbody_sim.physics.errors import InvalidBodyError


def _as_vector(value, label: str) -> np.ndarray:
    """Coerce value to a finite float64 3-vector."""
    try:
        vec = np.array(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidBodyError(f"{label} must be a 3-vector of reals, got {value!r}") from exc
    if vec.shape != (3,):
        raise InvalidBodyError(f"{label} must have 3 components, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise InvalidBodyError(f"{label} must be finite, got {vec.tolist()}")
    vec.setflags(write=False)
    return vec


@dataclass(frozen=True, eq=False)
class Body:
    """A point mass to be added to a simulation (immutable once built).
    
    Args:
        mass: Mass (kg), finite and strictly positive
        position: World-space position, shape (3,)
        velocity: Velocity, shape (3,)
        name: Identifier for reports and saved states
        color: Display colour (0xRRGGBB); not used by physics
        base_radius: Display radius hint; not used by physics
        
    Raises:
        InvalidBodyError: If mass is not a finite positive number or a vector is malformed
    """
    mass: float
    position: np.ndarray
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    name: str = ""
    color: int = 0xFFFFFF
    base_radius: float = 1.0
    
    def __post_init__(self):
        try:
            mass = float(self.mass)
        except (TypeError, ValueError) as exc:
            raise InvalidBodyError(f"mass must be a real number, got {self.mass!r}") from exc
        if not np.isfinite(mass) or mass <= 0.0:
            raise InvalidBodyError(f"mass must be finite and > 0, got {mass}")
        object.__setattr__(self, "mass", mass)
        object.__setattr__(self, "position", _as_vector(self.position, "position"))
        object.__setattr__(self, "velocity", _as_vector(self.velocity, "velocity"))


@dataclass(frozen=True, eq=False)
class BodyState:
    """Read-only view of one body after a step (for renderers and reports)."""
    index: int
    name: str
    mass: float
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray
    color: int
    base_radius: float
