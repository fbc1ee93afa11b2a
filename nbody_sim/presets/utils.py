"""Utility functions for building orbital initial conditions."""

import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body


def circular_orbit_speed(central_mass: float, radius: float, G: float = constants.G) -> float:
    """Keplerian circular orbit speed v = sqrt(G * M / r).
    
    Args:
        central_mass: Mass of the attracting body
        radius: Orbital radius
        G: Gravitational constant
        
    Returns:
        Orbital speed
    """
    if central_mass <= 0 or radius <= 0:
        raise ValueError(f"central_mass and radius must be positive, got M={central_mass}, r={radius}")
    return float(np.sqrt(G * central_mass / radius))


def orbital_period(central_mass: float, radius: float, G: float = constants.G) -> float:
    """Circular orbit period T = 2π * sqrt(r³ / (G * M))."""
    if central_mass <= 0 or radius <= 0:
        raise ValueError(f"central_mass and radius must be positive, got M={central_mass}, r={radius}")
    return float(2.0 * np.pi * np.sqrt(radius ** 3 / (G * central_mass)))


def _unit(vec, label: str) -> np.ndarray:
    vec = np.asarray(vec, dtype=np.float64)
    norm = np.linalg.norm(vec)
    if norm == 0:
        raise ValueError(f"{label} must be non-zero")
    return vec / norm


def place_in_orbit(
    central: Body,
    mass: float,
    radius: float,
    direction,
    axis,
    speed_factor: float = 1.0,
    G: float = constants.G,
    **body_kwargs
) -> Body:
    """Create a body on a circular orbit around a central body.
    
    The body sits at central.position + radius * unit(direction) and moves
    with speed_factor * v_circ along unit(axis × direction), relative to the
    central body. speed_factor != 1 gives an eccentric orbit.
    
    Args:
        central: Body being orbited
        mass: Mass of the new body
        radius: Orbital radius
        direction: Vector from the central body towards the new body
        axis: Axis of revolution (right-hand rule)
        speed_factor: Multiplier on the circular speed
        G: Gravitational constant
        **body_kwargs: Passed to Body (name, color, base_radius)
        
    Returns:
        New Body
        
    Raises:
        ValueError: If the axis is parallel to the direction
    """
    r_hat = _unit(direction, "direction")
    tangent = np.cross(_unit(axis, "axis"), r_hat)
    if np.linalg.norm(tangent) < 1e-12:
        raise ValueError("Orbit axis must not be parallel to the radius direction")
    tangent = tangent / np.linalg.norm(tangent)
    
    speed = circular_orbit_speed(central.mass, radius, G) * speed_factor
    position = central.position + radius * r_hat
    velocity = central.velocity + speed * tangent
    return Body(mass=mass, position=position, velocity=velocity, **body_kwargs)
