"""Simplified solar system preset."""

from typing import List
import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset
from nbody_sim.presets.utils import place_in_orbit

X_AXIS = (1.0, 0.0, 0.0)
Y_AXIS = (0.0, 1.0, 0.0)
Z_AXIS = (0.0, 0.0, 1.0)


class SolarSystem(Preset):
    """Sun with Earth, Jupiter and an eccentric asteroid.
    
    Each orbit lies in a different coordinate plane so the full 3D force
    calculation is exercised:
    - Earth on +x, revolving about +y (moves towards -z)
    - Jupiter on +y, revolving about -z (moves towards +x)
    - Asteroid on -x, revolving about +y at 1.5x circular speed
    """
    
    def __init__(
        self,
        G: float = constants.G,
        sun_mass: float = constants.SUN_MASS,
        include_asteroid: bool = True,
        asteroid_speed_factor: float = 1.5
    ):
        """Initialize solar system preset.
        
        Args:
            G: Gravitational constant
            sun_mass: Mass of the central star
            include_asteroid: Add the small eccentric body
            asteroid_speed_factor: Asteroid speed relative to circular
        """
        super().__init__(G)
        self.sun_mass = sun_mass
        self.include_asteroid = include_asteroid
        self.asteroid_speed_factor = asteroid_speed_factor
    
    @property
    def name(self) -> str:
        return "solar_system"
    
    def generate(self) -> List[Body]:
        sun = Body(
            mass=self.sun_mass,
            position=np.zeros(3),
            velocity=np.zeros(3),
            name="sun",
            color=0xFFF700,
            base_radius=1000.0,
        )
        earth = place_in_orbit(
            sun, constants.EARTH_MASS, constants.EARTH_ORBIT_RADIUS,
            direction=X_AXIS, axis=Y_AXIS, G=self.G,
            name="earth", color=0x3366FF, base_radius=10.0,
        )
        jupiter = place_in_orbit(
            sun, constants.JUPITER_MASS, constants.JUPITER_ORBIT_RADIUS,
            direction=Y_AXIS, axis=(0.0, 0.0, -1.0), G=self.G,
            name="jupiter", color=0xFF9900, base_radius=30.0,
        )
        bodies = [sun, earth, jupiter]
        
        if self.include_asteroid:
            asteroid = place_in_orbit(
                sun, 5e20, 3.5e11,
                direction=(-1.0, 0.0, 0.0), axis=Y_AXIS,
                speed_factor=self.asteroid_speed_factor, G=self.G,
                name="asteroid", color=0xCCCCCC, base_radius=5.0,
            )
            bodies.append(asteroid)
        
        return bodies
