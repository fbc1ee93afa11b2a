"""Two-body circular orbit preset."""

from typing import List
import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset
from nbody_sim.presets.utils import place_in_orbit, orbital_period


class TwoBody(Preset):
    """Central mass at rest at the origin with one satellite on a circular orbit.
    
    Defaults are the Sun-Earth system in SI units; the satellite starts on +x
    and revolves about +z.
    """
    
    def __init__(
        self,
        G: float = constants.G,
        central_mass: float = constants.SUN_MASS,
        satellite_mass: float = constants.EARTH_MASS,
        radius: float = constants.EARTH_ORBIT_RADIUS
    ):
        super().__init__(G)
        self.central_mass = central_mass
        self.satellite_mass = satellite_mass
        self.radius = radius
    
    @property
    def name(self) -> str:
        return "two_body"
    
    @property
    def period(self) -> float:
        """Period of the satellite's circular orbit."""
        return orbital_period(self.central_mass, self.radius, self.G)
    
    def generate(self) -> List[Body]:
        central = Body(
            mass=self.central_mass,
            position=np.zeros(3),
            velocity=np.zeros(3),
            name="central",
            color=0xFFF700,
        )
        satellite = place_in_orbit(
            central, self.satellite_mass, self.radius,
            direction=(1.0, 0.0, 0.0), axis=(0.0, 0.0, 1.0), G=self.G,
            name="satellite", color=0x3366FF,
        )
        return [central, satellite]
