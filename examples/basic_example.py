"""Basic example of using the N-body simulator."""

import numpy as np
from nbody_sim import Simulator
from nbody_sim.physics.integrators import LeapfrogIntegrator
from nbody_sim.presets import SolarSystem

DAY = 86400.0


def main():
    """Run the solar system preset for one simulated year."""
    preset = SolarSystem()
    bodies = preset.generate()
    
    # One-hour ticks; far outside the interactive slider range, so the
    # engine is driven directly rather than through Config
    sim = Simulator(LeapfrogIntegrator(), dt=3600.0)
    sim.initialize(bodies)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6e}")
    
    for day in range(365):
        for _ in range(24):
            sim.step()
        if day % 73 == 0:
            earth = sim.get_bodies()[1]
            r = np.linalg.norm(earth.position)
            print(f"Day {day}: Time={sim.time / DAY:.1f} d, Earth r={r:.4e} m, Energy={sim.get_energy():.6e}")
    
    print(f"Final energy: {sim.get_energy():.6e}")
    
    sim.reset()
    print(f"After reset: time={sim.time}, Earth at {sim.get_bodies()[1].position}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
