"""Driving the engine from an external tick loop with pause, reset and dt changes."""

from nbody_sim import Simulator
from nbody_sim.presets import TwoBody
from nbody_sim.utils import Config


def main():
    config = Config()
    preset = TwoBody(G=1.0, central_mass=1000.0, satellite_mass=1.0, radius=10.0)
    sim = Simulator(dt=config.dt, G=1.0)
    sim.initialize(preset.generate())
    
    # Stand-in for a render loop: the loop owns pacing, the engine only steps
    for frame in range(600):
        if frame == 200:
            sim.set_timestep(config.clamp_timestep(0.5))
        if frame == 300:
            sim.toggle_pause()
        if frame == 350:
            sim.toggle_pause()
        if frame == 500:
            sim.reset()
        sim.step()
        if frame % 100 == 0:
            satellite = sim.get_bodies()[1]
            print(f"frame={frame} t={sim.time:.3f} paused={sim.paused} pos={satellite.position}")


if __name__ == "__main__":
    main()
