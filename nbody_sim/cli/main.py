"""CLI main entry point."""

import argparse
import sys
import warnings
import numpy as np
from nbody_sim.io.state_io import load_bodies, save_system
from nbody_sim.physics.force_calculator import FORCE_METHODS
from nbody_sim.physics.integrators import INTEGRATORS, get_integrator
from nbody_sim.physics.simulator import Simulator
from nbody_sim.presets import PRESETS, get_preset
from nbody_sim.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge a config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'preset': args.preset,
        'steps': args.steps,
        'dt': args.dt,
        'integrator': args.integrator,
        'force_method': args.force_method,
        'report_every': args.report_every,
        'save_state': args.save_state,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    return config


def bodies_from_state(path: str):
    """Rebuild bodies from a saved state file."""
    bodies, _ = load_bodies(path)
    return bodies


def run_simulation(args):
    """Run a simulation."""
    config = build_config(args)

    dt = config.dt
    if not config.timestep_in_range(dt):
        if args.clamp_dt:
            dt = config.clamp_timestep(dt)
        else:
            warnings.warn(
                f"dt={config.dt} is outside the recommended range "
                f"[{config.dt_min}, {config.dt_max}]; results may be unstable.",
                UserWarning
            )

    # Config files bypass argparse choices, so unknown names surface here
    try:
        integrator = get_integrator(config.integrator)
        if args.load_state:
            bodies = bodies_from_state(args.load_state)
            source = args.load_state
        else:
            preset = get_preset(config.preset, G=config.G, **config.preset_params)
            bodies = preset.generate()
            source = preset.name
        sim = Simulator(integrator, dt=dt, G=config.G, force_method=config.force_method)
    except ValueError as exc:
        print(exc)
        sys.exit(1)
    sim.initialize(bodies)

    print(f"Running simulation: {source} with {sim.system.n_bodies} bodies")
    print(f"Integrator: {integrator.name}, forces: {config.force_method}, dt: {dt}")

    K0, U0, E0 = sim.diagnostics.compute_energies(
        sim.system.positions, sim.system.velocities, sim.system.masses
    )
    P0 = np.linalg.norm(sim.get_momentum())

    print(f"{'Step':<8} {'Time':<12} {'K':<14} {'U':<14} {'E':<14} {'dE/E0':<12} {'|P|':<12}")
    print("-" * 90)
    print(f"{0:<8} {0.0:<12.4g} {K0:<14.6e} {U0:<14.6e} {E0:<14.6e} {0.0:<12.4e} {P0:<12.4e}")

    report_every = max(1, config.report_every)
    for _ in range(config.steps):
        sim.step()
        if sim.step_count % report_every == 0:
            K, U, E = sim.diagnostics.compute_energies(
                sim.system.positions, sim.system.velocities, sim.system.masses
            )
            dE = (E - E0) / abs(E0) if E0 != 0 else 0.0
            P = np.linalg.norm(sim.get_momentum())
            print(f"{sim.step_count:<8} {sim.time:<12.4g} {K:<14.6e} {U:<14.6e} {E:<14.6e} {dE:<12.4e} {P:<12.4e}")

    if config.save_state:
        save_system(sim.system, config.save_state, metadata={
            'time': sim.time,
            'steps': sim.step_count,
            'preset': config.preset,
            'integrator': integrator.name,
            'dt': dt
        })
        print(f"State saved to {config.save_state}")

    print("Simulation complete!")
    return sim


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="N-Body Simulator - gravitational point-mass simulation")

    parser.add_argument('--config', type=str, default=None,
                        help='Configuration file (.json or .yaml); command-line options override it')
    parser.add_argument('--preset', type=str, default=None, choices=sorted(PRESETS.keys()),
                        help='Preset scenario (default: solar_system)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps (default: 1000)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.01)')
    parser.add_argument('--clamp-dt', action='store_true',
                        help='Clamp dt into the configured [dt_min, dt_max] range')
    parser.add_argument('--integrator', type=str, default=None, choices=sorted(INTEGRATORS.keys()),
                        help='Numerical integrator (default: leapfrog)')
    parser.add_argument('--force-method', type=str, default=None, choices=list(FORCE_METHODS),
                        help='Force accumulation method (default: pairwise)')
    parser.add_argument('--report-every', type=int, default=None,
                        help='Print diagnostics every N steps (default: 100)')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final state to file (.npz or .json)')
    parser.add_argument('--load-state', type=str, default=None,
                        help='Start from a saved state instead of a preset')

    args = parser.parse_args(argv)
    run_simulation(args)


if __name__ == '__main__':
    main()
