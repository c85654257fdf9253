"""CLI main entry point."""

import argparse
import logging
import sys

import numpy as np

from gravity_field.app import FieldApp
from gravity_field.io.gif_exporter import GIFExporter
from gravity_field.logging_config import setup_logging
from gravity_field.physics.diagnostics import kinetic_energy, potential_energy, total_momentum
from gravity_field.presets import PRESETS
from gravity_field.render.renderer_2d import Renderer2D
from gravity_field.utils.config import Config, load_config, save_config

logger = logging.getLogger(__name__)

# argparse destination -> Config field
_OVERRIDES = {
    'preset': 'preset',
    'bodies': 'n_bodies',
    'frames': 'frames',
    'dt': 'dt',
    'substeps': 'substeps',
    'strength': 'gravitational_strength',
    'grid': 'grid_count',
    'seed': 'seed',
    'output': 'output_path',
    'fps': 'fps',
    'gif_every': 'gif_every',
    'log_level': 'log_level',
}


def build_config(args) -> Config:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    for arg_name, field_name in _OVERRIDES.items():
        value = getattr(args, arg_name)
        if value is not None:
            setattr(config, field_name, value)
    if args.render:
        config.render = True
    if args.export_gif:
        config.export_gif = True
    config.validate()
    if config.preset.lower() not in PRESETS:
        raise ValueError(f"Unknown preset: {config.preset}. Available: {list(PRESETS.keys())}")
    return config


def print_diagnostics(app: FieldApp):
    G = app.config.gravitational_strength
    K = kinetic_energy(app.bodies)
    U = potential_energy(app.bodies, G)
    P = float(np.linalg.norm(total_momentum(app.bodies)))
    print(f"{app.frame_count:<8} {app.time:<10.3f} {K:<12.5f} {U:<12.5f} {K + U:<12.5f} {P:<12.3e}")


def run_simulation(config: Config, debug_every: int = 60):
    """Run a simulation from a validated config."""
    renderer = None
    if config.render or config.export_gif:
        renderer = Renderer2D(interactive=config.render)

    gif_exporter = None
    if config.export_gif:
        gif_exporter = GIFExporter(config.output_path + ".gif", fps=config.fps, every=config.gif_every)

    app = FieldApp(config, renderer=renderer, gif_exporter=gif_exporter)

    print(f"Running '{app.preset_name}' with {len(app.bodies)} bodies for {config.frames} frames")
    print(f"G: {config.gravitational_strength}, dt: {config.dt:.5f}, substeps: {config.substeps}, grid: {config.grid_count}")
    print(f"{'Frame':<8} {'Time':<10} {'K':<12} {'U':<12} {'E':<12} {'|P|':<12}")
    print("-" * 70)
    print_diagnostics(app)

    for _ in range(config.frames):
        if config.render and not renderer.is_open:
            print(f"Window closed at frame {app.frame_count}, stopping")
            break
        app.step_frame()
        if debug_every > 0 and app.frame_count % debug_every == 0:
            print_diagnostics(app)

    if gif_exporter:
        print(f"Exporting GIF to {gif_exporter.output_path}...")
        gif_exporter.export()

    app.close()
    print("Simulation complete!")
    return app


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Gravity Field - 2D gravity and force-field visualization")

    parser.add_argument('--config', type=str, default=None,
                        help='Load settings from a .json/.yaml file (command-line values override it)')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Write the effective settings to a .json/.yaml file')

    # Scene
    parser.add_argument('--preset', type=str, default=None, choices=list(PRESETS.keys()),
                        help='Preset scene (default: binary)')
    parser.add_argument('--bodies', type=int, default=None,
                        help='Number of bodies (cluster preset only)')
    parser.add_argument('--grid', type=int, default=None,
                        help='Field-line grid cells per axis (default: 40)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    # Physics
    parser.add_argument('--frames', type=int, default=None,
                        help='Number of frames to simulate (default: 600)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Frame time step (default: 1/60)')
    parser.add_argument('--substeps', type=int, default=None,
                        help='Integration substeps per frame (default: 5)')
    parser.add_argument('--strength', type=float, default=None,
                        help='Gravitational strength G (default: 0.81)')

    # Rendering and export
    parser.add_argument('--render', action='store_true',
                        help='Show a live window')
    parser.add_argument('--export-gif', action='store_true',
                        help='Export frames to an animated GIF')
    parser.add_argument('--output', type=str, default=None,
                        help='Output file base name')
    parser.add_argument('--fps', type=int, default=None,
                        help='Frame rate for GIF timing (default: 30)')
    parser.add_argument('--gif-every', type=int, default=None,
                        help='Keep every Nth frame in the GIF (default: 1)')

    # Logging
    parser.add_argument('--debug-every', type=int, default=60,
                        help='Print diagnostics every N frames (0 disables)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(config.log_level)

    if args.save_config:
        try:
            save_config(config, args.save_config)
        except ValueError as e:
            print(f"Cannot save config: {e}")
            sys.exit(1)
        logger.info("Config saved to %s", args.save_config)

    run_simulation(config, debug_every=args.debug_every)


if __name__ == '__main__':
    main()
