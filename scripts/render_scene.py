"""
Render a YAML scene to a PNG.

Usage:
    python scripts/render_scene.py src/street_scatter/configs/default_config.yaml --output tmp/scene.png
"""
import argparse
import os

import numpy as np
from PIL import Image
from rich.progress import BarColumn, Progress, TimeRemainingColumn
from termcolor import cprint

from street_scatter import build_sprite_registry, load_config_from_yaml, render_scene


def main():
    parser = argparse.ArgumentParser(description="Render a scattered street scene from YAML")
    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument("--output", type=str, default="tmp/scene.png", help="Output PNG filename")
    parser.add_argument("--seed-offset", type=int, default=0, help="Added to every integer segment seed")
    parser.add_argument("--dpi", type=float, default=None, help="Override the config's device pixel ratio")
    parser.add_argument("--verbose", action="store_true", help="Print every draw call")
    args = parser.parse_args()

    if not os.path.exists(args.config):
        cprint(f"Error: Config file {args.config} not found.", "red")
        return

    cprint(f"Loading config from {args.config}...", "cyan")
    config = load_config_from_yaml(args.config)
    if args.dpi is not None:
        config.dpi = args.dpi
    if args.seed_offset:
        for segment in config.segments:
            if isinstance(segment.seed, int):
                segment.seed += args.seed_offset

    sprites = build_sprite_registry(config.sprites)
    cprint(f"Loaded {len(sprites)} sprites", "cyan")

    output_dir = os.path.dirname(args.output)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    progress = Progress(
        "[progress.description]{task.description}",
        BarColumn(),
        "[progress.percentage]{task.percentage:>3.0f}%",
        "•",
        TimeRemainingColumn(),
    )
    with progress:
        task_id = progress.add_task("Scattering segments", total=len(config.segments))

        def on_segment(index, calls):
            progress.update(task_id, advance=1)
            if args.verbose:
                for call in calls:
                    progress.console.print(
                        f"segment {index}: {call.sprite_id} at ({call.x:.1f}, {call.y:.1f})"
                    )

        image = render_scene(config, sprites, on_segment=on_segment)

    Image.fromarray(np.asarray(image)).save(args.output)
    cprint(f"Scene saved to {args.output}", "yellow")


if __name__ == "__main__":
    main()
