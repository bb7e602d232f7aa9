#!/usr/bin/env python3
"""Render a sphere scene.

This script demonstrates end-to-end rendering with the weekend raytracer. It
builds a demo scene, sets up the camera, renders on a process pool and writes
the result as PPM or PNG depending on the output suffix.

Usage:
    python -m examples.render_spheres [options]

Options:
    --scene NAME        Demo scene: random or three-spheres (default: random)
    --width WIDTH       Image width in pixels (default: 400)
    --aspect RATIO      Image aspect ratio (default: 1.5)
    --samples SAMPLES   Number of samples per pixel (default: 100)
    --depth DEPTH       Maximum bounces per path (default: 50)
    --threads THREADS   Worker processes (default: CPU count)
    --seed SEED         Render seed (default: 0)
    --scene-seed SEED   Seed for the random scene layout (default: 0)
    --t-max DIST        Far bound for hit tests (default: 100)
    --shading MODE      path or normals (default: path)
    --output OUTPUT     Output file path (default: image.ppm)
    --quiet             Suppress progress output

Example:
    python -m examples.render_spheres --width 200 --samples 20 --output spheres.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from weekend_raytracer.core.integrator import MAX_DEPTH, T_MAX
from weekend_raytracer.scene.demo import SCENES, get_scene_factory


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="random",
        help="Demo scene to render (default: random)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--aspect",
        type=float,
        default=3.0 / 2.0,
        help="Image aspect ratio, width / height (default: 1.5)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Number of samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum bounces per path (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="Worker processes (default: CPU count)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Render seed (default: 0)",
    )
    parser.add_argument(
        "--scene-seed",
        type=int,
        default=0,
        help="Seed for the random scene layout (default: 0)",
    )
    parser.add_argument(
        "--t-max",
        type=float,
        default=T_MAX,
        help=f"Far bound for hit tests; farther geometry is clipped (default: {T_MAX:g})",
    )
    parser.add_argument(
        "--shading",
        choices=["path", "normals"],
        default="path",
        help="Shading mode (default: path)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="image.ppm",
        help="Output file path, .ppm or .png (default: image.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_spheres(
    scene_name: str = "random",
    width: int = 400,
    aspect_ratio: float = 3.0 / 2.0,
    num_samples: int = 100,
    max_depth: int = MAX_DEPTH,
    threads: int | None = None,
    seed: int = 0,
    scene_seed: int = 0,
    t_max: float = T_MAX,
    shading: str = "path",
    output_path: str = "image.ppm",
    quiet: bool = False,
) -> Path:
    """Render a demo scene and save it to file.

    Args:
        scene_name: Name of the demo scene.
        width: Image width in pixels.
        aspect_ratio: Image width divided by height.
        num_samples: Number of samples per pixel.
        max_depth: Maximum bounces per path.
        threads: Worker processes, or None for the CPU count.
        seed: Render seed.
        scene_seed: Seed passed to the scene factory (used by random layouts).
        t_max: Far bound for hit tests.
        shading: "path" or "normals".
        output_path: Output file path (.ppm or .png).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from weekend_raytracer.camera.thin_lens import setup_camera
    from weekend_raytracer.core.renderer import Renderer, RenderSettings
    from weekend_raytracer.preview.export import save_image

    extra = {} if threads is None else {"threads": threads}
    settings = RenderSettings.from_aspect_ratio(
        width,
        aspect_ratio,
        samples_per_pixel=num_samples,
        max_depth=max_depth,
        seed=seed,
        t_max=t_max,
        shading=shading,
        **extra,
    )

    if not quiet:
        print(f"Creating {scene_name} scene ({settings.width}x{settings.height})...")

    scene_factory = get_scene_factory(scene_name)
    scene, camera_config = scene_factory(seed=scene_seed, aspect_ratio=aspect_ratio)

    renderer = Renderer(scene, setup_camera(camera_config), settings)

    if not quiet:
        print(
            f"Rendering {len(scene)} spheres, {num_samples} samples per pixel "
            f"on {settings.threads} workers..."
        )

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / target) * 100 if target > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows ({progress_pct:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    image = renderer.render(callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = save_image(image, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        render_spheres(
            scene_name=args.scene,
            width=args.width,
            aspect_ratio=args.aspect,
            num_samples=args.samples,
            max_depth=args.depth,
            threads=args.threads,
            seed=args.seed,
            scene_seed=args.scene_seed,
            t_max=args.t_max,
            shading=args.shading,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
