#!/usr/bin/env python3
"""
Command-line heightmap generator.

Builds one or more diamond-square heightmaps and writes them as
grayscale images, optionally with a JSON file of terrain statistics.
"""

import argparse
import sys
import json
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .engine import DiamondSquare, normalize, terrain_statistics
from .procgen import GENERATION_PARAMS
from .render import save_heightmap, FORMATS


def output_paths(output: Path, count: int) -> List[Path]:
    """One path per map; batches get a zero-padded index suffix."""

    if count == 1:
        return [output]
    return [output.with_name(f"{output.stem}_{i:03d}{output.suffix}") for i in range(count)]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    roughness_default = GENERATION_PARAMS.params["roughness"][2]

    parser = argparse.ArgumentParser(description="Generate diamond-square heightmap images")
    parser.add_argument("--detail", type=int, default=10, help="Detail level; side length is 2^detail + 1")
    parser.add_argument("--roughness", type=float, default=roughness_default,
                        help="Terrain roughness, 0 = smooth, 1 = mountainous")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    parser.add_argument("--output", type=Path, default=Path("fractal.png"), help="Output file path")
    parser.add_argument("--format", type=str, default="png", choices=FORMATS, help="Output format")
    parser.add_argument("--count", type=int, default=1, help="Number of heightmaps to generate")
    parser.add_argument("--stats-json", type=Path, default=None,
                        help="Optional output path for terrain statistics JSON")

    return parser.parse_args(argv)


def check_parameters(args: argparse.Namespace) -> dict:
    """Reject out-of-range command-line parameters instead of clamping them."""

    parameters = GENERATION_PARAMS.extract_params()
    parameters["roughness"] = args.roughness

    if not GENERATION_PARAMS.validate(parameters):
        ranges = GENERATION_PARAMS.get_param_ranges()
        bounds = ", ".join(f"{name} in [{lo}, {hi}]" for name, (lo, hi) in ranges.items())
        raise ValueError(f"Parameters out of range, expected {bounds}")
    if args.count < 1:
        raise ValueError(f"Count must be at least 1, got {args.count}")

    return parameters


def generate(args: argparse.Namespace) -> List[dict]:
    """Generate and save every requested heightmap, returning their records."""

    parameters = check_parameters(args)
    records = []

    paths = output_paths(args.output, args.count)
    for i, path in enumerate(tqdm(paths, desc="Generating heightmaps", disable=args.count == 1)):
        seed = args.seed + i if args.seed is not None else None
        generator = DiamondSquare(parameters=parameters, seed=seed)

        heightmap = generator.construct(args.detail)
        if args.format == "png":
            save_heightmap(normalize(heightmap), path, format="png")
        else:
            save_heightmap(heightmap, path, format=args.format)

        records.append({
            "path": str(path),
            "seed": seed,
            "stats": terrain_statistics(heightmap),
        })

    return records


def write_stats(args: argparse.Namespace, records: List[dict]) -> None:
    payload = {
        "config": {
            "detail": args.detail,
            "roughness": args.roughness,
            "seed": args.seed,
            "format": args.format,
        },
        "heightmaps": records,
    }

    args.stats_json.parent.mkdir(parents=True, exist_ok=True)
    with open(args.stats_json, "w") as f:
        json.dump(payload, f, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for heightmap generation."""

    args = parse_args(argv)

    try:
        records = generate(args)

        for record in records:
            stats = record["stats"]
            print(
                f"Saved heightmap: {record['path']} "
                f"({stats['shape'][0]}x{stats['shape'][1]}, "
                f"min={stats['min_height']:.3f}, max={stats['max_height']:.3f})"
            )

        if args.stats_json is not None:
            write_stats(args, records)
            print(f"Statistics saved to: {args.stats_json}")

    except (ValueError, OSError) as e:
        print(f"Generation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
