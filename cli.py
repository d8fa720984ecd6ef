import argparse
import json
import logging
import sys

from planetgen import HeightMapError, WorldGenerator, summarize_world
from planetgen.config import DEFAULT_SEED
import render


def build_world(args):
    gen = WorldGenerator(seed=args.seed)
    if args.height_map:
        gen.load_height_map(args.height_map)
    records = gen.generate_world(
        args.resolution,
        sea_level=args.sea_level,
        sunlight=args.sunlight,
        axial_tilt=args.axial_tilt,
        rotation_speed=args.rotation_speed,
        rotation_period=args.rotation_period,
        orbital_period=args.orbital_period,
        method=args.method,
    )
    return gen, records


def cmd_summary(args):
    _, records = build_world(args)
    print(json.dumps(summarize_world(records, args.sea_level), indent=2))


def cmd_preview(args):
    gen, records = build_world(args)
    render.save_preview(records, gen.grid, args.resolution, args.out,
                        width=args.width, height=args.height)
    print(f"Saved {args.out}")


def add_world_args(ap):
    ap.add_argument("--resolution", type=int, default=1, help="Grid resolution (0-15)")
    ap.add_argument("--seed", default=DEFAULT_SEED)
    ap.add_argument("--method", default="noise", help="noise | tectonic | raster")
    ap.add_argument("--sea-level", type=float, default=0.5)
    ap.add_argument("--sunlight", type=float, default=1.0)
    ap.add_argument("--axial-tilt", type=float, default=23.5)
    ap.add_argument("--rotation-speed", type=float, default=1.0)
    ap.add_argument("--rotation-period", type=float, default=1.0, help="Days")
    ap.add_argument("--orbital-period", type=float, default=365.0, help="Days")
    ap.add_argument("--height-map", default=None, help="Grayscale image used as elevation")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Headless spherical world generator")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers()

    ap_sum = sub.add_parser("summary", help="Print world statistics as JSON")
    add_world_args(ap_sum)
    ap_sum.set_defaults(func=cmd_summary)

    ap_prev = sub.add_parser("preview", help="Render an equirectangular biome PNG")
    add_world_args(ap_prev)
    ap_prev.add_argument("--out", required=True, help="PNG path")
    ap_prev.add_argument("--width", type=int, default=720)
    ap_prev.add_argument("--height", type=int, default=360)
    ap_prev.set_defaults(func=cmd_preview)

    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(args, "func"):
        ap.print_help()
        return 1
    try:
        args.func(args)
    except HeightMapError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
