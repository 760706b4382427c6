#!/usr/bin/env python3
"""
Command-line decomposition of a rectilinear polygon into rectangles.

Usage:
    rectdecomp <polygon file> [options]

Options:
    -o, --output    Write rectangles to a JSON file
    --plot          Render polygon and rectangles to an image
    --config        Load settings from a JSON config file
    --strict        Fail when a wall cannot be paired
    --verify        Check that the rectangles tile the polygon exactly
    -v              More logging (-vv for debug output)

Example:
    rectdecomp shapes/l_shape.txt -o l_shape.rects.json --plot l_shape.png
"""

import argparse
import logging
import os
import sys

from .config import DecompConfig
from .coverage import check_coverage
from .decomposer import decompose
from .errors import DecompositionError
from .plot import plot_decomposition
from .polygon_io import load_points, save_rects


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rectdecomp',
        description='Decompose a rectilinear polygon into rectangles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s polygon.txt
  %(prog)s polygon.json -o rects.json
  %(prog)s polygon.json --plot polygon.png --verify
        """
    )
    parser.add_argument('input', help='Polygon file (.json or text with one "x y" per line)')
    parser.add_argument('-o', '--output', help='Output JSON file for rectangles')
    parser.add_argument('--plot', help='Output image (.png) of the decomposition')
    parser.add_argument('--config', help='JSON config file (default settings if missing)')
    parser.add_argument('--strict', action='store_true',
                        help='Fail when a left wall has no matching right wall')
    parser.add_argument('--verify', action='store_true',
                        help='Check coverage of the result and fail if it is not exact')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase logging (-v info, -vv debug)')
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if not os.path.exists(args.input):
        print(f"ERROR: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        config = DecompConfig.load(args.config) if args.config else DecompConfig()
        if args.strict:
            config.strict_pairing = True
        if args.verbose >= 2:
            config.log_snapshots = True

        errors = config.validate()
        if errors:
            for error in errors:
                print(f"ERROR: config: {error}", file=sys.stderr)
            return 1

        points = load_points(args.input)
        print(f"Polygon: {len(points)} vertices")

        rects = decompose(points, config)
        print(f"Rectangles: {len(rects)} (area {sum(r.area for r in rects)})")
        for i, rect in enumerate(rects):
            print(f"  {i}: ({rect.min_x}, {rect.min_y}) - ({rect.max_x}, {rect.max_y})")

        if args.output:
            save_rects(rects, args.output)
            print(f"Saved: {args.output}")

        if args.plot:
            plot_decomposition(
                points, rects, args.plot,
                title=os.path.basename(args.input),
                dpi=config.plot_dpi,
                show_labels=config.plot_show_labels,
            )
            print(f"Saved: {args.plot}")

        if args.verify:
            report = check_coverage(points, rects)
            print(f"Coverage: {report}")
            if not report.ok:
                print("ERROR: rectangles do not tile the polygon exactly", file=sys.stderr)
                return 1

    except (DecompositionError, ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
