#!/usr/bin/env python3
"""
shapez-shape - Main Entry Point

Parses and validates shapez shape keys, and generates Python constants
from them.
"""

import argparse
import sys


def run_parse(args):
    """Parse and display a shape key."""
    from shapez_shape.shapes.parser import ShapeCodeParser
    from shapez_shape.shapes.encoder import ShapeCodeEncoder
    from shapez_shape.shapes.errors import ParseError

    try:
        shape = ShapeCodeParser.parse(args.code, allow_empty_layers=args.allow_empty_layers)
    except ParseError as e:
        print(f"Error: {e.format_diagnostic()}", file=sys.stderr)
        return 1

    print(f"Shape code: {args.code}")
    print(f"Normalized: {shape.to_code()}")
    print(f"Layers: {shape.num_layers}")
    print()
    print(ShapeCodeEncoder.format_for_display(shape, multiline=True))

    if args.verbose:
        grids = ShapeCodeEncoder.to_visual_grid(shape)
        for layer_idx in reversed(range(shape.num_layers)):
            print()
            print(f"Layer {layer_idx}:")
            for row in grids[layer_idx]:
                print("  " + " ".join(row))
            for position, description in ShapeCodeEncoder.describe_layer(shape.layers[layer_idx]).items():
                print(f"  {position:12s} {description}")
    return 0


def run_check(args):
    """Check one or more keys, reporting every failure."""
    from shapez_shape.shapes.parser import ShapeCodeParser

    failures = 0
    for result in ShapeCodeParser.check_all(args.codes, allow_empty_layers=args.allow_empty_layers):
        if result.ok:
            print(f"OK     {result.key}")
        else:
            failures += 1
            print(f"ERROR  {result.key!r}")
            for line in result.error.format_diagnostic().splitlines():
                print(f"       {line}")

    if failures:
        print(f"\n{failures} of {len(args.codes)} keys invalid")
        return 1
    return 0


def run_emit(args):
    """Emit a Python module with one Shape constant per NAME=KEY pair."""
    from shapez_shape.shapes.parser import ShapeCodeParser
    from shapez_shape.shapes.encoder import ShapeCodeEncoder
    from shapez_shape.shapes.errors import ParseError

    named_shapes = {}
    for spec in args.pairs:
        name, sep, code = spec.partition("=")
        name = name.strip()
        if not sep:
            print(f"Error: Invalid pair '{spec}'. Format: NAME=KEY", file=sys.stderr)
            return 1
        problem = ShapeCodeEncoder.constant_name_problem(name)
        if problem:
            print(f"Error: Invalid pair '{spec}': {problem}. Format: NAME=KEY", file=sys.stderr)
            return 1
        if name in named_shapes:
            print(f"Error: Duplicate name '{name}'", file=sys.stderr)
            return 1
        try:
            named_shapes[name] = ShapeCodeParser.parse(code)
        except ParseError as e:
            print(f"Error in {name}: {e.format_diagnostic()}", file=sys.stderr)
            return 1

    source = ShapeCodeEncoder.to_module_source(named_shapes)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(source)
        if args.verbose:
            print(f"Wrote {len(named_shapes)} shapes to {args.output}")
    else:
        print(source, end="")
    return 0


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="shapez-shape - Parse and validate shapez shape keys"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse shape command
    parse_parser = subparsers.add_parser("parse", help="Parse and display a shape key")
    parse_parser.add_argument("code", help="Shape key to parse (e.g., RuCw--Cw:----Ru--)")
    parse_parser.add_argument(
        "--allow-empty-layers",
        action="store_true",
        help="Accept layers whose quadrants are all empty"
    )
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also show the quadrant grid of every layer"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate one or more shape keys")
    check_parser.add_argument("codes", nargs="+", help="Shape keys to validate")
    check_parser.add_argument(
        "--allow-empty-layers",
        action="store_true",
        help="Accept layers whose quadrants are all empty"
    )

    # Emit command
    emit_parser = subparsers.add_parser("emit", help="Generate Python constants from shape keys")
    emit_parser.add_argument(
        "pairs",
        nargs="+",
        help="NAME=KEY pairs (e.g., LOGO=RuCw--Cw:----Ru--)"
    )
    emit_parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the module to this file instead of stdout"
    )
    emit_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report what was written"
    )

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "parse":
        return run_parse(args)
    elif args.command == "check":
        return run_check(args)
    elif args.command == "emit":
        return run_emit(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
