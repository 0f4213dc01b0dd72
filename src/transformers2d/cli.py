from __future__ import annotations

import argparse
import logging
import sys

from .dxf_transform import transform_dxf
from .geometry import format_number
from .grammar import parse_transform_calls, supported_calls
from .log import setup_logging
from .matrix import Transformers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compose 2D affine transforms from transform strings.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown transform names and singular inversions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Print the composed matrix(a,b,c,d,e,f)")
    render.add_argument("transform", help='Transform list, e.g. "translate(10,15) rotate(30)"')
    render.add_argument("--inverse", action="store_true", help="Invert the matrix first")

    point = sub.add_parser("point", help="Map a point through the transform")
    point.add_argument("transform", help="Transform list")
    point.add_argument("x", type=float)
    point.add_argument("y", type=float)
    point.add_argument("--inverse", action="store_true", help="Map through the inverse transform")

    explain = sub.add_parser("explain", help="List the calls recognized in a transform list")
    explain.add_argument("transform", help="Transform list")

    dxf = sub.add_parser("dxf", help="Apply the transform to every entity of a DXF file")
    dxf.add_argument("transform", help="Transform list")
    dxf.add_argument("input_dxf", help="Path to input DXF file")
    dxf.add_argument("output_dxf", help="Path to output DXF file")
    return parser


def _build(args: argparse.Namespace) -> Transformers:
    transform = Transformers(args.transform, strict=args.strict)
    if getattr(args, "inverse", False):
        transform.inverse(strict=args.strict)
    return transform


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "render":
            print(_build(args).render())
        elif args.command == "point":
            mapped = _build(args).point_to(args.x, args.y)
            print(f"{format_number(mapped.x)} {format_number(mapped.y)}")
        elif args.command == "explain":
            for call in supported_calls(parse_transform_calls(args.transform), strict=args.strict):
                print(call)
        elif args.command == "dxf":
            count = transform_dxf(args.input_dxf, args.output_dxf, _build(args))
            print(f"Transformed {count} entities")
    except Exception as exc:
        print(f"Command failed: {exc}", file=sys.stderr)
        return 1
    return 0
