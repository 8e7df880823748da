from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..designs import DesignRegistry
from .job import DEFAULT_COMPRESS_LEVEL, IconJobBuilder, RenderSettings

DEFAULT_DESIGN = "bookmarks"
DEFAULT_OUT_DIR = "public/icons"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pixelpng",
        description="pixelpng: render procedural icons straight to PNG.",
    )
    parser.add_argument("--design", default=DEFAULT_DESIGN, help=f"Icon design name (default: {DEFAULT_DESIGN})")
    parser.add_argument("--sizes", type=int, nargs="+", metavar="N", help="Icon sizes in pixels (default: from design)")
    parser.add_argument("--out", default=DEFAULT_OUT_DIR, metavar="DIR", help=f"Output directory (default: {DEFAULT_OUT_DIR})")
    parser.add_argument(
        "--level",
        type=int,
        choices=range(0, 10),
        default=DEFAULT_COMPRESS_LEVEL,
        help="zlib compression level (0-9)",
    )
    parser.add_argument("--verify", action="store_true", help="Decode every written file to check it")
    parser.add_argument("--list-designs", action="store_true", help="List known icon designs and exit")
    return parser.parse_args(argv)


def list_designs() -> int:
    registry = DesignRegistry.load()
    for design in registry.designs:
        sizes = ", ".join(str(size) for size in design.sizes)
        print(f"{design.name} ({sizes})")
    return 0


def generate(args: argparse.Namespace) -> int:
    registry = DesignRegistry.load()
    design = registry.require(args.design)
    sizes = args.sizes or list(design.sizes)
    settings = RenderSettings(compress_level=args.level, verify=args.verify)
    builder = IconJobBuilder(design, settings)
    out_dir = Path(args.out)
    written: List[str] = []
    failed = False
    for size in sizes:
        try:
            path = builder.write(size, out_dir)
        except Exception as exc:
            print(f"Size {size}: {exc}", file=sys.stderr)
            failed = True
            continue
        print(path)
        written.append(path.name)
    if written:
        print("Icons generated:", ", ".join(written))
    return 2 if failed else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.list_designs:
        return list_designs()
    try:
        return generate(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
