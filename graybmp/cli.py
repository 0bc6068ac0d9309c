"""Command-line shell: pick one operation, run it on one bitmap, write the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import SETTINGS, EngineSettings, configure_logging
from .infrastructure.bitmap import save_bitmap
from .infrastructure.source import LOADER, SourceLoader
from .processing.histogram import dump_histogram
from .processing.pipeline import OPERATIONS, get_operation, run_operation

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graybmp",
        description="Apply one transformation to an 8-bit grayscale bitmap.",
    )
    parser.add_argument("operation", nargs="?", help="operation tag or menu number (see --list), or \"serve\"")
    parser.add_argument("input", nargs="?", help="input BMP path or http(s) URL")
    parser.add_argument("-o", "--output", help="output BMP path (default: <output dir>/<tag>.bmp)")
    parser.add_argument("--delta", type=int, help="brightness offset, may be negative")
    parser.add_argument("--factor", type=float, help="contrast factor, >= 0")
    parser.add_argument("--threshold", type=int, help="manual binarization threshold, 0..255")
    parser.add_argument("--list", action="store_true", help="print the operation menu and exit")
    parser.add_argument("--serve", action="store_true", help="run the HTTP service instead")
    return parser


def menu_lines() -> List[str]:
    lines = []
    for op in OPERATIONS:
        params = f" ({', '.join('--' + name for name in op.params)})" if op.params else ""
        lines.append(f"{op.code:>2}. {op.tag:<22} {op.label}{params}")
    return lines


def default_output_path(tag: str, settings: EngineSettings = SETTINGS) -> Path:
    return Path(settings.output_dir) / f"{tag}.bmp"


def serve(settings: EngineSettings = SETTINGS) -> None:
    from .app import create_app

    create_app(settings).run(host="0.0.0.0", port=settings.port, debug=False)


def run(
    args: argparse.Namespace,
    settings: EngineSettings = SETTINGS,
    loader: SourceLoader = LOADER,
    out=None,
) -> int:
    out = out or sys.stdout
    operation = get_operation(args.operation)
    bitmap = loader.load(args.input)
    result = run_operation(
        operation,
        bitmap.grid,
        settings=settings,
        delta=args.delta,
        factor=args.factor,
        threshold=args.threshold,
    )

    if result.histogram is not None:
        dump_histogram(result.histogram, sink=lambda line: print(line, file=out))
        return 0

    target = Path(args.output) if args.output else default_output_path(operation.tag, settings)
    save_bitmap(bitmap, result.grid, target)
    if result.threshold is not None:
        print(f"threshold: {result.threshold}", file=out)
    log.info("wrote %s (%s)", target, operation.label)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(menu_lines()))
        return 0
    if args.serve or args.operation == "serve":
        serve()
        return 0
    if not args.operation or not args.input:
        parser.error("an operation and an input bitmap are required")

    try:
        return run(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
