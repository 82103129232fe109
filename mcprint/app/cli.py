from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from ..config import PrinterTarget, WIDTH_ENV_VAR, load_target
from ..errors import NoInputError, PrintError
from ..printing import PrintItem, PrintJobBuilder, PrintSettings
from ..rendering import generate_calibration_grid
from ..transport import TcpTransport
from .inputs import merge_items, resolve_args


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mcprint",
        description="Send text and images to a network ESC/POS thermal receipt printer.",
    )
    parser.add_argument("items", nargs="*", help="Literal text, a text file, or an image (.png/.jpg/.bmp)")
    parser.add_argument("--host", help="Printer IP address (overrides PRINTER_HOST)")
    parser.add_argument("--port", type=int, help="Printer port (overrides PRINTER_PORT, default 9100)")
    parser.add_argument("--width", type=int, help="Printer width in dots (overrides PRINTER_WIDTH, default 384)")
    parser.add_argument("--no-dither", action="store_true", help="Use a fixed threshold instead of dithering")
    parser.add_argument("--calibrate", action="store_true", help="Print a page to determine printer width in dots")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def read_stdin() -> Optional[bytes]:
    if sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.buffer.read()


def collect_items(args: argparse.Namespace, stdin_data: Optional[bytes]) -> List[PrintItem]:
    resolved = resolve_args(args.items) if args.items else []
    items = merge_items(resolved, stdin_data)
    if not items:
        raise NoInputError("No input provided; pass text, a file path, or pipe via stdin")
    return items


def _builder(args: argparse.Namespace, target: PrinterTarget) -> PrintJobBuilder:
    return PrintJobBuilder(target.width, PrintSettings(dither=not args.no_dither))


def print_items(args: argparse.Namespace, stdin_data: Optional[bytes]) -> int:
    items = collect_items(args, stdin_data)
    target = load_target(args.host, args.port, args.width)
    data = _builder(args, target).build(items)
    TcpTransport(target.host, target.port).write(data)
    return 0


def print_calibration(args: argparse.Namespace) -> int:
    target = load_target(args.host, args.port, args.width)
    data = _builder(args, target).build_from_grid(generate_calibration_grid())
    print("Printing calibration page...")
    print("The last fully visible dashed line indicates your printer width.")
    print(f"Set {WIDTH_ENV_VAR} in your .env to that value.")
    TcpTransport(target.host, target.port).write(data)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.calibrate:
            return print_calibration(args)
        return print_items(args, read_stdin())
    except PrintError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
