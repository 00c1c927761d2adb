#!/usr/bin/env python3
"""
Strip CLI: push one effect to an Adalight LED strip.

Usage:
    python scripts/strip_cli.py fill 255 0 0
    python scripts/strip_cli.py --port /dev/ttyUSB1 --leds 120 rainbow --offset 10
    python scripts/strip_cli.py --config config/strip.yaml gradient 255 0 0 0 0 255
    python scripts/strip_cli.py --dry-run set 3 0 255 0
    python scripts/strip_cli.py --keep-alive 1.0 fill 255 0 0   # resend until Ctrl-C
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from adalight_strip import AdalightError, Color, LedController, WriteResult
from adalight_strip.config import load_config
from adalight_strip.constants import DEFAULT_BAUD, DEFAULT_PORT, DEFAULT_TIMEOUT
from adalight_strip.transport import MemoryTransport

DEFAULT_LEDS = 60

# ---------------------------------------------------------------------------
# Terminal helpers
# ---------------------------------------------------------------------------


class C:
    """ANSI color codes (no-op on non-TTY)."""

    if sys.stdout.isatty():
        BOLD = "\033[1m"
        DIM = "\033[2m"
        GREEN = "\033[32m"
        RED = "\033[31m"
        RESET = "\033[0m"
    else:
        BOLD = DIM = GREEN = RED = RESET = ""


def ok(text: str) -> None:
    print(f"  {C.GREEN}✓{C.RESET} {text}")


def fail(text: str) -> None:
    print(f"  {C.RED}✗{C.RESET} {text}")


def info(text: str) -> None:
    print(f"  {C.DIM}{text}{C.RESET}")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _rgb(parser: argparse.ArgumentParser, values: list[int]) -> Color:
    try:
        return Color(*values)
    except AdalightError as exc:
        parser.error(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Drive an Adalight LED strip")
    parser.add_argument("--config", type=Path, help="YAML strip config (overrides defaults)")
    parser.add_argument("--port", help=f"serial port (default {DEFAULT_PORT})")
    parser.add_argument("--leds", type=int, help=f"LED count (default {DEFAULT_LEDS})")
    parser.add_argument("--baud", type=int, help=f"baud rate (default {DEFAULT_BAUD})")
    parser.add_argument("--dry-run", action="store_true", help="print the frame, don't open a port")
    parser.add_argument(
        "--keep-alive",
        type=float,
        metavar="SECONDS",
        help="resend the frame at this interval until interrupted",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("fill", help="set every LED to one color")
    p.add_argument("rgb", type=int, nargs=3, metavar=("R", "G", "B"))

    sub.add_parser("clear", help="turn every LED off")

    p = sub.add_parser("set", help="set a single LED")
    p.add_argument("index", type=int)
    p.add_argument("rgb", type=int, nargs=3, metavar=("R", "G", "B"))

    p = sub.add_parser("rainbow", help="spread a hue cycle across the strip")
    p.add_argument("--offset", type=int, default=0)

    p = sub.add_parser("gradient", help="fade between two colors")
    p.add_argument("start", type=int, nargs=3, metavar=("R1", "G1", "B1"))
    p.add_argument("end", type=int, nargs=3, metavar=("R2", "G2", "B2"))

    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def make_controller(args: argparse.Namespace) -> LedController:
    port, leds, baud, timeout = DEFAULT_PORT, DEFAULT_LEDS, DEFAULT_BAUD, DEFAULT_TIMEOUT
    level = "INFO"
    if args.config:
        config = load_config(args.config)
        port, leds, baud, timeout = config.port, config.led_count, config.baud, config.timeout
        level = config.log_level

    if args.port is not None:
        port = args.port
    if args.leds is not None:
        leds = args.leds
    if args.baud is not None:
        baud = args.baud
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    if args.dry_run:
        return LedController(MemoryTransport(), leds, baud_rate=baud)
    return LedController.for_port(port, led_count=leds, baud_rate=baud, timeout=timeout)


def apply(strip: LedController, args: argparse.Namespace, parser: argparse.ArgumentParser) -> WriteResult:
    if args.command == "fill":
        return strip.fill(_rgb(parser, args.rgb))
    if args.command == "clear":
        return strip.clear()
    if args.command == "set":
        return strip.set_led(args.index, _rgb(parser, args.rgb))
    if args.command == "rainbow":
        return strip.rainbow(args.offset)
    return strip.gradient(_rgb(parser, args.start), _rgb(parser, args.end))


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    try:
        strip = make_controller(args)
    except (AdalightError, FileNotFoundError) as exc:
        fail(str(exc))
        return 1

    with strip:
        if not strip.is_open:
            fail("Could not open the strip (see log for details)")
            return 1
        info(f"Controlling {strip.led_count} LEDs")

        result = apply(strip, args, parser)
        if not result:
            fail(result.message)
            return 1
        ok(f"{args.command} sent")

        if args.dry_run:
            info(strip.frame.hex(" "))

        if args.keep_alive:
            info(f"Resending every {args.keep_alive}s, Ctrl-C to stop")
            try:
                while True:
                    time.sleep(args.keep_alive)
                    result = strip.refresh()
                    if not result:
                        fail(result.message)
                        return 1
            except KeyboardInterrupt:
                print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
