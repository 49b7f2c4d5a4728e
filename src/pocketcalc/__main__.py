"""CLI entry-point for pocketcalc.

Replays keystrokes through a calculator session and prints the display.

Usage:
    python -m pocketcalc "5+3=="
    python -m pocketcalc "120{Backspace}" --trace
    python -m pocketcalc "2^0.5=" --max-length 8
    python -m pocketcalc "8/0=" --fail-on-error

Every character is one key. Named keys go in braces: {Enter}, {Backspace},
{Escape}, {Delete}.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys

from pocketcalc import __version__
from pocketcalc.config import settings
from pocketcalc.core import Calculator
from pocketcalc.render import TextRenderer

_KEY_TOKEN = re.compile(r"\{([A-Za-z]+)\}|(.)", re.DOTALL)


def split_keys(text: str) -> list[str]:
    """Split a keystroke string into key names."""
    return [named or char for named, char in _KEY_TOKEN.findall(text)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocketcalc",
        description="Replay calculator keystrokes and print the display.",
    )
    parser.add_argument("keys", help="keystrokes, e.g. '5+3=' or '12{Backspace}'")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="print the display after every accepted key",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help=f"primary display width (default: {settings.MAX_DISPLAY_LENGTH})",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="exit with status 1 when the calculator ends in the error state",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    renderer = TextRenderer(sys.stdout, max_length=args.max_length)
    calc = Calculator()
    if args.trace:
        calc.subscribe(renderer)

    calc.press_keys(split_keys(args.keys))

    if not args.trace:
        renderer(calc.state)

    if args.fail_on_error and calc.state.is_error:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
