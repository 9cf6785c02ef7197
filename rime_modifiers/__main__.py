# Path: rime_modifiers/__main__.py

import argparse
import logging
import os
import sys

from rime_modifiers.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
    LOG_LEVELS,
)
from rime_modifiers.errors import ModifierError
from rime_modifiers.modifiers import Modifier, to_word
from rime_modifiers.names import MODIFIER_NAMES, format_modifiers, parse_modifiers

logger = logging.getLogger("rime_modifiers")


def _int_arg(text):
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def _log_level_arg(text):
    level = text.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"unknown log level {text!r}, choose from {', '.join(LOG_LEVELS)}"
        )
    return level


def cmd_table(args):
    for bit, name in sorted(MODIFIER_NAMES.items()):
        flag = Modifier(1 << bit)
        print(f"{name:<8} {flag.name:<14} bit {bit:>2}  0x{int(flag):08x}")
    print(f"{'(all)':<8} {'MODIFIER_MASK':<14} {'':>6}  0x{int(Modifier.MODIFIER_MASK):08x}")


def cmd_describe(args):
    word = to_word(args.value)
    logger.debug("Describing 0x%08x", int(word))
    print(format_modifiers(word) or "(none)")
    print(f"0x{int(word & Modifier.MODIFIER_MASK):08x}")


def cmd_parse(args):
    print(f"0x{int(parse_modifiers(args.text)):08x}")


def build_parser():
    p = argparse.ArgumentParser(
        prog="rime-modifiers", description="Inspect Rime key event modifier masks"
    )
    p.add_argument(
        "--log-level",
        type=_log_level_arg,
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    sub = p.add_subparsers(dest="cmd", required=True)
    p1 = sub.add_parser("table", help="list every named modifier flag")
    p1.set_defaults(func=cmd_table)
    p2 = sub.add_parser("describe", help="spell out the modifiers of a mask")
    p2.add_argument("value", type=_int_arg, help="mask, decimal or 0x-prefixed hex")
    p2.set_defaults(func=cmd_describe)
    p3 = sub.add_parser("parse", help="turn 'Control+Shift' style text into a mask")
    p3.add_argument("text")
    p3.set_defaults(func=cmd_parse)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    # === Logging Configuration ===
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        args.func(args)
    except ModifierError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
