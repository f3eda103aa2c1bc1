# magic_converter/cli.py
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from . import __version__
from .logic import (
    MAGIC_MAX,
    AmbiguousImageError,
    ReverseMagicError,
    format_magic,
    parse_magic_value,
    reverse_magic,
)

PROG = "magic-converter"


# ---------- modes ----------
def cmd_format(text: str, magic: int) -> int:
    encoded = format_magic(magic)
    print(f'{text} => "{encoded}"')
    return 0


def cmd_reverse(text: str) -> int:
    try:
        preimage = reverse_magic(text)
    except ReverseMagicError as e:
        # exit status stays 0
        print(f"No solution: {e}", file=sys.stderr)
        return 0
    except AmbiguousImageError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
    print(f"`{text}` <= {preimage}")
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Magic Value ⇆ Text Image Converter (CLI)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--reverse", action="store_true", default=False,
        help="decode a text image back into its magic value",
    )
    p.add_argument(
        "input", nargs="?",
        help=f"decimal magic value (0..{MAGIC_MAX}), or an image with --reverse; "
             "read from stdin when omitted",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    text = args.input if args.input is not None else sys.stdin.read().strip()

    if args.reverse:
        return cmd_reverse(text)

    try:
        magic = parse_magic_value(text)
    except ValueError as e:
        parser.error(str(e))
    return cmd_format(text, magic)


if __name__ == "__main__":
    raise SystemExit(main())
