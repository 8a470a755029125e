from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import List, Optional, Tuple

from cli.common import USAGE_EXAMPLE

MIN_TOKENS = 2


def build_parser() -> argparse.ArgumentParser:
    """Parser for the leading token cargo passes to a subcommand.

    Everything after it belongs to cargo and is never parsed here, so help
    is disabled (``-h`` is forwarded to cargo).
    """
    parser = argparse.ArgumentParser(
        prog="cargo errorbook",
        description="Turn cargo diagnostics into a browsable mdBook.",
        epilog=USAGE_EXAMPLE,
        add_help=False,
    )
    parser.add_argument(
        "name",
        help="Subcommand name cargo passes through (normally 'errorbook').",
    )
    parser.add_argument(
        "cargo_args",
        nargs="*",
        metavar="CARGO_SUBCOMMAND [ARGS...]",
        help="Wrapped cargo subcommand and its arguments, forwarded verbatim.",
    )
    return parser


def split_argv(argv: Sequence[str]) -> Optional[Tuple[str, List[str]]]:
    """Split ``argv`` (without the program path) into (name, cargo args).

    Returns ``None`` when there are too few tokens to name a cargo subcommand.
    """
    if len(argv) < MIN_TOKENS:
        return None
    parser = build_parser()
    # "--" keeps a leading dash in the name token from reading as an option.
    ns = parser.parse_args(["--", argv[0]])
    return str(ns.name), list(argv[1:])
