#!/usr/bin/env python3
"""
cargo subcommand: turn cargo diagnostics into a browsable mdBook.

Usage:
  cargo errorbook check
  cargo errorbook clippy --all-targets
  cargo-errorbook errorbook build --release

Every argument after ``errorbook`` is forwarded to cargo, followed by
``--message-format json``. The book is written to ``target/errorbook/``,
rendered with ``mdbook build`` and opened in the default browser.

Configuration: ``.env`` / ``errorbook.yaml`` / ``ERRORBOOK_*`` variables
(see :mod:`pipeline.config`).
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from cli.dispatch import dispatch
from pipeline.wiring import build_pipeline, load_runtime_config


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        config = load_runtime_config()
    except (ValueError, FileNotFoundError) as e:
        raise SystemExit(f"[config] {e}") from e
    return dispatch(argv, build_pipeline(), config=config)


if __name__ == "__main__":
    raise SystemExit(main())
