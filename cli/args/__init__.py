"""CLI argument builder modules.

The top-level :mod:`cargo_errorbook` is intentionally kept thin; the parser
is assembled here.

- :func:`cli.args.base.build_parser`
- :func:`cli.args.base.split_argv`
"""

from __future__ import annotations

__all__ = [
    "base",
]
