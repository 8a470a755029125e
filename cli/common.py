from __future__ import annotations

"""cli.common

Small shared helpers for the CLI.
"""

import sys
from typing import Optional, TextIO

USAGE_TITLE = "To Errorbook:"
USAGE_EXAMPLE = "E.g. cargo errorbook clippy or cargo errorbook check"

EXIT_USAGE = 1


def print_usage(stream: Optional[TextIO] = None) -> None:
    stream = sys.stdout if stream is None else stream
    print(USAGE_TITLE, file=stream)
    print(USAGE_EXAMPLE, file=stream)
