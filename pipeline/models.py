"""pipeline.models

Lightweight data structures passed from the CLI into the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from pipeline.config import ErrorbookConfig


@dataclass(frozen=True)
class RunRequest:
    """One error book run.

    ``cargo_args`` start with the cargo subcommand (``check``, ``clippy``...)
    and are forwarded verbatim; the JSON message flag is appended later.
    """

    cargo_bin: str
    cargo_args: Tuple[str, ...]
    config: ErrorbookConfig = field(default_factory=ErrorbookConfig)
