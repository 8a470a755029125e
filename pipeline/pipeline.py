"""pipeline.pipeline

Single high-level object representing this repo's capability: turning one
cargo invocation into an error book.

Callers (CLI, scripts, tests) go through :class:`ErrorBookPipeline` built by
:func:`pipeline.wiring.build_pipeline` instead of importing the orchestrator
and its collaborators directly.
"""

from __future__ import annotations

from collections.abc import Callable

from pipeline.models import RunRequest
from pipeline.orchestrator import run_errorbook


class ErrorBookPipeline:
    """High-level facade over the pipeline."""

    def __init__(self, *, run_fn: Callable[[RunRequest], int] = run_errorbook) -> None:
        self._run_fn = run_fn

    def run(self, req: RunRequest) -> int:
        return int(self._run_fn(req))
