"""tools/cargo

Cargo adapter: runner (process invocation) + stream (record decoding) +
normalize (compiler-message -> Diagnostic).
"""

from __future__ import annotations

import logging
from typing import Callable, List

from errorbook.domain import Diagnostic
from tools.core_cmd import CmdResult

from .normalize import extract_diagnostic, extract_diagnostics
from .runner import build_cargo_command, resolve_cargo_bin, run_cargo
from .stream import MAX_STREAM_BYTES, RawEvent, compiler_messages, read_stream

logger = logging.getLogger(__name__)

CommandRunner = Callable[[List[str], int], CmdResult]


def capture_cargo(cmd: List[str], max_stdout_bytes: int) -> CmdResult:
    return run_cargo(cmd, max_stdout_bytes=max_stdout_bytes)


def collect_diagnostics(
    cmd: List[str],
    *,
    max_stream_bytes: int = MAX_STREAM_BYTES,
    runner: CommandRunner = capture_cargo,
) -> List[Diagnostic]:
    """Run cargo to completion and return its diagnostics in stream order."""
    res = runner(cmd, max_stream_bytes)
    # Compile errors make cargo exit non-zero; they are the book's content.
    logger.info("%s exited with %d after %.1fs", res.command_str, res.exit_code, res.elapsed_seconds)

    events = read_stream(res.stdout, max_bytes=max_stream_bytes, truncated=res.truncated)
    return extract_diagnostics(compiler_messages(events))


__all__ = [
    "CommandRunner",
    "MAX_STREAM_BYTES",
    "RawEvent",
    "build_cargo_command",
    "capture_cargo",
    "collect_diagnostics",
    "extract_diagnostic",
    "extract_diagnostics",
    "read_stream",
    "resolve_cargo_bin",
    "run_cargo",
]
