"""tools/cargo/runner.py

Tool-specific execution plumbing for cargo.
Keeps cargo CLI quirks (the ``CARGO`` env var, the JSON message flag) close
to the tool.
"""

from __future__ import annotations

import os
from typing import List, Mapping, Optional, Sequence

from tools.core_cmd import CmdResult, run_cmd, which_or_raise

CARGO_FALLBACKS = ["~/.cargo/bin/cargo"]
MESSAGE_FORMAT_ARGS = ("--message-format", "json")


def resolve_cargo_bin(env: Optional[Mapping[str, str]] = None) -> str:
    """Cargo exports ``CARGO`` to its subcommands; prefer it over PATH."""
    env = os.environ if env is None else env
    from_env = env.get("CARGO")
    if from_env:
        return from_env
    return which_or_raise("cargo", fallbacks=CARGO_FALLBACKS)


def build_cargo_command(cargo_bin: str, cargo_args: Sequence[str]) -> List[str]:
    return [cargo_bin, *cargo_args, *MESSAGE_FORMAT_ARGS]


def run_cargo(cmd: List[str], *, max_stdout_bytes: int) -> CmdResult:
    return run_cmd(cmd, max_stdout_bytes=max_stdout_bytes)
