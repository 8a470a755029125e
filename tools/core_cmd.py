"""tools/core_cmd.py

Command-execution helpers shared across the process adapters (cargo, mdbook).

This module deliberately avoids tool-specific knowledge. It provides:

* :func:`which_or_raise` - resolve executables reliably across environments.
* :func:`run_cmd` - run a subprocess (no shell=True) and capture its stdout
  as bytes, capped at a maximum size.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stdout: bytes
    truncated: bool = False


def which_or_raise(bin_name: str, fallbacks: Optional[List[str]] = None) -> str:
    """Locate an executable and return its absolute path."""
    found = shutil.which(bin_name)
    if found:
        return found

    for candidate in fallbacks or []:
        p = Path(candidate).expanduser()
        if p.exists() and os.access(str(p), os.X_OK):
            return str(p)

    raise FileNotFoundError(
        f"Executable '{bin_name}' not found on PATH.\n"
        f"Install it and ensure it's available to this Python process.\n"
        f"Tried fallbacks: {fallbacks or []}"
    )


def run_cmd(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
    max_stdout_bytes: int = 0,
) -> CmdResult:
    """Run a subprocess to completion and capture stdout (no ``shell=True``).

    stderr is inherited so the tool's progress output reaches the terminal.
    When ``max_stdout_bytes`` is positive, stdout beyond that many bytes is
    dropped and ``truncated`` is set.

    Never raises on non-zero exit codes; only raises on execution errors
    (e.g. binary not found).
    """
    t0 = time.time()

    env2 = None
    if env is not None:
        env2 = os.environ.copy()
        env2.update(env)

    proc = subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        stdout=subprocess.PIPE,
        env=env2,
    )
    elapsed = time.time() - t0

    stdout = proc.stdout or b""
    truncated = False
    if max_stdout_bytes > 0 and len(stdout) > max_stdout_bytes:
        logger.debug("stdout of %s truncated: %d > %d bytes", cmd[0], len(stdout), max_stdout_bytes)
        stdout = stdout[:max_stdout_bytes]
        truncated = True

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=elapsed,
        command_str=" ".join(cmd),
        stdout=stdout,
        truncated=truncated,
    )
