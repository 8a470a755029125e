"""errorbook.io.fs

Atomic text writers.

A book page is either the previous run's content or this run's content, never
half of each: files are written to a temp file next to the target and moved
into place with ``os.replace()``.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_text_atomic(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Write text atomically (temp file + ``os.replace``)."""

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, p)
    finally:
        # Only left behind when os.replace failed.
        if tmp_path.exists():
            tmp_path.unlink()
