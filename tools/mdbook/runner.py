"""tools/mdbook/runner.py

Runs ``mdbook build`` inside a generated book directory.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List

from errorbook.errors import RendererError
from tools.core_cmd import which_or_raise

logger = logging.getLogger(__name__)

MDBOOK_FALLBACKS = ["~/.cargo/bin/mdbook", "/opt/homebrew/bin/mdbook", "/usr/local/bin/mdbook"]
INSTALL_HINT = "Maybe `cargo install mdbook`?"


def build_command(mdbook_bin: str) -> List[str]:
    return [mdbook_bin, "build"]


def build_book(book_dir: Path, *, mdbook_bin: str = "mdbook") -> None:
    """Render the book in place. Any failure raises :class:`RendererError`."""
    try:
        resolved = which_or_raise(mdbook_bin, fallbacks=MDBOOK_FALLBACKS)
    except FileNotFoundError as e:
        raise RendererError(f"{mdbook_bin} not found. {INSTALL_HINT}") from e

    cmd = build_command(resolved)
    logger.debug("running %s in %s", cmd, book_dir)
    try:
        proc = subprocess.run(cmd, cwd=str(book_dir))
    except OSError as e:
        raise RendererError(f"{' '.join(cmd)} failed to start: {e}. {INSTALL_HINT}") from e

    if proc.returncode != 0:
        raise RendererError(f"{' '.join(cmd)} exited with {proc.returncode}. {INSTALL_HINT}")
