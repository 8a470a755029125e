"""pipeline.book.write

Persist a finished :class:`DocumentTree` under the book layout.

Pages of a previous run are overwritten in place, never merged or deleted.
Any OS error is fatal and names the offending path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from errorbook.errors import BookWriteError
from errorbook.io import BookPaths, write_text_atomic

from .model import DocumentTree

logger = logging.getLogger(__name__)


def _write(path: Path, text: str) -> None:
    try:
        write_text_atomic(path, text)
    except OSError as e:
        raise BookWriteError(path, e) from e
    logger.debug("wrote %s", path)


def write_document_tree(tree: DocumentTree, paths: BookPaths) -> List[Path]:
    """Write manifest, pages and SUMMARY.md; return the written paths."""
    try:
        paths.src_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BookWriteError(paths.src_dir, e) from e

    written: List[Path] = []
    _write(paths.manifest, tree.manifest)
    written.append(paths.manifest)

    for file_name, content in tree.pages():
        p = paths.page(file_name)
        _write(p, content)
        written.append(p)

    _write(paths.summary, tree.summary)
    written.append(paths.summary)
    return written
