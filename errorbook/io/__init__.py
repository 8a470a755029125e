"""errorbook.io

Filesystem contracts and IO helpers.

The generated book layout is what the renderer consumes, so the "where do
files go" rules live here and nowhere else.
"""

from __future__ import annotations

from .fs import write_text_atomic
from .layout import BOOK_DIRNAME, BookPaths, get_book_paths

__all__ = [
    "BOOK_DIRNAME",
    "BookPaths",
    "get_book_paths",
    "write_text_atomic",
]
