"""errorbook.io.layout

Canonical layout of the generated book directory::

  <output_root>/errorbook/
    book.toml
    src/SUMMARY.md
    src/<component>.md
    src/<index><component>.md
    book/index.html        (written by the renderer)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

BOOK_DIRNAME = "errorbook"
MANIFEST_NAME = "book.toml"
SUMMARY_NAME = "SUMMARY.md"


@dataclass(frozen=True)
class BookPaths:
    book_dir: Path
    manifest: Path
    src_dir: Path
    summary: Path
    html_index: Path

    def page(self, file_name: str) -> Path:
        return self.src_dir / file_name


def get_book_paths(output_root: Union[str, Path]) -> BookPaths:
    book_dir = Path(output_root) / BOOK_DIRNAME
    src_dir = book_dir / "src"
    return BookPaths(
        book_dir=book_dir,
        manifest=book_dir / MANIFEST_NAME,
        src_dir=src_dir,
        summary=src_dir / SUMMARY_NAME,
        html_index=book_dir / "book" / "index.html",
    )
