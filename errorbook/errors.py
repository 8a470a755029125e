"""errorbook.errors

Exception taxonomy for one error book run.

Every failure is fatal for the current run. The CLI maps these to a
``SystemExit`` with a message naming the failing step.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ErrorbookError(RuntimeError):
    """Base class for unrecoverable run failures."""

    step = "run"


class StreamDecodeError(ErrorbookError):
    """A line of the cargo message stream is not a well-formed record."""

    step = "stream"

    def __init__(self, message: str, *, line_no: Optional[int] = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class DiagnosticExtractionError(ErrorbookError):
    """A compiler-message record lacks a field the extractor requires."""

    step = "extract"


class BookBuildError(ErrorbookError, ValueError):
    """The document tree cannot be laid out (two pages share a file name)."""

    step = "build"


class BookWriteError(ErrorbookError):
    step = "write"

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"failed to write {path}: {cause}")
        self.path = path


class RendererError(ErrorbookError):
    step = "render"


class ViewerError(ErrorbookError):
    step = "open"
