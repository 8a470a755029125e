"""errorbook.domain

Tool-agnostic domain types shared by the stream reader, the grouping engine
and the document tree builder.
"""

from __future__ import annotations

from .diagnostic import (
    CANONICAL_CODE_MAX_LEN,
    NOISE_SUFFIX,
    Diagnostic,
    DiagnosticCode,
    Group,
    component_key,
    display_label,
    first_line,
    is_noise,
    safe_file_stem,
)

__all__ = [
    "CANONICAL_CODE_MAX_LEN",
    "NOISE_SUFFIX",
    "Diagnostic",
    "DiagnosticCode",
    "Group",
    "component_key",
    "display_label",
    "first_line",
    "is_noise",
    "safe_file_stem",
]
