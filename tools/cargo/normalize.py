"""tools/cargo/normalize.py

Cargo-specific normalization: ``compiler-message`` payloads into
:class:`~errorbook.domain.Diagnostic` objects.

A compiler-message record looks like::

  {"reason": "compiler-message",
   "package_id": "demo 0.1.0 (path+file:///work/demo)",
   "message": {"rendered": "error[E0308]: mismatched types\\n --> src/main.rs...",
               "code": {"code": "E0308", "explanation": "..."},
               ...}}

Cargo always fills ``message.rendered`` for these records, so a missing or
empty one is a hard error rather than a skipped record.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from errorbook.domain import Diagnostic, DiagnosticCode, component_key, first_line, is_noise
from errorbook.errors import DiagnosticExtractionError

logger = logging.getLogger(__name__)


def extract_diagnostic(payload: Mapping[str, Any]) -> Diagnostic:
    """Turn one compiler-message payload into a Diagnostic (pure)."""
    message = payload.get("message")
    if not isinstance(message, Mapping):
        raise DiagnosticExtractionError("compiler-message record has no 'message' object")

    rendered = message.get("rendered")
    if not isinstance(rendered, str) or not rendered:
        raise DiagnosticExtractionError("compiler-message record has no rendered text")

    identity = first_line(rendered)
    if not identity:
        raise DiagnosticExtractionError(f"rendered text has an empty first line: {rendered[:80]!r}")

    package_id = payload.get("package_id")
    if not isinstance(package_id, str):
        raise DiagnosticExtractionError(f"compiler-message {identity!r} has no package_id")
    try:
        component = component_key(package_id)
        code = DiagnosticCode.from_dict(message.get("code"))
    except ValueError as e:
        raise DiagnosticExtractionError(f"{identity!r}: {e}") from e

    return Diagnostic(identity=identity, rendered=rendered, component=component, code=code)


def extract_diagnostics(payloads: Iterable[Mapping[str, Any]]) -> List[Diagnostic]:
    """Extract every payload, then drop the "N warnings emitted" trailers."""
    out: List[Diagnostic] = []
    dropped = 0
    for payload in payloads:
        diag = extract_diagnostic(payload)
        if is_noise(diag.identity):
            dropped += 1
            continue
        out.append(diag)

    if dropped:
        logger.debug("dropped %d summary trailer(s)", dropped)
    return out
