"""pipeline.book.links

Resource link for a diagnostic code. Exactly one of, in this order:

1. canonical error-index code (``E0308``) -> rustc error index anchor
2. explanation embeds an ``https://`` link -> reuse that link
3. anything else -> web search for the code

No code, no link.
"""

from __future__ import annotations

from typing import Optional

from errorbook.domain import DiagnosticCode

ERROR_INDEX_URL = "https://doc.rust-lang.org/error-index.html#{code}"
SEARCH_URL = "https://duckduckgo.com/?q=rust+{code}"
LINK_MARKER = "https://"


def embedded_link(text: Optional[str]) -> Optional[str]:
    """First whitespace-terminated token starting at ``https://``, if any."""
    if not text:
        return None
    start = text.find(LINK_MARKER)
    if start < 0:
        return None
    return text[start:].split(maxsplit=1)[0]


def resource_link(code: Optional[DiagnosticCode]) -> Optional[str]:
    if code is None:
        return None
    if code.is_canonical:
        return ERROR_INDEX_URL.format(code=code.code)
    link = embedded_link(code.explanation)
    if link:
        return link
    return SEARCH_URL.format(code=code.code)
