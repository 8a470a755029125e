"""tools/mdbook

mdBook renderer adapter. The generated book directory is handed to
``mdbook build`` as-is; nothing here knows about diagnostics.
"""

from __future__ import annotations

from .runner import MDBOOK_FALLBACKS, build_book

__all__ = ["MDBOOK_FALLBACKS", "build_book"]
