"""pipeline.book

Document tree builder for the error book.

- ``model``     : immutable page/tree types
- ``links``     : "Explain this to me" resource link decision
- ``render_md`` : markdown/TOML formatting only (no file I/O)
- ``build``     : grouping result -> DocumentTree
- ``write``     : DocumentTree -> files on disk
"""

from __future__ import annotations

from .build import build_document_tree, component_file_name, group_file_name
from .links import resource_link
from .model import BookSettings, ComponentPage, DocumentTree, GroupPage
from .write import write_document_tree

__all__ = [
    "BookSettings",
    "ComponentPage",
    "DocumentTree",
    "GroupPage",
    "build_document_tree",
    "component_file_name",
    "group_file_name",
    "resource_link",
    "write_document_tree",
]
