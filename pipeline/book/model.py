"""pipeline.book.model

Immutable in-memory representation of the generated book.

The tree is complete before anything touches the filesystem: each page
already carries its file name (relative to ``src/``) and its rendered
markdown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple


@dataclass(frozen=True)
class BookSettings:
    """``[book]`` table of the generated mdBook manifest."""

    title: str = "Yet Another ErrorBook"
    description: str = "A shrine to the hard work of Esteban and friends."
    authors: Tuple[str, ...] = ("errorbook",)
    language: str = "en"


@dataclass(frozen=True)
class GroupPage:
    identity: str
    label: str
    count: int
    file_name: str
    content: str


@dataclass(frozen=True)
class ComponentPage:
    key: str
    file_name: str
    content: str
    groups: Tuple[GroupPage, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DocumentTree:
    manifest: str
    summary: str
    components: Tuple[ComponentPage, ...] = field(default_factory=tuple)

    @property
    def detail_page_count(self) -> int:
        return sum(len(c.groups) for c in self.components)

    def pages(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(file_name, content)`` for every component and group page."""
        for comp in self.components:
            yield comp.file_name, comp.content
            for g in comp.groups:
                yield g.file_name, g.content
