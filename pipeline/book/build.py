"""pipeline.book.build

Build the in-memory :class:`DocumentTree` from a grouping result.

File names are a pure function of (component key, group index):

  component page : ``<safe>.md``
  group page     : ``<index><safe>.md``

where ``<safe>`` is the key with spaces and periods replaced by underscores.
Two pages mapping to one file name is rejected with ``BookBuildError``
rather than letting one silently overwrite the other.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from errorbook.domain import Group, safe_file_stem
from errorbook.errors import BookBuildError

from pipeline.grouping import GroupingResult

from .model import BookSettings, ComponentPage, DocumentTree, GroupPage
from .render_md import (
    render_component_page,
    render_group_page,
    render_manifest,
    render_summary,
)

PAGE_SUFFIX = ".md"


def component_file_name(key: str) -> str:
    return safe_file_stem(key) + PAGE_SUFFIX


def group_file_name(key: str, index: int) -> str:
    return f"{index}{component_file_name(key)}"


def group_link_label(group: Group) -> str:
    return f"{group.label} {group.count}"


def _build_component(key: str, groups: Tuple[Group, ...]) -> ComponentPage:
    pages = tuple(
        GroupPage(
            identity=g.identity,
            label=group_link_label(g),
            count=g.count,
            file_name=group_file_name(key, i),
            content=render_group_page(g.occurrences),
        )
        for i, g in enumerate(groups)
    )
    file_name = component_file_name(key)
    return ComponentPage(
        key=key,
        file_name=file_name,
        content=render_component_page(key, [(p.label, p.file_name) for p in pages]),
        groups=pages,
    )


def _check_unique_names(components: Tuple[ComponentPage, ...]) -> None:
    seen: Dict[str, str] = {}
    for comp in components:
        for name, owner in [(comp.file_name, comp.key)] + [(g.file_name, f"{comp.key}: {g.identity}") for g in comp.groups]:
            if name in seen:
                raise BookBuildError(f"Page file name collision {name!r}: {seen[name]!r} vs {owner!r}")
            seen[name] = owner


def build_document_tree(result: GroupingResult, *, settings: BookSettings = BookSettings()) -> DocumentTree:
    components = tuple(_build_component(key, groups) for key, groups in result)
    _check_unique_names(components)

    entries: List[Tuple[str, str, List[Tuple[str, str]]]] = [
        (c.key, c.file_name, [(g.label, g.file_name) for g in c.groups]) for c in components
    ]
    return DocumentTree(
        manifest=render_manifest(settings),
        summary=render_summary(entries),
        components=components,
    )
