from __future__ import annotations

"""pipeline.book.render_md

Markdown (and mdBook manifest) rendering for the error book.

This module contains formatting logic only (no file I/O).
"""

import json
import re
from typing import Iterable, List, Sequence, Tuple

from errorbook.domain import Diagnostic

from .links import resource_link
from .model import BookSettings

_MANIFEST_TAIL = """
[rust]
edition = "2018"

[output.html]
mathjax-support = false
default-theme = "rust"
preferred-dark-theme = "navy"

[output.html.fold]
enable = true
level = 0

[output.html.search]
limit-results = 20
use-boolean-and = true
boost-title = 2
boost-hierarchy = 2
boost-paragraph = 1
expand = true
heading-split-level = 2
"""


def _toml_str(s: str) -> str:
    # JSON string escapes are valid TOML basic-string escapes.
    return json.dumps(s, ensure_ascii=False)


def render_manifest(settings: BookSettings) -> str:
    lines: List[str] = []
    lines.append("[book]")
    lines.append(f"title = {_toml_str(settings.title)}")
    lines.append(f"description = {_toml_str(settings.description)}")
    lines.append(f"authors = [{', '.join(_toml_str(a) for a in settings.authors)}]")
    lines.append(f"language = {_toml_str(settings.language)}")
    return "\n".join(lines) + "\n" + _MANIFEST_TAIL


def link_line(label: str, target: str, *, indent: int = 0) -> str:
    return f"{' ' * indent}- [{label}]({target})"


def render_summary(entries: Sequence[Tuple[str, str, Sequence[Tuple[str, str]]]]) -> str:
    """Render SUMMARY.md.

    *entries* is ``[(component_label, component_file, [(group_label, group_file), ...]), ...]``.
    """
    lines: List[str] = ["# Summary", ""]
    for comp_label, comp_file, groups in entries:
        lines.append(link_line(comp_label, comp_file))
        for g_label, g_file in groups:
            lines.append(link_line(g_label, g_file, indent=4))
    return "\n".join(lines) + "\n"


def render_component_page(key: str, groups: Iterable[Tuple[str, str]]) -> str:
    lines: List[str] = [f"# {key}", ""]
    for g_label, g_file in groups:
        lines.append(link_line(g_label, g_file))
    return "\n".join(lines) + "\n"


_PARAGRAPH_FENCE_RE = re.compile(r"\n\n```(?!rust)([^\n]*)")


def tag_rust_fences(explanation: str) -> str:
    """Fences opening a paragraph in rustc explanations are rust code.

    A ``compile_fail,E0308`` info string becomes ``rust,compile_fail,E0308``.
    """
    return _PARAGRAPH_FENCE_RE.sub(lambda m: "\n\n```rust" + (f",{m.group(1)}" if m.group(1) else ""), explanation)


def render_occurrence(diag: Diagnostic) -> str:
    parts: List[str] = [
        f"# {diag.identity}\n",
        "```rust,noplaypen\n",
        f"{diag.rendered}\n",
        "```\n\n",
    ]

    code = diag.code
    if code is not None:
        if code.explanation:
            parts.append("\n## Explanation:\n")
            parts.append(tag_rust_fences(code.explanation))
        url = resource_link(code)
        parts.append(f"\n\n( [Explain {code.code} to me]({url}) )\n\n")

    return "".join(parts)


def render_group_page(occurrences: Iterable[Diagnostic]) -> str:
    return "\n".join(render_occurrence(d) for d in occurrences)
