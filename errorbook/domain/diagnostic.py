"""errorbook.domain.diagnostic

Canonical representation of one compiler diagnostic and of a group of
duplicates.

Why dataclasses instead of raw message dicts?
---------------------------------------------
Cargo's JSON messages are large and loosely typed. The book only needs four
facts per diagnostic, and two of them (identity and owning component) are
*derived*. Keeping the derived values on a frozen dataclass means the grouping
engine and the tree builder never re-derive them, so the two cannot drift.

Identity vs display label
-------------------------
``identity`` is the first rendered line, verbatim. It is the dedup key.
``label`` strips ``[`` and ``]`` so the text can sit inside a markdown link;
it is display-only and never used for grouping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

# Canonical error-index codes look like E0308.
CANONICAL_CODE_PREFIX = "E"
CANONICAL_CODE_MAX_LEN = 6

# rustc's own "N warnings emitted" trailer.
NOISE_SUFFIX = "warnings emitted"


@dataclass(frozen=True)
class DiagnosticCode:
    """Structured diagnostic code (``E0308``, ``unused_variables``, ``clippy::...``)."""

    code: str
    explanation: Optional[str] = None

    @property
    def is_canonical(self) -> bool:
        return self.code.startswith(CANONICAL_CODE_PREFIX) and len(self.code) <= CANONICAL_CODE_MAX_LEN

    @classmethod
    def from_dict(cls, d: Any) -> Optional["DiagnosticCode"]:
        """Build from cargo's ``message.code`` object (``None`` stays ``None``).

        Any other shape raises ``ValueError``.
        """
        if d is None:
            return None
        if not isinstance(d, Mapping):
            raise ValueError(f"diagnostic code: expected an object, got {type(d).__name__}")
        code = d.get("code")
        if not isinstance(code, str):
            raise ValueError(f"diagnostic code: 'code' must be a string, got {code!r}")
        explanation = d.get("explanation")
        if explanation is not None and not isinstance(explanation, str):
            raise ValueError(f"diagnostic code {code}: 'explanation' must be a string or null")
        return cls(code=code, explanation=explanation)


@dataclass(frozen=True)
class Diagnostic:
    identity: str
    rendered: str
    component: str
    code: Optional[DiagnosticCode] = None

    def __post_init__(self) -> None:
        if not self.identity:
            raise ValueError("Diagnostic identity must not be empty")

    @property
    def label(self) -> str:
        return display_label(self.identity)


@dataclass(frozen=True)
class Group:
    """All occurrences of one identity inside one component."""

    identity: str
    occurrences: Tuple[Diagnostic, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for d in self.occurrences:
            if d.identity != self.identity:
                raise ValueError(f"Group {self.identity!r} holds foreign occurrence {d.identity!r}")

    @property
    def count(self) -> int:
        return len(self.occurrences)

    @property
    def label(self) -> str:
        return display_label(self.identity)


def display_label(identity: str) -> str:
    return identity.replace("[", "").replace("]", "")


def is_noise(identity: str) -> bool:
    """True for the build tool's summary trailer (not for individual warnings)."""
    return identity.endswith(NOISE_SUFFIX)


def first_line(text: str) -> str:
    """First ``\\n``-delimited line, with a trailing ``\\r`` removed."""
    line = text.split("\n", 1)[0]
    return line[:-1] if line.endswith("\r") else line


def _split_package_id_spec(repr_: str) -> List[str]:
    """Rewrite ``<source-url>#[name@]version`` into ``[name, version]``."""
    if "#" not in repr_:
        return []
    url, fragment = repr_.rsplit("#", 1)
    if "@" in fragment:
        name, version = fragment.split("@", 1)
    else:
        # Name omitted: it equals the last path segment of the source url.
        name = url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
        version = fragment
    if not name or not version:
        return []
    return [name, version]


def component_key(package_id: str) -> str:
    """Derive the component key (``"name version"``) from a cargo package id.

    Legacy ids (``serde 1.0.0 (registry+https://...)``) use their first two
    whitespace-separated tokens. Package-id-spec ids
    (``registry+https://...#serde@1.0.0``) are rewritten into the same shape.
    """
    parts = package_id.split()
    if len(parts) < 2:
        parts = _split_package_id_spec(package_id.strip())
    if len(parts) < 2:
        raise ValueError(f"Unrecognised package id: {package_id!r}")
    return f"{parts[0]} {parts[1]}"


def safe_file_stem(key: str) -> str:
    """Filesystem-safe form of a component key."""
    return key.replace(" ", "_").replace(".", "_")
