"""pipeline.grouping

Grouping engine: diagnostics -> components -> groups of duplicates.

The collector is created fresh for one run and owns the per-component
buckets while diagnostics stream in. :func:`group_diagnostics` consumes it and
returns an immutable :class:`GroupingResult`.

Ordering rules
--------------
- components are ordered by key
- within a component, diagnostics are stable-sorted by identity (code point
  order, which equals UTF-8 byte order) before adjacent runs are merged, so
  equal identities always land in one group
- a group keeps its occurrences in that sorted order (arrival order among
  equal identities)
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from operator import attrgetter
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from errorbook.domain import Diagnostic, Group

_identity = attrgetter("identity")


class DiagnosticCollector:
    """Per-run accumulator of diagnostics, bucketed by owning component."""

    def __init__(self) -> None:
        self._buckets: Dict[str, List[Diagnostic]] = {}
        self._consumed = False

    def add(self, diag: Diagnostic) -> None:
        if self._consumed:
            raise RuntimeError("DiagnosticCollector was already grouped")
        self._buckets.setdefault(diag.component, []).append(diag)

    def extend(self, diags: Iterable[Diagnostic]) -> "DiagnosticCollector":
        for d in diags:
            self.add(d)
        return self

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets.values())

    def take_buckets(self) -> Dict[str, List[Diagnostic]]:
        """Hand the buckets over; the collector cannot be used afterwards."""
        if self._consumed:
            raise RuntimeError("DiagnosticCollector was already grouped")
        self._consumed = True
        buckets, self._buckets = self._buckets, {}
        return buckets


@dataclass(frozen=True)
class GroupingResult:
    components: Mapping[str, Tuple[Group, ...]]

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def is_empty(self) -> bool:
        return not self.components

    def __iter__(self) -> Iterator[Tuple[str, Tuple[Group, ...]]]:
        return iter(self.components.items())


def group_bucket(bucket: Iterable[Diagnostic]) -> Tuple[Group, ...]:
    ordered = sorted(bucket, key=_identity)
    return tuple(Group(identity=ident, occurrences=tuple(run)) for ident, run in groupby(ordered, key=_identity))


def group_diagnostics(collector: DiagnosticCollector) -> GroupingResult:
    buckets = collector.take_buckets()
    return GroupingResult(components={key: group_bucket(buckets[key]) for key in sorted(buckets)})


def group_all(diags: Iterable[Diagnostic]) -> GroupingResult:
    """Convenience: collect and group in one call."""
    return group_diagnostics(DiagnosticCollector().extend(diags))
