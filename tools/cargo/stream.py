"""tools/cargo/stream.py

Reader for cargo's ``--message-format json`` output.

Each line is one JSON object with a ``reason`` field naming the record kind.
Only ``compiler-message`` records feed the book; every other kind is decoded
and discarded. A line that is not UTF-8, or not a JSON object with a string
``reason``, aborts the run: cargo's output is all-or-nothing, so a broken
record means the stream cannot be trusted.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List

from errorbook.errors import StreamDecodeError

logger = logging.getLogger(__name__)

COMPILER_MESSAGE = "compiler-message"
COMPILER_ARTIFACT = "compiler-artifact"
BUILD_SCRIPT_EXECUTED = "build-script-executed"
BUILD_FINISHED = "build-finished"
UNKNOWN = "unknown"

KNOWN_REASONS = frozenset({COMPILER_MESSAGE, COMPILER_ARTIFACT, BUILD_SCRIPT_EXECUTED, BUILD_FINISHED})

# Safety bound on how much captured output is ever parsed.
MAX_STREAM_BYTES = 10_000_000


@dataclass(frozen=True)
class RawEvent:
    """One decoded record. ``kind`` is one of the reason constants or ``UNKNOWN``."""

    kind: str
    reason: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_compiler_message(self) -> bool:
        return self.kind == COMPILER_MESSAGE


def cap_stream(data: bytes, max_bytes: int = MAX_STREAM_BYTES, *, truncated: bool = False) -> bytes:
    """Apply the size cap.

    Once anything was cut (here, or already by the capturing process when
    ``truncated`` is set) a trailing record without its newline is dropped
    too. Untouched input is returned as is.
    """
    if max_bytes > 0 and len(data) > max_bytes:
        data = data[:max_bytes]
        truncated = True
    if truncated and not data.endswith(b"\n"):
        data = data[:data.rfind(b"\n") + 1]
    return data


def decode_record(line: str, *, line_no: int) -> RawEvent:
    try:
        obj = json.loads(line)
    except json.JSONDecodeError as e:
        raise StreamDecodeError(f"invalid JSON record: {e.msg}", line_no=line_no) from e

    if not isinstance(obj, dict):
        raise StreamDecodeError(f"record is a JSON {type(obj).__name__}, expected an object", line_no=line_no)
    reason = obj.get("reason")
    if not isinstance(reason, str):
        raise StreamDecodeError("record has no string 'reason'", line_no=line_no)

    kind = reason if reason in KNOWN_REASONS else UNKNOWN
    return RawEvent(kind=kind, reason=reason, payload=obj)


def iter_events(lines: Iterable[bytes]) -> Iterator[RawEvent]:
    """Decode records one per line; blank lines are skipped."""
    for line_no, raw in enumerate(lines, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StreamDecodeError(f"record is not valid UTF-8: {e.reason} at byte {e.start}", line_no=line_no) from e
        if not line.strip():
            continue
        yield decode_record(line, line_no=line_no)


def read_stream(data: bytes, *, max_bytes: int = MAX_STREAM_BYTES, truncated: bool = False) -> List[RawEvent]:
    """Decode a captured byte stream into events (size cap applied first)."""
    capped = cap_stream(data, max_bytes, truncated=truncated)
    if truncated or len(capped) < len(data):
        logger.info("message stream capped at %d bytes; kept %d", max_bytes, len(capped))

    # split on "\n" only: JSON strings may carry raw U+2028 and friends.
    events = list(iter_events(capped.split(b"\n")))

    counts = Counter(ev.kind for ev in events)
    logger.debug("decoded %d records: %s", len(events), dict(sorted(counts.items())))
    return events


def compiler_messages(events: Iterable[RawEvent]) -> Iterator[Dict[str, Any]]:
    """Yield the payload of every compiler-message record, in stream order."""
    for ev in events:
        if ev.is_compiler_message:
            yield ev.payload
