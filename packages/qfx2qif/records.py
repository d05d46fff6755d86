"""Locate ``<STMTTRN>`` transaction blocks inside an OFX buffer."""

from __future__ import annotations

from collections.abc import Iterator

from .models import RecordSpan
from .tags import find_marker

OPEN_MARKER = b"<STMTTRN"
CLOSE_MARKER = b"</STMTTRN>"


def next_record(buffer: bytes, search_from: int = 0) -> RecordSpan | None:
    """Find the next complete transaction block at or after ``search_from``.

    The opening marker is matched without its ``>`` so attributes are
    tolerated; content starts after the first ``>`` that follows it. A block
    whose closing marker is missing ends the scan, returning ``None``.
    """

    open_at = find_marker(buffer, OPEN_MARKER, search_from)
    if open_at == -1:
        return None
    gt = buffer.find(b">", open_at)
    if gt == -1:
        return None
    content_start = gt + 1
    close_at = find_marker(buffer, CLOSE_MARKER, content_start)
    if close_at == -1:
        return None
    return RecordSpan(content_start=content_start, after_end=close_at + len(CLOSE_MARKER))


def iter_records(buffer: bytes) -> Iterator[RecordSpan]:
    """Yield every transaction span in input order."""

    pos = 0
    while True:
        span = next_record(buffer, pos)
        if span is None:
            return
        yield span
        pos = span.after_end


__all__ = ["CLOSE_MARKER", "OPEN_MARKER", "iter_records", "next_record"]
