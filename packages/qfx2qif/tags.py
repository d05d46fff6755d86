"""Tolerant tag lookup over OFX/SGML bytes.

OFX 1.x files are SGML, not XML: leaf elements are frequently left open
(``<NAME>ACME CORP`` followed directly by the next tag). Lookups here are
deliberately shallow. They find the first ``<TAG>`` (ASCII case-insensitive),
then either the first matching ``</TAG>`` or, failing that, the next ``<``.
There is no nesting, attribute, or entity handling.
"""

from __future__ import annotations

import re
from functools import lru_cache

#: Upper bound on the bytes returned for a single tag value.
MAX_FIELD_BYTES = 4095


@lru_cache(maxsize=64)
def _marker(text: bytes) -> re.Pattern[bytes]:
    return re.compile(re.escape(text), re.IGNORECASE)


def find_marker(haystack: bytes, marker: bytes, start: int = 0) -> int:
    """Return the offset of ``marker`` in ``haystack`` ignoring ASCII case, or ``-1``."""

    m = _marker(marker).search(haystack, start)
    return m.start() if m else -1


def _content_end(buffer: bytes, tag: bytes, content_start: int) -> int:
    close_at = find_marker(buffer, b"</" + tag + b">", content_start)
    if close_at != -1:
        return close_at
    # Unterminated element: the value runs up to the next tag, or to the end.
    next_tag = buffer.find(b"<", content_start)
    return next_tag if next_tag != -1 else len(buffer)


def extract_tag(buffer: bytes, tag: str | bytes) -> bytes | None:
    """Return the content of the first ``<tag>`` element in ``buffer``.

    Returns ``None`` when the opening marker does not occur. The value is
    silently truncated to :data:`MAX_FIELD_BYTES`.
    """

    tag_b = tag.encode("ascii") if isinstance(tag, str) else tag
    open_marker = b"<" + tag_b + b">"
    open_at = find_marker(buffer, open_marker)
    if open_at == -1:
        return None

    content_start = open_at + len(open_marker)
    content_end = _content_end(buffer, tag_b, content_start)
    return buffer[content_start : min(content_end, content_start + MAX_FIELD_BYTES)]


__all__ = ["MAX_FIELD_BYTES", "extract_tag", "find_marker"]
