"""Map one ``<STMTTRN>`` block to a :class:`NormalizedRecord`.

Per block the mapper pulls ``DTPOSTED``, ``TRNAMT``, ``NAME`` and ``MEMO``,
trims them, strips line breaks from the free-text fields, normalizes the date
and amount, and applies the fallbacks:

- no amount: the block is dropped (``None``);
- no name: the payee becomes ``(unknown)``;
- unreadable date: the raw ``DTPOSTED`` text is kept.

Whether a memo ends up in the output is decided by the caller's
``include_memo``; the mapper only carries it along.
"""

from __future__ import annotations

from .logging_setup import get_logger
from .models import UNKNOWN_PAYEE, NormalizedRecord, RawFields, RecordSpan
from .normalizers import clean_amount, normalize_date, sanitize_text, trim
from .tags import extract_tag

DEFAULT_ENCODING = "latin-1"

_logger = get_logger("qfx2qif.mapper")


def _decode(value: bytes | None, encoding: str) -> str | None:
    if value is None:
        return None
    return value.decode(encoding, errors="replace")


def extract_fields(block: bytes, *, encoding: str = DEFAULT_ENCODING) -> RawFields:
    """Pull the four transaction tags out of a single block."""

    return RawFields(
        dtposted=_decode(extract_tag(block, "DTPOSTED"), encoding),
        trnamt=_decode(extract_tag(block, "TRNAMT"), encoding),
        name=_decode(extract_tag(block, "NAME"), encoding),
        memo=_decode(extract_tag(block, "MEMO"), encoding),
    )


def normalize_fields(raw: RawFields, *, include_memo: bool) -> NormalizedRecord | None:
    """Turn extracted tag values into a record, or ``None`` when there is no amount."""

    dtposted = trim(raw.dtposted or "")
    trnamt = trim(raw.trnamt or "")
    name = sanitize_text(trim(raw.name or ""))
    memo = sanitize_text(trim(raw.memo or ""))

    date = normalize_date(dtposted)

    if not trnamt:
        return None

    return NormalizedRecord(
        date=date,
        amount=clean_amount(trnamt),
        payee=name or UNKNOWN_PAYEE,
        memo=memo,
        include_memo=include_memo,
    )


def map_record(
    buffer: bytes,
    span: RecordSpan,
    *,
    include_memo: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> NormalizedRecord | None:
    """Extract and normalize the transaction located at ``span``.

    Tag lookups are confined to the block itself, so a tag missing from one
    transaction is never borrowed from the next.
    """

    block = buffer[span.content_start : span.after_end]
    record = normalize_fields(extract_fields(block, encoding=encoding), include_memo=include_memo)
    if record is None:
        _logger.debug("Dropping transaction at offset %d: no TRNAMT", span.content_start)
    return record


__all__ = ["DEFAULT_ENCODING", "extract_fields", "map_record", "normalize_fields"]
