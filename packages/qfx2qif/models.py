"""Record types shared by the extraction, mapping and emission stages.

All types are frozen ``dataclass`` instances with explicit field order. Field
values are kept as strings so they can be written to QIF without further
formatting decisions.
"""

from __future__ import annotations

from dataclasses import dataclass

#: Payee written when a transaction carries no usable ``NAME``.
UNKNOWN_PAYEE = "(unknown)"


@dataclass(frozen=True, slots=True)
class RecordSpan:
    """Offsets of one ``<STMTTRN>`` block inside the input buffer.

    ``content_start`` points just past the opening marker's ``>``;
    ``after_end`` points just past the closing ``</STMTTRN>``.
    """

    content_start: int
    after_end: int


@dataclass(frozen=True, slots=True)
class RawFields:
    """The four tag values pulled out of one transaction, ``None`` when absent."""

    dtposted: str | None
    trnamt: str | None
    name: str | None
    memo: str | None


@dataclass(frozen=True, slots=True)
class NormalizedRecord:
    """A single transaction ready to be written as a QIF block.

    ``date`` is ``MM/DD/YYYY`` when the posted date could be read, otherwise
    the raw token (possibly empty). ``amount`` never contains commas and is
    never empty. ``payee`` and ``memo`` never contain line breaks.
    ``include_memo`` comes from the run configuration, not from the input.
    """

    date: str
    amount: str
    payee: str
    memo: str
    include_memo: bool

    @property
    def has_memo(self) -> bool:
        return self.memo != ""

    @property
    def memo_suppressed(self) -> bool:
        """True when a memo was available but the configuration leaves it out."""

        return self.has_memo and not self.include_memo


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Counters and records produced by one conversion pass."""

    count: int
    memo_suppressed: bool
    records: tuple[NormalizedRecord, ...] = ()


__all__ = [
    "ConversionResult",
    "NormalizedRecord",
    "RawFields",
    "RecordSpan",
    "UNKNOWN_PAYEE",
]
