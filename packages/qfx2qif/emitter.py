"""QIF (``!Type:Bank``) writer."""

from __future__ import annotations

from typing import IO

from .models import ConversionResult, NormalizedRecord

QIF_HEADER = "!Type:Bank"
CLEARED_LINE = "C*"
END_OF_RECORD = "^"


class QifEmitter:
    """Write normalized records to a text sink and keep the run counters.

    Each record becomes a block of ``D``/``P``/[``M``]/``T``/``C*``/``^``
    lines, in the order records are passed to :meth:`emit`. The ``M`` line is
    governed by the record's own ``include_memo``.
    """

    def __init__(self, sink: IO[str]) -> None:
        self._sink = sink
        self.count = 0
        self.memo_suppressed = False
        self._records: list[NormalizedRecord] = []

    def _line(self, text: str) -> None:
        self._sink.write(text + "\n")

    def write_header(self) -> None:
        self._line(QIF_HEADER)

    def emit(self, record: NormalizedRecord) -> None:
        self._line(f"D{record.date}")
        self._line(f"P{record.payee}")
        if record.memo_suppressed:
            self.memo_suppressed = True
        elif record.has_memo:
            self._line(f"M{record.memo}")
        self._line(f"T{record.amount}")
        self._line(CLEARED_LINE)
        self._line(END_OF_RECORD)

        self.count += 1
        self._records.append(record)

    def result(self) -> ConversionResult:
        return ConversionResult(
            count=self.count,
            memo_suppressed=self.memo_suppressed,
            records=tuple(self._records),
        )


__all__ = ["CLEARED_LINE", "END_OF_RECORD", "QIF_HEADER", "QifEmitter"]
