"""Public conversion API for the ``qfx2qif`` package.

:func:`convert` runs one pass over an in-memory OFX buffer and writes QIF to a
text sink. Malformed content never raises: missing tags become empty values,
transactions without an amount are skipped, and unreadable dates are copied
through as-is. :func:`convert_file` wraps it with whole-file reading and
output creation; only that layer can fail, with :class:`InputReadError` or
:class:`OutputWriteError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path
from typing import IO

from .config import ConvertOptions
from .emitter import QifEmitter
from .logging_setup import get_logger
from .mapper import DEFAULT_ENCODING, map_record
from .models import ConversionResult, NormalizedRecord
from .records import iter_records

_logger = get_logger("qfx2qif.api")


class InputReadError(OSError):
    """The OFX input could not be read."""


class OutputWriteError(OSError):
    """The QIF output could not be opened for writing."""


def iter_normalized_records(
    buffer: bytes, *, include_memo: bool = False, encoding: str = DEFAULT_ENCODING
) -> Iterator[NormalizedRecord]:
    """Yield a record for every transaction with an amount, in input order."""

    for span in iter_records(buffer):
        record = map_record(buffer, span, include_memo=include_memo, encoding=encoding)
        if record is not None:
            yield record


def convert(
    buffer: bytes,
    sink: IO[str],
    *,
    include_memo: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> ConversionResult:
    """Convert ``buffer`` to QIF lines written to ``sink``.

    Returns the number of records written and whether any memo was left out
    because ``include_memo`` is false.
    """

    emitter = QifEmitter(sink)
    emitter.write_header()
    for record in iter_normalized_records(buffer, include_memo=include_memo, encoding=encoding):
        emitter.emit(record)
    result = emitter.result()
    _logger.debug(
        "Converted %d transaction(s); memo_suppressed=%s", result.count, result.memo_suppressed
    )
    return result


def convert_file(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str],
    options: ConvertOptions | None = None,
) -> ConversionResult:
    """Read ``input_path`` whole, then write its QIF rendering to ``output_path``.

    The output file is only created once the input has been read successfully.
    """

    opts = options or ConvertOptions()
    src = Path(input_path)
    dst = Path(output_path)

    try:
        buffer = src.read_bytes()
    except OSError as exc:
        raise InputReadError(f"cannot read input file {src}: {exc}") from exc

    try:
        fout = dst.open("w", encoding=opts.encoding, errors="replace", newline="\n")
    except OSError as exc:
        raise OutputWriteError(f"cannot open output file {dst}: {exc}") from exc

    with fout:
        result = convert(buffer, fout, include_memo=opts.include_memo, encoding=opts.encoding)

    _logger.debug("Wrote %s from %s (%d bytes read)", dst, src, len(buffer))
    return result


__all__ = [
    "InputReadError",
    "OutputWriteError",
    "convert",
    "convert_file",
    "iter_normalized_records",
]
