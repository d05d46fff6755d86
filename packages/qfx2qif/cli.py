"""CLI for the ``qfx2qif`` package.

The Typer command is a thin wrapper: it loads a local ``.env`` with
``python-dotenv`` (never overriding variables already set), configures
logging, and delegates to :func:`cmd_convert`, which holds the actual
behavior and returns a process exit status.

Exit codes: ``0`` success, ``1`` bad configuration, ``2`` usage error
(reported by Typer), ``4`` unreadable input, ``5`` unwritable output.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

import typer
from dotenv import load_dotenv

from . import __version__
from .api import InputReadError, OutputWriteError, convert_file
from .config import resolve_options
from .logging_setup import configure_logging, get_logger
from .models import UNKNOWN_PAYEE, NormalizedRecord
from .paths import resolve_input_path, resolve_output_path

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 4
EXIT_OUTPUT_ERROR = 5

MEMO_WARNING = (
    "Memos appear in input file but are excluded from output.",
    "Use -m to include memos in output.",
)

_logger = get_logger("qfx2qif.cli")


def format_transaction_line(record: NormalizedRecord) -> str:
    """One tab-separated line per transaction for ``-v`` output.

    Payee is cut to 16 characters and memo to 8; a memo that exists but is not
    written to the QIF shows as ``EXCLUDED``. A transaction without a name
    shows an empty payee column rather than the ``(unknown)`` placeholder.
    """

    payee = "" if record.payee == UNKNOWN_PAYEE else record.payee
    memo = "EXCLUDED" if record.memo_suppressed else record.memo
    return f"{record.date}\t{payee[:16]}\t{memo[:8]}\t${record.amount}"


def _print_summary(input_path: Path, output_path: Path, count: int) -> None:
    print(f"Input File            : {input_path}")
    print(f"Output File           : {output_path}")
    print(f"Number of Transactions: {count}")


def _print_transactions(records: Iterable[NormalizedRecord]) -> None:
    for record in records:
        print(format_transaction_line(record))


def cmd_convert(
    input_name: str,
    output_name: str | None = None,
    *,
    include_memo: bool | None = None,
    encoding: str | None = None,
    verbosity: int = 1,
) -> int:
    """Convert one OFX/QFX file to QIF and report on stdout/stderr.

    Behavior
    --------
    - ``input_name`` gets ``.qfx`` appended when it has no extension.
    - ``output_name`` defaults to the input name with a ``.qif`` extension; a
      given name without an extension gets ``.qif`` appended.
    - ``include_memo``/``encoding`` left as ``None`` fall back to the
      ``QFX2QIF_INCLUDE_MEMO``/``QFX2QIF_ENCODING`` environment variables.
    - ``verbosity >= 2`` prints one line per transaction; ``verbosity >= 1``
      prints the file names and the transaction count.
    - When memos were present but left out, a two-line warning goes to stderr
      regardless of verbosity.

    Errors are written to stderr as ``Error: ...`` and mapped to the module's
    exit codes.
    """

    try:
        options = resolve_options(include_memo=include_memo, encoding=encoding)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    input_path = resolve_input_path(input_name)
    output_path = resolve_output_path(input_path, output_name)
    _logger.debug("Converting %s -> %s with %s", input_path, output_path, options)

    try:
        result = convert_file(input_path, output_path, options)
    except InputReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except OutputWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_OUTPUT_ERROR

    if verbosity >= 2:
        _print_transactions(result.records)
    if verbosity >= 1:
        _print_summary(input_path, output_path, result.count)

    if result.memo_suppressed:
        for line in MEMO_WARNING:
            print(line, file=sys.stderr)

    return EXIT_OK


# ---- Typer application -------------------------------------------------------

app = typer.Typer(
    add_completion=False,
    help="Convert an OFX/QFX bank export to QIF (!Type:Bank).",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"qfx2qif {__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_name: str = typer.Option(
        ...,
        "--input",
        "-i",
        help="Input .qfx file. The extension is added when not provided.",
    ),
    output_name: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output .qif file. Derived from the input file name when not provided.",
    ),
    memo: bool = typer.Option(
        False, "--memo", "-m", help="Include memos (env: QFX2QIF_INCLUDE_MEMO)."
    ),
    quiet: int = typer.Option(
        0, "--quiet", "-q", count=True, help="Quiet running (or decrease verbosity)."
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity."),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        help="Text encoding of field values and output (env: QFX2QIF_ENCODING, default latin-1).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert the STMTTRN transactions of an OFX/QFX file to a QIF bank file."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    verbosity = 1 + verbose - quiet
    configure_logging("DEBUG" if verbosity >= 3 else None)

    code = cmd_convert(
        input_name,
        output_name,
        include_memo=True if memo else None,
        encoding=encoding,
        verbosity=verbosity,
    )
    if code != EXIT_OK:
        raise typer.Exit(code)


if __name__ == "__main__":  # pragma: no cover
    app()
