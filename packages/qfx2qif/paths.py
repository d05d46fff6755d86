"""Input/output filename defaulting for the CLI.

A file name counts as having an extension when its last component contains a
``.`` anywhere, so ``stmt.`` and ``.hidden`` are taken as given.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

INPUT_SUFFIX = ".qfx"
OUTPUT_SUFFIX = ".qif"


def _has_extension(p: Path) -> bool:
    return "." in p.name


def _add_extension(p: Path, suffix: str) -> Path:
    return p if _has_extension(p) else p.with_name(p.name + suffix)


def resolve_input_path(name: str | PathLike[str]) -> Path:
    """Append ``.qfx`` when the file name carries no extension."""

    return _add_extension(Path(name), INPUT_SUFFIX)


def resolve_output_path(
    input_path: str | PathLike[str], output: str | PathLike[str] | None = None
) -> Path:
    """Pick the QIF destination.

    Without ``output`` the input path is reused with everything from its last
    ``.`` replaced by ``.qif``. An ``output`` without an extension gets
    ``.qif`` appended.
    """

    if output is not None:
        return _add_extension(Path(output), OUTPUT_SUFFIX)
    p = Path(input_path)
    stem = p.name.rpartition(".")[0] if _has_extension(p) else p.name
    return p.with_name(stem + OUTPUT_SUFFIX)


__all__ = ["INPUT_SUFFIX", "OUTPUT_SUFFIX", "resolve_input_path", "resolve_output_path"]
