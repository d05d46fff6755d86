"""Run configuration resolved from CLI flags and environment variables.

Environment variables (a local ``.env`` is loaded by the CLI beforehand):

- ``QFX2QIF_INCLUDE_MEMO``: ``1/true/yes/on`` turns memo lines on when the
  ``--memo`` flag is absent.
- ``QFX2QIF_ENCODING``: codec for field text and the output file
  (default ``latin-1``).
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from .mapper import DEFAULT_ENCODING

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    include_memo: bool = False
    encoding: str = DEFAULT_ENCODING


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be one of 1/0, true/false, yes/no, on/off; got {raw!r}")


def resolve_options(
    *, include_memo: bool | None = None, encoding: str | None = None
) -> ConvertOptions:
    """Combine explicit settings with environment fallbacks.

    Explicit arguments win; ``None`` means "not given". Raises ``ValueError``
    for a malformed boolean variable or an unknown codec name.
    """

    if include_memo is None:
        include_memo = bool(_env_flag("QFX2QIF_INCLUDE_MEMO"))

    enc = encoding or os.getenv("QFX2QIF_ENCODING") or DEFAULT_ENCODING
    try:
        codecs.lookup(enc)
    except LookupError as exc:
        raise ValueError(f"unknown encoding: {enc!r}") from exc

    return ConvertOptions(include_memo=include_memo, encoding=enc)


__all__ = ["ConvertOptions", "resolve_options"]
