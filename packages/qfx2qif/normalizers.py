"""Date, amount and text normalization for OFX field values.

OFX dates are ``YYYYMMDD`` optionally followed by a time and a timezone
(``20250829120000.000[-5:EST]``). QIF wants ``MM/DD/YYYY``. Conversion is
lenient: only digit-ness of the first eight characters is checked, so a month
of ``13`` passes through unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .logging_setup import get_logger

_logger = get_logger("qfx2qif.normalizers")

# C-locale ``isspace`` set. ``str.strip()`` would also eat NBSP and friends.
_WHITESPACE = " \t\n\v\f\r"

_YYYYMMDD_RE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")


def trim(value: str) -> str:
    return value.strip(_WHITESPACE)


def sanitize_text(value: str) -> str:
    """Replace each CR and LF with a space so the value fits on one QIF line."""

    return value.replace("\r", " ").replace("\n", " ")


def clean_amount(token: str) -> str:
    """Drop thousands separators; everything else passes through untouched."""

    return token.replace(",", "")


def to_canonical_date(token: str) -> str | None:
    """Convert a ``YYYYMMDD...`` token to ``MM/DD/YYYY``.

    Returns ``None`` when the token is shorter than eight characters or any of
    the first eight is not an ASCII digit. Anything after the eighth character
    is ignored.
    """

    if len(token) < 8:
        return None
    m = _YYYYMMDD_RE.match(token)
    if m is None:
        return None
    year, month, day = m.groups()
    return f"{month}/{day}/{year}"


def _first_eight(token: str) -> str | None:
    if len(token) < 8:
        return None
    return to_canonical_date(token[:8])


def _raw(token: str) -> str | None:
    return token


# Tried in order; the first non-None result wins. The last entry always
# answers, so a date line is written even when nothing could be parsed.
DATE_STRATEGIES: tuple[tuple[str, Callable[[str], str | None]], ...] = (
    ("full", to_canonical_date),
    ("first8", _first_eight),
    ("raw", _raw),
)


def normalize_date(token: str) -> str:
    """Apply :data:`DATE_STRATEGIES` to ``token`` and return the first answer."""

    for name, strategy in DATE_STRATEGIES:
        result = strategy(token)
        if result is not None:
            if name == "raw" and token:
                _logger.debug("Unparseable DTPOSTED %r; writing it verbatim", token)
            return result
    return token


__all__ = [
    "DATE_STRATEGIES",
    "clean_amount",
    "normalize_date",
    "sanitize_text",
    "to_canonical_date",
    "trim",
]
