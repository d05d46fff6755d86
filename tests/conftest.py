"""Pytest configuration and shared fixtures.

The CLI reads ``QFX2QIF_*`` variables (optionally from a ``.env`` in the
working directory) and configures the package logger once per process. Both
are process-wide, so every test gets a clean environment and a fresh logging
state to stay hermetic.
"""

from __future__ import annotations

import logging

import pytest

from qfx2qif import logging_setup
from tests.helpers.samples import SAMPLE_OFX

_ENV_VARS = ("QFX2QIF_INCLUDE_MEMO", "QFX2QIF_ENCODING", "QFX2QIF_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch also undoes values set mid-test (load_dotenv).
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield
    pkg_logger = logging.getLogger("qfx2qif")
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_ofx() -> bytes:
    return SAMPLE_OFX
