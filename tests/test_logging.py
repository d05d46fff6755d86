from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from qfx2qif import convert
from qfx2qif.cli import app
from qfx2qif.logging_setup import resolve_level
from tests.helpers.samples import ofx

runner = CliRunner()

# One good transaction, one with an unreadable date, one without an amount.
NOISY_OFX = ofx(
    """
    <STMTTRN><DTPOSTED>20250101<TRNAMT>1.00<NAME>FIRST</STMTTRN>
    <STMTTRN><DTPOSTED>Jan 2<TRNAMT>2.00<NAME>SECOND</STMTTRN>
    <STMTTRN><DTPOSTED>20250103<NAME>PENDING</STMTTRN>
    """
)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "stmt.qfx").write_bytes(NOISY_OFX)
    return tmp_path


def test_resolve_level(monkeypatch: pytest.MonkeyPatch):
    assert resolve_level(None) == logging.INFO
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" 10 ") == logging.DEBUG
    assert resolve_level("not-a-level") == logging.INFO
    monkeypatch.setenv("QFX2QIF_LOG_LEVEL", "WARNING")
    assert resolve_level(None) == logging.WARNING
    assert resolve_level("DEBUG") == logging.DEBUG


def test_library_logs_dropped_record_and_raw_date(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="qfx2qif")

    convert(NOISY_OFX, io.StringIO())

    debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any(m.startswith("Dropping transaction at offset") for m in debug)
    assert "Unparseable DTPOSTED 'Jan 2'; writing it verbatim" in debug


def test_double_verbose_enables_debug_output(workdir: Path):
    result = runner.invoke(app, ["-i", "stmt", "-v", "-v"])

    assert result.exit_code == 0, result.output
    assert "qfx2qif.mapper DEBUG Dropping transaction" in result.output
    assert "qfx2qif.normalizers DEBUG Unparseable DTPOSTED" in result.output


def test_default_level_hides_debug_output(workdir: Path):
    result = runner.invoke(app, ["-i", "stmt", "-v"])

    assert result.exit_code == 0, result.output
    assert "Dropping transaction" not in result.output


@pytest.mark.parametrize("level", ["DEBUG", "10"])
def test_env_level_enables_debug_output(
    workdir: Path, monkeypatch: pytest.MonkeyPatch, level: str
):
    monkeypatch.setenv("QFX2QIF_LOG_LEVEL", level)

    result = runner.invoke(app, ["-i", "stmt"])

    assert result.exit_code == 0, result.output
    assert "qfx2qif.mapper DEBUG Dropping transaction" in result.output
