"""``python -m qfx2qif`` entry point."""

from .cli import app

app(prog_name="qfx2qif")
