"""Public interface for the ``qfx2qif`` package.

Symbol re-exports only; see :mod:`qfx2qif.api` for the conversion entry points.
"""

__version__ = "1.1.0"

from .api import (  # noqa: E402
    InputReadError,
    OutputWriteError,
    convert,
    convert_file,
    iter_normalized_records,
)
from .config import ConvertOptions, resolve_options  # noqa: E402
from .models import (  # noqa: E402
    ConversionResult,
    NormalizedRecord,
    RawFields,
    RecordSpan,
)

__all__ = [
    "__version__",
    # API
    "convert",
    "convert_file",
    "iter_normalized_records",
    "InputReadError",
    "OutputWriteError",
    # Configuration
    "ConvertOptions",
    "resolve_options",
    # Models
    "ConversionResult",
    "NormalizedRecord",
    "RawFields",
    "RecordSpan",
]
