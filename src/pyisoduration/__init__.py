"""pyisoduration - Parse and format ISO 8601 durations."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyisoduration")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pyisoduration._codec import format_duration, parse_duration
from pyisoduration._errors import (
    BadFormatError,
    DurationError,
    NoMonthError,
    NumericConversionError,
)
from pyisoduration.duration import Duration

__all__ = [
    "parse_duration",
    "format_duration",
    "Duration",
    "DurationError",
    "BadFormatError",
    "NoMonthError",
    "NumericConversionError",
]
