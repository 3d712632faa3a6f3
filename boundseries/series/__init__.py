"""
Bounded, file-backed integer time series (resolution filter + retention window).
"""

from .errors import (
    ConfigError,
    RecoverableParseError,
    RecoverableWriteError,
    SeriesError,
    StorageInitError,
)
from .point import SeriesPoint
from .storage import SeriesFile
from .store import BoundedSeriesStore

__all__ = [
    "BoundedSeriesStore",
    "SeriesPoint",
    "SeriesFile",

    # Errors
    "SeriesError",
    "ConfigError",
    "StorageInitError",
    "RecoverableParseError",
    "RecoverableWriteError",
]
