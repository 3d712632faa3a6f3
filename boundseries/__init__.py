"""
boundseries: a minimal durable time-series buffer.

Records integer observations over time, enforcing a minimum spacing between
points and a maximum retention window, and mirrors the buffer to a JSON file
so it survives process restarts. Intended for low-frequency metrics such as
periodic health samples, where losing a few recent writes is acceptable.
"""

__version__ = '0.1.0'

from boundseries.series import (
    BoundedSeriesStore,
    ConfigError,
    SeriesPoint,
    StorageInitError,
)

__all__ = [
    '__version__',
    'BoundedSeriesStore',
    'SeriesPoint',
    'ConfigError',
    'StorageInitError',
]
