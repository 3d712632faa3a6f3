"""Error taxonomy for the bounded series store.

Only ``ConfigError`` and ``StorageInitError`` ever reach callers; the
recoverable kinds are raised and absorbed inside the store.
"""


class SeriesError(Exception):
    """Base class for series store errors."""


class ConfigError(SeriesError, ValueError):
    """A required construction parameter is missing."""


class StorageInitError(SeriesError, OSError):
    """Backing file is unreadable and could not be created."""


class RecoverableParseError(SeriesError):
    """Backing file content is malformed; the store starts empty."""


class RecoverableWriteError(SeriesError):
    """Persisting the buffer failed; in-memory state stays authoritative."""
