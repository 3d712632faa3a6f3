"""Bounded integer time series with best-effort JSON file persistence."""
from collections import deque
from pathlib import Path
from typing import Deque, List, Optional, Union
import logging
import math
import time

from .errors import ConfigError, RecoverableParseError, RecoverableWriteError
from .point import SeriesPoint
from .storage import SeriesFile

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def now() -> int:
    """Current wall clock time in whole epoch seconds."""
    return _round_half_up(time.time())


class BoundedSeriesStore:
    """
    Integer time series with a minimum resolution and a maximum window.

    Points closer than ``resolution`` seconds to the previous point are
    dropped, reads only return points younger than ``window`` seconds, and
    the buffer never grows past ``capacity = round(window / resolution)``
    after a write. Every accepted write overwrites the backing file.

    Construction is the only operation that raises. ``add`` and ``get``
    always return normally; a failed file write leaves the in-memory
    buffer authoritative. Do not use this for anything that requires data
    consistency.

    Not safe for concurrent calls: a store has a single owner, and callers
    sharing one across threads must serialize access themselves.
    """

    def __init__(
        self,
        path: Union[str, Path],
        resolution: int,
        window: int,
        verbose: bool = False,
    ):
        if path is None or resolution is None or window is None:
            raise ConfigError("path, resolution and window must all be defined")
        if path == "" or str(path) == ".":
            raise ConfigError("path must not be empty")
        if resolution == 0:
            raise ConfigError("resolution must be non-zero")

        self.resolution = resolution
        self.window = window
        self.capacity = _round_half_up(window / resolution)
        self.verbose = verbose
        self._file = SeriesFile(path)
        self._points: Deque[SeriesPoint] = deque(self._load())

    @classmethod
    def create(
        cls,
        path: Union[str, Path],
        resolution: int,
        window: int,
        verbose: bool = False,
    ) -> "BoundedSeriesStore":
        """Build a store, recovering any previous points from ``path``."""
        return cls(path, resolution, window, verbose=verbose)

    @classmethod
    def from_config(cls) -> "BoundedSeriesStore":
        """Build a store from the SERIES_* settings in boundseries.config."""
        from boundseries import config

        return cls(
            config.SERIES_FILE,
            config.SERIES_RESOLUTION,
            config.SERIES_WINDOW,
            verbose=config.SERIES_VERBOSE,
        )

    @property
    def path(self) -> Path:
        return self._file.path

    # ------------------------------------------------------------------
    # Recovery
    # ------------------------------------------------------------------

    def _load(self) -> List[SeriesPoint]:
        """Read, validate and window-filter the points stored on disk."""
        try:
            records = self._file.read_records()
        except RecoverableParseError as exc:
            logger.debug("Discarding unparsable series file: %s", exc)
            records = []
        except OSError:
            # Missing or unreadable: start over with an empty file
            self._file.initialize()
            records = []

        current = now()
        points = []
        for record in records:
            point = SeriesPoint.from_record(record)
            if point is None or current - point.timestamp >= self.window:
                continue
            points.append(point)

        points.sort(key=lambda p: p.timestamp)
        if len(points) > self.capacity:
            points = points[len(points) - self.capacity:]

        logger.info(
            "Loaded %d points from %s (%d dropped)",
            len(points),
            self.path,
            len(records) - len(points),
        )
        return points

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add(self, value: int) -> None:
        """Record a sample at the current time. Never raises."""
        current = now()

        if not isinstance(value, int) or isinstance(value, bool):
            logger.warning("Rejecting non-integer series value %r", value)
            return

        if not self._points or current - self._points[-1].timestamp > self.resolution:
            self._points.append(SeriesPoint(timestamp=current, value=value))
        else:
            logger.debug(
                "Dropping sample within resolution: now=%s last=%s",
                current,
                self._points[-1].timestamp,
            )

        if len(self._points) > self.capacity:
            self._points.popleft()

        self._persist()

    def _persist(self) -> None:
        """Write the buffer to disk, logging and discarding any failure."""
        try:
            self._file.write_points(self._points)
        except RecoverableWriteError as exc:
            if self.verbose:
                logger.warning("Error writing the series file: %s", exc)
            else:
                logger.debug("Error writing the series file: %s", exc)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self) -> List[SeriesPoint]:
        """Return a copy of the points inside the window (oldest→newest)."""
        current = now()
        return [p for p in self._points if current - p.timestamp < self.window]

    def latest(self) -> Optional[SeriesPoint]:
        """Return the newest point inside the window (or None)."""
        points = self.get()
        return points[-1] if points else None

    def size(self) -> int:
        """Current buffer length, including stale points not yet pruned."""
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)
