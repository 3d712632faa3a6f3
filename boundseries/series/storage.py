"""JSON file persistence for the bounded series store."""
import json
from pathlib import Path
from typing import Any, Iterable, List, Union
import logging

from .errors import RecoverableParseError, RecoverableWriteError, StorageInitError
from .point import SeriesPoint

logger = logging.getLogger(__name__)

EMPTY_SERIES = "[]"


class SeriesFile:
    """Whole-file read/overwrite access to a series backing file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read_text(self) -> str:
        """
        Read the whole file as UTF-8.

        Raises:
            OSError: If the file is missing or unreadable
            RecoverableParseError: If the content is not valid UTF-8
        """
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise RecoverableParseError(f"{self.path} is not valid UTF-8") from exc

    def initialize(self) -> str:
        """Create (or overwrite) the file with an empty series."""
        try:
            self.path.write_text(EMPTY_SERIES, encoding="utf-8")
        except OSError as exc:
            raise StorageInitError(f"Unable to create series file {self.path}") from exc
        logger.info("Created empty series file %s", self.path)
        return EMPTY_SERIES

    def read_records(self) -> List[Any]:
        """Parse the file into its list of raw records."""
        text = self.read_text()
        try:
            records = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise RecoverableParseError(f"{self.path} does not contain valid JSON") from exc

        if not isinstance(records, list):
            raise RecoverableParseError(
                f"{self.path} must contain a JSON array, got {type(records).__name__}"
            )
        return records

    def write_points(self, points: Iterable[SeriesPoint]) -> None:
        """Overwrite the file with the given points. Single attempt, no retry."""
        try:
            payload = json.dumps([p.to_dict() for p in points])
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise RecoverableWriteError(f"Error writing series file {self.path}: {exc}") from exc
