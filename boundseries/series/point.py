"""Immutable timestamped integer observation."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


def _as_int(value: Any) -> Optional[int]:
    """Integer form of a parsed JSON number, or None if it is not integral."""
    # bool is an int subclass but never a valid sample
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


@dataclass(frozen=True)
class SeriesPoint:
    timestamp: int  # epoch seconds
    value: int

    def to_dict(self) -> Dict[str, int]:
        """Flat record shape used by the backing file."""
        return {"timestamp": self.timestamp, "value": self.value}

    @classmethod
    def from_record(cls, record: Any) -> Optional["SeriesPoint"]:
        """
        Build a point from one parsed file entry.

        Returns None for entries that are not a mapping or whose timestamp
        or value is not an integral number; ``100.0`` is read as ``100``.
        Files written by older releases stored the value under ``data``;
        that key is read when ``value`` is absent.
        """
        if not isinstance(record, dict):
            return None

        timestamp = record.get("timestamp")
        value = record["value"] if "value" in record else record.get("data")

        timestamp = _as_int(timestamp)
        value = _as_int(value)
        if timestamp is None or value is None:
            return None
        return cls(timestamp=timestamp, value=value)
