"""In-memory NMEA comment block.

A comment block is an ordered set of ``key:value`` pairs carried in front
of an AIS sentence.  This class holds the decoded pairs; rendering them
to and from the ``\\...*hh\\`` line form belongs to the sentence codec.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import datetime

from pyaistag._constants import TIMESTAMP_KEY
from pyaistag.ingestion.normalize import parse_epoch_seconds, safe_int, to_epoch_seconds


class CommentBlock:
    """Ordered string key/value store.

    Adding an existing key replaces its value in place; the key keeps its
    original position.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        if values:
            for key, value in values.items():
                self.add_string(key, value)

    def add_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def add_int(self, key: str, value: int) -> None:
        self._values[key] = str(int(value))

    def add_timestamp(self, timestamp: datetime) -> None:
        """Store *timestamp* as whole seconds since 1970 under ``c``."""
        self._values[TIMESTAMP_KEY] = str(to_epoch_seconds(timestamp))

    def contains(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str) -> str | None:
        return self._values.get(key)

    def get_int(self, key: str) -> int | None:
        """Integer value for *key*, ``None`` when missing or not a whole number."""
        return safe_int(self._values.get(key))

    def get_timestamp(self) -> datetime | None:
        return parse_epoch_seconds(self._values.get(TIMESTAMP_KEY))

    def is_empty(self) -> bool:
        return not self._values

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommentBlock):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CommentBlock({self._values!r})"
