"""Dictionary and archive records, and the errors the trainer raises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


class TrainerError(Exception):
    """Base error for everything that stops a training session."""


class InputError(TrainerError):
    """Reading the user's answer failed."""


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TrainerError(f"field {key!r} must be {kind.__name__}, got {value!r}")
    return value


@dataclass
class WordEntry:
    """A word or phrase being learned, as stored in the dictionary file."""

    word: str = ""
    meaning: str = ""
    progress: int = 0
    start_date: str = ""
    hits_count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WordEntry":
        """Build an entry from its JSON object; missing or null fields take defaults."""
        if not isinstance(data, Mapping):
            raise TrainerError(f"word entry must be an object, got {data!r}")
        return cls(
            word=_field(data, "word", str, ""),
            meaning=_field(data, "translation", str, ""),
            progress=_field(data, "progress", int, 0),
            start_date=_field(data, "start_date", str, ""),
            hits_count=_field(data, "hits_count", int, 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the entry."""
        return {
            "word": self.word,
            "translation": self.meaning,
            "progress": self.progress,
            "start_date": self.start_date,
            "hits_count": self.hits_count,
        }


@dataclass
class ArchiveEntry:
    """A learned word, as appended to the archive file."""

    word: str
    meaning: str
    start_date: str
    hits_count: int
    archive_date: str

    @classmethod
    def from_word_entry(cls, entry: WordEntry, archive_date: str) -> "ArchiveEntry":
        """Turn a dictionary entry into an archive record dated archive_date."""
        return cls(entry.word, entry.meaning, entry.start_date, entry.hits_count, archive_date)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the record."""
        return {
            "word": self.word,
            "translation": self.meaning,
            "start_date": self.start_date,
            "hits_count": self.hits_count,
            "archive_date": self.archive_date,
        }