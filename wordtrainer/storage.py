"""Reading and writing the dictionary file and the archive."""

from __future__ import annotations

import json
import os
from typing import Any, Iterable

from .models import ArchiveEntry, TrainerError, WordEntry

_ESCAPES = str.maketrans(
    {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}
)


def _dumps(value: Any, indent: int | None = None) -> str:
    separators = (",", ":") if indent is None else None
    text = json.dumps(value, ensure_ascii=False, indent=indent, separators=separators)
    return text.translate(_ESCAPES)


def read_word_list(path: str | os.PathLike[str]) -> list[WordEntry]:
    """Load the dictionary: a JSON array of word entries."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise TrainerError(f"failed to open file: {exc}") from exc

    try:
        data, _ = json.JSONDecoder().raw_decode(text.lstrip())
        if data is None:
            return []
        if not isinstance(data, list):
            raise TrainerError(f"expected an array, got {type(data).__name__}")
        return [WordEntry.from_dict(item or {}) for item in data]
    except (json.JSONDecodeError, TrainerError) as exc:
        raise TrainerError(f"failed to decode JSON: {exc}") from exc


def persist_result_to_file(path: str | os.PathLike[str], words: Iterable[WordEntry]) -> None:
    """Overwrite the dictionary file with words, indented by two spaces."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(_dumps([word.to_dict() for word in words], indent=2) + "\n")


def append_to_archive(path: str | os.PathLike[str], entries: Iterable[ArchiveEntry]) -> None:
    """Append entries to the archive, one compact JSON object per line.

    The file is created if it does not exist, even when there is nothing to add.
    """
    with open(path, "a", encoding="utf-8") as handle:
        for entry in entries:
            handle.write(_dumps(entry.to_dict()) + "\n")