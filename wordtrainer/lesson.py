"""Choosing the words for a lesson and applying the answers to the dictionary."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence

from . import config
from .models import TrainerError, WordEntry


class Result(IntEnum):
    """Outcome of a single question in a lesson."""

    NOT_ANSWERED = 0
    CORRECT = 1
    INCORRECT = -1


@dataclass
class Word:
    """A word as asked in a lesson."""

    word: str
    translation: str
    progress: int
    result: Result = Result.NOT_ANSWERED

    @classmethod
    def from_entry(cls, entry: WordEntry) -> "Word":
        """Build an unanswered lesson word from a dictionary entry."""
        return cls(
            word=entry.word,
            translation=entry.meaning,
            progress=entry.progress,
            result=Result.NOT_ANSWERED,
        )


def prepare_data_for_lesson(
    word_list: Sequence[WordEntry], rng: random.Random | None = None
) -> list[Word]:
    """Pick WORDS_IN_SET distinct entries at random and turn them into lesson words."""
    if len(word_list) < config.WORDS_IN_SET:
        raise TrainerError(
            f"not enough words in the dictionary ({len(word_list)}) to prepare a lesson"
        )
    rng = rng if rng is not None else random.Random()
    chosen = rng.sample(list(word_list), config.WORDS_IN_SET)
    return [Word.from_entry(entry) for entry in chosen]


def find_dictionary_record(dictionary: Iterable[WordEntry], word: str) -> WordEntry:
    """Return the first entry whose word equals word."""
    for entry in dictionary:
        if entry.word == word:
            return entry
    raise TrainerError(f"the word '{word}' is not found in the active dictionary")


def apply_lesson_results(active_words: Sequence[WordEntry], words: Iterable[Word]) -> None:
    """Count a hit for every asked word and move its progress by the answer."""
    for word in words:
        entry = find_dictionary_record(active_words, word.word)
        entry.hits_count += 1
        if word.result == Result.CORRECT:
            entry.progress += 1
        elif word.result == Result.INCORRECT and entry.progress > 0:
            entry.progress -= 1