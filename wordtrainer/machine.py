"""The training session as a sequence of states driven by a state machine."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, TextIO

from . import config
from .lesson import Result, Word, apply_lesson_results, prepare_data_for_lesson
from .messages import (
    INPUT_ERROR,
    error_message,
    process_message,
    prompt_word_message,
    result_message,
)
from .models import ArchiveEntry, InputError, TrainerError, WordEntry
from .prompts import ask_word, ask_yes_no
from .storage import append_to_archive, persist_result_to_file, read_word_list

_MSG_CANCELLED_ADDING = "Cancelled adding new words. Starting a new lesson"


class State(ABC):
    """One step of a session; returns the next step, or None when done."""

    @abstractmethod
    def execute(self, machine: "StateMachine") -> "State | None":
        """Perform the step and return the state that follows it."""


@dataclass
class StateMachine:
    """Runs states one after another, sharing the active dictionary between them."""

    vocabulary: str = config.VOCABULARY
    archive: str = config.ARCHIVE
    reader: TextIO = field(default_factory=lambda: sys.stdin)
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], str] = config.today
    active_words: list[WordEntry] = field(default_factory=list)
    current: State | None = field(default_factory=lambda: StateLoadWords())

    def run(self) -> None:
        """Execute states until one returns None.

        Raises TrainerError wrapping whatever stopped the session.
        """
        while self.current is not None:
            try:
                self.current = self.current.execute(self)
            except (TrainerError, OSError) as exc:
                raise TrainerError(f"execution failed: {exc}") from exc


def _read_answer(reader: TextIO) -> str:
    line = reader.readline()
    if not line.endswith("\n"):
        raise InputError(INPUT_ERROR.format("EOF"))
    return line


class StateLoadWords(State):
    """Load the active dictionary from the vocabulary file."""

    def execute(self, machine: StateMachine) -> State | None:
        print(process_message("Loading active vocabulary..."))
        machine.active_words = read_word_list(machine.vocabulary)
        print(
            result_message(
                f"Active dictionary contains {len(machine.active_words)} "
                "words and phrases for learning!\n\n"
            ),
            end="",
        )
        return StateValidateDictionary()


class StateValidateDictionary(State):
    """Check the dictionary is large enough and fill in missing fields."""

    def execute(self, machine: StateMachine) -> State | None:
        print(process_message("Validating dictionary..."))
        count = len(machine.active_words)
        if count < config.WORDS_IN_SET:
            raise TrainerError(
                f"not enough words in the dictionary ({count})! You should add some"
            )
        for entry in machine.active_words:
            if not entry.word or not entry.meaning:
                raise TrainerError(f"invalid word entry detected: {entry!r}")
            if not entry.start_date:
                entry.start_date = machine.clock()
            if entry.hits_count == 0:
                entry.hits_count = entry.progress
        print(result_message("Dictionary data is valid!"))
        print()
        return StateAskNewWords()


class StateAskNewWords(State):
    """Offer to add new words to the dictionary before the lesson."""

    def execute(self, machine: StateMachine) -> State | None:
        reader = machine.reader
        if not ask_yes_no(reader, "Would you like to add a new phrase (y/n)?"):
            print()
            return StatePrepareDataForLesson()

        while True:
            try:
                word = ask_word(reader, "Enter a new english word (phrase):")
            except InputError:
                print(process_message(_MSG_CANCELLED_ADDING))
                raise
            if not word:
                break

            try:
                meaning = ask_word(reader, "Enter the meaning of the new word (phrase):")
            except InputError:
                print(process_message(_MSG_CANCELLED_ADDING))
                raise
            if not meaning:
                break

            entry = WordEntry(word=word, meaning=meaning, start_date=machine.clock())
            machine.active_words.append(entry)

            print()
            print(result_message(f"New word (phrase) '{entry.word}' added to dictionary!"))

            if not ask_yes_no(reader, "Would you like to add another phrase (y/n)?"):
                break

        return StatePrepareDataForLesson()


class StatePrepareDataForLesson(State):
    """Pick the words for the lesson."""

    def execute(self, machine: StateMachine) -> State | None:
        print(process_message("Preparing data for lesson..."))
        words = prepare_data_for_lesson(machine.active_words, machine.rng)
        print(result_message("Words list is ready for lesson..."))
        print()
        return StateLesson(words)


@dataclass
class StateLesson(State):
    """Ask each word by its translation and record whether the answer was right."""

    words: list[Word]

    def execute(self, machine: StateMachine) -> State | None:
        print("Starting lesson...")
        for number, word in enumerate(self.words, 1):
            print(prompt_word_message(f"{number}: {word.translation}\n"), end="")
            answer = _read_answer(machine.reader)
            if answer.strip() == word.word:
                word.result = Result.CORRECT
                print(
                    result_message(
                        f"Correct answer!. The progress is {word.progress + 1}!\n\n"
                    ),
                    end="",
                )
            else:
                word.result = Result.INCORRECT
                progress = max(word.progress - 1, 0)
                print(
                    error_message(
                        f"This is not correct! The correct answer is '{word.word}'! "
                        f"Progress goes down ({progress})!\n\n"
                    ),
                    end="",
                )
        print(result_message("The lesson is over!"))
        print()
        return StateProcessLessonResults(self.words)


@dataclass
class StateProcessLessonResults(State):
    """Apply the lesson's answers to the active dictionary."""

    words: list[Word]

    def execute(self, machine: StateMachine) -> State | None:
        print(process_message("Processing results..."))
        apply_lesson_results(machine.active_words, self.words)
        print(result_message("Dictionary has been updated with the current progress..."))
        print()
        return StateArchiveLearned()


class StateArchiveLearned(State):
    """Move learned words from the dictionary to the archive."""

    def execute(self, machine: StateMachine) -> State | None:
        print(process_message("Checking words ready to archive..."))
        remaining = [w for w in machine.active_words if w.progress < config.LEARNED_PROGRESS]
        archive_date = machine.clock()
        learned = [
            ArchiveEntry.from_word_entry(w, archive_date)
            for w in machine.active_words
            if w.progress >= config.LEARNED_PROGRESS
        ]

        try:
            append_to_archive(machine.archive, learned)
        except (TypeError, ValueError) as exc:
            raise TrainerError(f"failed to append word to archive: {exc}") from exc

        if learned:
            for entry in learned:
                print(
                    result_message(
                        f"Word (phrase) '{entry.word}' is learned and goes to the archive! "
                        f"It took {entry.hits_count} attempts to finish.\n"
                    ),
                    end="",
                )
        else:
            print(result_message("No words to be archived!"))

        print(process_message("Archiving processed finished..."))
        print()
        return StatePersistResult(remaining)


@dataclass
class StatePersistResult(State):
    """Save the words still being learned back to the vocabulary file."""

    new_dictionary: list[WordEntry]

    def execute(self, machine: StateMachine) -> State | None:
        print(process_message("Persisting results..."))
        try:
            persist_result_to_file(machine.vocabulary, self.new_dictionary)
        except OSError as exc:
            raise TrainerError(f"failed to save dictionary: {exc}") from exc
        print(
            result_message(
                f"Dictionary successfully saved! {len(self.new_dictionary)} "
                "phrases are still in progress. Exiting...\n"
            ),
            end="",
        )
        return None