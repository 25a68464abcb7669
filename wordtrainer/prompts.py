"""Interactive yes/no questions and word prompts read from a text stream."""

from __future__ import annotations

from typing import TextIO

from .messages import INPUT_ERROR, error_message, process_message, prompt_word_message
from .models import InputError

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


def normalize_yes_no(answer: str) -> bool:
    """Interpret a y/yes or n/no answer, ignoring case and surrounding blanks.

    Raises ValueError for anything else.
    """
    answer = answer.strip().lower()
    if answer in _YES:
        return True
    if answer in _NO:
        return False
    raise ValueError("bad input")


def _read_line(reader: TextIO) -> str:
    line = reader.readline()
    if not line.endswith("\n"):
        raise InputError(INPUT_ERROR.format("EOF"))
    return line


def ask_yes_no(reader: TextIO, question: str) -> bool:
    """Ask question until a valid yes/no answer is read from reader."""
    print(process_message(question))
    while True:
        answer = _read_line(reader)
        try:
            return normalize_yes_no(answer)
        except ValueError:
            print(error_message("Bad input! Should be y/n (or yes/no). Try once more, please:"))


def ask_word(reader: TextIO, prompt: str) -> str:
    """Ask for a non-empty word; return an empty string if the user cancels."""
    while True:
        print(prompt_word_message(prompt))
        word = _read_line(reader).strip()
        if word:
            return word
        if ask_yes_no(reader, "Empty input detected. Do you want to cancel adding new words? (y/n)"):
            print(process_message("Cancelled by user. Starting a new lesson..."))
            return ""