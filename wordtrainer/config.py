"""Application-wide settings: file locations, session size, dates and colours."""

from __future__ import annotations

import datetime

# strftime pattern used for every date stored in the dictionary and archive.
DATE_FORMAT = "%Y-%m-%d"

# Minimum number of words the dictionary must hold to start a lesson,
# and the number of words asked in one lesson.
WORDS_IN_SET = 10

# Progress at which a word counts as learned and moves to the archive.
LEARNED_PROGRESS = 10

VOCABULARY = "./data/words.json"
ARCHIVE = "./data/archive"

COLOR_RESET = "\033[0m"
COLOR_PROCESS_MESSAGE = "\033[34m"
COLOR_ERROR = "\033[31m"
COLOR_RESULT_MESSAGE = "\033[32m"
COLOR_PROMPT = "\033[35m"


def today() -> str:
    """Return the current local date formatted with DATE_FORMAT."""
    return datetime.date.today().strftime(DATE_FORMAT)