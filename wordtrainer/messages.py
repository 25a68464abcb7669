"""Coloured console messages."""

from __future__ import annotations

from . import config

INPUT_ERROR = "input error: {}"


def colorize(message: str, color: str) -> str:
    """Wrap message in the given ANSI colour and a reset code."""
    return f"{color}{message}{config.COLOR_RESET}"


def process_message(message: str) -> str:
    """Colour a progress message."""
    return colorize(message, config.COLOR_PROCESS_MESSAGE)


def result_message(message: str) -> str:
    """Colour a success or result message."""
    return colorize(message, config.COLOR_RESULT_MESSAGE)


def error_message(message: str) -> str:
    """Colour an error message."""
    return colorize(message, config.COLOR_ERROR)


def prompt_word_message(message: str) -> str:
    """Colour a prompt that asks for a word."""
    return colorize(message, config.COLOR_PROMPT)