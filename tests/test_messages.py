import pytest

from wordtrainer import config
from wordtrainer.messages import (
    colorize,
    error_message,
    process_message,
    prompt_word_message,
    result_message,
)


def test_colorize_wraps_with_color_and_reset():
    assert colorize("hello", "\033[31m") == "\033[31mhello\033[0m"


def test_process_message_uses_blue():
    assert process_message("Loading...") == "\033[34mLoading...\033[0m"


def test_result_message_uses_green():
    assert result_message("done") == "\033[32mdone\033[0m"


def test_error_message_uses_red():
    assert error_message("bad") == "\033[31mbad\033[0m"


def test_prompt_word_message_uses_magenta():
    assert prompt_word_message("word?") == "\033[35mword?\033[0m"


@pytest.mark.parametrize(
    "func, color",
    [
        (process_message, config.COLOR_PROCESS_MESSAGE),
        (result_message, config.COLOR_RESULT_MESSAGE),
        (error_message, config.COLOR_ERROR),
        (prompt_word_message, config.COLOR_PROMPT),
    ],
)
def test_helpers_keep_message_intact(func, color):
    text = "Some message: %v"
    out = func(text)
    assert out.startswith(color)
    assert out.endswith(config.COLOR_RESET)
    assert out[len(color) : -len(config.COLOR_RESET)] == text


def test_colorize_empty_message():
    assert colorize("", config.COLOR_PROMPT) == config.COLOR_PROMPT + config.COLOR_RESET