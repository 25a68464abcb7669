import io

import pytest

from wordtrainer.messages import INPUT_ERROR
from wordtrainer.models import InputError, TrainerError
from wordtrainer.prompts import ask_word, ask_yes_no, normalize_yes_no


@pytest.mark.parametrize("answer", ["y", "yes", "Y\n", "  YES  \n", "Yes"])
def test_normalize_yes(answer):
    assert normalize_yes_no(answer) is True


@pytest.mark.parametrize("answer", ["n", "no", "N\n", "  No \r\n"])
def test_normalize_no(answer):
    assert normalize_yes_no(answer) is False


@pytest.mark.parametrize("answer", ["", "maybe", "yep", "nope", "y es"])
def test_normalize_rejects_other_answers(answer):
    with pytest.raises(ValueError, match="bad input"):
        normalize_yes_no(answer)


def test_ask_yes_no_accepts_first_valid_answer(capsys):
    reader = io.StringIO("yes\n")
    assert ask_yes_no(reader, "Continue?") is True
    assert "Continue?" in capsys.readouterr().out


def test_ask_yes_no_retries_after_bad_input(capsys):
    reader = io.StringIO("what\n\nn\n")
    assert ask_yes_no(reader, "Continue?") is False
    out = capsys.readouterr().out
    assert out.count("Bad input! Should be y/n (or yes/no)") == 2


def test_ask_yes_no_leaves_rest_of_stream(capsys):
    reader = io.StringIO("y\nremaining\n")
    assert ask_yes_no(reader, "Q") is True
    assert reader.read() == "remaining\n"


def test_ask_yes_no_raises_on_eof():
    with pytest.raises(InputError) as info:
        ask_yes_no(io.StringIO(""), "Q")
    assert str(info.value) == INPUT_ERROR.format("EOF")
    assert isinstance(info.value, TrainerError)


def test_ask_yes_no_raises_on_unterminated_line():
    with pytest.raises(InputError):
        ask_yes_no(io.StringIO("y"), "Q")


def test_ask_word_strips_input(capsys):
    reader = io.StringIO("  hello world \n")
    assert ask_word(reader, "Enter a word:") == "hello world"
    assert "Enter a word:" in capsys.readouterr().out


def test_ask_word_empty_then_cancel(capsys):
    reader = io.StringIO("\ny\n")
    assert ask_word(reader, "Enter a word:") == ""
    assert "Cancelled by user. Starting a new lesson..." in capsys.readouterr().out


def test_ask_word_empty_then_continue(capsys):
    reader = io.StringIO("   \nno\napple\n")
    assert ask_word(reader, "Enter a word:") == "apple"
    out = capsys.readouterr().out
    assert out.count("Enter a word:") == 2
    assert "Empty input detected." in out


def test_ask_word_raises_on_eof():
    with pytest.raises(InputError):
        ask_word(io.StringIO(""), "Enter a word:")


def test_ask_word_raises_on_eof_during_cancel_question():
    with pytest.raises(InputError):
        ask_word(io.StringIO("\n"), "Enter a word:")