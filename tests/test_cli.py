import io

from wordtrainer.cli import main
from wordtrainer.models import WordEntry
from wordtrainer.storage import persist_result_to_file, read_word_list


def test_main_reports_missing_dictionary(tmp_path, capsys):
    status = main(
        ["--vocabulary", str(tmp_path / "none.json"), "--archive", str(tmp_path / "archive")]
    )
    assert status == 1
    out = capsys.readouterr().out
    assert "working flow error" in out


def test_main_reports_small_dictionary(tmp_path, capsys):
    vocabulary = tmp_path / "words.json"
    persist_result_to_file(vocabulary, [WordEntry(word="a", meaning="b")])
    status = main(["--vocabulary", str(vocabulary), "--archive", str(tmp_path / "archive")])
    assert status == 1
    assert "working flow error" in capsys.readouterr().out


def test_main_runs_session(tmp_path, monkeypatch):
    vocabulary = tmp_path / "words.json"
    archive = tmp_path / "archive"
    words = [
        WordEntry(word=f"w{i}", meaning=f"m{i}", start_date="2023-05-05") for i in range(10)
    ]
    persist_result_to_file(vocabulary, words)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n" + "?\n" * 10))

    status = main(["--vocabulary", str(vocabulary), "--archive", str(archive)])

    assert status == 0
    saved = read_word_list(vocabulary)
    assert sorted(w.word for w in saved) == sorted(w.word for w in words)
    assert all(w.progress == 0 and w.hits_count == 1 for w in saved)
    assert archive.read_text(encoding="utf-8") == ""