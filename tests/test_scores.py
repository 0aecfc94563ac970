import pytest

from galaxyguard.scores import LINE_CHUNK, format_score_line, read_score_lines, save_score


def test_format_score_line():
    assert format_score_line("ana", 30) == "Player: ana, Score: 30\n"


def test_save_then_read_round_trip(tmp_path):
    path = tmp_path / "scores.txt"
    save_score(path, "ana", 10)
    save_score(path, "bob", 0)
    assert read_score_lines(path) == ["Player: ana, Score: 10", "Player: bob, Score: 0"]


def test_save_appends_to_existing(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("old\n", encoding="utf-8")
    save_score(path, "eve", 20)
    assert read_score_lines(path) == ["old", "Player: eve, Score: 20"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_score_lines(tmp_path / "absent.txt")


def test_save_into_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_score(tmp_path, "ana", 1)


def test_long_line_is_split(tmp_path):
    path = tmp_path / "scores.txt"
    text = "x" * 150
    path.write_text(text + "\n", encoding="utf-8")
    rows = read_score_lines(path)
    assert len(rows) == 2
    assert "".join(rows) == text
    assert all(len(row) <= LINE_CHUNK for row in rows)