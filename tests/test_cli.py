import io

import pytest

from storypath.cli import main


@pytest.fixture
def story_file(tmp_path):
    path = tmp_path / "story.txt"
    lines = [f"{n}|Event {n}|{2 * n}|{2 * n + 1}" for n in range(1, 17)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_plays_a_full_game(story_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n6\nn\n"))
    assert main([str(story_file)]) == 0
    out = capsys.readouterr().out
    assert "Welcome to my adventure fellow programmer!" in out
    assert out.count("6 Event 6") == 2
    assert "Until next Time" in out


def test_custom_delimiter(tmp_path, monkeypatch, capsys):
    path = tmp_path / "story.csv"
    lines = [f"{n},Event {n},{2 * n},{2 * n + 1}" for n in range(1, 8)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n7\nn\n"))
    assert main([str(path), "--delimiter", ","]) == 0
    assert capsys.readouterr().out.count("7 Event 7") == 2


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Couldn't open the file" in capsys.readouterr().out


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("x|Start|2|3\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Malformed story file" in capsys.readouterr().err


def test_end_of_input_stops_quietly(story_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([str(story_file)]) == 0
    assert "4 Event 4" in capsys.readouterr().out


def test_bad_delimiter_rejected(story_file):
    with pytest.raises(SystemExit) as info:
        main([str(story_file), "-d", "||"])
    assert info.value.code == 2