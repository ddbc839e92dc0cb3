import os

import pytest

from identicon.cli import main, parse_args


def test_parse_args_multiple_inputs() -> None:
    args = parse_args(["alice", "bob"])
    assert args.inputs == ["alice", "bob"]


def test_parse_args_requires_input() -> None:
    with pytest.raises(SystemExit):
        parse_args([])


def test_main_writes_images(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "img").mkdir()

    assert main(["elixir", "python"]) == 0

    assert (tmp_path / "img" / "elixir.png").is_file()
    assert (tmp_path / "img" / "python.png").is_file()
    out = capsys.readouterr().out.splitlines()
    assert out == [os.path.join("img", "elixir.png"), os.path.join("img", "python.png")]


def test_main_reports_write_failure(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert main(["elixir"]) == 1
    assert not (tmp_path / "img").exists()
