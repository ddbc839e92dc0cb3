import os

import pytest

from identicon.persist import image_path, save_image, write_bytes
from tests.test_utils import RecordingWriter


def test_image_path_default_dir() -> None:
    assert image_path("elixir") == os.path.join("img", "elixir.png")


def test_image_path_uses_input_verbatim() -> None:
    assert image_path("a b.c", "out") == os.path.join("out", "a b.c.png")
    assert image_path("", "out") == os.path.join("out", ".png")


def test_save_image_calls_writer() -> None:
    writer = RecordingWriter()
    path = save_image(b"data", "elixir", write_fn=writer)
    assert path == os.path.join("img", "elixir.png")
    assert writer.files == {path: b"data"}


def test_save_image_writes_file(tmp_path) -> None:
    path = save_image(b"\x00\x01", "elixir", output_dir=str(tmp_path))
    with open(path, "rb") as fh:
        assert fh.read() == b"\x00\x01"


def test_save_image_overwrites(tmp_path) -> None:
    save_image(b"first", "elixir", output_dir=str(tmp_path))
    path = save_image(b"second", "elixir", output_dir=str(tmp_path))
    with open(path, "rb") as fh:
        assert fh.read() == b"second"


def test_save_image_missing_directory_raises(tmp_path) -> None:
    missing = str(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        save_image(b"data", "elixir", output_dir=missing)
    assert not os.path.exists(missing)


def test_write_bytes_error_propagates(tmp_path) -> None:
    with pytest.raises(OSError):
        write_bytes(str(tmp_path), b"data")
