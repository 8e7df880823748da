import os

import pytest

from pixelpng.app import writer
from pixelpng.app.cli import main
from pixelpng.app.job import IconJobBuilder, RenderSettings
from pixelpng.app.verify import verify_png
from pixelpng.designs import DesignRegistry
from pixelpng.png import encode_png


@pytest.fixture
def bookmarks():
    return DesignRegistry.load().require("bookmarks")


def test_cli_generates_and_verifies(tmp_path, capsys):
    out_dir = tmp_path / "icons"
    assert main(["--out", str(out_dir), "--sizes", "16", "32", "--verify"]) == 0
    assert sorted(os.listdir(out_dir)) == ["icon-16.png", "icon-32.png"]
    assert "Icons generated: icon-16.png, icon-32.png" in capsys.readouterr().out


def test_cli_default_sizes(tmp_path):
    assert main(["--out", str(tmp_path), "--design", "ocean"]) == 0
    assert sorted(os.listdir(tmp_path)) == sorted(f"ocean-{s}.png" for s in (16, 32, 48, 128))


def test_cli_lists_designs(capsys):
    assert main(["--list-designs"]) == 0
    assert "bookmarks (16, 32, 48, 128)" in capsys.readouterr().out


def test_cli_unknown_design(tmp_path, capsys):
    assert main(["--out", str(tmp_path), "--design", "nope"]) == 2
    assert "nope" in capsys.readouterr().err


def test_cli_failed_size_is_skipped(tmp_path, capsys):
    assert main(["--out", str(tmp_path), "--sizes", "0", "16"]) == 2
    assert os.listdir(tmp_path) == ["icon-16.png"]
    assert "Size 0" in capsys.readouterr().err


def test_compression_level_is_applied(tmp_path, bookmarks):
    stored = IconJobBuilder(bookmarks, RenderSettings(compress_level=0)).build(48)
    packed = IconJobBuilder(bookmarks, RenderSettings(compress_level=9)).build(48)
    assert len(stored) > len(packed)


def test_bad_compression_level(bookmarks):
    with pytest.raises(RuntimeError):
        IconJobBuilder(bookmarks, RenderSettings(compress_level=12)).build(16)


def test_failed_write_leaves_no_files(tmp_path, monkeypatch):
    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(writer.os, "replace", broken_replace)
    with pytest.raises(RuntimeError, match="disk full"):
        writer.write_file_atomic(tmp_path / "icon.png", b"data")
    assert os.listdir(tmp_path) == []


def test_verify_rejects_size_mismatch(tmp_path, bookmarks):
    path = IconJobBuilder(bookmarks).write(16, tmp_path)
    verify_png(path, 16, 16)
    with pytest.raises(RuntimeError, match="does not match"):
        verify_png(path, 32, 32)


def test_verify_rejects_undecodable_image_data(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(encode_png(1, 1, bytes(5), lambda raw: b"not a zlib stream"))
    with pytest.raises(RuntimeError, match="decoder rejected"):
        verify_png(path, 1, 1)
