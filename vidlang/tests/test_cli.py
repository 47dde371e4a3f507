"""Tests for the vid command-line entry point."""
import pytest

import vid


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch):
    monkeypatch.delenv("VIDDEBUG", raising=False)
    monkeypatch.delenv("VID_FFMPEG", raising=False)
    monkeypatch.delenv("VID_PLAYER", raising=False)


def test_prints_commands_for_clean_script(tmp_path, capsys):
    script = tmp_path / "edit.vid"
    script.write_text('frame "video.mp4" 10 to "frame10.bmp";\nplay "video.mp4";\n')
    assert vid.main([str(script)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].startswith("ffmpeg -y -i video.mp4")
    assert out[0].endswith("frame10.bmp")
    assert out[1] == "vlc video.mp4"


def test_operations_flag(tmp_path, capsys):
    script = tmp_path / "edit.vid"
    script.write_text('play "video.mp4";\n')
    assert vid.main([str(script), "--operations"]) == 0
    assert capsys.readouterr().out.strip() == "Play(source='video.mp4')"


def test_diagnostics_go_to_stderr(tmp_path, capsys):
    script = tmp_path / "broken.vid"
    script.write_text('let start = "00:10"\nplay "video.mp4";\n')
    assert vid.main([str(script)]) == 1
    captured = capsys.readouterr()
    assert "Error at line 2, col 1: UnexpectedToken - Expected ';', got play" in captured.err
    assert captured.out.strip() == "vlc video.mp4"


def test_missing_script(tmp_path, capsys):
    assert vid.main([str(tmp_path / "nope.vid")]) == 1
    assert "FileNotFoundError" in capsys.readouterr().err


def test_debug_dump(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("VIDDEBUG", "1")
    script = tmp_path / "edit.vid"
    script.write_text('play "video.mp4";\n')
    assert vid.main([str(script)]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out


def test_undecodable_script(tmp_path, capsys):
    script = tmp_path / "binary.vid"
    script.write_bytes(b'\xff\xfe play "video.mp4";')
    assert vid.main([str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("UnicodeDecodeError: ")
    assert captured.out == ""
