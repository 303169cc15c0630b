"""Tests for settings and the command-line entry point."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

import file_console.config as config_module
from file_console.config import Settings, ensure_working_path, get_working_path
from file_console.main import main

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

ENV_VARS = ("FILES_DIR", "END_SENTINEL", "FILE_ENCODING", "LOG_LEVEL", "LOG_FILE")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Isolate from the caller's environment, .env and cached settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    config_module._settings = None
    yield
    config_module._settings = None


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.files_dir == "files"
        assert settings.end_sentinel == "END"
        assert settings.encoding == "utf-8"
        assert settings.log_level == ""

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FILES_DIR", "notes")
        monkeypatch.setenv("END_SENTINEL", "EOF")

        settings = Settings()

        assert settings.files_dir == "notes"
        assert settings.end_sentinel == "EOF"

    def test_get_settings_is_cached(self):
        assert config_module.get_settings() is config_module.get_settings()

    def test_working_path_is_not_created(self, tmp_path: Path):
        path = get_working_path(Settings(files_dir="docs"))

        assert str(path) == "docs"
        assert not (tmp_path / "docs").exists()

    def test_ensure_working_path(self, tmp_path: Path):
        target = tmp_path / "a" / "b"

        assert ensure_working_path(target) is True
        assert target.is_dir()
        assert ensure_working_path(target) is False


@pytest.mark.unit
class TestMain:
    def test_version(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert "File Console 1.0.0" in capsys.readouterr().out

    def test_creates_directory_and_exits(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ):
        monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))

        with pytest.raises(SystemExit) as exc:
            main([])

        out = capsys.readouterr().out
        assert exc.value.code == 0
        assert (tmp_path / "files").is_dir()
        assert "=== FILE HANDLING UTILITY ===" in out
        assert "Created directory: files" in out
        assert "Goodbye!" in out

    def test_dir_option(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ):
        (tmp_path / "mine").mkdir()
        (tmp_path / "mine" / "kept.txt").write_text("x\n")
        monkeypatch.setattr("sys.stdin", io.StringIO("5\n\n7\n"))

        with pytest.raises(SystemExit):
            main(["--dir", "mine"])

        out = capsys.readouterr().out
        assert "Created directory" not in out
        assert "kept.txt" in out
        assert not (tmp_path / "files").exists()
