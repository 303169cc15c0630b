"""Shared fixtures for File Console tests.

Every test works in its own temporary working directory and drives the
console through scripted input, recording output in memory.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from file_console.core.console import FileConsole
from file_console.core.prompts import LineReader
from file_console.utils.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

# Keep loguru quiet during tests
setup_logging()


def make_recording_console() -> Console:
    return Console(
        file=io.StringIO(),
        width=200,
        force_terminal=False,
        color_system=None,
    )


class ConsoleRun:
    """Result of driving a FileConsole with scripted input."""

    def __init__(self, file_console: FileConsole, exit_code: int | None):
        self.file_console = file_console
        self.exit_code = exit_code

    @property
    def out(self) -> str:
        return self.file_console.console.file.getvalue()

    @property
    def err(self) -> str:
        return self.file_console.err_console.file.getvalue()


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    """Empty working directory."""
    path = tmp_path / "files"
    path.mkdir()
    return path


@pytest.fixture
def make_console(working_dir: Path) -> Callable[..., FileConsole]:
    """Build a FileConsole reading from the given input lines."""

    def _make(*lines: str) -> FileConsole:
        console = make_recording_console()
        stream = io.StringIO("".join(line + "\n" for line in lines))
        return FileConsole(
            working_dir,
            LineReader(console, stream),
            console=console,
            err_console=make_recording_console(),
        )

    return _make


@pytest.fixture
def run_console(make_console: Callable[..., FileConsole]) -> Callable[..., ConsoleRun]:
    """Run the full menu loop over scripted input."""

    def _run(*lines: str) -> ConsoleRun:
        file_console = make_console(*lines)
        exit_code = file_console.run()
        return ConsoleRun(file_console, exit_code)

    return _run


@pytest.fixture
def notes_file(working_dir: Path) -> Path:
    """A three-line text file."""
    f = working_dir / "notes.txt"
    f.write_text("alpha\nbeta\ngamma\n")
    return f
