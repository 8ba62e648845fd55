"""Shared pytest fixtures for untd tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pyperclip
import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no UNTD_* or forced-color env."""
    for name in (
        "UNTD_CONFIG",
        "UNTD_TIMEZONE",
        "UNTD_CLIPBOARD",
        "UNTD_FORMAT",
        "FORCE_COLOR",
        "TTY_COMPATIBLE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    untd = logging.getLogger("untd")
    untd_level = untd.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    untd.setLevel(untd_level)


@pytest.fixture(autouse=True)
def clipboard(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace the system clipboard with an in-memory list of copied texts."""
    copied: list[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    return copied


@pytest.fixture
def broken_clipboard(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every clipboard write fail like a headless machine would."""

    def _fail(text: str) -> None:
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", _fail)
