"""Shared fixtures: isolated home/cwd and scripted prompt answers."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from opencode_context import config_merge, prompts


@pytest.fixture(autouse=True)
def home_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at a scratch directory so --global never touches the real one."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.delenv("OPENCODE_CONFIG_DIR", raising=False)
    monkeypatch.delenv("OPENCODE_CONTEXT_LOG_DIR", raising=False)
    return home


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture
def answer(monkeypatch):
    """Feed lines to the interactive prompt via stdin."""

    def _answer(*lines: str) -> None:
        text = "".join(f"{line}\n" for line in lines)
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _answer


@pytest.fixture
def no_prompt(monkeypatch):
    """Fail the test if anything asks the user a question."""

    def _fail(question: str) -> bool:
        raise AssertionError(f"unexpected prompt: {question}")

    monkeypatch.setattr(prompts, "ask_yes_no", _fail)
    monkeypatch.setattr(config_merge, "ask_yes_no", _fail)
