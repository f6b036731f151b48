"""Global test fixtures and configuration."""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING

import pytest

from gitinfo.config.config_loader import ConfigLoader
from tests.base import git

if TYPE_CHECKING:
	from pathlib import Path


@pytest.fixture(autouse=True)
def reset_config_singleton() -> None:
	"""Make sure no ConfigLoader instance leaks between tests."""
	ConfigLoader._instance = None  # noqa: SLF001
	yield
	ConfigLoader._instance = None  # noqa: SLF001


@pytest.fixture
def git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
	"""Isolate git from user and system configuration."""
	if shutil.which("git") is None:
		pytest.skip("git executable not available")

	monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
	monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
	monkeypatch.setenv("HOME", str(tmp_path))
	monkeypatch.setenv("GIT_AUTHOR_NAME", "Ada Author")
	monkeypatch.setenv("GIT_AUTHOR_EMAIL", "ada@example.com")
	monkeypatch.setenv("GIT_COMMITTER_NAME", "Carl Committer")
	monkeypatch.setenv("GIT_COMMITTER_EMAIL", "carl@example.com")


@pytest.fixture
def git_repo(git_env: None, tmp_path: Path) -> Path:
	"""An empty, freshly initialised repository."""
	repo = tmp_path / "repo"
	repo.mkdir()
	git(repo, "init", "-q")
	return repo
