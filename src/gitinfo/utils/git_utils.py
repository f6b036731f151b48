"""Git utilities for gitinfo."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

GIT_METADATA_DIR = ".git"


class GitError(Exception):
	"""Custom exception for Git-related errors."""

	def __init__(self, message: str, command: list[str] | None = None, returncode: int | None = None) -> None:
		super().__init__(message)
		self.command = command or []
		self.returncode = returncode


@runtime_checkable
class GitCommandRunner(Protocol):
	"""Anything able to run a git subcommand in a working directory."""

	def run(self, args: list[str], cwd: Path | str) -> str:
		"""
		Run ``git <args>`` inside ``cwd`` and return captured stdout.

		Raises:
			GitError: If the command could not be run or exited non-zero

		"""
		...


def is_git_working_copy(path: Path | str) -> bool:
	"""
	Check whether a directory is a git working copy.

	Only looks for the metadata entry directly under ``path``; no process is
	spawned. A ``.git`` file (worktrees, submodules) counts as well.

	Args:
		path: Directory to probe

	Returns:
		True if ``<path>/.git`` exists, False otherwise

	"""
	try:
		return (Path(path) / GIT_METADATA_DIR).exists()
	except (OSError, ValueError):
		logger.debug("Could not probe %s for git metadata", path)
		return False


def _clean_output(stdout: str) -> str:
	# Output is consumed as a value, not as a stream of lines
	return stdout.rstrip("\n")


def run_git_command(command: list[str], cwd: Path | str | None = None) -> str:
	"""Run a Git command and return its output.

	Args:
		command: Full command to run, starting with the git executable
		cwd: Working directory (optional)

	Returns:
		Command output as string, without the trailing newline. Bytes that
		are not valid UTF-8 are replaced with U+FFFD.

	Raises:
		GitError: If the command fails or cannot be started
	"""
	try:
		# Arguments are passed as a list and never through a shell
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			# File names and log text are not guaranteed to be UTF-8
			encoding="utf-8",
			errors="replace",
			check=True,
		)
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {(e.stderr or '').strip()}"
		logger.debug(error_msg)
		raise GitError(error_msg, command=command, returncode=e.returncode) from e
	except FileNotFoundError as e:
		error_msg = f"Git executable not found: {command[0]}"
		logger.debug(error_msg)
		raise GitError(error_msg, command=command) from e
	except OSError as e:
		error_msg = f"Failed to start git command: {' '.join(command)}\nError: {e}"
		logger.debug(error_msg)
		raise GitError(error_msg, command=command) from e
	else:
		return _clean_output(result.stdout)


class SubprocessGitRunner:
	"""Runs git as a child process, one process per call."""

	def __init__(self, executable: str = "git") -> None:
		self.executable = executable

	def run(self, args: list[str], cwd: Path | str) -> str:
		"""Run ``git <args>`` in ``cwd``. See :func:`run_git_command`."""
		return run_git_command([self.executable, *args], cwd=cwd)

	def __repr__(self) -> str:
		return f"{type(self).__name__}(executable={self.executable!r})"
