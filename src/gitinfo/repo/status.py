"""Working tree status of a repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitinfo.repo.models import IS_DIRTY, IS_MODIFIED, Status
from gitinfo.repo.outcome import FatalFailure, attempt

if TYPE_CHECKING:
	from pathlib import Path

	from gitinfo.utils.git_utils import GitCommandRunner

logger = logging.getLogger(__name__)

STATUS_ARGS = ["status", "-s"]
DIFF_ARGS = ["diff", "--stat"]
DIFF_FAILED_SENTINEL = "ERR"
"""Stands in for ``git diff --stat`` output when it fails, which counts as dirty."""


def get_status(runner: GitCommandRunner, directory: Path | str, is_git: bool) -> Status:
	"""
	Check whether the working tree has modifications.

	A failing ``git status -s`` is recorded in ``Status.error`` and leaves
	``git_dirty`` unset. A failing ``git diff --stat`` is treated as dirty.

	Args:
		runner: Git command runner
		directory: Working copy to inspect
		is_git: Result of the working copy probe

	Returns:
		Status for the directory; an empty Status when it is not a working copy

	"""
	if not is_git:
		return Status()

	short_status = attempt(runner, STATUS_ARGS, directory)
	if isinstance(short_status, FatalFailure):
		return Status(error=str(short_status.error))
	is_modified = len(short_status.value) > 0

	diff_stat = attempt(runner, DIFF_ARGS, directory, fallback=DIFF_FAILED_SENTINEL)
	is_dirty = len(diff_stat.value) > 0

	logger.debug("Status of %s: modified=%s dirty=%s", directory, is_modified, is_dirty)
	return Status(
		git_dirty=is_modified or is_dirty,
		summary={IS_MODIFIED: is_modified, IS_DIRTY: is_dirty},
	)
