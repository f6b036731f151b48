"""
Repository inspection entry point.

Example:
	>>> info = RepositoryQuery.open("/path/to/repo").status_info().commit_info()
	>>> info.status.git_dirty
	False

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr

from gitinfo.repo.commits import MAX_COMMITS, get_commits
from gitinfo.repo.models import Commit, Status
from gitinfo.repo.records import CommitRecordDecoder, JsonLineDecoder
from gitinfo.repo.status import get_status
from gitinfo.utils.git_utils import GitCommandRunner, SubprocessGitRunner, is_git_working_copy

logger = logging.getLogger(__name__)


class RepositoryQuery(BaseModel):
	"""
	Snapshot of what is known about a working copy.

	Instances are immutable. :meth:`status_info` and :meth:`commit_info`
	return new snapshots with their part filled in and can be chained in any
	order.

	"""

	model_config = ConfigDict(frozen=True)

	dir: str
	"""Directory being inspected."""

	is_git: bool = False
	"""Whether ``dir`` is a git working copy."""

	branch: str | None = None
	"""Remote branch the commit history was read from, empty for ``HEAD``."""

	status: Status | None = None
	commits: list[Commit] | None = None
	"""Up to five most recent commits, newest first."""

	_runner: GitCommandRunner = PrivateAttr(default_factory=SubprocessGitRunner)
	_decoder: CommitRecordDecoder = PrivateAttr(default_factory=JsonLineDecoder)
	_max_commits: int = PrivateAttr(default=MAX_COMMITS)

	@classmethod
	def open(
		cls,
		directory: Path | str,
		runner: GitCommandRunner | None = None,
		decoder: CommitRecordDecoder | None = None,
		max_commits: int = MAX_COMMITS,
	) -> RepositoryQuery:
		"""
		Start inspecting a directory.

		Probes for git metadata once; no git process is started here.

		Args:
			directory: Directory to inspect
			runner: Git command runner, a subprocess runner by default
			decoder: Commit record format, JSON lines by default
			max_commits: How many log records to look at

		Returns:
			A snapshot with only ``dir`` and ``is_git`` set

		"""
		query = cls(dir=str(directory), is_git=is_git_working_copy(directory))
		if runner is not None:
			query._runner = runner
		if decoder is not None:
			query._decoder = decoder
		query._max_commits = max_commits
		logger.debug("Opened %s (is_git=%s)", query.dir, query.is_git)
		return query

	def status_info(self) -> RepositoryQuery:
		"""Return a snapshot with ``status`` filled in."""
		status = get_status(self._runner, self.dir, self.is_git)
		return self.model_copy(update={"status": status})

	def commit_info(self) -> RepositoryQuery:
		"""Return a snapshot with ``branch`` and ``commits`` filled in."""
		branch, commits = get_commits(self._runner, self.dir, self.is_git, self._decoder, self._max_commits)
		return self.model_copy(update={"branch": branch, "commits": commits})

	def to_dict(self) -> dict[str, Any]:
		"""Plain JSON-compatible representation."""
		return self.model_dump(mode="json")

	def to_json(self, indent: int | None = None) -> str:
		"""JSON representation. See :meth:`to_dict`."""
		return self.model_dump_json(indent=indent)
