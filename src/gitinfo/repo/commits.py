"""Recent commit history of a repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitinfo.repo.models import Commit
from gitinfo.repo.outcome import RecoveredFailure, attempt
from gitinfo.repo.records import CommitRecordDecoder, JsonLineDecoder, RecordDecodeError

if TYPE_CHECKING:
	from pathlib import Path

	from gitinfo.utils.git_utils import GitCommandRunner

logger = logging.getLogger(__name__)

MAX_COMMITS = 5
REMOTE_BRANCH_ARGS = ["branch", "-r"]
SYMBOLIC_REF_TOKEN = "HEAD"


def resolve_remote_branch(runner: GitCommandRunner, directory: Path | str) -> str:
	"""
	Pick the remote branch to read history from.

	Takes the first entry of ``git branch -r`` that is not a symbolic ``HEAD``
	pointer. Returns an empty string if there is none or git fails, which
	makes ``git log`` fall back to the current ``HEAD``.

	"""
	listing = attempt(runner, REMOTE_BRANCH_ARGS, directory, fallback="")
	for line in listing.value.splitlines():
		if SYMBOLIC_REF_TOKEN not in line:
			return line.strip()
	return ""


def build_log_args(decoder: CommitRecordDecoder, branch: str) -> list[str]:
	"""Arguments for ``git log`` on ``branch`` using the decoder's format."""
	args = ["log", f"--format={decoder.format}"]
	if branch:
		args.append(branch)
	return args


def parse_commits(text: str, decoder: CommitRecordDecoder, limit: int = MAX_COMMITS) -> list[Commit] | None:
	"""
	Turn raw ``git log`` output into commits.

	Only the first ``limit`` records are considered. Records that fail to
	decode become empty commits, and commits without a date are dropped, so
	the result can hold fewer than ``limit`` entries even if the log has more.

	Returns:
		The commits, or None if none survived

	"""
	commits: list[Commit] = []
	for record in decoder.split(text)[:limit]:
		try:
			commit = decoder.decode(record)
		except RecordDecodeError as e:
			logger.debug("Skipping commit record: %s", e)
			commit = Commit()
		if commit.commit_date is not None:
			commits.append(commit)
	return commits or None


def get_commits(
	runner: GitCommandRunner,
	directory: Path | str,
	is_git: bool,
	decoder: CommitRecordDecoder | None = None,
	limit: int = MAX_COMMITS,
) -> tuple[str | None, list[Commit] | None]:
	"""
	Read the most recent commits of a working copy.

	Args:
		runner: Git command runner
		directory: Working copy to inspect
		is_git: Result of the working copy probe
		decoder: Log record format, JSON lines by default
		limit: Maximum number of log records to look at

	Returns:
		The resolved branch and the commits, both None when ``is_git`` is False

	"""
	if not is_git:
		return None, None

	decoder = decoder or JsonLineDecoder()
	branch = resolve_remote_branch(runner, directory)

	log = attempt(runner, build_log_args(decoder, branch), directory, fallback=decoder.encode(Commit()))
	if isinstance(log, RecoveredFailure):
		logger.info("No commit history available for %s", directory)

	return branch, parse_commits(log.value, decoder, limit)
