"""Utility module for gitinfo package."""

from .git_utils import (
	GitCommandRunner,
	GitError,
	SubprocessGitRunner,
	is_git_working_copy,
	run_git_command,
)

__all__ = [
	"GitCommandRunner",
	"GitError",
	"SubprocessGitRunner",
	"is_git_working_copy",
	"run_git_command",
]
