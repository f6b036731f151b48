"""
Outcomes of a single git invocation.

Each call site decides up front how a failed invocation is treated: either
the failure is fatal for the value being computed, or a sentinel value is
substituted and the pipeline keeps going. The three outcome classes make that
policy explicit instead of hiding it behind ad-hoc defaults.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from gitinfo.utils.git_utils import GitError

if TYPE_CHECKING:
	from pathlib import Path

	from gitinfo.utils.git_utils import GitCommandRunner

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success(Generic[T]):
	"""The command ran and produced ``value``."""

	value: T


@dataclass(frozen=True)
class RecoveredFailure(Generic[T]):
	"""The command failed; ``value`` is the sentinel used in its place."""

	value: T
	error: GitError


@dataclass(frozen=True)
class FatalFailure:
	"""The command failed and no value is available."""

	error: GitError


Outcome = Success[T] | RecoveredFailure[T] | FatalFailure

_NO_FALLBACK = object()


def attempt(
	runner: GitCommandRunner,
	args: list[str],
	cwd: Path | str,
	fallback: object = _NO_FALLBACK,
) -> Outcome[str]:
	"""
	Run one git command and wrap the result in an outcome.

	Args:
		runner: Command runner to use
		args: Arguments passed after the git executable
		cwd: Working directory of the command
		fallback: Sentinel output to substitute on failure. When omitted, a
			failure is reported as :class:`FatalFailure`.

	Returns:
		Success, RecoveredFailure or FatalFailure

	"""
	try:
		return Success(runner.run(args, cwd))
	except GitError as e:
		if fallback is _NO_FALLBACK:
			logger.warning("git %s failed in %s: %s", " ".join(args), cwd, e)
			return FatalFailure(e)
		logger.debug("git %s failed in %s, substituting %r", " ".join(args), cwd, fallback)
		return RecoveredFailure(fallback, e)
