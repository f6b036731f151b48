"""Status and commit records for a git working copy."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from gitinfo.repo.dates import DateParseError, decode_date, encode_date

IS_MODIFIED = "is_modified"
IS_DIRTY = "is_dirty"


class Status(BaseModel):
	"""Working tree state of a repository."""

	model_config = ConfigDict(frozen=True)

	error: str | None = None
	"""Error reported by ``git status -s``, if it could not run."""

	git_dirty: bool | None = None
	"""True if either ``git status -s`` or ``git diff --stat`` reported anything."""

	summary: dict[str, bool] = Field(default_factory=dict)
	"""Individual checks, keyed by ``is_modified`` and ``is_dirty``."""


class Commit(BaseModel):
	"""
	One entry of the commit log.

	Every field is optional: a record that fails to parse becomes ``Commit()``
	and is discarded later for lacking a date.

	"""

	model_config = ConfigDict(frozen=True)

	commit_date: datetime | None = None
	commit_message: str | None = None
	author_name: str | None = None
	author_email: str | None = None
	committer_name: str | None = None
	"""The committer is not always the author."""
	committer_email: str | None = None
	tree_hash: str | None = None
	"""Abbreviated hash of the commit's root tree."""

	@field_validator("commit_date", mode="before")
	@classmethod
	def _parse_commit_date(cls, value: Any) -> datetime | None:
		if value is None:
			return None
		if isinstance(value, str):
			return decode_date(value)
		if isinstance(value, datetime):
			if value.tzinfo is None:
				return value.replace(tzinfo=UTC)
			return value.astimezone(UTC)
		# Only date text is accepted, never timestamps
		msg = f"Commit date must be text, got {type(value).__name__}"
		raise DateParseError(msg)

	@field_serializer("commit_date")
	def _format_commit_date(self, value: datetime | None) -> str:
		return encode_date(value)
