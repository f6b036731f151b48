"""
Commit record formats for ``git log``.

A decoder owns both sides of a format: the ``--format`` string handed to git
and the parsing of what git prints back. Swapping the decoder changes the
wire format without touching the commit model or the log pipeline.

"""

from __future__ import annotations

import logging
from typing import ClassVar, Protocol

from pydantic import ValidationError

from gitinfo.repo.models import Commit

logger = logging.getLogger(__name__)

COMMIT_FIELDS: tuple[str, ...] = (
	"commit_date",
	"commit_message",
	"author_name",
	"author_email",
	"committer_name",
	"committer_email",
	"tree_hash",
)

PLACEHOLDERS: dict[str, str] = {
	"commit_date": "%ci",
	"commit_message": "%s",
	"author_name": "%an",
	"author_email": "%ae",
	"committer_name": "%cn",
	"committer_email": "%ce",
	"tree_hash": "%t",
}


class RecordDecodeError(ValueError):
	"""Raised when a single log record cannot be turned into a Commit."""


class CommitRecordDecoder(Protocol):
	"""Format string plus parser for one style of ``git log`` output."""

	name: ClassVar[str]

	@property
	def format(self) -> str:
		"""Value for ``git log --format=``."""
		...

	def split(self, text: str) -> list[str]:
		"""Split raw log output into candidate records."""
		...

	def decode(self, record: str) -> Commit:
		"""Parse one record. Raises RecordDecodeError."""
		...

	def encode(self, commit: Commit) -> str:
		"""Serialise a commit the way git would have printed it."""
		...


class JsonLineDecoder:
	"""
	One JSON object per line, filled in by git's placeholder substitution.

	Git does not escape substituted values, so a subject containing a double
	quote or a backslash produces an invalid line. Such lines are rejected
	and the commit is skipped.

	"""

	name: ClassVar[str] = "json"

	@property
	def format(self) -> str:
		fields = ", ".join(f'"{field}":"{PLACEHOLDERS[field]}"' for field in COMMIT_FIELDS)
		return "{" + fields + "}"

	def split(self, text: str) -> list[str]:
		return text.split("\n")

	def decode(self, record: str) -> Commit:
		try:
			return Commit.model_validate_json(record)
		except ValidationError as e:
			msg = f"Malformed commit record: {record[:80]!r}"
			raise RecordDecodeError(msg) from e

	def encode(self, commit: Commit) -> str:
		return commit.model_dump_json()


class DelimitedRecordDecoder:
	"""Fields separated by ASCII unit separators, records by record separators."""

	name: ClassVar[str] = "delimited"

	FIELD_SEPARATOR = "\x1f"
	RECORD_SEPARATOR = "\x1e"

	@property
	def format(self) -> str:
		return "%x1f".join(PLACEHOLDERS[field] for field in COMMIT_FIELDS) + "%x1e"

	def split(self, text: str) -> list[str]:
		records = [record.lstrip("\n") for record in text.split(self.RECORD_SEPARATOR)]
		if records and not records[-1]:
			records.pop()
		return records

	def decode(self, record: str) -> Commit:
		values = record.split(self.FIELD_SEPARATOR)
		if len(values) != len(COMMIT_FIELDS):
			msg = f"Expected {len(COMMIT_FIELDS)} fields, got {len(values)}"
			raise RecordDecodeError(msg)
		try:
			return Commit(**dict(zip(COMMIT_FIELDS, values, strict=True)))
		except ValidationError as e:
			msg = f"Malformed commit record: {record[:80]!r}"
			raise RecordDecodeError(msg) from e

	def encode(self, commit: Commit) -> str:
		data = commit.model_dump()
		return self.FIELD_SEPARATOR.join(data[field] or "" for field in COMMIT_FIELDS) + self.RECORD_SEPARATOR


DECODERS: dict[str, type[JsonLineDecoder | DelimitedRecordDecoder]] = {
	JsonLineDecoder.name: JsonLineDecoder,
	DelimitedRecordDecoder.name: DelimitedRecordDecoder,
}


def get_decoder(name: str = JsonLineDecoder.name) -> CommitRecordDecoder:
	"""
	Look up a record decoder by name.

	Raises:
		ValueError: If no decoder has that name

	"""
	try:
		return DECODERS[name]()
	except KeyError:
		msg = f"Unknown commit record format: {name!r}. Choose from: {', '.join(DECODERS)}"
		raise ValueError(msg) from None
