"""Conversion between git's textual commit dates and UTC datetimes."""

from __future__ import annotations

import re
from datetime import UTC, datetime

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Date and time part shared by ``%ci`` output and encoded dates."""

NULL_DATE = "null"

_DATE_PATTERN = re.compile(
	r"^(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?:(?P<offset>[+-]\d{4})|(?P<abbrev>[A-Za-z]+))$"
)


class DateParseError(ValueError):
	"""Raised when a commit date cannot be parsed."""


def encode_date(value: datetime | None) -> str:
	"""
	Format a timestamp as ``YYYY-MM-DD HH:MM:SS UTC``.

	Naive datetimes are taken to be UTC already. ``None`` becomes ``"null"``.

	"""
	if value is None:
		return NULL_DATE
	if value.tzinfo is None:
		value = value.replace(tzinfo=UTC)
	return value.astimezone(UTC).strftime(f"{DATE_FORMAT} %Z")


def decode_date(text: str) -> datetime | None:
	"""
	Parse a commit date into an aware UTC datetime.

	Accepts both the ``%ci`` form (``2022-03-01 12:00:00 +0200``) and the
	encoded form (``2022-03-01 10:00:00 UTC``). Numeric offsets are applied;
	zone abbreviations are read as UTC.

	Args:
		text: Date text

	Returns:
		The UTC datetime, or None for ``"null"``

	Raises:
		DateParseError: If the text does not match either form

	"""
	text = text.strip()
	if text == NULL_DATE:
		return None

	match = _DATE_PATTERN.match(text)
	if not match:
		msg = f"Unrecognised commit date: {text!r}"
		raise DateParseError(msg)

	try:
		if match.group("offset"):
			parsed = datetime.strptime(f"{match.group('stamp')} {match.group('offset')}", f"{DATE_FORMAT} %z")
			return parsed.astimezone(UTC)
		return datetime.strptime(match.group("stamp"), DATE_FORMAT).replace(tzinfo=UTC)
	except ValueError as e:
		msg = f"Invalid commit date: {text!r}"
		raise DateParseError(msg) from e
