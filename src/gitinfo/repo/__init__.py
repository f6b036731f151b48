"""
Repository inspection.

This package reads the working tree status and recent commit history of a
local git working copy by running git and parsing its output.

"""

from gitinfo.repo.commits import get_commits, parse_commits, resolve_remote_branch
from gitinfo.repo.dates import DateParseError, decode_date, encode_date
from gitinfo.repo.models import Commit, Status
from gitinfo.repo.query import RepositoryQuery
from gitinfo.repo.records import DelimitedRecordDecoder, JsonLineDecoder, RecordDecodeError, get_decoder
from gitinfo.repo.status import get_status

__all__ = [
	"Commit",
	"DateParseError",
	"DelimitedRecordDecoder",
	"JsonLineDecoder",
	"RecordDecodeError",
	"RepositoryQuery",
	"Status",
	"decode_date",
	"encode_date",
	"get_commits",
	"get_decoder",
	"get_status",
	"parse_commits",
	"resolve_remote_branch",
]
