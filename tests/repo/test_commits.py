"""Tests for reading commit history."""

from __future__ import annotations

import pytest

from gitinfo.repo.commits import build_log_args, get_commits, parse_commits, resolve_remote_branch
from gitinfo.repo.records import DelimitedRecordDecoder, JsonLineDecoder
from gitinfo.utils.git_utils import GitError
from tests.base import FakeGitRunner


def log_line(day: int, message: str = "Change") -> str:
	"""A git log line in the JSON record format."""
	return (
		f'{{"commit_date":"2022-03-{day:02d} 10:00:00 +0000", "commit_message":"{message} {day}", '
		f'"author_name":"Ada", "author_email":"ada@example.com", "committer_name":"Carl", '
		f'"committer_email":"carl@example.com", "tree_hash":"abc{day:04d}"}}'
	)


@pytest.mark.unit
@pytest.mark.git
class TestResolveRemoteBranch:
	"""Test cases for picking the remote branch."""

	def test_skips_head_pointer(self) -> None:
		"""The symbolic HEAD entry is ignored and the next one is trimmed."""
		runner = FakeGitRunner({"branch": "  origin/HEAD -> origin/main\n  origin/main\n  origin/dev"})
		assert resolve_remote_branch(runner, "/repo") == "origin/main"
		assert runner.calls == [["branch", "-r"]]

	def test_first_entry_wins(self) -> None:
		"""Without a HEAD pointer, the first entry is used."""
		runner = FakeGitRunner({"branch": "  upstream/release\n  origin/main"})
		assert resolve_remote_branch(runner, "/repo") == "upstream/release"

	def test_no_remotes(self) -> None:
		"""An empty listing resolves to the empty branch."""
		assert resolve_remote_branch(FakeGitRunner({"branch": ""}), "/repo") == ""

	def test_only_head(self) -> None:
		"""A listing with only HEAD entries resolves to the empty branch."""
		runner = FakeGitRunner({"branch": "  origin/HEAD -> origin/main"})
		assert resolve_remote_branch(runner, "/repo") == ""

	def test_failure(self) -> None:
		"""A failing lookup resolves to the empty branch."""
		runner = FakeGitRunner({"branch": GitError("not a git repository")})
		assert resolve_remote_branch(runner, "/repo") == ""


@pytest.mark.unit
def test_build_log_args() -> None:
	"""The branch is only passed when there is one."""
	decoder = JsonLineDecoder()
	assert build_log_args(decoder, "") == ["log", f"--format={decoder.format}"]
	assert build_log_args(decoder, "origin/main") == ["log", f"--format={decoder.format}", "origin/main"]


@pytest.mark.unit
class TestParseCommits:
	"""Test cases for parse_commits."""

	decoder = JsonLineDecoder()

	def test_newest_first(self) -> None:
		"""Order of the log is kept."""
		commits = parse_commits("\n".join([log_line(3), log_line(2), log_line(1)]), self.decoder)
		assert commits is not None
		assert [c.commit_message for c in commits] == ["Change 3", "Change 2", "Change 1"]

	def test_capped_at_five(self) -> None:
		"""Only the first five records are used."""
		text = "\n".join(log_line(day) for day in range(20, 8, -1))
		commits = parse_commits(text, self.decoder)
		assert commits is not None
		assert len(commits) == 5
		assert commits[0].tree_hash == "abc0020"
		assert commits[-1].tree_hash == "abc0016"

	def test_custom_limit(self) -> None:
		"""The cap can be changed."""
		text = "\n".join(log_line(day) for day in range(1, 10))
		commits = parse_commits(text, self.decoder, limit=2)
		assert commits is not None
		assert len(commits) == 2

	def test_malformed_line_dropped(self) -> None:
		"""A truncated line is skipped without affecting the others."""
		text = "\n".join([log_line(4), log_line(3)[:35], log_line(2)])
		commits = parse_commits(text, self.decoder)
		assert commits is not None
		assert [c.tree_hash for c in commits] == ["abc0004", "abc0002"]

	def test_quote_in_subject_dropped(self) -> None:
		"""Lines broken by an unescaped quote are skipped."""
		text = "\n".join([log_line(2, 'Fix "bug"'), log_line(1)])
		commits = parse_commits(text, self.decoder)
		assert commits is not None
		assert [c.tree_hash for c in commits] == ["abc0001"]

	def test_cap_applies_before_filtering(self) -> None:
		"""Bad records still use up slots of the window."""
		text = "\n".join(["garbage"] * 5 + [log_line(1)])
		assert parse_commits(text, self.decoder) is None

	def test_dateless_record_dropped(self) -> None:
		"""Records without a date never make it into the result."""
		assert parse_commits('{"commit_date":"null", "commit_message":"orphan"}', self.decoder) is None

	def test_empty_output(self) -> None:
		"""No output means no commits, not an empty list."""
		assert parse_commits("", self.decoder) is None

	def test_every_commit_has_a_date(self) -> None:
		"""Surviving commits always carry a date."""
		text = "\n".join([log_line(5), "{}", log_line(4), '{"commit_message":"x"}', log_line(3)])
		commits = parse_commits(text, self.decoder)
		assert commits is not None
		assert 1 <= len(commits) <= 5
		assert all(c.commit_date is not None for c in commits)


@pytest.mark.unit
@pytest.mark.git
class TestGetCommits:
	"""Test cases for get_commits."""

	def test_not_a_working_copy(self) -> None:
		"""Nothing is run and nothing is returned."""
		runner = FakeGitRunner()
		assert get_commits(runner, "/plain", is_git=False) == (None, None)
		assert runner.calls == []

	def test_reads_log_of_remote_branch(self) -> None:
		"""The resolved branch is passed to git log and returned."""
		runner = FakeGitRunner(
			{"branch": "  origin/HEAD -> origin/main\n  origin/main", "log": "\n".join([log_line(2), log_line(1)])}
		)
		branch, commits = get_commits(runner, "/repo", is_git=True)

		assert branch == "origin/main"
		assert commits is not None
		assert len(commits) == 2
		assert runner.calls[1] == ["log", f"--format={JsonLineDecoder().format}", "origin/main"]

	def test_log_failure(self) -> None:
		"""A failing git log, as in a repository without commits, yields None."""
		runner = FakeGitRunner({"log": GitError("fatal: your current branch does not have any commits yet")})
		branch, commits = get_commits(runner, "/repo", is_git=True)

		assert branch == ""
		assert commits is None
		assert runner.calls[1] == ["log", f"--format={JsonLineDecoder().format}"]

	def test_delimited_format(self) -> None:
		"""Another decoder changes the format handed to git and the parsing."""
		decoder = DelimitedRecordDecoder()
		record = "\x1f".join(
			["2022-03-01 10:00:00 +0000", 'Quote "this"', "Ada", "ada@example.com", "Carl", "carl@example.com", "abc"]
		)
		runner = FakeGitRunner({"log": f"{record}\x1e"})
		_, commits = get_commits(runner, "/repo", is_git=True, decoder=decoder)

		assert commits is not None
		assert commits[0].commit_message == 'Quote "this"'
		assert runner.calls[1] == ["log", f"--format={decoder.format}"]
