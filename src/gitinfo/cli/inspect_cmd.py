"""Command for inspecting a git working copy."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitinfo.repo.dates import encode_date

if TYPE_CHECKING:
	from gitinfo.repo import RepositoryQuery

logger = logging.getLogger(__name__)
console = Console()

# --- Command Argument Annotations ---

PathArg = Annotated[
	Path,
	typer.Argument(
		help="Directory to inspect",
		exists=True,
		file_okay=False,
		dir_okay=True,
	),
]

StatusFlag = Annotated[bool, typer.Option("--status/--no-status", help="Collect working tree status")]

CommitsFlag = Annotated[bool, typer.Option("--commits/--no-commits", help="Collect recent commits")]

JsonFlag = Annotated[bool, typer.Option("--json", help="Print the result as JSON")]

ConfigOpt = Annotated[
	Path | None,
	typer.Option("--config", "-c", help="Path to a gitinfo configuration file", dir_okay=False),
]

# --- Registration Function ---


def register_command(app: typer.Typer) -> None:
	"""Register the inspect command with the CLI app."""

	@app.command(name="inspect")
	def inspect_command(
		path: PathArg = Path(),
		with_status: StatusFlag = True,
		with_commits: CommitsFlag = True,
		as_json: JsonFlag = False,
		config_file: ConfigOpt = None,
	) -> None:
		"""Show working tree status and recent commits of a directory."""
		_inspect_command_impl(
			path=path,
			with_status=with_status,
			with_commits=with_commits,
			as_json=as_json,
			config_file=config_file,
		)


# --- Implementation Function ---


def _inspect_command_impl(
	path: Path,
	with_status: bool,
	with_commits: bool,
	as_json: bool,
	config_file: Path | None = None,
) -> None:
	"""Actual implementation of the inspect command."""
	from gitinfo.config import ConfigError, ConfigLoader
	from gitinfo.repo import RepositoryQuery, get_decoder
	from gitinfo.utils.cli_utils import exit_with_error, handle_keyboard_interrupt
	from gitinfo.utils.git_utils import SubprocessGitRunner

	try:
		git_config = ConfigLoader.get_instance(config_file=config_file, reload=True).get.git
	except ConfigError as e:
		exit_with_error(str(e), exception=e)
		return

	try:
		query = RepositoryQuery.open(
			path,
			runner=SubprocessGitRunner(git_config.executable),
			decoder=get_decoder(git_config.record_format),
			max_commits=git_config.max_commits,
		)
		if with_status:
			query = query.status_info()
		if with_commits:
			query = query.commit_info()
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
		return

	if as_json:
		typer.echo(query.to_json(indent=2))
	else:
		_render(query)


def _render(query: RepositoryQuery) -> None:
	"""Print a human readable summary of a snapshot."""
	summary = Table(title=f"[bold]{escape(query.dir)}[/bold]", show_header=False)
	summary.add_column("Key", style="cyan")
	summary.add_column("Value")
	summary.add_row("git working copy", _yes_no(query.is_git))

	if query.branch is not None:
		summary.add_row("branch", query.branch or "HEAD")
	if query.status is not None:
		if query.status.error:
			summary.add_row("status error", f"[red]{escape(query.status.error)}[/red]")
		summary.add_row("dirty", _yes_no(query.status.git_dirty))
		for flag, value in query.status.summary.items():
			summary.add_row(flag.replace("_", " "), _yes_no(value))
	console.print(summary)

	if query.commits:
		table = Table(title="Recent commits")
		for column in ("Date", "Tree", "Author", "Message"):
			table.add_column(column)
		for commit in query.commits:
			table.add_row(
				encode_date(commit.commit_date),
				commit.tree_hash or "",
				escape(commit.author_name or ""),
				escape(commit.commit_message or ""),
			)
		console.print(table)
	elif query.is_git and query.branch is not None:
		console.print("[yellow]No commit history available.[/yellow]")


def _yes_no(value: bool | None) -> str:
	if value is None:
		return "[dim]unknown[/dim]"
	return "yes" if value else "no"
