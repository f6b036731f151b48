"""Command-line interface package for gitinfo."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Annotated

import typer

from gitinfo import __version__
from gitinfo.utils.log_setup import setup_logging

from .inspect_cmd import register_command as register_inspect_command

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=f"gitinfo - status and recent history of git working copies\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)

# --- Global Options Callback ---


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"gitinfo version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/gitinfo_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"gitinfo_{current_time}.log"

	setup_logging(is_verbose=is_verbose or is_output_log, log_file_path=log_file_path_to_use)


register_inspect_command(app)
