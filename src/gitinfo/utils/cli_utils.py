"""Utility functions for CLI operations in gitinfo."""

from __future__ import annotations

import logging

import typer

from gitinfo.utils.log_setup import display_error_summary

logger = logging.getLogger(__name__)


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary, logging the exception when there is one.

	Args:
	        message: Error message to display
	        exception: Optional exception that caused the error

	"""
	if exception is not None:
		logger.debug("Error details", exc_info=exception)
	display_error_summary(message)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> None:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> None:
	"""Handles KeyboardInterrupt by printing a message and exiting cleanly."""
	typer.echo("\nOperation cancelled by user.", err=True)
	raise typer.Exit(130)
