"""
Configuration loader for gitinfo.

This module provides functionality for loading and managing
configuration settings.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from gitinfo.config.config_schema import AppConfigSchema

logger = logging.getLogger(__name__)

LOCAL_CONFIG_NAME = ".gitinfo.yml"


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigFileNotFoundError(ConfigError):
	"""Exception raised when configuration file is not found."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


class ConfigLoader:
	"""
	Loads configuration for gitinfo into an AppConfigSchema.

	Values missing from the file fall back to the schema defaults.

	"""

	_instance: ConfigLoader | None = None

	@classmethod
	def get_instance(cls, config_file: Path | None = None, reload: bool = False) -> ConfigLoader:
		"""
		Get the singleton instance of ConfigLoader.

		Args:
			config_file: Path to configuration file (optional)
			reload: Whether to reload config even if already loaded

		Returns:
			ConfigLoader: Singleton instance

		"""
		if cls._instance is None:
			cls._instance = cls(config_file)
		elif reload:
			cls._instance.reload_config(config_file)
		return cls._instance

	def __init__(self, config_file: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
			config_file: Path to configuration file (optional)

		Raises:
			ConfigFileNotFoundError: If ``config_file`` is given but does not exist
			ConfigParsingError: If the file cannot be parsed

		"""
		self._config_file = config_file
		self._resolved_config_file = self._resolve_config_file(config_file)
		self._app_config = self._load_config()

	def reload_config(self, config_file: Path | None = None) -> None:
		"""Reload configuration, optionally from a different file."""
		if config_file is not None:
			self._config_file = config_file
		self._resolved_config_file = self._resolve_config_file(self._config_file)
		self._app_config = self._load_config()
		logger.debug("Configuration reloaded")

	@property
	def config_file(self) -> Path | None:
		"""The file configuration was read from, if any."""
		return self._resolved_config_file

	def _resolve_config_file(self, config_file: Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.gitinfo.yml in the current directory
		2. $XDG_CONFIG_HOME/gitinfo/config.yml

		Raises:
			ConfigFileNotFoundError: If the explicitly given file does not exist

		"""
		if config_file:
			path = config_file.expanduser().resolve()
			if not path.exists():
				msg = f"Configuration file not found: {path}"
				raise ConfigFileNotFoundError(msg)
			return path

		local_config = Path(LOCAL_CONFIG_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "gitinfo" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	@staticmethod
	def _parse_yaml_file(file_path: Path) -> dict[str, Any]:
		"""
		Parse a YAML file into a dictionary.

		Raises:
			yaml.YAMLError: If the file is not a valid YAML mapping

		"""
		with file_path.open(encoding="utf-8") as f:
			content = yaml.safe_load(f)
			if content is None:
				return {}
			if not isinstance(content, dict):
				msg = f"File {file_path} does not contain a valid YAML dictionary"
				raise yaml.YAMLError(msg)
			return content

	def _load_config(self) -> AppConfigSchema:
		"""
		Load configuration from file and parse it into AppConfigSchema.

		Raises:
			ConfigParsingError: If the file cannot be read, parsed or validated

		"""
		file_config_dict: dict[str, Any] = {}
		if self._resolved_config_file:
			try:
				file_config_dict = self._parse_yaml_file(self._resolved_config_file)
				logger.info("Loaded configuration from %s", self._resolved_config_file)
			except yaml.YAMLError as e:
				msg = f"Configuration file {self._resolved_config_file} does not contain a valid YAML dictionary."
				logger.debug(msg)
				raise ConfigParsingError(msg) from e
			except OSError as e:
				msg = f"Error accessing configuration file {self._resolved_config_file}: {e}"
				logger.debug(msg)
				raise ConfigParsingError(msg) from e
		else:
			logger.debug("No configuration file found. Using default configuration.")

		try:
			return AppConfigSchema(**file_config_dict)
		except ValidationError as e:
			msg = f"Error parsing configuration into schema: {e}"
			logger.debug(msg)
			raise ConfigParsingError(msg) from e

	@property
	def get(self) -> AppConfigSchema:
		"""The current application configuration."""
		return self._app_config
