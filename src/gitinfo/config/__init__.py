"""Configuration for gitinfo."""

from gitinfo.config.config_loader import (
	ConfigError,
	ConfigFileNotFoundError,
	ConfigLoader,
	ConfigParsingError,
)
from gitinfo.config.config_schema import AppConfigSchema, GitConfigSchema

__all__ = [
	"AppConfigSchema",
	"ConfigError",
	"ConfigFileNotFoundError",
	"ConfigLoader",
	"ConfigParsingError",
	"GitConfigSchema",
]
