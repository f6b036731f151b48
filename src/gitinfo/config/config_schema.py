"""Schemas for the gitinfo configuration file."""

from typing import Literal

from pydantic import BaseModel, Field


class GitConfigSchema(BaseModel):
	"""How git is invoked and how its log is read."""

	executable: str = "git"
	max_commits: int = Field(default=5, ge=1, le=50)
	record_format: Literal["json", "delimited"] = "json"


class AppConfigSchema(BaseModel):
	"""Top level of ``.gitinfo.yml``."""

	git: GitConfigSchema = Field(default_factory=GitConfigSchema)
