"""gitinfo - read-only status and commit history of git working copies."""

from gitinfo.repo import Commit, RepositoryQuery, Status

__version__ = "0.1.0"

__all__ = ["Commit", "RepositoryQuery", "Status", "__version__"]
