"""Entry point for ``python -m gitinfo``."""

from gitinfo.cli import app

if __name__ == "__main__":
	app()
