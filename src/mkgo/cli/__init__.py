"""Command-line interface for mkgo."""

from mkgo.cli.app import app

__all__ = ["app"]
