"""CLI utility modules."""

from wordlook.cli.utils.console import console, error_console

__all__ = ["console", "error_console"]
