"""Shared console and logging setup for CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route package log records through Rich when verbose output is requested."""
    package_logger = logging.getLogger("operator_builder")
    if not verbose:
        package_logger.setLevel(logging.WARNING)
        return

    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


__all__ = ["configure_logging", "console", "err_console"]
