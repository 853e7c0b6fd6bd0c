"""
operator-builder CLI - project tooling for generated Kubernetes operators.

Usage:
    operator-builder license --project-license LICENSE.txt
    operator-builder license --source-code-license hack/boilerplate.go.txt
"""

from __future__ import annotations

import typer

from operator_builder.cli.commands import register_commands
from operator_builder.cli.helpers import configure_logging

__version__ = "0.1.0"


def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Project tooling for generated Kubernetes operators."""
    configure_logging(verbose)


def create_app() -> typer.Typer:
    """Build the CLI application with every command bound."""
    app = typer.Typer(
        name="operator-builder",
        help="Project tooling for generated Kubernetes operators",
        add_completion=False,
        no_args_is_help=True,
    )
    app.callback()(_callback)
    register_commands(app)
    return app


def main() -> None:
    create_app()()


if __name__ == "__main__":
    main()
