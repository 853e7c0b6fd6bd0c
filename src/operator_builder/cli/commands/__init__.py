"""CLI command modules for operator-builder.

Commands are bound to an application explicitly through
:func:`register_commands`; importing this package registers nothing.
"""

from __future__ import annotations

import typer

from .license import license_command


def register_commands(app: typer.Typer) -> None:
    """Attach every top-level command to *app*."""
    app.command(
        name="license",
        help=(
            "The license command will add a LICENSE file in the root of the project\n"
            "as well as licensing text at the beginning of every source code file."
        ),
        short_help="Add license info to project",
    )(license_command)


__all__ = ["register_commands"]
