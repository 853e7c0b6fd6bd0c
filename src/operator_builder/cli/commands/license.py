"""Top-level ``operator-builder license`` command.

Adds a LICENSE file in the root of the project as well as licensing text at
the beginning of every source code file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from operator_builder.cli.helpers import console, err_console
from operator_builder.core.config import ProjectConfigError, load_project_config
from operator_builder.license import LicenseError, LicenseUpdater


def license_command(
    project_license: Optional[Path] = typer.Option(
        None,
        "--project-license",
        "-p",
        help="path to project license file",
    ),
    source_code_license: Optional[Path] = typer.Option(
        None,
        "--source-code-license",
        "-s",
        help="path to file with source code license text",
    ),
) -> None:
    """Add license info to project."""
    project_root = Path.cwd()

    try:
        settings = load_project_config(project_root).license
        updater = LicenseUpdater.from_files(
            project_license,
            source_code_license,
            source_extension=settings.source_extension,
            project_license_filename=settings.project_license_filename,
        )
        updater.update_files(project_root)
    except (LicenseError, ProjectConfigError, OSError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(1) from exc

    if updater.project_license:
        console.print(f"[green]✓[/green] Wrote {updater.project_license_filename}")
    if updater.source_license:
        console.print(f"[green]✓[/green] Updated license headers in *.{updater.source_extension} files")


__all__ = ["license_command"]
