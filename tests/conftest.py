from __future__ import annotations

from pathlib import Path

import pytest

GO_HEADER = "/*\nCopyright 2024 Acme Corp.\n\nSPDX-License-Identifier: MIT\n*/\n"


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture()
def license_inputs(tmp_path: Path) -> dict[str, Path]:
    """Write a project license and a source header outside the project tree."""
    inputs = tmp_path / "inputs"
    inputs.mkdir()
    project_license = inputs / "LICENSE.txt"
    project_license.write_bytes(b"MIT License\n\nCopyright (c) 2024 Acme Corp.\n")
    source_license = inputs / "boilerplate.go.txt"
    source_license.write_text(GO_HEADER, encoding="utf-8")
    return {"project": project_license, "source": source_license}


@pytest.fixture()
def go_header() -> str:
    return GO_HEADER
