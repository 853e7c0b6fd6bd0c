"""Boilerplate header shared by scaffolded files and the license command."""

from __future__ import annotations

from pathlib import Path

DEFAULT_BOILERPLATE_PATH = Path("hack") / "boilerplate.go.txt"


def load_boilerplate(path: Path | None = None) -> str:
    """Read the boilerplate header, defaulting to hack/boilerplate.go.txt."""
    boilerplate_path = Path(path) if path is not None else DEFAULT_BOILERPLATE_PATH
    return boilerplate_path.read_text(encoding="utf-8")


__all__ = ["DEFAULT_BOILERPLATE_PATH", "load_boilerplate"]
