"""Project-scoped settings stored in .operator-builder/config.yaml."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from operator_builder.core.constants import CONFIG_DIR, CONFIG_FILENAME, PROJECT_LICENSE_FILENAME
from operator_builder.license.header import DEFAULT_SOURCE_EXTENSION

logger = logging.getLogger(__name__)


class ProjectConfigError(RuntimeError):
    """Raised when .operator-builder/config.yaml cannot be parsed or validated."""


class LicenseSettings(BaseModel):
    """Settings for the ``license`` command."""

    source_extension: str = DEFAULT_SOURCE_EXTENSION
    project_license_filename: str = PROJECT_LICENSE_FILENAME

    @field_validator("source_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("source_extension must not be empty")
        return value

    @field_validator("project_license_filename")
    @classmethod
    def _check_filename(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project_license_filename must not be empty")
        return value


class ProjectConfig(BaseModel):
    """Top-level project configuration."""

    license: LicenseSettings = Field(default_factory=LicenseSettings)


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR / CONFIG_FILENAME


def load_project_config(project_root: Path) -> ProjectConfig:
    """Load project configuration, falling back to defaults when absent."""
    path = config_path(project_root)
    if not path.exists():
        logger.debug("No project config at %s; using defaults", path)
        return ProjectConfig()

    yaml = YAML()
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ProjectConfigError(f"Expected a mapping at the top of {path}")

    try:
        return ProjectConfig.model_validate(payload)
    except ValidationError as exc:
        raise ProjectConfigError(f"Invalid configuration in {path}: {exc}") from exc


__all__ = [
    "LicenseSettings",
    "ProjectConfig",
    "ProjectConfigError",
    "config_path",
    "load_project_config",
]
