"""Core configuration helpers for operator-builder."""

from .config import LicenseSettings, ProjectConfig, ProjectConfigError, load_project_config

__all__ = ["LicenseSettings", "ProjectConfig", "ProjectConfigError", "load_project_config"]
