"""Shared path constants for operator-builder project layout."""

from __future__ import annotations

CONFIG_DIR = ".operator-builder"
CONFIG_FILENAME = "config.yaml"
PROJECT_LICENSE_FILENAME = "LICENSE"

__all__ = ["CONFIG_DIR", "CONFIG_FILENAME", "PROJECT_LICENSE_FILENAME"]
