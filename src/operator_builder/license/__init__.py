"""License header management for generated operator projects."""

from .header import (
    DEFAULT_SOURCE_EXTENSION,
    EXISTING_LICENSE_PREFIX,
    LICENSE_END_MARKER,
    has_license_header,
    is_source_file,
    rewrite_content,
    strip_license,
)
from .updater import LicenseError, LicenseUpdater, NoLicenseProvidedError, find_source_files

__all__ = [
    "DEFAULT_SOURCE_EXTENSION",
    "EXISTING_LICENSE_PREFIX",
    "LICENSE_END_MARKER",
    "LicenseError",
    "LicenseUpdater",
    "NoLicenseProvidedError",
    "find_source_files",
    "has_license_header",
    "is_source_file",
    "rewrite_content",
    "strip_license",
]
