"""Write the project LICENSE and rewrite source file license headers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from operator_builder.core.constants import PROJECT_LICENSE_FILENAME
from operator_builder.license.header import (
    DEFAULT_SOURCE_EXTENSION,
    has_license_header,
    is_source_file,
    rewrite_content,
)

logger = logging.getLogger(__name__)

SOURCE_FILE_MODE = 0o755
# Round-trips bytes that are not valid UTF-8.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LicenseError(RuntimeError):
    """Base error for license updates."""


class NoLicenseProvidedError(LicenseError):
    """Raised when neither a project nor a source code license was supplied."""

    def __init__(self) -> None:
        super().__init__("No project or source code license files provided - no changes made")


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def find_source_files(
    root: Path,
    predicate: Optional[Callable[[str], bool]] = None,
) -> list[Path]:
    """Return files under *root* accepted by *predicate*, sorted by path.

    Directories are never returned, even when their name matches.
    """
    if predicate is None:
        predicate = is_source_file

    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in filenames:
            if predicate(name):
                matches.append(Path(dirpath) / name)
    return sorted(matches)


def read_source(path: Path) -> str:
    with open(path, "r", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        return handle.read()


def _open_with_source_mode(path: str, flags: int) -> int:
    return os.open(path, flags, SOURCE_FILE_MODE)


def write_source(path: Path, content: str) -> None:
    """Truncate and write *path*; new files are created with mode 0755."""
    with open(
        path, "w", encoding=_ENCODING, errors=_ERRORS, newline="", opener=_open_with_source_mode
    ) as handle:
        handle.write(content)


@dataclass
class LicenseUpdater:
    """Apply license texts to a project tree.

    Attributes:
        project_license: Content for the project LICENSE file. Empty skips it.
        source_license: Header prepended to every source file. Empty skips it.
        source_extension: Extension used by the source file predicate.
        project_license_filename: Name of the file written for the project license.
    """

    project_license: bytes = b""
    source_license: bytes = b""
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    project_license_filename: str = PROJECT_LICENSE_FILENAME

    @classmethod
    def from_files(
        cls,
        project_license_path: Optional[Path] = None,
        source_license_path: Optional[Path] = None,
        **settings: str,
    ) -> "LicenseUpdater":
        """Read both license inputs up front.

        A read failure raises before anything on disk has been changed.
        """
        project_license = Path(project_license_path).read_bytes() if project_license_path else b""
        source_license = Path(source_license_path).read_bytes() if source_license_path else b""
        return cls(project_license=project_license, source_license=source_license, **settings)

    def is_source_file(self, name: str) -> bool:
        return is_source_file(name, self.source_extension)

    def update_files(self, root: Optional[Path] = None) -> None:
        """Write the project license and rewrite source headers under *root*.

        Raises:
            NoLicenseProvidedError: Neither license text is set.
            OSError: Any file could not be read or written. Files rewritten
                before the failure stay rewritten.
        """
        if not self.project_license and not self.source_license:
            raise NoLicenseProvidedError()

        root = Path.cwd() if root is None else Path(root)

        if self.project_license:
            self.write_project_license(root)

        if self.source_license:
            self.update_source_files(root)

    def write_project_license(self, root: Path) -> Path:
        license_path = root / self.project_license_filename
        license_path.write_bytes(self.project_license)
        logger.info("Wrote project license to %s", license_path)
        return license_path

    def update_source_files(self, root: Path) -> list[Path]:
        header = self.source_license.decode(_ENCODING, _ERRORS)
        updated: list[Path] = []
        for path in find_source_files(root, self.is_source_file):
            content = read_source(path)
            if has_license_header(content):
                logger.debug("Replacing existing license header in %s", path)
            write_source(path, rewrite_content(content, header))
            logger.info("Updated license header in %s", path)
            updated.append(path)
        return updated


__all__ = [
    "LicenseError",
    "LicenseUpdater",
    "NoLicenseProvidedError",
    "SOURCE_FILE_MODE",
    "find_source_files",
    "read_source",
    "write_source",
]
