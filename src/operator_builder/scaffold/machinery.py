"""Contract shared by scaffold templates and the code insertion engine.

Templates describe what to write; the engine decides how. A template that
also feeds code into existing files exposes its markers and the fragments to
insert at each of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Dict, List

MARKER_PREFIX = "+kubebuilder:scaffold:"

_COMMENT_BY_EXTENSION = {
    ".go": "//",
    ".yaml": "#",
    ".yml": "#",
    ".py": "#",
    ".sh": "#",
    ".mk": "#",
    "": "#",  # Makefile, Dockerfile and friends
}


class IfExistsAction(str, Enum):
    """What the engine does when a template's target file already exists."""

    SKIP = "skip"
    ERROR = "error"
    OVERWRITE = "overwrite"


@dataclass(frozen=True)
class Marker:
    """Comment line identifying an insertion point in a generated file."""

    comment: str
    value: str
    prefix: str = MARKER_PREFIX

    def __str__(self) -> str:
        return f"{self.comment} {self.prefix}{self.value}"


def marker_for(path: str, value: str) -> Marker:
    """Return the marker for *value* using the comment syntax of *path*."""
    extension = PurePosixPath(path).suffix
    try:
        comment = _COMMENT_BY_EXTENSION[extension]
    except KeyError:
        raise ValueError(f"Unknown comment syntax for {path!r}") from None
    return Marker(comment=comment, value=value)


CodeFragments = List[str]
CodeFragmentsMap = Dict[Marker, CodeFragments]


__all__ = [
    "CodeFragments",
    "CodeFragmentsMap",
    "IfExistsAction",
    "MARKER_PREFIX",
    "Marker",
    "marker_for",
]
