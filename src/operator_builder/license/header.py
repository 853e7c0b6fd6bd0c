"""Pure license header transforms.

Nothing in this module touches the filesystem. The updater reads a file,
passes its content through :func:`rewrite_content` and writes the result
back, which keeps the header stripping rules testable on plain strings.

Detection is a literal prefix match: a file is considered to carry a
license header only when it starts with an opening block comment whose
next line begins with ``Copyright``. Everything up to and including the
first line that is exactly ``*/`` is discarded.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_EXTENSION = "go"
EXISTING_LICENSE_PREFIX = "/*\nCopyright"
LICENSE_END_MARKER = "*/"

# Names of this length or shorter are never treated as source files.
MIN_SOURCE_NAME_LENGTH = 4


def source_suffix(extension: str = DEFAULT_SOURCE_EXTENSION) -> str:
    """Return the filename suffix compared by :func:`is_source_file`."""
    return "." + extension.lstrip(".")


def is_source_file(name: str, extension: str = DEFAULT_SOURCE_EXTENSION) -> bool:
    """Return True when *name* should receive the source header.

    Only the last ``len(suffix)`` characters are compared (three for ``.go``)
    and names of four characters or fewer are rejected, so ``a.go`` is never
    selected while ``x.tar.go`` is.
    """
    suffix = source_suffix(extension)
    if len(name) <= MIN_SOURCE_NAME_LENGTH:
        return False
    return name[-len(suffix):] == suffix


def has_license_header(content: str) -> bool:
    return content.startswith(EXISTING_LICENSE_PREFIX)


def _scan_lines(content: str) -> list[str]:
    # Line scanning semantics: split on "\n", drop one trailing "\r" per
    # line, and do not report an empty token after a final newline.
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def strip_license(content: str) -> str:
    """Remove a recognised license header from *content*.

    Content without the ``/*\\nCopyright`` prefix is returned unchanged.
    When the prefix is present, the lines following the closing ``*/`` are
    re-joined with each line preceded by a newline. The result therefore
    begins with a blank line and no longer ends with one. If the closing
    marker is missing the whole file is treated as header and the body is
    empty.
    """
    if not has_license_header(content):
        return content

    body: list[str] = []
    end_found = False
    for line in _scan_lines(content):
        if end_found:
            body.append("\n" + line)
        elif line == LICENSE_END_MARKER:
            end_found = True

    if not end_found:
        logger.debug("License header has no closing %r; discarding all content", LICENSE_END_MARKER)
    return "".join(body)


def rewrite_content(content: str, header: str) -> str:
    """Return *content* with any existing header replaced by *header*."""
    return header + strip_license(content)


__all__ = [
    "DEFAULT_SOURCE_EXTENSION",
    "EXISTING_LICENSE_PREFIX",
    "LICENSE_END_MARKER",
    "has_license_header",
    "is_source_file",
    "rewrite_content",
    "source_suffix",
    "strip_license",
]
