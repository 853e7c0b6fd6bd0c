"""API resource description consumed by scaffold templates."""

from __future__ import annotations

from dataclasses import dataclass


def _safe_import(value: str) -> str:
    return value.replace(".", "").replace("-", "")


@dataclass(frozen=True)
class Resource:
    """A group/version/kind served by the generated operator.

    Attributes:
        group: API group, may be empty for the core group.
        version: API version such as ``v1alpha1``.
        kind: Kind name such as ``WebStore``.
        domain: Project domain, used when the group is empty.
        path: Go import path of the API package; empty when no API exists.
        has_api: Whether the API types were scaffolded.
    """

    group: str = ""
    version: str = ""
    kind: str = ""
    domain: str = ""
    path: str = ""
    has_api: bool = False

    @property
    def package_name(self) -> str:
        if not self.group:
            return _safe_import(self.domain).lower()
        return _safe_import(self.group).lower()

    def import_alias(self) -> str:
        if not self.group:
            return _safe_import(self.domain + self.version).lower()
        return (self.package_name + self.version).lower()

    def replace(self, template_path: str) -> str:
        """Substitute ``%[group]``, ``%[version]`` and ``%[kind]`` in *template_path*."""
        replacements = {
            "%[group]": self.group,
            "%[version]": self.version,
            "%[kind]": self.kind.lower(),
        }
        for placeholder, value in replacements.items():
            template_path = template_path.replace(placeholder, value)
        return template_path


__all__ = ["Resource"]
