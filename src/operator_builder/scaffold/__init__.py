"""Scaffold templates for generated operator projects."""

from .boilerplate import DEFAULT_BOILERPLATE_PATH, load_boilerplate
from .controller_suite_test import SuiteTest
from .machinery import IfExistsAction, Marker, marker_for
from .resource import Resource

__all__ = [
    "DEFAULT_BOILERPLATE_PATH",
    "IfExistsAction",
    "Marker",
    "Resource",
    "SuiteTest",
    "load_boilerplate",
    "marker_for",
]
