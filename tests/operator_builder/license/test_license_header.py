"""Tests for the pure license header transforms."""

from __future__ import annotations

import pytest

from operator_builder.license.header import (
    EXISTING_LICENSE_PREFIX,
    has_license_header,
    is_source_file,
    rewrite_content,
    source_suffix,
    strip_license,
)

HEADER = "/*\nCopyright 2021 Acme Corp.\n*/\n"


class TestIsSourceFile:
    """Suffix matching used to select files for header rewriting."""

    @pytest.mark.parametrize("name", ["main.go", "x.tar.go", ".a.go", "suite_test.go"])
    def test_matches_go_suffix(self, name):
        """Test names that end in the .go suffix."""
        assert is_source_file(name)

    def test_four_character_name_is_never_selected(self):
        """a.go ends in .go but is rejected by the length check."""
        assert not is_source_file("a.go")
        assert not is_source_file(".go")

    def test_only_last_three_characters_are_inspected(self):
        """The dot is part of the suffix, so a dotless name ending in go is rejected."""
        assert not is_source_file("xyzgo")
        assert not is_source_file("main.golang")
        assert not is_source_file("main.Go")

    def test_custom_extension(self):
        """Test matching with a configured extension."""
        assert is_source_file("setup.py", "py")
        assert is_source_file("setup.py", ".py")
        assert not is_source_file("a.py", "py")
        assert not is_source_file("main.go", "py")

    def test_longer_extension_compares_whole_suffix(self):
        """Test that longer extensions compare their whole suffix."""
        assert source_suffix("yaml") == ".yaml"
        assert is_source_file("role.yaml", "yaml")
        assert not is_source_file("role.yml", "yaml")


class TestHasLicenseHeader:
    """Header detection is a literal prefix check."""

    def test_detects_prefix(self):
        """Test detection of the Copyright block comment prefix."""
        assert EXISTING_LICENSE_PREFIX == "/*\nCopyright"
        assert has_license_header(HEADER + "package main\n")

    def test_other_comments_are_not_headers(self):
        """Test that other comment styles are not detected."""
        assert not has_license_header("// Copyright 2021 Acme Corp.\npackage main\n")
        assert not has_license_header("/* Copyright 2021 */\npackage main\n")
        assert not has_license_header("\n/*\nCopyright 2021\n*/\n")

    def test_windows_line_endings_are_not_detected(self):
        """Test that a CRLF header does not match the prefix."""
        assert not has_license_header("/*\r\nCopyright 2021\r\n*/\r\npackage main\r\n")


class TestStripLicense:
    """Removal of an existing header block."""

    def test_content_without_header_is_unchanged(self):
        """Test that headerless content passes through."""
        content = "package main\n\nfunc main() {}\n"
        assert strip_license(content) == content

    def test_strips_through_closing_marker(self):
        """Test stripping up to the closing marker line."""
        content = HEADER + "package main\n\nfunc main() {}\n"
        assert strip_license(content) == "\npackage main\n\nfunc main() {}"

    def test_rejoin_adds_leading_blank_line_and_drops_trailing_newline(self):
        """Every kept line is prefixed with a newline; pinned until changed on purpose."""
        stripped = strip_license(HEADER + "package main\n")
        assert stripped.startswith("\n")
        assert not stripped.endswith("\n")
        assert stripped == "\npackage main"

    def test_only_first_closing_marker_ends_header(self):
        """Test that later block comments are kept."""
        content = HEADER + "package main\n/*\nblock\n*/\n"
        assert strip_license(content) == "\npackage main\n/*\nblock\n*/"

    def test_closing_marker_must_match_whole_line(self):
        """Test that indented or trailing markers do not close the header."""
        content = "/*\nCopyright 2021\n */\n*/ trailing\n*/\npackage main\n"
        assert strip_license(content) == "\npackage main"

    def test_missing_closing_marker_discards_everything(self):
        """Test that an unterminated header consumes the whole file."""
        assert strip_license("/*\nCopyright 2021\npackage main\n") == ""

    def test_header_only_file_becomes_empty(self):
        """Test stripping a file that holds only a header."""
        assert strip_license(HEADER) == ""

    def test_carriage_returns_are_dropped_after_header(self):
        """Test that CRLF endings become LF once a header is stripped."""
        content = "/*\nCopyright 2021\r\n*/\r\npackage main\r\n\r\nfunc main() {}\r\n"
        assert strip_license(content) == "\npackage main\n\nfunc main() {}"


class TestRewriteContent:
    """Header replacement combining strip and prepend."""

    def test_prepends_to_headerless_content(self):
        """Test prepending a header to headerless content."""
        assert rewrite_content("package main\n", "// Licensed\n") == "// Licensed\npackage main\n"

    def test_no_delimiter_is_added(self):
        """Test that the header is prepended verbatim."""
        assert rewrite_content("package main\n", "// Licensed") == "// Licensedpackage main\n"

    def test_replaces_existing_header(self):
        """Test replacing an existing header with a new one."""
        new_header = "/*\nCopyright 2024 New Owner\n*/\n"
        result = rewrite_content(HEADER + "package main\n", new_header)
        assert result == new_header + "\npackage main"
        assert "Acme" not in result

    def test_round_trip_with_identical_header_adds_blank_line(self):
        """Stripping then re-adding the same header is not a no-op."""
        original = HEADER + "package main\n"
        result = rewrite_content(original, HEADER)
        assert result != original
        assert result == HEADER + "\n" + "package main"

    def test_non_matching_header_is_not_stripped_on_second_run(self):
        """Detection is prefix based, so an SPDX line comment header accumulates."""
        header = "// SPDX-License-Identifier: MIT\n"
        once = rewrite_content("package main\n", header)
        twice = rewrite_content(once, header)
        assert twice == header + header + "package main\n"

    def test_empty_content(self):
        """Test applying a header to an empty file."""
        assert rewrite_content("", HEADER) == HEADER
