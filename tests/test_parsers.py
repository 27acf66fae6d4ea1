"""
Tests for input parsers (Layer 1: Raw Input Files → typed records).

Formats:
    - name_availability.plist manifest
    - "lhs" = "rhs"; string pair files
    - parallel symbol name / preview line files
"""

import plistlib

import pytest
from symenum.errors import InputParseError
from symenum.model import AliasPair, LocalizationSuffixRule, ScannedRecord
from symenum.parsers import (
    build_preview_index,
    parse_aliases,
    parse_as_is_symbols,
    parse_lines,
    parse_localization_suffixes,
    parse_manifest_bytes,
    parse_manifest_data,
    parse_manifest_file,
    parse_string_pairs,
    read_text,
)

from conftest import E2019, E2020, YEAR_TO_RELEASE


class TestStringPairs:
    """Test "lhs" = "rhs"; parsing."""

    def test_quoted_pair(self):
        assert parse_string_pairs('"doc" = "doc.fill";') == [("doc", "doc.fill")]

    def test_unquoted_pair(self):
        assert parse_string_pairs("ar = Arabic") == [("ar", "Arabic")]

    def test_whitespace_and_missing_semicolon(self):
        assert parse_string_pairs('  "a"="b"  ') == [("a", "b")]

    def test_values_with_spaces(self):
        assert parse_string_pairs('"applelogo" = "Apple logo";') == [("applelogo", "Apple logo")]

    def test_escaped_quote(self):
        assert parse_string_pairs(r'"a\"b" = "c";') == [('a"b', "c")]

    def test_blank_and_comment_lines_skipped(self):
        content = '\n// aliases\n# legacy\n"a" = "b";\n\n"c" = "d";\n'
        assert parse_string_pairs(content) == [("a", "b"), ("c", "d")]

    def test_file_order_kept(self):
        content = '"z" = "1";\n"a" = "2";\n'
        assert [lhs for lhs, _ in parse_string_pairs(content)] == ["z", "a"]

    def test_malformed_line_warns_and_is_skipped(self):
        content = '"a" = "b";\nthis line has no pair\n"c" = "d";\n'
        with pytest.warns(UserWarning, match="aliases.txt:2"):
            pairs = parse_string_pairs(content, source="aliases.txt")
        assert pairs == [("a", "b"), ("c", "d")]


class TestTypedPairFiles:
    """Test conversion into typed records."""

    def test_aliases(self):
        assert parse_aliases('"doc" = "doc.fill";') == [AliasPair(source="doc", target="doc.fill")]

    def test_localization_suffixes(self):
        assert parse_localization_suffixes('"ar" = "Arabic";\n"he" = "Hebrew";') == [
            LocalizationSuffixRule(suffix="ar", localization="Arabic"),
            LocalizationSuffixRule(suffix="he", localization="Hebrew"),
        ]

    def test_as_is_first_entry_wins(self):
        content = '"applelogo" = "Apple logo";\n"applelogo" = "Other";\n"faceid" = "Face ID";'
        assert parse_as_is_symbols(content) == {"applelogo": "Apple logo", "faceid": "Face ID"}


class TestNamesAndPreviews:
    """Test the parallel name / preview lists."""

    def test_parse_lines(self):
        assert parse_lines("globe\n\n  doc \n") == ["globe", "doc"]

    def test_preview_index(self):
        assert build_preview_index(["globe", "doc"], ["G", "D"]) == {"globe": "G", "doc": "D"}

    def test_length_mismatch(self):
        with pytest.raises(InputParseError, match="differ in length"):
            build_preview_index(["globe", "doc"], ["G"])

    def test_duplicate_name(self):
        with pytest.raises(InputParseError, match="Duplicate"):
            build_preview_index(["globe", "globe"], ["G", "H"])


class TestManifest:
    """Test name_availability parsing."""

    def manifest(self, symbols):
        return {"symbols": symbols, "year_to_release": YEAR_TO_RELEASE}

    def test_records_in_manifest_order(self):
        records = parse_manifest_data(self.manifest({"globe.ar": "2020", "globe": "2019"}))
        assert records == [ScannedRecord("globe.ar", E2020), ScannedRecord("globe", E2019)]

    def test_from_plist_bytes(self):
        content = plistlib.dumps(self.manifest({"globe": "2019"}))
        assert parse_manifest_bytes(content) == [ScannedRecord("globe", E2019)]

    def test_from_file(self, tmp_path):
        path = tmp_path / "name_availability.plist"
        path.write_bytes(plistlib.dumps(self.manifest({"doc": "2020"})))
        assert parse_manifest_file(str(path)) == [ScannedRecord("doc", E2020)]

    def test_unknown_year(self):
        with pytest.raises(InputParseError, match="unknown release year 2030"):
            parse_manifest_data(self.manifest({"future": "2030"}))

    def test_release_missing_platform(self):
        data = {"symbols": {}, "year_to_release": {"2019": {"iOS": "13.0"}}}
        with pytest.raises(InputParseError, match="lacks platforms"):
            parse_manifest_data(data)

    def test_release_non_numeric_version(self):
        release = dict(YEAR_TO_RELEASE["2019"], iOS="13.0b")
        data = {"symbols": {"globe": "2019"}, "year_to_release": {"2019": release}}
        with pytest.raises(InputParseError, match="non-numeric iOS version"):
            parse_manifest_data(data)

    def test_missing_sections(self):
        with pytest.raises(InputParseError):
            parse_manifest_data({"symbols": {}})

    def test_not_a_plist(self):
        with pytest.raises(InputParseError):
            parse_manifest_bytes(b"definitely not a plist")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Manifest file not found"):
            parse_manifest_file(str(tmp_path / "nope.plist"))


class TestReadText:
    """Test file reading."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Input file not found"):
            read_text(str(tmp_path / "missing.txt"))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "name_aliases_strings.txt"
        path.write_bytes(b'"\xff\xfe" = "globe";\n')
        with pytest.raises(InputParseError, match="not valid UTF-8"):
            read_text(str(path))
