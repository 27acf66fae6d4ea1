"""Shared fixtures: release epochs and on-disk input directories."""

import plistlib

import pytest

from symenum.model import Availability


E2019 = Availability(ios="13.0", macos="10.15", tvos="13.0", watchos="6.0")
E2020 = Availability(ios="14.0", macos="11.0", tvos="14.0", watchos="7.0")
E2021 = Availability(ios="15.0", macos="12.0", tvos="15.0", watchos="8.0")

YEAR_TO_RELEASE = {
    "2019": {"iOS": "13.0", "macOS": "10.15", "tvOS": "13.0", "watchOS": "6.0"},
    "2020": {"iOS": "14.0", "macOS": "11.0", "tvOS": "14.0", "watchOS": "7.0"},
    "2021": {"iOS": "15.0", "macOS": "12.0", "tvOS": "15.0", "watchOS": "8.0"},
}


def write_input_dir(directory, symbols, aliases="", legacy_aliases="", as_is="",
                    suffixes="", previews=None):
    """
    Write a complete set of input files into directory.

    symbols: symbol name -> release year, in manifest order
    previews: symbol name -> preview (defaults to one preview per base symbol)
    """
    manifest = {"symbols": symbols, "year_to_release": YEAR_TO_RELEASE}
    (directory / "name_availability.plist").write_bytes(plistlib.dumps(manifest, sort_keys=False))
    (directory / "name_aliases_strings.txt").write_text(aliases, encoding="utf-8")
    (directory / "legacy_aliases_strings.txt").write_text(legacy_aliases, encoding="utf-8")
    (directory / "as_is_symbols.txt").write_text(as_is, encoding="utf-8")
    (directory / "localization_suffixes.txt").write_text(suffixes, encoding="utf-8")

    previews = previews or {}
    (directory / "symbol_names.txt").write_text("\n".join(previews) + "\n", encoding="utf-8")
    (directory / "symbol_previews.txt").write_text("\n".join(previews.values()) + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def renamed_input_dir(tmp_path):
    """
    Inputs where "doc" was renamed to "doc.fill" in 2021, "globe" gained an
    Arabic variant in 2020 and "applelogo" is an as-is symbol.
    """
    return write_input_dir(
        tmp_path,
        symbols={
            "doc": "2019",
            "globe": "2019",
            "globe.ar": "2020",
            "applelogo": "2020",
            "doc.fill": "2021",
        },
        aliases='"doc" = "doc.fill";\n',
        as_is='"applelogo" = "Apple logo";\n',
        suffixes='"ar" = "Arabic";\n',
        previews={"doc": "D", "globe": "G", "applelogo": "A", "doc.fill": "F"},
    )
