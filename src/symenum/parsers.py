"""
Input parsers (Layer 1: Raw Input Files → typed records).

Formats:
    name_availability.plist
        Dictionary with two keys:
            symbols:          symbol name -> release year ("2019")
            year_to_release:  release year -> {iOS, macOS, tvOS, watchOS}

    String pair files (aliases, legacy aliases, as-is symbols, localization suffixes)
        One pair per line:  "lhs" = "rhs";
        Quotes and the trailing semicolon are optional.
        Blank lines and lines starting with // or # are ignored.

    Symbol names / symbol previews
        One entry per line, zipped index-for-index.
"""

import plistlib
import re
import warnings
from typing import Dict, List, Tuple
from xml.parsers.expat import ExpatError

from symenum.errors import InputParseError
from symenum.model import (
    PLATFORMS,
    AliasPair,
    Availability,
    LocalizationSuffixRule,
    ScannedRecord,
)


_PAIR_RE = re.compile(
    r'^\s*(?:"(?P<qlhs>(?:[^"\\]|\\.)*)"|(?P<lhs>[^=]+?))\s*=\s*'
    r'(?:"(?P<qrhs>(?:[^"\\]|\\.)*)"|(?P<rhs>[^;]+?))\s*;?\s*$'
)

_VERSION_RE = re.compile(r"^\d+(\.\d+)*$")


def read_text(filepath: str) -> str:
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Input file not found: {filepath}")
    except UnicodeDecodeError as e:
        raise InputParseError(f"{filepath} is not valid UTF-8: {e}")


def _is_skippable(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("//") or stripped.startswith("#")


def _unescape(value: str) -> str:
    return value.replace('\\"', '"').replace("\\\\", "\\")


# =========================================================================
# STRING PAIRS
# =========================================================================

def parse_string_pairs(content: str, source: str = "<string>") -> List[Tuple[str, str]]:
    """
    Parse "lhs" = "rhs"; lines into (lhs, rhs) tuples, in file order.

    Malformed lines are skipped with a UserWarning.
    """
    pairs = []
    for line_num, line in enumerate(content.splitlines(), start=1):
        if _is_skippable(line):
            continue

        match = _PAIR_RE.match(line)
        if not match:
            warnings.warn(f"{source}:{line_num}: ignoring malformed line {line.strip()!r}", UserWarning)
            continue

        lhs = match.group("qlhs")
        lhs = _unescape(lhs) if lhs is not None else match.group("lhs").strip()
        rhs = match.group("qrhs")
        rhs = _unescape(rhs) if rhs is not None else match.group("rhs").strip()
        pairs.append((lhs, rhs))

    return pairs


def parse_aliases(content: str, source: str = "<string>") -> List[AliasPair]:
    return [AliasPair(source=lhs, target=rhs) for lhs, rhs in parse_string_pairs(content, source)]


def parse_localization_suffixes(content: str, source: str = "<string>") -> List[LocalizationSuffixRule]:
    return [
        LocalizationSuffixRule(suffix=lhs, localization=rhs)
        for lhs, rhs in parse_string_pairs(content, source)
    ]


def parse_as_is_symbols(content: str, source: str = "<string>") -> Dict[str, str]:
    """Canonical name -> restriction note. The first entry for a name wins."""
    as_is: Dict[str, str] = {}
    for lhs, rhs in parse_string_pairs(content, source):
        as_is.setdefault(lhs, rhs)
    return as_is


# =========================================================================
# NAMES AND PREVIEWS
# =========================================================================

def parse_lines(content: str) -> List[str]:
    """One entry per non-empty line, surrounding whitespace removed."""
    return [line.strip() for line in content.splitlines() if line.strip()]


def build_preview_index(names: List[str], previews: List[str]) -> Dict[str, str]:
    """
    Zip names and previews index-for-index into a name -> preview mapping.

    Raises:
        InputParseError: If the lists differ in length or a name repeats
    """
    if len(names) != len(previews):
        raise InputParseError(
            f"Symbol names ({len(names)}) and previews ({len(previews)}) differ in length"
        )

    index: Dict[str, str] = {}
    for name, preview in zip(names, previews):
        if name in index:
            raise InputParseError(f"Duplicate symbol name in preview list: {name}")
        index[name] = preview
    return index


# =========================================================================
# MANIFEST
# =========================================================================

def _parse_release(year: str, release: object) -> Availability:
    if not isinstance(release, dict):
        raise InputParseError(f"Release entry for {year} is not a dictionary")

    missing = [platform for platform in PLATFORMS if platform not in release]
    if missing:
        raise InputParseError(f"Release entry for {year} lacks platforms: {missing}")

    versions = {}
    for platform in PLATFORMS:
        version = str(release[platform]).strip()
        if not _VERSION_RE.match(version):
            raise InputParseError(f"Release entry for {year} has non-numeric {platform} version {version!r}")
        versions[platform] = version

    return Availability(
        ios=versions["iOS"],
        macos=versions["macOS"],
        tvos=versions["tvOS"],
        watchos=versions["watchOS"],
    )


def parse_manifest_data(data: object) -> List[ScannedRecord]:
    """
    Convert a decoded name_availability plist into scanned records.

    Records keep the manifest's symbol order.

    Raises:
        InputParseError: If the structure is wrong or a year has no release
    """
    if not isinstance(data, dict):
        raise InputParseError("Manifest root is not a dictionary")

    symbols = data.get("symbols")
    year_to_release = data.get("year_to_release")
    if not isinstance(symbols, dict) or not isinstance(year_to_release, dict):
        raise InputParseError("Manifest must contain 'symbols' and 'year_to_release' dictionaries")

    releases = {str(year): _parse_release(str(year), release) for year, release in year_to_release.items()}

    records = []
    for name, year in symbols.items():
        availability = releases.get(str(year))
        if availability is None:
            raise InputParseError(f"Symbol '{name}' refers to unknown release year {year}")
        records.append(ScannedRecord(raw_name=name, availability=availability))
    return records


def parse_manifest_bytes(content: bytes) -> List[ScannedRecord]:
    try:
        data = plistlib.loads(content)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        raise InputParseError(f"Invalid manifest plist: {str(e)}")
    return parse_manifest_data(data)


def parse_manifest_file(filepath: str) -> List[ScannedRecord]:
    try:
        with open(filepath, "rb") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Manifest file not found: {filepath}")
    return parse_manifest_bytes(content)


def read_lines_file(filepath: str) -> List[str]:
    return parse_lines(read_text(filepath))


__all__ = [
    "parse_string_pairs",
    "parse_aliases",
    "parse_localization_suffixes",
    "parse_as_is_symbols",
    "parse_lines",
    "build_preview_index",
    "parse_manifest_data",
    "parse_manifest_bytes",
    "parse_manifest_file",
    "read_text",
    "read_lines_file",
]
