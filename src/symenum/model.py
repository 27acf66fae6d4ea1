"""
Core Symbol Model Objects

Defines the fundamental data structures of the symbol enumeration pipeline.

These are pure data classes representing:
    - Availabilities (platform release epochs)
    - Scanned records (one manifest entry at one epoch)
    - Alias pairs and localization suffix rules (input tables)
    - Merged symbols (one canonical timeline per symbol)
    - Enum cases (live and deprecated members of the generated enum)
    - Raw value rows (the name valid for a case at a given epoch)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about file formats or Swift syntax
        - Are not mutated once their producing stage is done
        - Represent data, not behavior
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Dict, List, Optional, Set, Tuple


PLATFORMS = ("iOS", "macOS", "tvOS", "watchOS")


def _version_key(version: str) -> Tuple[int, ...]:
    """
    Numeric sort key for a dotted version string ("13.10" > "13.2").

    Raises:
        ValueError: If a component is not a non-negative integer
    """
    parts = []
    for part in version.strip().split("."):
        if not part.isdigit():
            raise ValueError(f"Non-numeric version component {part!r} in {version!r}")
        parts.append(int(part))
    return tuple(parts)


@total_ordering
@dataclass(frozen=True)
class Availability:
    """
    A platform release epoch, expressed as one version per platform family.

    All four versions move in lockstep across epochs, so ordering is decided
    by the iOS version. The remaining platforms only break ties, which keeps
    ordering consistent with equality for use as a dict key or set element.

    Ordering is chronological: a newer release compares greater.

    Properties:
        ios: iOS version (e.g. "13.0")
        macos: macOS version (e.g. "10.15")
        tvos: tvOS version (e.g. "13.0")
        watchos: watchOS version (e.g. "6.0")
    """

    ios: str
    macos: str
    tvos: str
    watchos: str

    def sort_key(self) -> Tuple[Tuple[int, ...], ...]:
        return (
            _version_key(self.ios),
            _version_key(self.macos),
            _version_key(self.tvos),
            _version_key(self.watchos),
        )

    def __lt__(self, other: "Availability") -> bool:
        if not isinstance(other, Availability):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def versions(self) -> Dict[str, str]:
        """Platform name -> version, in PLATFORMS order."""
        return dict(zip(PLATFORMS, (self.ios, self.macos, self.tvos, self.watchos)))

    def __str__(self) -> str:
        return ", ".join(f"{platform} {version}" for platform, version in self.versions().items())


@dataclass(frozen=True)
class ScannedRecord:
    """
    One manifest entry: a raw symbol name seen at one availability.

    The raw name may carry a localization suffix (e.g. "character.ar").
    """

    raw_name: str
    availability: Availability


@dataclass(frozen=True)
class AliasPair:
    """Maps an old symbol name (source) to its primary name (target)."""

    source: str
    target: str


@dataclass(frozen=True)
class LocalizationSuffixRule:
    """
    A name ending in ".<suffix>" is the localized variant named by localization.

    Example:
        LocalizationSuffixRule(suffix="ar", localization="Arabic")
        matches "character.ar" with base name "character".
    """

    suffix: str
    localization: str

    def matches(self, raw_name: str) -> bool:
        return raw_name.endswith(f".{self.suffix}")

    def strip(self, raw_name: str) -> str:
        # + 1 for the dot separating name and suffix
        return raw_name[: -(len(self.suffix) + 1)]


@dataclass
class MergedSymbol:
    """
    One logical symbol with its full naming and localization history.

    Properties:
        name:
            Canonical (primary) name after alias resolution

        restriction:
            Note on the only built-in asset this symbol may denote (optional)

        preview:
            Human-readable preview string (optional)

        name_versions:
            Availability -> name the symbol had at that epoch.
            Never empty.

        localizations:
            Availability -> localizations introduced at that epoch
            (possibly an empty set)
    """

    name: str
    restriction: Optional[str] = None
    preview: Optional[str] = None
    name_versions: Dict[Availability, str] = field(default_factory=dict)
    localizations: Dict[Availability, Set[str]] = field(default_factory=dict)

    def earliest_availability(self) -> Availability:
        return min(self.name_versions)

    def sorted_name_versions(self) -> List[Tuple[Availability, str]]:
        """Name versions, oldest epoch first."""
        return sorted(self.name_versions.items(), key=lambda item: item[0])


@dataclass(frozen=True)
class Deprecation:
    """When a case stopped being the symbol's name, and what it became."""

    at: Availability
    renamed_to: str


@dataclass
class EnumCase:
    """
    A single member of the generated enum.

    Each merged symbol yields one live case (deprecation is None, named after
    the canonical name) and one deprecated case per older name.

    Properties:
        name:
            The symbol name this case stands for (also the display name)

        case_name:
            Swift identifier of the case (e.g. "squareAndArrowUp")

        introduced:
            Availability from which the case exists

        deprecation:
            Deprecation details, or None for the live case

        name_versions:
            Naming history of the originating symbol, used to compute the
            raw value valid at each epoch

        localizations:
            Localizations per epoch. Deprecated cases only keep epochs that
            are not newer than their own introduction.
    """

    name: str
    case_name: str
    introduced: Availability
    deprecation: Optional[Deprecation] = None
    preview: Optional[str] = None
    restriction: Optional[str] = None
    name_versions: Dict[Availability, str] = field(default_factory=dict)
    localizations: Dict[Availability, Set[str]] = field(default_factory=dict)

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None


@dataclass(frozen=True)
class RawValueRow:
    """The name that must be used for case_name at availability."""

    availability: Availability
    case_name: str
    name: str
