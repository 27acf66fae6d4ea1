"""
Enum Case Deriver: expands merged symbols into live and deprecated enum cases.

For a symbol with naming history

    2019: "flowchart"    2021: "flowchart.fill"

where "flowchart.fill" is the canonical name, two cases are produced:

    - flowchartFill  (live, introduced 2019)
    - flowchart      (introduced 2019, deprecated 2021, renamed to flowchartFill)

Every non-canonical entry of the history yields its own deprecated case.

The live case is introduced at the earliest epoch the symbol existed under any
name: raw values keep it usable there through the older names.
"""

from typing import Iterable, List, Optional

from symenum.errors import BrokenRenameChainError
from symenum.model import Availability, Deprecation, EnumCase, MergedSymbol
from symenum.naming import to_case_name


def _next_rename(symbol: MergedSymbol, name: str, availability: Availability) -> Optional[Availability]:
    """Nearest epoch newer than availability at which the symbol had another name."""
    for candidate, candidate_name in symbol.sorted_name_versions():
        if candidate > availability and candidate_name != name:
            return candidate
    return None


def derive_cases(symbol: MergedSymbol) -> List[EnumCase]:
    """
    Derive the enum cases of a single merged symbol.

    Returns:
        The live case first, followed by one deprecated case per
        non-canonical name version, newest first.

    Raises:
        BrokenRenameChainError: If an older name is never superseded
    """
    live = EnumCase(
        name=symbol.name,
        case_name=to_case_name(symbol.name),
        introduced=symbol.earliest_availability(),
        deprecation=None,
        preview=symbol.preview,
        restriction=symbol.restriction,
        name_versions=dict(symbol.name_versions),
        localizations={a: set(locs) for a, locs in symbol.localizations.items()},
    )
    cases = [live]

    for availability, name in reversed(symbol.sorted_name_versions()):
        if name == symbol.name:
            continue

        deprecated_at = _next_rename(symbol, name, availability)
        if deprecated_at is None:
            raise BrokenRenameChainError(symbol.name, name, availability)

        cases.append(EnumCase(
            name=name,
            case_name=to_case_name(name),
            introduced=availability,
            deprecation=Deprecation(at=deprecated_at, renamed_to=live.case_name),
            preview=symbol.preview,
            restriction=symbol.restriction,
            name_versions=dict(symbol.name_versions),
            # localizations gained after this name was introduced belong to newer names
            localizations={
                a: set(locs) for a, locs in symbol.localizations.items() if a <= availability
            },
        ))

    return cases


def derive_all_cases(symbols: Iterable[MergedSymbol]) -> List[EnumCase]:
    """Derive the cases of every symbol, sorted by name."""
    cases: List[EnumCase] = []
    for symbol in symbols:
        cases.extend(derive_cases(symbol))
    return sorted(cases, key=lambda case: case.name)
