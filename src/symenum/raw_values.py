"""
Raw value table: which literal name to use for each case at each availability.

A case keeps its identity across renames, but the underlying symbol must be
referenced by the name that was valid at the running OS release. For every
availability at which a case exists, the table holds the newest name of the
originating symbol that is not newer than that availability.

validate_raw_value_table() is the completeness check run before any output
is produced.
"""

from collections import Counter
from typing import Dict, Iterable, List, Sequence

from symenum.errors import RawValueMismatchError
from symenum.model import Availability, EnumCase, MergedSymbol, RawValueRow


def collect_availabilities(symbols: Iterable[MergedSymbol]) -> List[Availability]:
    """All availabilities any symbol existed at, oldest first."""
    availabilities = set()
    for symbol in symbols:
        availabilities.update(symbol.name_versions)
    return sorted(availabilities)


def _name_at(case: EnumCase, availability: Availability) -> str:
    valid = [(a, name) for a, name in case.name_versions.items() if a <= availability]
    return max(valid, key=lambda item: item[0])[1]


def build_raw_value_table(cases: Sequence[EnumCase],
                          availabilities: Iterable[Availability]) -> List[RawValueRow]:
    """
    Build the raw value rows for every (availability, case) where the case exists.

    Args:
        cases: All derived enum cases
        availabilities: The global set of availabilities

    Returns:
        Rows ordered by availability (oldest first), then by case order
    """
    rows: List[RawValueRow] = []
    for availability in sorted(set(availabilities)):
        for case in cases:
            if case.introduced <= availability:
                rows.append(RawValueRow(
                    availability=availability,
                    case_name=case.case_name,
                    name=_name_at(case, availability),
                ))
    return rows


def rows_by_availability(rows: Iterable[RawValueRow]) -> Dict[Availability, List[RawValueRow]]:
    """Group rows per availability, oldest availability first."""
    grouped: Dict[Availability, List[RawValueRow]] = {}
    for row in sorted(rows, key=lambda r: r.availability):
        grouped.setdefault(row.availability, []).append(row)
    return grouped


def validate_raw_value_table(rows: Sequence[RawValueRow],
                             cases: Sequence[EnumCase],
                             availabilities: Iterable[Availability]) -> None:
    """
    Check that each availability has exactly one row per case existing there.

    Raises:
        RawValueMismatchError: On the first availability whose row count differs
    """
    counts = Counter(row.availability for row in rows)

    for availability in sorted(set(availabilities)):
        existing = [case for case in cases if case.introduced <= availability]
        actual = counts.get(availability, 0)
        if actual != len(existing):
            covered = {row.case_name for row in rows if row.availability == availability}
            missing = [case.case_name for case in existing if case.case_name not in covered]
            raise RawValueMismatchError(
                availability,
                expected=len(existing),
                actual=actual,
                case_name=missing[0] if missing else None,
            )
