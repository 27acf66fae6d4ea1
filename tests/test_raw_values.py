"""
Tests for the raw value table.

These tests verify:
    - One row per case per availability at which the case exists
    - The name chosen for each epoch
    - The completeness check
"""

import pytest
from symenum.deriver import derive_all_cases
from symenum.errors import RawValueMismatchError
from symenum.model import MergedSymbol, RawValueRow
from symenum.raw_values import (
    build_raw_value_table,
    collect_availabilities,
    rows_by_availability,
    validate_raw_value_table,
)

from conftest import E2019, E2020, E2021


def sample_symbols():
    return [
        MergedSymbol(name="foobar", name_versions={E2019: "foo", E2020: "foobar"}),
        MergedSymbol(name="late", name_versions={E2020: "late"}),
        MergedSymbol(name="c", name_versions={E2019: "a", E2020: "b", E2021: "c"}),
    ]


class TestCollectAvailabilities:
    """Test the global availability set."""

    def test_union_sorted(self):
        assert collect_availabilities(sample_symbols()) == [E2019, E2020, E2021]

    def test_empty(self):
        assert collect_availabilities([]) == []


class TestBuildRawValueTable:
    """Test row generation."""

    def test_renamed_symbol_rows(self):
        symbols = [MergedSymbol(name="foobar", name_versions={E2019: "foo", E2020: "foobar"})]
        cases = derive_all_cases(symbols)
        rows = build_raw_value_table(cases, collect_availabilities(symbols))
        assert rows == [
            RawValueRow(E2019, "foo", "foo"),
            RawValueRow(E2019, "foobar", "foo"),
            RawValueRow(E2020, "foo", "foobar"),
            RawValueRow(E2020, "foobar", "foobar"),
        ]

    def test_case_absent_before_introduction(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        rows = build_raw_value_table(cases, collect_availabilities(symbols))
        late_rows = [row for row in rows if row.case_name == "late"]
        assert [row.availability for row in late_rows] == [E2020, E2021]

    def test_uses_newest_name_not_newer_than_epoch(self):
        """Between renames, the name of the last rename applies."""
        symbols = [MergedSymbol(name="c", name_versions={E2019: "a", E2021: "c"})]
        cases = derive_all_cases(symbols)
        rows = build_raw_value_table(cases, [E2019, E2020, E2021])
        names = {(row.availability, row.case_name): row.name for row in rows}
        assert names[(E2019, "c")] == "a"
        assert names[(E2020, "c")] == "a"
        assert names[(E2021, "c")] == "c"

    def test_row_count_matches_existing_cases(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        availabilities = collect_availabilities(symbols)
        rows = build_raw_value_table(cases, availabilities)
        for availability in availabilities:
            count = sum(1 for row in rows if row.availability == availability)
            assert count == sum(1 for case in cases if case.introduced <= availability)

    def test_case_resolves_to_known_name_at_introduction(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        rows = build_raw_value_table(cases, collect_availabilities(symbols))
        lookup = {(row.availability, row.case_name): row.name for row in rows}
        for case in cases:
            assert lookup[(case.introduced, case.case_name)] in case.name_versions.values()

    def test_rows_grouped_by_availability(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        grouped = rows_by_availability(build_raw_value_table(cases, collect_availabilities(symbols)))
        assert list(grouped) == [E2019, E2020, E2021]
        assert len(grouped[E2019]) == 4
        assert len(grouped[E2020]) == 6
        assert len(grouped[E2021]) == 6


class TestValidateRawValueTable:
    """Test the completeness check."""

    def test_valid_table_passes(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        availabilities = collect_availabilities(symbols)
        rows = build_raw_value_table(cases, availabilities)
        validate_raw_value_table(rows, cases, availabilities)

    def test_missing_row_is_fatal(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        availabilities = collect_availabilities(symbols)
        rows = build_raw_value_table(cases, availabilities)
        dropped = [row for row in rows if not (row.availability == E2020 and row.case_name == "late")]

        with pytest.raises(RawValueMismatchError) as exc_info:
            validate_raw_value_table(dropped, cases, availabilities)
        assert exc_info.value.availability == E2020
        assert exc_info.value.expected == 6
        assert exc_info.value.actual == 5
        assert exc_info.value.case_name == "late"

    def test_extra_row_is_fatal(self):
        symbols = sample_symbols()
        cases = derive_all_cases(symbols)
        availabilities = collect_availabilities(symbols)
        rows = build_raw_value_table(cases, availabilities)
        rows.append(RawValueRow(E2019, "late", "late"))

        with pytest.raises(RawValueMismatchError):
            validate_raw_value_table(rows, cases, availabilities)
