#!/usr/bin/env python3
"""
Complete Pipeline Demo: Records → Merged Symbols → Enum Cases → Swift

Shows the full workflow on a small in-memory data set:
1. Merge scanned records through aliases and localization suffixes
2. Derive live and deprecated enum cases
3. Build and validate the raw value table
4. Generate the Swift enum
"""

from symenum.analyzer import analyze_generation, format_report
from symenum.backends import generate_swift
from symenum.model import AliasPair, Availability, LocalizationSuffixRule, ScannedRecord
from symenum.pipeline import SymbolInputs, run_pipeline


E2019 = Availability(ios="13.0", macos="10.15", tvos="13.0", watchos="6.0")
E2020 = Availability(ios="14.0", macos="11.0", tvos="14.0", watchos="7.0")
E2021 = Availability(ios="15.0", macos="12.0", tvos="15.0", watchos="8.0")


def build_inputs() -> SymbolInputs:
    return SymbolInputs(
        records=[
            ScannedRecord("doc", E2019),
            ScannedRecord("character", E2019),
            ScannedRecord("character.ar", E2020),
            ScannedRecord("character.he", E2021),
            ScannedRecord("applelogo", E2020),
            ScannedRecord("doc.fill", E2021),
        ],
        aliases=[AliasPair("doc", "doc.fill")],
        as_is={"applelogo": "Apple logo"},
        suffix_rules=[
            LocalizationSuffixRule("ar", "Arabic"),
            LocalizationSuffixRule("he", "Hebrew"),
        ],
        previews={"doc": "📄", "doc.fill": "📄", "character": "A"},
    )


def main():
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Records → Symbols → Cases → Swift")
    print("=" * 80)

    # =========================================================================
    # STEP 1-3: Merge, derive, build raw values
    # =========================================================================
    print("\n1. RUNNING PIPELINE...")
    result = run_pipeline(build_inputs())
    print(f"   ✓ Symbols: {len(result.symbols)}")
    print(f"   ✓ Cases: {len(result.cases)}")
    print(f"   ✓ Raw values: {len(result.raw_values)}")

    for case in result.cases:
        if case.deprecation:
            print(f"   ✓ {case.name} deprecated at ({case.deprecation.at}) → {case.deprecation.renamed_to}")

    # =========================================================================
    # STEP 4: Report
    # =========================================================================
    print("\n2. REPORT:")
    print("-" * 80)
    print(format_report(analyze_generation(result)))

    # =========================================================================
    # STEP 5: Swift output
    # =========================================================================
    print("\n3. GENERATED SWIFT:")
    print("-" * 80)
    print(generate_swift(result.cases, result.raw_values))


if __name__ == "__main__":
    main()
