"""
Generation Analyzer — inventory and diagnostics of a pipeline run.

This module provides lightweight analysis of a GenerationResult:
    - Symbol and case counts
    - Rename chain metrics
    - Localization and restriction coverage
    - Raw value rows per availability
    - Warning flags (missing previews)

IMPORTANT: This is read-only. It does NOT modify the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from symenum.model import Availability
from symenum.pipeline import GenerationResult


@dataclass
class GenerationReport:
    """Summary report for a generation run."""

    total_symbols: int = 0
    total_cases: int = 0
    deprecated_cases: int = 0
    total_availabilities: int = 0
    total_raw_values: int = 0

    # Rename chains
    renamed_symbols: int = 0
    longest_rename_chain: int = 0
    longest_rename_chain_symbol: Optional[str] = None

    # Coverage
    localized_symbols: int = 0
    restricted_symbols: int = 0
    symbols_without_preview: int = 0

    raw_values_per_availability: Dict[Availability, int] = field(default_factory=dict)
    missing_previews: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_generation(result: GenerationResult) -> GenerationReport:
    """
    Summarize a GenerationResult.

    Returns a GenerationReport with metrics and warnings.
    """
    report = GenerationReport()

    report.total_symbols = len(result.symbols)
    report.total_cases = len(result.cases)
    report.deprecated_cases = sum(1 for case in result.cases if case.is_deprecated)
    report.total_availabilities = len(result.availabilities)
    report.total_raw_values = len(result.raw_values)

    for symbol in result.symbols:
        old_names = [name for name in symbol.name_versions.values() if name != symbol.name]
        if old_names:
            report.renamed_symbols += 1
        if len(old_names) > report.longest_rename_chain:
            report.longest_rename_chain = len(old_names)
            report.longest_rename_chain_symbol = symbol.name

        if any(symbol.localizations.values()):
            report.localized_symbols += 1
        if symbol.restriction:
            report.restricted_symbols += 1
        if symbol.preview is None:
            report.symbols_without_preview += 1

    for availability in result.availabilities:
        report.raw_values_per_availability[availability] = 0
    for row in result.raw_values:
        report.raw_values_per_availability[row.availability] += 1

    # Same base name may be listed once per localized variant
    report.missing_previews = sorted(set(result.missing_previews))
    if report.missing_previews:
        report.add_warning(
            f"No symbol preview available for symbols: {', '.join(report.missing_previews)}"
        )

    return report


def format_report(report: GenerationReport) -> str:
    """Render a report as plain text."""
    lines = [
        f"Symbols:             {report.total_symbols}",
        f"Enum cases:          {report.total_cases} ({report.deprecated_cases} deprecated)",
        f"Availabilities:      {report.total_availabilities}",
        f"Raw values:          {report.total_raw_values}",
        f"Renamed symbols:     {report.renamed_symbols}",
        f"Localized symbols:   {report.localized_symbols}",
        f"Restricted symbols:  {report.restricted_symbols}",
    ]
    if report.longest_rename_chain_symbol is not None:
        lines.append(
            f"Longest rename chain: {report.longest_rename_chain} "
            f"({report.longest_rename_chain_symbol})"
        )

    lines.append("Raw values per availability:")
    for availability in sorted(report.raw_values_per_availability):
        lines.append(f"  {availability}: {report.raw_values_per_availability[availability]}")

    if report.warnings:
        lines.append(f"Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            lines.append(f"  - {warning}")

    return "\n".join(lines)
