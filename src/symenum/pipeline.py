"""
Generation pipeline: input files → merged symbols → enum cases → raw value table.

Stages run strictly in sequence. Each stage is a pure function of the previous
stage's result; data-integrity errors propagate out of run_pipeline() before
any output exists, and the caller decides how to abort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from symenum.aliases import AliasResolver
from symenum.config import GeneratorConfig
from symenum.deriver import derive_all_cases
from symenum.merger import merge_symbols
from symenum.model import (
    AliasPair,
    Availability,
    EnumCase,
    LocalizationSuffixRule,
    MergedSymbol,
    RawValueRow,
    ScannedRecord,
)
from symenum.parsers import (
    build_preview_index,
    parse_aliases,
    parse_as_is_symbols,
    parse_localization_suffixes,
    parse_manifest_file,
    read_lines_file,
    read_text,
)
from symenum.raw_values import (
    build_raw_value_table,
    collect_availabilities,
    validate_raw_value_table,
)

logger = logging.getLogger(__name__)


@dataclass
class SymbolInputs:
    """Everything the generator consumes, already parsed."""
    records: List[ScannedRecord] = field(default_factory=list)
    aliases: List[AliasPair] = field(default_factory=list)
    legacy_aliases: List[AliasPair] = field(default_factory=list)
    as_is: Dict[str, str] = field(default_factory=dict)
    suffix_rules: List[LocalizationSuffixRule] = field(default_factory=list)
    previews: Dict[str, str] = field(default_factory=dict)


@dataclass
class GenerationResult:
    """Output of a successful pipeline run."""
    symbols: List[MergedSymbol] = field(default_factory=list)
    cases: List[EnumCase] = field(default_factory=list)
    availabilities: List[Availability] = field(default_factory=list)
    raw_values: List[RawValueRow] = field(default_factory=list)
    missing_previews: List[str] = field(default_factory=list)


def load_inputs(config: GeneratorConfig) -> SymbolInputs:
    """
    Read and parse every input file named by the configuration.

    Raises:
        FileNotFoundError: If an input file is missing
        InputParseError: If an input file is malformed
    """
    def _pairs_content(role: str) -> tuple:
        path = config.path_for(role)
        logger.debug("Reading %s from %s", role, path)
        return read_text(path), path

    records = parse_manifest_file(config.path_for("manifest"))
    logger.info("Read %d manifest entries", len(records))

    aliases = parse_aliases(*_pairs_content("aliases"))
    legacy_aliases = parse_aliases(*_pairs_content("legacy_aliases"))
    as_is = parse_as_is_symbols(*_pairs_content("as_is_symbols"))
    suffix_rules = parse_localization_suffixes(*_pairs_content("localization_suffixes"))

    previews = build_preview_index(
        read_lines_file(config.path_for("names")),
        read_lines_file(config.path_for("previews")),
    )

    return SymbolInputs(
        records=records,
        aliases=aliases,
        legacy_aliases=legacy_aliases,
        as_is=as_is,
        suffix_rules=suffix_rules,
        previews=previews,
    )


def run_pipeline(inputs: SymbolInputs) -> GenerationResult:
    """
    Merge, derive and build the validated raw value table.

    Raises:
        BrokenRenameChainError: If a symbol's rename chain is broken
        RawValueMismatchError: If the raw value table is incomplete
    """
    resolver = AliasResolver(inputs.aliases, inputs.legacy_aliases)
    logger.debug("Working alias table has %d pairs", len(resolver))

    merged = merge_symbols(
        inputs.records,
        inputs.suffix_rules,
        inputs.previews,
        inputs.as_is,
        resolver,
    )
    logger.info("Merged %d records into %d symbols", len(inputs.records), len(merged.symbols))

    cases = derive_all_cases(merged.symbols)
    logger.info("Derived %d enum cases", len(cases))

    availabilities = collect_availabilities(merged.symbols)
    raw_values = build_raw_value_table(cases, availabilities)
    validate_raw_value_table(raw_values, cases, availabilities)
    logger.info("Built %d raw values over %d availabilities", len(raw_values), len(availabilities))

    return GenerationResult(
        symbols=merged.symbols,
        cases=cases,
        availabilities=availabilities,
        raw_values=raw_values,
        missing_previews=merged.missing_previews,
    )
