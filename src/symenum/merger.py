"""
Symbol Merger: folds per-epoch scanned records into one symbol per canonical name.

A single logical symbol shows up many times in the manifest:
    - once per localized variant ("character", "character.ar", ...)
    - once per name it has had ("flowchart", later renamed "flowchart.fill")

The merger strips localization suffixes, resolves aliases and accumulates, per
canonical name, the name used at each availability and the localizations
introduced at each availability.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from symenum.aliases import AliasResolver
from symenum.model import LocalizationSuffixRule, MergedSymbol, ScannedRecord


@dataclass
class MergeResult:
    """Merged symbols in creation order, plus base names lacking a preview."""
    symbols: List[MergedSymbol] = field(default_factory=list)
    missing_previews: List[str] = field(default_factory=list)

    def get_symbol(self, name: str) -> Optional[MergedSymbol]:
        for symbol in self.symbols:
            if symbol.name == name:
                return symbol
        return None


def split_localization(raw_name: str,
                       suffix_rules: Sequence[LocalizationSuffixRule]) -> Tuple[str, Optional[str]]:
    """
    Split a raw manifest name into (base name, localization).

    The first matching rule wins. Names without a matching suffix are
    returned unchanged with no localization.
    """
    for rule in suffix_rules:
        if rule.matches(raw_name):
            return rule.strip(raw_name), rule.localization
    return raw_name, None


def merge_symbols(
    records: Iterable[ScannedRecord],
    suffix_rules: Sequence[LocalizationSuffixRule],
    previews: Mapping[str, str],
    as_is: Mapping[str, str],
    resolver: AliasResolver,
) -> MergeResult:
    """
    Merge scanned records into one MergedSymbol per canonical name.

    Args:
        records: Manifest entries, in manifest order
        suffix_rules: Localization suffix rules
        previews: Base name -> preview string
        as_is: Canonical name -> restriction note
        resolver: Alias resolver used to find canonical names

    Returns:
        MergeResult with symbols in creation order. A base name without a
        preview is listed in missing_previews once per record; it does not
        stop the merge.
    """
    by_name: Dict[str, MergedSymbol] = {}
    missing_previews: List[str] = []

    for record in records:
        base_name, localization = split_localization(record.raw_name, suffix_rules)

        preview = previews.get(base_name)
        if preview is None:
            missing_previews.append(base_name)

        canonical = resolver.resolve(base_name)
        availability = record.availability

        symbol = by_name.get(canonical)
        if symbol is None:
            by_name[canonical] = MergedSymbol(
                name=canonical,
                restriction=as_is.get(canonical),
                preview=preview,
                name_versions={availability: base_name},
                localizations={availability: {localization} if localization else set()},
            )
            continue

        localizations = symbol.localizations.setdefault(availability, set())
        if localization:
            localizations.add(localization)

        # One entry per symbol per epoch is expected upstream; last write wins
        symbol.name_versions[availability] = base_name

        if symbol.preview is None:
            symbol.preview = preview

    return MergeResult(symbols=list(by_name.values()), missing_previews=missing_previews)
