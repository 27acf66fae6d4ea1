"""
Serialization helpers for generation results (EnumCase, RawValueRow, ...).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Used to dump the derived database for inspection and for test fixtures.
Sets are written as sorted lists; availability-keyed maps as lists of entries
sorted by availability, so the output is stable.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from symenum.model import (
    Availability,
    Deprecation,
    EnumCase,
    RawValueRow,
)


def availability_to_dict(a: Availability) -> Dict[str, str]:
    return a.versions()


def availability_from_dict(d: Dict[str, Any]) -> Availability:
    return Availability(
        ios=str(d["iOS"]),
        macos=str(d["macOS"]),
        tvos=str(d["tvOS"]),
        watchos=str(d["watchOS"]),
    )


def deprecation_to_dict(d: Deprecation | None) -> Dict[str, Any] | None:
    if d is None:
        return None
    return {"at": availability_to_dict(d.at), "renamed_to": d.renamed_to}


def deprecation_from_dict(d: Dict[str, Any] | None) -> Deprecation | None:
    if d is None:
        return None
    return Deprecation(at=availability_from_dict(d["at"]), renamed_to=d["renamed_to"])


def enum_case_to_dict(c: EnumCase) -> Dict[str, Any]:
    return {
        "name": c.name,
        "case_name": c.case_name,
        "introduced": availability_to_dict(c.introduced),
        "deprecation": deprecation_to_dict(c.deprecation),
        "preview": c.preview,
        "restriction": c.restriction,
        "name_versions": [
            {"availability": availability_to_dict(a), "name": c.name_versions[a]}
            for a in sorted(c.name_versions)
        ],
        "localizations": [
            {"availability": availability_to_dict(a), "localizations": sorted(c.localizations[a])}
            for a in sorted(c.localizations)
        ],
    }


def enum_case_from_dict(d: Dict[str, Any]) -> EnumCase:
    return EnumCase(
        name=d["name"],
        case_name=d["case_name"],
        introduced=availability_from_dict(d["introduced"]),
        deprecation=deprecation_from_dict(d.get("deprecation")),
        preview=d.get("preview"),
        restriction=d.get("restriction"),
        name_versions={
            availability_from_dict(e["availability"]): e["name"] for e in d.get("name_versions", [])
        },
        localizations={
            availability_from_dict(e["availability"]): set(e["localizations"])
            for e in d.get("localizations", [])
        },
    )


def raw_value_to_dict(r: RawValueRow) -> Dict[str, Any]:
    return {"availability": availability_to_dict(r.availability), "case_name": r.case_name, "name": r.name}


def raw_value_from_dict(d: Dict[str, Any]) -> RawValueRow:
    return RawValueRow(
        availability=availability_from_dict(d["availability"]),
        case_name=d["case_name"],
        name=d["name"],
    )


def database_to_dict(cases: List[EnumCase], raw_values: List[RawValueRow]) -> Dict[str, Any]:
    return {
        "cases": [enum_case_to_dict(c) for c in cases],
        "raw_values": [raw_value_to_dict(r) for r in raw_values],
    }


def database_from_dict(d: Dict[str, Any]) -> tuple:
    cases = [enum_case_from_dict(c) for c in d.get("cases", [])]
    raw_values = [raw_value_from_dict(r) for r in d.get("raw_values", [])]
    return cases, raw_values


def database_to_json(cases: List[EnumCase], raw_values: List[RawValueRow]) -> str:
    return json.dumps(database_to_dict(cases, raw_values), sort_keys=True, ensure_ascii=False)


def database_from_json(s: str) -> tuple:
    return database_from_dict(json.loads(s))


def database_to_yaml(cases: List[EnumCase], raw_values: List[RawValueRow]) -> str:
    return yaml.safe_dump(database_to_dict(cases, raw_values), allow_unicode=True, sort_keys=False)


def database_from_yaml(s: str) -> tuple:
    return database_from_dict(yaml.safe_load(s))
