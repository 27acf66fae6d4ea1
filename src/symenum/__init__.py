"""
Symbol Enum Creator Package

Builds a versioned Swift enumeration of platform symbol names from
per-release symbol manifests.

PIPELINE:
---------
    parsers      input files -> scanned records, alias tables, previews
    aliases      raw name -> canonical name (single hop)
    merger       scanned records -> one MergedSymbol per canonical name
    deriver      MergedSymbol -> live case + deprecated rename-chain cases
    raw_values   cases x availabilities -> name valid at each epoch
    backends     cases + raw values -> Swift source

The core stages (aliases, merger, deriver, raw_values) contain ZERO
knowledge of file formats or Swift syntax.
"""

__version__ = "0.1.0"
