"""
Exception hierarchy for the symbol enumeration pipeline.

Two classes of failure exist:
    - Input problems (unreadable or malformed files, bad configuration)
    - Data-integrity violations: the snapshots are internally inconsistent,
      generation must abort without producing output
"""

from typing import Optional

from symenum.model import Availability


class SymbolEnumError(Exception):
    """Base class for all symenum errors."""
    pass


class InputParseError(SymbolEnumError):
    """Raised when an input file cannot be parsed."""
    pass


class ConfigError(SymbolEnumError):
    """Raised when the configuration file is invalid."""
    pass


class DataIntegrityError(SymbolEnumError):
    """Raised when the merged data violates a generation invariant."""
    pass


class BrokenRenameChainError(DataIntegrityError):
    """
    An older name of a symbol is never superseded by a newer, different name.

    Every non-canonical name must be followed by a rename at some newer epoch,
    otherwise its deprecated case has no deprecation epoch.
    """

    def __init__(self, symbol_name: str, stranded_name: str, availability: Availability):
        self.symbol_name = symbol_name
        self.stranded_name = stranded_name
        self.availability = availability
        super().__init__(
            f"Name '{stranded_name}' of symbol '{symbol_name}' at ({availability}) "
            f"is not followed by any newer name"
        )


class RawValueMismatchError(DataIntegrityError):
    """The raw value table does not cover every case existing at an availability."""

    def __init__(self, availability: Availability, expected: int, actual: int,
                 case_name: Optional[str] = None):
        self.availability = availability
        self.expected = expected
        self.actual = actual
        self.case_name = case_name
        message = (
            f"Raw value table for ({availability}) has {actual} rows, "
            f"expected {expected}"
        )
        if case_name is not None:
            message += f" (first unmatched case: {case_name})"
        super().__init__(message)
