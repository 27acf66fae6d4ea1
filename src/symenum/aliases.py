"""
Alias resolution: maps any known symbol name to its primary (canonical) name.

Two alias tables are supplied. The current table is authoritative; pairs that
also appear verbatim in the legacy table are superseded duplicates and are
dropped from the working table.

Resolution is a single hop. Chains (A -> B, B -> C) are NOT followed.
"""

from typing import Dict, Iterable, List, Tuple

from symenum.model import AliasPair


class AliasResolver:
    """
    Resolve raw symbol names through the merged alias table.

    Args:
        current: Current alias pairs
        legacy: Legacy alias pairs (optional)
    """

    def __init__(self, current: Iterable[AliasPair], legacy: Iterable[AliasPair] = ()):
        legacy_pairs = {(pair.source, pair.target) for pair in legacy}
        self._pairs: Tuple[AliasPair, ...] = tuple(
            pair for pair in current if (pair.source, pair.target) not in legacy_pairs
        )
        # first pair for a source wins
        self._targets: Dict[str, str] = {}
        for pair in self._pairs:
            self._targets.setdefault(pair.source, pair.target)

    @property
    def pairs(self) -> List[AliasPair]:
        """The working alias table, in input order."""
        return list(self._pairs)

    def resolve(self, name: str) -> str:
        """Return the canonical name for name, or name itself if it has no alias."""
        return self._targets.get(name, name)

    def __len__(self) -> int:
        return len(self._pairs)
