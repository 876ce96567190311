"""Directed graph of symbol ordering constraints."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .alphabet import Alphabet


class ConstraintGraph:
    """Accumulates ``before -> after`` edges over a symbol universe.

    The universe is seeded with every symbol of the alphabet and grows when an
    edge references a symbol outside it. Duplicate edges are kept; cycles are
    not checked here.
    """

    def __init__(self, alphabet: Alphabet):
        self.alphabet = alphabet
        self._edges: Dict[str, List[str]] = {}
        # dict keys act as an insertion-ordered set
        self._universe: Dict[str, None] = dict.fromkeys(alphabet)

    def add_edge(self, start: str, end: str) -> None:
        """Record that ``start`` must precede ``end``."""
        self._edges.setdefault(start, []).append(end)
        self._universe.setdefault(start)
        self._universe.setdefault(end)

    @property
    def edges(self) -> Mapping[str, List[str]]:
        """Outgoing edges keyed by symbol, in first-insertion order."""
        return MappingProxyType(self._edges)

    def successors(self, symbol: str) -> Tuple[str, ...]:
        return tuple(self._edges.get(symbol, ()))

    @property
    def universe(self) -> Tuple[str, ...]:
        """Every known symbol: the alphabet first, then foreign symbols as seen."""
        return tuple(self._universe)

    def __len__(self) -> int:
        return sum(len(targets) for targets in self._edges.values())
