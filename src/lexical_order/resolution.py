"""Cycle-detecting topological ordering of a constraint graph.

Symbols with at least one outgoing edge are ordered by depth-first search
with post-order accumulation; the reversed accumulator is a valid
topological order. Symbols never reached are appended afterwards in the
universe's natural order.

Two traversals are available and produce identical output:

- RECURSIVE: plain recursion, one native frame per path symbol; replaced
  by ITERATIVE for universes above RECURSION_SAFE_UNIVERSE
- ITERATIVE: explicit stack of (symbol, neighbors, next index) frames
"""

from __future__ import annotations

import logging
from enum import Enum, StrEnum
from typing import Dict, List, Optional, Tuple

from .exceptions import ConstraintCycle
from .graph import ConstraintGraph

logger = logging.getLogger(__name__)

# Above this universe size recursion is replaced by the explicit stack.
RECURSION_SAFE_UNIVERSE = 256


class Traversal(StrEnum):
    """Depth-first traversal strategy."""

    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


class _Mark(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


class OrderResolver:
    """Resolves one finished ConstraintGraph into a total order.

    Traversal state lives only inside a single ``resolve`` call, so one
    resolver may be reused, but the graph must not change while it runs.
    """

    def __init__(self, graph: ConstraintGraph, traversal: Optional[Traversal] = None):
        self.graph = graph
        oversized = len(graph.universe) > RECURSION_SAFE_UNIVERSE
        if traversal is None:
            traversal = Traversal.ITERATIVE if oversized else Traversal.RECURSIVE
        elif traversal is Traversal.RECURSIVE and oversized:
            logger.debug(
                "Universe of %d symbol(s) exceeds %d, using iterative traversal",
                len(graph.universe),
                RECURSION_SAFE_UNIVERSE,
            )
            traversal = Traversal.ITERATIVE
        self.traversal = traversal

    def resolve(self) -> List[str]:
        """Return every universe symbol exactly once, constrained ones first.

        Raises:
            ConstraintCycle: If the edges contain a directed cycle.
        """
        marks: Dict[str, _Mark] = {symbol: _Mark.UNVISITED for symbol in self.graph.edges}
        finished: List[str] = []
        visit = self._visit_recursive if self.traversal is Traversal.RECURSIVE else self._visit_iterative

        logger.debug(
            "Resolving %d constraint(s) over %d symbol(s) (%s)",
            len(self.graph),
            len(self.graph.universe),
            self.traversal.value,
        )
        for symbol in self.graph.edges:
            if marks[symbol] is _Mark.UNVISITED:
                visit(symbol, marks, finished)

        order = finished[::-1]
        order.extend(
            symbol
            for symbol in self.graph.universe
            if marks.get(symbol, _Mark.UNVISITED) is _Mark.UNVISITED
        )
        logger.debug("Resolved order of %d symbol(s)", len(order))
        return order

    def _visit_recursive(
        self,
        root: str,
        marks: Dict[str, _Mark],
        finished: List[str],
    ) -> None:
        path: List[str] = []

        def visit(symbol: str) -> None:
            mark = marks.get(symbol, _Mark.UNVISITED)
            if mark is _Mark.IN_PROGRESS:
                raise ConstraintCycle(_close_cycle(path, symbol))
            if mark is _Mark.DONE:
                return

            marks[symbol] = _Mark.IN_PROGRESS
            path.append(symbol)
            for neighbor in self.graph.successors(symbol):
                visit(neighbor)
            path.pop()
            marks[symbol] = _Mark.DONE
            finished.append(symbol)

        visit(root)

    def _visit_iterative(
        self,
        root: str,
        marks: Dict[str, _Mark],
        finished: List[str],
    ) -> None:
        marks[root] = _Mark.IN_PROGRESS
        stack: List[Tuple[str, Tuple[str, ...], int]] = [(root, self.graph.successors(root), 0)]

        while stack:
            symbol, neighbors, position = stack[-1]
            if position == len(neighbors):
                stack.pop()
                marks[symbol] = _Mark.DONE
                finished.append(symbol)
                continue

            stack[-1] = (symbol, neighbors, position + 1)
            neighbor = neighbors[position]
            mark = marks.get(neighbor, _Mark.UNVISITED)
            if mark is _Mark.IN_PROGRESS:
                raise ConstraintCycle(_close_cycle([entry for entry, _, _ in stack], neighbor))
            if mark is _Mark.UNVISITED:
                marks[neighbor] = _Mark.IN_PROGRESS
                stack.append((neighbor, self.graph.successors(neighbor), 0))


def _close_cycle(path: List[str], repeated: str) -> List[str]:
    """Trim the active path to the cycle ending back at ``repeated``."""
    return path[path.index(repeated):] + [repeated]


def resolve_order(graph: ConstraintGraph, traversal: Optional[Traversal] = None) -> List[str]:
    """Convenience wrapper around ``OrderResolver(graph, traversal).resolve()``."""
    return OrderResolver(graph, traversal).resolve()
