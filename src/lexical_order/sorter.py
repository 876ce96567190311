"""Public entry point: infer a symbol order from a sorted word list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, SorterConfig, resolve_traversal
from .exceptions import ConstraintCycle, PrefixContradiction
from .extraction import build_graph
from .graph import ConstraintGraph
from .resolution import OrderResolver, Traversal

logger = logging.getLogger(__name__)

IMPOSSIBLE = "Impossible"


class FailureKind(StrEnum):
    """Why no consistent order exists."""

    CONTRADICTION = "contradiction"
    CYCLE = "cycle"


@dataclass(frozen=True)
class OrderResult:
    """Outcome of one inference: a full order, or an impossible marker."""
    order: Tuple[str, ...] = ()
    failure: Optional[FailureKind] = None
    detail: str = ""

    @property
    def possible(self) -> bool:
        return self.failure is None

    def __str__(self) -> str:
        return "".join(self.order) if self.possible else IMPOSSIBLE


class LexicalOrderSorter:
    """Infers the symbol order under which a word list is sorted.

    Every call builds its own graph and traversal state, so an instance can
    be reused freely but should not be shared across threads mid-call.
    """

    def __init__(
        self,
        config: SorterConfig = DEFAULT_CONFIG,
        traversal: Optional[Traversal] = None,
    ):
        self.config = config
        self.traversal = resolve_traversal(
            config_override=config.traversal,
            runtime_override=traversal,
        )

    def infer(self, words: Sequence[Sequence[str]]) -> OrderResult:
        """Infer the order, reporting contradictions and cycles as failures."""
        graph = ConstraintGraph(self.config.alphabet)
        try:
            build_graph(words, graph)
        except PrefixContradiction as exc:
            logger.debug("No order: %s", exc)
            return OrderResult(failure=FailureKind.CONTRADICTION, detail=str(exc))

        try:
            order = OrderResolver(graph, self.traversal).resolve()
        except ConstraintCycle as exc:
            logger.debug("No order: %s", exc)
            return OrderResult(failure=FailureKind.CYCLE, detail=str(exc))

        return OrderResult(order=tuple(order))

    def get_sorted_order(self, words: Sequence[Sequence[str]]) -> str:
        """Return the inferred order as a string, or ``"Impossible"``."""
        return str(self.infer(words))


def infer_order(
    words: Sequence[Sequence[str]],
    config: SorterConfig = DEFAULT_CONFIG,
) -> OrderResult:
    """Infer the symbol order of ``words`` with a fresh sorter."""
    return LexicalOrderSorter(config).infer(words)
