"""Constraint extraction from a sorted word list.

Each consecutive pair of words contributes at most one constraint: the
symbols at the first position where the two words differ. Later positions
carry no ordering information once that position disambiguates the pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .exceptions import PrefixContradiction
from .graph import ConstraintGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constraint:
    """``before`` must precede ``after`` in the inferred order."""
    before: str
    after: str


def compare_pair(first: Sequence[str], second: Sequence[str], index: int = 0) -> Optional[Constraint]:
    """Derive the ordering constraint implied by two adjacent words.

    Args:
        first: The earlier word
        second: The word listed directly after ``first``
        index: Position of ``first`` in the input list (for diagnostics)

    Returns:
        The constraint from the first differing position, or None when one
        word is a prefix of the other (including identical words).

    Raises:
        PrefixContradiction: If ``first`` is strictly longer than ``second``
            and ``second`` is a prefix of it.
    """
    for left, right in zip(first, second):
        if left != right:
            return Constraint(left, right)

    if len(first) > len(second):
        raise PrefixContradiction(first, second, index)
    return None


def iter_constraints(words: Sequence[Sequence[str]]) -> Iterator[Tuple[int, Constraint]]:
    """Yield ``(pair index, constraint)`` for each informative adjacent pair.

    Pairs are compared lazily, so a contradiction surfaces only after every
    earlier constraint has been yielded.

    Raises:
        PrefixContradiction: On the first pair violating the prefix rule.
    """
    for index in range(len(words) - 1):
        constraint = compare_pair(words[index], words[index + 1], index)
        if constraint is not None:
            yield index, constraint


def extract_constraints(words: Sequence[Sequence[str]]) -> List[Constraint]:
    """Derive constraints for every consecutive pair in ``words``.

    Stops at the first contradiction; no partial list is returned.

    Raises:
        PrefixContradiction: On the first pair violating the prefix rule.
    """
    return [constraint for _, constraint in iter_constraints(words)]


def build_graph(words: Sequence[Sequence[str]], graph: ConstraintGraph) -> ConstraintGraph:
    """Populate ``graph`` with the constraints implied by ``words``.

    The graph is filled in place, pair by pair. On contradiction it is left
    partially built and must not be resolved.

    Raises:
        PrefixContradiction: On the first pair violating the prefix rule.
    """
    for index, constraint in iter_constraints(words):
        logger.debug("Constraint %s -> %s from pair %d", constraint.before, constraint.after, index)
        graph.add_edge(constraint.before, constraint.after)
    return graph
