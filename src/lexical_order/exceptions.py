"""Exception hierarchy for lexical order inference."""

from __future__ import annotations

from typing import List, Sequence


class LexicalOrderError(Exception):
    """Base exception for lexical order errors."""
    pass


class PrefixContradiction(LexicalOrderError):
    """A word is listed before one of its own proper prefixes.

    Raised by the constraint extractor. A longer word can never sort before
    a prefix of itself, whatever the symbol order is.
    """

    def __init__(self, first_word: Sequence[str], second_word: Sequence[str], index: int):
        """Initialize PrefixContradiction exception.

        Args:
            first_word: The earlier (longer) word of the offending pair
            second_word: The later word, a proper prefix of first_word
            index: Position of first_word in the input word list
        """
        self.first_word = first_word
        self.second_word = second_word
        self.index = index
        super().__init__(
            f"Word {index} ({''.join(first_word)!r}) is listed before its own prefix "
            f"({''.join(second_word)!r})"
        )


class ConstraintCycle(LexicalOrderError):
    """The constraint graph contains a directed cycle."""

    def __init__(self, cycle: List[str]):
        self.cycle = cycle
        super().__init__(f"Cyclic ordering constraints: {' -> '.join(cycle)}")


class ConfigurationError(LexicalOrderError):
    """Invalid configuration value supplied programmatically."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")
