"""Symbol universe definitions."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Alphabet:
    """Finite, ordered set of symbols.

    The tuple order is the natural enumeration order used to place symbols
    that carry no ordering constraints.
    """
    symbols: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", tuple(self.symbols))
        if not self.symbols:
            raise ConfigurationError("alphabet must contain at least one symbol")
        for symbol in self.symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ConfigurationError(f"alphabet symbols must be single characters: {symbol!r}")
        if len(set(self.symbols)) != len(self.symbols):
            raise ConfigurationError(f"alphabet contains duplicate symbols: {''.join(self.symbols)!r}")

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "Alphabet":
        """Build an alphabet from a string or any iterable of characters."""
        return cls(tuple(symbols))

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols

    def __str__(self) -> str:
        return "".join(self.symbols)


LATIN_LOWERCASE = Alphabet(tuple(string.ascii_lowercase))
