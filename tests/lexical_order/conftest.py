"""Pytest fixtures for lexical order tests."""

import pytest

from lexical_order.alphabet import LATIN_LOWERCASE, Alphabet
from lexical_order.graph import ConstraintGraph


@pytest.fixture
def latin_graph():
    """Empty ConstraintGraph over the lowercase Latin alphabet."""
    return ConstraintGraph(LATIN_LOWERCASE)


@pytest.fixture
def small_alphabet():
    """Four-symbol alphabet for compact expectations."""
    return Alphabet.from_symbols("abcd")


@pytest.fixture
def consistent_words():
    """Words sorted under an order where x < a < b < z."""
    return ["ax", "az", "bx", "ba"]


@pytest.fixture
def cyclic_words():
    """Words implying x -> b, a -> b, x -> a and b -> x."""
    return ["ax", "ab", "bx", "ba", "xa"]


@pytest.fixture
def config_file(tmp_path):
    """Factory writing a YAML config file and returning its path."""
    def _write(content: str):
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
