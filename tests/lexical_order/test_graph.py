"""Tests for ConstraintGraph and Alphabet."""

import string

import pytest

from lexical_order.alphabet import LATIN_LOWERCASE, Alphabet
from lexical_order.config import SorterConfig
from lexical_order.exceptions import ConfigurationError
from lexical_order.graph import ConstraintGraph


class TestAlphabet:
    """Test Alphabet validation and behavior."""

    def test_latin_lowercase_default(self):
        assert str(LATIN_LOWERCASE) == string.ascii_lowercase
        assert len(LATIN_LOWERCASE) == 26
        assert "q" in LATIN_LOWERCASE
        assert "Q" not in LATIN_LOWERCASE

    def test_from_symbols_preserves_order(self):
        alphabet = Alphabet.from_symbols("zyx")
        assert list(alphabet) == ["z", "y", "x"]

    def test_empty_alphabet_rejected(self):
        with pytest.raises(ConfigurationError, match="at least one symbol"):
            Alphabet.from_symbols("")

    def test_duplicate_symbols_rejected(self):
        with pytest.raises(ConfigurationError, match="duplicate"):
            Alphabet.from_symbols("abca")

    def test_multi_character_symbols_rejected(self):
        with pytest.raises(ConfigurationError, match="single characters"):
            Alphabet(("a", "bc"))

    def test_list_symbols_stored_as_tuple(self):
        """A list argument is frozen so the alphabet stays hashable."""
        alphabet = Alphabet(["a", "b"])  # type: ignore[arg-type]

        assert alphabet.symbols == ("a", "b")
        assert hash(alphabet) == hash(Alphabet(("a", "b")))
        config = SorterConfig(alphabet=alphabet)
        assert hash(config) == hash(SorterConfig(alphabet=Alphabet.from_symbols("ab")))


class TestConstraintGraph:
    """Test edge accumulation and the symbol universe."""

    def test_new_graph_has_full_universe_and_no_edges(self, latin_graph):
        assert latin_graph.universe == tuple(string.ascii_lowercase)
        assert dict(latin_graph.edges) == {}
        assert len(latin_graph) == 0

    def test_add_edge_appends_in_insertion_order(self, latin_graph):
        latin_graph.add_edge("b", "c")
        latin_graph.add_edge("a", "z")
        latin_graph.add_edge("b", "a")

        assert list(latin_graph.edges) == ["b", "a"]
        assert latin_graph.successors("b") == ("c", "a")
        assert latin_graph.successors("z") == ()

    def test_duplicate_edges_are_kept(self, latin_graph):
        latin_graph.add_edge("a", "b")
        latin_graph.add_edge("a", "b")

        assert latin_graph.successors("a") == ("b", "b")
        assert len(latin_graph) == 2

    def test_in_alphabet_symbols_do_not_grow_universe(self, latin_graph):
        latin_graph.add_edge("m", "n")
        assert len(latin_graph.universe) == 26

    def test_foreign_symbols_join_universe_after_alphabet(self, small_alphabet):
        graph = ConstraintGraph(small_alphabet)
        graph.add_edge("z", "a")
        graph.add_edge("b", "y")

        assert graph.universe == ("a", "b", "c", "d", "z", "y")

    def test_edges_view_is_read_only(self, latin_graph):
        latin_graph.add_edge("a", "b")
        with pytest.raises(TypeError):
            latin_graph.edges["c"] = ["d"]  # type: ignore[index]
