"""Infer a symbol ordering from a list of words sorted under it."""

from .alphabet import Alphabet, LATIN_LOWERCASE
from .exceptions import (
    LexicalOrderError,
    PrefixContradiction,
    ConstraintCycle,
    ConfigurationError,
)
from .extraction import (
    Constraint,
    compare_pair,
    iter_constraints,
    extract_constraints,
    build_graph,
)
from .graph import ConstraintGraph
from .resolution import OrderResolver, Traversal, resolve_order
from .config import (
    SorterConfig,
    DEFAULT_CONFIG,
    load_config,
    resolve_traversal,
)
from .sorter import (
    IMPOSSIBLE,
    FailureKind,
    OrderResult,
    LexicalOrderSorter,
    infer_order,
)

__all__ = [
    "Alphabet",
    "LATIN_LOWERCASE",
    "LexicalOrderError",
    "PrefixContradiction",
    "ConstraintCycle",
    "ConfigurationError",
    "Constraint",
    "compare_pair",
    "iter_constraints",
    "extract_constraints",
    "build_graph",
    "ConstraintGraph",
    "OrderResolver",
    "Traversal",
    "resolve_order",
    "SorterConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "resolve_traversal",
    "IMPOSSIBLE",
    "FailureKind",
    "OrderResult",
    "LexicalOrderSorter",
    "infer_order",
]

__version__ = "0.1.0"
