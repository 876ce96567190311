"""Configuration for lexical order inference.

A configuration names the symbol universe and, optionally, the traversal
strategy. It can be built in code or loaded from a YAML file of the form::

    ordering:
      alphabet: abcdefghijklmnopqrstuvwxyz
      traversal: iterative
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import ruamel.yaml

from .alphabet import LATIN_LOWERCASE, Alphabet
from .exceptions import ConfigurationError
from .resolution import Traversal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SorterConfig:
    """Symbol universe plus traversal choice (None lets the resolver decide)."""
    alphabet: Alphabet = field(default=LATIN_LOWERCASE)
    traversal: Optional[Traversal] = None


DEFAULT_CONFIG = SorterConfig()


def parse_traversal(value: Any) -> Traversal:
    """Map a raw config value onto a Traversal.

    Raises:
        ConfigurationError: If the value names no known traversal.
    """
    try:
        return Traversal(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(t.value for t in Traversal)
        raise ConfigurationError(f"unknown traversal {value!r} (expected one of: {valid})") from None


def resolve_traversal(
    global_default: Optional[Traversal] = None,
    config_override: Optional[Traversal] = None,
    runtime_override: Optional[Traversal] = None,
) -> Optional[Traversal]:
    """Resolve the effective traversal using a precedence chain.

    Precedence (highest to lowest):
    1. Runtime override (argument passed to the sorter)
    2. Config file value
    3. Global default (None: chosen from the universe size)

    Examples:
        >>> resolve_traversal()
        >>> resolve_traversal(config_override=Traversal.ITERATIVE)
        <Traversal.ITERATIVE: 'iterative'>
        >>> resolve_traversal(Traversal.ITERATIVE, runtime_override=Traversal.RECURSIVE)
        <Traversal.RECURSIVE: 'recursive'>
    """
    if runtime_override is not None:
        return runtime_override
    if config_override is not None:
        return config_override
    return global_default


def config_from_mapping(data: Any) -> SorterConfig:
    """Build a SorterConfig from the ``ordering`` section of a config document.

    Raises:
        ConfigurationError: If the section or one of its values is invalid.
    """
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigurationError("'ordering' section must be a mapping")

    alphabet = LATIN_LOWERCASE
    raw_alphabet = data.get("alphabet")
    if raw_alphabet is not None:
        if not isinstance(raw_alphabet, (str, list)):
            raise ConfigurationError("'alphabet' must be a string or a list of symbols")
        alphabet = Alphabet.from_symbols(str(symbol) for symbol in raw_alphabet)

    traversal = None
    if data.get("traversal") is not None:
        traversal = parse_traversal(data["traversal"])

    return SorterConfig(alphabet=alphabet, traversal=traversal)


def load_config(config_path: Path) -> SorterConfig:
    """Load a SorterConfig from a YAML file.

    A missing file, malformed YAML or invalid values fall back to
    DEFAULT_CONFIG with a warning; this function never raises for bad input.

    Examples:
        >>> from pathlib import Path
        >>> load_config(Path("/nonexistent/config.yaml")) == DEFAULT_CONFIG
        True
    """
    if not config_path.exists():
        return DEFAULT_CONFIG

    yaml = ruamel.yaml.YAML(typ="safe")
    try:
        with config_path.open(encoding="utf-8") as f:
            document = yaml.load(f)
    except (OSError, UnicodeDecodeError, ruamel.yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return DEFAULT_CONFIG

    if not isinstance(document, dict) or "ordering" not in document:
        return DEFAULT_CONFIG

    try:
        return config_from_mapping(document["ordering"])
    except ConfigurationError as exc:
        logger.warning("Ignoring invalid config %s: %s", config_path, exc)
        return DEFAULT_CONFIG
