"""Plural category lookup for localized message keys."""

from .exceptions import ConfigError, InvalidCountError, PluralityError, ValidationError
from .keys import normalize_count, plural_key, plural_keys
from .registry import (
    DEFAULT_RULE,
    LANGUAGE_RULES,
    PluralityRegistry,
    create,
    get_registry,
    reset_registry,
)
from .rules import PluralCategory, PluralRule

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DEFAULT_RULE",
    "InvalidCountError",
    "LANGUAGE_RULES",
    "PluralCategory",
    "PluralRule",
    "PluralityError",
    "PluralityRegistry",
    "ValidationError",
    "create",
    "get_registry",
    "normalize_count",
    "plural_key",
    "plural_keys",
    "reset_registry",
]
