"""
Plurality Rule Registry

Maps language identifiers to plurality rules. Identifiers are matched
exactly (case-sensitive, region subtag included); anything not listed gets
the English-style ``ONE_SINGULAR`` rule.

License: Apache 2.0
"""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from plurality.rules import PluralRule

logger = logging.getLogger(__name__)

DEFAULT_RULE = PluralRule.ONE_SINGULAR

# TODO: Check that the remaining supported languages are fine with the
# English rules before adding them here.
LANGUAGE_RULES: Mapping[str, PluralRule] = MappingProxyType(
    {
        "fr": PluralRule.ZERO_ONE_SINGULAR,
        "hu-HU": PluralRule.NO_SINGULAR,
        "tr-TR": PluralRule.NO_SINGULAR,
        "cs-CZ": PluralRule.CZECH,
        "pl-PL": PluralRule.POLISH,
        "ro": PluralRule.ROMANIAN,
        "ru": PluralRule.CYRILLIC,
        "uk": PluralRule.CYRILLIC,
    }
)


class PluralityRegistry:
    """
    Immutable language -> plurality rule mapping.

    The mapping is built once in the constructor from ``LANGUAGE_RULES`` plus
    any overrides and is read-only afterwards, so lookups need no locking.

    Example:
        >>> registry = PluralityRegistry()
        >>> registry.create("ru").suffix(3)
        '_few'
        >>> registry.create("en").suffix(3)
        '_other'
    """

    def __init__(self, overrides: Mapping[str, PluralRule] | None = None):
        """
        Initialize registry.

        Args:
            overrides: Extra or replacement entries applied on top of the
                built-in table (e.g. from ``load_rule_overrides``)
        """
        self._rules = MappingProxyType(self._populate(overrides))

    @staticmethod
    def _populate(overrides: Mapping[str, PluralRule] | None) -> dict[str, PluralRule]:
        rules = dict(LANGUAGE_RULES)
        if overrides:
            rules.update(overrides)
        logger.debug(
            f"Populated plurality registry: {len(rules)} languages "
            f"({len(overrides or {})} overrides)"
        )
        return rules

    @property
    def rules(self) -> Mapping[str, PluralRule]:
        """Read-only view of the language -> rule mapping."""
        return self._rules

    def create(self, language: str) -> PluralRule:
        """
        Get the plurality rule for a language.

        Never fails: unregistered identifiers fall back to ``DEFAULT_RULE``.

        Args:
            language: Language identifier (e.g. 'fr', 'pl-PL')

        Returns:
            Plurality rule for the language
        """
        rule = self._rules.get(language)
        if rule is None:
            logger.debug(f"No plurality rule for '{language}', using {DEFAULT_RULE.value}")
            return DEFAULT_RULE
        return rule

    def supports_language(self, language: str) -> bool:
        """
        Check if a language has an explicit plurality rule.

        Args:
            language: Language identifier

        Returns:
            True if the language is registered
        """
        return language in self._rules

    def languages(self) -> list[str]:
        """Registered language identifiers, sorted."""
        return sorted(self._rules)


# Process-wide registry, built on first use
_registry: PluralityRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> PluralityRegistry:
    """
    Get or create the process-wide registry.

    Only the built-in table is used here, so creation never touches files or
    the environment. Safe to call from several threads: the registry is
    populated exactly once.

    Returns:
        PluralityRegistry instance
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = PluralityRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry (useful for testing)."""
    global _registry
    with _registry_lock:
        _registry = None


def create(language: str) -> PluralRule:
    """
    Get the plurality rule for a language from the process-wide registry.

    Args:
        language: Language identifier (e.g. 'ru', 'cs-CZ')

    Returns:
        Plurality rule; ``PluralRule.ONE_SINGULAR`` for unknown languages

    Example:
        >>> create("pl-PL").suffix(22)
        '_few'
    """
    return get_registry().create(language)
