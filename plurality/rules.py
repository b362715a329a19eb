"""
Plurality Rules

Maps a count to the grammatical plural category used to pick a localized
message key. Each language family is a pure function; ``PluralRule`` is the
closed set of families and dispatches to them.

Every rule checks ``one`` first, then ``few``, then ``many`` and falls
through to ``other``. Counts are non-negative integers; normalize them with
``plurality.keys.normalize_count`` before calling in here.

License: Apache 2.0
"""

from collections.abc import Callable
from enum import Enum


class PluralCategory(str, Enum):
    """Plural category tags (CLDR names, subset)."""

    ONE = "one"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @property
    def suffix(self) -> str:
        """Key suffix for this category, e.g. ``_few``."""
        return f"_{self.value}"


def _one_singular(n: int) -> PluralCategory:
    """
    Default rule: 1 is singular, everything else is plural.

    one = 1; other = ...
    """
    if n == 1:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _zero_one_singular(n: int) -> PluralCategory:
    """
    0 and 1 are singular (French).

    one = 0-1; other = ...
    """
    if n == 0 or n == 1:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _no_singular(n: int) -> PluralCategory:
    """Everything is plural (Hungarian, Turkish)."""
    return PluralCategory.OTHER


def _cyrillic(n: int) -> PluralCategory:
    """
    Russian, Ukrainian and related languages.

    one = 1, 21, 31...; few = 2-4, 22-24, 32-34...;
    many = 0, 5-20, 25-30, 35-40...; other = ...
    """
    if n % 10 == 1 and n % 100 != 11:
        return PluralCategory.ONE
    elif 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return PluralCategory.FEW
    elif n % 10 == 0 or 5 <= n % 10 <= 9 or 11 <= n % 100 <= 14:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _czech(n: int) -> PluralCategory:
    """
    Czech and Slovak.

    one = 1; few = 2-4; other = ...
    """
    if n == 1:
        return PluralCategory.ONE
    elif 2 <= n <= 4:
        return PluralCategory.FEW
    return PluralCategory.OTHER


def _polish(n: int) -> PluralCategory:
    """
    Polish.

    one = 1; few = 2-4, 22-24, 32-34...;
    many = 0, 5-21, 25-31, 35-41...; other = ...
    """
    if n == 1:
        return PluralCategory.ONE
    elif 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return PluralCategory.FEW
    elif 0 <= n % 10 <= 1 or 5 <= n % 10 <= 9 or 12 <= n % 100 <= 14:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def _romanian(n: int) -> PluralCategory:
    """
    Romanian and Moldavian.

    one = 1; few = 0, 2-19, 101-119...; other = ...
    """
    if n == 1:
        return PluralCategory.ONE
    elif n == 0 or 1 <= n % 100 <= 19:
        return PluralCategory.FEW
    return PluralCategory.OTHER


class PluralRule(Enum):
    """
    Plurality rule families.

    Members are stateless, so the same member is handed out to every caller
    and shared freely between threads.

    Example:
        >>> PluralRule.CYRILLIC.suffix(22)
        '_few'
        >>> PluralRule.ONE_SINGULAR.category(1)
        <PluralCategory.ONE: 'one'>
    """

    ONE_SINGULAR = "one_singular"
    ZERO_ONE_SINGULAR = "zero_one_singular"
    NO_SINGULAR = "no_singular"
    CYRILLIC = "cyrillic"
    CZECH = "czech"
    POLISH = "polish"
    ROMANIAN = "romanian"

    def category(self, n: int) -> PluralCategory:
        """
        Get the plural category for a count.

        Args:
            n: Non-negative count

        Returns:
            Plural category member
        """
        return RULE_FUNCTIONS[self](n)

    def suffix(self, n: int) -> str:
        """
        Get the key suffix for a count ('_one', '_few', '_many' or '_other').

        Args:
            n: Non-negative count

        Returns:
            Suffix to append to a base message key
        """
        return self.category(n).suffix

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories this rule can produce, in check order."""
        return RULE_CATEGORIES[self]

    @classmethod
    def from_name(cls, name: str) -> "PluralRule":
        """
        Look up a rule by value or member name, case-insensitively.

        Raises:
            ValueError: If no rule has that name
        """
        key = name.strip().lower().replace("-", "_")
        for rule in cls:
            if key in (rule.value, rule.name.lower()):
                return rule
        raise ValueError(f"Unknown plurality rule: {name!r}")


RULE_FUNCTIONS: dict[PluralRule, Callable[[int], PluralCategory]] = {
    PluralRule.ONE_SINGULAR: _one_singular,
    PluralRule.ZERO_ONE_SINGULAR: _zero_one_singular,
    PluralRule.NO_SINGULAR: _no_singular,
    PluralRule.CYRILLIC: _cyrillic,
    PluralRule.CZECH: _czech,
    PluralRule.POLISH: _polish,
    PluralRule.ROMANIAN: _romanian,
}

_ONE_OTHER = (PluralCategory.ONE, PluralCategory.OTHER)
_ONE_FEW_OTHER = (PluralCategory.ONE, PluralCategory.FEW, PluralCategory.OTHER)
_ONE_FEW_MANY_OTHER = (
    PluralCategory.ONE,
    PluralCategory.FEW,
    PluralCategory.MANY,
    PluralCategory.OTHER,
)

RULE_CATEGORIES: dict[PluralRule, tuple[PluralCategory, ...]] = {
    PluralRule.ONE_SINGULAR: _ONE_OTHER,
    PluralRule.ZERO_ONE_SINGULAR: _ONE_OTHER,
    PluralRule.NO_SINGULAR: (PluralCategory.OTHER,),
    PluralRule.CYRILLIC: _ONE_FEW_MANY_OTHER,
    PluralRule.CZECH: _ONE_FEW_OTHER,
    PluralRule.POLISH: _ONE_FEW_MANY_OTHER,
    PluralRule.ROMANIAN: _ONE_FEW_OTHER,
}
