"""
Message key helpers.

Compose category-specific lookup keys ("STR_ITEMS" -> "STR_ITEMS_few") for
the string catalog. Counts are normalized here, at the boundary, so the
rules themselves only ever see non-negative integers.
"""

import numbers

from plurality.exceptions import InvalidCountError
from plurality.registry import PluralityRegistry, get_registry


def normalize_count(count) -> int:
    """
    Normalize a count to a non-negative integer.

    Negative counts are folded to their absolute value; integral floats
    and decimals (``3.0``, ``Decimal("3")``) are accepted.

    Args:
        count: Count of items

    Returns:
        Non-negative integer count

    Raises:
        InvalidCountError: For booleans, complex, fractional or non-numeric values
    """
    if (
        isinstance(count, bool)
        or not isinstance(count, numbers.Number)
        or (isinstance(count, numbers.Complex) and not isinstance(count, numbers.Real))
    ):
        raise InvalidCountError(f"Count must be a number, got {count!r}")
    if isinstance(count, numbers.Integral):
        return abs(int(count))
    try:
        whole = int(count)
    except (ValueError, OverflowError) as e:
        raise InvalidCountError(f"Count must be a whole number, got {count!r}") from e
    if whole != count:
        raise InvalidCountError(f"Count must be a whole number, got {count!r}")
    return abs(whole)


def plural_key(
    base_key: str, language: str, count, registry: PluralityRegistry | None = None
) -> str:
    """
    Build the category-specific message key for a count.

    Args:
        base_key: Base message key (e.g. 'STR_ITEMS')
        language: Language identifier
        count: Count of items
        registry: Registry to use (process-wide registry if None)

    Returns:
        Key with the plural suffix appended

    Example:
        >>> plural_key("STR_ITEMS", "ru", 3)
        'STR_ITEMS_few'
    """
    registry = registry or get_registry()
    return base_key + registry.create(language).suffix(normalize_count(count))


def plural_keys(
    base_key: str, language: str, registry: PluralityRegistry | None = None
) -> list[str]:
    """All keys a catalog should define for ``base_key`` in a language."""
    registry = registry or get_registry()
    return [base_key + category.suffix for category in registry.create(language).categories]
