"""
Custom exceptions for the plurality package.

Rule lookups never raise; these only come out of configuration loading and
count normalization at the caller boundary.
"""


class PluralityError(Exception):
    """Base exception for plurality errors."""
    pass


class ConfigError(PluralityError):
    """Raised when a configuration file cannot be used."""
    pass


class ValidationError(ConfigError):
    """Raised when rule override content is invalid."""
    pass


class InvalidCountError(PluralityError, ValueError):
    """Raised when a count cannot be normalized to a non-negative integer."""
    pass
