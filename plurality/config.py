"""
Configuration for the plurality tools.

Settings come from ``PLURALITY_*`` environment variables; extra language
rules come from a YAML override file:

    rules:
      sk-SK: czech
      be: cyrillic

The top-level ``rules:`` key may be left out. Identifiers that YAML reads as
booleans (``no``, ``on``, ``off``, ``yes``) must be quoted: ``"no": one_singular``.
"""

import logging
import os
from pathlib import Path

import yaml

from plurality.exceptions import ConfigError, ValidationError
from plurality.rules import PluralRule

logger = logging.getLogger(__name__)

ENV_RULES_FILE = "PLURALITY_RULES_FILE"
ENV_LANGUAGE = "PLURALITY_LANGUAGE"
ENV_LOG_LEVEL = "PLURALITY_LOG_LEVEL"

DEFAULT_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "WARNING"


def load_rule_overrides(path: str | Path) -> dict[str, PluralRule]:
    """
    Load language -> rule overrides from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Mapping of language identifier to plurality rule

    Raises:
        ConfigError: If the file cannot be read
        ValidationError: If the content is not a valid rule mapping
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read rules file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if isinstance(data, dict) and "rules" in data:
        data = data["rules"] or {}
    if not isinstance(data, dict):
        raise ValidationError(f"Rules file {path} must contain a mapping of language to rule")

    overrides: dict[str, PluralRule] = {}
    for language, rule_name in data.items():
        if isinstance(language, bool):
            raise ValidationError(
                f"Language identifier in {path} was read as the boolean {language}; "
                "quote identifiers such as 'no', 'on' or 'yes'"
            )
        if not isinstance(language, str) or not language:
            raise ValidationError(f"Invalid language identifier in {path}: {language!r}")
        if not isinstance(rule_name, str):
            raise ValidationError(f"Rule for '{language}' must be a name, got {rule_name!r}")
        try:
            overrides[language] = PluralRule.from_name(rule_name)
        except ValueError as e:
            raise ValidationError(f"{path}: {e}") from e

    logger.debug(f"Loaded {len(overrides)} rule overrides from {path}")
    return overrides


def rules_file_from_env() -> Path | None:
    """Rule override file named by ``PLURALITY_RULES_FILE``, if any."""
    value = os.environ.get(ENV_RULES_FILE, "").strip()
    return Path(value).expanduser() if value else None


def default_language() -> str:
    """Default language for CLI commands."""
    return os.environ.get(ENV_LANGUAGE, "").strip() or DEFAULT_LANGUAGE


def log_level(verbose: bool = False) -> int:
    """Logging level from ``--verbose`` or ``PLURALITY_LOG_LEVEL``."""
    if verbose:
        return logging.DEBUG
    level_name = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, level_name, None)
    return level if isinstance(level, int) else logging.WARNING
