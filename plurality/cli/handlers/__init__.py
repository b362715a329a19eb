"""Plurality CLI Handlers.

Modular command handlers for the plurality CLI.
"""

from plurality.cli.handlers.lookup import LookupHandler, add_key_parser, add_suffix_parser
from plurality.cli.handlers.rules import RulesHandler, add_rules_parser, add_table_parser

__all__ = [
    # Lookup
    "LookupHandler",
    "add_key_parser",
    "add_suffix_parser",
    # Rules
    "RulesHandler",
    "add_rules_parser",
    "add_table_parser",
]
