"""Plurality CLI - Main package.

This module provides the PluralityCLI facade, which builds the argument
parser and delegates each command to its handler.
"""

import argparse

from plurality.cli.handlers import (
    LookupHandler,
    RulesHandler,
    add_key_parser,
    add_rules_parser,
    add_suffix_parser,
    add_table_parser,
)
from plurality.registry import PluralityRegistry, get_registry


class PluralityCLI:
    """Facade class for the plurality CLI - delegates to modular handlers."""

    def __init__(self, registry: PluralityRegistry | None = None, verbose: bool = False):
        self.verbose = verbose
        self.registry = registry or get_registry()
        # Initialize all handlers
        self._lookup_handler = LookupHandler(self.registry, verbose=verbose)
        self._rules_handler = RulesHandler(self.registry, verbose=verbose)

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the argument parser with all subcommands."""
        parser = argparse.ArgumentParser(
            prog="plurality",
            description="Plural category lookup for localized message keys",
        )
        parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
        parser.add_argument(
            "--rules-file",
            metavar="PATH",
            help="YAML file with extra language rules (default: $PLURALITY_RULES_FILE)",
        )

        subparsers = parser.add_subparsers(dest="command", help="Available commands")
        add_suffix_parser(subparsers)
        add_key_parser(subparsers)
        add_table_parser(subparsers)
        add_rules_parser(subparsers)
        return parser

    # Delegate methods to handlers

    def suffix(self, args: argparse.Namespace) -> int:
        """Handle suffix command."""
        return self._lookup_handler.suffix(args)

    def key(self, args: argparse.Namespace) -> int:
        """Handle key command."""
        return self._lookup_handler.key(args)

    def table(self, args: argparse.Namespace) -> int:
        """Handle table command."""
        return self._rules_handler.table(args)

    def rules(self, args: argparse.Namespace) -> int:
        """Handle rules command."""
        return self._rules_handler.rules(args)

    def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch parsed arguments to the matching command."""
        handler = getattr(self, args.command.replace("-", "_"), None)
        if handler is None:
            raise ValueError(f"Unknown command: {args.command}")
        return handler(args)


__all__ = ["PluralityCLI"]
