"""Suffix and key command handlers for the plurality CLI."""

import argparse

from plurality.console import console
from plurality.keys import normalize_count, plural_key
from plurality.registry import PluralityRegistry


class LookupHandler:
    """Handler for suffix and key commands."""

    def __init__(self, registry: PluralityRegistry, verbose: bool = False):
        self.registry = registry
        self.verbose = verbose

    def suffix(self, args: argparse.Namespace) -> int:
        """Print the plural suffix for each count."""
        rule = self.registry.create(args.language)
        for count in args.counts:
            n = normalize_count(count)
            line = f"{n}\t{rule.suffix(n)}"
            if self.verbose:
                line += f"\t({rule.value})"
            console.print(line, highlight=False, markup=False)
        return 0

    def key(self, args: argparse.Namespace) -> int:
        """Print the category-specific message key."""
        console.print(
            plural_key(args.base_key, args.language, args.count, registry=self.registry),
            highlight=False,
            markup=False,
        )
        return 0


def add_suffix_parser(subparsers) -> argparse.ArgumentParser:
    """Add suffix parser to subparsers."""
    suffix_parser = subparsers.add_parser("suffix", help="Show the plural suffix for counts")
    suffix_parser.add_argument("language", help="Language identifier (e.g. ru, pl-PL)")
    suffix_parser.add_argument("counts", nargs="+", type=int, metavar="COUNT", help="Counts")
    return suffix_parser


def add_key_parser(subparsers) -> argparse.ArgumentParser:
    """Add key parser to subparsers."""
    key_parser = subparsers.add_parser("key", help="Build the plural message key for a count")
    key_parser.add_argument("base_key", help="Base message key (e.g. STR_ITEMS)")
    key_parser.add_argument("language", help="Language identifier")
    key_parser.add_argument("count", type=int, help="Count of items")
    return key_parser
