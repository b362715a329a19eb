"""Rules and table command handlers for the plurality CLI."""

import argparse

from rich.table import Table

from plurality.config import default_language
from plurality.console import console
from plurality.registry import DEFAULT_RULE, PluralityRegistry
from plurality.rules import PluralCategory

CATEGORY_COLORS = {
    PluralCategory.ONE: "green",
    PluralCategory.FEW: "yellow",
    PluralCategory.MANY: "magenta",
    PluralCategory.OTHER: "cyan",
}


class RulesHandler:
    """Handler for rules and table commands."""

    def __init__(self, registry: PluralityRegistry, verbose: bool = False):
        self.registry = registry
        self.verbose = verbose

    def rules(self, args: argparse.Namespace) -> int:
        """List registered languages and their rules."""
        table = Table(title="Plurality Rules")
        table.add_column("Language", style="bold")
        table.add_column("Rule")
        table.add_column("Categories")

        for language in self.registry.languages():
            rule = self.registry.create(language)
            table.add_row(language, rule.value, ", ".join(c.value for c in rule.categories))
        table.add_row(
            "*",
            DEFAULT_RULE.value,
            ", ".join(c.value for c in DEFAULT_RULE.categories),
            style="dim",
        )

        console.print(table)
        return 0

    def table(self, args: argparse.Namespace) -> int:
        """Show the category of every count in a range."""
        language = args.language or default_language()
        if args.start < 0 or args.stop < args.start:
            console.print(f"Invalid range: {args.start}..{args.stop}", style="yellow")
            return 1

        rule = self.registry.create(language)
        table = Table(title=f"{language} ({rule.value})")
        table.add_column("Count", justify="right")
        table.add_column("Category")
        table.add_column("Suffix")

        for n in range(args.start, args.stop + 1):
            category = rule.category(n)
            color = CATEGORY_COLORS[category]
            table.add_row(str(n), f"[{color}]{category.value}[/{color}]", category.suffix)

        console.print(table)
        return 0


def add_rules_parser(subparsers) -> argparse.ArgumentParser:
    """Add rules parser to subparsers."""
    rules_parser = subparsers.add_parser("rules", help="List languages with explicit rules")
    return rules_parser


def add_table_parser(subparsers) -> argparse.ArgumentParser:
    """Add table parser to subparsers."""
    table_parser = subparsers.add_parser("table", help="Show categories for a range of counts")
    table_parser.add_argument(
        "language", nargs="?", help="Language identifier (default: $PLURALITY_LANGUAGE or en)"
    )
    table_parser.add_argument("--start", type=int, default=0, help="First count (default: 0)")
    table_parser.add_argument("--stop", type=int, default=30, help="Last count (default: 30)")
    return table_parser
