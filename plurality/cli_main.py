"""Plurality CLI - Main entry point.

Builds the registry (with any rule overrides), then hands the parsed
arguments to the PluralityCLI facade.
"""

import logging
import sys
from pathlib import Path

from plurality import __version__
from plurality.cli import PluralityCLI
from plurality.config import load_rule_overrides, log_level, rules_file_from_env
from plurality.console import console, status_print
from plurality.exceptions import PluralityError
from plurality.registry import PluralityRegistry, get_registry

logger = logging.getLogger(__name__)


def _build_registry(rules_file: str | None) -> PluralityRegistry:
    """Use the process-wide registry unless override rules are configured."""
    path = Path(rules_file).expanduser() if rules_file else rules_file_from_env()
    if not path:
        return get_registry()
    return PluralityRegistry(load_rule_overrides(path))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the plurality CLI."""
    parser = PluralityCLI.create_parser()
    parser.add_argument("--version", "-V", action="version", version=f"plurality {__version__}")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        cli = PluralityCLI(registry=_build_registry(args.rules_file), verbose=args.verbose)
        result = cli.dispatch(args)
        return result if result is not None else 0
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        return 130
    except PluralityError as e:
        status_print(f"Error: {e}", "error")
        logger.debug("Command failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
