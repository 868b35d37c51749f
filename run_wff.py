#!/usr/bin/env python3
# run_wff.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Command-line interface for formula parsing, matching and substitution

import sys
import argparse
from typing import List, Optional

from wff import (
    GrammarError,
    LexError,
    create,
    enumerate_subformulas,
    format_parse_tree,
    subformula_tree,
    unique_subformulas,
)
from rewrite import RewriteError, match_groups, substitute
from utils.logger import LogLevel, get_logger


def configure_logging_for_cli(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the CLI.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    elif verbose:
        logger.set_level(LogLevel.INFO)
    else:
        logger.set_level(LogLevel.WARNING)


def run_parse(args: argparse.Namespace) -> int:
    """Print a formula's canonical form and, on request, its structure."""
    formula = create(args.formula)
    print(formula.render())

    if args.tree:
        print(format_parse_tree(formula))

    if args.subformula_tree:
        print(subformula_tree(formula).format())

    if args.subformulas or args.unique:
        subformulas = unique_subformulas(formula) if args.unique else enumerate_subformulas(formula)
        for i, sub in enumerate(subformulas):
            print(f"{i}: {sub.render()}")

    return 0


def run_match(args: argparse.Namespace) -> int:
    """Print every occurrence of a pattern with its bindings."""
    formula = create(args.formula)
    groups = match_groups(formula, args.pattern)

    print(f"{len(groups)} occurrence(s) of '{args.pattern}' in '{formula.render()}'")
    for i, group in enumerate(groups):
        print(f"{i}: {group.root}")
        for binding in group.bindings:
            print(f"    {binding}")

    return 0


def run_substitute(args: argparse.Namespace) -> int:
    """Rewrite one occurrence and print the resulting formula."""
    formula = create(args.formula)
    substitute(formula, args.search, args.replace, args.index)
    print(formula.render())
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Wffkit propositional formula parser and rewriter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_wff.py parse "((p v q) => ~r)" --tree
  python run_wff.py parse "((p ^ q) v (p ^ q))" --unique
  python run_wff.py match "((p ^ q) ^ (r ^ s))" "(a ^ b)"
  python run_wff.py substitute "(p ^ q)" "(a ^ b)" "(b ^ a)" -i 0

Formula syntax:
  propositions  single letters except 'v'
  connectives   ~ (not), ^ (and), v (or), => (implies), <=> (iff)
  binary connectives are always parenthesized: (p ^ q)
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse and render a formula")
    parse_cmd.add_argument("formula", help="Formula string")
    parse_cmd.add_argument("--tree", action="store_true", help="Print the parse tree")
    parse_cmd.add_argument(
        "--subformula-tree", action="store_true", help="Print the tree of subformulas"
    )
    parse_cmd.add_argument(
        "--subformulas", action="store_true", help="List every subformula occurrence"
    )
    parse_cmd.add_argument(
        "--unique", action="store_true", help="List distinct subformulas only"
    )
    parse_cmd.set_defaults(handler=run_parse)

    match_cmd = subparsers.add_parser("match", help="Find occurrences of a pattern")
    match_cmd.add_argument("formula", help="Formula string")
    match_cmd.add_argument("pattern", help="Pattern string; propositions are variables")
    match_cmd.set_defaults(handler=run_match)

    sub_cmd = subparsers.add_parser("substitute", help="Rewrite one pattern occurrence")
    sub_cmd.add_argument("formula", help="Formula string")
    sub_cmd.add_argument("search", help="Search pattern")
    sub_cmd.add_argument("replace", help="Replacement pattern")
    sub_cmd.add_argument(
        "-i", "--index", type=int, default=0, help="Zero-based occurrence index (default: 0)"
    )
    sub_cmd.set_defaults(handler=run_substitute)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the wff command line.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_cli(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        return args.handler(args)

    except LexError as e:
        logger.error(f"Lexical error: {e}")
        return 1

    except GrammarError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except RewriteError as e:
        logger.error(f"Substitution error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
