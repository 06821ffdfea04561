#!/usr/bin/env python3
# run_nnf.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Command-line interface for NNF conversion with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from propositional import parse_and_nnf
from propositional.exceptions import ParseError
from utils.logger import configure_logging, get_logger

DEFAULT_FORMULA = "AB&!"


def read_formula_file(filepath: Path) -> str:
    """Read an RPN formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula as string, surrounding whitespace removed

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Nega RPN formula to Negation Normal Form converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_nnf.py "AB&!"
  python run_nnf.py "AB=" -v
  python run_nnf.py -f formula.rpn --debug

Formula syntax (postfix):
  0 1        constants
  A-Z        variables
  !          not
  & | ^ = >  and, or, xor, xnor, imply
        """,
    )

    parser.add_argument(
        "formula",
        nargs="?",
        default=None,
        help=f"RPN formula to convert (default: {DEFAULT_FORMULA})",
    )

    parser.add_argument(
        "-f", "--formula-file", type=Path, help="Read the formula from a file"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--show-variables",
        action="store_true",
        help="List the variables used by the formula",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for NNF conversion.

    Returns:
        Exit code (0 for success, 1 for file errors, 2 for parse errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.formula_file is not None:
            formula = read_formula_file(args.formula_file)
        elif args.formula is not None:
            formula = args.formula
        else:
            formula = DEFAULT_FORMULA

        tree = parse_and_nnf(formula)
        result = str(tree)

        logger.conversion_result(formula, result)

        print(result)
        if args.show_variables:
            print(" ".join(tree.variables or {}) or "-")
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
