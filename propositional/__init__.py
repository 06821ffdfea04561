# propositional/__init__.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Formula parsing and transformation components for RPN propositional logic

"""RPN propositional formula parsing and Negation Normal Form conversion.

This module turns reverse-Polish formulas over the alphabet
``0 1 A-Z ! & | ^ = >`` into expression trees and rewrites them into
Negation Normal Form (NNF), where negation applies only to constants and
variables and the only binary connectives are AND and OR.

Core Functions:
    parse: Converts formula strings into a Tree
    parse_and_nnf: Complete parsing and NNF transformation pipeline
    negation_normal_form: RPN rendering of the NNF of a formula

Token Alphabet:
    - 0, 1: Boolean constants
    - A to Z: variables, one shared record per letter
    - !: NOT (unary)
    - &, |, ^, =, >: AND, OR, XOR, XNOR, IMPLY (binary)

Example:
    >>> from propositional import negation_normal_form
    >>> negation_normal_form("AB&!")
    'A!B!|'
"""

from .exceptions import (
    EmptyInputError,
    InvalidTokenError,
    MalformedExpressionError,
    ParseError,
    TreeInvariantError,
)
from .ast_nodes import Tree
from .tree_builder import _RPNTreeBuilder
from .nnf_transformer import NNFTransformer, is_nnf, to_nnf
from utils.logger import get_logger


def parse(source: str) -> Tree:
    """Parse an RPN formula string into a Tree.

    Uses a fresh builder for each invocation, so the variable table is never
    shared between two parses.

    Args:
        source: RPN formula string to parse

    Returns:
        Tree holding the root node and the table of variables used

    Raises:
        EmptyInputError: Source is empty
        InvalidTokenError: Source contains a character outside the alphabet
        MalformedExpressionError: Operators and operands do not balance

    Example:
        >>> tree = parse("AB&")
        >>> sorted(tree.variables)
        ['A', 'B']
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    builder = _RPNTreeBuilder()

    try:
        result = builder.parse(source)
        logger.debug(
            f"Formula parsed successfully into tree with root: {type(result.root).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_and_nnf(source: str) -> Tree:
    """Parse formula string and transform it to Negation Normal Form.

    The returned tree keeps the variable table of the parse, so the shared
    Variable records remain reachable for later assignment.

    Args:
        source: RPN formula string to parse and transform

    Returns:
        Tree whose root is the NNF of the parsed formula

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to NNF: {source}")

    tree = parse(source)
    logger.debug("Initial parsing completed, beginning NNF transformation")

    nnf_root = NNFTransformer().transform(tree.root)

    logger.debug(f"NNF transformation completed, result: {nnf_root}")
    return Tree(nnf_root, tree.variables)


def negation_normal_form(source: str) -> str:
    """Return the RPN rendering of the NNF of source.

    Example:
        >>> negation_normal_form("AB>")
        'A!B|'
    """
    return str(parse_and_nnf(source))


__all__ = [
    "parse",
    "parse_and_nnf",
    "negation_normal_form",
    "to_nnf",
    "is_nnf",
    "Tree",
    "ParseError",
    "EmptyInputError",
    "InvalidTokenError",
    "MalformedExpressionError",
    "TreeInvariantError",
]

__version__ = "1.0.0"
__description__ = "RPN propositional formula parsing and NNF transformation components"
