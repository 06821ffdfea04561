# propositional/nnf_transformer.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Expression tree transformer for Negation Normal Form conversion

"""Transforms expression trees into Negation Normal Form (NNF).

In NNF every negation sits directly above a constant or a variable, and the
only binary connectives are AND and OR. The conversion is driven by a table of
one-step rewrite rules, each a pure function implementing a single logical
identity:

    expand_imply:  a > b      ->  !a | b
    expand_xor:    a ^ b      ->  (!a & b) | (a & !b)
    expand_xnor:   a = b      ->  (a & b) | (!a & !b)
    negate_and:    !(a & b)   ->  !a | !b
    negate_or:     !(a | b)   ->  !a & !b
    negate_imply:  !(a > b)   ->  a & !b
    negate_xor:    !(a ^ b)   ->  a = b, expanded
    negate_xnor:   !(a = b)   ->  a ^ b, expanded

The transformer applies the matching rule and normalizes the result again
until only AND, OR and atomic negations remain. Chains of NOT are peeled
iteratively, so their length is not limited by the recursion limit.
"""

from __future__ import annotations
from typing import Callable, Dict
from . import ast_nodes as ast
from .ast_nodes import And, Not, Operator, Or
from .exceptions import TreeInvariantError
from utils.logger import get_logger

Rule = Callable[[ast.Node, ast.Node], ast.Node]


def expand_imply(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """Material implication: a > b is !a | b."""
    return Or(Not(lhs), rhs)


def expand_xor(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """Exclusive or: a ^ b is (!a & b) | (a & !b).

    Both operands occur twice; the second occurrence is a deep copy so the
    result remains a tree.
    """
    return Or(And(Not(lhs), rhs), And(lhs.duplicate(), Not(rhs.duplicate())))


def expand_xnor(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """Biconditional: a = b is (a & b) | (!a & !b)."""
    return Or(And(lhs, rhs), And(Not(lhs.duplicate()), Not(rhs.duplicate())))


def negate_and(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """De Morgan: !(a & b) is !a | !b."""
    return Or(Not(lhs), Not(rhs))


def negate_or(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """De Morgan: !(a | b) is !a & !b."""
    return And(Not(lhs), Not(rhs))


def negate_imply(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """Negated implication: !(a > b) is a & !b."""
    return And(lhs, Not(rhs))


def negate_xor(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """Negated exclusive or is the biconditional."""
    return expand_xnor(lhs, rhs)


def negate_xnor(lhs: ast.Node, rhs: ast.Node) -> ast.Node:
    """Negated biconditional is the exclusive or."""
    return expand_xor(lhs, rhs)


# Binary connectives that are not legal in NNF
_EXPANSIONS: Dict[Operator, Rule] = {
    Operator.IMPLY: expand_imply,
    Operator.XOR: expand_xor,
    Operator.XNOR: expand_xnor,
}

# Negation pushed through each binary connective
_NEGATIONS: Dict[Operator, Rule] = {
    Operator.AND: negate_and,
    Operator.OR: negate_or,
    Operator.IMPLY: negate_imply,
    Operator.XOR: negate_xor,
    Operator.XNOR: negate_xnor,
}

_ATOMS = (ast.Constant, ast.VariableRef)


class NNFTransformer(ast.Visitor):
    """Transforms an expression tree into Negation Normal Form.

    Uses the visitor pattern to rebuild the tree bottom-up. The input tree is
    left untouched; unchanged leaves are reused in the output.
    """

    def transform(self, root: ast.Node) -> ast.Node:
        """Transform the tree rooted at root into NNF.

        Args:
            root: Root node of the tree to transform

        Returns:
            Root of the equivalent NNF tree

        Raises:
            TreeInvariantError: If the tree carries an operator in a position
                the parser never produces
        """
        logger = get_logger()
        logger.debug(f"Starting NNF transformation of {type(root).__name__}")

        result = self._visit(root)

        logger.debug(f"NNF transformation complete: {type(result).__name__}")
        return result

    def _visit(self, node: ast.Node) -> ast.Node:
        return node.accept(self)

    def _apply(self, rule: Rule, n: ast.Node, lhs: ast.Node, rhs: ast.Node) -> ast.Node:
        rewritten = rule(lhs, rhs)
        get_logger().rewrite_applied(rule.__name__, n, rewritten)
        return self._visit(rewritten)

    def visit_constant(self, n: ast.Constant) -> ast.Constant:
        return n

    def visit_variable(self, n: ast.VariableRef) -> ast.VariableRef:
        return n

    def visit_binary(self, n: ast.BinaryExpr) -> ast.Node:
        """Keep AND/OR with normalized operands, expand everything else.

        Args:
            n: Binary node

        Returns:
            NNF equivalent of n
        """
        if n.op in (Operator.AND, Operator.OR):
            return ast.BinaryExpr(n.op, self._visit(n.lhs), self._visit(n.rhs))

        rule = _EXPANSIONS.get(n.op)
        if rule is None:
            raise TreeInvariantError(f"No NNF expansion for binary {n.op.name}")
        return self._apply(rule, n, n.lhs, n.rhs)

    def visit_unary(self, n: ast.UnaryExpr) -> ast.Node:
        """Push a negation down to the atoms.

        Nested negations are peeled two at a time: an odd run leaves one NOT
        over the first non-negation node, an even run leaves none.

        Args:
            n: Negation node

        Returns:
            NNF equivalent of n
        """
        negated = False
        child: ast.Node = n
        while isinstance(child, ast.UnaryExpr):
            if child.op is not Operator.NOT:
                raise TreeInvariantError(f"Unary node carries {child.op.name}")
            child = child.child
            negated = not negated

        if not negated:
            return self._visit(child)

        if isinstance(child, _ATOMS):
            return Not(child)

        if isinstance(child, ast.BinaryExpr):
            rule = _NEGATIONS.get(child.op)
            if rule is not None:
                return self._apply(rule, n, child.lhs, child.rhs)

        raise TreeInvariantError(f"Cannot negate {type(child).__name__} node")


def to_nnf(node: ast.Node) -> ast.Node:
    """Return the Negation Normal Form of node."""
    return NNFTransformer().transform(node)


def is_nnf(node: ast.Node) -> bool:
    """Check that every NOT wraps an atom and only AND/OR connect subtrees.

    Args:
        node: Root of the tree to inspect

    Returns:
        True if node is in Negation Normal Form
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, ast.UnaryExpr):
            if not isinstance(current.child, _ATOMS):
                return False
        elif isinstance(current, ast.BinaryExpr):
            if current.op not in (Operator.AND, Operator.OR):
                return False
            stack.append(current.lhs)
            stack.append(current.rhs)
    return True
