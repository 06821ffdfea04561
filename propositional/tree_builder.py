# propositional/tree_builder.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Stack-based shift/reduce construction of expression trees from RPN tokens

"""Expression tree construction from RPN token streams.

The builder performs a single left-to-right scan over the tokens produced by
RPNLexer. Operands are shifted onto a stack; each operator reduces the top one
(NOT) or two (binary connectives) entries into a new node. Postfix order means
the operand closest to the top of the stack is the right-hand side.

Variables are deduplicated per parse: all occurrences of a letter share one
Variable record.
"""

from typing import Dict, List, Optional

from .lexer import RPNLexer
from .ast_nodes import (
    BinaryExpr,
    Constant,
    Node,
    Operator,
    Tree,
    UnaryExpr,
    Variable,
    VariableRef,
)
from .exceptions import EmptyInputError, MalformedExpressionError
from utils.logger import get_logger

_ALPHABET_SIZE = 26

_BINARY_OPERATORS = {
    "AND": Operator.AND,
    "OR": Operator.OR,
    "XOR": Operator.XOR,
    "XNOR": Operator.XNOR,
    "IMPLY": Operator.IMPLY,
}


class _RPNTreeBuilder:
    """Shift/reduce builder turning an RPN formula into a Tree.

    A fresh builder is used per parse; the operand stack and the 26-slot
    variable table live only for the duration of one call to parse.
    """

    def __init__(self):
        self._stack: List[Node] = []
        self._table: List[Optional[Variable]] = [None] * _ALPHABET_SIZE

    def parse(self, text: str) -> Tree:
        """Parse RPN formula text into a Tree.

        The whole input is tokenized before the scan, so an invalid character
        is reported even if a structural error occurs earlier in the string.

        Args:
            text: RPN formula string to parse

        Returns:
            Tree with the single remaining operand as root

        Raises:
            EmptyInputError: If text is empty
            InvalidTokenError: If text contains a character outside the alphabet
            MalformedExpressionError: If operands are missing or left over
        """
        logger = get_logger()
        logger.debug(f"Building tree from: {text}")

        if not text:
            raise EmptyInputError("Input formula is empty.")

        tokens = list(RPNLexer().tokenize(text))

        for tok in tokens:
            if tok.type == "CONST":
                self._stack.append(Constant(tok.value))
            elif tok.type == "VAR":
                self._stack.append(VariableRef(self._lookup(tok.value)))
            elif tok.type == "NOT":
                child = self._pop(tok)
                self._stack.append(UnaryExpr(Operator.NOT, child))
            else:
                rhs = self._pop(tok)
                lhs = self._pop(tok)
                self._stack.append(BinaryExpr(_BINARY_OPERATORS[tok.type], lhs, rhs))

        if not self._stack:
            raise MalformedExpressionError("No operands in formula.")
        if len(self._stack) > 1:
            raise MalformedExpressionError(
                f"{len(self._stack)} operands left over; expected exactly one."
            )

        root = self._stack.pop()
        variables = self._used_variables()
        logger.debug(
            f"Built {type(root).__name__} root with "
            f"{len(variables) if variables else 0} variable(s)"
        )
        return Tree(root, variables)

    def _lookup(self, letter: str) -> Variable:
        """Return the shared Variable for letter, creating it on first sight."""
        idx = ord(letter) - ord("A")
        variable = self._table[idx]
        if variable is None:
            variable = Variable(letter)
            self._table[idx] = variable
        return variable

    def _pop(self, tok) -> Node:
        if not self._stack:
            raise MalformedExpressionError(
                f"Operator '{tok.value}' at position {tok.index} is missing an operand."
            )
        return self._stack.pop()

    def _used_variables(self) -> Optional[Dict[str, Variable]]:
        used = {v.name: v for v in self._table if v is not None}
        return used or None
