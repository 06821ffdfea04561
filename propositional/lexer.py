# propositional/lexer.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Lexical analyzer for RPN formula tokenization using SLY

"""Lexical analyzer for RPN formula strings.

This module implements tokenization of reverse-Polish propositional formulas.
Every token is a single character; there is no whitespace or grouping, so any
character outside the alphabet is an error.

Supported Tokens:
- Constants: 0, 1
- Variables: A to Z
- Operators: ! (not), & (and), | (or), ^ (xor), = (xnor), > (imply)
"""

from sly import Lexer
from utils.logger import get_logger
from .exceptions import InvalidTokenError


class RPNLexer(Lexer):
    """SLY-based lexer for RPN formula tokenization.

    Transforms input formula strings into token sequences for the tree
    builder. Constant tokens carry their boolean value.

    Attributes:
        tokens: Set of valid token types
    """

    tokens = {
        "CONST",
        "VAR",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "XNOR",
        "IMPLY",
    }

    # Operator tokens
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    XOR = r"\^"
    XNOR = r"="
    IMPLY = r">"

    # One uppercase letter per variable
    VAR = r"[A-Z]"

    @_(r"[01]")
    def CONST(self, t):
        t.value = t.value == "1"
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            InvalidTokenError: Always raised with character and position
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1
        raise InvalidTokenError(illegal_char, error_pos)
