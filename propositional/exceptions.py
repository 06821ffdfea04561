# propositional/exceptions.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Custom exceptions for formula parsing and NNF rewriting

"""Domain-specific exceptions for RPN formula processing.

Parse failures are recoverable and reported to the caller through the
ParseError hierarchy; no partial tree is ever returned. A TreeInvariantError
signals a corrupted expression tree and cannot arise from parser output.
"""


class ParseError(RuntimeError):
    """Exception raised when an RPN formula cannot be turned into a tree.

    Base class for every recoverable failure of the parsing pipeline.
    Callers that do not care about the exact cause can catch this alone.
    """

    pass


class EmptyInputError(ParseError):
    """The input formula has zero length."""

    pass


class InvalidTokenError(ParseError):
    """The input contains a character outside the RPN token alphabet.

    Attributes:
        char: The offending character
        position: Zero-based index of the character in the source
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid token '{char}' at position {position}")


class MalformedExpressionError(ParseError):
    """An operator lacks operands, or operands are left over after the scan."""

    pass


class TreeInvariantError(AssertionError):
    """An expression tree violates its structural invariants.

    Raised when a unary node carries an operator other than NOT, or a binary
    node carries NOT. Trees produced by the parser never trigger it.
    """

    pass
