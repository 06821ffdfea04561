# propositional/ast_nodes.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Expression tree classes for propositional formula representation

"""Expression tree classes for parsed RPN formulas.

This module defines the node classes used to represent propositional formulas
over the connectives NOT, AND, OR, XOR, XNOR and IMPLY. Nodes are immutable;
the only mutable objects reachable from a tree are the shared Variable
records, which are referenced by VariableRef leaves but are not children.

Node Types:
    Constant: Boolean constants 0 and 1
    VariableRef: Reference to a shared single-letter Variable
    UnaryExpr: Negation of a child node
    BinaryExpr: Binary connective over two child nodes

All nodes support the visitor design pattern for traversal and transformation,
and render themselves in RPN through ``str``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Protocol

from .exceptions import TreeInvariantError


class Operator(Enum):
    """Logical connectives, valued by their RPN symbol."""

    NOT = "!"
    AND = "&"
    OR = "|"
    XOR = "^"
    XNOR = "="
    IMPLY = ">"


@dataclass(eq=False)
class Variable:
    """Named boolean identifier shared by every occurrence of its letter.

    Equality is object identity: two Variables with the same name coming from
    different parses are distinct records.

    Attributes:
        name: Single uppercase letter A-Z
        value: Assigned truth value (meaningful only when is_set)
        is_set: Whether a truth value has been assigned
    """

    name: str
    value: bool = False
    is_set: bool = False

    def assign(self, value: bool) -> None:
        """Store a truth value, visible through every reference to this variable."""
        self.value = value
        self.is_set = True


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_constant(self, n: Constant): ...

    def visit_variable(self, n: VariableRef): ...

    def visit_unary(self, n: UnaryExpr): ...

    def visit_binary(self, n: BinaryExpr): ...


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all expression tree nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement accept for visitor dispatch,
    duplicate for deep copying and __str__ for RPN rendering.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def duplicate(self) -> Node:
        """Return a deep copy of this subtree.

        Variable references in the copy point at the same shared Variable
        records as the original.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the RPN rendering of this subtree.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Constant(Node):
    """Boolean constant leaf, written ``0`` or ``1``.

    Attributes:
        value: The constant truth value
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def duplicate(self) -> Constant:
        return Constant(self.value)

    def __str__(self) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True, slots=True, eq=False)
class VariableRef(Node):
    """Leaf referring to a shared Variable.

    The referenced Variable is not a child of this node. Equality and hashing
    go by the variable's letter so that trees built by separate parses can be
    compared structurally.

    Attributes:
        variable: The shared Variable record
    """

    variable: Variable

    @property
    def name(self) -> str:
        return self.variable.name

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def duplicate(self) -> VariableRef:
        return VariableRef(self.variable)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VariableRef):
            return NotImplemented
        return self.variable.name == other.variable.name

    def __hash__(self) -> int:
        return hash(("var", self.variable.name))

    def __str__(self) -> str:
        return self.variable.name


@dataclass(frozen=True, slots=True)
class UnaryExpr(Node):
    """Negation of a child expression.

    Attributes:
        op: Always Operator.NOT
        child: The negated expression
    """

    op: Operator
    child: Node

    def __post_init__(self):
        if self.op is not Operator.NOT:
            raise TreeInvariantError(f"Unary node carries {self.op.name}, expected NOT")

    def accept(self, v: Visitor):
        return v.visit_unary(self)

    def duplicate(self) -> UnaryExpr:
        return UnaryExpr(self.op, self.child.duplicate())

    def __str__(self) -> str:
        return f"{self.child}{self.op.value}"


@dataclass(frozen=True, slots=True)
class BinaryExpr(Node):
    """Binary connective applied to two child expressions.

    Attributes:
        op: One of AND, OR, XOR, XNOR, IMPLY
        lhs: Left operand
        rhs: Right operand
    """

    op: Operator
    lhs: Node
    rhs: Node

    def __post_init__(self):
        if self.op is Operator.NOT:
            raise TreeInvariantError("Binary node cannot carry NOT")

    def accept(self, v: Visitor):
        return v.visit_binary(self)

    def duplicate(self) -> BinaryExpr:
        return BinaryExpr(self.op, self.lhs.duplicate(), self.rhs.duplicate())

    def __str__(self) -> str:
        return f"{self.lhs}{self.rhs}{self.op.value}"


@dataclass
class Tree:
    """Result of parsing one formula.

    Attributes:
        root: Root node of the expression tree
        variables: Letters used in the source mapped to their shared Variable,
            ordered A to Z, or None when the source had no letters
    """

    root: Node
    variables: Optional[Dict[str, Variable]] = field(default=None)

    def __str__(self) -> str:
        return str(self.root)


def Not(child: Node) -> UnaryExpr:
    """Build a negation node."""
    return UnaryExpr(Operator.NOT, child)


def And(lhs: Node, rhs: Node) -> BinaryExpr:
    """Build a conjunction node."""
    return BinaryExpr(Operator.AND, lhs, rhs)


def Or(lhs: Node, rhs: Node) -> BinaryExpr:
    """Build a disjunction node."""
    return BinaryExpr(Operator.OR, lhs, rhs)
