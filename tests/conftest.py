# tests/conftest.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Nega tests.

Puts the project root on the import path, quiets the global logger for the
session and provides helpers shared by the parser and rewriter suites.
"""

import sys
import itertools
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability and silence informational logging.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import propositional
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    from utils.logger import LogLevel, set_log_level

    set_log_level(LogLevel.WARNING)
    yield


@pytest.fixture
def evaluate():
    """Provide a reference evaluator over expression trees.

    Returns:
        Callable[[Node, Dict[str, bool]], bool]
    """
    from propositional.ast_nodes import (
        BinaryExpr,
        Constant,
        Operator,
        UnaryExpr,
        VariableRef,
    )

    semantics = {
        Operator.AND: lambda a, b: a and b,
        Operator.OR: lambda a, b: a or b,
        Operator.XOR: lambda a, b: a != b,
        Operator.XNOR: lambda a, b: a == b,
        Operator.IMPLY: lambda a, b: (not a) or b,
    }

    def _evaluate(node, env):
        if isinstance(node, Constant):
            return node.value
        if isinstance(node, VariableRef):
            return env[node.name]
        if isinstance(node, UnaryExpr):
            return not _evaluate(node.child, env)
        if isinstance(node, BinaryExpr):
            return semantics[node.op](_evaluate(node.lhs, env), _evaluate(node.rhs, env))
        raise TypeError(f"Unknown node type: {type(node).__name__}")

    return _evaluate


@pytest.fixture
def assignments():
    """Provide every truth assignment over a list of letters.

    Returns:
        Callable[[Iterable[str]], Iterator[Dict[str, bool]]]
    """

    def _assignments(names):
        names = list(names)
        for values in itertools.product([False, True], repeat=len(names)):
            yield dict(zip(names, values))

    return _assignments
