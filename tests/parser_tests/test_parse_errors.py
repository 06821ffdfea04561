# tests/parser_tests/test_parse_errors.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Test suite for RPN parser syntax validation and error handling

"""Test suite for RPN parser error handling.

Every failure is reported through a ParseError subclass; the tests check the
classification of empty input, invalid characters and unbalanced formulas.
"""

import pytest
from propositional import parse, parse_and_nnf, negation_normal_form
from propositional.exceptions import (
    EmptyInputError,
    InvalidTokenError,
    MalformedExpressionError,
    ParseError,
)
from propositional.tree_builder import _RPNTreeBuilder
from utils.logger import get_logger


class TestRPNParserErrors:
    """Test cases for RPN parser error classification."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            parse("")

    INVALID_TOKEN_CASES = [
        ("Ax", "Lowercase letter"),
        ("A$", "Symbol outside alphabet"),
        ("AB& ", "Trailing whitespace"),
        (" A", "Leading whitespace"),
        ("A2|", "Digit other than 0 and 1"),
        ("(A)", "Parentheses"),
        ("AB~", "Tilde negation"),
    ]

    @pytest.mark.parametrize("formula, description", INVALID_TOKEN_CASES)
    def test_invalid_token(self, formula, description):
        self.logger.debug(f"Testing invalid token: {description}")

        with pytest.raises(InvalidTokenError):
            parse(formula)

    def test_invalid_token_reported_before_structure(self):
        """The whole string is validated before operands are counted."""
        with pytest.raises(InvalidTokenError) as exc_info:
            parse("&x")

        assert exc_info.value.position == 1

    MALFORMED_CASES = [
        ("A&", "Binary operator with one operand"),
        ("&", "Binary operator with no operand"),
        ("!", "Negation with no operand"),
        ("AB", "Two operands left over"),
        ("AB&C", "Operand left over after reduction"),
        ("1!&", "Negated operand alone before binary operator"),
        ("AB&&", "Second conjunction lacks an operand"),
        ("!A", "Prefix negation"),
        ("A&B", "Infix conjunction"),
    ]

    @pytest.mark.parametrize("formula, description", MALFORMED_CASES)
    def test_malformed_expression(self, formula, description):
        self.logger.debug(f"Testing malformed formula: {description}")

        with pytest.raises(MalformedExpressionError):
            parse(formula)

    def test_leftover_operands_count_in_message(self):
        with pytest.raises(MalformedExpressionError, match="3 operands left over"):
            parse("ABC")

    @pytest.mark.parametrize("formula", ["", "Ax", "A&"])
    def test_all_failures_are_parse_errors(self, formula):
        with pytest.raises(ParseError):
            parse(formula)

    @pytest.mark.parametrize("formula", ["", "Ax", "A&"])
    def test_pipeline_propagates_parse_errors(self, formula):
        with pytest.raises(ParseError):
            parse_and_nnf(formula)

        with pytest.raises(ParseError):
            negation_normal_form(formula)

    def test_unexpected_error_wrapped_in_parse_error(self, monkeypatch):
        def _explode(self, text):
            raise KeyError("boom")

        monkeypatch.setattr(_RPNTreeBuilder, "parse", _explode)

        with pytest.raises(ParseError) as exc_info:
            parse("A")

        assert isinstance(exc_info.value.__cause__, KeyError)
