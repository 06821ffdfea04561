# tests/cli_tests/test_run_nnf.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Test suite for the command-line entry point

"""Test suite for run_nnf command-line behavior and exit codes."""

import pytest
import run_nnf
from utils.logger import LogLevel, set_log_level


@pytest.fixture(autouse=True)
def restore_log_level():
    yield
    set_log_level(LogLevel.WARNING)


class TestRunNNF:
    """Test cases for argument handling, output and exit codes."""

    def test_formula_argument(self, capsys):
        assert run_nnf.main(["AB&!"]) == 0
        assert capsys.readouterr().out == "A!B!|\n"

    def test_default_formula(self, capsys):
        assert run_nnf.main([]) == 0
        assert capsys.readouterr().out == "A!B!|\n"

    def test_formula_file(self, tmp_path, capsys):
        formula_file = tmp_path / "formula.rpn"
        formula_file.write_text("AB>\n", encoding="utf-8")

        assert run_nnf.main(["-f", str(formula_file)]) == 0
        assert capsys.readouterr().out == "A!B|\n"

    def test_formula_file_overrides_argument(self, tmp_path, capsys):
        formula_file = tmp_path / "formula.rpn"
        formula_file.write_text("AB=", encoding="utf-8")

        assert run_nnf.main(["AB>", "--formula-file", str(formula_file)]) == 0
        assert capsys.readouterr().out == "AB&A!B!&|\n"

    def test_show_variables(self, capsys):
        assert run_nnf.main(["CA>", "--show-variables"]) == 0
        assert capsys.readouterr().out.splitlines() == ["C!A|", "A C"]

    def test_show_variables_without_letters(self, capsys):
        assert run_nnf.main(["10&", "--show-variables"]) == 0
        assert capsys.readouterr().out.splitlines() == ["10&", "-"]

    @pytest.mark.parametrize("formula", ["A&", "Ax"])
    def test_parse_error_exit_code(self, formula):
        assert run_nnf.main([formula]) == 2

    def test_missing_formula_file(self, tmp_path):
        assert run_nnf.main(["-f", str(tmp_path / "missing.rpn")]) == 1

    def test_empty_formula_file(self, tmp_path):
        formula_file = tmp_path / "empty.rpn"
        formula_file.write_text("  \n", encoding="utf-8")

        assert run_nnf.main(["-f", str(formula_file)]) == 1

    def test_read_formula_file_strips_whitespace(self, tmp_path):
        formula_file = tmp_path / "formula.rpn"
        formula_file.write_text("\tAB|\n", encoding="utf-8")

        assert run_nnf.read_formula_file(formula_file) == "AB|"

    def test_argument_parser_flags(self):
        args = run_nnf.create_argument_parser().parse_args(["AB&", "-v", "--debug"])

        assert args.formula == "AB&"
        assert args.verbose is True
        assert args.debug is True
        assert args.formula_file is None
