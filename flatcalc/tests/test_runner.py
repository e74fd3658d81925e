"""Tests for the outcome wrapper and batch evaluation."""

import sys

import pytest

from flatcalc.models import EvalOutcome
from flatcalc.parser import Parser
from flatcalc.runner import evaluate_expression, evaluate_file, evaluate_lines, iter_expressions


def test_success_outcome():
    outcome = evaluate_expression("1 + 4 * -2")
    assert outcome.ok
    assert outcome.value == -10
    assert outcome.error == ""
    assert outcome.verdict == "ok"


def test_failure_outcome_does_not_raise():
    outcome = evaluate_expression("5 / 0")
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error == "RDParser:: Division by zero"
    assert outcome.error_kind == "DivideByZeroError"
    assert outcome.verdict == "error"


def test_reuses_given_parser():
    parser = Parser()
    evaluate_expression("(1 + 2) * 3", parser)
    assert parser.scanner.expression == "(1 + 2) * 3"
    assert parser.cursor == 7


def test_outcome_dict_roundtrip():
    outcome = evaluate_expression("5 + )6")
    restored = EvalOutcome.from_dict(outcome.to_dict())
    assert restored == outcome
    assert restored.error_kind == "UnexpectedTokenError"


def test_iter_expressions_skips_blanks_and_comments():
    text = "# header\n1 + 2\n\n   \n  3 * 4  \n# trailing\n"
    assert list(iter_expressions(text)) == ["1 + 2", "3 * 4"]


def test_evaluate_lines_isolates_failures():
    outcomes = evaluate_lines(["1 + 3", "5 / 0", "(1", "1 + 3 * 4"])
    assert [o.ok for o in outcomes] == [True, False, False, True]
    assert outcomes[0].value == 4
    assert outcomes[2].error_kind == "ParenthesesMismatchError"
    assert outcomes[3].value == 16


def test_evaluate_file(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("# demo\n5+6*6\n----5+---6*6\n", encoding="utf-8")
    outcomes = evaluate_file(path)
    assert [o.value for o in outcomes] == [66, -6]


def test_deep_nesting_is_a_failure_outcome():
    outcome = evaluate_expression("(" * 5000 + "1" + ")" * 5000)
    assert not outcome.ok
    assert outcome.error_kind == "ExpressionTooDeepError"


def test_long_negation_chain_outcome():
    outcome = evaluate_expression("-" * 3000 + "7")
    assert outcome.ok
    assert outcome.value == 7


@pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="interpreter has no integer string conversion limit",
)
def test_oversized_literal_outcome():
    outcome = evaluate_expression("1" * (sys.get_int_max_str_digits() + 1))
    assert not outcome.ok
    assert outcome.error_kind == "LiteralTooLargeError"
