"""Tests for the scanner: character validation, classification, reuse."""

import sys

import pytest

from flatcalc.errors import (
    EmptyExpressionError,
    InvalidTokenError,
    LiteralTooLargeError,
    ScannerError,
    TokenIndexOutOfRangeError,
)
from flatcalc.models import Token, TokenOperation
from flatcalc.scanner import Scanner, tokenise


@pytest.fixture
def scanner():
    return Scanner()


# --- Classification ---

def test_operators_and_parens(scanner):
    tokens = scanner.tokenise("()-+*/")
    assert [t.operation for t in tokens] == [
        TokenOperation.LEFT_PAREN,
        TokenOperation.RIGHT_PAREN,
        TokenOperation.SUBTRACTION,
        TokenOperation.ADDITION,
        TokenOperation.MULTIPLICATION,
        TokenOperation.DIVISION,
    ]
    assert all(t.value is None for t in tokens)


def test_digit_runs_are_single_literals(scanner):
    tokens = scanner.tokenise("12+345")
    assert tokens == (
        Token(TokenOperation.LITERAL, "12", 12),
        Token(TokenOperation.ADDITION, "+"),
        Token(TokenOperation.LITERAL, "345", 345),
    )


def test_leading_zeros_parse_base_ten():
    (token,) = tokenise("007")
    assert token.value == 7
    assert token.raw == "007"


def test_whitespace_is_skipped(scanner):
    tokens = scanner.tokenise("  1 \t+\n 2  ")
    assert [t.raw for t in tokens] == ["1", "+", "2"]


def test_whitespace_splits_digit_runs(scanner):
    tokens = scanner.tokenise("1 2")
    assert [t.value for t in tokens] == [1, 2]


# --- Errors ---

def test_invalid_characters_all_reported(scanner):
    with pytest.raises(InvalidTokenError) as exc_info:
        scanner.tokenise("1 + 3 + test")
    assert exc_info.value.tokens == ["t", "e", "s", "t"]
    assert "t, e, s, t" in str(exc_info.value)
    assert str(exc_info.value).startswith("Lexer:: ")


def test_decimal_point_is_invalid(scanner):
    with pytest.raises(InvalidTokenError) as exc_info:
        scanner.tokenise("3.14 * 2")
    assert exc_info.value.tokens == ["."]


def test_invalid_input_appends_nothing(scanner):
    with pytest.raises(InvalidTokenError):
        scanner.tokenise("1 + x")
    assert scanner.token_count() == 0


@pytest.mark.parametrize("expr", ["", "   ", "\t\n"])
def test_empty_expression(scanner, expr):
    with pytest.raises(EmptyExpressionError):
        scanner.tokenise(expr)


def test_scanner_errors_share_a_family(scanner):
    with pytest.raises(ScannerError):
        scanner.tokenise("")


# --- Access ---

def test_get_token_and_count(scanner):
    scanner.tokenise("4 + 2")
    assert scanner.token_count() == 3
    assert len(scanner) == 3
    assert scanner.get_token(2).value == 2


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_get_token_out_of_range(scanner, index):
    scanner.tokenise("4 + 2")
    with pytest.raises(TokenIndexOutOfRangeError) as exc_info:
        scanner.get_token(index)
    assert exc_info.value.count == 3


def test_get_token_on_empty_scanner(scanner):
    with pytest.raises(IndexError):
        scanner.get_token(0)


# --- Reuse ---

def test_clear_tokens_resets_state(scanner):
    scanner.tokenise("1 + 2")
    assert scanner.expression == "1 + 2"
    scanner.clear_tokens()
    assert scanner.token_count() == 0
    assert scanner.expression is None


def test_retokenise_after_clear_matches_fresh(scanner):
    first = scanner.tokenise("(1 + 2) * 3")
    scanner.clear_tokens()
    second = scanner.tokenise("(1 + 2) * 3")
    assert first == second == Scanner().tokenise("(1 + 2) * 3")


def test_tokenise_without_clear_appends(scanner):
    scanner.tokenise("1")
    scanner.tokenise("2")
    assert [t.value for t in scanner.tokens] == [1, 2]


def test_failed_tokenise_records_no_expression(scanner):
    with pytest.raises(InvalidTokenError):
        scanner.tokenise("1 + x")
    assert scanner.expression is None


@pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="interpreter has no integer string conversion limit",
)
def test_oversized_literal(scanner):
    digits = "1" * (sys.get_int_max_str_digits() + 1)
    with pytest.raises(LiteralTooLargeError) as exc_info:
        scanner.tokenise(f"1 + {digits}")
    assert exc_info.value.token == digits
    assert scanner.token_count() == 0
