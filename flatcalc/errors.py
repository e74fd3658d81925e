"""Failure kinds raised while scanning, parsing and evaluating expressions.

Two families share the ExpressionError root: ScannerError for problems with
the raw text and ParserError for problems with token structure or
evaluation. Catch ExpressionError to handle everything flatcalc raises.
"""

from __future__ import annotations


class ExpressionError(Exception):
    """Base class for every flatcalc failure."""


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class ScannerError(ExpressionError):
    """Raised by the scanner."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Lexer:: {message}")


class InvalidTokenError(ScannerError):
    """The expression contains characters outside the allowed set."""

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = list(tokens)
        super().__init__(
            "Invalid token(s) detected in expression: " + ", ".join(self.tokens)
        )


class EmptyExpressionError(ScannerError):
    """The expression contains no tokens at all."""

    def __init__(self) -> None:
        super().__init__("Empty expression is invalid")


class LiteralTooLargeError(ScannerError):
    """A digit run is too long to convert to an integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Integer literal is too large: {len(token)} digits")


class TokenIndexOutOfRangeError(ScannerError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__("Token index is out of range")


# ---------------------------------------------------------------------------
# Parser / evaluator
# ---------------------------------------------------------------------------

class ParserError(ExpressionError):
    """Raised by the parser and the evaluator."""

    def __init__(self, message: str) -> None:
        super().__init__(f"RDParser:: {message}")


class ParenthesesMismatchError(ParserError):
    """An opening parenthesis was never closed."""

    def __init__(self) -> None:
        super().__init__("Mismatched parentheses in expression")


class UnexpectedParenthesesError(ParserError):
    """Tokens were left over once the top-level expression was parsed."""

    def __init__(self) -> None:
        super().__init__("Unexpected parentheses in expression")


class UnexpectedTokenError(ParserError):
    """An operand was required but the token is neither a literal nor "("."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unexpected token encountered: {token}")


class DivideByZeroError(ParserError, ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__("Division by zero")


class UnknownOperatorError(ParserError):
    def __init__(self, operator: object = None) -> None:
        self.operator = operator
        super().__init__("Unknown operator")


class ExpressionTooDeepError(ParserError):
    """Parentheses are nested deeper than the interpreter stack allows."""

    def __init__(self) -> None:
        super().__init__("Expression is nested too deeply")
