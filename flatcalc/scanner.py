"""Lexical analysis of arithmetic expressions.

The scanner works in two regex passes over the source text: the first
rejects any character outside the allowed set, the second extracts digit
runs and single-character operators. Whitespace matches neither pass and
is skipped implicitly.
"""

from __future__ import annotations

import re
from typing import Optional

from flatcalc.errors import (
    EmptyExpressionError,
    InvalidTokenError,
    LiteralTooLargeError,
    TokenIndexOutOfRangeError,
)
from flatcalc.models import Token, TokenOperation

_TOKEN_RE = re.compile(r"\d+|[-+*/()]")
_INVALID_TOKEN_RE = re.compile(r"[^0-9+\-*/()\s]")

# Classification by the first character of a match. Anything missing here
# is a digit run.
_OPERATIONS: dict[str, TokenOperation] = {
    "(": TokenOperation.LEFT_PAREN,
    ")": TokenOperation.RIGHT_PAREN,
    "-": TokenOperation.SUBTRACTION,
    "+": TokenOperation.ADDITION,
    "*": TokenOperation.MULTIPLICATION,
    "/": TokenOperation.DIVISION,
}


class Scanner:
    """Turns an expression into an index-addressable token sequence.

    A scanner is reusable: call clear_tokens() before tokenising the next
    expression. Not safe for concurrent use.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._expression: Optional[str] = None

    @property
    def expression(self) -> Optional[str]:
        """Source text of the last tokenise() call, None after a clear."""
        return self._expression

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    def tokenise(self, expr: str) -> tuple[Token, ...]:
        """Scan ``expr`` and append its tokens to the sequence.

        Raises:
            InvalidTokenError: One or more characters are not digits,
                operators, parentheses or whitespace. Every offending
                character is reported.
            EmptyExpressionError: No tokens were found.
            LiteralTooLargeError: A digit run exceeds the interpreter's
                integer conversion limit.

        Returns:
            The full token sequence.
        """
        invalid = _INVALID_TOKEN_RE.findall(expr)
        if invalid:
            raise InvalidTokenError(invalid)

        matches = _TOKEN_RE.findall(expr)
        if not matches:
            raise EmptyExpressionError()

        # Classify everything first so a failure appends nothing.
        tokens = [_classify(raw) for raw in matches]
        self._tokens.extend(tokens)
        self._expression = expr

        return self.tokens

    def get_token(self, index: int) -> Token:
        if index < 0 or index >= len(self._tokens):
            raise TokenIndexOutOfRangeError(index, len(self._tokens))
        return self._tokens[index]

    def token_count(self) -> int:
        return len(self._tokens)

    def clear_tokens(self) -> None:
        """Empty the sequence and forget the cached source text."""
        self._tokens.clear()
        self._expression = None

    def __len__(self) -> int:
        return len(self._tokens)


def _classify(raw: str) -> Token:
    operation = _OPERATIONS.get(raw[0])
    if operation is not None:
        return Token(operation=operation, raw=raw)
    try:
        value = int(raw)
    except ValueError:
        raise LiteralTooLargeError(raw) from None
    return Token(operation=TokenOperation.LITERAL, raw=raw, value=value)


def tokenise(expr: str) -> tuple[Token, ...]:
    """Tokenise ``expr`` with a fresh scanner."""
    return Scanner().tokenise(expr)
