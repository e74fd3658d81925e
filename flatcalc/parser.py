"""Recursive descent parser for flattened-precedence arithmetic.

Grammar:
    Expression -> Binary
    Binary     -> Unary ( ("+" | "-" | "*" | "/") Unary )*
    Unary      -> "-" Unary | Primary
    Primary    -> Literal | "(" Expression ")"

All four binary operators live on the same level and fold left to right,
so ``1 + 4 * -2`` is ``(1 + 4) * -2``. That is intentional.
"""

from __future__ import annotations

from typing import Optional

from flatcalc.errors import (
    ExpressionTooDeepError,
    ParenthesesMismatchError,
    UnexpectedParenthesesError,
    UnexpectedTokenError,
)
from flatcalc.evaluator import evaluate
from flatcalc.models import BINARY_OPERATIONS, Binary, Literal, Node, Token, TokenOperation, Unary
from flatcalc.scanner import Scanner


class Parser:
    """Builds an AST from an expression and evaluates it.

    Holds a scanner and a cursor, both reset at the start of every parse, so
    one instance can be reused for many expressions (one at a time).
    """

    def __init__(self, scanner: Optional[Scanner] = None) -> None:
        self.scanner = scanner if scanner is not None else Scanner()
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Index of the next unconsumed token."""
        return self._cursor

    def parse(self, expr: str) -> int:
        """Parse and evaluate ``expr``.

        Raises:
            ExpressionError: Any scanner, parser or evaluation failure.
        """
        return evaluate(self.parse_tree(expr))

    def parse_tree(self, expr: str) -> Node:
        """Parse ``expr`` into an AST without evaluating it.

        The returned tree can be evaluated any number of times. Parentheses
        nested past the interpreter's recursion limit raise
        ExpressionTooDeepError.
        """
        self._cursor = 0
        self.scanner.clear_tokens()
        self.scanner.tokenise(expr)

        try:
            tree = self._parse_expression()
        except RecursionError:
            raise ExpressionTooDeepError() from None

        # Nested imbalance is caught in _parse_primary(); anything left over
        # here is a stray parenthesis at the top level.
        if self._cursor < self.scanner.token_count():
            raise UnexpectedParenthesesError()

        return tree

    def _match_and_advance(self, operation: TokenOperation) -> bool:
        if (self._cursor < self.scanner.token_count()
                and self.scanner.get_token(self._cursor).operation == operation):
            self._cursor += 1
            return True
        return False

    def _previous(self) -> Token:
        return self.scanner.get_token(self._cursor - 1)

    def _parse_expression(self) -> Node:
        return self._parse_binary()

    def _parse_binary(self) -> Node:
        left = self._parse_unary()
        while any(self._match_and_advance(op) for op in BINARY_OPERATIONS):
            operator = self._previous().operation
            left = Binary(operator, left, self._parse_unary())
        return left

    def _parse_unary(self) -> Node:
        # "-" Unary, unrolled: count the minus signs, then wrap the primary.
        negations = 0
        while self._match_and_advance(TokenOperation.SUBTRACTION):
            negations += 1
        node = self._parse_primary()
        for _ in range(negations):
            node = Unary(node)
        return node

    def _parse_primary(self) -> Node:
        if self._match_and_advance(TokenOperation.LITERAL):
            return Literal(self._previous().value)

        if self._match_and_advance(TokenOperation.LEFT_PAREN):
            inner = self._parse_expression()
            if not self._match_and_advance(TokenOperation.RIGHT_PAREN):
                raise ParenthesesMismatchError()
            return inner

        # Past the end of input, report the last token seen instead.
        index = min(self._cursor, self.scanner.token_count() - 1)
        raise UnexpectedTokenError(self.scanner.get_token(index).raw)


def parse(expr: str) -> int:
    """Evaluate ``expr`` with a fresh parser."""
    return Parser().parse(expr)


def parse_tree(expr: str) -> Node:
    """Parse ``expr`` into an AST with a fresh parser."""
    return Parser().parse_tree(expr)
