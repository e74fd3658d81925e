"""Data models for flatcalc.

TokenOperation, Token, the AST node variants and EvalOutcome: all the typed
structures that flow through scanner → parser → evaluator → runner → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenOperation(str, Enum):
    """The single meaning a token carries."""

    NONE = "none"
    LITERAL = "literal"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    SUBTRACTION = "-"
    ADDITION = "+"
    MULTIPLICATION = "*"
    DIVISION = "/"


# Operators accepted by the binary production, in the order they are tried.
BINARY_OPERATIONS = (
    TokenOperation.ADDITION,
    TokenOperation.SUBTRACTION,
    TokenOperation.MULTIPLICATION,
    TokenOperation.DIVISION,
)


@dataclass(frozen=True)
class Token:
    """One lexical unit extracted by the scanner.

    ``value`` is only set for LITERAL tokens. ``raw`` keeps the matched text
    for error messages.
    """

    operation: TokenOperation
    raw: str
    value: Optional[int] = None


# ---------------------------------------------------------------------------
# AST
# ---------------------------------------------------------------------------

def _evaluate(node: Node) -> int:
    # evaluator imports this module
    from flatcalc.evaluator import evaluate
    return evaluate(node)


@dataclass(frozen=True)
class Literal:
    """An integer in the tree."""

    value: int

    def evaluate(self) -> int:
        return _evaluate(self)


@dataclass(frozen=True)
class Unary:
    """Negation of its operand."""

    operand: Node

    def evaluate(self) -> int:
        return _evaluate(self)


@dataclass(frozen=True)
class Binary:
    """``left <operator> right`` for one of the four arithmetic operations."""

    operator: TokenOperation
    left: Node
    right: Node

    def evaluate(self) -> int:
        return _evaluate(self)


Node = Union[Literal, Unary, Binary]


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass
class EvalOutcome:
    """Result of evaluating one expression, success or failure."""

    expression: str
    ok: bool = False
    value: Optional[int] = None
    error: str = ""
    error_kind: str = ""

    @property
    def verdict(self) -> str:
        return "ok" if self.ok else "error"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "ok": self.ok,
            "value": self.value,
            "error": self.error,
            "error_kind": self.error_kind,
        }

    @classmethod
    def from_dict(cls, d: dict) -> EvalOutcome:
        """Deserialize from a dict produced by to_dict()."""
        return cls(
            expression=d.get("expression", ""),
            ok=d.get("ok", False),
            value=d.get("value"),
            error=d.get("error", ""),
            error_kind=d.get("error_kind", ""),
        )
