"""Flatcalc runner — evaluates expressions and captures the outcome.

evaluate_expression() is the boundary between the exception-raising core
and callers that want a plain success flag plus diagnostic. The batch
helpers share one Parser across expressions, resetting it for each.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional

from flatcalc.errors import ExpressionError
from flatcalc.models import EvalOutcome
from flatcalc.parser import Parser


def evaluate_expression(expression: str, parser: Optional[Parser] = None) -> EvalOutcome:
    """Evaluate one expression without raising.

    Args:
        expression: Arithmetic expression (e.g. "4 + (12 / 2)").
        parser: Parser to reuse. A fresh one is created when omitted.

    Returns:
        EvalOutcome with ok=True and the value, or ok=False with the error
        message and the name of the failure kind.
    """
    parser = parser or Parser()
    try:
        value = parser.parse(expression)
    except ExpressionError as e:
        return EvalOutcome(
            expression=expression,
            ok=False,
            error=str(e),
            error_kind=type(e).__name__,
        )
    return EvalOutcome(expression=expression, ok=True, value=value)


def iter_expressions(text: str) -> Iterator[str]:
    """Yield one expression per line, skipping blanks and ``#`` comments."""
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def evaluate_lines(lines: Iterable[str]) -> list[EvalOutcome]:
    """Evaluate every expression in ``lines`` with a single parser."""
    parser = Parser()
    return [evaluate_expression(line, parser) for line in lines]


def evaluate_file(path: Path) -> list[EvalOutcome]:
    """Evaluate every expression in a text file (one per line)."""
    text = path.read_text(encoding="utf-8")
    return evaluate_lines(iter_expressions(text))
