"""flatcalc — integer expression evaluator with flattened operator precedence.

Addition, subtraction, multiplication and division share one precedence
level and fold left to right, so "1 + 4 * -2" is (1 + 4) * -2 == -10.
Unary minus may be chained and parentheses group sub-expressions.

Usage:
    python -m flatcalc eval "1 + 4 * -2"      # -> 1 + 4 * -2 = -10
    python -m flatcalc tree "4 + (12 / 2)"    # Show the expression tree

    >>> from flatcalc import Parser
    >>> Parser().parse("4 + (12 / (1 * 2))")
    10
"""

__version__ = "1.0.0"

from flatcalc.errors import (
    DivideByZeroError,
    EmptyExpressionError,
    ExpressionError,
    ExpressionTooDeepError,
    InvalidTokenError,
    LiteralTooLargeError,
    ParenthesesMismatchError,
    ParserError,
    ScannerError,
    TokenIndexOutOfRangeError,
    UnexpectedParenthesesError,
    UnexpectedTokenError,
    UnknownOperatorError,
)
from flatcalc.evaluator import evaluate
from flatcalc.models import Binary, EvalOutcome, Literal, Node, Token, TokenOperation, Unary
from flatcalc.parser import Parser, parse, parse_tree
from flatcalc.runner import evaluate_expression
from flatcalc.scanner import Scanner, tokenise
