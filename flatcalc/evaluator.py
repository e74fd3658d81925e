"""Post-order evaluation of the expression tree.

Evaluation walks the tree with an explicit stack, so long operator chains
and negation chains are not limited by the interpreter's recursion depth.
"""

from __future__ import annotations

from flatcalc.errors import DivideByZeroError, UnknownOperatorError
from flatcalc.models import BINARY_OPERATIONS, Binary, Literal, Node, TokenOperation, Unary


def evaluate(node: Node) -> int:
    """Compute the integer value of ``node``.

    Left operands are evaluated before right operands.

    Raises:
        DivideByZeroError: A division has a right operand of zero.
        UnknownOperatorError: A Binary node holds a non-arithmetic operator.
        TypeError: ``node`` is not an AST node.
    """
    # (node, children_done) pairs; values holds finished operands.
    stack: list[tuple[Node, bool]] = [(node, False)]
    values: list[int] = []

    while stack:
        current, children_done = stack.pop()

        if isinstance(current, Literal):
            values.append(current.value)
        elif isinstance(current, Unary):
            if children_done:
                values.append(-values.pop())
            else:
                stack.append((current, True))
                stack.append((current.operand, False))
        elif isinstance(current, Binary):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply(current.operator, left, right))
            else:
                if current.operator not in BINARY_OPERATIONS:
                    raise UnknownOperatorError(current.operator)
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))
        else:
            raise TypeError(f"not an expression node: {current!r}")

    return values.pop()


def _apply(operator: TokenOperation, left: int, right: int) -> int:
    if operator == TokenOperation.ADDITION:
        return left + right
    if operator == TokenOperation.SUBTRACTION:
        return left - right
    if operator == TokenOperation.MULTIPLICATION:
        return left * right
    if operator == TokenOperation.DIVISION:
        if right == 0:
            raise DivideByZeroError()
        return truncating_divide(left, right)
    raise UnknownOperatorError(operator)


def truncating_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (``-7 / 2 == -3``).

    Python's ``//`` floors instead, so the sign is applied separately.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient
