"""Stack-based work on expressions: bracket matching, postfix and prefix forms."""

from __future__ import annotations

import string
from collections.abc import Callable
from operator import add, le, lt, mul, sub, xor


class ExpressionError(ValueError):
    """An expression is malformed."""


_OPERANDS = frozenset(string.ascii_letters + string.digits)
_CLOSING = {")": "(", "}": "{", "]": "["}


def precedence(operator: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/", "%"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def is_balanced(text: str) -> bool:
    """Tell whether the brackets in ``text`` pair up.

    Every character that does not close the bracket on top of the stack is
    pushed, so any character other than a bracket makes the text unbalanced.
    """
    stack: list[str] = []
    for char in text:
        if stack and _CLOSING.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return not stack


def _truncating_division(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": _truncating_division,
    "^": xor,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero and ``^`` is bitwise exclusive or.
    """
    stack: list[int] = []
    for char in expression:
        if char in string.digits:
            stack.append(int(char))
            continue
        if len(stack) < 2:
            raise ExpressionError(f"operator {char!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ExpressionError(f"invalid operator {char!r}")
        stack.append(operation(left, right))
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def _convert(text: str, opening: str, closing: str, pops: Callable[[int, int], bool]) -> list[str]:
    stack: list[str] = []
    output: list[str] = []
    for char in text:
        if char in _OPERANDS:
            output.append(char)
        elif char == opening:
            stack.append(char)
        elif char == closing:
            while stack and stack[-1] != opening:
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unbalanced parentheses")
            stack.pop()
        else:
            while stack and pops(precedence(char), precedence(stack[-1])):
                output.append(stack.pop())
            stack.append(char)
    while stack:
        top = stack.pop()
        if top == opening:
            raise ExpressionError("unbalanced parentheses")
        output.append(top)
    return output


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression with single-character operands to postfix."""
    return "".join(_convert(infix, "(", ")", le))


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression with single-character operands to prefix."""
    output = _convert(infix[::-1], ")", "(", lt)
    return "".join(reversed(output))