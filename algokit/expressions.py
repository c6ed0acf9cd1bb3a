"""Stack-based expression utilities: bracket matching, infix to postfix, evaluation."""

from __future__ import annotations

from collections.abc import Callable

from algokit.stack import LinkedStack

_OPERATORS = "+-*/"


def is_balanced(expr: str) -> bool:
    """Return True if every ``(`` in ``expr`` has a matching ``)``."""
    stack = LinkedStack()
    for ch in expr:
        if ch == "(":
            stack.push(ch)
        elif ch == ")":
            if stack.is_empty():
                return False
            stack.pop()
    return stack.is_empty()


def precedence(op: str) -> int:
    """Precedence of a binary operator; 0 for anything else."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def is_operand(ch: str) -> bool:
    """Return True unless ``ch`` is one of the four arithmetic operators."""
    return ch not in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression without parentheses to postfix notation."""
    output: list[str] = []
    operators: list[str] = []
    for ch in infix:
        if is_operand(ch):
            output.append(ch)
            continue
        while operators and precedence(ch) <= precedence(operators[-1]):
            output.append(operators.pop())
        operators.append(ch)
    output.extend(reversed(operators))
    return "".join(output)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


_APPLY: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression whose operands are single decimal digits.

    Division truncates toward zero. The value left on top of the stack is
    returned.
    """
    stack = LinkedStack()
    for ch in postfix:
        if is_operand(ch):
            if not ch.isdigit():
                raise ValueError(f"operand {ch!r} is not a single digit")
            stack.push(int(ch))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks two operands")
        right = stack.pop()
        left = stack.pop()
        stack.push(_APPLY[ch](left, right))
    if stack.is_empty():
        raise ValueError("empty expression")
    return next(iter(stack))