"""Infix to postfix and prefix conversion with an operator stack."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/^%")
_SWAP = str.maketrans("()", ")(")


def precedence(op: str) -> int:
    """Return 1 for ``+ -``, 2 for ``* / ^ %`` and 0 for anything else."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/", "^", "%"):
        return 2
    return 0


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in _OPERATORS


def swap_parentheses(expression: str) -> str:
    """Exchange every ``(`` with ``)`` and vice versa."""
    return expression.translate(_SWAP)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = ["("]
    output: list[str] = []
    for ch in expression + ")":
        if ch.isalnum():
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif is_operator(ch):
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses: unexpected ')'")
            stack.pop()
    if stack:
        raise ValueError("unbalanced parentheses: unclosed '('")
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by reversing around postfix."""
    reversed_infix = swap_parentheses(expression[::-1])
    return infix_to_postfix(reversed_infix)[::-1]