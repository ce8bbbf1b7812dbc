"""Small classic routines: Fibonacci numbers and swapping."""

from __future__ import annotations

from typing import Any


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_calls(n: int) -> int:
    """Return how many calls the naive recursive Fibonacci makes for ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, 1 + current + previous
    return current


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in exchanged order."""
    return b, a