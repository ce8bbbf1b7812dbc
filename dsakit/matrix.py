"""Two-dimensional arrays: reshaping, transposing, linear addressing and display."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

Matrix = list[list[Any]]


class Order(str, Enum):
    """Storage order of a matrix laid out in a flat buffer."""

    ROW = "row"
    COLUMN = "column"


def _shape(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    """Return ``(rows, cols)`` of a rectangular matrix or raise ValueError."""
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def reshape(values: Sequence[Any], rows: int, cols: int) -> Matrix:
    """Lay the flat ``values`` out row by row into a ``rows`` x ``cols`` matrix."""
    if rows < 0 or cols < 0:
        raise ValueError("rows and cols must be non-negative")
    if rows * cols != len(values):
        raise ValueError(f"Invalid-> {rows * cols}!={len(values)}")
    items = list(values)
    return [items[start:start + cols] for start in range(0, rows * cols, cols)] if cols else [
        [] for _ in range(rows)
    ]


def transpose(matrix: Sequence[Sequence[Any]]) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    rows, cols = _shape(matrix)
    if rows == 0:
        return []
    return [list(column) for column in zip(*matrix)]


def flatten(matrix: Sequence[Sequence[Any]], order: Order | str = Order.ROW) -> list[Any]:
    """Return the elements in row-major or column-major order."""
    order = Order(order)
    _shape(matrix)
    source = matrix if order is Order.ROW else transpose(matrix)
    return [item for row in source for item in row]


def _check_position(row: int, col: int, rows: int, cols: int) -> None:
    if not 0 <= row < rows:
        raise IndexError(f"row must be within 0 and {rows - 1}")
    if not 0 <= col < cols:
        raise IndexError(f"col must be within 0 and {cols - 1}")


def row_major_offset(row: int, col: int, rows: int, cols: int) -> int:
    """Offset of ``(row, col)`` from the base of a row-major buffer."""
    _check_position(row, col, rows, cols)
    return row * cols + col


def column_major_offset(row: int, col: int, rows: int, cols: int) -> int:
    """Offset of ``(row, col)`` from the base of a column-major buffer."""
    _check_position(row, col, rows, cols)
    return row + col * rows


def element_at(
    matrix: Sequence[Sequence[Any]], row: int, col: int, order: Order | str = Order.ROW
) -> Any:
    """Fetch ``(row, col)`` by storing the matrix flat in ``order`` and addressing it."""
    order = Order(order)
    rows, cols = _shape(matrix)
    buffer = flatten(matrix, order)
    if order is Order.ROW:
        offset = row_major_offset(row, col, rows, cols)
    else:
        offset = column_major_offset(row, col, rows, cols)
    return buffer[offset]


def contains(matrix: Iterable[Iterable[Any]], value: Any) -> bool:
    """Return True if ``value`` is any element of the matrix."""
    return any(item == value for row in matrix for item in row)


def format_array(values: Iterable[Any]) -> str:
    """Render a one-dimensional array as ``{ a, b, c }``."""
    items = [str(item) for item in values]
    return f"{{ {', '.join(items)} }}" if items else "{ }"


def format_matrix(matrix: Iterable[Iterable[Any]]) -> str:
    """Render each row as ``{ a, b }`` on its own line."""
    return "".join(f"{format_array(row)}\n" for row in matrix)