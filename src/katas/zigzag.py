"""Zig-zag matrix: the JPEG coefficient scan order laid out on a grid."""

from __future__ import annotations


def build_zigzag_matrix(n: int) -> list[list[int]]:
    """Return an n x n grid numbered 0..n*n-1 along the zig-zag path.

    The path walks the anti-diagonals ``row + col == d`` in turn. Odd
    diagonals run top-right to bottom-left, even ones bottom-left to
    top-right::

        build_zigzag_matrix(3) == [[0, 1, 5],
                                   [2, 4, 6],
                                   [3, 7, 8]]
    """
    if n < 0:
        raise ValueError(f"Matrix size must be non-negative, got {n}")
    matrix = [[0] * n for _ in range(n)]
    value = 0
    for d in range(2 * n - 1):
        rows = range(max(0, d - n + 1), min(d, n - 1) + 1)
        if d % 2 == 0:
            rows = reversed(rows)
        for row in rows:
            matrix[row][d - row] = value
            value += 1
    return matrix
