"""Domino row feasibility.

Tiles are edges of a multigraph on face values. A row that uses every tile
exists exactly when that graph has an Eulerian path: all edges lie in one
connected component and at most two vertices have odd degree.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def can_form_domino_row(tiles: Iterable[Sequence[int]]) -> bool:
    """Return True if *tiles* can be laid in one row with matching faces.

    Tiles may be flipped, so ``[i, j]`` and ``[j, i]`` are the same tile.
    An empty set of tiles trivially forms a row.

    >>> can_form_domino_row([[1, 1], [2, 2], [1, 2]])
    True
    >>> can_form_domino_row([[1, 1], [0, 3], [1, 4]])
    False
    """
    degree: Counter[int] = Counter()
    neighbours: defaultdict[int, set[int]] = defaultdict(set)
    for tile in tiles:
        if len(tile) != 2:
            raise ValueError(f"A domino tile has exactly two faces, got {tile!r}")
        a, b = tile
        degree[a] += 1
        degree[b] += 1
        neighbours[a].add(b)
        neighbours[b].add(a)

    if not degree:
        return True

    odd = sum(1 for d in degree.values() if d % 2)
    if odd > 2:
        return False
    return _is_connected(neighbours)


def _is_connected(neighbours: dict[int, set[int]]) -> bool:
    """All faces that appear on some tile are reachable from any one of them."""
    visited: set[int] = set()
    stack = [next(iter(neighbours))]
    while stack:
        face = stack.pop()
        if face in visited:
            continue
        visited.add(face)
        stack.extend(neighbours[face])
    return len(visited) == len(neighbours)
