"""Searching: grid distances by BFS and DFS, binary and linear search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any

Cell = tuple[int, int]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _find(rows: Sequence[str], mark: str) -> Cell:
    for r, row in enumerate(rows):
        c = row.find(mark)
        if c != -1:
            return r, c
    raise ValueError(f"grid has no {mark!r} cell")


def _open_neighbours(rows: Sequence[str], cell: Cell) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(rows) and 0 <= nc < len(rows[nr]) and rows[nr][nc] != "#":
            yield nr, nc


def bfs_distance(grid: Sequence[str]) -> int | None:
    """Return the fewest moves from ``S`` to ``G``, or None if unreachable."""
    rows = list(grid)
    start = _find(rows, "S")
    goal = _find(rows, "G")
    distance = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbour in _open_neighbours(rows, cell):
            if neighbour not in distance:
                distance[neighbour] = distance[cell] + 1
                queue.append(neighbour)
    return distance.get(goal)


def dfs_distance(grid: Sequence[str]) -> int | None:
    """Return the fewest moves from ``S`` to ``G`` by exhaustive depth-first search.

    Every simple path is explored, so this suits small grids only.
    Returns None if the goal is unreachable.
    """
    rows = list(grid)
    start = _find(rows, "S")
    _find(rows, "G")
    best: int | None = None
    visited: set[Cell] = set()

    def explore(cell: Cell, depth: int) -> None:
        nonlocal best
        r, c = cell
        if rows[r][c] == "G":
            if best is None or depth < best:
                best = depth
            return
        visited.add(cell)
        for neighbour in _open_neighbours(rows, cell):
            if neighbour not in visited:
                explore(neighbour, depth + 1)
        visited.discard(cell)

    explore(start, 0)
    return best


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = items[middle]
        if value == target:
            return middle
        if value > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first ``target`` in ``items``, or None if absent."""
    return next((i for i, value in enumerate(items) if value == target), None)