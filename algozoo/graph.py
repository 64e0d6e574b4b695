"""Shortest paths: A* on character grids and Dijkstra on adjacency matrices."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterator, Sequence

Cell = tuple[int, int]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_WALL = "#"


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
        if 0 <= nr < len(rows) and 0 <= nc < len(rows[nr]) and rows[nr][nc] != _WALL:
            yield nr, nc


def a_star_path(grid: Sequence[str]) -> list[Cell]:
    """Return the cells of a shortest path from ``S`` to ``G`` in ``grid``.

    Cells marked ``#`` are walls; moves go up, down, left and right. The
    straight-line distance to the goal guides the search. The path runs from
    start to goal inclusive and is empty when the goal cannot be reached.
    """
    rows = list(grid)
    start = _find(rows, "S")
    goal = _find(rows, "G")

    def estimate(cell: Cell) -> float:
        return math.hypot(cell[0] - goal[0], cell[1] - goal[1])

    cost: dict[Cell, float] = {start: 0}
    parent: dict[Cell, Cell] = {}
    frontier: list[tuple[float, Cell]] = [(estimate(start), start)]

    while frontier:
        _, cell = heapq.heappop(frontier)
        if cell == goal:
            break
        step_cost = cost[cell] + 1
        for neighbour in _open_neighbours(rows, cell):
            if step_cost < cost.get(neighbour, math.inf):
                cost[neighbour] = step_cost
                parent[neighbour] = cell
                heapq.heappush(frontier, (step_cost + estimate(neighbour), neighbour))

    if goal not in cost:
        return []
    path = [goal]
    while path[-1] in parent:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def mark_path(grid: Sequence[str], path: Sequence[Cell]) -> list[str]:
    """Return a copy of ``grid`` with the open cells of ``path`` drawn as ``*``."""
    cells = [list(row) for row in grid]
    for r, c in path:
        if cells[r][c] == ".":
            cells[r][c] = "*"
    return ["".join(row) for row in cells]


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    ``graph`` is a square adjacency matrix in which ``math.inf`` marks a
    missing edge. Unreachable vertices get ``math.inf``.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise IndexError("source vertex out of range")

    distance: list[float] = [math.inf] * size
    distance[source] = 0
    unvisited = set(range(size))
    while unvisited:
        u = min(unvisited, key=lambda v: (distance[v], v))
        unvisited.remove(u)
        for v, weight in enumerate(graph[u]):
            if weight < math.inf:
                distance[v] = min(distance[v], distance[u] + weight)
    return distance