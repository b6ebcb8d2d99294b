"""Shortest paths on a character grid with Dijkstra and breadth-first search."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Optional, Sequence, Union

WALL = "#"
START = "S"
TARGET = "T"
STEP = "O"
UNREACHABLE = math.inf
SEPARATOR = "-" * 100

Adjacency = Sequence[Sequence[tuple[int, int]]]

# Neighbour order: up, down, left, right.
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class GridMap:
    """A grid of cells; ``start`` and ``end`` are cell ids (row * columns + col)."""

    grid: list[str]
    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0]) if self.grid else 0


@dataclass
class SearchResult:
    """Distances (``UNREACHABLE`` if none), parent ids and the number of queue pops."""

    distances: list[float]
    parents: list[Optional[int]]
    iterations: int


def parse_grid(lines: Iterable[str]) -> GridMap:
    """Build a map from lines of bracketed cells such as ``[S][.][#]``.

    Empty lines are skipped. The width is that of the first row; the last
    ``S`` and ``T`` in row-major order become start and end.
    """
    grid = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line:
            grid.append(line[1::3])
    grid_map = GridMap(grid)
    columns = grid_map.columns
    if any(len(row) < columns for row in grid):
        raise ValueError("every row must be at least as wide as the first")
    for r, row in enumerate(grid):
        for c, ch in enumerate(row[:columns]):
            if ch == START:
                grid_map.start = r * columns + c
            elif ch == TARGET:
                grid_map.end = r * columns + c
    return grid_map


def load_grid(path: Union[str, PathLike]) -> GridMap:
    """Read a grid file and parse it."""
    with open(path, encoding="utf-8") as handle:
        return parse_grid(handle)


def build_graph(grid_map: GridMap) -> list[list[tuple[int, int]]]:
    """Return an adjacency list of (neighbour, weight) pairs between open cells."""
    rows, cols = grid_map.rows, grid_map.columns
    adj: list[list[tuple[int, int]]] = [[] for _ in range(rows * cols)]
    for r in range(rows):
        for c in range(cols):
            if grid_map.grid[r][c] == WALL:
                continue
            edges = adj[r * cols + c]
            for dr, dc in _MOVES:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and grid_map.grid[nr][nc] != WALL:
                    edges.append((nr * cols + nc, 1))
    return adj


def dijkstra(adj: Adjacency, src: int) -> SearchResult:
    """Single-source shortest paths over non-negative weights."""
    distances: list[float] = [UNREACHABLE] * len(adj)
    parents: list[Optional[int]] = [None] * len(adj)
    distances[src] = 0
    heap = [(0, src)]
    iterations = 0
    while heap:
        iterations += 1
        dist, u = heapq.heappop(heap)
        if dist > distances[u]:
            continue
        for v, weight in adj[u]:
            candidate = distances[u] + weight
            if candidate < distances[v]:
                distances[v] = candidate
                parents[v] = u
                heapq.heappush(heap, (candidate, v))
    return SearchResult(distances, parents, iterations)


def bfs(adj: Adjacency, src: int) -> SearchResult:
    """Single-source hop counts, ignoring edge weights."""
    distances: list[float] = [UNREACHABLE] * len(adj)
    parents: list[Optional[int]] = [None] * len(adj)
    distances[src] = 0
    queue = deque([src])
    iterations = 0
    while queue:
        iterations += 1
        u = queue.popleft()
        for v, _ in adj[u]:
            if distances[v] == UNREACHABLE:
                distances[v] = distances[u] + 1
                parents[v] = u
                queue.append(v)
    return SearchResult(distances, parents, iterations)


def reconstruct_path(parents: Sequence[Optional[int]], target: int) -> list[int]:
    """Follow parent links back from ``target``; return the path from its root."""
    path = []
    node: Optional[int] = target
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def render_step(node_id: int, columns: int, grid: Sequence[str]) -> str:
    """Draw ``grid`` with the cell ``node_id`` marked, unless it is S or T."""
    row, col = divmod(node_id, columns)
    lines = list(grid)
    if lines[row][col] not in (START, TARGET):
        line = lines[row]
        lines[row] = line[:col] + STEP + line[col + 1 :]
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Find and draw the shortest path from S to T in a grid file."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("path", nargs="?", default="grid.txt")
    args = parser.parse_args(argv)
    try:
        grid_map = load_grid(args.path)
    except (OSError, ValueError) as exc:
        print(f"Error: cannot load {args.path}: {exc}", file=sys.stderr)
        return 1

    print(f"Rows: {grid_map.rows}, Cols: {grid_map.columns}")
    adj = build_graph(grid_map)
    start, end = grid_map.start, grid_map.end
    if start is None or end is None:
        print("Error: Start (S) or End (T) not found in grid.", file=sys.stderr)
        shown_start = -1 if start is None else start
        shown_end = -1 if end is None else end
        print(f"Start: {shown_start}, End: {shown_end}", file=sys.stderr)
        return 1

    result = dijkstra(adj, start)
    if result.distances[end] == UNREACHABLE:
        print("No se encontró un camino.")
        print(f"Iteraciones realizadas: {result.iterations}")
        return 0

    for node in reconstruct_path(result.parents, end):
        print(render_step(node, grid_map.columns, grid_map.grid))
        print(SEPARATOR + "\n")

    hops = bfs(adj, start)
    if hops.distances[end] == UNREACHABLE:
        print("BFS: No se encontró un camino.")
    else:
        print("\n--- Dijkstra ---")
        print(f"Costo del camino: {result.distances[end]}")
        print(f"Iteraciones realizadas: {result.iterations}")
        print("\n--- BFS ---")
        print(f"Costo del camino: {hops.distances[end]}")
        print(f"Iteraciones realizadas: {hops.iterations}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())