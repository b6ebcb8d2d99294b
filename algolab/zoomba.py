"""Simulate a cleaning robot sweeping a grid with breadth- or depth-first search."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

Cell = tuple[int, int]

WALL = "#"
START = "S"
CLEAN = "."
ROBOT = "O"
SEPARATOR = "-----------------"

# Neighbour order: down, up, right, left.
_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))

SAMPLE_MAPS = (
    ("MAP 1 (Small)", "S++/#++/+++"),
    ("MAP 2 (half)", "S+++#/#+#++/++++#/++#++"),
    ("MAP 3 (Complex)", "S++#++#/#+#+++#/++#+++#/#+#++++"),
)


def parse_layout(layout: str) -> tuple[list[list[str]], Cell]:
    """Split a ``/``-separated layout into grid rows and find the start cell.

    The width is taken from the first row; longer rows are cut to it.
    The start is the last ``S`` in row-major order, or ``(0, 0)`` if none.
    """
    rows = layout.split("/")
    if len(rows) > 1 and rows[-1] == "":
        rows.pop()
    if not rows or not rows[0]:
        raise ValueError("layout must have at least one non-empty row")
    columns = len(rows[0])
    if any(len(row) < columns for row in rows):
        raise ValueError("every row must be at least as wide as the first")
    grid = [list(row[:columns]) for row in rows]
    start: Cell = (0, 0)
    for r, cells in enumerate(grid):
        for c, ch in enumerate(cells):
            if ch == START:
                start = (r, c)
    return grid, start


@dataclass(frozen=True)
class CleaningRun:
    """The cells visited in order and the grid drawn at each step."""

    path: tuple[Cell, ...]
    frames: tuple[str, ...]

    @property
    def energy(self) -> int:
        """Energy spent: one unit per visited cell."""
        return len(self.path)


class Zoomba:
    """A grid of floor (anything but ``#``) that the robot cleans from its start."""

    def __init__(self, layout: str) -> None:
        self.grid, self.start = parse_layout(layout)

    def render(self, row: int, col: int) -> str:
        """Draw the grid with the robot at ``(row, col)``, followed by a separator."""
        lines = [
            "".join(
                f"{ROBOT if (r, c) == (row, col) else ch} "
                for c, ch in enumerate(cells)
            )
            for r, cells in enumerate(self.grid)
        ]
        lines.append(SEPARATOR)
        return "\n".join(lines)

    def _neighbors(self, cell: Cell, visited: set[Cell]) -> list[Cell]:
        rows, cols = len(self.grid), len(self.grid[0])
        found = []
        for dr, dc in _MOVES:
            r, c = cell[0] + dr, cell[1] + dc
            if 0 <= r < rows and 0 <= c < cols and self.grid[r][c] != WALL:
                if (r, c) not in visited:
                    visited.add((r, c))
                    found.append((r, c))
        return found

    def _clean(self, take: Callable[[deque], Cell]) -> CleaningRun:
        visited = {self.start}
        pending: deque[Cell] = deque([self.start])
        path: list[Cell] = []
        frames: list[str] = []
        while pending:
            current = take(pending)
            path.append(current)
            r, c = current
            self.grid[r][c] = START if current == self.start else CLEAN
            frames.append(self.render(r, c))
            pending.extend(self._neighbors(current, visited))
        return CleaningRun(tuple(path), tuple(frames))

    def clean_bfs(self) -> CleaningRun:
        """Sweep the reachable floor breadth-first, marking cleaned cells."""
        return self._clean(deque.popleft)

    def clean_dfs(self) -> CleaningRun:
        """Sweep the reachable floor depth-first, marking cleaned cells."""
        return self._clean(deque.pop)


def _report(run: CleaningRun) -> None:
    for frame in run.frames:
        print(frame)
    print(f"Total energy used: {run.energy}")


def main(argv: Optional[list[str]] = None) -> int:
    """Clean the sample maps with both strategies and print every step."""
    for index, (title, layout) in enumerate(SAMPLE_MAPS):
        prefix = "\n" if index else ""
        print(f"{prefix}========== {title} ==========")
        print("----- BFS -----")
        _report(Zoomba(layout).clean_bfs())
        print("----- DFS -----")
        _report(Zoomba(layout).clean_dfs())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())