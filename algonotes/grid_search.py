"""Depth- and breadth-first searches over grids, mazes and a file tree."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

Cell = tuple[int, int]

_WALK_WAYS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_MAZE_WAYS = ((-1, 0), (1, 0), (0, -1), (0, 1))
OBSTACLE_PERCENT = 10


def _neighbours(grid: Sequence[Sequence[int]], cell: Cell, ways) -> Iterator[Cell]:
    row, col = cell
    for dr, dc in ways:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def _check_start(grid: Sequence[Sequence[int]], start: Cell) -> Cell:
    row, col = start
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError("start lies outside the board")
    return row, col


def grid_dfs_order(board: Sequence[Sequence[int]], start: Cell = (0, 0)) -> list[Cell]:
    """Cells of value 1 reached from start, in the order a stack-based search visits them."""
    origin = _check_start(board, start)
    seen = {origin}
    stack = [origin]
    order: list[Cell] = []
    while stack:
        cell = stack.pop()
        order.append(cell)
        for r, c in _neighbours(board, cell, _WALK_WAYS):
            if (r, c) in seen or board[r][c] != 1:
                continue
            seen.add((r, c))
            stack.append((r, c))
    return order


def grid_bfs_order(board: Sequence[Sequence[int]], start: Cell = (0, 0)) -> list[Cell]:
    """Cells of value 1 reached from start, in breadth-first visiting order."""
    origin = _check_start(board, start)
    seen = {origin}
    queue = deque([origin])
    order: list[Cell] = []
    while queue:
        cell = queue.popleft()
        order.append(cell)
        for r, c in _neighbours(board, cell, _WALK_WAYS):
            if (r, c) in seen or board[r][c] != 1:
                continue
            seen.add((r, c))
            queue.append((r, c))
    return order


def _exit_of(maze: Sequence[Sequence[int]]) -> Cell:
    size = len(maze)
    if size == 0 or any(len(row) != size for row in maze):
        raise ValueError("maze must be a non-empty square")
    return size - 1, size - 1


def maze_has_exit_dfs(maze: Sequence[Sequence[int]]) -> bool:
    """Whether open cells (0) lead from the top-left to the bottom-right corner, searched depth-first."""
    goal = _exit_of(maze)
    seen = {(0, 0)}
    stack = [(0, 0)]
    while stack:
        cell = stack.pop()
        if cell == goal:
            return True
        for r, c in _neighbours(maze, cell, _MAZE_WAYS):
            if maze[r][c] == 0 and (r, c) not in seen:
                seen.add((r, c))
                stack.append((r, c))
    return False


def maze_has_exit_bfs(maze: Sequence[Sequence[int]]) -> bool:
    """Whether open cells (0) lead from the top-left to the bottom-right corner, searched breadth-first."""
    goal = _exit_of(maze)
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return True
        for r, c in _neighbours(maze, cell, _MAZE_WAYS):
            if maze[r][c] == 0 and (r, c) not in seen:
                seen.add((r, c))
                queue.append((r, c))
    return False


def random_maze(size: int, rng: Optional[random.Random] = None) -> list[list[int]]:
    """Square maze with about one cell in ten blocked; both corners are always open."""
    if size < 1:
        raise ValueError("maze size must be positive")
    source = rng if rng is not None else random.Random()
    maze = [
        [1 if source.randrange(100) < OBSTACLE_PERCENT else 0 for _ in range(size)]
        for _ in range(size)
    ]
    maze[0][0] = 0
    maze[-1][-1] = 0
    return maze


@dataclass
class FileNode:
    """A file or folder in a directory tree."""

    name: str
    is_file: bool = False
    children: list["FileNode"] = field(default_factory=list)


def find_file(root: FileNode, name: str) -> Optional[FileNode]:
    """First file with the given name in depth-first order, or None."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_file and node.name == name:
            return node
        stack.extend(reversed(node.children))
    return None