"""Breadth-first searches over grids: melting icebergs, ripening tomatoes, knights, mazes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Cell = tuple[int, ...]

_FOUR_WAYS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_SIX_WAYS = ((-1, 0, 0), (1, 0, 0), (0, -1, 0), (0, 1, 0), (0, 0, -1), (0, 0, 1))
_KNIGHT_WAYS = ((1, 2), (2, 1), (-1, -2), (-2, -1), (1, -2), (2, -1), (-1, 2), (-2, 1))
# Every move except "up"; searched backwards from the goal cells.
_NO_UP_WAYS = ((-1, 0), (-1, -1), (-1, 1), (0, -1), (0, 1), (1, 1), (1, -1))


def _rectangular(rows: Iterable[Sequence[int]]) -> list[list[int]]:
    grid = [list(row) for row in rows]
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("all rows must have the same length")
    return grid


def _grid_neighbours(grid: list[list[int]], row: int, col: int):
    for dr, dc in _FOUR_WAYS:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def _count_icebergs(grid: list[list[int]]) -> int:
    seen: set[tuple[int, int]] = set()
    pieces = 0
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            if height <= 0 or (r, c) in seen:
                continue
            pieces += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cur = queue.popleft()
                for nr, nc in _grid_neighbours(grid, *cur):
                    if grid[nr][nc] > 0 and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return pieces


def _melt(grid: list[list[int]]) -> list[list[int]]:
    melted = [[0] * len(row) for row in grid]
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            if height == 0:
                continue
            water = sum(1 for nr, nc in _grid_neighbours(grid, r, c) if grid[nr][nc] == 0)
            melted[r][c] = max(height - water, 0)
    return melted


def years_until_split(grid: Iterable[Sequence[int]]) -> int:
    """Years until the iceberg breaks into two or more pieces; 0 if it melts whole."""
    heights = _rectangular(grid)
    year = 0
    while True:
        pieces = _count_icebergs(heights)
        if pieces == 0:
            return 0
        if pieces >= 2:
            return year
        heights = _melt(heights)
        year += 1


def _ripen(states: dict[Cell, int], directions: Sequence[Cell]) -> int:
    days = {cell: (-1 if state == 0 else 0) for cell, state in states.items()}
    queue = deque(cell for cell, state in states.items() if state == 1)
    while queue:
        cur = queue.popleft()
        for step in directions:
            nxt = tuple(a + b for a, b in zip(cur, step))
            if days.get(nxt, 0) >= 0:
                continue
            days[nxt] = days[cur] + 1
            queue.append(nxt)
    if any(day == -1 for day in days.values()):
        return -1
    return max(days.values(), default=0)


def days_to_ripen(box: Iterable[Sequence[int]]) -> int:
    """Days until every tomato ripens (1 ripe, 0 unripe, -1 empty), or -1 if some never do."""
    grid = _rectangular(box)
    states = {(r, c): state for r, row in enumerate(grid) for c, state in enumerate(row)}
    return _ripen(states, _FOUR_WAYS)


def days_to_ripen_3d(boxes: Iterable[Iterable[Sequence[int]]]) -> int:
    """Like days_to_ripen for stacked boxes, spreading up and down as well."""
    layers = [_rectangular(layer) for layer in boxes]
    if layers and any(
        len(layer) != len(layers[0]) or (layer and len(layer[0]) != len(layers[0][0]))
        for layer in layers
    ):
        raise ValueError("all layers must have the same shape")
    states = {
        (z, r, c): state
        for z, layer in enumerate(layers)
        for r, row in enumerate(layer)
        for c, state in enumerate(row)
    }
    return _ripen(states, _SIX_WAYS)


def knight_moves(size: int, start: tuple[int, int], goal: tuple[int, int]) -> int:
    """Fewest knight moves from start to goal on a size-by-size board."""
    if size < 1:
        raise ValueError("board size must be positive")
    for x, y in (start, goal):
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError("position outside the board")
    start, goal = tuple(start), tuple(goal)
    moves = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return moves[cur]
        for dx, dy in _KNIGHT_WAYS:
            nxt = (cur[0] + dx, cur[1] + dy)
            if 0 <= nxt[0] < size and 0 <= nxt[1] < size and nxt not in moves:
                moves[nxt] = moves[cur] + 1
                queue.append(nxt)
    raise ValueError("goal cannot be reached")


def reachable_cells(rows: Sequence[str]) -> int:
    """Number of '.' cells that can reach an 'F' without ever moving up or crossing '#'."""
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    seen = {(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "F"}
    queue = deque(seen)
    while queue:
        r, c = queue.popleft()
        for dr, dc in _NO_UP_WAYS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(rows) and 0 <= nc < len(rows[nr])):
                continue
            if rows[nr][nc] == "#" or (nr, nc) in seen:
                continue
            seen.add((nr, nc))
            queue.append((nr, nc))
    return sum(1 for r, c in seen if rows[r][c] == ".")