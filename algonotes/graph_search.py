"""Graph representations and breadth-first searches over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

Adjacency = Sequence[Sequence[int]]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} outside 0..{vertex_count - 1}")


def adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Neighbour lists for vertices 0..vertex_count-1, in edge order."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Square 0/1 matrix where matrix[u][v] is 1 when an edge leads from u to v."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        matrix[u][v] = 1
        if not directed:
            matrix[v][u] = 1
    return matrix


def _bfs(adjacency: Adjacency, start: int) -> dict[int, int]:
    """Distances from start, keyed in the order the vertices are visited."""
    _check_vertex(start, len(adjacency))
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if neighbour in distances:
                continue
            distances[neighbour] = distances[current] + 1
            queue.append(neighbour)
    return distances


def bfs_order(adjacency: Adjacency, start: int) -> list[int]:
    """Vertices reachable from start, in breadth-first visiting order."""
    return list(_bfs(adjacency, start))


def bfs_distances(adjacency: Adjacency, start: int) -> list[Optional[int]]:
    """Edge count from start to every vertex; None where it cannot be reached."""
    distances = _bfs(adjacency, start)
    return [distances.get(vertex) for vertex in range(len(adjacency))]


def bfs_all_components(adjacency: Adjacency) -> list[list[int]]:
    """Breadth-first order of every connected piece, started from each unvisited vertex in turn."""
    seen: set[int] = set()
    components: list[list[int]] = []
    for vertex in range(len(adjacency)):
        if vertex in seen:
            continue
        order = bfs_order(adjacency, vertex)
        seen.update(order)
        components.append(order)
    return components


def shortest_path_length(adjacency: Adjacency, start: int, goal: int) -> Optional[int]:
    """Fewest edges from start to goal, or None when goal is unreachable."""
    _check_vertex(goal, len(adjacency))
    return _bfs(adjacency, start).get(goal)


@dataclass(frozen=True)
class FriendSearch:
    """People in the order they were reached, and everyone reached except the start."""

    order: list[str]
    friends: list[str]


def sns_friends(
    names: Sequence[str], friendships: Iterable[tuple[str, str]], start_name: str
) -> FriendSearch:
    """Breadth-first walk of a friendship network from one person."""
    index: dict[str, int] = {}
    for position, name in enumerate(names):
        index.setdefault(name, position)

    def lookup(name: str) -> int:
        try:
            return index[name]
        except KeyError:
            raise ValueError(f"unknown person: {name}") from None

    edges = [(lookup(a), lookup(b)) for a, b in friendships]
    graph = adjacency_list(len(names), edges)
    start = lookup(start_name)
    order = bfs_order(graph, start)
    return FriendSearch(
        order=[names[i] for i in order],
        friends=[names[i] for i in order if i != start],
    )


def min_stations(station_count: int, tubes: Iterable[Iterable[int]]) -> Optional[int]:
    """Fewest stations visited travelling from station 1 to the last one through hypertubes.

    Each tube links all its stations (numbered from 1); passing through a tube costs nothing.
    Returns None when the last station cannot be reached.
    """
    if station_count < 1:
        raise ValueError("there must be at least one station")
    links: dict[int, list[int]] = {}
    for number, tube in enumerate(tubes, start=1):
        hub = station_count + number
        for station in tube:
            if not 1 <= station <= station_count:
                raise ValueError(f"station {station} outside 1..{station_count}")
            links.setdefault(hub, []).append(station)
            links.setdefault(station, []).append(hub)

    visited = {1: 1}
    queue = deque([1])
    while queue:
        current = queue.popleft()
        if current == station_count:
            return visited[current]
        for nxt in links.get(current, ()):
            if nxt in visited:
                continue
            visited[nxt] = visited[current] + (0 if nxt > station_count else 1)
            queue.append(nxt)
    return None