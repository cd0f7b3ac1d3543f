from collections import deque

import matplotlib
import pytest

matplotlib.use("Agg")

from mazegen.environment.maze import GridMaze, generate_maze


@pytest.fixture
def maze_15() -> GridMaze:
    return generate_maze(15, 15, seed=42)


def reachable_from(maze: GridMaze, start=(1, 1)) -> set:
    """BFS по проходах від start (x, y)."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nxt in maze.passage_neighbors(x, y):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def has_cycle_outside_goal_zones(maze: GridMaze) -> bool:
    """Union-find по ребрах між проходами поза цільовими зонами."""
    parent = {}

    def find(node):
        while parent.setdefault(node, node) != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    for cell in maze.passage_cells():
        if maze.in_goal_zone(cell.x, cell.y):
            continue
        # Кожне ребро перевіряється один раз: праворуч і вниз
        for nx, ny in ((cell.x + 1, cell.y), (cell.x, cell.y + 1)):
            if not maze.is_walkable(nx, ny) or maze.in_goal_zone(nx, ny):
                continue
            a, b = find((cell.x, cell.y)), find((nx, ny))
            if a == b:
                return True
            parent[a] = b
    return False
