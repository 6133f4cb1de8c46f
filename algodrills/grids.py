"""Island counting on grids of land and water."""

from collections import deque
from typing import Sequence

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ALL_AROUND = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
)


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of '1' cells joined horizontally, vertically or diagonally."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen = [[False] * cols for _ in range(rows)]
    islands = 0
    for r in range(rows):
        for c in range(cols):
            if seen[r][c] or grid[r][c] != "1":
                continue
            islands += 1
            seen[r][c] = True
            queue = deque([(r, c)])
            while queue:
                row, col = queue.popleft()
                for dr, dc in _ALL_AROUND:
                    nr, nc = row + dr, col + dc
                    if (0 <= nr < rows and 0 <= nc < cols
                            and grid[nr][nc] == "1" and not seen[nr][nc]):
                        seen[nr][nc] = True
                        queue.append((nr, nc))
    return islands


def _shape(grid: Sequence[Sequence[int]], seen: list[list[bool]], r0: int, c0: int) -> tuple:
    rows, cols = len(grid), len(grid[0])
    seen[r0][c0] = True
    shape = [(0, 0)]
    stack = [(r0, c0, iter(_ORTHOGONAL))]
    while stack:
        row, col, directions = stack[-1]
        for dr, dc in directions:
            nr, nc = row + dr, col + dc
            if (0 <= nr < rows and 0 <= nc < cols
                    and not seen[nr][nc] and grid[nr][nc] == 1):
                seen[nr][nc] = True
                shape.append((nr - r0, nc - c0))
                stack.append((nr, nc, iter(_ORTHOGONAL)))
                break
        else:
            stack.pop()
    return tuple(shape)


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count differently shaped groups of 1 cells joined horizontally or vertically."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen = [[False] * cols for _ in range(rows)]
    shapes = set()
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] == 1 and not seen[r][c]:
                shapes.add(_shape(grid, seen, r, c))
    return len(shapes)