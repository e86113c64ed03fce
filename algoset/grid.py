"""Grid dynamic programming: two robots collecting cherries."""

from collections.abc import Sequence


def cherry_pickup(grid: Sequence[Sequence[int]]) -> int:
    """Return the most cherries two robots starting in the top corners can collect.

    Each robot moves down one row per step, shifting at most one column; a cell
    shared by both robots is counted once. Only rows below the first contribute
    to the best value found.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    rows = len(grid)
    width = len(grid[0])

    previous = [[0] * width for _ in range(width)]
    previous[0][width - 1] = grid[0][0] + grid[0][width - 1]
    best = 0

    for i in range(1, rows):
        row = grid[i]
        current = [[0] * width for _ in range(width)]
        for j in range(min(i, width - 1) + 1):
            for k in range(max(j, width - i - 1), width):
                reachable = max(
                    previous[a][b]
                    for a in (j - 1, j, j + 1)
                    for b in (k - 1, k, k + 1)
                    if 0 <= a < width and 0 <= b < width
                )
                gained = row[j] if j == k else row[j] + row[k]
                current[j][k] = reachable + gained
                best = max(best, current[j][k])
        previous = current

    return best