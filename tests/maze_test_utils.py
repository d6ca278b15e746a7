from collections import deque

# Kept independent of mazegen.maze.connectivity so the carver is checked
# against a second implementation of the flood fill.


class FixedRng:
    """RNG stand-in that always draws the same value (clamped into range).

    ``randrange(4)`` with value 2 makes the carver scan right, down, left, up.
    ``shuffle`` leaves the sequence untouched. Every call is recorded.
    """

    def __init__(self, value=0):
        self.value = value
        self.calls = []

    def randrange(self, start, stop=None):
        if stop is None:
            start, stop = 0, start
        self.calls.append((start, stop))
        return min(max(self.value, start), stop - 1)

    def shuffle(self, seq):
        self.calls.append(("shuffle", len(seq)))


def bfs_reachable(grid, start=(0, 0)):
    """Return set of (x,y) cells reachable from start through open walls."""
    w, h = grid.width, grid.height
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        cell = grid.cells[x][y]
        steps = []
        if y > 0 and cell.top_open:
            steps.append((x, y - 1))
        if x > 0 and cell.left_open:
            steps.append((x - 1, y))
        if y + 1 < h and grid.cells[x][y + 1].top_open:
            steps.append((x, y + 1))
        if x + 1 < w and grid.cells[x + 1][y].left_open:
            steps.append((x + 1, y))
        for n in steps:
            if n not in vis:
                vis.add(n)
                q.append(n)
    return vis


def open_wall_count(grid):
    total = 0
    for x in range(grid.width):
        for y in range(grid.height):
            c = grid.cells[x][y]
            total += int(c.top_open and y > 0) + int(c.left_open and x > 0)
    return total


def interior_wall_total(w, h):
    return (w - 1) * h + w * (h - 1)


def snapshot_flags(grid):
    return [[(c.top_open, c.left_open) for c in column] for column in grid.cells]
