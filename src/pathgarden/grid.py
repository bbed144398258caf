from typing import Iterator, List, NamedTuple, Optional, Sequence

from .tiles import Direction

Rotations = List[List[int]]


class Point(NamedTuple):
    x: int  # column
    y: int  # row

    def step(self, d: Direction) -> "Point":
        dx, dy = d.delta
        return Point(self.x + dx, self.y + dy)

    @property
    def key(self) -> str:
        return tile_key(self.x, self.y)


class RotationGridError(ValueError):
    """Rotation grid shape does not match the level layout."""


def tile_key(col: int, row: int) -> str:
    # matches grid[row][col] and Point(x=col, y=row)
    return f"{col},{row}"


def in_bounds(cols: int, rows: int, p: Point) -> bool:
    return 0 <= p.x < cols and 0 <= p.y < rows


def neighbor(cols: int, rows: int, p: Point, d: Direction) -> Optional[Point]:
    q = p.step(d)
    return q if in_bounds(cols, rows, q) else None


def direction_between(a: Point, b: Point) -> Direction:
    if b.x > a.x:
        return Direction.E
    if b.x < a.x:
        return Direction.W
    if b.y > a.y:
        return Direction.S
    return Direction.N


def iter_cells(cols: int, rows: int) -> Iterator[Point]:
    # row-major
    for y in range(rows):
        for x in range(cols):
            yield Point(x, y)


def clone_rotations(grid: Sequence[Sequence[int]]) -> Rotations:
    return [list(row) for row in grid]


def check_rotation_grid(cols: int, rows: int, grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != rows or any(len(row) != cols for row in grid):
        got = f"{len(grid)} rows of {[len(r) for r in grid]}"
        raise RotationGridError(f"expected {rows} rows of {cols} columns, got {got}")
