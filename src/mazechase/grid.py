from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .tiles import EMPTY, WALL, char_for_kind, is_collectible, kind_for_char

XY = Tuple[int, int]


@dataclass
class Grid:
    cells: List[List[str]]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        if not rows:
            raise ValueError("layout must have at least one row")
        width = len(rows[0])
        if width == 0 or any(len(r) != width for r in rows):
            raise ValueError("layout rows must be non-empty and of equal width")
        return cls(cells=[[kind_for_char(ch) for ch in row] for row in rows])

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, pos: XY) -> str:
        x, y = pos
        if not self.in_bounds(x, y):
            return WALL
        return self.cells[y][x]

    def is_wall(self, pos: XY) -> bool:
        return self.cell_at(pos) == WALL

    def consume(self, pos: XY) -> str:
        """Clear a pellet/power cell and return what was there.

        Non-collectible cells are left alone and report EMPTY.
        """
        kind = self.cell_at(pos)
        if not is_collectible(kind):
            return EMPTY
        x, y = pos
        self.cells[y][x] = EMPTY
        return kind

    def clear(self, pos: XY) -> None:
        x, y = pos
        if self.in_bounds(x, y) and self.cells[y][x] != WALL:
            self.cells[y][x] = EMPTY

    def collectibles_remaining(self) -> int:
        return sum(1 for row in self.cells for kind in row if is_collectible(kind))

    def copy(self) -> "Grid":
        return Grid(cells=[row[:] for row in self.cells])

    def as_rows(self) -> List[str]:
        return ["".join(char_for_kind(k) for k in row) for row in self.cells]
