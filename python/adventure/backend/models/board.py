"""Board model for the sliding puzzle level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

PUZZLE_SIZE = 3


class Direction(StrEnum):
    """Direction a *tile* slides into the gap (not the way the gap moves)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Cells are stored flat in row-major order. 0 represents the empty slot.
    The solved layout puts the empty slot first: ``[0, 1, 2, ..., n*n - 1]``.
    """

    size: int
    cells: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int], size: int = PUZZLE_SIZE) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat([1, 0, 2, 3, 4, 5, 6, 7, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} cells for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Cells must be a permutation of 0..{size * size - 1}, got {flat}."
            )
        return cls(size=size, cells=list(flat))

    @classmethod
    def solved(cls, size: int = PUZZLE_SIZE) -> Board:
        """Return the goal layout (empty slot top-left, then 1..n*n-1)."""
        return cls(size=size, cells=list(range(size * size)))

    # -- queries --------------------------------------------------------------

    @property
    def empty_index(self) -> int:
        return self.cells.index(0)

    def position(self, index: int) -> tuple[int, int]:
        """Return ``(row, col)`` of a flat index."""
        return divmod(index, self.size)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.size * self.size

    def is_adjacent(self, a: int, b: int) -> bool:
        """True if the two cells are 4-neighbours (Manhattan distance 1)."""
        ar, ac = self.position(a)
        br, bc = self.position(b)
        return abs(ar - br) + abs(ac - bc) == 1

    def is_solved(self) -> bool:
        """Check if every cell holds its own index."""
        return all(v == i for i, v in enumerate(self.cells))

    def is_tile_correct(self, index: int) -> bool:
        """Check if a specific cell is in its goal position."""
        return self.cells[index] == index

    def neighbors(self, index: int) -> list[int]:
        row, col = self.position(index)
        n = self.size
        out: list[int] = []
        if row > 0:
            out.append(index - n)
        if row < n - 1:
            out.append(index + n)
        if col > 0:
            out.append(index - 1)
        if col < n - 1:
            out.append(index + 1)
        return out

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    # -- mutation -------------------------------------------------------------

    def swap_with_empty(self, index: int) -> None:
        """Swap ``index`` with the empty slot. Adjacency is not checked."""
        empty = self.empty_index
        self.cells[empty], self.cells[index] = self.cells[index], self.cells[empty]

    def copy(self) -> Board:
        return Board(size=self.size, cells=self.cells[:])
