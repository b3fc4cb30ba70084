"""The cell grid and its generation-by-generation evolution."""

from __future__ import annotations

import random
from collections.abc import Iterator
from os import PathLike

from .rules import Rules

ALIVE_GLYPH = "██"
DEAD_GLYPH = "  "


class BoardError(Exception):
    """Raised when a board cannot be loaded or combined with another."""


class Board:
    """A rectangular grid of dead or alive cells with non-wrapping edges."""

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"board dimensions must be non-negative, got {height}x{width}")
        self.height = height
        self.width = width
        self._cells = [[False] * width for _ in range(height)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"cell ({row}, {col}) is outside a {self.height}x{self.width} board"
            )

    def __getitem__(self, pos: tuple[int, int]) -> bool:
        row, col = pos
        self._check(row, col)
        return self._cells[row][col]

    def __setitem__(self, pos: tuple[int, int], value: bool) -> None:
        row, col = pos
        self._check(row, col)
        self._cells[row][col] = bool(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.height == other.height
            and self.width == other.width
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width}, alive={len(self.alive_cells())})"

    def __iter__(self) -> Iterator[tuple[bool, ...]]:
        """Iterate over the rows as tuples of cell values."""
        return (tuple(row) for row in self._cells)

    def alive_cells(self) -> set[tuple[int, int]]:
        """Return the coordinates of every living cell."""
        return {
            (r, c)
            for r, row in enumerate(self._cells)
            for c, alive in enumerate(row)
            if alive
        }

    def render(self) -> str:
        """Return the board as text, two characters per cell, one line per row."""
        return "".join(
            "".join(ALIVE_GLYPH if alive else DEAD_GLYPH for alive in row) + "\n"
            for row in self._cells
        )

    def print(self) -> None:
        """Write the rendered board to standard output."""
        print(self.render(), end="")

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living cells among the up to eight neighbours of a cell."""
        self._check(row, col)
        rows = range(max(row - 1, 0), min(row + 1, self.height - 1) + 1)
        cols = range(max(col - 1, 0), min(col + 1, self.width - 1) + 1)
        return sum(
            self._cells[r][c]
            for r in rows
            for c in cols
            if (r, c) != (row, col)
        )

    def is_cell_alive_next_gen(self, rules: Rules, row: int, col: int) -> bool:
        """Return whether a cell lives in the next generation under ``rules``."""
        return rules.apply(self[row, col], self.count_neighbors(row, col))

    def next_into(self, out: Board, rules: Rules) -> None:
        """Write the next generation into ``out``, which must be the same size."""
        if (out.height, out.width) != (self.height, self.width):
            raise BoardError(
                f"output board is {out.height}x{out.width}, "
                f"expected {self.height}x{self.width}"
            )
        out._cells = [
            [self.is_cell_alive_next_gen(rules, r, c) for c in range(self.width)]
            for r in range(self.height)
        ]

    def next(self, rules: Rules) -> Board:
        """Return a new board holding the next generation."""
        out = Board(self.height, self.width)
        self.next_into(out, rules)
        return out

    def random_fill(self, rng: random.Random | None = None) -> None:
        """Make each cell alive with a one-in-five chance."""
        gen = rng if rng is not None else random
        self._cells = [
            [gen.randint(0, 4) == 0 for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def clear(self) -> None:
        """Kill every cell."""
        self._cells = [[False] * self.width for _ in range(self.height)]

    def load(self, path: str | PathLike[str]) -> None:
        """Load a pattern: one line per row, ``0`` dead, any other byte alive.

        The board is cleared first. A pattern that does not fit raises
        :class:`BoardError`, leaving the cells read so far in place.
        """
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            raise BoardError(f"cannot read {path}: {exc}") from exc

        self.clear()
        row = col = 0
        for byte in data:
            if byte == ord("\n"):
                row += 1
                col = 0
                continue
            if row >= self.height or col >= self.width:
                raise BoardError(
                    f"pattern in {path} does not fit a {self.height}x{self.width} board"
                )
            self._cells[row][col] = byte != ord("0")
            col += 1