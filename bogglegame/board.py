"""The letter grid and the searches over it."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator, Sequence
from math import isqrt
from typing import Protocol

MIN_WORD_LENGTH = 4

Cell = tuple[int, int]
Path = tuple[Cell, ...]


class WordSource(Protocol):
    def __contains__(self, word: object) -> bool: ...

    def contains_prefix(self, prefix: str) -> bool: ...


class Board:
    """A rectangular grid of lower-case letters."""

    def __init__(self, rows: Iterable[Iterable[str]]) -> None:
        grid = tuple(tuple(letter.lower() for letter in row) for row in rows)
        if not grid or not grid[0]:
            raise ValueError("a board needs at least one cell")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("all board rows must have the same length")
        if any(len(letter) != 1 for row in grid for letter in row):
            raise ValueError("every cell must hold exactly one character")
        self._grid = grid

    @classmethod
    def from_letters(cls, letters: Iterable[str]) -> Board:
        """Build a square board from letters given in row-major order."""
        cells = list(letters)
        side = isqrt(len(cells))
        if side == 0 or side * side != len(cells):
            raise ValueError(f"{len(cells)} letters cannot fill a square board")
        return cls(cells[start:start + side] for start in range(0, len(cells), side))

    @property
    def num_rows(self) -> int:
        return len(self._grid)

    @property
    def num_cols(self) -> int:
        return len(self._grid[0])

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._grid

    def __getitem__(self, cell: Cell) -> str:
        row, col = cell
        if not self.in_bounds(row, col):
            raise IndexError(f"cell {cell} is outside the board")
        return self._grid[row][col]

    def __str__(self) -> str:
        return "\n".join("".join(row).upper() for row in self._grid)

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for row in range(self.num_rows):
            for col in range(self.num_cols):
                yield row, col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def neighbours(self, row: int, col: int) -> Iterator[Cell]:
        """The up to eight adjoining cells, scanned row by row."""
        for d_row in (-1, 0, 1):
            for d_col in (-1, 0, 1):
                if d_row == 0 and d_col == 0:
                    continue
                if self.in_bounds(row + d_row, col + d_col):
                    yield row + d_row, col + d_col

    def find_path(self, word: str) -> list[Cell] | None:
        """Return the first path of adjoining, unrepeated cells spelling ``word``."""
        word = word.lower()
        if not word:
            return None
        for cell in self.cells():
            if self[cell] == word[0]:
                path = self._trace([cell], word[1:])
                if path is not None:
                    return path
        return None

    def _trace(self, path: list[Cell], rest: str) -> list[Cell] | None:
        if not rest:
            return list(path)
        for cell in self.neighbours(*path[-1]):
            if self[cell] == rest[0] and cell not in path:
                path.append(cell)
                found = self._trace(path, rest[1:])
                if found is not None:
                    return found
                path.pop()
        return None

    def find_words(
        self,
        lexicon: WordSource,
        excluded: Collection[str] = frozenset(),
        min_length: int = MIN_WORD_LENGTH,
    ) -> Iterator[tuple[str, Path]]:
        """Yield every lexicon word on the board once, with the path that spells it."""
        skip = {word.lower() for word in excluded}
        found: set[str] = set()
        for cell in self.cells():
            yield from self._explore(lexicon, skip, found, min_length, [cell], self[cell])

    def _explore(
        self,
        lexicon: WordSource,
        skip: set[str],
        found: set[str],
        min_length: int,
        path: list[Cell],
        so_far: str,
    ) -> Iterator[tuple[str, Path]]:
        if not lexicon.contains_prefix(so_far):
            return
        if (
            len(so_far) >= min_length
            and so_far in lexicon
            and so_far not in skip
            and so_far not in found
        ):
            found.add(so_far)
            yield so_far, tuple(path)
        for cell in self.neighbours(*path[-1]):
            if cell not in path:
                path.append(cell)
                yield from self._explore(
                    lexicon, skip, found, min_length, path, so_far + self[cell]
                )
                path.pop()