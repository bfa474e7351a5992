"""Text display of a Boggle board, its word lists and scoreboard."""

from __future__ import annotations

import time
from collections.abc import Iterable
from enum import IntEnum

MAX_DIMENSION = 5
DEFAULT_DELAY = 0.1
PLAYER_NAMES = {0: "Me", 1: "Computer"}


class Player(IntEnum):
    """The two players of a game."""

    HUMAN = 0
    COMPUTER = 1

    @property
    def label(self) -> str:
        return PLAYER_NAMES[self.value]


def score_word(word: str) -> int:
    """Points for a word: a 4-letter word is worth 1, a 5-letter word 2, and so on."""
    return len(word) - 3


class BoggleDisplay:
    """Keeps the cube faces, highlights, word lists and scores, and renders them as text."""

    def __init__(self) -> None:
        self.delay = 0.0
        self._num_rows = 0
        self._num_cols = 0
        self._letters: list[list[str]] = []
        self._highlighted: set[tuple[int, int]] = set()
        self._words: dict[Player, list[str]] = {player: [] for player in Player}
        self._scores: dict[Player, int] = {player: 0 for player in Player}

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def highlighted(self) -> frozenset[tuple[int, int]]:
        """Cells currently shown highlighted."""
        return frozenset(self._highlighted)

    def draw_board(self, num_rows: int, num_cols: int) -> None:
        """Start a new board of blank cubes and reset scores and word lists."""
        if not (0 <= num_rows <= MAX_DIMENSION and 0 <= num_cols <= MAX_DIMENSION):
            raise ValueError("draw_board called with invalid dimensions")
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._letters = [[" "] * num_cols for _ in range(num_rows)]
        self._highlighted.clear()
        for player in Player:
            self._words[player] = []
            self._scores[player] = 0

    def _check_cell(self, row: int, col: int, caller: str) -> None:
        if not (0 <= row < self._num_rows and 0 <= col < self._num_cols):
            raise IndexError(f"{caller} called with invalid row, col arguments")

    def label_cube(self, row: int, col: int, letter: str) -> None:
        """Show ``letter`` on the face of the cube at (row, col)."""
        self._check_cell(row, col, "label_cube")
        if len(letter) != 1:
            raise ValueError("a cube face holds exactly one character")
        self._letters[row][col] = letter

    def highlight_cube(self, row: int, col: int, flag: bool) -> None:
        """Turn the highlight of the cube at (row, col) on or off."""
        self._check_cell(row, col, "highlight_cube")
        if flag:
            self._highlighted.add((row, col))
        else:
            self._highlighted.discard((row, col))

    def highlight_path(self, path: Iterable[tuple[int, int]]) -> None:
        """Highlight the cells of a path one by one, then clear them again."""
        cells = list(path)
        for row, col in cells:
            self.highlight_cube(row, col, True)
            if self.delay > 0:
                time.sleep(self.delay)
        for row, col in cells:
            self.highlight_cube(row, col, False)

    def record_word_for_player(self, word: str, player: Player | int) -> None:
        """Add a word to a player's list and add its points to their score."""
        try:
            player = Player(player)
        except ValueError:
            raise ValueError(
                "record_word_for_player called with invalid player argument"
            ) from None
        self._words[player].append(word.lower())
        self._scores[player] += score_word(word)

    def score(self, player: Player | int) -> int:
        return self._scores[Player(player)]

    def words(self, player: Player | int) -> tuple[str, ...]:
        return tuple(self._words[Player(player)])

    def render(self) -> str:
        """Return the board, then each player's score and words, as text."""
        lines = []
        for row in range(self._num_rows):
            cells = []
            for col in range(self._num_cols):
                letter = self._letters[row][col].upper()
                if (row, col) in self._highlighted:
                    cells.append(f"[{letter}]")
                else:
                    cells.append(f" {letter} ")
            lines.append("".join(cells).rstrip())
        for player in Player:
            lines.append(f"{player.label}: {self._scores[player]}")
            if self._words[player]:
                lines.append("  " + " ".join(self._words[player]))
        return "\n".join(lines)