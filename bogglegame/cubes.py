"""Letter cubes: the standard sets, shuffling and rolling."""

from __future__ import annotations

import random
from collections.abc import Sequence
from enum import Enum
from math import isqrt

STANDARD_CUBES: tuple[str, ...] = (
    "AAEEGN", "ABBJOO", "ACHOPS", "AFFKPS",
    "AOOTTW", "CIMOTU", "DEILRX", "DELRVY",
    "DISTTY", "EEGHNW", "EEINSU", "EHRTVW",
    "EIOSST", "ELRTTY", "HIMNQU", "HLNNRZ",
)

BIG_BOGGLE_CUBES: tuple[str, ...] = (
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM",
    "AEEGMU", "AEGMNN", "AFIRSY", "BJKQXZ", "CCNSTW",
    "CEIILT", "CEILPT", "CEIPST", "DDLNOR", "DDHNOT",
    "DHHLOR", "DHLNOR", "EIIITT", "EMOTTT", "ENSSSU",
    "FIPRSY", "GORRVW", "HIPRRY", "NOOTUW", "OOOTTU",
)


class BoardSize(Enum):
    """The number of cubes on a board."""

    STANDARD = 16
    BIG = 25

    @property
    def side(self) -> int:
        """Number of cubes along one edge of the square board."""
        return isqrt(self.value)


def original_cubes(size: BoardSize | int) -> list[str]:
    """Return the official cube faces for a board of the given size."""
    size = BoardSize(size)
    cubes = STANDARD_CUBES if size is BoardSize.STANDARD else BIG_BOGGLE_CUBES
    return list(cubes)


def shuffle_cubes(
    cubes: Sequence[str], rng: random.Random | None = None
) -> list[str]:
    """Return a shuffled copy: each position swaps with a random position."""
    rng = rng or random.Random()
    shuffled = list(cubes)
    last = len(shuffled) - 1
    for index in range(len(shuffled)):
        other = rng.randint(0, last)
        shuffled[index], shuffled[other] = shuffled[other], shuffled[index]
    return shuffled


def roll_letters(
    cubes: Sequence[str], rng: random.Random | None = None
) -> list[str]:
    """Pick one random face of every cube, in lower case."""
    rng = rng or random.Random()
    return [rng.choice(cube).lower() for cube in cubes]


def ordinal_suffix(number: int) -> str:
    """Suffix used in cube prompts: 1st, 2nd, 3rd, everything else 'th'."""
    return {1: "st", 2: "nd", 3: "rd"}.get(number, "th")