"""Game flow: the human and computer turns and the interactive console loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from enum import Enum

from .board import MIN_WORD_LENGTH, Board
from .cubes import BoardSize, original_cubes, ordinal_suffix, roll_letters, shuffle_cubes
from .display import BoggleDisplay, Player
from .lexicon import Lexicon

DEFAULT_WORDS_FILE = "EnglishWords.dat"

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

WELCOME = (
    "Welcome!  You're about to play an intense game "
    "of mind-numbing Boggle.  The good news is that "
    "you might improve your vocabulary a bit.  The "
    "bad news is that you're probably going to lose "
    "miserably to this little dictionary-toting hunk "
    "of silicon.  If only YOU had a gig of RAM...\n"
)

INSTRUCTIONS = (
    "\nThe boggle board is a grid onto which I "
    "I will randomly distribute cubes. These "
    "6-sided cubes have letters rather than "
    "numbers on the faces, creating a grid of "
    "letters on which you try to form words. "
    "You go first, entering all the words you can "
    "find that are formed by tracing adjoining "
    "letters. Two letters adjoin if they are next "
    "to each other horizontally, vertically, or "
    "diagonally. A letter can only be used once "
    "in each word. Words must be at least four "
    "letters long and can be counted only once. "
    "You score points based on word length: a "
    "4-letter word is worth 1 point, 5-letters "
    "earn 2 points, and so on. After your puny "
    "brain is exhausted, I, the supercomputer, "
    "will find all the remaining words and double "
    "or triple your paltry score.\n"
)


class WordCheck(Enum):
    """Outcome of checking a word the human entered."""

    TOO_SHORT = "Word must be at least 4 characters long"
    NOT_A_WORD = "Not a valid English word"
    ALREADY_GUESSED = "You've already guessed that word"
    NOT_ON_BOARD = "Word cannot be formed from the board"
    CORRECT = "Correct"

    @property
    def message(self) -> str:
        return self.value


class BoggleGame:
    """One round of Boggle on a fixed board."""

    def __init__(
        self,
        board: Board,
        lexicon: Lexicon,
        display: BoggleDisplay | None = None,
    ) -> None:
        self.board = board
        self.lexicon = lexicon
        self.display = display
        self.human_words: set[str] = set()
        self.computer_words: set[str] = set()

    def check_word(self, word: str) -> WordCheck:
        """Judge a human guess and record it when it is correct."""
        word = word.lower()
        if len(word) < MIN_WORD_LENGTH:
            return WordCheck.TOO_SHORT
        if word not in self.lexicon:
            return WordCheck.NOT_A_WORD
        if word in self.human_words:
            return WordCheck.ALREADY_GUESSED
        path = self.board.find_path(word)
        if path is None:
            return WordCheck.NOT_ON_BOARD
        self.human_words.add(word)
        if self.display is not None:
            self.display.highlight_path(path)
            self.display.record_word_for_player(word, Player.HUMAN)
        return WordCheck.CORRECT

    def computer_turn(self) -> list[str]:
        """Find every remaining word on the board, in discovery order."""
        found = []
        for word, path in self.board.find_words(self.lexicon, self.human_words):
            found.append(word)
            if self.display is not None:
                self.display.record_word_for_player(word, Player.COMPUTER)
                self.display.highlight_path(path)
        self.computer_words = set(found)
        return found


def _read_integer(prompt: str, read_line: ReadLine, write: Write) -> int:
    while True:
        text = read_line(prompt).strip()
        try:
            return int(text)
        except ValueError:
            write("Illegal integer format. Try again.")


def ask_choice(
    prompt: str,
    header: str | None,
    read_line: ReadLine,
    write: Write,
) -> int:
    """Ask until the answer is 1 or 2; the header, if any, is shown before each try."""
    while True:
        if header:
            write(header)
        choice = _read_integer(prompt, read_line, write)
        if choice in (1, 2):
            return choice
        write("Choose 1 or 2" if header else "Enter 1 or 2")


def read_custom_cubes(count: int, read_line: ReadLine) -> list[str]:
    """Ask for the faces of ``count`` cubes, returned in upper case."""
    return [
        read_line(f"Enter {number}{ordinal_suffix(number)} Configuration: ").upper()
        for number in range(1, count + 1)
    ]


def _human_turn(game: BoggleGame, read_line: ReadLine, write: Write) -> None:
    while True:
        word = read_line("Enter word : ").lower()
        if not word:
            return
        write(game.check_word(word).message)


def play(
    lexicon: Lexicon,
    read_line: ReadLine = input,
    write: Write = print,
    rng: random.Random | None = None,
) -> None:
    """Run the interactive game until the player chooses to exit."""
    rng = rng or random.Random()
    write(WELCOME)
    write(INSTRUCTIONS)
    read_line("Hit return when you're ready...")
    display = BoggleDisplay()
    while True:
        size_choice = ask_choice(
            "1)standard  2)big : ", "Choose size of a board", read_line, write
        )
        size = BoardSize.STANDARD if size_choice == 1 else BoardSize.BIG
        setup = ask_choice("1)Custom  2)Default : ", "Choose board set-up", read_line, write)
        if setup == 1:
            cubes = read_custom_cubes(size.value, read_line)
        else:
            cubes = original_cubes(size)
        cubes = shuffle_cubes(cubes, rng)

        display.draw_board(size.side, size.side)
        letters = roll_letters(cubes, rng)
        board = Board.from_letters(letters)
        for (row, col), letter in zip(board.cells(), letters):
            display.label_cube(row, col, letter.upper())
        write(display.render())

        game = BoggleGame(board, lexicon, display)
        _human_turn(game, read_line, write)
        game.computer_turn()
        write(display.render())

        if ask_choice("1)Restart Game  2)Exit ", None, read_line, write) == 2:
            return
        write("Starting a new game")


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Play Boggle against the computer.")
    parser.add_argument(
        "--words", default=DEFAULT_WORDS_FILE, help="word list, one word per line"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        lexicon = Lexicon.from_file(args.words)
    except OSError as exc:
        print(f"Cannot read word list {args.words}: {exc}")
        return 1
    try:
        play(lexicon, input, print, random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        print()
    print("Exited Game")
    return 0