# bogglegame

A Boggle word game for the terminal. You search a grid of letter cubes for
words first, and then the computer finds every remaining word on the board.

## Installing

```
pip install .
```

## Playing

```
bogglegame --words EnglishWords.dat
```

Options:

- `--words PATH`: the word list, a text file with one word per line
  (default: `EnglishWords.dat` in the current directory).
- `--seed N`: seed for the random number generator, to repeat a board.

The game asks you to pick:

1. the board size: standard (4 x 4, 16 cubes) or big (5 x 5, 25 cubes);
2. the cube set: custom (you type in each cube's faces) or the default set.

The cubes are shuffled, each one is rolled to show one letter, and the board
is printed. Then you enter words one at a time. A word counts when it:

- is at least four letters long,
- is in the word list,
- has not been entered before, and
- can be traced through adjoining cubes (horizontally, vertically or
  diagonally), using each cube at most once.

Each guess is answered with a message saying whether it was correct or why it
was rejected. Enter an empty line when you run out of ideas. The computer then
takes its turn, finds every valid word you did not, and the board is printed
again with both players' scores and word lists. After each round you can
start a new game or exit.

Scoring follows word length: a 4-letter word is worth 1 point, a 5-letter
word 2 points, and so on.

## What it does not do

- No word list is included: supply your own with `--words`. If the file
  cannot be read, the command prints a message and exits with status 1.
- The board and scores are shown as plain text in the terminal; there is no
  graphical window.

## Using the pieces in your own code

The board search and word list work without the interactive game:

```python
from bogglegame.board import Board
from bogglegame.lexicon import Lexicon

lexicon = Lexicon(["tame", "team", "meat", "mate", "seam"])
board = Board.from_letters("tameesxxxxxxxxxx")   # 16 letters, row by row

"team" in lexicon                 # True; membership ignores case
lexicon.contains_prefix("te")     # True: some word starts with "te"

board.find_path("tame")           # [(0, 0), (0, 1), (0, 2), (0, 3)], or None
for word, path in board.find_words(lexicon, excluded={"tame"}, min_length=4):
    print(word, path)
```

`Lexicon.from_file(path)` loads a word list from a file.

`bogglegame.cubes` holds the standard and big cube sets (`original_cubes`
with a `BoardSize`), along with `shuffle_cubes` and `roll_letters` for setting
up a random board.

`bogglegame.display.BoggleDisplay` keeps the cube faces, highlights, word
lists and scores for both players (`Player.HUMAN`, `Player.COMPUTER`) and
renders them as text with `render()`; `score_word` gives the points a word is
worth.

`bogglegame.game.BoggleGame` runs one round on a fixed board:
`check_word(word)` judges a human guess and returns a `WordCheck`, and
`computer_turn()` returns the remaining words in the order found. `play()`
runs the whole interactive loop with injectable input, output and random
generator.

## Running the tests

```
pip install .[test]
pytest
```