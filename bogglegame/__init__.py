"""Boggle word game: word list, letter cubes, board search, text display and a terminal game."""

__version__ = "1.0.0"