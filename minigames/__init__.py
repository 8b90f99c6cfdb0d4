"""Game logic for a 15 puzzle, a clicker and the building blocks of a space shooter."""

__version__ = "0.1.0"