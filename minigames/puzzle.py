"""Game rules of the fifteen puzzle."""

from __future__ import annotations

import random

SIZE = 4
TILE_COUNT = SIZE * SIZE
SHUFFLE_MOVES = 1000
HOLE = 0

Position = tuple[int, int]


def is_valid_position(pos: Position) -> bool:
    """Tell whether ``pos`` (column, row) lies on the board."""
    x, y = pos
    return 0 <= x < SIZE and 0 <= y < SIZE


class PuzzleLogic:
    """Board state of the fifteen puzzle; ``0`` stands for the hole."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._tiles: list[int] = []
        self.new_game()

    def new_game(self) -> None:
        """Reset the board and shuffle it by moving the hole at random.

        Moving the hole rather than placing tiles at random keeps the board solvable.
        """
        self._tiles = list(range(1, TILE_COUNT)) + [HOLE]
        hole_x, hole_y = SIZE - 1, SIZE - 1
        steps = ((0, -1), (0, 1), (-1, 0), (1, 0))  # up, down, left, right
        for _ in range(SHUFFLE_MOVES):
            dx, dy = steps[self._rng.randint(0, 3)]
            other = (hole_x + dx, hole_y + dy)
            if not is_valid_position(other):
                continue
            self._swap((hole_x, hole_y), other)
            hole_x, hole_y = other

    def __getitem__(self, pos: Position) -> int:
        if not is_valid_position(pos):
            raise IndexError(f"position {pos!r} is off the board")
        x, y = pos
        return self._tiles[y * SIZE + x]

    def tiles(self) -> tuple[int, ...]:
        """Return all tiles row by row."""
        return tuple(self._tiles)

    def _swap(self, a: Position, b: Position) -> None:
        ia = a[1] * SIZE + a[0]
        ib = b[1] * SIZE + b[0]
        self._tiles[ia], self._tiles[ib] = self._tiles[ib], self._tiles[ia]

    def move(self, pos: Position) -> bool:
        """Slide the tile at ``pos`` into an adjacent hole.

        Return False when the position is off the board, holds the hole,
        or has no hole next to it.
        """
        if not is_valid_position(pos) or self[pos] == HOLE:
            return False
        x, y = pos
        for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if is_valid_position(neighbour) and self[neighbour] == HOLE:
                self._swap(pos, neighbour)
                return True
        return False

    def is_solved(self) -> bool:
        """Tell whether every tile is in its place."""
        return self._tiles == list(range(1, TILE_COUNT)) + [HOLE]