"""Screen layout and input handling of the fifteen puzzle."""

from __future__ import annotations

import enum
import math

from minigames.geometry import Rect, Sprite, Vec2
from minigames.puzzle import SIZE, TILE_COUNT, PuzzleLogic

BOX_SIZE = 512.0
TILE_SIZE = 118.0
PUZZLE_POS = Vec2(100.0, 124.0)
BORDER_SIZE = 19.0
TILE_GAP = 1.0
# Gap between tiles inside the spritesheet
TEXTURE_TILE_GAP = 2.0
TILE_UV_ORIGIN = Vec2(3.0, 514.0)

BOX_UV = Rect(Vec2(0.0, 0.0), Vec2(BOX_SIZE, BOX_SIZE))

NEW_GAME_SIZE = Vec2(238.0, 59.0)
NEW_GAME_UV = Rect(Vec2(532.0, 17.0), NEW_GAME_SIZE)
NEW_GAME_POS = Vec2(472.0, 10.0)

WIN_TEXT = "Победа!"
WIN_TEXT_POS = Vec2(200.0, 340.0)


class ClickResult(enum.Enum):
    """What a click on the window did."""

    NOTHING = "nothing"
    NEW_GAME = "new_game"
    MOVED = "moved"


def tile_uv(value: int) -> Rect:
    """Return the spritesheet area of the tile showing ``value`` (0..15)."""
    if not 0 <= value < TILE_COUNT:
        raise ValueError(f"tile value {value} out of range")
    column, row = value % SIZE, value // SIZE
    step = TILE_SIZE + TEXTURE_TILE_GAP
    return Rect(
        Vec2(TILE_UV_ORIGIN.x + column * step, TILE_UV_ORIGIN.y + row * step),
        Vec2(TILE_SIZE, TILE_SIZE),
    )


def tile_position(column: int, row: int) -> Vec2:
    """Return the screen position of the top-left corner of a board cell."""
    step = TILE_SIZE + TILE_GAP
    return Vec2(
        PUZZLE_POS.x + BORDER_SIZE + column * step,
        PUZZLE_POS.y + BORDER_SIZE + row * step,
    )


def cell_at(mouse_pos: Vec2) -> tuple[int, int]:
    """Return the (column, row) under the mouse; may lie off the board.

    A click on a gap counts for the cell left of or above it.
    """
    step = TILE_SIZE + TILE_GAP
    local_x = mouse_pos.x - PUZZLE_POS.x - BORDER_SIZE
    local_y = mouse_pos.y - PUZZLE_POS.y - BORDER_SIZE
    return math.floor(local_x / step), math.floor(local_y / step)


def hits_new_game_button(pos: Vec2) -> bool:
    """Tell whether ``pos`` is on the "new game" button."""
    return (
        NEW_GAME_POS.x <= pos.x < NEW_GAME_POS.x + NEW_GAME_SIZE.x
        and NEW_GAME_POS.y <= pos.y < NEW_GAME_POS.y + NEW_GAME_SIZE.y
    )


class PuzzleController:
    """Turns clicks into puzzle moves and the board into sprites."""

    def __init__(self, logic: PuzzleLogic) -> None:
        self.logic = logic

    def on_click(self, pos: Vec2) -> ClickResult:
        """Handle a left click at ``pos``."""
        if hits_new_game_button(pos):
            self.logic.new_game()
            return ClickResult.NEW_GAME
        if self.logic.move(cell_at(pos)):
            return ClickResult.MOVED
        return ClickResult.NOTHING

    def sprites(self) -> list[Sprite]:
        """Return the box, the tiles and the button in drawing order."""
        result = [Sprite(Rect(PUZZLE_POS, BOX_UV.size), BOX_UV)]
        for row in range(SIZE):
            for column in range(SIZE):
                uv = tile_uv(self.logic[(column, row)])
                result.append(Sprite(Rect(tile_position(column, row), uv.size), uv))
        result.append(Sprite(Rect(NEW_GAME_POS, NEW_GAME_SIZE), NEW_GAME_UV))
        return result

    def status_text(self) -> tuple[str, Vec2] | None:
        """Return the victory message and its position, or None while unsolved."""
        if self.logic.is_solved():
            return WIN_TEXT, WIN_TEXT_POS
        return None