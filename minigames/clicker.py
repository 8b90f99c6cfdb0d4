"""The clicker game: mine gold, spend it on a stronger pickaxe."""

from __future__ import annotations

from minigames.geometry import Vec2

HELP_TEXT = "ЛКМ - добывать золото, ПКМ - усилить кирку"
HELP_POS = Vec2(10.0, 10.0)
POWER_POS = Vec2(10.0, 40.0)
GOLD_POS = Vec2(300.0, 300.0)


class Clicker:
    """Gold and click power; the price of an upgrade equals the current power."""

    def __init__(self) -> None:
        self.gold = 0
        self.power = 1

    def mine(self) -> int:
        """Add one click's worth of gold and return the new amount."""
        self.gold += self.power
        return self.gold

    def upgrade(self) -> bool:
        """Buy one more point of power if there is gold enough."""
        if self.gold < self.power:
            return False
        self.gold -= self.power
        self.power += 1
        return True

    def status_lines(self) -> list[tuple[str, Vec2]]:
        """Return the lines of text to show with their screen positions."""
        return [
            (HELP_TEXT, HELP_POS),
            (f"Сила нажатия: {self.power} (= цене апгрейда)", POWER_POS),
            (f"Золота: {self.gold}", GOLD_POS),
        ]