"""Turn coordination between the two battlefields of a game."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.game.core.battlefield import Battlefield


@dataclass(slots=True)
class GameSession:
    """Two battlefields and the index of the player whose turn it is.

    The session only routes actions; it never reads or writes grid contents.
    Not safe for concurrent use.
    """

    battlefields: tuple[Battlefield, Battlefield]
    current_index: int = 0

    def __post_init__(self) -> None:
        if len(self.battlefields) != 2:
            raise ValueError("A game session needs exactly two battlefields.")
        if self.current_index not in (0, 1):
            raise ValueError(f"Invalid current player index: {self.current_index}.")

    def switch_turn(self) -> None:
        self.current_index = 1 - self.current_index

    def current(self) -> Battlefield:
        return self.battlefields[self.current_index]

    def opponent(self) -> Battlefield:
        return self.battlefields[1 - self.current_index]

    def is_ongoing(self) -> bool:
        """Return whether neither player has lost all ships."""
        return not any(battlefield.is_defeated for battlefield in self.battlefields)

    def winner(self) -> Battlefield | None:
        """Return the battlefield whose opponent is defeated, if any."""
        first, second = self.battlefields
        if second.is_defeated:
            return first
        if first.is_defeated:
            return second
        return None


def create_session(owner_one: str, owner_two: str) -> GameSession:
    """Create a session with two empty battlefields, first player to move."""
    return GameSession(battlefields=(Battlefield(owner_one), Battlefield(owner_two)))
