"""Line-oriented console loop: fleet setup for both players, then combat."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from seabattle.game.core.battlefield import Battlefield
from seabattle.game.core.models import DEFAULT_FLEET, ShipType, ShotResult
from seabattle.game.core.rules import GameSession
from seabattle.game.core.shot_resolution import resolve_shot
from seabattle.game.ui.text_view import render_field

logger = logging.getLogger(__name__)

PASS_MOVE_PROMPT = "Press Enter and pass the move to another player\n..."
SEPARATOR = "---------------------"
FINAL_SINK_MESSAGE = "You sank the last ship. You won. Congratulations!"

_SHOT_MESSAGES: dict[ShotResult, str] = {
    ShotResult.MISS: "You missed!",
    ShotResult.HIT: "You hit a ship!",
    ShotResult.SUNK: "You sank a ship!",
}


class ConsoleGameLoop:
    """Drive a session from text lines.

    ``read_line`` blocks for the next input line and may raise ``EOFError``;
    ``write`` emits one chunk of output.
    """

    def __init__(
        self,
        session: GameSession,
        *,
        read_line: Callable[[], str],
        write: Callable[[str], None],
        fleet: Sequence[ShipType] = DEFAULT_FLEET,
    ) -> None:
        self._session = session
        self._read_line = read_line
        self._write = write
        self._fleet = tuple(fleet)

    @property
    def session(self) -> GameSession:
        return self._session

    def run(self) -> Battlefield | None:
        """Play a full game and return the winning battlefield."""
        self.place_fleets()
        return self.play()

    def place_fleets(self) -> None:
        for _ in self._session.battlefields:
            self._place_fleet(self._session.current())
            self._pass_move()

    def play(self) -> Battlefield | None:
        while self._session.is_ongoing():
            current = self._session.current()
            foe = self._session.opponent()
            self._write(render_field(foe, fog_of_war=True))
            self._write(SEPARATOR)
            self._write(render_field(current, fog_of_war=False))
            self._write(f"{current.owner}, it's your turn:")

            resolution = resolve_shot(foe, self._read_line())
            while resolution.result is ShotResult.INVALID:
                self._write(f"Error! {resolution.reason} Try again:")
                resolution = resolve_shot(foe, self._read_line())

            if resolution.result is ShotResult.SUNK and foe.is_defeated:
                self._write(FINAL_SINK_MESSAGE)
                break
            self._write(_SHOT_MESSAGES[resolution.result])
            self._pass_move()

        return self._session.winner()

    def _place_fleet(self, battlefield: Battlefield) -> None:
        self._write(f"{battlefield.owner}, place your ships on the game field")
        self._write(render_field(battlefield, fog_of_war=False))
        for ship_type in self._fleet:
            self._write(f"Enter the coordinates of the {ship_type.full_name}:")
            result = battlefield.place_ship(self._read_line(), ship_type)
            while not result.success:
                self._write(f"Error! {result.reason} Try again:")
                result = battlefield.place_ship(self._read_line(), ship_type)
            self._write(render_field(battlefield, fog_of_war=False))

    def _pass_move(self) -> None:
        self._write(PASS_MOVE_PROMPT)
        self._read_line()
        self._session.switch_turn()
        logger.debug("turn_passed to=%s", self._session.current().owner)
