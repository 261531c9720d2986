from __future__ import annotations

from collections import deque
from collections.abc import Iterable

import pytest

from seabattle.game.core.battlefield import Battlefield
from seabattle.game.core.models import DEFAULT_FLEET, ShipType

FLEET_LINES: dict[ShipType, str] = {
    ShipType.AIRCRAFT_CARRIER: "A1 A5",
    ShipType.BATTLESHIP: "C1 C4",
    ShipType.SUBMARINE: "E1 E3",
    ShipType.CRUISER: "G1 G3",
    ShipType.DESTROYER: "I1 I2",
}

FLEET_CELLS: list[str] = [
    *(f"A{col}" for col in range(1, 6)),
    *(f"C{col}" for col in range(1, 5)),
    *(f"E{col}" for col in range(1, 4)),
    *(f"G{col}" for col in range(1, 4)),
    *(f"I{col}" for col in range(1, 3)),
]


class ScriptedConsole:
    """Feeds canned input lines and records everything written."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = deque(lines)
        self.outputs: list[str] = []

    def read_line(self) -> str:
        if not self._lines:
            raise EOFError
        return self._lines.popleft()

    def write(self, text: str) -> None:
        self.outputs.append(text)

    @property
    def remaining(self) -> int:
        return len(self._lines)


def _placement_lines() -> list[str]:
    return [FLEET_LINES[ship_type] for ship_type in DEFAULT_FLEET]


def _full_game_lines(*, invalid_first_shot: str | None = None) -> list[str]:
    """Both fleets placed, then player one sinks everything while player two misses."""
    lines = [*_placement_lines(), "", *_placement_lines(), ""]
    if invalid_first_shot is not None:
        lines.append(invalid_first_shot)
    for cell in FLEET_CELLS[:-1]:
        lines.extend([cell, "", "J10", ""])
    lines.append(FLEET_CELLS[-1])
    return lines


@pytest.fixture
def battlefield() -> Battlefield:
    return Battlefield("Player 1")


@pytest.fixture
def fleet_battlefield() -> Battlefield:
    board = Battlefield("Player 2")
    for ship_type in DEFAULT_FLEET:
        assert board.place_ship(FLEET_LINES[ship_type], ship_type).success
    return board


@pytest.fixture
def placement_lines() -> list[str]:
    return _placement_lines()


@pytest.fixture
def full_game_lines():
    return _full_game_lines


@pytest.fixture
def console_factory():
    def _make(lines: Iterable[str]) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return _make
