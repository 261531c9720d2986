"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10
ROW_LABELS = "ABCDEFGHIJ"


class ShipType(StrEnum):
    """Ship types in setup order."""

    AIRCRAFT_CARRIER = "AIRCRAFT_CARRIER"
    BATTLESHIP = "BATTLESHIP"
    SUBMARINE = "SUBMARINE"
    CRUISER = "CRUISER"
    DESTROYER = "DESTROYER"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]

    @property
    def display_name(self) -> str:
        """Human label, e.g. ``Aircraft carrier``."""
        words = self.value.replace("_", " ")
        return words[0] + words[1:].lower()

    @property
    def full_name(self) -> str:
        return f"{self.display_name} ({self.size} cells)"


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.AIRCRAFT_CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.SUBMARINE: 3,
    ShipType.CRUISER: 3,
    ShipType.DESTROYER: 2,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.AIRCRAFT_CARRIER,
    ShipType.BATTLESHIP,
    ShipType.SUBMARINE,
    ShipType.CRUISER,
    ShipType.DESTROYER,
)

FLEET_SIZE = len(DEFAULT_FLEET)


class CellMark(StrEnum):
    """Display value of a single cell."""

    EMPTY = "~"
    SHIP = "O"
    HIT = "X"
    MISS = "M"


class ErrorKind(StrEnum):
    """Recoverable input error categories."""

    FORMAT = "FORMAT"
    PLACEMENT_RULE = "PLACEMENT_RULE"
    ADJACENCY = "ADJACENCY"


class ShotResult(StrEnum):
    """Outcome of a resolved shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    INVALID = "INVALID"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome of a validation or placement call."""

    success: bool
    reason: str = ""
    error: ErrorKind | None = None


@dataclass(frozen=True, slots=True)
class ShotReport:
    """Outcome of a single shot against a battlefield."""

    success: bool
    hit: bool = False
    coord: Coord | None = None
    reason: str = ""
    error: ErrorKind | None = None


OK = ActionResult(success=True)
