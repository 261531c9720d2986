"""Battlefield state: ship occupancy, shot history and sunk count for one player."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from seabattle.game.core.coords import (
    format_coordinate,
    in_bounds,
    is_greater,
    parse_coordinate,
    split_segment,
)
from seabattle.game.core.models import (
    BOARD_SIZE,
    FLEET_SIZE,
    OK,
    ActionResult,
    CellMark,
    Coord,
    ErrorKind,
    ShipType,
    ShotReport,
)

logger = logging.getLogger(__name__)

WRONG_LOCATION = "Wrong ship location!"
TOO_CLOSE = "You placed it too close to another one."
WRONG_SHOT = "You entered the wrong coordinates!"

_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _empty_grid() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)


@dataclass(slots=True, eq=False)
class Battlefield:
    """Numpy-backed board owned by a single player.

    ``occupied`` and ``shot_at`` are the source of truth; display marks are
    derived from them on demand. A battlefield has a single writer per turn and
    is not safe for concurrent use.
    """

    owner: str
    occupied: np.ndarray = field(default_factory=_empty_grid)
    shot_at: np.ndarray = field(default_factory=_empty_grid)
    ships_sunk: int = 0

    @property
    def is_defeated(self) -> bool:
        return self.ships_sunk >= FLEET_SIZE

    def are_coordinates_valid(
        self, nose: Coord | str, tail: Coord | str, ship_type: ShipType
    ) -> ActionResult:
        """Check range, axis alignment and length of a ship segment."""
        nose_coord = _resolve(nose)
        tail_coord = _resolve(tail)
        if nose_coord is None or tail_coord is None:
            return ActionResult(False, WRONG_LOCATION, ErrorKind.FORMAT)
        if nose_coord.row != tail_coord.row and nose_coord.col != tail_coord.col:
            return ActionResult(False, WRONG_LOCATION, ErrorKind.PLACEMENT_RULE)
        span = abs(tail_coord.row - nose_coord.row) + abs(tail_coord.col - nose_coord.col) + 1
        if span != ship_type.size:
            return ActionResult(
                False, f"Wrong length of the {ship_type.display_name}!", ErrorKind.PLACEMENT_RULE
            )
        return OK

    def is_placement_valid(
        self, nose: Coord | str, tail: Coord | str, ship_type: ShipType
    ) -> ActionResult:
        """Check the segment and that its padded zone holds no other ship."""
        checked = self.are_coordinates_valid(nose, tail, ship_type)
        nose_coord = _resolve(nose)
        tail_coord = _resolve(tail)
        if not checked.success or nose_coord is None or tail_coord is None:
            return checked
        top = max(min(nose_coord.row, tail_coord.row) - 1, 0)
        bottom = min(max(nose_coord.row, tail_coord.row) + 1, BOARD_SIZE - 1)
        left = max(min(nose_coord.col, tail_coord.col) - 1, 0)
        right = min(max(nose_coord.col, tail_coord.col) + 1, BOARD_SIZE - 1)
        if self.occupied[top : bottom + 1, left : right + 1].any():
            return ActionResult(False, TOO_CLOSE, ErrorKind.ADJACENCY)
        return OK

    def place_ship(self, raw: str, ship_type: ShipType) -> ActionResult:
        """Place a ship from a ``"nose tail"`` line; no mutation on failure."""
        tokens = split_segment(raw)
        if tokens is None:
            logger.debug("placement_rejected owner=%s input=%r reason=token_count", self.owner, raw)
            return ActionResult(False, WRONG_LOCATION, ErrorKind.FORMAT)
        nose, _ = parse_coordinate(tokens[0])
        tail, _ = parse_coordinate(tokens[1])
        if nose is None or tail is None:
            logger.debug("placement_rejected owner=%s input=%r reason=format", self.owner, raw)
            return ActionResult(False, WRONG_LOCATION, ErrorKind.FORMAT)
        if is_greater(tail, nose):
            nose, tail = tail, nose

        result = self.is_placement_valid(nose, tail, ship_type)
        if not result.success:
            logger.debug(
                "placement_rejected owner=%s input=%r reason=%s",
                self.owner,
                raw,
                result.error,
            )
            return result

        self.occupied[nose.row : tail.row + 1, nose.col : tail.col + 1] = True
        logger.info(
            "ship_placed owner=%s ship=%s nose=%s tail=%s",
            self.owner,
            ship_type.value,
            format_coordinate(nose),
            format_coordinate(tail),
        )
        return OK

    def take_a_shot(self, raw: Coord | str) -> ShotReport:
        """Fire at a cell. Repeated shots resolve to the same outcome."""
        coord = _resolve(raw)
        if coord is None:
            return ShotReport(success=False, reason=WRONG_SHOT, error=ErrorKind.FORMAT)
        self.shot_at[coord.row, coord.col] = True
        return ShotReport(success=True, hit=bool(self.occupied[coord.row, coord.col]), coord=coord)

    def was_shot_already(self, raw: Coord | str) -> bool:
        coord = _resolve(raw)
        if coord is None:
            return False
        return bool(self.shot_at[coord.row, coord.col])

    def is_ship_sunk(self, raw: Coord | str) -> bool:
        """Return whether the hit ship at this cell has no un-hit cells left.

        Walks each orthogonal direction through hit cells and stops at the
        first non-ship cell. Ships are straight and never touch, so every
        cell reached this way belongs to the same ship.
        """
        coord = _resolve(raw)
        if coord is None or self.cell_mark(coord) is not CellMark.HIT:
            return False
        for d_row, d_col in _DIRECTIONS:
            cursor = Coord(coord.row + d_row, coord.col + d_col)
            while in_bounds(cursor):
                mark = self.cell_mark(cursor)
                if mark is CellMark.SHIP:
                    return False
                if mark is not CellMark.HIT:
                    break
                cursor = Coord(cursor.row + d_row, cursor.col + d_col)
        return True

    def increase_ship_sunk_number(self) -> None:
        self.ships_sunk += 1

    def cell_mark(self, coord: Coord) -> CellMark:
        """Derive the display mark of a single cell."""
        occupied = bool(self.occupied[coord.row, coord.col])
        if self.shot_at[coord.row, coord.col]:
            return CellMark.HIT if occupied else CellMark.MISS
        return CellMark.SHIP if occupied else CellMark.EMPTY

    def mark_grid(self) -> np.ndarray:
        """Derive the full display grid as a 10x10 array of mark characters."""
        return np.where(
            self.shot_at,
            np.where(self.occupied, CellMark.HIT.value, CellMark.MISS.value),
            np.where(self.occupied, CellMark.SHIP.value, CellMark.EMPTY.value),
        )


def _resolve(value: Coord | str) -> Coord | None:
    if isinstance(value, Coord):
        return value if in_bounds(value) else None
    if isinstance(value, str):
        coord, _ = parse_coordinate(value)
        return coord
    raise TypeError(f"Unsupported coordinate value: {value!r}")
