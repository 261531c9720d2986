"""Shot outcome evaluation (miss/hit/sunk/invalid)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seabattle.game.core.battlefield import Battlefield
from seabattle.game.core.models import Coord, ShotResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShotResolution:
    """Full outcome of one combat action against a battlefield."""

    result: ShotResult
    coord: Coord | None = None
    reason: str = ""
    repeated: bool = False
    ships_sunk: int = 0


def resolve_shot(battlefield: Battlefield, raw: Coord | str) -> ShotResolution:
    """Fire at ``raw`` and count a sunk ship at most once.

    The repeat flag has to be read before the shot marks the cell.
    """
    repeated = battlefield.was_shot_already(raw)
    report = battlefield.take_a_shot(raw)
    if not report.success:
        logger.debug("shot_rejected owner=%s input=%r", battlefield.owner, raw)
        return ShotResolution(
            result=ShotResult.INVALID, reason=report.reason, ships_sunk=battlefield.ships_sunk
        )

    if not report.hit:
        result = ShotResult.MISS
    elif battlefield.is_ship_sunk(report.coord) and not repeated:
        battlefield.increase_ship_sunk_number()
        result = ShotResult.SUNK
        logger.info("ship_sunk owner=%s ships_sunk=%d", battlefield.owner, battlefield.ships_sunk)
    else:
        result = ShotResult.HIT

    return ShotResolution(
        result=result,
        coord=report.coord,
        repeated=repeated,
        ships_sunk=battlefield.ships_sunk,
    )
