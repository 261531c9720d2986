"""Plain-text rendering of a battlefield."""

from __future__ import annotations

from seabattle.game.core.battlefield import Battlefield
from seabattle.game.core.models import BOARD_SIZE, ROW_LABELS, CellMark


def render_field(battlefield: Battlefield, fog_of_war: bool) -> str:
    """Render the grid with a column header and row labels.

    With fog of war on, un-hit ship cells are drawn as open water.
    """
    grid = battlefield.mark_grid()
    lines = ["  " + " ".join(str(col + 1) for col in range(BOARD_SIZE))]
    for row in range(BOARD_SIZE):
        cells = [
            CellMark.EMPTY.value if fog_of_war and mark == CellMark.SHIP.value else str(mark)
            for mark in grid[row]
        ]
        lines.append(f"{ROW_LABELS[row]} " + " ".join(cells))
    return "\n".join(lines)
