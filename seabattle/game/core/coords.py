"""Coordinate text parsing and formatting (``A1`` .. ``J10``)."""

from __future__ import annotations

import re

from seabattle.game.core.models import BOARD_SIZE, ROW_LABELS, Coord

_TOKEN_RE = re.compile(r"^([A-Z])([0-9]{1,3})$")


def parse_coordinate(token: str) -> tuple[Coord | None, str]:
    """Parse a token like ``A5`` into a zero-based coordinate.

    Returns ``(coord, "")`` on success and ``(None, reason)`` otherwise.
    """
    match = _TOKEN_RE.match(token.strip())
    if match is None:
        return None, f"Malformed coordinate '{token.strip()}'."
    letter, digits = match.groups()
    if letter not in ROW_LABELS:
        return None, f"Row '{letter}' is outside A-{ROW_LABELS[-1]}."
    number = int(digits)
    if not 1 <= number <= BOARD_SIZE:
        return None, f"Column {number} is outside 1-{BOARD_SIZE}."
    return Coord(row=ROW_LABELS.index(letter), col=number - 1), ""


def format_coordinate(coord: Coord) -> str:
    """Convert a coordinate back to its ``A5`` text form."""
    return f"{ROW_LABELS[coord.row]}{coord.col + 1}"


def in_bounds(coord: Coord) -> bool:
    return 0 <= coord.row < BOARD_SIZE and 0 <= coord.col < BOARD_SIZE


def is_greater(first: Coord, second: Coord) -> bool:
    """Return whether ``first`` comes earlier than ``second`` in reading order."""
    if first.row != second.row:
        return first.row < second.row
    return first.col < second.col


def split_segment(raw: str) -> tuple[str, str] | None:
    """Split a placement line into its two endpoint tokens."""
    tokens = raw.split()
    if len(tokens) != 2:
        return None
    return tokens[0], tokens[1]
