from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Union


class Borders(IntFlag):
    NONE = 0x00
    LEFT = 0x01
    RIGHT = 0x02
    BOTTOM = 0x04
    TOP = 0x08
    ALL = 0x0F

    def __add__(self, other: "Borders") -> "Borders":
        return Borders(int(self) | int(other))

    def __sub__(self, other: "Borders") -> "Borders":
        return Borders(int(self) & ~int(other) & int(Borders.ALL))


@dataclass(frozen=True)
class Offset:
    col: int = 0
    row: int = 0

    def __add__(self, other: "OffsetLike") -> "Offset":
        if not isinstance(other, (Offset, tuple)):
            return NotImplemented
        other = as_offset(other)
        return Offset(self.col + other.col, self.row + other.row)

    def __sub__(self, other: "OffsetLike") -> "Offset":
        if not isinstance(other, (Offset, tuple)):
            return NotImplemented
        other = as_offset(other)
        return Offset(self.col - other.col, self.row - other.row)

    def __neg__(self) -> "Offset":
        return Offset(-self.col, -self.row)


class RelativePosition(Enum):
    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"
    CENTER = "C"

    def __add__(self, offset: "OffsetLike") -> "Position":
        return Position(as_offset(offset), self)

    __radd__ = __add__

    def __sub__(self, offset: "OffsetLike") -> "Position":
        return Position(-as_offset(offset), self)


NORTH = RelativePosition.NORTH
NORTH_EAST = RelativePosition.NORTH_EAST
EAST = RelativePosition.EAST
SOUTH_EAST = RelativePosition.SOUTH_EAST
SOUTH = RelativePosition.SOUTH
SOUTH_WEST = RelativePosition.SOUTH_WEST
WEST = RelativePosition.WEST
NORTH_WEST = RelativePosition.NORTH_WEST
CENTER = RelativePosition.CENTER


@dataclass(frozen=True)
class Position:
    offset: Offset = Offset()
    relative: RelativePosition = SOUTH_WEST

    @property
    def col(self) -> int:
        return self.offset.col

    @property
    def row(self) -> int:
        return self.offset.row

    def is_absolute(self) -> bool:
        return self.relative is SOUTH_WEST

    def __add__(self, offset: "OffsetLike") -> "Position":
        return Position(self.offset + offset, self.relative)

    def __sub__(self, offset: "OffsetLike") -> "Position":
        return Position(self.offset - offset, self.relative)


OffsetLike = Union[Offset, tuple[int, int]]
PositionLike = Union[Position, RelativePosition, Offset, tuple[int, int]]


def as_offset(value: OffsetLike) -> Offset:
    if isinstance(value, Offset):
        return value
    col, row = value
    return Offset(int(col), int(row))


def as_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    if isinstance(value, RelativePosition):
        return Position(Offset(), value)
    return Position(as_offset(value), SOUTH_WEST)


def percent(value: float) -> float:
    return value / 100.0


def get_absolute_position(position: PositionLike, width: int, height: int) -> Position:
    """Resolve an anchored position against a ``width`` x ``height`` canvas."""
    position = as_position(position)
    anchors = {
        NORTH: (width // 2, height - 1),
        NORTH_EAST: (width - 1, height - 1),
        EAST: (width - 1, height // 2),
        SOUTH_EAST: (width - 1, 0),
        SOUTH: (width // 2, 0),
        SOUTH_WEST: (0, 0),
        WEST: (0, height // 2),
        NORTH_WEST: (0, height - 1),
        CENTER: (width // 2, height // 2),
    }
    return Position(position.offset + anchors[position.relative], SOUTH_WEST)


def adjust_absolute_position(
    position: PositionLike,
    width: int,
    height: int,
    box_width: int,
    box_height: int,
    drawing_upwards: bool,
) -> Position:
    """Pull a box of ``box_width`` x ``box_height`` back onto the canvas.

    Upward boxes (fusion, images) grow from the anchor towards the top row and
    are pushed down when there is no room; downward boxes (text) grow towards
    row 0 and are pushed up.
    """
    position = as_position(position)
    if not position.is_absolute():
        position = get_absolute_position(position, width, height)

    new_col = max(0, position.col)
    new_row = min(height - 1, position.row)
    free_cols = width - new_col
    free_rows = (height - new_row) if drawing_upwards else (new_row + 1)

    if free_cols < box_width:
        new_col = max(0, width - box_width)
    if free_rows < box_height:
        if drawing_upwards:
            new_row = max(0, height - box_height)
        else:
            new_row = min(height - 1, box_height - 1)
    return Position(Offset(new_col, new_row), SOUTH_WEST)


def calc_box_position(position: PositionLike, box_width: int, box_height: int) -> Position:
    position = as_position(position)
    shifts = {
        NORTH: (box_width // 2, box_height),
        NORTH_EAST: (box_width, box_height),
        EAST: (box_width, box_height // 2),
        SOUTH_EAST: (box_width, 0),
        SOUTH: (box_width // 2, 0),
        SOUTH_WEST: (0, 0),
        WEST: (0, box_height // 2),
        NORTH_WEST: (0, box_height),
        CENTER: (box_width // 2, box_height // 2),
    }
    return position - shifts[position.relative]
