from enum import Enum

from table import CellRef, Table


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def _clamp(value: int, upper: int) -> int:
    # upper may be -1 on an empty axis; callers treat negatives as no position
    return min(max(value, 0), upper)


def move(direction: Direction, ref: CellRef, table: Table) -> CellRef:
    rows, cols = table.size()
    d_row, d_col = _DELTAS[direction]
    return CellRef(
        _clamp(ref.row + d_row, rows - 1),
        _clamp(ref.col + d_col, cols - 1),
    )


def is_valid_position(ref: CellRef) -> bool:
    return ref.row >= 0 and ref.col >= 0


def clamp_ref(ref: CellRef, table: Table) -> CellRef:
    """Pull ref back inside the table; (0, 0) when the table has no cells."""
    rows, cols = table.size()
    return CellRef(max(0, min(ref.row, rows - 1)), max(0, min(ref.col, cols - 1)))


def column_label(index: int) -> str:
    label = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def ref_label(ref: CellRef) -> str:
    return f"{column_label(ref.col)}{ref.row + 1}"
