from dataclasses import dataclass

from navigation import Direction
from table import CellRef


@dataclass(frozen=True)
class Select:
    ref: CellRef


@dataclass(frozen=True)
class SelectBulkText:
    pass


@dataclass(frozen=True)
class StartEdit:
    ref: CellRef | None = None
    seed: str = ""


@dataclass(frozen=True)
class CancelEdit:
    pass


@dataclass(frozen=True)
class EditBuffer:
    text: str


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class MoveSelection:
    direction: Direction


@dataclass(frozen=True)
class KeyPressed:
    key: str


# ----- row / column operations on the selected cell -----
@dataclass(frozen=True)
class InsertRow:
    after: bool = False


@dataclass(frozen=True)
class DeleteRow:
    pass


@dataclass(frozen=True)
class InsertCol:
    after: bool = False


@dataclass(frozen=True)
class DeleteCol:
    pass
