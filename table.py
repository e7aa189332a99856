from dataclasses import dataclass
from typing import NamedTuple

import pandas as pd

from cell import Cell, stringify


class CellRef(NamedTuple):
    row: int
    col: int


class Size(NamedTuple):
    rows: int
    cols: int


@dataclass(frozen=True)
class Table:
    """Immutable rectangular grid of cells. Size is always derived from rows."""

    rows: tuple = ()

    @classmethod
    def empty(cls) -> "Table":
        return cls(())

    @classmethod
    def from_rows(cls, rows) -> "Table":
        frozen = tuple(tuple(row) for row in rows)
        if frozen:
            width = len(frozen[0])
            for idx, row in enumerate(frozen):
                if len(row) != width:
                    raise ValueError(
                        f"Row {idx} has {len(row)} cells, expected {width}"
                    )
        return cls(frozen)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Table":
        if df.shape[1] == 0:
            return cls.empty()
        return cls(tuple(df.itertuples(index=False, name=None)))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def size(self) -> Size:
        return Size(self.row_count, self.col_count)

    def contains(self, ref: CellRef) -> bool:
        return 0 <= ref.row < self.row_count and 0 <= ref.col < self.col_count

    def cell_at(self, ref: CellRef) -> Cell | None:
        if not self.contains(ref):
            return None
        return self.rows[ref.row][ref.col]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [list(row) for row in self.rows],
            columns=range(self.col_count),
            dtype=object,
        )

    def to_text_frame(self) -> pd.DataFrame:
        df = self.to_frame()
        if df.empty:
            return df
        return df.map(stringify)


def size(table: Table) -> Size:
    return table.size()
