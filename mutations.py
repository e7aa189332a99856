"""Structural table operations.

Every function takes a Table and returns a Table. When the operation does not
apply (index out of range) the input table object itself is returned, so
callers can detect a change with an identity check.
"""

import logging

from cell import Cell, empty_cell
from table import CellRef, Table


logger = logging.getLogger("csvgrid.mutations")


def _clamp_index(at: int, upper: int) -> int:
    return max(0, min(at, upper))


def set_cell(table: Table, ref: CellRef, cell: Cell) -> Table:
    if not table.contains(ref):
        logger.debug("set_cell out of range: %s", ref)
        return table
    row = table.rows[ref.row]
    new_row = row[: ref.col] + (cell,) + row[ref.col + 1 :]
    return Table(table.rows[: ref.row] + (new_row,) + table.rows[ref.row + 1 :])


# ----- rows -----
def insert_row(table: Table, at: int) -> Table:
    at = _clamp_index(at, table.row_count)
    new_row = tuple(empty_cell() for _ in range(table.col_count))
    return Table(table.rows[:at] + (new_row,) + table.rows[at:])


def delete_row(table: Table, at: int) -> Table:
    if not 0 <= at < table.row_count:
        logger.debug("delete_row out of range: %d", at)
        return table
    return Table(table.rows[:at] + table.rows[at + 1 :])


# ----- columns -----
def insert_col(table: Table, at: int) -> Table:
    if table.row_count == 0:
        return table
    at = _clamp_index(at, table.col_count)
    return Table(tuple(row[:at] + (empty_cell(),) + row[at:] for row in table.rows))


def delete_col(table: Table, at: int) -> Table:
    if not 0 <= at < table.col_count:
        logger.debug("delete_col out of range: %d", at)
        return table
    return Table(tuple(row[:at] + row[at + 1 :] for row in table.rows))
