import csv
import logging
from dataclasses import dataclass, field

import csv_codec
import input_state as inp
import keymap
import mutations
from cell import parse_user_input
from intents import (
    CancelEdit,
    Commit,
    DeleteCol,
    DeleteRow,
    EditBuffer,
    InsertCol,
    InsertRow,
    KeyPressed,
    MoveSelection,
    Select,
    SelectBulkText,
    StartEdit,
)
from navigation import clamp_ref
from persistence import encode_table
from table import CellRef, Table


logger = logging.getLogger("csvgrid.app_state")


# ---------- model ----------
@dataclass(frozen=True)
class Model:
    table: Table
    input: inp.InputState


def initial_model(table: Table) -> Model:
    return Model(table, inp.initial_input_state())


# ---------- effects ----------
@dataclass(frozen=True)
class SaveDocument:
    document: list


@dataclass(frozen=True)
class FocusEditor:
    pass


@dataclass(frozen=True)
class Transition:
    model: Model
    effects: list = field(default_factory=list)


def _with_table(model: Model, table: Table, new_input: inp.InputState) -> Transition:
    if table is model.table:
        return Transition(Model(model.table, new_input))
    return Transition(Model(table, new_input), [SaveDocument(encode_table(table))])


# ---------- commit ----------
def _commit(model: Model) -> Transition:
    state = model.input
    if state.is_editing:
        ref = state.selected.ref
        cell = parse_user_input(state.text)
        table = mutations.set_cell(model.table, ref, cell)
        return _with_table(model, table, inp.select(ref))

    if inp.is_bulk_text(state):
        try:
            table = csv_codec.decode(state.text)
        except csv.Error as exc:
            logger.warning("CSV text rejected: %s", exc)
            return Transition(model)
        if table == model.table:
            table = model.table
        return _with_table(model, table, inp.select_bulk_text(csv_codec.encode(table)))

    return Transition(model)


# ---------- structural operations ----------
def _structural(model: Model, intent) -> Transition:
    ref = inp.selected_ref(model.input)
    if ref is None:
        return Transition(model)

    table = model.table
    if isinstance(intent, InsertRow):
        at = ref.row + 1 if intent.after else ref.row
        new_table = mutations.insert_row(table, at)
        target = CellRef(min(at, new_table.row_count - 1), ref.col)
    elif isinstance(intent, DeleteRow):
        new_table = mutations.delete_row(table, ref.row)
        target = ref
    elif isinstance(intent, InsertCol):
        at = ref.col + 1 if intent.after else ref.col
        new_table = mutations.insert_col(table, at)
        target = CellRef(ref.row, min(at, max(0, new_table.col_count - 1)))
    else:
        new_table = mutations.delete_col(table, ref.col)
        target = ref

    if new_table is table:
        return Transition(model)
    return _with_table(model, new_table, inp.select(clamp_ref(target, new_table)))


# ---------- dispatch ----------
def update(model: Model, intent) -> Transition:
    """Compute the next model and the side effects the host must run."""
    state = model.input

    if isinstance(intent, Select):
        return Transition(Model(model.table, inp.select(intent.ref)))

    if isinstance(intent, SelectBulkText):
        csv_text = csv_codec.encode(model.table)
        return Transition(Model(model.table, inp.select_bulk_text(csv_text)))

    if isinstance(intent, StartEdit):
        new_state, focus = inp.start_edit(state, intent.ref, intent.seed)
        effects = [FocusEditor()] if focus else []
        return Transition(Model(model.table, new_state), effects)

    if isinstance(intent, CancelEdit):
        return Transition(Model(model.table, inp.cancel_edit(state)))

    if isinstance(intent, EditBuffer):
        return Transition(Model(model.table, inp.edit_buffer(state, intent.text)))

    if isinstance(intent, Commit):
        return _commit(model)

    if isinstance(intent, MoveSelection):
        moved = inp.move_selection(state, intent.direction, model.table)
        return Transition(Model(model.table, moved))

    if isinstance(intent, (InsertRow, DeleteRow, InsertCol, DeleteCol)):
        return _structural(model, intent)

    if isinstance(intent, KeyPressed):
        mapped = keymap.intent_for_key(intent.key, state)
        if mapped is None:
            return Transition(model)
        return update(model, mapped)

    raise TypeError(f"Unknown intent: {intent!r}")
