from dataclasses import dataclass, replace
from typing import Union

from navigation import Direction, is_valid_position, move
from table import CellRef, Table


@dataclass(frozen=True)
class CellSelection:
    ref: CellRef


@dataclass(frozen=True)
class BulkTextSelection:
    pass


Selection = Union[CellSelection, BulkTextSelection]


@dataclass(frozen=True)
class InputState:
    """What is selected, whether a cell is being edited, and the live buffer.

    `text` is the cell edit buffer while `is_editing` is set, the CSV document
    while the bulk text view is selected, and empty otherwise.
    """

    selected: Selection
    is_editing: bool = False
    text: str = ""


def initial_input_state() -> InputState:
    return InputState(CellSelection(CellRef(0, 0)))


def selected_ref(state: InputState) -> CellRef | None:
    if isinstance(state.selected, CellSelection):
        return state.selected.ref
    return None


def is_bulk_text(state: InputState) -> bool:
    return isinstance(state.selected, BulkTextSelection)


def select(ref: CellRef) -> InputState:
    return InputState(CellSelection(ref))


def select_bulk_text(csv_text: str) -> InputState:
    return InputState(BulkTextSelection(), text=csv_text)


def start_edit(
    state: InputState, ref: CellRef | None, seed: str
) -> tuple[InputState, bool]:
    """Enter cell edit mode. The flag tells the caller to request editor focus."""
    if ref is None:
        ref = selected_ref(state)
        if ref is None:
            return state, False
    return InputState(CellSelection(ref), is_editing=True, text=seed), True


def cancel_edit(state: InputState) -> InputState:
    if not state.is_editing:
        return state
    return select(state.selected.ref)


def edit_buffer(state: InputState, text: str) -> InputState:
    if state.is_editing or is_bulk_text(state):
        return replace(state, text=text)
    return state


def move_selection(state: InputState, direction: Direction, table: Table) -> InputState:
    ref = selected_ref(state)
    if ref is None or state.is_editing:
        return state
    new_ref = move(direction, ref, table)
    if not is_valid_position(new_ref):
        return state
    return select(new_ref)
