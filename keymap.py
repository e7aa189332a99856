import curses

from input_state import InputState, is_bulk_text
from intents import (
    CancelEdit,
    DeleteCol,
    DeleteRow,
    InsertCol,
    InsertRow,
    MoveSelection,
    StartEdit,
)
from navigation import Direction


ARROW_KEYS = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

# Function keys stand in for the row/column toolbar buttons.
TOOLBAR_KEYS = {
    "F3": InsertRow(after=False),
    "F4": InsertRow(after=True),
    "F5": DeleteRow(),
    "F6": InsertCol(after=False),
    "F7": InsertCol(after=True),
    "F8": DeleteCol(),
}

_CURSES_NAMES = {
    curses.KEY_UP: "ArrowUp",
    curses.KEY_DOWN: "ArrowDown",
    curses.KEY_LEFT: "ArrowLeft",
    curses.KEY_RIGHT: "ArrowRight",
    curses.KEY_ENTER: "Enter",
    curses.KEY_BACKSPACE: "Backspace",
    curses.KEY_DC: "Delete",
    curses.KEY_HOME: "Home",
    curses.KEY_END: "End",
    10: "Enter",
    13: "Enter",
    27: "Escape",
    9: "Tab",
    127: "Backspace",
    8: "Backspace",
}


def key_name(ch: int) -> str | None:
    """Translate a curses key code to a DOM-style key name."""
    if ch in _CURSES_NAMES:
        return _CURSES_NAMES[ch]
    for n in range(1, 13):
        if ch == curses.KEY_F0 + n:
            return f"F{n}"
    # keypad codes (KEY_PPAGE, KEY_MOUSE, ...) are not characters
    if 0 <= ch < curses.KEY_MIN:
        text = chr(ch)
        if text.isprintable():
            return text
    return None


def is_printable_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def intent_for_key(key: str, state: InputState):
    if is_bulk_text(state):
        return None
    if state.is_editing:
        return CancelEdit() if key == "Escape" else None
    if key in ARROW_KEYS:
        return MoveSelection(ARROW_KEYS[key])
    if key == "Enter":
        return StartEdit(None, "")
    if is_printable_key(key):
        return StartEdit(None, key)
    return None
