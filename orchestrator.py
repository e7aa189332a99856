# ~/Apps/csvgrid/orchestrator.py
import curses
import logging
import subprocess
import time

import csv_codec
from cell import stringify
from cell_editor import CellEditor
from csv_pane import CsvPane
from external_editor import ExternalEditor
from grid_pane import GridPane
from input_state import is_bulk_text, selected_ref
from intents import (
    CancelEdit,
    Commit,
    EditBuffer,
    KeyPressed,
    Select,
    SelectBulkText,
    StartEdit,
)
from keymap import TOOLBAR_KEYS, key_name
from navigation import ref_label
from screen_layout import ScreenLayout
from session import Session
from status_bar import render_status
from table import CellRef


logger = logging.getLogger("csvgrid.orchestrator")

QUIT_KEYS = (3, 24)  # Ctrl+C / Ctrl+X


class Orchestrator:
    def __init__(self, stdscr, model, gateway, store_path=None, editor_command=None):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.raw()
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.layout = ScreenLayout(stdscr)
        self.store_path = store_path

        self.session = Session(
            model, gateway, on_focus=self._focus_editor, on_status=self._set_status
        )
        self.grid = GridPane(model.table)
        self.csv_pane = CsvPane()
        self.cell_editor = CellEditor()
        self.external = ExternalEditor(self._run_interactive_in_terminal, editor_command)

        # cell to return to when leaving the CSV view
        self.last_ref = CellRef(0, 0)

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    @property
    def model(self):
        return self.session.model

    # ---------------- helpers ----------------

    def _dispatch(self, intent):
        previous_table = self.model.table
        model = self.session.dispatch(intent)
        if model.table is not previous_table:
            self.grid.set_table(model.table)
        ref = selected_ref(model.input)
        if ref is not None:
            self.last_ref = ref
        if model.input.is_editing:
            self.cell_editor.sync(model.input.text)
        return model

    def _focus_editor(self):
        self.cell_editor.reset(self.model.input.text)
        curses.curs_set(1)

    def _run_interactive_in_terminal(self, argv):
        if not argv:
            return 1
        try:
            curses.def_prog_mode()
            curses.endwin()
        except curses.error:
            pass

        try:
            result = subprocess.run(argv).returncode
        except FileNotFoundError:
            logger.warning("Editor not found: %s", argv[0])
            result = 127

        try:
            curses.reset_prog_mode()
            curses.raw()
            self.stdscr.timeout(100)
            self.stdscr.clear()
            self.stdscr.refresh()
        except curses.error:
            pass
        return result

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _mode_name(self):
        state = self.model.input
        if is_bulk_text(state):
            return "CSV"
        if state.is_editing:
            return "EDIT"
        return "CELL"

    # ---------------- UI ----------------

    def redraw(self):
        state = self.model.input
        bulk = is_bulk_text(state)
        ref = selected_ref(state)

        self.grid.draw(
            self.layout.grid_win,
            selected=ref,
            editor=self.cell_editor if state.is_editing else None,
            active=not bulk,
        )
        csv_text = state.text if bulk else csv_codec.encode(self.model.table)
        self.csv_pane.draw(self.layout.csv_win, csv_text, focused=bulk)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "mode": self._mode_name(),
                "selected": ref_label(ref) if ref is not None else None,
                "shape": tuple(self.model.table.size()),
                "store_path": self.store_path,
            },
            w,
        )
        try:
            sw.addnstr(0, 0, text, max(0, w - 1))
        except curses.error:
            pass
        sw.refresh()

        try:
            if state.is_editing and self.grid.edit_origin is not None:
                y, x = self.grid.edit_origin
                curses.curs_set(1)
                self.layout.grid_win.leaveok(False)
                self.layout.grid_win.move(y, x)
                self.layout.grid_win.refresh()
            else:
                self.layout.grid_win.leaveok(True)
                curses.curs_set(0)
        except curses.error:
            pass

    # ---------------- key routing ----------------

    def _handle_edit_key(self, ch):
        action = self.cell_editor.handle_key(ch)
        if action == "commit":
            self._dispatch(Commit())
        elif action == "cancel":
            self._dispatch(CancelEdit())
        elif isinstance(action, tuple):
            self._dispatch(EditBuffer(action[1]))

    def _handle_bulk_key(self, name):
        if name in ("Tab", "Escape"):
            self._dispatch(Select(self.last_ref))
        elif name in ("Enter", "e"):
            new_text = self.external.edit_text(self.model.input.text)
            if new_text is None:
                self._set_status("Edit canceled", 3)
                return
            before = self.model.table
            self._dispatch(EditBuffer(new_text))
            self._dispatch(Commit())
            if self.model.table is before:
                self._set_status("No changes", 2)
            else:
                rows, cols = self.model.table.size()
                self._set_status(f"Table replaced from CSV ({rows}x{cols})", 3)
        elif name == "ArrowDown":
            self.csv_pane.scroll(1)
        elif name == "ArrowUp":
            self.csv_pane.scroll(-1)

    def _handle_cell_key(self, name):
        if name in TOOLBAR_KEYS:
            before = self.model.table
            self._dispatch(TOOLBAR_KEYS[name])
            if self.model.table is before:
                self._set_status("Nothing to change", 2)
            return
        if name == "Tab":
            self._dispatch(SelectBulkText())
            return
        if name == "F2":
            ref = selected_ref(self.model.input)
            cell = self.model.table.cell_at(ref) if ref is not None else None
            seed = stringify(cell) if cell is not None else ""
            self._dispatch(StartEdit(ref, seed))
            return
        self._dispatch(KeyPressed(name))

    def handle_key(self, ch):
        state = self.model.input
        if state.is_editing:
            self._handle_edit_key(ch)
            return
        name = key_name(ch)
        if name is None:
            return
        if is_bulk_text(state):
            self._handle_bulk_key(name)
        else:
            self._handle_cell_key(name)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch in QUIT_KEYS:
                break

            if ch == -1:
                self.redraw()
                continue

            if ch == curses.KEY_RESIZE:
                self.layout = ScreenLayout(self.stdscr)
                self.redraw()
                continue

            self.handle_key(ch)
            self.redraw()
