# ~/Apps/csvgrid/grid_pane.py
import curses

from navigation import column_label
from table import CellRef, Table


class GridPane:
    PAIR_CELL_ACTIVE = 1
    PAIR_CELL_EDIT = 2
    PAIR_CELL_TEXT = 6
    MIN_COL_WIDTH = 3
    MAX_COL_WIDTH = 40

    def __init__(self, table: Table):
        self.set_table(table)
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_ACTIVE, -1, curses.COLOR_WHITE)
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_CELL_EDIT, curses.COLOR_BLACK, curses.COLOR_YELLOW)
        except curses.error:
            pass

        self.row_offset = 0
        self.col_offset = 0

        # screen position of the edit cursor, set during draw
        self.edit_origin = None  # (y, x)
        self.rendered_col_widths = {}

    def set_table(self, table: Table):
        self.table = table
        self.df = table.to_text_frame()

    def get_col_width(self, col_idx):
        if col_idx < 0 or col_idx >= len(self.df.columns):
            return self.MAX_COL_WIDTH
        max_len = len(column_label(col_idx))
        if len(self.df):
            max_len = max(max_len, int(self.df[col_idx].map(len).max()))
        return max(self.MIN_COL_WIDTH, min(self.MAX_COL_WIDTH, max_len + 2))

    def adjust_viewport(self, selected: CellRef, visible_rows: int, visible_cols: int):
        """Slide offsets so `selected` stays on screen."""
        visible_rows = max(1, visible_rows)
        visible_cols = max(1, visible_cols)
        if selected.row < self.row_offset:
            self.row_offset = selected.row
        elif selected.row >= self.row_offset + visible_rows:
            self.row_offset = selected.row - visible_rows + 1
        if selected.col < self.col_offset:
            self.col_offset = selected.col
        elif selected.col >= self.col_offset + visible_cols:
            self.col_offset = selected.col - visible_cols + 1

        self.row_offset = min(max(0, self.row_offset), max(0, len(self.df) - 1))
        self.col_offset = min(max(0, self.col_offset), max(0, len(self.df.columns) - 1))

    def _fit_columns(self, start: int, avail_w: int) -> int:
        count = 0
        used = 0
        for c in range(start, len(self.df.columns)):
            cw = self.get_col_width(c)
            if used + cw + 1 > avail_w:
                break
            used += cw + 1
            count += 1
        return max(1, count)

    # ---------- rendering ----------
    def draw(self, win, selected=None, editor=None, active=True):
        win.erase()
        try:
            win.bkgd(" ", curses.color_pair(self.PAIR_CELL_TEXT))
        except curses.error:
            pass
        h, w = win.getmaxyx()
        self.edit_origin = None

        total_rows = len(self.df)
        row_w = max(3, len(str(total_rows)) + 1)
        avail_w = max(1, w - (row_w + 1))
        body_h = max(1, h - 1)

        if selected is not None:
            max_cols = self._fit_columns(self.col_offset, avail_w)
            self.adjust_viewport(selected, body_h, max_cols)
        max_cols = self._fit_columns(self.col_offset, avail_w)
        visible_cols = tuple(
            range(self.col_offset, min(len(self.df.columns), self.col_offset + max_cols))
        )

        # header: column letters
        self.rendered_col_widths = {}
        x = row_w + 1
        for c in visible_cols:
            eff_cw = min(self.get_col_width(c), max(1, w - x - 1))
            self.rendered_col_widths[c] = eff_cw
            self._put(win, 0, x, column_label(c).center(eff_cw), eff_cw, curses.A_BOLD)
            x += eff_cw + 1

        if total_rows == 0:
            self._put(win, 1, row_w + 1, "(empty table)", avail_w, curses.A_DIM)
            win.refresh()
            return

        last_row = min(total_rows, self.row_offset + body_h)
        for y, r in enumerate(range(self.row_offset, last_row), start=1):
            self._put(win, y, 0, str(r + 1).rjust(row_w), row_w, curses.A_BOLD)
            x = row_w + 1
            for c in visible_cols:
                eff_cw = self.rendered_col_widths[c]
                is_selected = selected is not None and (r, c) == tuple(selected)
                text = self.df.iat[r, c]
                attr = curses.color_pair(self.PAIR_CELL_TEXT)
                if is_selected and editor is not None:
                    attr = curses.color_pair(self.PAIR_CELL_EDIT)
                    text, cursor_x = editor.visible_text(eff_cw)
                    self.edit_origin = (y, x + min(cursor_x, eff_cw - 1))
                elif is_selected and active:
                    attr = attr | curses.A_REVERSE
                self._put(win, y, x, text[:eff_cw].ljust(eff_cw), eff_cw, attr)
                x += eff_cw + 1

        win.refresh()

    @staticmethod
    def _put(win, y, x, text, n, attr=0):
        try:
            win.addnstr(y, x, text, n, attr)
        except curses.error:
            pass
