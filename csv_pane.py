import curses


class CsvPane:
    """Always-visible CSV rendering of the table; the bulk text editor target."""

    TITLE = " CSV "

    def __init__(self):
        self.line_offset = 0

    def draw(self, win, text: str, focused: bool = False):
        win.erase()
        h, w = win.getmaxyx()
        rule_attr = curses.A_REVERSE if focused else curses.A_DIM
        title = self.TITLE + ("(Enter: edit, Tab: back) " if focused else "(Tab: focus) ")
        try:
            win.hline(0, 0, curses.ACS_HLINE, w)
            win.addnstr(0, 1, title, max(0, w - 2), rule_attr)
        except curses.error:
            pass

        lines = text.split("\n") if text else []
        body_h = max(0, h - 1)
        self.line_offset = min(self.line_offset, max(0, len(lines) - body_h))
        for y, line in enumerate(lines[self.line_offset : self.line_offset + body_h], start=1):
            try:
                win.addnstr(y, 0, line, max(0, w - 1))
            except curses.error:
                pass
        win.refresh()

    def scroll(self, delta: int):
        self.line_offset = max(0, self.line_offset + delta)
