import curses


class CellEditor:
    """In-cell line editor. Owns only the cursor; the buffer lives in the model."""

    def __init__(self):
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def reset(self, text: str = ""):
        self.buffer = text
        self.cursor = len(text)
        self.hscroll = 0

    def sync(self, text: str):
        # buffer replaced from outside (e.g. a new edit session)
        if text != self.buffer:
            self.reset(text)

    # ---------- key handling ----------
    def handle_key(self, ch: int):
        """Return ("edit", text), "commit", "cancel" or None."""
        if ch in (10, 13, curses.KEY_ENTER):
            return "commit"

        if ch == 27:  # Esc
            return "cancel"

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                buf = self.buffer
                idx = self.cursor
                self.buffer = buf[: idx - 1] + buf[idx:]
                self.cursor -= 1
                return ("edit", self.buffer)
            return None

        if ch == curses.KEY_DC:
            if self.cursor < len(self.buffer):
                buf = self.buffer
                idx = self.cursor
                self.buffer = buf[:idx] + buf[idx + 1 :]
                return ("edit", self.buffer)
            return None

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return None
        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return None
        if ch == curses.KEY_HOME:
            self.cursor = 0
            return None
        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return None

        if 0 <= ch < curses.KEY_MIN:
            ch_str = chr(ch)
            if not ch_str.isprintable():
                return None
            buf = self.buffer
            idx = self.cursor
            self.buffer = buf[:idx] + ch_str + buf[idx:]
            self.cursor += 1
            return ("edit", self.buffer)
        return None

    # ---------- view ----------
    def visible_text(self, width: int) -> tuple[str, int]:
        """Slice of the buffer that fits `width` plus the cursor column in it."""
        width = max(1, width)
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + width - 1:
            self.hscroll = self.cursor - (width - 1)
        self.hscroll = max(0, self.hscroll)
        return self.buffer[self.hscroll : self.hscroll + width], self.cursor - self.hscroll
