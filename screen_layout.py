import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: grid (main), csv view, status bar (1 line)
        self.status_h = 1
        self.csv_h = max(2, min(12, (self.H - self.status_h) // 3))
        self.grid_h = max(1, self.H - self.status_h - self.csv_h)

        self.grid_win = curses.newwin(self.grid_h, self.W, 0, 0)
        # cursor is placed explicitly while editing
        self.grid_win.leaveok(True)

        self.csv_win = curses.newwin(self.csv_h, self.W, self.grid_h, 0)
        self.csv_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.grid_h + self.csv_h, 0)
        # do not let status bar steal cursor
        self.status_win.leaveok(True)
