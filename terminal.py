# terminal.py
import curses
import logging

logger = logging.getLogger(__name__)

ESC = 27
ESC_DELAY_MS = 25
ENTER_CODES = (curses.KEY_ENTER, 10, 13)
# events that are not key presses, the screens never see these
NON_KEY_CODES = (-1, curses.KEY_RESIZE, curses.KEY_MOUSE)


class KeyEvent:
    """A key press: "esc", "enter", "up", "down", a printable char, or "other"."""

    def __init__(self, code):
        self.code = code

    def __repr__(self):
        return f"KeyEvent({self.code!r})"

    def __eq__(self, other):
        return isinstance(other, KeyEvent) and self.code == other.code

    __hash__ = None


class OtherEvent:
    def __init__(self, raw):
        self.raw = raw

    def __repr__(self):
        return f"OtherEvent({self.raw!r})"


def decode_key(ch):
    if ch in NON_KEY_CODES:
        return OtherEvent(ch)
    if ch == ESC:
        return KeyEvent("esc")
    if ch in ENTER_CODES:
        return KeyEvent("enter")
    if ch == curses.KEY_UP:
        return KeyEvent("up")
    if ch == curses.KEY_DOWN:
        return KeyEvent("down")
    if 32 <= ch < 127:
        return KeyEvent(chr(ch))
    return KeyEvent("other")


class CursesTerminal:
    """Output sink and blocking input source over a curses window.

    Writes never touch the last column, and cursor moves are clamped to the
    window, so curses only raises ``curses.error`` for real terminal failures.
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def setup(self):
        curses.set_escdelay(ESC_DELAY_MS)
        self.stdscr.nodelay(False)
        self.stdscr.keypad(True)
        try:
            curses.curs_set(1)
        except curses.error:
            logger.debug("terminal cannot show the cursor")

    def size(self):
        return self.stdscr.getmaxyx()

    def clear(self):
        self.stdscr.erase()

    def move_to(self, row, col):
        h, w = self.size()
        self.stdscr.move(max(0, min(row, h - 1)), max(0, min(col, w - 1)))

    def move_by(self, rows):
        # relative moves land on column 0 of the target line
        y, _ = self.stdscr.getyx()
        self.move_to(y + rows, 0)

    def cursor_row(self):
        return self.stdscr.getyx()[0]

    def write(self, text, bold=False):
        _, w = self.size()
        _, x = self.stdscr.getyx()
        room = w - 1 - x
        if room <= 0:
            return
        attr = curses.A_BOLD if bold else curses.A_NORMAL
        self.stdscr.addstr(text[:room], attr)

    def box(self, title=""):
        self.stdscr.border()
        _, w = self.size()
        if title and w > 3:
            self.stdscr.addstr(0, 1, title[:w - 3])

    def flush(self):
        self.stdscr.refresh()

    def read_event(self):
        return decode_key(self.stdscr.getch())
