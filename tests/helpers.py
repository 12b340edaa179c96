from __future__ import annotations


class ScriptExhausted(Exception):
    """Raised by MemoryTerminal.read_event once the scripted events run out."""


class MemoryTerminal:
    """In-memory stand-in for CursesTerminal.

    Each row keeps the styled runs written to it as ``(text, bold)`` pairs.
    ``calls`` records clear/box/flush/read in order so tests can check when a
    render happened relative to input.
    """

    def __init__(self, height: int = 24, width: int = 80, events=()):
        self.height = height
        self.width = width
        self.events = list(events)
        self.calls: list[str] = []
        self.setup_calls = 0
        self._reset()

    def _reset(self) -> None:
        self.rows: list[list[tuple[str, bool]]] = [[] for _ in range(self.height)]
        self.row = 0
        self.col = 0
        self.title: str | None = None

    def setup(self) -> None:
        self.setup_calls += 1

    def size(self) -> tuple[int, int]:
        return self.height, self.width

    def clear(self) -> None:
        self.calls.append("clear")
        self._reset()

    def move_to(self, row: int, col: int) -> None:
        self.row = max(0, min(row, self.height - 1))
        self.col = max(0, min(col, self.width - 1))

    def move_by(self, rows: int) -> None:
        self.move_to(self.row + rows, 0)

    def cursor_row(self) -> int:
        return self.row

    def write(self, text: str, bold: bool = False) -> None:
        text = text[: max(0, self.width - 1 - self.col)]
        if text:
            self.rows[self.row].append((text, bold))
            self.col += len(text)

    def box(self, title: str = "") -> None:
        self.calls.append("box")
        self.title = title

    def flush(self) -> None:
        self.calls.append("flush")

    def read_event(self):
        self.calls.append("read")
        if not self.events:
            raise ScriptExhausted()
        event = self.events.pop(0)
        if isinstance(event, BaseException):
            raise event
        return event

    def line(self, row: int) -> str:
        return "".join(text for text, _ in self.rows[row])

    def text_lines(self) -> list[str]:
        return [self.line(r) for r in range(self.height) if self.rows[r]]

    def runs(self, row: int) -> list[tuple[str, bool]]:
        return list(self.rows[row])

    def snapshot(self):
        return self.text_lines(), self.title, (self.row, self.col)
