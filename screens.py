# screens.py
from character import Character

NEW_CHARACTER_LABEL = "New Character Sheet.."


class MissingCharacterError(RuntimeError):
    pass


class Outcome:
    """What the driver should do after a key: "continue", "exit" or "transition"."""

    def __init__(self, kind, screen=None):
        self.kind = kind
        self.screen = screen

    def __repr__(self):
        if self.kind == "transition":
            return f"Outcome(transition -> {type(self.screen).__name__})"
        return f"Outcome({self.kind})"


CONTINUE = Outcome("continue")
EXIT = Outcome("exit")


def transition_to(screen):
    return Outcome("transition", screen)


class SelectionScreen:
    """Saved characters one per line, then the "new character" row.

    ``selected`` is the highlighted row, 0..N where N is the number of saved
    characters and row N is the new-character row. ``top`` is the first
    list row shown on screen, so the selected row is always drawn.
    """

    def __init__(self, saved_characters, selected=0):
        self.saved_characters = tuple(saved_characters)
        self.selected = selected
        self.top = 0

    def scroll_into_view(self, height):
        if self.selected < self.top:
            self.top = self.selected
        elif self.selected >= self.top + height:
            self.top = self.selected - height + 1
        return self.top

    @property
    def new_row(self):
        return len(self.saved_characters)

    def lines(self):
        out = [f"{c.name} {c.char_class}" for c in self.saved_characters]
        out.append(NEW_CHARACTER_LABEL)
        return out


class SheetScreen:
    def __init__(self, character=None):
        self.character = character


def draw_selection(screen, term):
    h, _ = term.size()
    top = screen.scroll_into_view(h)
    term.clear()
    for row, line in enumerate(screen.lines()[top:top + h]):
        term.move_to(row, 0)
        term.write(line)
    term.move_to(screen.selected - top, 0)


def move_selection(screen, term, step):
    screen.selected += step
    h, _ = term.size()
    top = screen.top
    # off the visible rows: scroll by redrawing the list
    if screen.scroll_into_view(h) != top:
        draw_selection(screen, term)
    else:
        term.move_by(step)


def draw_sheet(screen, term):
    c = screen.character
    # checked before clearing so a bad sheet never leaves half a frame
    if c is None:
        raise MissingCharacterError("no character to show on the sheet")
    term.clear()
    term.box(c.name)
    term.move_to(1, 1)
    term.write("Name: ", bold=True)
    term.write(c.name)
    term.move_to(2, 1)
    term.write("Class: ", bold=True)
    term.write(c.char_class)
    term.move_to(1, 1)


def selection_key(screen, term, event):
    code = event.code
    if code == "esc":
        return EXIT
    elif code == "k":
        if screen.selected > 0:
            move_selection(screen, term, -1)
        return CONTINUE
    elif code == "j":
        if screen.selected < screen.new_row:
            move_selection(screen, term, 1)
        return CONTINUE
    elif code == "enter":
        if screen.selected == screen.new_row:
            return transition_to(SheetScreen(Character()))
        return transition_to(SheetScreen(screen.saved_characters[screen.selected]))
    return CONTINUE


def sheet_key(screen, term, event):
    # TODO: field navigation and editing on the sheet
    return CONTINUE


def render_screen(screen, term):
    if isinstance(screen, SelectionScreen):
        draw_selection(screen, term)
    elif isinstance(screen, SheetScreen):
        draw_sheet(screen, term)
    else:
        raise TypeError(f"not a screen: {screen!r}")


def handle_screen_key(screen, term, event):
    if isinstance(screen, SelectionScreen):
        return selection_key(screen, term, event)
    elif isinstance(screen, SheetScreen):
        return sheet_key(screen, term, event)
    raise TypeError(f"not a screen: {screen!r}")
