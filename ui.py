# ui.py
import logging
from screens import SelectionScreen, render_screen, handle_screen_key
from terminal import KeyEvent

logger = logging.getLogger(__name__)


class TUI:
    """Owns the active screen and the terminal; runs the key loop.

    Exactly one screen is active. A transition swaps ``self.screen`` in one
    assignment and renders the new screen before the next key is read.
    Terminal errors are not caught here.
    """

    def __init__(self, term, saved_characters):
        self.term = term
        self.screen = SelectionScreen(saved_characters)

    def start(self):
        self.term.setup()
        self.render()
        self.run_loop()

    def render(self):
        render_screen(self.screen, self.term)
        self.term.flush()

    def run_loop(self):
        while True:
            self.term.flush()
            event = self.term.read_event()
            if not isinstance(event, KeyEvent):
                continue
            logger.debug("key %r on %s", event.code, type(self.screen).__name__)
            outcome = handle_screen_key(self.screen, self.term, event)

            if outcome.kind == "exit":
                logger.info("exit requested")
                return
            elif outcome.kind == "transition":
                logger.info("screen %s -> %s", type(self.screen).__name__, type(outcome.screen).__name__)
                self.screen = outcome.screen
                self.render()
