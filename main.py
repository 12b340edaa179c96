# main.py
import argparse
import curses
import logging
import sys
from characters import load_characters
from terminal import CursesTerminal
from ui import TUI
from utils import get_characters_path, get_log_path, get_log_level, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="charsheet", description="Pick or create a character and view its sheet.")
    parser.add_argument("--characters", default=None, help="saved characters JSON file")
    parser.add_argument("--log-file", default=None, help="where to write the log")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    args = parser.parse_args(argv)
    args.characters = args.characters or get_characters_path()
    args.log_file = args.log_file or get_log_path()
    args.log_level = args.log_level or get_log_level()
    return args


def run(stdscr, characters):
    tui = TUI(CursesTerminal(stdscr), characters)
    tui.start()


def main(argv=None):
    args = parse_args(argv)
    try:
        setup_logging(args.log_file, args.log_level)
    except OSError as e:
        print(f"charsheet: error: cannot open log {args.log_file}: {e}", file=sys.stderr)
        return 1
    try:
        characters = load_characters(args.characters)
        # wrapper puts the terminal back in cooked mode on every exit path
        curses.wrapper(run, characters)
    except (OSError, ValueError, RuntimeError, curses.error) as e:
        logger.exception("charsheet stopped on error")
        print(f"charsheet: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
