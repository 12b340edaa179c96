# utils.py
import os
import tempfile
import json
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_data_dir(appname="charsheet"):
    base = os.environ.get("XDG_DATA_HOME") or os.path.join(os.path.expanduser("~"), ".local", "share")
    return os.path.join(base, appname)


def get_characters_path(appname="charsheet"):
    env = os.environ.get("CHARSHEET_CHARACTERS")
    if env:
        return env
    return os.path.join(get_data_dir(appname), "characters.json")


def get_log_path(appname="charsheet"):
    env = os.environ.get("CHARSHEET_LOG_FILE")
    if env:
        return env
    # one log per user, curses owns the terminal so nothing goes to stderr
    fn = f"{appname}_{os.getuid()}.log"
    return os.path.join(tempfile.gettempdir(), fn)


def get_log_level(default="INFO"):
    return os.environ.get("CHARSHEET_LOG_LEVEL", default)


def safe_write_json(path, data):
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    os.replace(tmp, path)


def setup_logging(path, level="INFO"):
    """Send all log records to ``path``; replaces any handlers already on the root logger."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.addHandler(handler)
    return handler
