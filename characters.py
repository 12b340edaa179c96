# characters.py
import os
import json
import logging
from character import Character
from utils import safe_write_json

logger = logging.getLogger(__name__)


class CharacterFileError(ValueError):
    pass


def save_characters(path, characters):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    safe_write_json(path, [c.to_dict() for c in characters])
    logger.info("saved %d characters to %s", len(characters), path)
    return path


def load_characters(path):
    # first run: nothing saved yet
    if not os.path.exists(path):
        logger.info("no character file at %s", path)
        return []
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CharacterFileError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, list):
        raise CharacterFileError(f"{path}: expected a list of characters")
    characters = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CharacterFileError(f"{path}: entry {i} is not an object")
        characters.append(Character.from_dict(entry))
    logger.info("loaded %d characters from %s", len(characters), path)
    return characters
