import pytest

from character import Character
from tests.helpers import MemoryTerminal


@pytest.fixture
def party():
    return [
        Character("Aria", "Ranger"),
        Character("Bram", "Cleric"),
        Character("Cass", "Rogue"),
    ]


@pytest.fixture
def term():
    return MemoryTerminal()
