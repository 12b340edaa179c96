# character.py

DEFAULT_NAME = "New Character"
DEFAULT_CLASS = "Adventurer"


class Character:
    def __init__(self, name=DEFAULT_NAME, char_class=DEFAULT_CLASS):
        self.name = name
        self.char_class = char_class

    def __repr__(self):
        return f"Character(name={self.name!r}, char_class={self.char_class!r})"

    def __eq__(self, other):
        if not isinstance(other, Character):
            return NotImplemented
        return self.name == other.name and self.char_class == other.char_class

    __hash__ = None

    # --- json shape: {"name": ..., "class": ...} ---
    def to_dict(self):
        return {"name": self.name, "class": self.char_class}

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=str(data.get("name", DEFAULT_NAME)),
            char_class=str(data.get("class", DEFAULT_CLASS)),
        )
