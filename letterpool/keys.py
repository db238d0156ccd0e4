"""Key events as seen by the editing session, independent of any toolkit."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    TAB = "tab"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    char: str = ""

    @classmethod
    def from_char(cls, char: str) -> "Key":
        return cls(KeyKind.CHAR, char)


BACKSPACE = Key(KeyKind.BACKSPACE)
DELETE = Key(KeyKind.DELETE)
LEFT = Key(KeyKind.LEFT)
RIGHT = Key(KeyKind.RIGHT)
ESCAPE = Key(KeyKind.ESCAPE)
TAB = Key(KeyKind.TAB)


def printable(text: str) -> Optional[str]:
    """Return `text` if it is a single printable character, else None."""
    if len(text) == 1 and text.isprintable():
        return text
    return None
