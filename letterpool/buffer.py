"""Text buffer — one editable line of input with a character cursor."""


class TextBuffer:
    """Holds the text of one input field and a cursor into it.

    The cursor counts characters, not bytes, and always stays within
    [0, len(text)]. Every mutation re-clamps it, so deleting or moving past
    either end is a silent no-op.
    """

    def __init__(self, text: str = ""):
        self._chars: list[str] = list(text)
        self._cursor: int = len(self._chars)

    @property
    def text(self) -> str:
        return ''.join(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._chars)

    def clamp(self, pos: int) -> int:
        """Bound a cursor position to [0, len(text)]."""
        return max(0, min(pos, len(self._chars)))

    def set_cursor(self, pos: int):
        self._cursor = self.clamp(pos)

    def insert(self, char: str):
        """Insert a character at the cursor and step past it."""
        self._chars.insert(self._cursor, char)
        self.move_right()

    def delete_left(self):
        """Handle backspace — remove the character before the cursor."""
        if self._cursor == 0:
            return
        offset = self._cursor - 1
        self._chars = self._chars[:offset] + self._chars[offset + 1:]
        self.move_left()

    def delete_right(self):
        """Handle delete — remove the character under the cursor."""
        if self._cursor >= len(self._chars):
            return
        offset = self._cursor
        self._chars = self._chars[:offset] + self._chars[offset + 1:]
        self._cursor = self.clamp(self._cursor)

    def move_left(self):
        self._cursor = self.clamp(self._cursor - 1)

    def move_right(self):
        self._cursor = self.clamp(self._cursor + 1)


def word_start(text: str) -> str:
    """Trailing partial word of `text`; empty when `text` ends in whitespace."""
    if not text or text[-1].isspace():
        return ""
    return text.split()[-1]
