"""Editing session — two buffers, a mode state machine, and derived suggestions."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from letterpool.buffer import TextBuffer
from letterpool.keys import Key, KeyKind
from letterpool.letters import count_letters, is_balanced
from letterpool.suggest import SuggestionEngine

logger = logging.getLogger(__name__)


class Mode(Enum):
    IDLE = "idle"
    EDITING_1 = "editing_1"
    EDITING_2 = "editing_2"

    @property
    def active_index(self) -> Optional[int]:
        """Index of the buffer receiving edits in this mode, None when idle."""
        return {Mode.EDITING_1: 0, Mode.EDITING_2: 1}.get(self)


class Command(Enum):
    START_EDIT = "start_edit"
    STOP_EDIT = "stop_edit"
    SWAP = "swap"


TRANSITIONS = {
    (Mode.IDLE, Command.START_EDIT): Mode.EDITING_1,
    (Mode.EDITING_1, Command.STOP_EDIT): Mode.IDLE,
    (Mode.EDITING_2, Command.STOP_EDIT): Mode.IDLE,
    (Mode.EDITING_1, Command.SWAP): Mode.EDITING_2,
    (Mode.EDITING_2, Command.SWAP): Mode.EDITING_1,
}

IDLE_KEYS = {
    'e': Command.START_EDIT,
}
QUIT_KEY = 'q'

EDITING_KEYS = {
    KeyKind.ESCAPE: Command.STOP_EDIT,
    KeyKind.TAB: Command.SWAP,
}


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the session for a presentation layer."""
    buffers: Tuple[str, str]
    cursor: int
    mode: Mode
    account: Tuple[int, ...]
    suggestions: Tuple[str, ...]

    @property
    def active_index(self) -> Optional[int]:
        return self.mode.active_index

    @property
    def balanced(self) -> bool:
        return is_balanced(self.account)


class EditingSession:
    """Routes key events to the active buffer and keeps the derived state current.

    The letter account and the suggestion list are recomputed from scratch
    after every event. In IDLE no buffer is active: the account compares
    buffer 2 against buffer 1 and suggestions start from an empty word.
    """

    def __init__(self, engine: SuggestionEngine):
        self._engine = engine
        self._buffers = (TextBuffer(), TextBuffer())
        self._mode = Mode.IDLE
        self._cursor = 0  # last cursor while editing, reused on re-entry
        self._account: Tuple[int, ...] = count_letters("", "")
        self._suggestions: Tuple[str, ...] = ()
        self.refresh()

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def buffers(self) -> Tuple[TextBuffer, TextBuffer]:
        return self._buffers

    @property
    def account(self) -> Tuple[int, ...]:
        return self._account

    @property
    def suggestions(self) -> Tuple[str, ...]:
        return self._suggestions

    @property
    def active_buffer(self) -> Optional[TextBuffer]:
        index = self._mode.active_index
        return None if index is None else self._buffers[index]

    @property
    def inactive_buffer(self) -> Optional[TextBuffer]:
        index = self._mode.active_index
        return None if index is None else self._buffers[1 - index]

    # --- state machine ---

    def apply(self, command: Command) -> bool:
        """Apply a mode command. Returns False if it has no transition from the current mode."""
        changed = self._transition(command)
        if changed:
            self.refresh()
        return changed

    def _transition(self, command: Command) -> bool:
        target = TRANSITIONS.get((self._mode, command))
        if target is None:
            return False
        previous = self.active_buffer
        if previous is not None:
            self._cursor = previous.cursor
        logger.debug("Mode %s → %s", self._mode.value, target.value)
        self._mode = target
        active = self.active_buffer
        if active is not None:
            active.set_cursor(self._cursor)
            self._cursor = active.cursor
        return True

    def start_edit(self) -> bool:
        return self.apply(Command.START_EDIT)

    def stop_edit(self) -> bool:
        return self.apply(Command.STOP_EDIT)

    def swap(self) -> bool:
        return self.apply(Command.SWAP)

    # --- editing, ignored while idle ---

    def insert(self, char: str):
        self._edit(Key.from_char(char))
        self.refresh()

    def delete_left(self):
        self._edit(Key(KeyKind.BACKSPACE))
        self.refresh()

    def delete_right(self):
        self._edit(Key(KeyKind.DELETE))
        self.refresh()

    def move_left(self):
        self._edit(Key(KeyKind.LEFT))
        self.refresh()

    def move_right(self):
        self._edit(Key(KeyKind.RIGHT))
        self.refresh()

    # --- event loop entry ---

    def dispatch(self, key: Key) -> bool:
        """Process one key event, then refresh derived state.

        Returns False when the key asks the host loop to quit, True otherwise.
        Unrecognized keys are ignored.
        """
        if self._mode is Mode.IDLE:
            if key.kind is KeyKind.CHAR and key.char == QUIT_KEY:
                return False
            if key.kind is KeyKind.CHAR and key.char in IDLE_KEYS:
                self._transition(IDLE_KEYS[key.char])
        elif key.kind in EDITING_KEYS:
            self._transition(EDITING_KEYS[key.kind])
        else:
            self._edit(key)
        self.refresh()
        return True

    def _edit(self, key: Key):
        buf = self.active_buffer
        if buf is None:
            return
        if key.kind is KeyKind.CHAR and key.char:
            buf.insert(key.char)
        elif key.kind is KeyKind.BACKSPACE:
            buf.delete_left()
        elif key.kind is KeyKind.DELETE:
            buf.delete_right()
        elif key.kind is KeyKind.LEFT:
            buf.move_left()
        elif key.kind is KeyKind.RIGHT:
            buf.move_right()

    def refresh(self):
        """Recompute the letter account, then the suggestions from it."""
        active, inactive = self.active_buffer, self.inactive_buffer
        if active is None:
            self._account = count_letters(self._buffers[0].text, self._buffers[1].text)
            content = ""
        else:
            self._account = count_letters(inactive.text, active.text)
            content = active.text
            self._cursor = active.cursor
        self._suggestions = self._engine.refresh(content, self._account)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            buffers=(self._buffers[0].text, self._buffers[1].text),
            cursor=self._cursor,
            mode=self._mode,
            account=self._account,
            suggestions=self._suggestions,
        )
