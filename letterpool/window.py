"""Main window (Qt) — captures keys, feeds the session, draws its snapshot."""
import html
import logging
from typing import Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QGroupBox, QLabel, QListWidget,
)
from PyQt5.QtCore import Qt

from letterpool import keys
from letterpool.keys import Key
from letterpool.letters import ALPHABET
from letterpool.session import EditingSession, Mode, Snapshot

logger = logging.getLogger(__name__)

YELLOW = "#d7d700"
GREEN = "#4caf50"
BLUE = "#2196f3"
RED = "#f44336"

QT_KEYS = {
    Qt.Key_Backspace: keys.BACKSPACE,
    Qt.Key_Delete: keys.DELETE,
    Qt.Key_Left: keys.LEFT,
    Qt.Key_Right: keys.RIGHT,
    Qt.Key_Escape: keys.ESCAPE,
    Qt.Key_Tab: keys.TAB,
}


def key_from_qt(key: int, text: str) -> Optional[Key]:
    """Translate a Qt key code and its text to a session key, None if unrecognized."""
    if key in QT_KEYS:
        return QT_KEYS[key]
    char = keys.printable(text)
    if char is not None:
        return Key.from_char(char)
    return None


def input_color(snapshot: Snapshot, index: int) -> Optional[str]:
    """Active input is yellow; others turn green once the letters balance out."""
    if snapshot.active_index == index:
        return YELLOW
    if snapshot.balanced:
        return GREEN
    return None


def letter_color(count: int) -> str:
    if count == 0:
        return GREEN
    return BLUE if count > 0 else RED


def render_input(text: str, cursor: Optional[int]) -> str:
    """Rich text for an input, with a bar at the cursor when it is being edited."""
    if cursor is None:
        return html.escape(text) or "&nbsp;"
    return (html.escape(text[:cursor]) + '<span style="color:#888">|</span>'
            + html.escape(text[cursor:]))


def help_message(mode: Mode) -> str:
    if mode is Mode.IDLE:
        return "Press <b>q</b> to exit, <b>e</b> to start editing"
    return "Press <b>Esc</b> to stop editing, <b>Tab</b> to swap inputs"


class SuggestWindow(QMainWindow):
    """Two inputs, the letter balance, and the ranked suggestion list."""

    def __init__(self, session: EditingSession, config=None, parent=None):
        super().__init__(parent)
        self.session = session

        self.setWindowTitle("letterpool")
        if config is not None:
            self.resize(*config.window_size)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self._help_label = QLabel()
        layout.addWidget(self._help_label)

        # === Inputs ===
        self._inputs = []
        for title in ("Input-1", "Input-2"):
            group = QGroupBox(title)
            group_layout = QVBoxLayout(group)
            label = QLabel()
            label.setTextFormat(Qt.RichText)
            group_layout.addWidget(label)
            layout.addWidget(group)
            self._inputs.append(label)

        # === Letters ===
        letters_group = QGroupBox("letters")
        letters_layout = QHBoxLayout(letters_group)
        self._letter_labels = []
        for _ in ALPHABET:
            label = QLabel()
            letters_layout.addWidget(label)
            self._letter_labels.append(label)
        layout.addWidget(letters_group)

        # === Suggestions ===
        suggestions_group = QGroupBox("Suggestions")
        suggestions_layout = QVBoxLayout(suggestions_group)
        self._suggestions = QListWidget()
        self._suggestions.setFocusPolicy(Qt.NoFocus)
        suggestions_layout.addWidget(self._suggestions)
        layout.addWidget(suggestions_group, 1)

        self.setFocusPolicy(Qt.StrongFocus)
        self.refresh()

    def refresh(self):
        """Redraw everything from a fresh session snapshot."""
        snapshot = self.session.snapshot()
        self._help_label.setText(help_message(snapshot.mode))

        for index, label in enumerate(self._inputs):
            cursor = snapshot.cursor if snapshot.active_index == index else None
            label.setText(render_input(snapshot.buffers[index], cursor))
            color = input_color(snapshot, index)
            label.setStyleSheet(f"color: {color};" if color else "")

        for letter, count, label in zip(ALPHABET, snapshot.account, self._letter_labels):
            label.setText(f"{letter}: {count}")
            label.setStyleSheet(f"color: {letter_color(count)};")

        self._suggestions.clear()
        self._suggestions.addItems(
            [f"{i}: {word}" for i, word in enumerate(snapshot.suggestions)]
        )

    def focusNextPrevChild(self, forward):
        # Tab belongs to the session (swap inputs), not to focus traversal.
        return False

    def keyPressEvent(self, event):
        key = key_from_qt(event.key(), event.text())
        if key is None:
            super().keyPressEvent(event)
            return
        if not self.session.dispatch(key):
            logger.info("Quit requested")
            self.close()
            return
        self.refresh()
