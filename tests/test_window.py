"""Tests for the Qt presentation helpers (no display needed)."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from PyQt5.QtCore import Qt

from letterpool import keys
from letterpool.keys import Key, KeyKind
from letterpool.letters import count_letters
from letterpool.session import Mode, Snapshot
from letterpool.window import (
    GREEN, BLUE, RED, YELLOW,
    help_message, input_color, key_from_qt, letter_color, render_input,
)


def make_snapshot(mode, account=(0,) * 26):
    return Snapshot(buffers=("ab", "ba"), cursor=1, mode=mode,
                    account=account, suggestions=())


def test_key_from_qt_special_keys():
    assert key_from_qt(Qt.Key_Backspace, "\b") == keys.BACKSPACE
    assert key_from_qt(Qt.Key_Delete, "") == keys.DELETE
    assert key_from_qt(Qt.Key_Left, "") == keys.LEFT
    assert key_from_qt(Qt.Key_Right, "") == keys.RIGHT
    assert key_from_qt(Qt.Key_Escape, "\x1b") == keys.ESCAPE
    assert key_from_qt(Qt.Key_Tab, "\t") == keys.TAB


def test_key_from_qt_printable():
    assert key_from_qt(Qt.Key_A, "a") == Key(KeyKind.CHAR, "a")
    assert key_from_qt(Qt.Key_Space, " ") == Key.from_char(" ")
    assert key_from_qt(Qt.Key_E, "é") == Key.from_char("é")


def test_key_from_qt_unrecognized():
    assert key_from_qt(Qt.Key_Shift, "") is None
    assert key_from_qt(Qt.Key_F1, "") is None
    assert key_from_qt(Qt.Key_Return, "\r") is None


def test_input_colors():
    editing = make_snapshot(Mode.EDITING_1)
    assert input_color(editing, 0) == YELLOW
    assert input_color(editing, 1) == GREEN
    unbalanced = make_snapshot(Mode.IDLE, count_letters("", "a"))
    assert input_color(unbalanced, 0) is None


def test_letter_colors():
    assert letter_color(0) == GREEN
    assert letter_color(2) == BLUE
    assert letter_color(-1) == RED


def test_render_input():
    assert render_input("a<b", None) == "a&lt;b"
    assert render_input("", None) == "&nbsp;"
    rendered = render_input("ab", 1)
    assert rendered.startswith("a<span")
    assert rendered.endswith("</span>b")


def test_help_message():
    assert "start editing" in help_message(Mode.IDLE)
    assert "swap inputs" in help_message(Mode.EDITING_2)


if __name__ == '__main__':
    import pytest
    sys.exit(pytest.main([__file__]))
