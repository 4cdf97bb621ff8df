"""
Unit tests for keystroke decoding.
"""

import curses

import pytest
from blessed.keyboard import Keystroke

from casedrill.keys import BACKSPACE, ENTER, ESCAPE, KeyCode, KeyEvent, decode_keystroke


class TestDecodeKeystroke:
    def test_empty_keystroke(self):
        assert decode_keystroke(Keystroke("")) is None

    def test_printable(self):
        assert decode_keystroke(Keystroke("a")) == KeyEvent.character("a")
        assert decode_keystroke(Keystroke(" ")) == KeyEvent.character(" ")
        assert decode_keystroke(Keystroke("_")) == KeyEvent.character("_")

    @pytest.mark.parametrize(
        "ucs, code, name, expected",
        [
            ("\r", curses.KEY_ENTER, "KEY_ENTER", ENTER),
            ("\x7f", curses.KEY_BACKSPACE, "KEY_BACKSPACE", BACKSPACE),
            ("\x1b", 361, "KEY_ESCAPE", ESCAPE),
        ],
    )
    def test_named_sequences(self, ucs, code, name, expected):
        assert decode_keystroke(Keystroke(ucs, code=code, name=name)) == expected

    @pytest.mark.parametrize(
        "raw, expected", [("\r", ENTER), ("\n", ENTER), ("\x08", BACKSPACE), ("\x1b", ESCAPE)]
    )
    def test_raw_control_bytes(self, raw, expected):
        assert decode_keystroke(Keystroke(raw)) == expected

    @pytest.mark.parametrize("raw, letter", [("\x11", "q"), ("\x12", "r"), ("\x13", "s")])
    def test_control_chords(self, raw, letter):
        event = decode_keystroke(Keystroke(raw))
        assert event == KeyEvent.control(letter)
        assert event.ctrl

    def test_unhandled_sequence(self):
        event = decode_keystroke(Keystroke("\x1b[A", code=curses.KEY_UP, name="KEY_UP"))
        assert event.code is KeyCode.OTHER
