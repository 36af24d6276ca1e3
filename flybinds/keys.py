"""Keyboard keys that can select menu entries."""

from dataclasses import dataclass

SHIFT_MASK = 1 << 0
MOD2_MASK = 1 << 4  # num lock; ignored when matching

XK_SPACE = 0x0020
XK_PLUS = 0x002B
XK_COMMA = 0x002C
XK_MINUS = 0x002D
XK_PERIOD = 0x002E
XK_RETURN = 0xFF0D
XK_ESCAPE = 0xFF1B
XK_LEFT = 0xFF51
XK_H = ord("h")


@dataclass(frozen=True)
class Key:
    """A key combination and the key name menu entries use for it."""

    mod: int
    keysym: int
    name: str

    def matches(self, keysym, state):
        return self.keysym == keysym and (self.mod | MOD2_MASK) == (state | MOD2_MASK)


_LOWER = "abcdefghijklmnopqrstuvwxyz"

KEYS = (
    Key(0, XK_SPACE, "␣"),
    Key(0, XK_RETURN, "\\n"),
    Key(0, XK_PERIOD, "."),
    Key(0, XK_COMMA, ","),
    Key(0, XK_PLUS, "+"),
    Key(0, XK_MINUS, "-"),
    *(Key(0, ord(digit), digit) for digit in "0123456789"),
    *(Key(0, ord(letter), letter) for letter in _LOWER),
    *(Key(SHIFT_MASK, ord(letter), letter.upper()) for letter in _LOWER),
)


def lookup_key(keysym, state):
    """Return the key name for a keysym and modifier state, or None."""
    return next((key.name for key in KEYS if key.matches(keysym, state)), None)