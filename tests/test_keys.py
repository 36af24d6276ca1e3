import string

import pytest

from flybinds.keys import (
    KEYS,
    MOD2_MASK,
    SHIFT_MASK,
    XK_LEFT,
    XK_RETURN,
    XK_SPACE,
    lookup_key,
)


def test_lowercase_letter():
    assert lookup_key(ord("a"), 0) == "a"


def test_shifted_letter_is_uppercase():
    assert lookup_key(ord("a"), SHIFT_MASK) == "A"


def test_num_lock_is_ignored():
    assert lookup_key(ord("b"), MOD2_MASK) == "b"
    assert lookup_key(ord("b"), SHIFT_MASK | MOD2_MASK) == "B"


def test_special_keys():
    assert lookup_key(XK_RETURN, 0) == "\\n"
    assert lookup_key(XK_SPACE, 0) == "␣"
    assert lookup_key(ord("."), 0) == "."


@pytest.mark.parametrize("digit", list("0123456789"))
def test_digits(digit):
    assert lookup_key(ord(digit), 0) == digit


def test_shifted_digit_has_no_key():
    assert lookup_key(ord("1"), SHIFT_MASK) is None


def test_unbound_keysym():
    assert lookup_key(XK_LEFT, 0) is None


def test_every_key_is_found_by_its_own_binding():
    names = [lookup_key(key.keysym, key.mod) for key in KEYS]
    assert names == [key.name for key in KEYS]
    assert len(set(names)) == len(KEYS)


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_uppercase_keys_use_shift(letter):
    assert lookup_key(ord(letter.lower()), SHIFT_MASK) == letter
    assert lookup_key(ord(letter.lower()), 0) == letter.lower()