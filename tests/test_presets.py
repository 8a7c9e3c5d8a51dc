"""
Tests for Generator Presets
===========================
Tests for passgen/presets.py and the package-level shortcuts.
"""

import pytest
import string
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import passgen
from passgen.errors import InvalidConfig
from passgen.presets import (
    PASSWORD_TYPES,
    get_password_generator,
    list_password_types,
    password_type_names,
)

DIGITS = string.digits
LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
PRINTABLE = ''.join(chr(c) for c in range(0x20, 0x7F))


class TestPasswordTypes:
    """Tests for preset alphabets."""

    @pytest.mark.parametrize("name,alphabet", [
        ("secure", PRINTABLE),
        ("numeric", DIGITS),
        ("alphanumeric", DIGITS + UPPER + LOWER),
        ("alpha", UPPER + LOWER),
        ("upper", UPPER),
        ("lower", LOWER),
    ])
    def test_alphabets(self, name, alphabet):
        config = get_password_generator(name)
        assert config.alphabet_size == len(alphabet)
        assert config.alphabet == alphabet

    @pytest.mark.parametrize("alias,name", [("s", "secure"), ("n", "numeric"), ("a", "alphanumeric")])
    def test_aliases(self, alias, name):
        assert get_password_generator(alias) == get_password_generator(name)

    def test_unknown_type(self):
        with pytest.raises(InvalidConfig):
            get_password_generator("emoji")

    def test_listing(self):
        assert set(list_password_types()) == set(PASSWORD_TYPES)
        assert {"s", "n", "a"} <= set(password_type_names())


class TestShortcuts:
    """Tests for one-shot password helpers."""

    @pytest.mark.parametrize("func,alphabet", [
        (passgen.get_secure_password, PRINTABLE),
        (passgen.get_numeric_password, DIGITS),
        (passgen.get_alphanumeric_password, DIGITS + UPPER + LOWER),
        (passgen.get_alpha_password, UPPER + LOWER),
        (passgen.get_alpha_upper_password, UPPER),
        (passgen.get_alpha_lower_password, LOWER),
    ])
    def test_characters_and_length(self, func, alphabet):
        password = func(14, 20)
        assert 14 <= len(password) <= 20
        assert set(password) <= set(alphabet)

    def test_numeric_fixed_length(self):
        assert len(passgen.get_numeric_password(4, 4)) == 4


class TestXKCD:
    """Tests for the bundled-dictionary passphrase."""

    def test_generator_bounds(self):
        config = passgen.get_xkcd_passphrase_generator()
        assert config.min_word_length == 5
        assert config.max_word_length == 8

    def test_passphrase(self):
        for _ in range(5):
            words = passgen.get_xkcd_passphrase(4).split(" ")
            assert len(words) == 4
            assert all(5 <= len(w) <= 8 for w in words)

    def test_default_word_count(self):
        assert len(passgen.get_xkcd_passphrase().split(" ")) == 4
