#!/usr/bin/env python3
"""
Generator Presets
=================
Ready-made alphabets and passphrase settings.

    secure        printable ASCII (space .. ~)    95 characters
    numeric       0-9                             10 characters
    alphanumeric  0-9A-Za-z                       62 characters
    alpha         A-Za-z                          52 characters
    upper         A-Z                             26 characters
    lower         a-z                             26 characters
"""

from functools import lru_cache
from typing import Dict, List

from .errors import InvalidConfig
from .generators.alphabet import AlphabetConfig, SegmentMapper, build_alphabet_generator, generate_password
from .generators.dictionary import DictionaryConfig, generate_passphrase
from .wordlists import INTERNAL, new_passphrase_generator


# =============================================================================
# Password Alphabets
# =============================================================================

PASSWORD_TYPES = {
    "secure": {
        "build": lambda: build_alphabet_generator(' ', 95),
        "description": "Printable ASCII characters, including space",
    },
    "numeric": {
        "build": lambda: build_alphabet_generator('0', 10),
        "description": "Digits 0-9",
    },
    "alphanumeric": {
        "build": lambda: build_alphabet_generator(
            '0', 62, SegmentMapper((('0', 10), ('A', 26), ('a', 26)))
        ),
        "description": "Digits and upper/lower case letters",
    },
    "alpha": {
        "build": lambda: build_alphabet_generator('A', 52, SegmentMapper((('A', 26), ('a', 26)))),
        "description": "Upper and lower case letters",
    },
    "upper": {
        "build": lambda: build_alphabet_generator('A', 26),
        "description": "Upper case letters A-Z",
    },
    "lower": {
        "build": lambda: build_alphabet_generator('a', 26),
        "description": "Lower case letters a-z",
    },
}

PASSWORD_TYPE_ALIASES = {
    's': 'secure',
    'n': 'numeric',
    'a': 'alphanumeric',
}


def password_type_names() -> List[str]:
    return list(PASSWORD_TYPES) + list(PASSWORD_TYPE_ALIASES)


@lru_cache(maxsize=None)
def get_password_generator(type_name: str = "secure") -> AlphabetConfig:
    """
    Resolve a password type (or its one-letter alias) to an alphabet.

    Raises:
        InvalidConfig: If the type is unknown
    """
    name = PASSWORD_TYPE_ALIASES.get(type_name, type_name)
    preset = PASSWORD_TYPES.get(name)
    if preset is None:
        available = ', '.join(PASSWORD_TYPES)
        raise InvalidConfig(f"Unknown password type '{type_name}'. Available types: {available}")
    return preset["build"]()


def list_password_types() -> Dict[str, str]:
    return {name: p["description"] for name, p in PASSWORD_TYPES.items()}


def get_secure_password(min_length: int, max_length: int) -> str:
    return generate_password(get_password_generator("secure"), min_length, max_length)


def get_numeric_password(min_length: int, max_length: int) -> str:
    return generate_password(get_password_generator("numeric"), min_length, max_length)


def get_alphanumeric_password(min_length: int, max_length: int) -> str:
    return generate_password(get_password_generator("alphanumeric"), min_length, max_length)


def get_alpha_password(min_length: int, max_length: int) -> str:
    return generate_password(get_password_generator("alpha"), min_length, max_length)


def get_alpha_upper_password(min_length: int, max_length: int) -> str:
    return generate_password(get_password_generator("upper"), min_length, max_length)


def get_alpha_lower_password(min_length: int, max_length: int) -> str:
    return generate_password(get_password_generator("lower"), min_length, max_length)


# =============================================================================
# Passphrases
# =============================================================================

# Longer words than the comic's, from the bundled list
XKCD_MIN_WORD_LENGTH = 5
XKCD_MAX_WORD_LENGTH = 8


@lru_cache(maxsize=1)
def get_xkcd_passphrase_generator() -> DictionaryConfig:
    return new_passphrase_generator(INTERNAL, XKCD_MIN_WORD_LENGTH, XKCD_MAX_WORD_LENGTH)


def get_xkcd_passphrase(word_count: int = 4) -> str:
    return generate_passphrase(get_xkcd_passphrase_generator(), word_count)


__all__ = [
    "PASSWORD_TYPES",
    "PASSWORD_TYPE_ALIASES",
    "password_type_names",
    "get_password_generator",
    "list_password_types",
    "get_secure_password",
    "get_numeric_password",
    "get_alphanumeric_password",
    "get_alpha_password",
    "get_alpha_upper_password",
    "get_alpha_lower_password",
    "get_xkcd_passphrase_generator",
    "get_xkcd_passphrase",
]
