#!/usr/bin/env python3
"""
passgen - Password & Passphrase Generator
=========================================

Cryptographically strong random passwords from configurable alphabets and
passphrases from word lists, with no modulo bias.

Quick Start
-----------
    import passgen

    passgen.get_secure_password(14, 40)
    passgen.get_numeric_password(4, 4)
    passgen.get_xkcd_passphrase(4)

    # Custom alphabet: hex digits
    hex_digits = passgen.build_alphabet_generator(
        '0', 16, lambda i: '0123456789abcdef'[i]
    )
    passgen.generate_password(hex_digits, 32, 32)

    # Custom word list
    config = passgen.build_dictionary_generator(words, 4, 10)
    passgen.generate_passphrase(config, 5)

Modules
-------
    passgen.generators - Alphabet/dictionary generators and random sources
    passgen.wordlists  - Word list loading (files and the bundled list)
    passgen.presets    - Ready-made alphabets and passphrase settings
    passgen.errors     - Exception types

CLI Usage
---------
    python -m passgen password -n 5 -t alphanumeric
    python -m passgen passphrase -w 5 -m 4 -x 10
"""

__version__ = "0.1.0"

from .errors import (
    PassgenError,
    InvalidConfig,
    RandomSourceFailure,
    InsufficientRandomData,
)
from .generators import (
    UniformRandomSource,
    SystemRandomSource,
    StreamRandomSource,
    get_rng,
    SymbolMapper,
    LinearOffsetMapper,
    SegmentMapper,
    FunctionMapper,
    AlphabetConfig,
    AlphabetGenerator,
    build_alphabet_generator,
    generate_password,
    DictionaryConfig,
    DictionaryGenerator,
    build_dictionary_generator,
    generate_passphrase,
)
from .presets import (
    get_password_generator,
    get_secure_password,
    get_numeric_password,
    get_alphanumeric_password,
    get_alpha_password,
    get_alpha_upper_password,
    get_alpha_lower_password,
    get_xkcd_passphrase_generator,
    get_xkcd_passphrase,
)
from .wordlists import load_words, load_word_file, new_passphrase_generator

__all__ = [
    '__version__',
    # Errors
    'PassgenError',
    'InvalidConfig',
    'RandomSourceFailure',
    'InsufficientRandomData',
    # Random sources
    'UniformRandomSource',
    'SystemRandomSource',
    'StreamRandomSource',
    'get_rng',
    # Passwords
    'SymbolMapper',
    'LinearOffsetMapper',
    'SegmentMapper',
    'FunctionMapper',
    'AlphabetConfig',
    'AlphabetGenerator',
    'build_alphabet_generator',
    'generate_password',
    'get_password_generator',
    'get_secure_password',
    'get_numeric_password',
    'get_alphanumeric_password',
    'get_alpha_password',
    'get_alpha_upper_password',
    'get_alpha_lower_password',
    # Passphrases
    'DictionaryConfig',
    'DictionaryGenerator',
    'build_dictionary_generator',
    'generate_passphrase',
    'get_xkcd_passphrase_generator',
    'get_xkcd_passphrase',
    'load_words',
    'load_word_file',
    'new_passphrase_generator',
]
