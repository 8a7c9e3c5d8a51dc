#!/usr/bin/env python3
"""
Password and Passphrase Generators
==================================
- AlphabetGenerator: bias-free mapping of random 32-bit words onto an alphabet
- DictionaryGenerator: uniform word selection from a filtered word list
- entropy: the random sources both generators draw from
"""

from .entropy import (
    UniformRandomSource,
    SystemRandomSource,
    StreamRandomSource,
    get_rng,
)
from .alphabet import (
    SymbolMapper,
    LinearOffsetMapper,
    SegmentMapper,
    FunctionMapper,
    AlphabetConfig,
    AlphabetGenerator,
    build_alphabet_generator,
    generate_password,
)
from .dictionary import (
    DictionaryConfig,
    DictionaryGenerator,
    build_dictionary_generator,
    generate_passphrase,
)

__all__ = [
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
    # Passphrases
    'DictionaryConfig',
    'DictionaryGenerator',
    'build_dictionary_generator',
    'generate_passphrase',
]
