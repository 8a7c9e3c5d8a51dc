#!/usr/bin/env python3
"""
Word List Loader
================
Sources raw word lists for the passphrase generator.

- load_word_file(path)  - one word per line, UTF-8
- internal_words()      - bundled list, decoded once on first use
- load_words(source)    - "internal" or a file path

Usage:
    from passgen.wordlists import new_passphrase_generator

    config = new_passphrase_generator("internal", 5, 8)
    config = new_passphrase_generator("/usr/share/dict/words", 4, 10)
"""

import base64
import binascii
import gzip
import logging
import threading
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..errors import InvalidConfig
from ..generators.dictionary import DictionaryConfig, build_dictionary_generator
from ..settings import resolve_path
from ._internal import DICT_STORED

logger = logging.getLogger(__name__)

INTERNAL = "internal"

_internal_words: Optional[Tuple[str, ...]] = None
_internal_lock = threading.Lock()


def _split_words(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _decode_internal() -> Tuple[str, ...]:
    try:
        raw = gzip.decompress(base64.b64decode(DICT_STORED))
    except (binascii.Error, OSError, EOFError) as e:
        raise InvalidConfig(f"Unable to decode internal dictionary: {e}") from e
    return tuple(_split_words(raw.decode('utf-8')))


def internal_words() -> Tuple[str, ...]:
    """The bundled word list, decompressed on first call and cached."""
    global _internal_words
    if _internal_words is None:
        with _internal_lock:
            if _internal_words is None:
                _internal_words = _decode_internal()
                logger.debug(f"Loaded {len(_internal_words)} internal dictionary words")
    return _internal_words


def load_word_file(path: Union[str, Path]) -> List[str]:
    """Read a dictionary file with one word per line."""
    path = resolve_path(str(path))
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InvalidConfig(f"Unable to open dictionary file {path}: {e}") from e

    words = []
    skipped = 0
    for line in raw.splitlines():
        try:
            word = line.decode('utf-8').strip()
        except UnicodeDecodeError:
            skipped += 1
            continue
        if word:
            words.append(word)

    if skipped:
        logger.warning(f"Skipped {skipped} lines of {path} that are not valid UTF-8")
    if not words:
        logger.warning(f"Dictionary file {path} contains no words")
    return words


def load_words(source: str = INTERNAL) -> List[str]:
    """Load the internal list or a dictionary file."""
    if source == INTERNAL:
        return list(internal_words())
    return load_word_file(source)


def new_passphrase_generator(source: str, min_word_length: int, max_word_length: int) -> DictionaryConfig:
    """Load a word source and build a dictionary configuration from it."""
    return build_dictionary_generator(load_words(source), min_word_length, max_word_length)


__all__ = [
    "INTERNAL",
    "internal_words",
    "load_word_file",
    "load_words",
    "new_passphrase_generator",
]
