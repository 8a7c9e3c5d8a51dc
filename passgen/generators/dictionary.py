#!/usr/bin/env python3
"""
Dictionary Passphrase Generator
===============================
Builds passphrases from a filtered word list, in the spirit of
http://xkcd.com/936/.

Every word is picked with UniformRandomSource.uniform_int(len(words)), which
rejection-samples against the exact list size rather than reducing a raw
random integer modulo it.

Usage:
    from passgen.generators.dictionary import build_dictionary_generator, generate_passphrase

    config = build_dictionary_generator(words, 5, 8)
    phrase = generate_passphrase(config, 4)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..errors import InvalidConfig
from .entropy import UniformRandomSource, get_rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryConfig:
    """Filtered, ordered candidate words and the length bounds they satisfy."""
    words: Tuple[str, ...]
    min_word_length: int
    max_word_length: int

    def __len__(self) -> int:
        return len(self.words)


def build_dictionary_generator(
    words: Iterable[str],
    min_word_length: int,
    max_word_length: int,
) -> DictionaryConfig:
    """
    Keep the words whose length lies in [min_word_length, max_word_length].

    Order and duplicates of the source are preserved.

    Raises:
        InvalidConfig: Bad bounds, or no word survives filtering
    """
    if min_word_length < 1:
        raise InvalidConfig(f"Minimum word length must be at least 1, got {min_word_length}")
    if min_word_length > max_word_length:
        raise InvalidConfig(
            f"Minimum word length {min_word_length} exceeds maximum word length {max_word_length}"
        )

    kept = tuple(w for w in words if min_word_length <= len(w) <= max_word_length)
    if not kept:
        raise InvalidConfig(
            f"No dictionary words between {min_word_length} and {max_word_length} characters"
        )

    logger.debug(f"Dictionary has {len(kept)} words of {min_word_length}-{max_word_length} characters")
    return DictionaryConfig(kept, min_word_length, max_word_length)


def generate_passphrase(
    config: DictionaryConfig,
    word_count: int,
    rng: Optional[UniformRandomSource] = None,
) -> str:
    """
    Join word_count uniformly chosen words with single spaces.

    Raises:
        InvalidConfig: Negative word count
        RandomSourceFailure: The random source failed mid-draw
    """
    if word_count < 0:
        raise InvalidConfig(f"Word count must be non-negative, got {word_count}")

    rng = rng or get_rng()
    size = len(config.words)
    chosen: List[str] = [config.words[rng.uniform_int(size)] for _ in range(word_count)]
    return ' '.join(chosen)


class DictionaryGenerator:
    """Reusable passphrase generator bound to one filtered word list."""

    def __init__(self, config: DictionaryConfig, rng: UniformRandomSource = None):
        self.config = config
        self.rng = rng

    @classmethod
    def build(cls, words: Iterable[str], min_word_length: int, max_word_length: int,
              rng: UniformRandomSource = None) -> "DictionaryGenerator":
        return cls(build_dictionary_generator(words, min_word_length, max_word_length), rng)

    def generate(self, word_count: int) -> str:
        return generate_passphrase(self.config, word_count, self.rng)

    def generate_many(self, count: int, word_count: int) -> List[str]:
        return [self.generate(word_count) for _ in range(count)]


__all__ = [
    "DictionaryConfig",
    "DictionaryGenerator",
    "build_dictionary_generator",
    "generate_passphrase",
]
