#!/usr/bin/env python3
"""
Alphabet Password Generator
===========================
Maps uniformly random 32-bit words onto a fixed-size character alphabet
without modulo bias.

Each accepted 32-bit draw is decoded into `chunk_width` symbols by repeated
division by the alphabet size, where `chunk_width` is the largest r with
alphabet_size**r <= 2**32 - 1. Draws at or above `bias_threshold` (the largest
multiple of alphabet_size**chunk_width not exceeding 2**32) are discarded, so
every emitted symbol is exactly uniform over the alphabet.

Usage:
    from passgen.generators.alphabet import build_alphabet_generator, generate_password

    digits = build_alphabet_generator('0', 10)
    pin = generate_password(digits, 4, 4)
    code = generate_password(digits, 14, 20)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union

from ..errors import InvalidConfig, InsufficientRandomData, RandomSourceFailure
from .entropy import UniformRandomSource, get_rng, max_consecutive_rejections

logger = logging.getLogger(__name__)

# Random source word: 4 big-endian bytes
WORD_BYTES = 4
WORD_MAX = 2 ** 32 - 1
WORD_RANGE = 2 ** 32

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


# =============================================================================
# Symbol Mappers
# =============================================================================

def check_code_range(start: str, count: int):
    """Raise InvalidConfig unless start .. start+count-1 are all encodable characters."""
    first = ord(start)
    last = first + count - 1
    if last > MAX_CODE_POINT:
        raise InvalidConfig(
            f"Alphabet of {count} symbols from U+{first:04X} runs past U+{MAX_CODE_POINT:X}"
        )
    if first <= SURROGATES[-1] and last >= SURROGATES[0]:
        raise InvalidConfig(
            f"Alphabet U+{first:04X}..U+{last:04X} overlaps the surrogate block"
        )


class SymbolMapper(ABC):
    """Maps an index in [0, alphabet_size) to an output character."""

    @abstractmethod
    def map_index(self, index: int) -> str:
        ...


@dataclass(frozen=True)
class LinearOffsetMapper(SymbolMapper):
    """Contiguous code point range starting at `start`."""
    start: str

    def map_index(self, index: int) -> str:
        return chr(ord(self.start) + index)


@dataclass(frozen=True)
class SegmentMapper(SymbolMapper):
    """
    Concatenation of contiguous code point ranges.

    Segments are (start_char, count) pairs laid end to end, e.g.
    [('0', 10), ('A', 26), ('a', 26)] for 0-9A-Za-z.
    """
    segments: Tuple[Tuple[str, int], ...]

    def __post_init__(self):
        object.__setattr__(self, 'segments', tuple((s, int(n)) for s, n in self.segments))
        if any(n < 1 for _, n in self.segments):
            raise InvalidConfig("Segment sizes must be positive")
        for start, count in self.segments:
            check_code_range(start, count)

    @property
    def size(self) -> int:
        return sum(n for _, n in self.segments)

    def map_index(self, index: int) -> str:
        for start, count in self.segments:
            if index < count:
                return chr(ord(start) + index)
            index -= count
        raise IndexError(f"Index out of range for {self.size}-symbol alphabet")


@dataclass(frozen=True)
class FunctionMapper(SymbolMapper):
    """Wraps a caller-supplied function(int) -> str."""
    func: Callable[[int], str]

    def map_index(self, index: int) -> str:
        symbol = self.func(index)
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidConfig(f"Symbol mapper returned {symbol!r} for index {index}; expected one character")
        return symbol


# =============================================================================
# Configuration
# =============================================================================

def chunk_width_for(alphabet_size: int) -> int:
    """Largest r such that alphabet_size**r fits in an unsigned 32-bit word."""
    rounds = 1
    while alphabet_size ** (rounds + 1) <= WORD_MAX:
        rounds += 1
    return rounds


def bias_threshold_for(alphabet_size: int, chunk_width: int) -> int:
    """Largest multiple of alphabet_size**chunk_width not exceeding 2**32."""
    span = alphabet_size ** chunk_width
    return (WORD_RANGE // span) * span


@dataclass(frozen=True)
class AlphabetConfig:
    """Immutable alphabet description with its derived decode parameters."""
    start_symbol: str
    alphabet_size: int
    symbol_mapper: SymbolMapper
    chunk_width: int = field(init=False)
    bias_threshold: int = field(init=False)

    def __post_init__(self):
        width = chunk_width_for(self.alphabet_size)
        object.__setattr__(self, 'chunk_width', width)
        object.__setattr__(self, 'bias_threshold', bias_threshold_for(self.alphabet_size, width))

    def map_index(self, index: int) -> str:
        return self.symbol_mapper.map_index(index)

    @property
    def alphabet(self) -> str:
        """Every symbol this configuration can emit, in index order."""
        return ''.join(self.map_index(i) for i in range(self.alphabet_size))


def build_alphabet_generator(
    start_symbol: str,
    alphabet_size: int,
    symbol_mapper: Union[SymbolMapper, Callable[[int], str], None] = None,
) -> AlphabetConfig:
    """
    Build an alphabet configuration.

    Args:
        start_symbol: First character of the alphabet when no mapper is given
        alphabet_size: Number of distinct symbols (2 .. 2**32 - 1)
        symbol_mapper: SymbolMapper or plain function(index) -> character

    Raises:
        InvalidConfig: If the alphabet is too small or too large, does not fit
            the mapper, or leaves the encodable code point range
    """
    if not isinstance(start_symbol, str) or len(start_symbol) != 1:
        raise InvalidConfig(f"Start symbol must be a single character, got {start_symbol!r}")
    if alphabet_size < 2:
        raise InvalidConfig(f"Alphabet size must be at least 2, got {alphabet_size}")
    if alphabet_size > WORD_MAX:
        raise InvalidConfig(f"Alphabet size must be below 2**32, got {alphabet_size}")

    if symbol_mapper is None:
        check_code_range(start_symbol, alphabet_size)
        symbol_mapper = LinearOffsetMapper(start_symbol)
    elif isinstance(symbol_mapper, LinearOffsetMapper):
        check_code_range(symbol_mapper.start, alphabet_size)
    elif isinstance(symbol_mapper, SegmentMapper) and symbol_mapper.size != alphabet_size:
        raise InvalidConfig(
            f"Segments cover {symbol_mapper.size} symbols, alphabet size is {alphabet_size}"
        )
    elif not isinstance(symbol_mapper, SymbolMapper):
        if not callable(symbol_mapper):
            raise InvalidConfig(f"Symbol mapper must be callable, got {type(symbol_mapper).__name__}")
        symbol_mapper = FunctionMapper(symbol_mapper)

    config = AlphabetConfig(start_symbol, alphabet_size, symbol_mapper)
    logger.debug(
        f"Alphabet of {alphabet_size} symbols: {config.chunk_width} per draw, "
        f"threshold {config.bias_threshold:#x}"
    )
    return config


# =============================================================================
# Generation
# =============================================================================

def generate_password(
    config: AlphabetConfig,
    min_length: int,
    max_length: int,
    rng: Optional[UniformRandomSource] = None,
) -> str:
    """
    Generate a password between min_length and max_length characters long.

    The length is drawn uniformly from [min_length, max_length]. Symbols are
    decoded chunk_width at a time from accepted 32-bit draws into a buffer
    sized to a whole number of chunks, then truncated to the drawn length.

    Raises:
        InvalidConfig: Negative or inverted length bounds
        RandomSourceFailure: The random source failed
        InsufficientRandomData: The random source ran dry before the buffer filled
    """
    if min_length < 0 or max_length < 0:
        raise InvalidConfig(f"Lengths must be non-negative, got {min_length}..{max_length}")
    if min_length > max_length:
        raise InvalidConfig(f"Minimum length {min_length} exceeds maximum length {max_length}")

    rng = rng or get_rng()

    length = min_length
    if min_length != max_length:
        length += rng.uniform_int(max_length - min_length + 1)
    if length == 0:
        return ''

    size = config.alphabet_size
    width = config.chunk_width
    threshold = config.bias_threshold
    mapper = config.symbol_mapper

    chunks = -(-length // width)
    buf = [''] * (chunks * width)
    offset = 0

    limit = max_consecutive_rejections()
    consecutive = 0
    rejected = 0

    while offset < length:
        src = rng.fill_bytes(WORD_BYTES)
        if len(src) != WORD_BYTES:
            raise InsufficientRandomData(offset, length)

        v = int.from_bytes(src, 'big')
        if v >= threshold:
            rejected += 1
            consecutive += 1
            if consecutive > limit:
                raise RandomSourceFailure(
                    f"Random source rejected {consecutive} consecutive draws; source is not uniform"
                )
            continue
        consecutive = 0

        # Most significant symbol first
        for i in range(width - 1, -1, -1):
            buf[offset + i] = mapper.map_index(v % size)
            v //= size
        offset += width

    if rejected:
        logger.debug(f"Rejected {rejected} biased draws for a {length}-character password")

    return ''.join(buf[:length])


class AlphabetGenerator:
    """
    Reusable password generator bound to one alphabet.

    Instances hold only immutable configuration and may be shared between
    threads when the random source is thread-safe.
    """

    def __init__(self, config: AlphabetConfig, rng: UniformRandomSource = None):
        self.config = config
        self.rng = rng

    @classmethod
    def build(cls, start_symbol: str, alphabet_size: int, symbol_mapper=None,
              rng: UniformRandomSource = None) -> "AlphabetGenerator":
        return cls(build_alphabet_generator(start_symbol, alphabet_size, symbol_mapper), rng)

    def generate(self, min_length: int, max_length: int) -> str:
        return generate_password(self.config, min_length, max_length, self.rng)

    def generate_many(self, count: int, min_length: int, max_length: int) -> list:
        return [self.generate(min_length, max_length) for _ in range(count)]


__all__ = [
    "SymbolMapper",
    "LinearOffsetMapper",
    "SegmentMapper",
    "FunctionMapper",
    "AlphabetConfig",
    "AlphabetGenerator",
    "build_alphabet_generator",
    "generate_password",
    "chunk_width_for",
    "bias_threshold_for",
    "check_code_range",
]
