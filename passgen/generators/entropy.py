#!/usr/bin/env python3
"""
Entropy Sources
===============
Uniformly distributed random bytes and integers for the generators.

Both generators depend only on the UniformRandomSource contract:

- fill_bytes(n)       -> n cryptographically secure random bytes
- uniform_int(n)      -> integer uniform over [0, n), rejection sampled

Implementations:
- SystemRandomSource  - os.urandom() (kernel CSPRNG), safe to share across threads
- StreamRandomSource  - any binary file-like object (/dev/urandom, test buffers)

Usage:
    from passgen.generators.entropy import get_rng

    rng = get_rng()
    index = rng.uniform_int(7776)
"""

import os
import threading
from abc import ABC, abstractmethod
from typing import BinaryIO

from ..errors import InvalidConfig, RandomSourceFailure
from ..settings import get_setting

DEFAULT_MAX_CONSECUTIVE_REJECTIONS = 1000


def max_consecutive_rejections() -> int:
    """Rejected draws in a row before a source is declared broken."""
    return int(get_setting('sampling.max_consecutive_rejections', DEFAULT_MAX_CONSECUTIVE_REJECTIONS))


# =============================================================================
# Contract
# =============================================================================

class UniformRandomSource(ABC):
    """
    Source of uniformly distributed random data.

    Subclasses supply fill_bytes(); uniform_int() is built on top of it with
    rejection sampling, so it stays unbiased when below_n is not a power of two.
    Implementations shared between threads must make fill_bytes() thread-safe.
    """

    @abstractmethod
    def fill_bytes(self, n: int) -> bytes:
        """Return n random bytes. Raises RandomSourceFailure on entropy failure."""

    def uniform_int(self, below_n: int) -> int:
        """Return an integer uniformly distributed over [0, below_n)."""
        if below_n < 1:
            raise InvalidConfig(f"Upper bound must be at least 1, got {below_n}")
        if below_n == 1:
            return 0

        bits = (below_n - 1).bit_length()
        nbytes = (bits + 7) // 8
        mask = (1 << bits) - 1
        limit = max_consecutive_rejections()

        for _ in range(limit + 1):
            data = self.fill_bytes(nbytes)
            if len(data) != nbytes:
                raise RandomSourceFailure(
                    f"Unable to generate random index: got {len(data)} of {nbytes} bytes"
                )
            value = int.from_bytes(data, 'big') & mask
            # Masking keeps the rejection probability below one half
            if value < below_n:
                return value

        raise RandomSourceFailure(
            f"Random source rejected {limit + 1} consecutive draws below {below_n}; source is not uniform"
        )


# =============================================================================
# Implementations
# =============================================================================

class SystemRandomSource(UniformRandomSource):
    """Operating system CSPRNG via os.urandom()."""

    def fill_bytes(self, n: int) -> bytes:
        try:
            return os.urandom(n)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceFailure(f"Unable to read system entropy: {e}") from e


class StreamRandomSource(UniformRandomSource):
    """
    Random bytes read from a binary stream.

    A short read is returned as-is so callers can tell an exhausted stream
    from a failing one. Reads are serialized with a lock.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: str) -> "StreamRandomSource":
        """Open a device or file (e.g. /dev/urandom) as a random source."""
        try:
            return cls(open(path, 'rb'))
        except OSError as e:
            raise RandomSourceFailure(f"Unable to open random source {path}: {e}") from e

    def fill_bytes(self, n: int) -> bytes:
        with self._lock:
            try:
                data = self._stream.read(n)
            except (OSError, ValueError) as e:
                raise RandomSourceFailure(f"Unable to read random stream: {e}") from e
        return data or b''

    def close(self) -> None:
        self._stream.close()


# Global instance
_system_random = SystemRandomSource()


def get_rng() -> UniformRandomSource:
    """Get the process-wide system random source."""
    return _system_random


__all__ = [
    "UniformRandomSource",
    "SystemRandomSource",
    "StreamRandomSource",
    "get_rng",
    "max_consecutive_rejections",
]
