"""Shared fixtures for passgen tests."""

import io
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passgen.generators.entropy import StreamRandomSource, UniformRandomSource
from passgen.settings import load_app_config


def words_to_bytes(*words: int) -> bytes:
    """Pack unsigned 32-bit values big-endian, the way the decoder reads them."""
    return b''.join(w.to_bytes(4, 'big') for w in words)


class ConstantSource(UniformRandomSource):
    """Endless source returning the same byte."""

    def __init__(self, byte: int = 0xFF):
        self.byte = byte
        self.calls = 0

    def fill_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes([self.byte]) * n


@pytest.fixture
def stream_rng():
    """Factory for a random source replaying the given bytes."""
    def make(data: bytes) -> StreamRandomSource:
        return StreamRandomSource(io.BytesIO(data))
    return make


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload app config for every test."""
    load_app_config.cache_clear()
    yield
    load_app_config.cache_clear()
