#!/usr/bin/env python3
"""
Error Types
===========
Exceptions raised by the password and passphrase generators.

    PassgenError
    ├── InvalidConfig           (also a ValueError)
    ├── RandomSourceFailure
    └── InsufficientRandomData
"""


class PassgenError(Exception):
    """Base class for all passgen errors."""


class InvalidConfig(PassgenError, ValueError):
    """Caller-supplied parameters are structurally invalid."""


class RandomSourceFailure(PassgenError):
    """The entropy source could not supply the requested bytes."""


class InsufficientRandomData(PassgenError):
    """The decode loop could not fill the requested output length."""

    def __init__(self, produced: int, requested: int):
        self.produced = produced
        self.requested = requested
        super().__init__(
            f"Didn't generate enough random data: {produced} of {requested} characters"
        )


__all__ = [
    "PassgenError",
    "InvalidConfig",
    "RandomSourceFailure",
    "InsufficientRandomData",
]
