"""Encoding and randomness helpers for the PrivateBin client."""

from __future__ import annotations

import base64
import os
from collections.abc import Callable

import base58

from ..errors import RandomnessUnavailableError

# Returns the requested number of cryptographically secure random bytes
RandomSource = Callable[[int], bytes]


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    """Decode standard base64 string to bytes.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.
    """
    return base64.b64decode(s)


def to_base58(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet.

    PrivateBin carries the paste key in the URL fragment in this form.

    Args:
        data: The bytes to encode.

    Returns:
        The base58 string.
    """
    return base58.b58encode(data).decode("ascii")


def from_base58(s: str) -> bytes:
    """Decode a base58 string to bytes."""
    return base58.b58decode(s)


def random_bytes(size: int, random_source: RandomSource | None = None) -> bytes:
    """Draw ``size`` bytes from the random source.

    Args:
        size: Number of bytes.
        random_source: Source to draw from. Defaults to ``os.urandom``.

    Returns:
        Exactly ``size`` random bytes.

    Raises:
        RandomnessUnavailableError: If the source fails or returns a short read.
    """
    source = random_source or os.urandom
    try:
        data = source(size)
    except (OSError, NotImplementedError) as e:
        raise RandomnessUnavailableError(f"Secure random source failed: {e}") from e
    if len(data) != size:
        raise RandomnessUnavailableError(
            f"Random source returned {len(data)} bytes, expected {size}"
        )
    return bytes(data)
