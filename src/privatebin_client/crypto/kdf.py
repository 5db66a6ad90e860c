"""PBKDF2 key derivation for the PrivateBin client."""

from __future__ import annotations

import asyncio
import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..errors import ConfigurationError, DerivationError
from .constants import SECRET_SIZE
from .utils import RandomSource, random_bytes

logger = logging.getLogger("privatebin_client")


def derive_key_sync(secret: bytes, salt: bytes, iterations: int) -> bytes:
    """Derive a key with PBKDF2-HMAC-SHA256, blocking the caller.

    The derived key has the same length as ``secret``.

    Args:
        secret: The paste secret.
        salt: The per-paste salt.
        iterations: PBKDF2 iteration count.

    Returns:
        The derived key bytes.

    Raises:
        ConfigurationError: If ``iterations`` is not positive.
        DerivationError: If the secret is empty or PBKDF2 rejects its inputs.
    """
    if iterations <= 0:
        raise ConfigurationError(f"Iterations must be positive, got {iterations}")
    if not secret:
        raise DerivationError("Cannot derive a zero-length key from an empty secret")

    try:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=len(secret),
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(secret)
    except (TypeError, ValueError) as e:
        raise DerivationError(f"Key derivation failed: {e}") from e


async def derive_key(
    secret: bytes | None,
    salt: bytes,
    iterations: int,
    *,
    random_source: RandomSource | None = None,
) -> bytes:
    """Derive the paste cipher key without blocking the event loop.

    A missing secret is replaced by fresh random bytes. The resulting key can
    then never be reproduced, so callers should always pass a secret.

    Args:
        secret: The paste secret, or None.
        salt: The per-paste salt.
        iterations: PBKDF2 iteration count.
        random_source: Source for the fallback secret.

    Returns:
        The derived key bytes.
    """
    if secret is None:
        logger.warning("No secret given for key derivation, using %d random bytes", SECRET_SIZE)
        secret = random_bytes(SECRET_SIZE, random_source)
    return await asyncio.to_thread(derive_key_sync, secret, salt, iterations)
