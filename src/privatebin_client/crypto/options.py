"""Encryption option defaults and builders."""

from __future__ import annotations

from dataclasses import replace

from ..constants import DEFAULT_ITERATIONS, DEFAULT_KEY_SIZE, DEFAULT_TAG_SIZE
from ..types import CipherMode, Compression, EncryptionOptions, EncryptionRequest
from .constants import SECRET_SIZE
from .utils import RandomSource, random_bytes


def default_encryption_options(random_source: RandomSource | None = None) -> EncryptionOptions:
    """Return the recommended options with a fresh random secret.

    AES-256-GCM, 128-bit tag, 100000 PBKDF2 iterations, no compression.
    """
    return EncryptionOptions(
        secret=random_bytes(SECRET_SIZE, random_source),
        mode=CipherMode.GCM,
        key_size=DEFAULT_KEY_SIZE,
        tag_size=DEFAULT_TAG_SIZE,
        iterations=DEFAULT_ITERATIONS,
        compression=Compression.NONE,
    )


def resolve_encryption_options(
    request: EncryptionRequest | None = None,
    random_source: RandomSource | None = None,
) -> EncryptionOptions:
    """Merge requested options over the defaults.

    Fields left as None in ``request`` keep their default. A random secret is
    drawn only when the request does not carry one.

    Args:
        request: Partially specified options.
        random_source: Source for the default secret.

    Returns:
        Fully resolved, validated EncryptionOptions.

    Raises:
        ConfigurationError: If a requested value is invalid.
    """
    request = request or EncryptionRequest()
    if request.secret is not None:
        defaults = EncryptionOptions(secret=request.secret)
    else:
        defaults = default_encryption_options(random_source)

    overrides = {
        name: value
        for name, value in (
            ("mode", request.mode),
            ("key_size", request.key_size),
            ("tag_size", request.tag_size),
            ("iterations", request.iterations),
            ("compression", request.compression),
        )
        if value is not None
    }
    return replace(defaults, **overrides)


class EncryptionBuilder:
    """Fluent builder for EncryptionOptions.

    Every setter returns the builder itself. Each ``build_options()`` call
    returns a new immutable EncryptionOptions; without ``use_key`` every call
    draws a new random secret. Not safe for concurrent mutation.

    Example:
        ```python
        options = (
            EncryptionBuilder()
            .enable_compression()
            .use_key("0123456789abcdef0123456789abcdef")
            .build_options()
        )
        ```
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._request = EncryptionRequest()
        self._random_source = random_source

    def set_key_size(self, key_size: int) -> EncryptionBuilder:
        self._request.key_size = key_size
        return self

    def set_tag_size(self, tag_size: int) -> EncryptionBuilder:
        self._request.tag_size = tag_size
        return self

    def set_iterations(self, iterations: int) -> EncryptionBuilder:
        self._request.iterations = iterations
        return self

    def enable_compression(self, enable: bool = True) -> EncryptionBuilder:
        self._request.compression = Compression.ZLIB if enable else Compression.NONE
        return self

    def use_key(self, key: str | bytes) -> EncryptionBuilder:
        """Use a fixed paste secret. Text is encoded as UTF-8.

        The derived key has the secret's length, so the encoded secret must be
        ``key_size // 8`` bytes long (32 bytes for the default 256-bit key).
        """
        if isinstance(key, str):
            self._request.secret = key.encode("utf-8")
        else:
            self._request.secret = bytes(key)
        return self

    def build_options(self) -> EncryptionOptions:
        """Return the defaults merged with everything set so far."""
        return resolve_encryption_options(replace(self._request), self._random_source)
