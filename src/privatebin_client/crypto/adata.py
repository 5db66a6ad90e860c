"""Associated data ("adata") for v2 pastes."""

from __future__ import annotations

import json
from typing import Any

from ..types import EncryptionOptions, EncryptionParams, UploadOptions
from .utils import to_base64


def build_adata(
    params: EncryptionParams,
    options: EncryptionOptions,
    upload_options: UploadOptions,
) -> list[Any]:
    """Build the adata structure bound to the ciphertext.

    The server stores this list verbatim and the reader authenticates it, so
    element order and types must not change::

        [[iv, salt, iterations, key_size, tag_size, "aes", mode, compression],
         format, burn_after_reading, open_discussion]

    Args:
        params: The per-call IV and salt.
        options: Resolved encryption options.
        upload_options: Paste options.

    Returns:
        The adata list.
    """
    cipher_params = [
        to_base64(params.iv),
        to_base64(params.salt),
        options.iterations,
        options.key_size,
        options.tag_size,
        options.algorithm,
        options.mode.value,
        options.compression.value,
    ]
    return [
        cipher_params,
        upload_options.upload_format.value,
        1 if upload_options.burn_after_reading else 0,
        1 if upload_options.open_discussion else 0,
    ]


def serialize_adata(adata: list[Any]) -> bytes:
    """Serialize adata to the compact JSON bytes used as AAD."""
    return json.dumps(adata, separators=(",", ":")).encode("utf-8")
