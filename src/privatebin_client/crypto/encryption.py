"""AES-GCM paste encryption for the PrivateBin client."""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..errors import ConfigurationError
from ..types import CipherMode, EncryptedPaste, EncryptionOptions, EncryptionParams, UploadOptions
from .adata import build_adata, serialize_adata
from .constants import AES_KEY_SIZES, IV_SIZE, SALT_SIZE
from .kdf import derive_key
from .utils import RandomSource, random_bytes

logger = logging.getLogger("privatebin_client")


def validate_cipher_suite(options: EncryptionOptions) -> None:
    """Check that the options describe a cipher this client can run.

    The paste format names ctr and cbc, but the envelope always carries an
    authentication tag over the adata, which only GCM produces. The derived
    key has the secret's length, so the secret must match the key size.

    Args:
        options: Resolved encryption options.

    Raises:
        ConfigurationError: If the mode, key size or secret length is unusable.
    """
    if options.mode is not CipherMode.GCM:
        raise ConfigurationError(
            f"Cipher mode {options.mode.value!r} is not supported, only 'gcm' is authenticated"
        )
    if options.key_size not in AES_KEY_SIZES:
        raise ConfigurationError(f"AES does not support {options.key_size}-bit keys")
    if len(options.secret) * 8 != options.key_size:
        raise ConfigurationError(
            f"Secret is {len(options.secret) * 8} bits but key size is {options.key_size} bits"
        )


async def encrypt_message(
    message: bytes,
    options: EncryptionOptions,
    upload_options: UploadOptions,
    *,
    random_source: RandomSource | None = None,
) -> EncryptedPaste:
    """Encrypt a serialized paste.

    A fresh IV and salt are drawn for every call. The adata is bound to the
    cipher before any plaintext is processed, and the returned ciphertext has
    the authentication tag, truncated to ``options.tag_size`` bits, appended.

    Args:
        message: Serialized (and possibly compressed) paste bytes.
        options: Resolved encryption options.
        upload_options: Paste options, part of the adata.
        random_source: Source for IV and salt. Defaults to ``os.urandom``.

    Returns:
        EncryptedPaste with the adata list and ``ciphertext || tag``.

    Raises:
        ConfigurationError: If the options do not describe a usable cipher.
        RandomnessUnavailableError: If the random source fails.
        DerivationError: If key derivation fails.
    """
    validate_cipher_suite(options)

    iv = random_bytes(IV_SIZE, random_source)
    salt = random_bytes(SALT_SIZE, random_source)
    key = await derive_key(options.secret, salt, options.iterations, random_source=random_source)
    params = EncryptionParams(iv=iv, salt=salt, key=key)

    adata = build_adata(params, options, upload_options)

    encryptor = Cipher(algorithms.AES(params.key), modes.GCM(params.iv)).encryptor()
    encryptor.authenticate_additional_data(serialize_adata(adata))
    cipher_text = encryptor.update(message) + encryptor.finalize()
    tag = encryptor.tag[: options.tag_size // 8]

    logger.debug(
        "Encrypted %d bytes with aes-%d-%s", len(message), options.key_size, options.mode.value
    )
    return EncryptedPaste(adata=adata, cipher_text=cipher_text + tag)
