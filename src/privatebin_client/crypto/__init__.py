"""Cryptographic operations for the PrivateBin client."""

from .adata import build_adata, serialize_adata
from .constants import IV_SIZE, SALT_SIZE, SECRET_SIZE
from .encryption import encrypt_message, validate_cipher_suite
from .kdf import derive_key, derive_key_sync
from .options import EncryptionBuilder, default_encryption_options, resolve_encryption_options
from .utils import RandomSource, from_base58, from_base64, random_bytes, to_base58, to_base64

__all__ = [
    "IV_SIZE",
    "SALT_SIZE",
    "SECRET_SIZE",
    "EncryptionBuilder",
    "RandomSource",
    "build_adata",
    "default_encryption_options",
    "derive_key",
    "derive_key_sync",
    "encrypt_message",
    "from_base58",
    "from_base64",
    "random_bytes",
    "resolve_encryption_options",
    "serialize_adata",
    "to_base58",
    "to_base64",
    "validate_cipher_suite",
]
