"""Type definitions for the PrivateBin client."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .constants import (
    CIPHER_ALGORITHM,
    DEFAULT_EXPIRY,
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_SIZE,
    DEFAULT_TAG_SIZE,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_UPLOAD_FORMAT,
    KEY_SIZES,
    TAG_SIZES,
)
from .errors import ConfigurationError


class CipherMode(str, Enum):
    """Block cipher modes the paste format can name."""

    CTR = "ctr"
    CBC = "cbc"
    GCM = "gcm"


class Compression(str, Enum):
    """Compression applied to the message before encryption."""

    NONE = "none"
    ZLIB = "zlib"


class PasteFormat(str, Enum):
    """How the server renders the paste."""

    PLAINTEXT = "plaintext"
    SYNTAX_HIGHLIGHTING = "syntaxhighlighting"
    MARKDOWN = "markdown"


class Expiry(str, Enum):
    """Paste lifetime after creation."""

    FIVE_MINUTES = "5min"
    TEN_MINUTES = "10min"
    ONE_HOUR = "1hour"
    ONE_DAY = "1day"
    ONE_WEEK = "1week"
    ONE_MONTH = "1month"
    ONE_YEAR = "1year"
    NEVER = "never"


def _coerce_enum(enum_type: type[Enum], value: Any, name: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise ConfigurationError(f"Invalid {name} {value!r}, expected one of: {allowed}") from e


@dataclass
class ClientConfig:
    """Configuration for PrivateBinClient.

    Attributes:
        base_url: Normalized root URL of the PrivateBin server.
        timeout: HTTP request timeout in milliseconds.
    """

    base_url: str
    timeout: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True)
class EncryptionOptions:
    """Fully resolved encryption options for one upload.

    Every field is populated; use ``resolve_encryption_options`` or
    ``EncryptionBuilder`` to fill in defaults.

    Attributes:
        secret: The paste key. It is base58-encoded into the URL fragment.
        mode: Cipher mode. Only GCM can encrypt a paste.
        key_size: Key size in bits.
        tag_size: Authentication tag size in bits.
        iterations: PBKDF2 iteration count.
        compression: Compression applied before encryption.
        algorithm: Cipher algorithm, always ``"aes"``.
    """

    secret: bytes
    mode: CipherMode = CipherMode.GCM
    key_size: int = DEFAULT_KEY_SIZE
    tag_size: int = DEFAULT_TAG_SIZE
    iterations: int = DEFAULT_ITERATIONS
    compression: Compression = Compression.NONE
    algorithm: str = CIPHER_ALGORITHM

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (bytes, bytearray)):
            raise ConfigurationError("Secret must be bytes")
        if self.algorithm != CIPHER_ALGORITHM:
            raise ConfigurationError(
                f"Unsupported algorithm {self.algorithm!r}, only 'aes' exists"
            )
        object.__setattr__(self, "secret", bytes(self.secret))
        object.__setattr__(self, "mode", _coerce_enum(CipherMode, self.mode, "cipher mode"))
        object.__setattr__(
            self, "compression", _coerce_enum(Compression, self.compression, "compression")
        )
        if isinstance(self.key_size, bool) or not isinstance(self.key_size, int):
            raise ConfigurationError(f"Key size must be an integer, got {self.key_size!r}")
        if self.key_size not in KEY_SIZES:
            raise ConfigurationError(
                f"Invalid key size {self.key_size!r}, expected one of {KEY_SIZES}"
            )
        if isinstance(self.tag_size, bool) or not isinstance(self.tag_size, int):
            raise ConfigurationError(f"Tag size must be an integer, got {self.tag_size!r}")
        if self.tag_size not in TAG_SIZES:
            raise ConfigurationError(
                f"Invalid tag size {self.tag_size!r}, expected one of {TAG_SIZES}"
            )
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise ConfigurationError(f"Iterations must be an integer, got {self.iterations!r}")
        if self.iterations <= 0:
            raise ConfigurationError(
                f"Iterations must be a positive integer, got {self.iterations!r}"
            )


@dataclass
class EncryptionRequest:
    """Partially specified encryption options.

    ``None`` means "use the default" for that field.
    """

    secret: bytes | None = None
    mode: CipherMode | None = None
    key_size: int | None = None
    tag_size: int | None = None
    iterations: int | None = None
    compression: Compression | None = None


@dataclass(frozen=True)
class EncryptionParams:
    """Per-call cipher inputs. Never reused across uploads.

    Attributes:
        iv: 16 random bytes.
        salt: 8 random bytes.
        key: The PBKDF2-derived key.
    """

    iv: bytes
    salt: bytes
    key: bytes = field(repr=False)


@dataclass(frozen=True)
class EncryptedPaste:
    """Output of the encryption engine.

    Attributes:
        adata: The associated data structure, sent as-is in the envelope.
        cipher_text: Ciphertext followed by the authentication tag.
    """

    adata: list[Any]
    cipher_text: bytes


@dataclass
class UploadOptions:
    """Options for the uploaded paste.

    Attributes:
        expiry: Expiration time after creation.
        burn_after_reading: Delete the paste after it is first read.
        open_discussion: Allow comments on the paste.
        upload_format: Server-side rendering of the paste.
    """

    expiry: Expiry = Expiry(DEFAULT_EXPIRY)
    burn_after_reading: bool = False
    open_discussion: bool = False
    upload_format: PasteFormat = PasteFormat(DEFAULT_UPLOAD_FORMAT)

    def __post_init__(self) -> None:
        self.expiry = _coerce_enum(Expiry, self.expiry, "expiry")
        self.upload_format = _coerce_enum(PasteFormat, self.upload_format, "upload format")


@dataclass
class UploadResponse:
    """The decoded response from the PrivateBin API.

    Attributes:
        status: 0 on success, 1 on a server-side error.
        id: The paste ID.
        url: Paste path relative to the server root, e.g. ``/?abc``.
        delete_token: Token for deleting the paste.
        message: Error message when ``status`` is not 0.
    """

    status: int
    id: str | None = None
    url: str | None = None
    delete_token: str | None = None
    message: str | None = None


@dataclass
class UploadResult:
    """The result of an upload to a PrivateBin server.

    Attributes:
        success: Whether the server accepted the paste.
        url: The complete URL of the paste, without the key.
        url_key: The base58-encoded paste key for the URL fragment.
        response: The decoded server response.
        raw_response: The unmodified JSON body from the server.
    """

    success: bool
    url: str
    url_key: str
    response: UploadResponse
    raw_response: dict[str, Any] = field(default_factory=dict)
