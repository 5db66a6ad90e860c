"""PrivateBin Python client.

Creates end-to-end encrypted pastes on PrivateBin servers. The paste is
encrypted locally with AES-GCM; the key never leaves the client except in the
URL fragment of the shareable link.

Example:
    ```python
    import asyncio
    from privatebin_client import PrivateBinClient, UploadOptions, get_paste_url

    async def main():
        async with PrivateBinClient("https://privatebin.net") as client:
            result = await client.upload_content(
                "Hello, World!",
                UploadOptions(expiry="1day", burn_after_reading=True),
            )
            print(get_paste_url(result))

    asyncio.run(main())
    ```
"""

from .client import PrivateBinClient, serialize_paste
from .constants import (
    DEFAULT_EXPIRY,
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_SIZE,
    DEFAULT_TAG_SIZE,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_UPLOAD_FORMAT,
)
from .crypto import (
    EncryptionBuilder,
    RandomSource,
    default_encryption_options,
    encrypt_message,
    resolve_encryption_options,
)
from .errors import (
    ApiError,
    ConfigurationError,
    DerivationError,
    InvalidResponseError,
    NetworkError,
    PrivateBinError,
    RandomnessUnavailableError,
    TimeoutError,
    UploadError,
)
from .types import (
    CipherMode,
    ClientConfig,
    Compression,
    EncryptedPaste,
    EncryptionOptions,
    EncryptionRequest,
    Expiry,
    PasteFormat,
    UploadOptions,
    UploadResponse,
    UploadResult,
)
from .utils import get_delete_url, get_paste_url, normalize_base_url

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "PrivateBinClient",
    "EncryptionBuilder",
    # Functions
    "default_encryption_options",
    "encrypt_message",
    "get_delete_url",
    "get_paste_url",
    "normalize_base_url",
    "resolve_encryption_options",
    "serialize_paste",
    # Constants
    "DEFAULT_EXPIRY",
    "DEFAULT_ITERATIONS",
    "DEFAULT_KEY_SIZE",
    "DEFAULT_TAG_SIZE",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_UPLOAD_FORMAT",
    # Configuration
    "ClientConfig",
    "EncryptionOptions",
    "EncryptionRequest",
    "RandomSource",
    "UploadOptions",
    # Enums
    "CipherMode",
    "Compression",
    "Expiry",
    "PasteFormat",
    # Data types
    "EncryptedPaste",
    "UploadResponse",
    "UploadResult",
    # Errors
    "PrivateBinError",
    "ApiError",
    "UploadError",
    "ConfigurationError",
    "DerivationError",
    "InvalidResponseError",
    "NetworkError",
    "RandomnessUnavailableError",
    "TimeoutError",
    # Version
    "__version__",
]
