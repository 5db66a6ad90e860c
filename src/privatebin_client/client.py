"""PrivateBinClient - Main entry point for the PrivateBin client."""

from __future__ import annotations

import json
import logging
import zlib
from typing import Any

from .constants import DEFAULT_TIMEOUT_MS
from .crypto import EncryptionBuilder, RandomSource, encrypt_message, to_base58
from .http import ApiClient
from .types import (
    ClientConfig,
    Compression,
    EncryptionOptions,
    UploadOptions,
    UploadResult,
)
from .utils import get_delete_url, normalize_base_url

logger = logging.getLogger("privatebin_client")


def serialize_paste(content: str, compression: Compression) -> bytes:
    """Serialize paste text into the bytes that get encrypted.

    The text is wrapped as ``{"paste": content}`` and, for zlib compression,
    raw-DEFLATE compressed (no zlib header), which is what PrivateBin readers
    inflate.

    Args:
        content: The paste text.
        compression: Compression to apply.

    Returns:
        The message bytes.
    """
    message = json.dumps({"paste": content}, separators=(",", ":"), ensure_ascii=False)
    data = message.encode("utf-8")
    if compression is Compression.ZLIB:
        compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
        return compressor.compress(data) + compressor.flush()
    return data


class PrivateBinClient:
    """Client for uploading encrypted pastes to a PrivateBin server.

    Example:
        ```python
        async with PrivateBinClient("privatebin.net") as client:
            result = await client.upload_content("hello", UploadOptions(expiry="1day"))
            print(get_paste_url(result))
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: int = DEFAULT_TIMEOUT_MS,
        random_source: RandomSource | None = None,
    ) -> None:
        """Initialize the PrivateBin client.

        Args:
            base_url: Root address of the server, e.g. ``https://privatebin.net``.
                The scheme is forced to https and trailing slashes are removed.
            timeout: HTTP request timeout in milliseconds.
            random_source: Source for secrets, IVs and salts. Defaults to ``os.urandom``.
        """
        self._config = ClientConfig(base_url=normalize_base_url(base_url), timeout=timeout)
        self._random_source = random_source
        self._api_client = ApiClient(self._config)

    @property
    def base_url(self) -> str:
        """The normalized server root URL."""
        return self._config.base_url

    async def __aenter__(self) -> PrivateBinClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        await self._api_client.close()

    async def upload_content(
        self,
        content: str,
        options: UploadOptions | None = None,
        encryption_options: EncryptionOptions | None = None,
    ) -> UploadResult:
        """Upload text as an encrypted paste.

        Args:
            content: The paste contents.
            options: Paste options. Defaults to ``UploadOptions()``.
            encryption_options: Encryption options. Defaults to the recommended
                options with compression enabled and a random secret.

        Returns:
            UploadResult with the paste URL and the encoded key.

        Raises:
            ConfigurationError: If the encryption options are unusable.
            UploadError: If the server answers with a status other than 200/201.
            NetworkError: If there's a network communication failure.
        """
        opts = options or UploadOptions()
        encryption_opts = encryption_options or (
            EncryptionBuilder(self._random_source).enable_compression(True).build_options()
        )

        message = serialize_paste(content, encryption_opts.compression)
        encrypted = await encrypt_message(
            message, encryption_opts, opts, random_source=self._random_source
        )
        response, raw = await self._api_client.create_paste(encrypted, opts.expiry)

        success = response.status == 0
        if not success:
            logger.warning("Server rejected paste: %s", response.message)

        return UploadResult(
            success=success,
            url=f"{self._config.base_url}{response.url or ''}",
            url_key=to_base58(encryption_opts.secret),
            response=response,
            raw_response=raw,
        )

    def get_delete_url(self, result: UploadResult) -> str | None:
        """Return the link that deletes an uploaded paste, if the server sent a token."""
        return get_delete_url(self._config.base_url, result)
