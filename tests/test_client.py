"""Tests for PrivateBinClient."""

from __future__ import annotations

import hashlib
import json
import zlib
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from privatebin_client import (
    DEFAULT_TIMEOUT_MS,
    Compression,
    EncryptionBuilder,
    EncryptionOptions,
    Expiry,
    PrivateBinClient,
    UploadError,
    UploadOptions,
    UploadResponse,
    UploadResult,
    get_paste_url,
    serialize_paste,
)
from privatebin_client.crypto import from_base64, serialize_adata, to_base58

SECRET = b"0123456789abcdef0123456789abcdef"


def mock_server(
    client: PrivateBinClient, status_code: int, body: Any = None
) -> list[dict[str, Any]]:
    """Answer every request with a canned response and record the posted bodies."""
    posted: list[dict[str, Any]] = []

    async def mock_request(method: str, path: str, **kwargs: Any) -> httpx.Response:
        posted.append(kwargs["json"])
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    mock_client = MagicMock()
    mock_client.is_closed = False
    mock_client.request = mock_request
    client._api_client._client = mock_client
    return posted


def open_envelope(envelope: dict[str, Any], secret: bytes) -> dict[str, Any]:
    """Decrypt a posted envelope the way a PrivateBin reader does."""
    adata = envelope["adata"]
    cipher_params = adata[0]
    iv = from_base64(cipher_params[0])
    salt = from_base64(cipher_params[1])
    tag_length = cipher_params[4] // 8
    key = hashlib.pbkdf2_hmac("sha256", secret, salt, cipher_params[2], dklen=len(secret))

    data = from_base64(envelope["ct"])
    decryptor = Cipher(
        algorithms.AES(key), modes.GCM(iv, data[-tag_length:], min_tag_length=tag_length)
    ).decryptor()
    decryptor.authenticate_additional_data(serialize_adata(adata))
    plaintext = decryptor.update(data[:-tag_length]) + decryptor.finalize()

    if cipher_params[7] == "zlib":
        plaintext = zlib.decompress(plaintext, -zlib.MAX_WBITS)
    return json.loads(plaintext)


@pytest.fixture
def client() -> PrivateBinClient:
    """Create a client for a test server."""
    return PrivateBinClient("https://paste.example.com")


@pytest.fixture
def fast_options() -> EncryptionOptions:
    """Options with a fixed secret and few iterations."""
    return EncryptionBuilder().use_key(SECRET).set_iterations(1000).build_options()


class TestPrivateBinClientInit:
    """Tests for PrivateBinClient initialization."""

    def test_default_configuration(self) -> None:
        """Test client initializes with default configuration values."""
        client = PrivateBinClient("https://paste.example.com")
        assert client.base_url == "https://paste.example.com"
        assert client._config.timeout == DEFAULT_TIMEOUT_MS

    def test_custom_timeout(self) -> None:
        """Test custom timeout is stored in the configuration."""
        client = PrivateBinClient("paste.example.com", timeout=1000)
        assert client._config.timeout == 1000

    @pytest.mark.parametrize(
        "base_url",
        [
            "paste.example.com",
            "paste.example.com/",
            "http://paste.example.com",
            "https://paste.example.com///",
        ],
    )
    def test_base_url_normalized(self, base_url: str) -> None:
        """Scheme is forced to https and trailing slashes are removed."""
        assert PrivateBinClient(base_url).base_url == "https://paste.example.com"

    @pytest.mark.asyncio
    async def test_context_manager_closes(self) -> None:
        """Leaving the context closes the HTTP client."""
        client = PrivateBinClient("paste.example.com")
        client._api_client.close = AsyncMock()  # type: ignore[method-assign]
        async with client as entered:
            assert entered is client
        client._api_client.close.assert_awaited_once()


class TestSerializePaste:
    """Tests for serialize_paste."""

    def test_uncompressed(self) -> None:
        """Content is wrapped as compact JSON."""
        assert serialize_paste("hi", Compression.NONE) == b'{"paste":"hi"}'

    def test_unicode_kept_as_utf8(self) -> None:
        """Non-ASCII text is encoded as UTF-8, not escaped."""
        assert serialize_paste("é", Compression.NONE) == '{"paste":"é"}'.encode()

    def test_zlib_is_raw_deflate(self) -> None:
        """Compressed output has no zlib header and inflates back."""
        compressed = serialize_paste("hello " * 100, Compression.ZLIB)
        assert zlib.decompress(compressed, -zlib.MAX_WBITS) == serialize_paste(
            "hello " * 100, Compression.NONE
        )
        assert compressed != zlib.compress(serialize_paste("hello " * 100, Compression.NONE))


class TestUploadContent:
    """Tests for upload_content."""

    @pytest.mark.asyncio
    async def test_created_response(
        self, client: PrivateBinClient, fast_options: EncryptionOptions
    ) -> None:
        """A 201 with status 0 is a successful upload."""
        body = {"status": 0, "id": "abc", "url": "/?abc", "deletetoken": "tok"}
        mock_server(client, 201, body)

        result = await client.upload_content("Hello", UploadOptions(), fast_options)

        assert result.success is True
        assert result.url == "https://paste.example.com/?abc"
        assert result.url_key == to_base58(SECRET)
        assert result.response.id == "abc"
        assert result.response.delete_token == "tok"
        assert result.raw_response == body
        assert get_paste_url(result) == f"https://paste.example.com/?abc#{to_base58(SECRET)}"

    @pytest.mark.asyncio
    async def test_server_error_status(
        self, client: PrivateBinClient, fast_options: EncryptionOptions
    ) -> None:
        """A 500 response raises UploadError."""
        mock_server(client, 500)

        with pytest.raises(UploadError) as exc_info:
            await client.upload_content("Hello", UploadOptions(), fast_options)

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_rejected_by_server(
        self, client: PrivateBinClient, fast_options: EncryptionOptions
    ) -> None:
        """A 200 with a non-zero body status is reported as unsuccessful."""
        mock_server(client, 200, {"status": 1, "message": "Invalid data."})

        result = await client.upload_content("Hello", UploadOptions(), fast_options)

        assert result.success is False
        assert result.response.message == "Invalid data."
        assert result.url == "https://paste.example.com"

    @pytest.mark.asyncio
    async def test_posted_paste_decrypts(
        self, client: PrivateBinClient, fast_options: EncryptionOptions
    ) -> None:
        """The posted envelope decrypts to the original content."""
        posted = mock_server(client, 200, {"status": 0, "id": "abc", "url": "/?abc"})
        options = UploadOptions(
            expiry=Expiry.ONE_DAY, burn_after_reading=True, upload_format="plaintext"
        )

        await client.upload_content("Secret notes ✓", options, fast_options)

        envelope = posted[0]
        assert envelope["v"] == 2
        assert envelope["meta"] == {"expire": "1day"}
        assert envelope["adata"][1:] == ["plaintext", 1, 0]
        assert open_envelope(envelope, SECRET) == {"paste": "Secret notes ✓"}

    @pytest.mark.asyncio
    async def test_default_options(self, client: PrivateBinClient) -> None:
        """Without options the paste is compressed, kept a week and rendered as markdown."""
        posted = mock_server(client, 201, {"status": 0, "id": "abc", "url": "/?abc"})

        result = await client.upload_content("# Title")

        envelope = posted[0]
        cipher_params = envelope["adata"][0]
        assert cipher_params[2:] == [100000, 256, 128, "aes", "gcm", "zlib"]
        assert envelope["adata"][1:] == ["markdown", 0, 0]
        assert envelope["meta"] == {"expire": "1week"}
        assert len(result.url_key) > 0

    @pytest.mark.asyncio
    async def test_random_secret_in_url_key(self, client: PrivateBinClient) -> None:
        """The random secret is recoverable from the URL key."""
        posted = mock_server(client, 201, {"status": 0, "id": "abc", "url": "/?abc"})
        options = EncryptionBuilder().set_iterations(1000).enable_compression().build_options()

        result = await client.upload_content("data", encryption_options=options)

        assert result.url_key == to_base58(options.secret)
        assert open_envelope(posted[0], options.secret) == {"paste": "data"}

    @pytest.mark.asyncio
    async def test_injected_random_source(self) -> None:
        """The client's random source supplies the secret, IV and salt."""
        client = PrivateBinClient("paste.example.com", random_source=lambda size: b"\x05" * size)
        posted = mock_server(client, 201, {"status": 0, "id": "abc", "url": "/?abc"})

        result = await client.upload_content("data")

        assert result.url_key == to_base58(b"\x05" * 32)
        assert from_base64(posted[0]["adata"][0][0]) == b"\x05" * 16
        assert from_base64(posted[0]["adata"][0][1]) == b"\x05" * 8

    def test_get_delete_url(self, client: PrivateBinClient) -> None:
        """The delete link is built from the paste ID and delete token."""
        result = UploadResult(
            success=True,
            url="https://paste.example.com/?abc",
            url_key="key",
            response=UploadResponse(status=0, id="abc", url="/?abc", delete_token="tok"),
        )
        assert (
            client.get_delete_url(result)
            == "https://paste.example.com/?pasteid=abc&deletetoken=tok"
        )
