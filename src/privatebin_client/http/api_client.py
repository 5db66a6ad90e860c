"""HTTP API client for PrivateBin servers."""

from __future__ import annotations

import json
import logging
from typing import Any, cast

import httpx

from ..constants import (
    PASTE_FORMAT_VERSION,
    REQUESTED_WITH_HEADER,
    REQUESTED_WITH_VALUE,
    SUCCESS_STATUS_CODES,
)
from ..crypto.utils import to_base64
from ..errors import InvalidResponseError, NetworkError, TimeoutError, UploadError
from ..types import ClientConfig, EncryptedPaste, Expiry, UploadResponse

logger = logging.getLogger("privatebin_client")


def build_paste_envelope(encrypted: EncryptedPaste, expiry: Expiry) -> dict[str, Any]:
    """Build the v2 JSON body for creating a paste.

    Args:
        encrypted: The encrypted paste.
        expiry: Paste lifetime.

    Returns:
        The request body.
    """
    return {
        "v": PASTE_FORMAT_VERSION,
        "ct": to_base64(encrypted.cipher_text),
        "adata": encrypted.adata,
        "meta": {"expire": expiry.value},
    }


def parse_upload_response(data: Any) -> UploadResponse:
    """Decode the JSON body of a paste creation response.

    Args:
        data: The decoded JSON body.

    Returns:
        UploadResponse with the paste ID, URL and delete token.

    Raises:
        InvalidResponseError: If the body has no integer ``status``.
    """
    if not isinstance(data, dict) or not isinstance(data.get("status"), int):
        raise InvalidResponseError(f"Unexpected paste response: {data!r}")
    return UploadResponse(
        status=data["status"],
        id=data.get("id"),
        url=data.get("url"),
        # PrivateBin sends "deletetoken"; some compatible servers use camelCase
        delete_token=data.get("deletetoken", data.get("deleteToken")),
        message=data.get("message"),
    )


class ApiClient:
    """HTTP client for the PrivateBin JSON API.

    Requests are never retried; a failed upload is reported to the caller.

    Attributes:
        config: Client configuration.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the API client.

        Args:
            config: Client configuration with the server URL and timeout.
        """
        self.config = config
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    "Content-Type": "application/json",
                    REQUESTED_WITH_HEADER: REQUESTED_WITH_VALUE,
                },
                timeout=httpx.Timeout(self.config.timeout / 1000),
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make a single HTTP request.

        Args:
            method: HTTP method.
            path: Path relative to the server root.
            json: JSON body for the request.

        Returns:
            The HTTP response, whatever its status.

        Raises:
            TimeoutError: If the request times out.
            NetworkError: If there's a network communication failure.
        """
        client = await self._get_client()
        try:
            return await client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e

    def _error_message(self, response: httpx.Response) -> str:
        try:
            data = response.json()
            return cast(str, data.get("message", response.text))
        except (ValueError, json.JSONDecodeError, AttributeError):
            return response.text or f"HTTP {response.status_code}"

    async def create_paste(
        self, encrypted: EncryptedPaste, expiry: Expiry
    ) -> tuple[UploadResponse, dict[str, Any]]:
        """Post an encrypted paste to the server root.

        Args:
            encrypted: The encrypted paste.
            expiry: Paste lifetime.

        Returns:
            The decoded response and the raw JSON body.

        Raises:
            UploadError: If the server answers with a status other than 200/201.
            InvalidResponseError: If the body is not a paste response.
            NetworkError: If there's a network communication failure.
            TimeoutError: If the request times out.
        """
        body = build_paste_envelope(encrypted, expiry)
        response = await self._request("POST", "/", json=body)
        logger.debug("Paste upload answered with HTTP %d", response.status_code)

        if response.status_code not in SUCCESS_STATUS_CODES:
            raise UploadError(response.status_code, self._error_message(response))

        try:
            data = response.json()
        except (ValueError, json.JSONDecodeError) as e:
            raise InvalidResponseError(f"Paste response is not JSON: {e}") from e
        return parse_upload_response(data), data
