"""URL helpers for the PrivateBin client."""

from __future__ import annotations

import re
from urllib.parse import quote

from ..types import UploadResult

_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def normalize_base_url(base_url: str) -> str:
    """Normalize a server address to an https root URL.

    A missing scheme or ``http://`` becomes ``https://`` and trailing slashes
    are removed.

    Args:
        base_url: Server address, e.g. ``privatebin.net`` or ``https://privatebin.net/``.

    Returns:
        The normalized root URL.

    Raises:
        ValueError: If the address is empty or uses a scheme other than http(s).
    """
    url = base_url.strip()
    if not url:
        raise ValueError("Base URL cannot be empty")
    if url.lower().startswith("http://"):
        url = "https://" + url[len("http://") :]
    elif not url.lower().startswith("https://"):
        if _SCHEME_PATTERN.match(url):
            raise ValueError(f"Unsupported URL scheme in {base_url!r}")
        url = "https://" + url
    return url.rstrip("/")


def get_paste_url(result: UploadResult) -> str:
    """Return the shareable link, key included, for an upload result."""
    return f"{result.url}#{result.url_key}"


def get_delete_url(base_url: str, result: UploadResult) -> str | None:
    """Return the link that deletes the paste.

    Args:
        base_url: The normalized server root URL.
        result: The upload result.

    Returns:
        The deletion link, or None if the server sent no delete token.
    """
    response = result.response
    if not response.id or not response.delete_token:
        return None
    paste_id = quote(response.id, safe="")
    token = quote(response.delete_token, safe="")
    return f"{base_url}/?pasteid={paste_id}&deletetoken={token}"
