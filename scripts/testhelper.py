#!/usr/bin/env python3
"""Testhelper CLI for PrivateBin client interoperability testing."""

import asyncio
import json
import os
import sys

from privatebin_client import (
    Compression,
    EncryptionBuilder,
    PrivateBinClient,
    UploadOptions,
    encrypt_message,
    get_paste_url,
    serialize_paste,
)
from privatebin_client.crypto import to_base58
from privatebin_client.http import build_paste_envelope


def read_upload_options() -> UploadOptions:
    """Build upload options from PRIVATEBIN_* environment variables."""
    return UploadOptions(
        expiry=os.environ.get("PRIVATEBIN_EXPIRY", "1week"),
        burn_after_reading=os.environ.get("PRIVATEBIN_BURN") == "1",
        open_discussion=os.environ.get("PRIVATEBIN_DISCUSSION") == "1",
        upload_format=os.environ.get("PRIVATEBIN_FORMAT", "markdown"),
    )


async def encrypt(content: str) -> None:
    """Encrypt stdin without uploading and output the envelope and key JSON."""
    options = EncryptionBuilder().enable_compression(True).build_options()
    upload_options = read_upload_options()
    message = serialize_paste(content, Compression.ZLIB)
    encrypted = await encrypt_message(message, options, upload_options)
    output = {
        "envelope": build_paste_envelope(encrypted, upload_options.expiry),
        "key": to_base58(options.secret),
    }
    print(json.dumps(output))


async def upload(content: str) -> None:
    """Upload stdin as a paste and output the result JSON."""
    async with PrivateBinClient(os.environ["PRIVATEBIN_URL"]) as client:
        result = await client.upload_content(content, read_upload_options())
        output = {
            "success": result.success,
            "url": get_paste_url(result),
            "id": result.response.id,
            "deleteUrl": client.get_delete_url(result),
        }
    print(json.dumps(output))


async def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <encrypt|upload> < content", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]
    content = sys.stdin.read()

    if command == "encrypt":
        await encrypt(content)
    elif command == "upload":
        await upload(content)
    else:
        print(f"unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
