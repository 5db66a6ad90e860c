"""HTTP client for the PrivateBin client."""

from .api_client import ApiClient, build_paste_envelope, parse_upload_response

__all__ = ["ApiClient", "build_paste_envelope", "parse_upload_response"]
