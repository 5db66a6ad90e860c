"""Utility functions for the PrivateBin client."""

from .urls import get_delete_url, get_paste_url, normalize_base_url

__all__ = ["get_delete_url", "get_paste_url", "normalize_base_url"]
