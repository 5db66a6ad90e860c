"""Error hierarchy for the PrivateBin client."""

from __future__ import annotations


class PrivateBinError(Exception):
    """Base exception for all PrivateBin client errors."""

    pass


class ConfigurationError(PrivateBinError):
    """Invalid or unsupported encryption configuration.

    Raised before any cryptographic operation starts, e.g. for a
    non-positive iteration count or a cipher mode that cannot produce an
    authentication tag.
    """

    pass


class RandomnessUnavailableError(PrivateBinError):
    """The secure random source failed to produce bytes."""

    pass


class DerivationError(PrivateBinError):
    """Key derivation rejected its inputs."""

    pass


class ApiError(PrivateBinError):
    """HTTP API error with status code.

    Attributes:
        status_code: The HTTP status code.
        message: The error message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error ({status_code}): {message}")


class UploadError(ApiError):
    """The server did not accept the paste (status other than 200/201)."""

    def __init__(self, status_code: int, message: str = "Upload failed!") -> None:
        super().__init__(status_code, message)


class InvalidResponseError(PrivateBinError):
    """The server answered with a body that is not a paste response."""

    pass


class NetworkError(PrivateBinError):
    """Network communication failure."""

    pass


class TimeoutError(PrivateBinError):
    """Request timeout."""

    pass
