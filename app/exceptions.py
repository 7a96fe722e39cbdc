from typing import Any, Mapping, Optional


class ChipotleLoaderError(Exception):
    """Base class for every failure the loader reports.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (url, status code, body)
        code: optional machine-readable error code
    """

    def __init__(self, message: str = "Loader failure", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class ApiError(ChipotleLoaderError):
    """Raised when a call to the remote food-service API fails."""


class ApiRequestError(ApiError):
    """Raised when a request cannot be sent or returns a non-success status.

    details carries url, and status_code/body when a response was received.
    """

    def __init__(self, message: str = "API request failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = "api_request"):
        super().__init__(message, details, code)

    @property
    def status_code(self) -> Optional[int]:
        return (self.details or {}).get("status_code")


class ApiDecodeError(ApiError):
    """Raised when a response body is not the JSON document we expect."""

    def __init__(self, message: str = "Failed to decode response", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = "api_decode"):
        super().__init__(message, details, code)


class PersistenceError(ChipotleLoaderError):
    """Raised when the destination store rejects a write or a schema change.

    Always fatal for the run.
    """

    def __init__(self, message: str = "Persistence failure", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = "persistence"):
        super().__init__(message, details, code)
