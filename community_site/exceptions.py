from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """Raised when a collection cannot be fetched or its body cannot be read."""


class TransportError(FetchError):
    """Raised when the API cannot be reached (connection refused, timeout)."""


class ResponseError(FetchError):
    """Raised when the API answers with a non-success status code."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(FetchError):
    """Raised when a response body or document does not have the expected shape."""


class StoreError(Exception):
    """Raised when the document store fails to read or write."""
