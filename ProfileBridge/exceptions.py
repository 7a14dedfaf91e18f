from __future__ import annotations

import socket
from typing import Optional

import requests

__all__ = [
    "RemoteServiceError",
    "HTTP_ERRORS",
    "TIMEOUT_ERRORS",
    "NETWORK_ERRORS",
    "DECODE_ERRORS",
    "PARSE_ERRORS",
    "ALL_API_ERRORS",
    "NUMERIC_ERRORS",
]


class RemoteServiceError(requests.exceptions.HTTPError):
    """
    Raised when the identity service answers with a non-success status. Carries
    the numeric status, the reason phrase, and the requested URL so callers can
    tell a missing record (404) from an expired token (401) without parsing
    the message.
    """

    def __init__(
        self,
        status: int,
        status_text: str = "",
        url: str = "",
        response: Optional[requests.Response] = None,
    ):
        self.status = status
        self.status_text = status_text or ""
        self.url = url or ""
        message = f"ORCID API error: {status} {self.status_text}".rstrip()
        if self.url:
            message = f"{message} ({self.url})"
        super().__init__(message, response=response)


# errors raised by requests when an HTTP request fails, including non-success
# statuses classified as RemoteServiceError
HTTP_ERRORS = (RemoteServiceError, requests.exceptions.RequestException)

# errors that signal an operation has taken too long at the OS or socket level
TIMEOUT_ERRORS = (TimeoutError, socket.timeout)

# umbrella group for network-related failures
NETWORK_ERRORS = HTTP_ERRORS + TIMEOUT_ERRORS

# errors that occur when converting response bytes into text
DECODE_ERRORS = (UnicodeDecodeError, UnicodeError)

# errors raised while interpreting structured data such as JSON or record fields
PARSE_ERRORS = (ValueError, TypeError, KeyError)

# everything the fetch path can raise before or while decoding a response
ALL_API_ERRORS = NETWORK_ERRORS + DECODE_ERRORS + PARSE_ERRORS

# numeric conversion errors raised while parsing years and put-codes
NUMERIC_ERRORS = (TypeError, ValueError, OverflowError)
