"""
core/errors.py
--------------

Exception hierarchy raised by the client.  Every failure is surfaced to
the caller unmodified; the client never retries on its own.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BalikobotError(Exception):
    """Base class for all client errors.

    Attributes
    ----------
    status_code: HTTP or embedded status code that triggered the error.
    response: raw decoded response body, kept for diagnostics.
    """

    default_message = "Carrier gateway request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        response: Any = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"


class TransportError(BalikobotError):
    default_message = "Carrier gateway is unreachable"


class MalformedResponseError(BalikobotError):
    default_message = "Carrier gateway response is missing a required field"


class EmptyResponseError(BalikobotError):
    default_message = "Carrier gateway returned no item"


class CarrierRejectedError(BalikobotError):
    """Embedded (or HTTP) status other than 200.

    ``errors`` maps the index of every rejected item of a batch response
    to its own status code.
    """

    default_message = "Carrier gateway rejected the request"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        response: Any = None,
        status_text: Optional[str] = None,
        errors: Optional[Dict[int, Any]] = None,
    ) -> None:
        super().__init__(message or status_text, status_code=status_code, response=response)
        self.status_text = status_text
        self.errors = errors or {}


class InvalidArgumentError(BalikobotError, ValueError):
    default_message = "Invalid argument"
