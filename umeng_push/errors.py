"""Exceptions raised by the Umeng push client."""

from typing import Any, Optional


class UmengError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(f"umeng: {message}")


class PayloadValidationError(UmengError, ValueError):
    """The request cannot be built as given. Raised before anything is signed or sent."""


class ConfigurationError(UmengError):
    """App key or master secret missing for the requested platform."""


class TransportError(UmengError):
    """The request did not get a usable answer from the service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(UmengError):
    """The service answered 200 but the body is not a response envelope."""


class APIError(UmengError):
    """The service parsed the request and reported a failure."""

    def __init__(self, message: str, code: str = "", data: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.data = data or {}
