"""watson_clients.errors

Exception hierarchy shared by both service clients.
"""
from __future__ import annotations

from typing import Dict, Optional, Type

import requests

__all__ = [
    "WatsonClientError",
    "InvalidArgumentError",
    "TransportError",
    "DeserializationError",
    "ServiceResponseError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RequestTooLargeError",
    "UnsupportedMediaTypeError",
    "TooManyRequestsError",
    "InternalServerError",
    "ServiceUnavailableError",
    "error_for_response",
]


class WatsonClientError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(WatsonClientError, ValueError):
    """A required argument or options field is missing or empty."""


class TransportError(WatsonClientError):
    """The request never produced an HTTP response (connection, timeout)."""


class DeserializationError(WatsonClientError):
    """The response body does not match the declared result type."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class ServiceResponseError(WatsonClientError):
    """The service answered with an error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response: Optional[requests.Response] = None,
    ):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.response = response


class BadRequestError(ServiceResponseError):
    pass


class UnauthorizedError(ServiceResponseError):
    pass


class ForbiddenError(ServiceResponseError):
    pass


class NotFoundError(ServiceResponseError):
    pass


class ConflictError(ServiceResponseError):
    pass


class RequestTooLargeError(ServiceResponseError):
    pass


class UnsupportedMediaTypeError(ServiceResponseError):
    pass


class TooManyRequestsError(ServiceResponseError):
    pass


class InternalServerError(ServiceResponseError):
    pass


class ServiceUnavailableError(ServiceResponseError):
    pass


_STATUS_ERRORS: Dict[int, Type[ServiceResponseError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    413: RequestTooLargeError,
    415: UnsupportedMediaTypeError,
    429: TooManyRequestsError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}

_MESSAGE_KEYS = ("error", "message", "errorMessage")


def _error_message(response: requests.Response) -> str:
    try:
        js = response.json()
    except ValueError:
        js = None
    if isinstance(js, dict):
        for key in _MESSAGE_KEYS:
            value = js.get(key)
            if isinstance(value, str) and value:
                return value
            # some endpoints nest {"error": {"message": ...}}
            if isinstance(value, dict) and isinstance(value.get("message"), str):
                return value["message"]
    return response.text or response.reason or "Unknown error"


def error_for_response(response: requests.Response) -> ServiceResponseError:
    """Build the exception matching an error response's status code."""
    cls = _STATUS_ERRORS.get(response.status_code, ServiceResponseError)
    return cls(response.status_code, _error_message(response), response)
