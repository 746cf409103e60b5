"""watson_clients.service

Pieces shared by every service client, composed rather than inherited:

* `ServiceConfig` holds endpoint, version date and credentials.
* `HttpTransport` injects authentication and sends one request through a
  `requests.Session`, mapping error statuses to exceptions.
* `ServiceCall` is the deferred handle returned by client methods.
"""
from __future__ import annotations

import abc
import asyncio
import logging
import threading
from typing import Callable, Dict, Generic, Optional, Sequence, TypeVar

import requests
from requests.auth import AuthBase, HTTPBasicAuth
from requests.structures import CaseInsensitiveDict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import __version__
from .config import resolve_endpoint
from .errors import InvalidArgumentError, TransportError, error_for_response
from .http import HttpHeaders, HttpMediaType, RequestBuilder
from .utils import construct_http_url, is_true, not_null

__all__ = [
    "IamOptions",
    "ServiceConfig",
    "BearerAuth",
    "HttpTransport",
    "ServiceCall",
    "ServiceCallback",
    "create_service_config",
    "service_request",
]

logger = logging.getLogger(__name__)

USER_AGENT = f"watson-clients-python/{__version__}"
VERSION = "version"

T = TypeVar("T")


class IamOptions(BaseModel):
    """Bearer-token credentials.

    The token is used as given. Refreshing it before expiry is the caller's
    job (see `ServiceConfig.set_access_token`); an expired token surfaces as
    an `UnauthorizedError` on the next call.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(..., description="IAM access token sent as a bearer token")
    api_key: Optional[str] = Field(None, description="API key the token was issued for")
    url: Optional[str] = Field(None, description="Token service URL")

    @field_validator("access_token")
    @classmethod
    def _token_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("access_token cannot be empty")
        return v


class ServiceConfig(BaseModel):
    """Endpoint, version date and credentials of one client instance."""

    model_config = ConfigDict(validate_assignment=True)

    service_name: str
    endpoint: str
    version: str
    username: Optional[str] = None
    password: Optional[str] = Field(None, repr=False)
    iam_options: Optional[IamOptions] = Field(None, repr=False)
    default_headers: Dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = Field(None, description="Seconds; None uses the transport default")

    def set_endpoint(self, url: str) -> None:
        not_null(url, "endpoint cannot be empty")
        self.endpoint = url

    # The new credential is stored before the old kind is cleared, so a
    # concurrent call always finds one complete set to authenticate with.
    def set_username_and_password(self, username: str, password: str) -> None:
        not_null(username, "username cannot be empty")
        not_null(password, "password cannot be empty")
        self.username = username
        self.password = password
        self.iam_options = None

    def set_iam_credentials(self, iam_options: IamOptions) -> None:
        not_null(iam_options, "iam_options cannot be null")
        self.iam_options = iam_options
        self.username = None
        self.password = None

    def set_access_token(self, access_token: str) -> None:
        """Rotate the bearer token, keeping any other IAM settings."""
        not_null(access_token, "access_token cannot be empty")
        if self.iam_options is None:
            self.set_iam_credentials(IamOptions(access_token=access_token))
        else:
            self.set_iam_credentials(self.iam_options.model_copy(update={"access_token": access_token}))

    def set_default_headers(self, headers: Optional[Dict[str, str]]) -> None:
        self.default_headers = dict(headers or {})


def create_service_config(
    service_name: str,
    default_url: str,
    version: str,
    username: Optional[str] = None,
    password: Optional[str] = None,
    iam_options: Optional[IamOptions] = None,
    url: Optional[str] = None,
) -> ServiceConfig:
    """Validate constructor arguments shared by the clients and build a config."""
    is_true(isinstance(version, str) and bool(version), "version cannot be null.")
    if iam_options is not None and (username is not None or password is not None):
        raise InvalidArgumentError("use either username/password or iam_options, not both")
    config = ServiceConfig(
        service_name=service_name,
        endpoint=resolve_endpoint(service_name, default_url, url),
        version=version,
    )
    if username is not None or password is not None:
        config.set_username_and_password(username, password)
    elif iam_options is not None:
        config.set_iam_credentials(iam_options)
    return config


def service_request(
    config: ServiceConfig,
    method: str,
    path_segments: Sequence[str],
    path_parameters: Optional[Sequence[str]] = None,
) -> RequestBuilder:
    """Start a request against the configured endpoint with the version date attached."""
    url = construct_http_url(config.endpoint, path_segments, path_parameters)
    return RequestBuilder(method, url).query(VERSION, config.version)


class BearerAuth(AuthBase):
    """Attaches ``Authorization: Bearer <token>``.

    Passed as the request's ``auth`` so the session does not substitute
    credentials from ``~/.netrc``.
    """

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers[HttpHeaders.AUTHORIZATION] = f"Bearer {self.token}"
        return r


class HttpTransport:
    """Sends built requests through a `requests.Session`.

    No retries and no caching: one `send` is one HTTP exchange.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session if session is not None else requests.Session()

    def _authorize(self, request: requests.Request, config: ServiceConfig) -> requests.Request:
        headers = CaseInsensitiveDict({HttpHeaders.USER_AGENT: USER_AGENT})
        headers.update(config.default_headers)
        headers.update(request.headers)
        headers.setdefault(HttpHeaders.ACCEPT, HttpMediaType.APPLICATION_JSON)
        # read once so a concurrent credential switch cannot mix old and new
        iam_options, username, password = config.iam_options, config.username, config.password
        auth: Optional[AuthBase] = None
        if iam_options is not None:
            auth = BearerAuth(iam_options.access_token)
        elif username is not None:
            auth = HTTPBasicAuth(username, password)
        # fresh Request so a ServiceCall can be executed more than once
        return requests.Request(
            method=request.method,
            url=request.url,
            params=request.params,
            headers=headers,
            data=request.data,
            auth=auth,
        )

    def send(self, request: requests.Request, config: ServiceConfig) -> requests.Response:
        prepared = self.session.prepare_request(self._authorize(request, config))
        logger.debug("%s %s", prepared.method, prepared.url)
        try:
            response = self.session.send(prepared, timeout=config.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{prepared.method} {prepared.url} failed: {e}") from e
        if response.status_code >= 400:
            logger.warning(
                "%s %s returned %s", prepared.method, prepared.url, response.status_code
            )
            raise error_for_response(response)
        return response


class ServiceCallback(abc.ABC, Generic[T]):
    """Receives the outcome of `ServiceCall.enqueue`."""

    @abc.abstractmethod
    def on_response(self, result: T) -> None:
        ...

    @abc.abstractmethod
    def on_failure(self, error: Exception) -> None:
        ...


class ServiceCall(Generic[T]):
    """Deferred result of a client method.

    Nothing is sent until `execute`, `execute_async` or `enqueue` is called.
    """

    def __init__(
        self,
        transport: HttpTransport,
        config: ServiceConfig,
        request: requests.Request,
        converter: Callable[[requests.Response], T],
    ):
        self._transport = transport
        self._config = config
        self._request = request
        self._converter = converter

    @property
    def request(self) -> requests.Request:
        return self._request

    def execute(self) -> T:
        """Send the request and block until the converted result is available."""
        response = self._transport.send(self._request, self._config)
        return self._converter(response)

    async def execute_async(self) -> T:
        return await asyncio.to_thread(self.execute)

    def enqueue(self, callback: ServiceCallback[T]) -> threading.Thread:
        """Run the call on a daemon thread and report through *callback*."""

        def _run() -> None:
            try:
                result = self.execute()
            except Exception as e:
                callback.on_failure(e)
                return
            callback.on_response(result)

        thread = threading.Thread(target=_run, name=f"{self._config.service_name}-call", daemon=True)
        thread.start()
        return thread

    def __repr__(self) -> str:
        return f"<ServiceCall {self._request.method} {self._request.url}>"

