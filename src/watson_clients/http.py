"""watson_clients.http

Request building: media types, header names and the `RequestBuilder` used by
every client method to assemble one outbound `requests.Request`.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple, Union

import requests
from pydantic import BaseModel

from .utils import stringify

__all__ = ["HttpMediaType", "HttpHeaders", "RequestBuilder"]


class HttpMediaType:
    APPLICATION_JSON = "application/json"
    TEXT_CSV = "text/csv"
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"


class HttpHeaders:
    ACCEPT = "Accept"
    ACCEPT_LANGUAGE = "Accept-Language"
    AUTHORIZATION = "Authorization"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_TYPE = "Content-Type"
    USER_AGENT = "User-Agent"


class RequestBuilder:
    """Accumulates method, URL, query, headers and body for a single call.

    Optional values are skipped rather than sent empty: ``query("x", None)``
    and ``header("X", None)`` are no-ops.

    Example::

        builder = RequestBuilder.post(url)
        builder.query("version", "2018-03-16")
        builder.body_json({"text": "hello"})
        request = builder.build()
    """

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        self._query: List[Tuple[str, str]] = []
        self._headers: Dict[str, str] = {}
        self._body: Optional[bytes] = None

    # ------------------------------------------------------------------
    # constructors
    # ------------------------------------------------------------------
    @classmethod
    def get(cls, url: str) -> "RequestBuilder":
        return cls("GET", url)

    @classmethod
    def post(cls, url: str) -> "RequestBuilder":
        return cls("POST", url)

    @classmethod
    def put(cls, url: str) -> "RequestBuilder":
        return cls("PUT", url)

    @classmethod
    def delete(cls, url: str) -> "RequestBuilder":
        return cls("DELETE", url)

    # ------------------------------------------------------------------
    def query(self, name: str, value: Any) -> "RequestBuilder":
        if value is not None:
            self._query.append((name, stringify(value)))
        return self

    def header(self, name: str, value: Any) -> "RequestBuilder":
        if value is not None:
            self._headers[name] = stringify(value)
        return self

    def body_json(self, obj: Union[BaseModel, Dict[str, Any]]) -> "RequestBuilder":
        if isinstance(obj, BaseModel):
            obj = obj.model_dump(mode="json", by_alias=True, exclude_none=True)
        self._body = json.dumps(obj).encode("utf-8")
        self._headers[HttpHeaders.CONTENT_TYPE] = HttpMediaType.APPLICATION_JSON
        return self

    def body_content(self, content: Union[str, bytes], content_type: str) -> "RequestBuilder":
        self._body = content.encode("utf-8") if isinstance(content, str) else content
        self._headers[HttpHeaders.CONTENT_TYPE] = content_type
        return self

    def build(self) -> requests.Request:
        """Return the assembled request.

        No ``Accept`` header is added here; the transport defaults it to JSON
        when neither the call nor the client's default headers set one.
        """
        return requests.Request(
            method=self.method,
            url=self.url,
            params=list(self._query),
            headers=dict(self._headers),
            data=self._body,
        )
