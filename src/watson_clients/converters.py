"""watson_clients.converters

Response converters: turn a successful `requests.Response` into the result
type declared by the client method (typed model, raw text or nothing).
"""
from __future__ import annotations

from typing import Callable, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .errors import DeserializationError
from .http import HttpHeaders

__all__ = ["ResponseConverter", "get_object", "get_string", "get_void"]

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

ResponseConverter = Callable[[requests.Response], T]


def get_object(model: Type[M]) -> ResponseConverter[M]:
    """Converter that parses the JSON body into *model*."""

    def convert(response: requests.Response) -> M:
        try:
            data = response.json()
        except ValueError as e:
            raise DeserializationError(
                f"Response body is not valid JSON for {model.__name__}", response.text
            ) from e
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DeserializationError(
                f"Response body does not match {model.__name__}: {e.error_count()} error(s)",
                response.text,
            ) from e

    return convert


def get_string() -> ResponseConverter[str]:
    """Converter returning the body as text, UTF-8 unless a charset is declared."""

    def convert(response: requests.Response) -> str:
        content_type = response.headers.get(HttpHeaders.CONTENT_TYPE, "")
        if "charset=" not in content_type.lower():
            # requests falls back to ISO-8859-1 for text/* without a charset
            response.encoding = "utf-8"
        return response.text

    return convert


def get_void() -> ResponseConverter[None]:
    def convert(response: requests.Response) -> None:
        return None

    return convert
