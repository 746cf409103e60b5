"""watson_clients.utils

Utility helpers shared across the watson_clients package.
"""
from __future__ import annotations

import re
from typing import Any, Optional, Sequence
from urllib.parse import quote

from .errors import InvalidArgumentError

__all__ = [
    "construct_http_url",
    "stringify",
    "media_type",
    "is_json_media_type",
    "not_null",
    "is_true",
]


_slash_re = re.compile(r"^/+|/+$")
_param_re = re.compile(r";.*$")


def _strip_slashes(segment: str) -> str:
    return _slash_re.sub("", segment)


def construct_http_url(
    endpoint: str,
    path_segments: Sequence[str],
    path_parameters: Optional[Sequence[str]] = None,
) -> str:
    """Join *endpoint* and path segments, interleaving path parameters.

    Segment ``i`` is followed by parameter ``i`` when one is given, so
    ``(["v1/models"], ["abc123"])`` yields ``v1/models/abc123``. Parameters
    are URL-path encoded; literal segments are used as written.
    """
    parts = [endpoint.rstrip("/")]
    params = list(path_parameters or [])
    for i, segment in enumerate(path_segments):
        parts.append(_strip_slashes(segment))
        if i < len(params):
            parts.append(quote(str(params[i]), safe=""))
    return "/".join(p for p in parts if p)


def stringify(value: Any) -> str:
    """Render a query/header value the way the service expects (``true``/``false``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def media_type(content_type: str) -> str:
    """Lower-cased media type without parameters, e.g. ``text/plain``."""
    return _param_re.sub("", content_type).strip().lower()


def is_json_media_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and media_type(content_type) == "application/json"


def not_null(value: Any, message: str) -> None:
    """Raise :class:`InvalidArgumentError` when *value* is ``None`` or empty string."""
    if value is None or (isinstance(value, str) and not value):
        raise InvalidArgumentError(message)


def is_true(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidArgumentError(message)
