"""Options and result models for the Personality Insights v3 API."""
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "ContentType",
    "ContentLanguage",
    "AcceptLanguage",
    "ContentItem",
    "Content",
    "ProfileOptions",
    "Trait",
    "Behavior",
    "ConsumptionPreferences",
    "ConsumptionPreferencesCategory",
    "ProfileWarning",
    "Profile",
]


class ContentType:
    APPLICATION_JSON = "application/json"
    TEXT_HTML = "text/html"
    TEXT_PLAIN = "text/plain"


class ContentLanguage:
    AR = "ar"
    EN = "en"
    ES = "es"
    JA = "ja"
    KO = "ko"


class AcceptLanguage:
    AR = "ar"
    DE = "de"
    EN = "en"
    ES = "es"
    FR = "fr"
    IT = "it"
    JA = "ja"
    KO = "ko"
    PT_BR = "pt-br"
    ZH_CN = "zh-cn"
    ZH_TW = "zh-tw"


# ────────────────────── Input content ──────────────────────────
class ContentItem(BaseModel):
    """One piece of authored text (a tweet, post, email ...)."""

    model_config = ConfigDict(frozen=True)

    content: str
    id: Optional[str] = None
    created: Optional[int] = Field(None, description="Epoch milliseconds")
    updated: Optional[int] = Field(None, description="Epoch milliseconds")
    contenttype: Optional[str] = Field(None, description="text/plain or text/html")
    language: Optional[str] = None
    parentid: Optional[str] = None
    reply: Optional[bool] = None
    forward: Optional[bool] = None


class Content(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_items: List[ContentItem] = Field(..., alias="contentItems")


class ProfileOptions(BaseModel):
    """Options for ``profile`` and ``profile_as_csv``.

    Give either ``content`` (sent as JSON) or ``body`` (plain text or HTML,
    sent as-is). ``content_type`` defaults to ``application/json`` when
    ``content`` is set and to ``text/plain`` otherwise.
    """

    model_config = ConfigDict(frozen=True)

    content: Optional[Content] = None
    body: Optional[Union[str, bytes]] = None
    content_type: str = ContentType.TEXT_PLAIN
    content_language: Optional[str] = None
    accept_language: Optional[str] = None
    raw_scores: Optional[bool] = None
    consumption_preferences: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def _default_content_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("content_type") is None:
            data = dict(data)
            if data.get("content") is not None:
                data["content_type"] = ContentType.APPLICATION_JSON
            else:
                data["content_type"] = ContentType.TEXT_PLAIN
        return data


# ────────────────────── Results ────────────────────────────────
class _Result(BaseModel):
    model_config = ConfigDict(extra="allow")


class Trait(_Result):
    trait_id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = Field(None, description="personality, needs or values")
    percentile: Optional[float] = None
    raw_score: Optional[float] = None
    significant: Optional[bool] = None
    children: Optional[List[Trait]] = None


class Behavior(_Result):
    trait_id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    percentage: Optional[float] = None


class ConsumptionPreferences(_Result):
    consumption_preference_id: Optional[str] = None
    name: Optional[str] = None
    score: Optional[float] = None


class ConsumptionPreferencesCategory(_Result):
    consumption_preference_category_id: Optional[str] = None
    name: Optional[str] = None
    consumption_preferences: Optional[List[ConsumptionPreferences]] = None


class ProfileWarning(_Result):
    warning_id: Optional[str] = None
    message: Optional[str] = None


class Profile(_Result):
    processed_language: Optional[str] = None
    word_count: Optional[int] = None
    word_count_message: Optional[str] = None
    personality: List[Trait] = Field(default_factory=list)
    needs: List[Trait] = Field(default_factory=list)
    values: List[Trait] = Field(default_factory=list)
    behavior: Optional[List[Behavior]] = None
    consumption_preferences: Optional[List[ConsumptionPreferencesCategory]] = None
    warnings: List[ProfileWarning] = Field(default_factory=list)
