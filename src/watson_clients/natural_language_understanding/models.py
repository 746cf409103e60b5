"""Options and result models for the Natural Language Understanding v1 API."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CategoriesOptions",
    "ConceptsOptions",
    "EmotionOptions",
    "EntitiesOptions",
    "KeywordsOptions",
    "MetadataOptions",
    "RelationsOptions",
    "SemanticRolesOptions",
    "SentimentOptions",
    "Features",
    "AnalyzeOptions",
    "DeleteModelOptions",
    "ListModelsOptions",
    "Usage",
    "CategoriesResult",
    "ConceptsResult",
    "EntitiesResult",
    "KeywordsResult",
    "DocumentSentimentResults",
    "SentimentResult",
    "AnalysisResults",
    "Model",
    "ListModelsResults",
]


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())


class _Result(BaseModel):
    # unknown response keys are kept
    model_config = ConfigDict(extra="allow", protected_namespaces=())


# ────────────────────── Feature options ────────────────────────
class CategoriesOptions(_Options):
    limit: Optional[int] = Field(None, ge=1, description="Maximum number of categories to return")


class ConceptsOptions(_Options):
    limit: Optional[int] = Field(None, ge=1, le=50)


class EmotionOptions(_Options):
    document: Optional[bool] = Field(None, description="Document-level emotion results")
    targets: Optional[List[str]] = Field(None, description="Target strings to score")


class EntitiesOptions(_Options):
    limit: Optional[int] = Field(None, ge=1, le=250)
    mentions: Optional[bool] = None
    model: Optional[str] = Field(None, description="Custom model id")
    sentiment: Optional[bool] = None
    emotion: Optional[bool] = None


class KeywordsOptions(_Options):
    limit: Optional[int] = Field(None, ge=1, le=250)
    sentiment: Optional[bool] = None
    emotion: Optional[bool] = None


class MetadataOptions(_Options):
    """Metadata takes no options; presence alone enables the feature."""


class RelationsOptions(_Options):
    model: Optional[str] = Field(None, description="Custom model id")


class SemanticRolesOptions(_Options):
    limit: Optional[int] = Field(None, ge=1)
    keywords: Optional[bool] = None
    entities: Optional[bool] = None


class SentimentOptions(_Options):
    document: Optional[bool] = None
    targets: Optional[List[str]] = None


class Features(_Options):
    """Analysis features to run. Unset features are left out of the request."""

    categories: Optional[CategoriesOptions] = None
    concepts: Optional[ConceptsOptions] = None
    emotion: Optional[EmotionOptions] = None
    entities: Optional[EntitiesOptions] = None
    keywords: Optional[KeywordsOptions] = None
    metadata: Optional[MetadataOptions] = None
    relations: Optional[RelationsOptions] = None
    semantic_roles: Optional[SemanticRolesOptions] = None
    sentiment: Optional[SentimentOptions] = None


# ────────────────────── Call options ───────────────────────────
class AnalyzeOptions(_Options):
    """Options for ``analyze``.

    ``text``, ``html`` and ``url`` are alternative content sources. They are
    not checked for mutual exclusion; every one that is set is sent and the
    service decides which wins.
    """

    text: Optional[str] = None
    html: Optional[str] = None
    url: Optional[str] = None
    features: Features = Field(..., description="Features to analyze")
    clean: Optional[bool] = Field(None, description="Remove ads and boilerplate from webpages")
    xpath: Optional[str] = Field(None, description="XPath query selecting webpage text")
    fallback_to_raw: Optional[bool] = None
    return_analyzed_text: Optional[bool] = None
    language: Optional[str] = Field(None, description="ISO 639-1 code overriding detection")
    limit_text_characters: Optional[int] = Field(None, ge=1)


class DeleteModelOptions(_Options):
    model_id: str = Field(..., description="Id of the custom model to delete")


class ListModelsOptions(_Options):
    """``list_models`` currently takes no parameters."""


# ────────────────────── Results ────────────────────────────────
class Usage(_Result):
    features: Optional[int] = None
    text_characters: Optional[int] = None
    text_units: Optional[int] = None


class CategoriesResult(_Result):
    label: Optional[str] = None
    score: Optional[float] = None


class ConceptsResult(_Result):
    text: Optional[str] = None
    relevance: Optional[float] = None
    dbpedia_resource: Optional[str] = None


class EntitiesResult(_Result):
    type: Optional[str] = None
    text: Optional[str] = None
    relevance: Optional[float] = None
    count: Optional[int] = None
    mentions: Optional[List[Dict[str, Any]]] = None
    emotion: Optional[Dict[str, Any]] = None
    sentiment: Optional[Dict[str, Any]] = None
    disambiguation: Optional[Dict[str, Any]] = None


class KeywordsResult(_Result):
    text: Optional[str] = None
    relevance: Optional[float] = None
    emotion: Optional[Dict[str, Any]] = None
    sentiment: Optional[Dict[str, Any]] = None


class DocumentSentimentResults(_Result):
    label: Optional[str] = None
    score: Optional[float] = None


class SentimentResult(_Result):
    document: Optional[DocumentSentimentResults] = None
    targets: Optional[List[Dict[str, Any]]] = None


class AnalysisResults(_Result):
    language: Optional[str] = None
    analyzed_text: Optional[str] = None
    retrieved_url: Optional[str] = None
    usage: Optional[Usage] = None
    concepts: Optional[List[ConceptsResult]] = None
    entities: Optional[List[EntitiesResult]] = None
    keywords: Optional[List[KeywordsResult]] = None
    categories: Optional[List[CategoriesResult]] = None
    emotion: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    relations: Optional[List[Dict[str, Any]]] = None
    semantic_roles: Optional[List[Dict[str, Any]]] = None
    sentiment: Optional[SentimentResult] = None


class Model(_Result):
    status: Optional[str] = None
    model_id: Optional[str] = None
    language: Optional[str] = None
    description: Optional[str] = None
    workspace_id: Optional[str] = None
    version: Optional[str] = None
    version_description: Optional[str] = None
    created: Optional[datetime] = None


class ListModelsResults(_Result):
    models: List[Model] = Field(default_factory=list)
