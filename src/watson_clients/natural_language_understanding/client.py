"""watson_clients.natural_language_understanding.client

Client for the Natural Language Understanding v1 API: analyze text, HTML or a
public webpage, and manage the custom models linked to the service.
"""
from __future__ import annotations

from typing import Optional

import requests

from ..converters import get_object, get_void
from ..service import (
    HttpTransport,
    IamOptions,
    ServiceCall,
    ServiceConfig,
    create_service_config,
    service_request,
)
from ..utils import not_null
from .models import (
    AnalysisResults,
    AnalyzeOptions,
    DeleteModelOptions,
    ListModelsOptions,
    ListModelsResults,
)


class NaturalLanguageUnderstanding:
    """Analyze various features of text content at scale.

    Provide text, raw HTML, or a public URL and the service returns results
    for the requested features. HTML is cleaned before analysis by default.

    Example::

        nlu = NaturalLanguageUnderstanding("2018-03-16", username="u", password="p")
        options = AnalyzeOptions(text="hello", features=Features(keywords=KeywordsOptions()))
        results = nlu.analyze(options).execute()
    """

    SERVICE_NAME = "natural_language_understanding"
    DEFAULT_URL = "https://gateway.watsonplatform.net/natural-language-understanding/api"

    def __init__(
        self,
        version: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        iam_options: Optional[IamOptions] = None,
        url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config: ServiceConfig = create_service_config(
            self.SERVICE_NAME,
            self.DEFAULT_URL,
            version,
            username=username,
            password=password,
            iam_options=iam_options,
            url=url,
        )
        self.transport = HttpTransport(session)

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def version(self) -> str:
        return self.config.version

    def analyze(self, analyze_options: AnalyzeOptions) -> ServiceCall[AnalysisResults]:
        """Analyze text, HTML, or a public webpage with one or more features."""
        not_null(analyze_options, "analyze_options cannot be null")
        not_null(analyze_options.features, "features cannot be null")
        builder = service_request(self.config, "POST", ["v1/analyze"])
        builder.body_json(analyze_options)
        return ServiceCall(self.transport, self.config, builder.build(), get_object(AnalysisResults))

    def delete_model(self, delete_model_options: DeleteModelOptions) -> ServiceCall[None]:
        """Delete a custom model."""
        not_null(delete_model_options, "delete_model_options cannot be null")
        not_null(delete_model_options.model_id, "model_id cannot be empty")
        builder = service_request(
            self.config, "DELETE", ["v1/models"], [delete_model_options.model_id]
        )
        return ServiceCall(self.transport, self.config, builder.build(), get_void())

    def list_models(
        self, list_models_options: Optional[ListModelsOptions] = None
    ) -> ServiceCall[ListModelsResults]:
        """List the models available for the Relations and Entities features."""
        builder = service_request(self.config, "GET", ["v1/models"])
        return ServiceCall(self.transport, self.config, builder.build(), get_object(ListModelsResults))
