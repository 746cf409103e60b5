"""watson_clients.personality_insights.client

Client for the Personality Insights v3 API. Infers Big Five, Needs and
Values characteristics (and optionally consumption preferences) from text.
"""
from __future__ import annotations

from typing import Optional

import requests

from ..converters import get_object, get_string
from ..http import HttpHeaders, HttpMediaType, RequestBuilder
from ..service import (
    HttpTransport,
    IamOptions,
    ServiceCall,
    ServiceConfig,
    create_service_config,
    service_request,
)
from ..utils import is_json_media_type, not_null
from .models import Profile, ProfileOptions


class PersonalityInsights:
    """Derive personality profiles from authored text.

    The service accepts up to 20 MB of plain text, HTML or JSON content
    (`Content` with ``contentItems``) and answers with a JSON `Profile` or,
    through `profile_as_csv`, a CSV rendering of the same profile.
    """

    SERVICE_NAME = "personality_insights"
    DEFAULT_URL = "https://gateway.watsonplatform.net/personality-insights/api"

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

    def _profile_request(self, profile_options: ProfileOptions) -> RequestBuilder:
        not_null(profile_options, "profile_options cannot be null")
        not_null(profile_options.content_type, "content_type cannot be null")
        builder = service_request(self.config, "POST", ["v3/profile"])
        builder.header(HttpHeaders.CONTENT_TYPE, profile_options.content_type)
        builder.header(HttpHeaders.CONTENT_LANGUAGE, profile_options.content_language)
        builder.header(HttpHeaders.ACCEPT_LANGUAGE, profile_options.accept_language)
        builder.query("raw_scores", profile_options.raw_scores)
        builder.query("consumption_preferences", profile_options.consumption_preferences)
        if is_json_media_type(profile_options.content_type):
            not_null(profile_options.content, "content cannot be null for JSON input")
            builder.body_json(profile_options.content)
            # keep the caller's exact value (it may carry a charset)
            builder.header(HttpHeaders.CONTENT_TYPE, profile_options.content_type)
        else:
            not_null(profile_options.body, "body cannot be null for text or HTML input")
            builder.body_content(profile_options.body, profile_options.content_type)
        return builder

    def profile(self, profile_options: ProfileOptions) -> ServiceCall[Profile]:
        """Generate a personality profile for the author of the input text."""
        builder = self._profile_request(profile_options)
        return ServiceCall(self.transport, self.config, builder.build(), get_object(Profile))

    def profile_as_csv(
        self, profile_options: ProfileOptions, include_headers: bool = False
    ) -> ServiceCall[str]:
        """Generate a profile rendered as CSV.

        CSV output has a fixed set of columns; *include_headers* adds the
        header row (``csv_headers`` query parameter).
        """
        builder = self._profile_request(profile_options)
        builder.header(HttpHeaders.ACCEPT, HttpMediaType.TEXT_CSV)
        builder.query("csv_headers", bool(include_headers))
        return ServiceCall(self.transport, self.config, builder.build(), get_string())
