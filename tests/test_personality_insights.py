import json
from urllib.parse import parse_qs, urlparse

import pytest

from conftest import make_response
from watson_clients import IamOptions, PersonalityInsights
from watson_clients.errors import BadRequestError, InvalidArgumentError
from watson_clients.personality_insights import (
    AcceptLanguage,
    Content,
    ContentItem,
    ContentLanguage,
    ContentType,
    Profile,
    ProfileOptions,
)

VERSION = "2017-10-13"
ENDPOINT = "https://gateway.watsonplatform.net/personality-insights/api"

PROFILE = {
    "processed_language": "en",
    "word_count": 1500,
    "personality": [
        {
            "trait_id": "big5_openness",
            "name": "Openness",
            "category": "personality",
            "percentile": 0.8,
            "children": [{"trait_id": "facet_adventurousness", "name": "Adventurousness", "percentile": 0.7}],
        }
    ],
    "needs": [{"trait_id": "need_challenge", "name": "Challenge", "category": "needs", "percentile": 0.6}],
    "values": [],
    "consumption_preferences": [
        {
            "consumption_preference_category_id": "consumption_preferences_shopping",
            "name": "Purchasing Preferences",
            "consumption_preferences": [
                {"consumption_preference_id": "consumption_preferences_spur_of_moment", "score": 0.0}
            ],
        }
    ],
    "warnings": [],
}


@pytest.fixture
def service(session):
    return PersonalityInsights(VERSION, iam_options=IamOptions(access_token="token"), session=session)


@pytest.fixture
def content():
    return Content(content_items=[ContentItem(content="I love hiking.", language="en", id="1")])


def _query(prepared):
    return parse_qs(urlparse(prepared.url).query)


def test_defaults():
    pi = PersonalityInsights(VERSION)
    assert pi.endpoint == ENDPOINT
    assert pi.version == VERSION


def test_content_type_defaults(content):
    assert ProfileOptions(content=content).content_type == ContentType.APPLICATION_JSON
    assert ProfileOptions(body="text").content_type == ContentType.TEXT_PLAIN
    assert ProfileOptions(body="<p>x</p>", content_type=ContentType.TEXT_HTML).content_type == ContentType.TEXT_HTML


def test_profile_json_content(service, session, content):
    session.queue(make_response(json_body=PROFILE))
    result = service.profile(ProfileOptions(content=content)).execute()

    sent = session.last
    assert sent.method == "POST"
    assert sent.url == f"{ENDPOINT}/v3/profile?version={VERSION}"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers["Accept"] == "application/json"
    assert sent.headers["Authorization"] == "Bearer token"
    assert json.loads(sent.body) == {"contentItems": [{"content": "I love hiking.", "id": "1", "language": "en"}]}
    for header in ("Content-Language", "Accept-Language"):
        assert header not in sent.headers

    assert isinstance(result, Profile)
    assert result.word_count == 1500
    assert result.personality[0].children[0].name == "Adventurousness"
    assert result.needs[0].percentile == 0.6
    assert result.consumption_preferences[0].consumption_preferences[0].score == 0.0


def test_profile_plain_text_passthrough(service, session):
    session.queue(make_response(json_body=PROFILE))
    text = "Some text to profile with ünïcode."
    service.profile(ProfileOptions(body=text, content_type="text/plain;charset=utf-8")).execute()
    sent = session.last
    assert sent.headers["Content-Type"] == "text/plain;charset=utf-8"
    assert sent.body == text.encode("utf-8")


def test_profile_html_passthrough(service, session):
    session.queue(make_response(json_body=PROFILE))
    service.profile(ProfileOptions(body="<p>hello</p>", content_type=ContentType.TEXT_HTML)).execute()
    assert session.last.headers["Content-Type"] == "text/html"
    assert session.last.body == b"<p>hello</p>"


def test_profile_optional_headers_and_query(service, session):
    session.queue(make_response(json_body=PROFILE))
    options = ProfileOptions(
        body="text",
        content_language=ContentLanguage.ES,
        accept_language=AcceptLanguage.PT_BR,
        raw_scores=True,
        consumption_preferences=False,
    )
    service.profile(options).execute()
    sent = session.last
    assert sent.headers["Content-Language"] == "es"
    assert sent.headers["Accept-Language"] == "pt-br"
    assert _query(sent) == {
        "version": [VERSION],
        "raw_scores": ["true"],
        "consumption_preferences": ["false"],
    }


def test_profile_unset_query_parameters_absent(service, session):
    session.queue(make_response(json_body=PROFILE))
    service.profile(ProfileOptions(body="text")).execute()
    assert _query(session.last) == {"version": [VERSION]}


def test_profile_as_csv(service, session, content):
    csv = "big5_openness,big5_conscientiousness\n0.8,0.5\n"
    session.queue(make_response(text=csv, content_type="text/csv"))
    result = service.profile_as_csv(ProfileOptions(content=content), include_headers=True).execute()
    sent = session.last
    assert sent.headers["Accept"] == "text/csv"
    assert _query(sent)["csv_headers"] == ["true"]
    assert json.loads(sent.body)["contentItems"][0]["content"] == "I love hiking."
    assert result == csv


def test_profile_as_csv_without_headers(service, session):
    session.queue(make_response(text="0.8\n", content_type="text/csv"))
    service.profile_as_csv(ProfileOptions(body="text")).execute()
    assert _query(session.last)["csv_headers"] == ["false"]


def test_profile_requires_options(service, session):
    with pytest.raises(InvalidArgumentError):
        service.profile(None)
    with pytest.raises(InvalidArgumentError):
        service.profile_as_csv(None, include_headers=True)
    assert session.sent == []


def test_profile_json_requires_content(service, session):
    with pytest.raises(InvalidArgumentError):
        service.profile(ProfileOptions(content_type=ContentType.APPLICATION_JSON))
    assert session.sent == []


def test_profile_text_requires_body(service, session):
    with pytest.raises(InvalidArgumentError):
        service.profile(ProfileOptions(content_type=ContentType.TEXT_PLAIN))
    assert session.sent == []


def test_profile_service_error(service, session):
    session.queue(
        make_response(status=400, json_body={"code": 400, "error": "The number of words 3 is less than the minimum"})
    )
    with pytest.raises(BadRequestError) as exc:
        service.profile(ProfileOptions(body="too short")).execute()
    assert "minimum" in exc.value.message


def test_content_serializes_with_alias(content):
    dumped = content.model_dump(by_alias=True, exclude_none=True)
    assert list(dumped) == ["contentItems"]
    assert Content.model_validate(dumped) == content


def test_profile_json_with_charset_keeps_content_type(service, session):
    session.queue(make_response(json_body=PROFILE))
    content = Content(content_items=[ContentItem(content="hi")])
    service.profile(ProfileOptions(content=content, content_type="application/json; charset=utf-8")).execute()
    sent = session.last
    assert sent.headers["Content-Type"] == "application/json; charset=utf-8"
    assert json.loads(sent.body) == {"contentItems": [{"content": "hi"}]}


def test_profile_as_csv_decodes_utf8(service, session):
    csv = "personality_ビッグファイブ_開放性\n0.8\n"
    response = make_response(text=csv, content_type="text/csv")
    response.encoding = "ISO-8859-1"
    session.queue(response)
    result = service.profile_as_csv(ProfileOptions(body="text", accept_language=AcceptLanguage.JA)).execute()
    assert result == csv
