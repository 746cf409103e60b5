import json

import pytest
import requests


def make_response(status=200, json_body=None, text=None, content_type="application/json"):
    r = requests.Response()
    r.status_code = status
    r.reason = "OK" if status < 400 else "Error"
    if json_body is not None:
        r._content = json.dumps(json_body).encode("utf-8")
    else:
        r._content = (text or "").encode("utf-8")
    r.encoding = "utf-8"
    r.headers["Content-Type"] = content_type
    return r


class RecordingSession(requests.Session):
    """Session whose `send` records prepared requests instead of hitting the network."""

    def __init__(self, responses=None):
        super().__init__()
        self.trust_env = False
        self.responses = list(responses or [])
        self.sent = []
        self.send_kwargs = []

    def queue(self, response):
        self.responses.append(response)
        return self

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if not self.responses:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        response.request = request
        return response

    @property
    def last(self):
        return self.sent[-1]


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "NATURAL_LANGUAGE_UNDERSTANDING_URL",
        "NATURAL_LANGUAGE_UNDERSTANDING_USERNAME",
        "NATURAL_LANGUAGE_UNDERSTANDING_PASSWORD",
        "NATURAL_LANGUAGE_UNDERSTANDING_IAM_ACCESS_TOKEN",
        "PERSONALITY_INSIGHTS_URL",
        "PERSONALITY_INSIGHTS_USERNAME",
        "PERSONALITY_INSIGHTS_PASSWORD",
        "PERSONALITY_INSIGHTS_IAM_ACCESS_TOKEN",
        "WATSON_VERSION_DATE",
    ):
        monkeypatch.delenv(var, raising=False)
    # keep a stray .env in the working directory out of the tests
    monkeypatch.setattr("watson_clients.config._env_loaded", True)
