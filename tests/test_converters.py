import pytest
import requests

from conftest import make_response
from watson_clients.converters import get_object, get_string, get_void
from watson_clients.errors import DeserializationError
from watson_clients.natural_language_understanding import ListModelsResults


def test_get_object_parses_model():
    body = {"models": [{"model_id": "m1", "status": "available", "language": "en"}]}
    result = get_object(ListModelsResults)(make_response(json_body=body))
    assert isinstance(result, ListModelsResults)
    assert result.models[0].model_id == "m1"


def test_get_object_keeps_unknown_keys():
    result = get_object(ListModelsResults)(make_response(json_body={"models": [], "next": "x"}))
    assert result.model_extra == {"next": "x"}


def test_get_object_invalid_json():
    with pytest.raises(DeserializationError) as exc:
        get_object(ListModelsResults)(make_response(text="<html>oops</html>", content_type="text/html"))
    assert exc.value.body == "<html>oops</html>"


def test_get_object_shape_mismatch():
    with pytest.raises(DeserializationError):
        get_object(ListModelsResults)(make_response(json_body={"models": "not-a-list"}))


def test_get_string_returns_text():
    assert get_string()(make_response(text="a,b\n1,2", content_type="text/csv")) == "a,b\n1,2"


def test_get_void_discards_body():
    assert get_void()(make_response(text="ignored")) is None


def test_get_string_defaults_to_utf8_without_charset():
    csv = "personality_ビッグファイブ_開放性\n0.8\n"
    r = make_response(text=csv, content_type="text/csv")
    # as the HTTP adapter does: ISO-8859-1 for text/* without a charset
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    assert get_string()(r) == csv


def test_get_string_honours_declared_charset():
    r = make_response(text="", content_type="text/csv; charset=iso-8859-1")
    r._content = "café".encode("iso-8859-1")
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    assert get_string()(r) == "café"
