from __future__ import annotations

import pytest

from models.remote_models import RemoteTranslationRequest, RemoteTranslationResponse


def test_request_is_serialized_in_camel_case() -> None:
    request = RemoteTranslationRequest(text="hello", source_language="english", target_language="hindi")

    assert request.to_dict() == {"text": "hello", "sourceLanguage": "english", "targetLanguage": "hindi"}


def test_response_is_decoded_from_camel_case() -> None:
    response: RemoteTranslationResponse = RemoteTranslationResponse.from_dict(
        {"translatedText": "नमस्ते", "isTranslated": True, "sourceLanguage": "english", "targetLanguage": "hindi"}
    )

    assert response.translated_text == "नमस्ते"
    assert response.is_translated is True
    assert response.source_language == "english"
    assert response.target_language == "hindi"


@pytest.mark.parametrize(
    "payload",
    [
        {"translatedText": None, "isTranslated": True, "sourceLanguage": "english", "targetLanguage": "hindi"},
        {"translatedText": "hello", "isTranslated": None, "sourceLanguage": "english", "targetLanguage": "hindi"},
    ],
)
def test_response_with_wrong_field_types_is_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(TypeError):
        RemoteTranslationResponse.from_dict(payload)


@pytest.mark.parametrize("missing", ["sourceLanguage", "targetLanguage"])
def test_response_without_languages_is_rejected(missing: str) -> None:
    payload: dict[str, object] = {
        "translatedText": "नमस्ते",
        "isTranslated": True,
        "sourceLanguage": "english",
        "targetLanguage": "hindi",
    }
    del payload[missing]

    with pytest.raises((KeyError, TypeError)):
        RemoteTranslationResponse.from_dict(payload)
