"""Data models for the remote translation service payloads.

Field names are camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["RemoteTranslationRequest", "RemoteTranslationResponse"]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class RemoteTranslationRequest(DataClassJsonMixin):
    """Request body posted to the remote translation service."""

    text: str
    source_language: str
    target_language: str


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class RemoteTranslationResponse(DataClassJsonMixin):
    """Response body returned by the remote translation service.

    Every field is required. dataclasses_json does not enforce field types, so they are checked
    after decoding.

    Attributes:
        translated_text (str): Translated text.
        is_translated (bool): Whether the service changed the text.
        source_language (str): Source language reported by the service.
        target_language (str): Target language reported by the service.

    Raises:
        KeyError: If a field is missing from the decoded payload.
        TypeError: If a field is missing or has the wrong type.
    """

    translated_text: str
    is_translated: bool
    source_language: str
    target_language: str

    def __post_init__(self) -> None:
        for name in ("translated_text", "source_language", "target_language"):
            if not isinstance(getattr(self, name), str):
                msg: str = f"'{name}' must be str, not {type(getattr(self, name)).__name__}"
                raise TypeError(msg)
        if not isinstance(self.is_translated, bool):
            msg = f"'is_translated' must be bool, not {type(self.is_translated).__name__}"
            raise TypeError(msg)
