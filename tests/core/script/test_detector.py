from __future__ import annotations

import pytest

from core.script.detector import ScriptDetector
from models.language_models import DetectionResult


@pytest.mark.parametrize(
    ("text", "language", "script"),
    [
        ("नमस्ते", "hindi", "Devanagari"),
        ("నమస్కారం", "telugu", "Telugu"),
        ("வணக்கம்", "tamil", "Tamil"),
        ("こんにちは", "japanese", "CJK"),
        ("안녕하세요", "korean", "CJK"),
        ("你好", "chinese", "CJK"),
        ("مرحبا", "arabic", "Arabic"),
        ("привет", "russian", "Cyrillic"),
        ("γεια", "greek", "Greek"),
    ],
)
def test_detect_native_scripts(text: str, language: str, script: str) -> None:
    result: DetectionResult = ScriptDetector.detect(text)

    assert result.language == language
    assert result.script == script
    assert result.confidence == 0.95
    assert result.ambiguous is False


def test_detect_latin_text() -> None:
    result: DetectionResult = ScriptDetector.detect("hello there")

    assert result == DetectionResult(language="english", script="Latin", confidence=0.7)


def test_mixed_script_resolves_by_priority() -> None:
    assert ScriptDetector.detect("hello नमस्ते").script == "Devanagari"
    assert ScriptDetector.detect("東京 とうきょう").language == "japanese"


@pytest.mark.parametrize("text", ["", "123 !!", "😀😀"])
def test_detect_without_letters_is_ambiguous(text: str) -> None:
    result: DetectionResult = ScriptDetector.detect(text)

    assert result.ambiguous is True
    assert result.language == "english"
    assert result.confidence == 0.5


def test_detect_rejects_non_string() -> None:
    with pytest.raises(TypeError):
        ScriptDetector.detect(None)  # type: ignore[arg-type]


def test_is_latin_text_ignores_emoji_digits_and_punctuation() -> None:
    assert ScriptDetector.is_latin_text("hello 😀 123!") is True
    assert ScriptDetector.is_latin_text("नमस्ते") is False
    assert ScriptDetector.is_latin_text("") is True
    assert ScriptDetector.is_latin_text("ok नमस्ते दोस्त") is False
    assert ScriptDetector.is_latin_text("नमस्ते https://example.com/welcome") is False
