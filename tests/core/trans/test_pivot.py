"""Tests for PivotTranslator."""

from __future__ import annotations

import logging

import pytest

from core.dictionary.corrections import SpellCorrector
from core.dictionary.store import PhraseDictionaryStore
from core.script.registry import LanguageRegistry
from core.script.tables import ScriptTableStore
from core.script.transliterator import Transliterator
from core.trans.pivot import PivotTranslator
from models.translation_models import TranslationResult


@pytest.fixture(scope="module")
def pivot() -> PivotTranslator:
    registry = LanguageRegistry()
    return PivotTranslator(
        registry,
        PhraseDictionaryStore(registry),
        Transliterator(ScriptTableStore(registry)),
        fallback_confidence=0.85,
        corrector=SpellCorrector(registry),
    )


def test_english_to_hindi_exact_phrase(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("thank you", "english", "hindi")

    assert result.text == "धन्यवाद"
    assert result.confidence == 1.0
    assert result.method == "dictionary"
    assert result.is_translated is True
    assert result.original_text == "thank you"


def test_hindi_to_english_exact_phrase(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("धन्यवाद", "hi", "en")

    assert result.text == "thank you"
    assert result.confidence == 1.0
    assert result.source_language == "hindi"
    assert result.target_language == "english"


def test_pivot_through_english(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("धन्यवाद", "hindi", "telugu")

    assert result.text == "ధన్యవాదాలు"
    assert result.confidence == 1.0


def test_case_blanks_and_outer_punctuation_are_ignored(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("  Thank   YOU! ", "english", "hindi")

    assert result.text == "धन्यवाद!"
    assert result.confidence == 1.0


def test_word_by_word_substitution_is_partial(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("hello friend", "english", "hindi")

    assert result.text == "नमस्ते दोस्त"
    assert result.method == "dictionary"
    assert result.confidence == 0.85


def test_longest_sub_phrase_wins(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("good morning friend", "english", "hindi")

    assert result.text == "शुभ प्रभात दोस्त"


def test_unknown_latin_word_is_transliterated(pivot: PivotTranslator, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        result: TranslationResult = pivot.translate("xyzzy123", "english", "telugu")

    assert result.is_translated is True
    assert result.method == "transliteration"
    assert result.confidence == 0.85
    assert result.text != "xyzzy123"
    assert result.text.endswith("123")
    assert "Dictionary miss" in caplog.text


def test_unknown_native_word_is_romanised_for_latin_target(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("नमसते", "hindi", "english")

    assert result.text == "namasate"
    assert result.method == "romanization"
    assert result.confidence == 0.85


def test_unknown_native_word_is_converted_between_scripts(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("नम", "hindi", "telugu")

    assert result.text == "నమ"
    assert result.method == "transliteration"


def test_same_script_without_hits_passes_through(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("नम", "hindi", "marathi")

    assert result.is_translated is False
    assert result.text == "नम"
    assert result.confidence == 0.5


def test_latin_target_without_hits_passes_through(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("xyzzy", "english", "klingon")

    assert result == TranslationResult.passthrough("xyzzy", "english", "klingon", confidence=0.5)


def test_same_language_passes_through(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("धन्यवाद", "hindi", "hi")

    assert result.is_translated is False
    assert result.confidence == 1.0


def test_blank_text_passes_through(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("   ", "english", "hindi")

    assert result.text == "   "
    assert result.confidence == 0.0


def test_non_string_text_raises_type_error(pivot: PivotTranslator) -> None:
    with pytest.raises(TypeError):
        pivot.translate(None, "english", "hindi")  # type: ignore[arg-type]


def test_romanised_source_is_spell_corrected_before_conversion(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("namste", "hindi", "telugu")

    assert result.text == pivot.transliterator.transliterate("namaste", "telugu")
    assert result.original_text == "namste"
    assert result.method == "transliteration"


def test_spelling_correction_alone_is_not_a_translation(pivot: PivotTranslator) -> None:
    result: TranslationResult = pivot.translate("namste", "hindi", "english")

    assert result == TranslationResult.passthrough("namste", "hindi", "english", confidence=0.5)
