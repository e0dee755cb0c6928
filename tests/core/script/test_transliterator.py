from __future__ import annotations

import pytest

from core.script.registry import LanguageRegistry
from core.script.tables import ScriptTableStore
from core.script.transliterator import Transliterator


@pytest.fixture(scope="module")
def tables() -> ScriptTableStore:
    return ScriptTableStore(LanguageRegistry())


@pytest.fixture(scope="module")
def transliterator(tables: ScriptTableStore) -> Transliterator:
    return Transliterator(tables)


@pytest.mark.parametrize(
    ("text", "language", "expected"),
    [
        ("namaste", "hindi", "नमसते"),
        ("Namaste", "hi", "नमसते"),
        ("khi", "hindi", "खि"),
        ("aap", "hindi", "आप"),
        ("namaste", "marathi", "नमसते"),
        ("sakura", "japanese", "さくら"),
        ("privet", "russian", "привет"),
    ],
)
def test_transliterate(transliterator: Transliterator, text: str, language: str, expected: str) -> None:
    assert transliterator.transliterate(text, language) == expected


def test_transliterate_keeps_punctuation_and_digits(transliterator: Transliterator) -> None:
    assert transliterator.transliterate("khi, 42!", "hindi") == "खि, 42!"


def test_transliterate_copies_urls_and_mentions(transliterator: Transliterator) -> None:
    assert transliterator.transliterate("see www.example.com", "hindi") == "सी www.example.com"
    assert transliterator.transliterate("hi @raj_01", "hindi") == "हि @raj_01"
    converted: str = transliterator.transliterate("go https://x.in/a?b=1 now", "hindi")
    assert " https://x.in/a?b=1 " in converted
    assert not converted.startswith("go")
    assert transliterator.transliterate("see example.com/path", "hindi") == "सी example.com/path"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("acha.thik", "अच.थिक"),
        ("acha.thik hai", "अच.थिक है"),
    ],
)
def test_dotted_words_are_not_urls(transliterator: Transliterator, text: str, expected: str) -> None:
    assert transliterator.transliterate(text, "hindi") == expected


def test_dotted_short_words_are_converted(transliterator: Transliterator) -> None:
    converted: str = transliterator.transliterate("ok.bye", "hindi")

    assert "." in converted
    assert "ok" not in converted
    assert "bye" not in converted


def test_transliterate_is_idempotent(transliterator: Transliterator) -> None:
    once: str = transliterator.transliterate("namaste", "hindi")

    assert transliterator.transliterate(once, "hindi") == once


@pytest.mark.parametrize("language", ["english", "klingon"])
def test_transliterate_without_table_returns_input(transliterator: Transliterator, language: str) -> None:
    assert transliterator.transliterate("namaste", language) == "namaste"


def test_transliterate_empty_text(transliterator: Transliterator) -> None:
    assert transliterator.transliterate("", "hindi") == ""


def test_transliterate_rejects_non_string(transliterator: Transliterator) -> None:
    with pytest.raises(TypeError):
        transliterator.transliterate(None, "hindi")  # type: ignore[arg-type]


def test_to_latin_uses_virama_and_inherent_vowel(transliterator: Transliterator) -> None:
    assert transliterator.to_latin("नमस्ते", "hindi") == "namaste"
    assert transliterator.to_latin("नमसते", "hindi") == "namasate"


def test_to_latin_passes_unknown_glyphs(transliterator: Transliterator) -> None:
    assert transliterator.to_latin("नम 42", "hindi") == "nama 42"
    assert transliterator.to_latin("hello", "english") == "hello"


def test_tables_resolve_by_script_and_override(tables: ScriptTableStore) -> None:
    assert tables.table_name_for("marathi") == "Devanagari"
    assert tables.table_name_for("japanese") == "Kana"
    assert tables.table_name_for("english") is None
    assert "Telugu" in tables
