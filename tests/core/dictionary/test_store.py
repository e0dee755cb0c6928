from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from core.dictionary.store import PhraseDictionary, PhraseDictionaryStore, PhraseTable
from core.script.registry import LanguageRegistry

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(scope="module")
def registry() -> LanguageRegistry:
    return LanguageRegistry()


def test_phrase_table_normalizes_keys_and_keeps_first() -> None:
    table: PhraseTable = PhraseTable.build([("Good  Morning", "शुभ प्रभात"), ("good morning", "सुप्रभात"), ("", "x")])

    assert len(table) == 1
    assert table.lookup("good morning") == "शुभ प्रभात"
    assert table.max_words == 2


def test_phrase_dictionary_reverse_table_keeps_first_native_phrase() -> None:
    dictionary: PhraseDictionary = PhraseDictionary.from_phrases(
        "hindi", {"कैसे हो": "how are you", "क्या हाल है": "how are you"}
    )

    assert dictionary.to_english.lookup("क्या हाल है") == "how are you"
    assert dictionary.from_english.lookup("how are you") == "कैसे हो"


def test_builtin_dictionaries(registry: LanguageRegistry) -> None:
    store = PhraseDictionaryStore(registry)
    hindi: PhraseDictionary | None = store.get("hi")

    assert hindi is not None
    assert hindi.to_english.lookup("धन्यवाद") == "thank you"
    assert hindi.from_english.lookup("thank you") == "धन्यवाद"
    assert "telugu" in store
    assert store.get("klingon") is None


def test_dialect_uses_parent_dictionary(registry: LanguageRegistry) -> None:
    store = PhraseDictionaryStore(registry)
    dictionary: PhraseDictionary | None = store.get("bhojpuri")

    assert dictionary is not None
    assert dictionary.language == "hindi"


def test_extra_file_extends_builtin_phrases(registry: LanguageRegistry, tmp_path: Path) -> None:
    path: Path = tmp_path / "extra.json"
    path.write_text(json.dumps({"Hindi": {"चाय": "tea"}, "klingon": {"Qapla'": "success"}}), encoding="utf-8")

    store = PhraseDictionaryStore(registry, extra_files=[path])
    hindi: PhraseDictionary | None = store.get("hindi")
    klingon: PhraseDictionary | None = store.get("klingon")

    assert hindi is not None
    assert hindi.to_english.lookup("चाय") == "tea"
    assert hindi.to_english.lookup("धन्यवाद") == "thank you"
    assert klingon is not None
    assert klingon.from_english.lookup("success") == "Qapla'"


def test_invalid_json_raises_runtime_error(registry: LanguageRegistry, tmp_path: Path) -> None:
    path: Path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RuntimeError, match="invalid JSON"):
        PhraseDictionaryStore(registry, extra_files=[path])


def test_wrong_shape_raises_runtime_error(registry: LanguageRegistry, tmp_path: Path) -> None:
    path: Path = tmp_path / "list.json"
    path.write_text(json.dumps({"hindi": ["चाय", "tea"]}), encoding="utf-8")

    with pytest.raises(RuntimeError, match="must map"):
        PhraseDictionaryStore(registry, extra_files=[path])


def test_missing_file_raises_os_error(registry: LanguageRegistry, tmp_path: Path) -> None:
    with pytest.raises(OSError, match="failed to load"):
        PhraseDictionaryStore(registry, extra_files=[tmp_path / "missing.json"])
