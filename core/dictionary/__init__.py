"""Phrase dictionaries used by the pivot translator and spell correction of romanised input."""

from core.dictionary.corrections import SpellCorrector
from core.dictionary.store import PhraseDictionary, PhraseDictionaryStore, PhraseTable

__all__: list[str] = ["PhraseDictionary", "PhraseDictionaryStore", "PhraseTable", "SpellCorrector"]
