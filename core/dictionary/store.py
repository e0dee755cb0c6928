"""Phrase dictionaries for pivot translation.

Each language has one dictionary with a native-to-English table and a derived English-to-native
table. Built-in phrases can be extended with JSON files of the form
``{"<language>": {"<native phrase>": "<english phrase>", ...}, ...}``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from json import JSONDecodeError
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from core.dictionary.const_phrases import PHRASES_TO_ENGLISH
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from core.script.registry import LanguageRegistry

__all__: list[str] = ["PhraseDictionary", "PhraseDictionaryStore", "PhraseTable"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _JSONLoader:
    """Helper class for loading JSON dictionary files."""

    @staticmethod
    def load(dic_name: Path) -> Any:
        with dic_name.open(mode="r", encoding="utf-8") as fhdl:
            return json.load(fhdl)


@dataclass(frozen=True)
class PhraseTable:
    """One direction of a phrase dictionary.

    Attributes:
        entries (Mapping[str, str]): Normalized phrase to translated phrase.
        max_words (int): Word count of the longest key, bounds sub-phrase matching.
    """

    entries: Mapping[str, str]
    max_words: int

    @classmethod
    def build(cls, pairs: Iterable[tuple[str, str]]) -> PhraseTable:
        """Build a table from (phrase, translation) pairs. The first pair for a phrase wins."""
        entries: dict[str, str] = {}
        for phrase, translation in pairs:
            key: str = StringUtils.normalize_phrase(phrase)
            if key:
                entries.setdefault(key, StringUtils.compress_blanks(translation))
        max_words: int = max((len(key.split()) for key in entries), default=0)
        return cls(entries=MappingProxyType(entries), max_words=max_words)

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, phrase: str) -> str | None:
        """Return the translation of an already normalized phrase, or None."""
        return self.entries.get(phrase)


@dataclass(frozen=True)
class PhraseDictionary:
    """Bidirectional phrase dictionary of one language against English.

    Attributes:
        language (str): Canonical language name.
        to_english (PhraseTable): Native phrase to English.
        from_english (PhraseTable): English phrase to native.
    """

    language: str
    to_english: PhraseTable
    from_english: PhraseTable

    @classmethod
    def from_phrases(cls, language: str, phrases: Mapping[str, str]) -> PhraseDictionary:
        """Build a dictionary from native-to-English pairs.

        The reverse table keeps the first native phrase listed for each English meaning.
        """
        to_english: PhraseTable = PhraseTable.build(phrases.items())
        from_english: PhraseTable = PhraseTable.build((english, native) for native, english in phrases.items())
        return cls(language=language, to_english=to_english, from_english=from_english)


class PhraseDictionaryStore:
    """Immutable set of phrase dictionaries, constructed once at start-up.

    Attributes:
        registry (LanguageRegistry): Resolves languages and dialect fallbacks.
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        phrases: Mapping[str, Mapping[str, str]] = PHRASES_TO_ENGLISH,
        extra_files: Iterable[Path] = (),
    ) -> None:
        self.registry: LanguageRegistry = registry

        merged: dict[str, dict[str, str]] = {}
        self._merge(merged, phrases)
        for path in extra_files:
            self._merge(merged, self._load_file(path))

        self._dictionaries: Mapping[str, PhraseDictionary] = MappingProxyType(
            {language: PhraseDictionary.from_phrases(language, table) for language, table in merged.items()}
        )
        logger.info("Phrase dictionaries loaded for %d languages", len(self._dictionaries))

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and self.get(language) is not None

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._dictionaries)

    def get(self, language: str) -> PhraseDictionary | None:
        """Return the dictionary serving a language, following dialect fallbacks.

        Args:
            language (str): Any language identifier.

        Returns:
            PhraseDictionary | None: The dictionary, or None when the language has none.
        """
        return self._dictionaries.get(self.registry.dictionary_language(language))

    def _merge(self, merged: dict[str, dict[str, str]], phrases: Mapping[str, Mapping[str, str]]) -> None:
        for language, table in phrases.items():
            canonical: str = self.registry.normalize(language)
            if canonical not in self.registry:
                logger.warning("Phrase dictionary for unknown language '%s' is loaded as-is", language)
            merged.setdefault(canonical, {}).update(table)

    @staticmethod
    def _load_file(path: Path) -> dict[str, dict[str, str]]:
        """Load an additional phrase dictionary file.

        Raises:
            OSError: If the dictionary file cannot be read.
            RuntimeError: If the dictionary file is not valid JSON or not a mapping of mappings.
        """
        logger.info("file open '%s' as read-only", path)
        msg: str
        try:
            data: Any = _JSONLoader.load(path)
        except OSError as err:
            logger.debug(err)
            msg = f"failed to load '{path}'"
            raise OSError(msg) from err
        except JSONDecodeError as err:
            logger.debug(err)
            msg = f"'{path}' is an invalid JSON format"
            raise RuntimeError(msg) from err

        if not isinstance(data, dict) or not all(
            isinstance(table, dict) and all(isinstance(k, str) and isinstance(v, str) for k, v in table.items())
            for table in data.values()
        ):
            msg = f"'{path}' must map language names to {{native phrase: english phrase}} objects"
            raise RuntimeError(msg)
        logger.info("loaded dictionary '%s'", path)
        return data
