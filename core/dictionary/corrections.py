"""Spell correction of romanised input.

Common misspellings of romanised words are replaced word by word before the text is converted to a
native script, so 'namste' converts like 'namaste'. URLs and @mentions are left alone, and words
without a correction keep their case.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from core.dictionary.const_corrections import ROMAN_CORRECTIONS
from models.re_models import PROTECTED_SPAN_PATTERN, ROMAN_WORD_PATTERN
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    import re
    from collections.abc import Mapping

    from core.script.registry import LanguageRegistry

__all__: list[str] = ["SpellCorrector"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class SpellCorrector:
    """Per-language replacement of misspelled romanised words.

    Attributes:
        registry (LanguageRegistry): Language resolution.
    """

    def __init__(
        self, registry: LanguageRegistry, corrections: Mapping[str, Mapping[str, str]] = ROMAN_CORRECTIONS
    ) -> None:
        """Initialize the corrector.

        Args:
            registry (LanguageRegistry): Language resolution for table lookup.
            corrections (Mapping[str, Mapping[str, str]]): Misspelling to correction, per language.
        """
        self.registry: LanguageRegistry = registry
        self._tables: dict[str, Mapping[str, str]] = {
            registry.normalize(language): MappingProxyType(
                {word.lower(): fix for word, fix in table.items() if word.lower() != fix}
            )
            for language, table in corrections.items()
        }
        logger.debug("Spell corrections loaded for %d languages", len(self._tables))

    def correct(self, text: str, language: str) -> str:
        """Replace misspelled romanised words with their corrections.

        Args:
            text (str): Romanised input, e.g. 'namste ji'.
            language (str): Language identifier selecting the correction table.

        Returns:
            str: The corrected text, e.g. 'namaste ji'. Unchanged when the language has no table.

        Raises:
            TypeError: If text or language is not a string.
            ValueError: If language is empty.
        """
        text = StringUtils.require_str(text)
        table: Mapping[str, str] | None = self._tables.get(self.registry.normalize(language))
        if not table or not text:
            return text

        def _fix(match: re.Match[str]) -> str:
            return table.get(match.group(0).lower(), match.group(0))

        parts: list[str] = []
        cursor: int = 0
        for span in PROTECTED_SPAN_PATTERN.finditer(text):
            parts.append(ROMAN_WORD_PATTERN.sub(_fix, text[cursor : span.start()]))
            parts.append(span.group(0))
            cursor = span.end()
        parts.append(ROMAN_WORD_PATTERN.sub(_fix, text[cursor:]))

        corrected: str = "".join(parts)
        if corrected != text:
            logger.debug("Spelling corrected for %s: '%s' -> '%s'", language, text, corrected)
        return corrected
