"""Latin-to-native transliteration and native-to-Latin romanisation.

The forward direction scans the lower-cased input left to right with greedy longest-match lookups
against the target script's ScriptBlock:

1. Non-letters pass through unchanged.
2. At a letter, try a consonant cluster (longest first). After a consonant, try a dependent vowel
   sign (longest first); without one the inherent vowel is implied.
3. Otherwise try an independent vowel (longest first).
4. Characters that match nothing are kept in their original case.

URLs and @mentions are copied verbatim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.script.detector import ScriptDetector
from models.re_models import PROTECTED_SPAN_PATTERN
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

    from core.script.tables import ReverseTable, ScriptTableStore
    from models.language_models import ScriptBlock

__all__: list[str] = ["Transliterator"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class Transliterator:
    """Deterministic, pure script converter backed by a ScriptTableStore.

    Attributes:
        tables (ScriptTableStore): Source of transliteration tables.
    """

    def __init__(self, tables: ScriptTableStore) -> None:
        self.tables: ScriptTableStore = tables

    def transliterate(self, latin_text: str, target_language: str) -> str:
        """Convert Latin-keyed text into the target language's script.

        The input is returned unchanged when the target is written in Latin script, when no table
        exists for the target script, when the text is empty, or when the text is not predominantly
        Latin (which makes the conversion idempotent).

        Args:
            latin_text (str): Romanized input, e.g. 'namaste'.
            target_language (str): Target language identifier, e.g. 'hindi'.

        Returns:
            str: The converted text, e.g. 'नमसते'.

        Raises:
            TypeError: If latin_text is not a string.
            ValueError: If target_language is empty.
        """
        latin_text = StringUtils.require_str(latin_text)
        block: ScriptBlock | None = self.tables.get_block(target_language)
        if block is None or not latin_text or not ScriptDetector.is_latin_text(latin_text):
            return latin_text

        parts: list[str] = []
        cursor: int = 0
        for match in PROTECTED_SPAN_PATTERN.finditer(latin_text):
            parts.append(self._convert(latin_text[cursor : match.start()], block))
            parts.append(match.group(0))
            cursor = match.end()
        parts.append(self._convert(latin_text[cursor:], block))
        return "".join(parts)

    def to_latin(self, native_text: str, source_language: str) -> str:
        """Romanise native-script text using the inverted tables of the source language.

        A bare consonant receives the inherent vowel, a dependent vowel sign replaces it and the
        virama suppresses it. Glyphs that are not in the table pass through unchanged.

        Args:
            native_text (str): Native-script input, e.g. 'नमस्ते'.
            source_language (str): Language of the input, e.g. 'hindi'.

        Returns:
            str: The romanised text, e.g. 'namaste'.
        """
        native_text = StringUtils.require_str(native_text)
        reverse: ReverseTable | None = self.tables.get_reverse(source_language)
        if reverse is None or not native_text:
            return native_text

        output: list[str] = []
        index: int = 0
        length: int = len(native_text)
        while index < length:
            consonant: tuple[str, int] | None = self._match_unit(
                native_text, index, reverse.consonants, reverse.max_glyph_len
            )
            if consonant is not None:
                latin, size = consonant
                output.append(latin)
                index += size
                if reverse.virama is not None and native_text.startswith(reverse.virama, index):
                    index += len(reverse.virama)
                    continue
                modifier: tuple[str, int] | None = self._match_unit(
                    native_text, index, reverse.modifiers, reverse.max_glyph_len
                )
                if modifier is not None:
                    output.append(modifier[0])
                    index += modifier[1]
                else:
                    output.append(reverse.inherent_vowel)
                continue

            vowel: tuple[str, int] | None = self._match_unit(
                native_text, index, reverse.vowels, reverse.max_glyph_len
            )
            if vowel is not None:
                output.append(vowel[0])
                index += vowel[1]
                continue

            output.append(native_text[index])
            index += 1
        return "".join(output)

    @staticmethod
    def _match_unit(text: str, index: int, mapping: Mapping[str, str], max_len: int) -> tuple[str, int] | None:
        """Find the longest key of mapping starting at index.

        Returns:
            tuple[str, int] | None: The mapped value and the key length, or None.
        """
        for size in range(min(max_len, len(text) - index), 0, -1):
            glyph: str | None = mapping.get(text[index : index + size])
            if glyph is not None:
                return glyph, size
        return None

    def _convert(self, text: str, block: ScriptBlock) -> str:
        if not text:
            return text

        # Per-character lowering keeps indices aligned with the original text
        lowered: str = "".join(char.lower() if len(char.lower()) == 1 else char for char in text)
        output: list[str] = []
        index: int = 0
        length: int = len(text)
        while index < length:
            if not lowered[index].isalpha():
                output.append(text[index])
                index += 1
                continue

            consonant: tuple[str, int] | None = self._match_unit(
                lowered, index, block.consonants, block.max_consonant_len
            )
            if consonant is not None:
                output.append(consonant[0])
                index += consonant[1]
                modifier: tuple[str, int] | None = self._match_unit(
                    lowered, index, block.modifiers, block.max_vowel_len
                )
                if modifier is not None:
                    output.append(modifier[0])
                    index += modifier[1]
                continue

            vowel: tuple[str, int] | None = self._match_unit(lowered, index, block.vowels, block.max_vowel_len)
            if vowel is not None:
                output.append(vowel[0])
                index += vowel[1]
                continue

            logger.debug("No mapping for '%s' in %s table", text[index], block.name)
            output.append(text[index])
            index += 1
        return "".join(output)
