"""Transliteration table store.

Holds the immutable ScriptBlock tables and resolves which table, if any, serves a language.
Reverse (native-to-Latin) maps used for romanisation are derived once per table.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from core.script.const_tables import LANGUAGE_TABLES, SCRIPT_BLOCKS
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping

    from core.script.registry import LanguageRegistry
    from models.language_models import ScriptBlock

__all__: list[str] = ["ReverseTable", "ScriptTableStore"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class ReverseTable:
    """Native-to-Latin maps derived from a ScriptBlock.

    Attributes:
        consonants (Mapping[str, str]): Native consonant to Latin cluster.
        vowels (Mapping[str, str]): Independent vowel to Latin cluster.
        modifiers (Mapping[str, str]): Dependent vowel sign to Latin cluster.
        virama (str | None): Vowel killer sign, if any.
        inherent_vowel (str): Latin vowel implied by a bare consonant ('' for alphabets).
        max_glyph_len (int): Length of the longest native key.
    """

    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    modifiers: Mapping[str, str]
    virama: str | None
    inherent_vowel: str
    max_glyph_len: int

    @classmethod
    def from_block(cls, block: ScriptBlock) -> ReverseTable:
        """Invert a table. For glyphs with several Latin spellings the first listed spelling wins."""
        vowels: dict[str, str] = {}
        for latin, native in block.vowels.items():
            vowels.setdefault(native, latin)

        consonants: dict[str, str] = {}
        for latin, native in block.consonants.items():
            # A glyph that is also an independent vowel reads as the vowel
            if native not in vowels:
                consonants.setdefault(native, latin)

        modifiers: dict[str, str] = {}
        for latin, native in block.modifiers.items():
            if native:
                modifiers.setdefault(native, latin)

        inherent: str = "a" if block.modifiers.get("a") == "" else ""
        max_len: int = max(map(len, (*consonants, *vowels, *modifiers)), default=0)
        return cls(
            consonants=MappingProxyType(consonants),
            vowels=MappingProxyType(vowels),
            modifiers=MappingProxyType(modifiers),
            virama=block.virama,
            inherent_vowel=inherent,
            max_glyph_len=max_len,
        )


class ScriptTableStore:
    """Read-only collection of transliteration tables.

    Attributes:
        registry (LanguageRegistry): Registry used to resolve a language to its script family.
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        blocks: Iterable[ScriptBlock] = SCRIPT_BLOCKS,
        language_tables: Mapping[str, str] = LANGUAGE_TABLES,
    ) -> None:
        self.registry: LanguageRegistry = registry
        tables: dict[str, ScriptBlock] = {block.name: block for block in blocks}
        self._tables: Mapping[str, ScriptBlock] = MappingProxyType(tables)
        self._reverse: Mapping[str, ReverseTable] = MappingProxyType(
            {name: ReverseTable.from_block(block) for name, block in tables.items()}
        )
        self._language_tables: Mapping[str, str] = MappingProxyType(dict(language_tables))
        logger.debug("Loaded %d transliteration tables: %s", len(tables), ", ".join(tables))

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def table_name_for(self, language: str) -> str | None:
        """Return the name of the table serving a language, or None if it has none.

        Latin-script languages never have a table.
        """
        canonical: str = self.registry.normalize(language)
        override: str | None = self._language_tables.get(canonical)
        if override is not None:
            return override if override in self._tables else None
        script: str = self.registry.script_of(canonical)
        if script == "Latin":
            return None
        return script if script in self._tables else None

    def get_block(self, language: str) -> ScriptBlock | None:
        name: str | None = self.table_name_for(language)
        return self._tables[name] if name is not None else None

    def get_reverse(self, language: str) -> ReverseTable | None:
        name: str | None = self.table_name_for(language)
        return self._reverse[name] if name is not None else None
