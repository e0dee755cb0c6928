"""Shared data management for engine components.

This module defines the SharedData class, the wiring container that constructs the immutable language
data, tables and dictionaries once at start-up and injects them into the translation components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.cache.manager import ResultCache
from core.dictionary.corrections import SpellCorrector
from core.dictionary.store import PhraseDictionaryStore
from core.script.registry import LanguageRegistry
from core.script.tables import ScriptTableStore
from core.script.transliterator import Transliterator
from core.trans.manager import TransManager
from core.trans.pivot import PivotTranslator
from utils.file_utils import FileUtils

if TYPE_CHECKING:
    from pathlib import Path

    from config.loader import Config


__all__: list[str] = ["SharedData"]


@dataclass
class SharedData:
    _config: Config = field()
    _registry: LanguageRegistry = field(init=False)
    _tables: ScriptTableStore = field(init=False)
    _transliterator: Transliterator = field(init=False)
    _dictionaries: PhraseDictionaryStore = field(init=False)
    _corrector: SpellCorrector = field(init=False)
    _pivot: PivotTranslator = field(init=False)
    _cache: ResultCache = field(init=False)
    _trans_manager: TransManager | None = field(init=False, default=None)

    async def async_init(self) -> None:
        """Build every component and load the translation manager.

        Raises:
            FileUtilsError: If a configured phrase dictionary file is missing or not JSON.
            OSError: If a phrase dictionary file cannot be read.
            RuntimeError: If a phrase dictionary file is malformed.
        """
        config: Config = self.config
        extra_files: list[Path] = FileUtils.resolve_files(
            config.DICTIONARY.PATH, config.DICTIONARY.PHRASE_DIC, suffix=".json"
        )

        self._registry = LanguageRegistry()
        self._tables = ScriptTableStore(self._registry)
        self._transliterator = Transliterator(self._tables)
        self._dictionaries = PhraseDictionaryStore(self._registry, extra_files=extra_files)
        self._corrector = SpellCorrector(self._registry)
        self._pivot = PivotTranslator(
            self._registry,
            self._dictionaries,
            self._transliterator,
            fallback_confidence=config.TRANSLATION.FALLBACK_CONFIDENCE,
            corrector=self._corrector,
        )
        self._cache = ResultCache(
            ttl_sec=config.CACHE.TTL_SEC,
            max_entries=config.CACHE.MAX_ENTRIES,
            key_text_length=config.CACHE.KEY_TEXT_LENGTH,
        )
        self._trans_manager = TransManager(
            config,
            self._registry,
            self._transliterator,
            self._pivot,
            self._cache,
            self._corrector,
        )
        await self._trans_manager.component_load()

    async def component_teardown(self) -> None:
        """Shut down the translation manager. Does nothing before async_init."""
        if self._trans_manager is None:
            return
        await self._trans_manager.component_teardown()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    @property
    def tables(self) -> ScriptTableStore:
        return self._tables

    @property
    def transliterator(self) -> Transliterator:
        return self._transliterator

    @property
    def dictionaries(self) -> PhraseDictionaryStore:
        return self._dictionaries

    @property
    def pivot(self) -> PivotTranslator:
        return self._pivot

    @property
    def cache(self) -> ResultCache:
        return self._cache

    @property
    def corrector(self) -> SpellCorrector:
        return self._corrector

    @property
    def trans_manager(self) -> TransManager:
        if self._trans_manager is None:
            msg: str = "SharedData is not initialized, await async_init() first"
            raise RuntimeError(msg)
        return self._trans_manager
