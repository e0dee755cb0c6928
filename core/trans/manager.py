"""Translation and transliteration engine facade.

Exposes the synchronous transform API, the queued API backed by TranslationQueue, batch and chat
helpers, and the optional network fallback through a registered TransInterface engine.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar, cast

from core.script.detector import ScriptDetector
from core.trans.engines import RemoteServiceTranslation  # noqa: F401
from core.trans.interface import ExternalServiceUnavailableError, TransInterface, TranslateExceptionError
from core.trans.preview import LivePreviewDebouncer
from core.trans.queue import TranslationQueue
from models.translation_models import ChatMessageViews, QueueStatus, TranslationResult, TranslationTask
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Iterable

    from config.loader import Config
    from core.cache.manager import ResultCache
    from core.dictionary.corrections import SpellCorrector
    from core.script.registry import LanguageRegistry
    from core.script.transliterator import Transliterator
    from core.trans.pivot import PivotTranslator
    from models.cache_models import CacheStatistics
    from models.language_models import DetectionResult
    from models.translation_models import BatchMessage, Priority


__all__: list[str] = ["TransManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TransManager:
    """Facade over detection, transliteration, pivot translation, caching and queuing.

    Attributes:
        TRANSLITERATION_SOURCE (ClassVar[str]): Source marker used in cache keys of transliterations.
        config (Config): Application configuration.
        registry (LanguageRegistry): Language resolution.
        transliterator (Transliterator): Script converter.
        pivot (PivotTranslator): Dictionary pivot translator.
        cache (ResultCache): Result cache.
        corrector (SpellCorrector | None): Spell correction applied before transliteration.
        queue (TranslationQueue): Background task queue.
    """

    TRANSLITERATION_SOURCE: ClassVar[str] = "*"

    def __init__(
        self,
        config: Config,
        registry: LanguageRegistry,
        transliterator: Transliterator,
        pivot: PivotTranslator,
        cache: ResultCache,
        corrector: SpellCorrector | None = None,
    ) -> None:
        self.config: Config = config
        self.registry: LanguageRegistry = registry
        self.transliterator: Transliterator = transliterator
        self.pivot: PivotTranslator = pivot
        self.cache: ResultCache = cache
        self.corrector: SpellCorrector | None = corrector
        self.queue: TranslationQueue = TranslationQueue(self._run_task, config.QUEUE.CONCURRENCY_LIMIT)
        self._remote_engine: TransInterface | None = None
        self._background_tasks: set[asyncio.Task[None]] = set()
        logger.debug("Registered translation engines: %s", TransInterface.registered)

    @property
    def remote_engine(self) -> TransInterface | None:
        return self._remote_engine

    async def component_load(self) -> None:
        """Initialize the cache and the remote engine when enabled."""
        logger.info("TransManager initialization started")
        await self.cache.component_load()
        if self.config.REMOTE.ENABLED:
            self._remote_engine = self._load_remote_engine(self.config.REMOTE.ENGINE)
        logger.info("TransManager initialized")

    async def component_teardown(self) -> None:
        """Cancel queued and background work and release resources."""
        logger.info("TransManager shutdown started")
        for task in list(self._background_tasks):
            task.cancel()
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)
        await self.queue.component_teardown()
        if self._remote_engine is not None:
            await self._remote_engine.close()
            self._remote_engine = None
        await self.cache.component_teardown()
        logger.info("TransManager shutdown completed")

    def _load_remote_engine(self, name: str) -> TransInterface | None:
        engine_cls: type[TransInterface] | None = TransInterface.registered.get(name)
        if engine_cls is None:
            logger.critical("Translation class not found: '%s'", name)
            return None
        instance: TransInterface = engine_cls()
        try:
            instance.initialize(self.config)
        except RuntimeError as err:
            logger.critical("RuntimeError in '%s' translation setup: %s", name, err)
            return None
        except TranslateExceptionError as err:
            logger.critical("Exception in '%s' translation setup: %s", name, err)
            return None
        logger.info("Translation engine initialized: '%s'", name)
        logger.debug("Engine attributes: %s", instance.engine_attributes)
        return instance

    # Synchronous transform API

    def detect(self, text: str) -> DetectionResult:
        return ScriptDetector.detect(text)

    def transliterate(self, text: str, target_language: str) -> str:
        """Spell correct romanised text, then convert it into the target language's script."""
        return self.transliterator.transliterate(self._correct(text, target_language), target_language)

    def to_latin(self, text: str, language: str) -> str:
        """Romanise native-script text of the given language."""
        return self.transliterator.to_latin(text, language)

    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """Translate text through the cache and the pivot translator. Never uses the network.

        Args:
            text (str): Text to translate.
            source_language (str): Source language identifier.
            target_language (str): Target language identifier.

        Returns:
            TranslationResult: The cached or freshly computed result.
        """
        text = StringUtils.require_str(text)
        source: str = self.registry.normalize(source_language)
        target: str = self.registry.normalize(target_language)
        key: str = self.cache.make_key(text, source, target)
        cached: TranslationResult | None = self.cache.get(key, text)
        if cached is not None:
            return cached
        result: TranslationResult = self.pivot.translate(text, source, target)
        if result.is_translated:
            self.cache.set(key, result)
        return result

    def _correct(self, text: str, language: str) -> str:
        text = StringUtils.require_str(text)
        if self.corrector is None or not ScriptDetector.is_latin_text(text):
            return text
        return self.corrector.correct(text, language)

    def _transliteration_result(self, text: str, target: str) -> TranslationResult:
        corrected: str = self._correct(text, target)
        output: str = self.transliterator.transliterate(corrected, target)
        if output in {text, corrected}:
            return TranslationResult.passthrough(text, target, target)
        return TranslationResult(
            text=output,
            original_text=text,
            source_language=target,
            target_language=target,
            is_translated=True,
            confidence=1.0,
            method="transliteration",
        )

    # Queued API

    def enqueue_translation(
        self, text: str, source_language: str, target_language: str, priority: Priority = "normal"
    ) -> asyncio.Future[TranslationResult]:
        """Schedule a pivot translation. Must be called from the event loop thread.

        Raises:
            TypeError: If text is not a string.
            ValueError: If a language identifier is empty or the priority is unknown.
        """
        task: TranslationTask = TranslationTask(
            text=StringUtils.require_str(text),
            source_language=self.registry.normalize(source_language),
            target_language=self.registry.normalize(target_language),
            priority=priority,
            kind="translate",
        )
        return self.queue.enqueue(task)

    def enqueue_transliteration(
        self, text: str, target_language: str, priority: Priority = "normal"
    ) -> asyncio.Future[TranslationResult]:
        """Schedule a transliteration. Must be called from the event loop thread.

        Raises:
            TypeError: If text is not a string.
            ValueError: If the target language is empty or the priority is unknown.
        """
        target: str = self.registry.normalize(target_language)
        task: TranslationTask = TranslationTask(
            text=StringUtils.require_str(text),
            source_language=target,
            target_language=target,
            priority=priority,
            kind="transliterate",
        )
        return self.queue.enqueue(task)

    async def translate_async(
        self, text: str, source_language: str, target_language: str, priority: Priority = "normal"
    ) -> TranslationResult:
        """Translate through the queue, then consult the network fallback when the local result is weak.

        Failures are absorbed: the result then carries the original text and an error description.

        Returns:
            TranslationResult: The best available result.
        """
        future: asyncio.Future[TranslationResult] = self.enqueue_translation(
            text, source_language, target_language, priority
        )
        source: str = self.registry.normalize(source_language)
        target: str = self.registry.normalize(target_language)
        try:
            result: TranslationResult = await future
        except TranslateExceptionError as err:
            logger.warning("Queued translation failed: %s", err)
            return TranslationResult.passthrough(text, source, target, error=str(err))
        except asyncio.CancelledError:
            current: asyncio.Task[object] | None = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            logger.info("Queued translation was cancelled before it ran")
            return TranslationResult.passthrough(text, source, target, error="translation cancelled")
        return await self._apply_remote_fallback(result)

    def translate_in_background(
        self,
        text: str,
        source_language: str,
        target_language: str,
        on_complete: Callable[[TranslationResult], None],
        priority: Priority = "normal",
    ) -> asyncio.Task[None]:
        """Translate without waiting. on_complete always receives a result.

        Returns:
            asyncio.Task[None]: The background task, cancellable by the caller.
        """
        source: str = self.registry.normalize(source_language)
        target: str = self.registry.normalize(target_language)

        async def _worker() -> None:
            try:
                result: TranslationResult = await self.translate_async(text, source, target, priority)
            except (TypeError, ValueError) as err:
                logger.error("Background translation rejected: %s", err)
                result = TranslationResult.passthrough(text, source, target, error=str(err))
            try:
                on_complete(result)
            except Exception as err:  # noqa: BLE001
                logger.error("Background translation callback failed: %r", err)

        task: asyncio.Task[None] = asyncio.create_task(_worker(), name="translation-background")
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        return task

    def create_preview_debouncer(self) -> LivePreviewDebouncer:
        """Create a live preview debouncer bound to this manager."""
        return LivePreviewDebouncer(
            self,
            debounce_ms=self.config.PREVIEW.DEBOUNCE_MS,
            priority=cast("Priority", self.config.TRANSLATION.PREVIEW_PRIORITY),
        )

    async def _run_task(self, task: TranslationTask) -> TranslationResult:
        """Queue runner: cache check, then the pure work in a worker thread."""
        key: str = self._task_key(task)
        cached: TranslationResult | None = self.cache.get(key, task.text)
        if cached is not None:
            return cached
        result: TranslationResult = await asyncio.to_thread(self._compute, task)
        if result.is_translated:
            self.cache.set(key, result)
        return result

    def _task_key(self, task: TranslationTask) -> str:
        if task.kind == "transliterate":
            return self.cache.make_key(task.text, self.TRANSLITERATION_SOURCE, task.target_language)
        return self.cache.make_key(task.text, task.source_language, task.target_language)

    def _compute(self, task: TranslationTask) -> TranslationResult:
        if task.kind == "transliterate":
            return self._transliteration_result(task.text, task.target_language)
        return self.pivot.translate(task.text, task.source_language, task.target_language)

    def _needs_remote(self, result: TranslationResult) -> bool:
        if self._remote_engine is None or not self._remote_engine.is_available:
            return False
        if result.source_language == result.target_language or not result.original_text.strip():
            return False
        return not result.is_translated or result.confidence < self.config.REMOTE.MIN_CONFIDENCE

    async def _apply_remote_fallback(self, result: TranslationResult) -> TranslationResult:
        if not self._needs_remote(result) or self._remote_engine is None:
            return result
        try:
            remote: TranslationResult = await self._remote_engine.translation(
                result.original_text, result.source_language, result.target_language
            )
        except ExternalServiceUnavailableError as err:
            logger.warning("Remote fallback unavailable, keeping local result: %s", err)
            return result
        if not remote.is_translated:
            return result
        key: str = self.cache.make_key(result.original_text, result.source_language, result.target_language)
        self.cache.set(key, remote)
        return remote

    # Batch and chat API

    async def batch_translate(
        self,
        messages: Iterable[BatchMessage],
        current_user_id: str,
        source_language: str,
        target_language: str,
    ) -> dict[str, TranslationResult]:
        """Translate a page of chat messages for the current user.

        The user's own messages and same-language pairs pass through. Others are queued with the
        batch priority and awaited together; the queue bounds their concurrency.

        Args:
            messages (Iterable[BatchMessage]): Messages to translate.
            current_user_id (str): The reading user; their own messages are not translated.
            source_language (str): Language of the other participant.
            target_language (str): Language of the reading user.

        Returns:
            dict[str, TranslationResult]: Results keyed by message id. Failed messages carry the
            original text and an error description.

        Raises:
            TypeError: If any message text is not a string. Nothing is queued in that case.
        """
        source: str = self.registry.normalize(source_language)
        target: str = self.registry.normalize(target_language)
        priority: Priority = cast("Priority", self.config.TRANSLATION.BATCH_PRIORITY)
        batch: list[BatchMessage] = list(messages)
        for message in batch:
            StringUtils.require_str(message.text)

        results: dict[str, TranslationResult] = {}
        pending: dict[str, asyncio.Future[TranslationResult]] = {}
        originals: dict[str, str] = {}
        for message in batch:
            if message.sender_id == current_user_id or source == target:
                results[message.message_id] = TranslationResult.passthrough(
                    message.text, source, target, confidence=1.0
                )
                continue
            originals[message.message_id] = message.text
            pending[message.message_id] = self.enqueue_translation(message.text, source, target, priority)

        outcomes: list[TranslationResult | BaseException] = await asyncio.gather(
            *pending.values(), return_exceptions=True
        )
        for message_id, outcome in zip(pending, outcomes, strict=True):
            if isinstance(outcome, TranslationResult):
                results[message_id] = outcome
                continue
            if not isinstance(outcome, (Exception, asyncio.CancelledError)):
                raise outcome
            logger.warning("Batch translation failed for message %s: %s", message_id, outcome)
            results[message_id] = TranslationResult.passthrough(
                originals[message_id], source, target, error=str(outcome) or type(outcome).__name__
            )
        return results

    async def process_message_for_chat(
        self, text: str, sender_language: str, receiver_language: str
    ) -> ChatMessageViews:
        """Render a sent message for the sender and the receiver.

        Args:
            text (str): Text as typed by the sender.
            sender_language (str): Sender's language.
            receiver_language (str): Receiver's language.

        Returns:
            ChatMessageViews: The sender's native-script view and the receiver's translated view.
        """
        text = StringUtils.require_str(text)
        sender: str = self.registry.normalize(sender_language)
        receiver: str = self.registry.normalize(receiver_language)

        sender_view: str = text
        if self.registry.needs_script_conversion(sender) and ScriptDetector.is_latin_text(text):
            sender_view = self.transliterate(text, sender)

        if sender == receiver:
            return ChatMessageViews(
                original_text=text,
                sender_view=sender_view,
                receiver_view=sender_view,
                was_transliterated=sender_view != text,
                was_translated=False,
            )

        result: TranslationResult = await self.translate_async(sender_view, sender, receiver)
        return ChatMessageViews(
            original_text=text,
            sender_view=sender_view,
            receiver_view=result.text,
            was_transliterated=sender_view != text,
            was_translated=result.is_translated,
        )

    # Maintenance

    def get_queue_status(self) -> QueueStatus:
        return QueueStatus(
            pending=self.queue.pending_count,
            active=self.queue.active_count,
            concurrency_limit=self.queue.concurrency_limit,
            cache_size=self.cache.size,
        )

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_statistics(self) -> CacheStatistics:
        return self.cache.statistics()
