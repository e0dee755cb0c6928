"""Tests for TransManager."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.dictionary.store import PhraseTable
from core.shared_data import SharedData
from core.trans.interface import ExternalServiceUnavailableError
from models.config_models import Config
from models.translation_models import BatchMessage, TranslationResult, TranslationTask

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from core.trans.manager import TransManager
    from models.translation_models import ChatMessageViews, QueueStatus


@pytest.fixture
async def manager() -> AsyncIterator[TransManager]:
    config = Config()
    config.PREVIEW.DEBOUNCE_MS = 10
    shared_data = SharedData(config)
    await shared_data.async_init()
    yield shared_data.trans_manager
    await shared_data.component_teardown()


def _remote_engine(result: TranslationResult | None = None, error: Exception | None = None) -> MagicMock:
    engine = MagicMock()
    engine.is_available = True
    engine.translation = AsyncMock(return_value=result, side_effect=error)
    engine.close = AsyncMock()
    return engine


# Synchronous API


@pytest.mark.asyncio
async def test_sync_transforms(manager: TransManager) -> None:
    assert manager.transliterate("namaste", "hi") == "नमसते"
    assert manager.to_latin("नमस्ते", "hindi") == "namaste"
    assert manager.detect("నమస్కారం").language == "telugu"


@pytest.mark.asyncio
async def test_transliteration_corrects_romanised_spelling_first(manager: TransManager) -> None:
    expected: str = manager.transliterator.transliterate("dhanyavaad", "hindi")

    assert manager.transliterate("dhanyawad", "hi") == expected
    assert manager.transliterator.transliterate("dhanyawad", "hindi") != expected

    queued: TranslationResult = await manager.enqueue_transliteration("dhanyawad", "hindi")
    assert queued.text == expected
    assert queued.original_text == "dhanyawad"

    views: ChatMessageViews = await manager.process_message_for_chat("dhanyawad", "hindi", "english")
    assert views.sender_view == expected


@pytest.mark.asyncio
async def test_mostly_native_text_is_not_spell_corrected(manager: TransManager) -> None:
    assert manager.transliterate("नमस्ते दोस्त ap", "hindi") == "नमस्ते दोस्त ap"


@pytest.mark.asyncio
async def test_translate_uses_cache(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    original = PhraseTable.lookup

    def counting_lookup(self: PhraseTable, phrase: str) -> str | None:
        calls.append(phrase)
        return original(self, phrase)

    monkeypatch.setattr(PhraseTable, "lookup", counting_lookup)

    first: TranslationResult = manager.translate("thank you", "english", "hindi")
    lookups: int = len(calls)
    second: TranslationResult = manager.translate("thank you", "en", "hi")

    assert first.text == "धन्यवाद"
    assert second is first
    assert lookups > 0
    assert len(calls) == lookups


@pytest.mark.asyncio
async def test_texts_sharing_a_long_key_prefix_get_their_own_results(manager: TransManager) -> None:
    prefix: str = "thank you " * 10

    first: TranslationResult = manager.translate(prefix + "friend", "english", "hindi")
    second: TranslationResult = manager.translate(prefix + "water", "english", "hindi")

    assert manager.cache.make_key(prefix + "friend", "english", "hindi") == manager.cache.make_key(
        prefix + "water", "english", "hindi"
    )
    assert first.text.endswith("दोस्त")
    assert second.original_text == prefix + "water"
    assert second.text.endswith("पानी")


@pytest.mark.asyncio
async def test_case_variants_are_not_served_from_each_other(manager: TransManager) -> None:
    first: TranslationResult = manager.translate("thank you John", "english", "hindi")
    second: TranslationResult = manager.translate("thank you JOHN", "english", "hindi")
    queued: TranslationResult = await manager.enqueue_translation("Thank You john", "english", "hindi")

    assert first.text.endswith("John")
    assert second.original_text == "thank you JOHN"
    assert second.text.endswith("JOHN")
    assert queued.original_text == "Thank You john"
    assert queued.text.endswith("john")


@pytest.mark.asyncio
async def test_untranslated_results_are_not_cached(manager: TransManager) -> None:
    manager.translate("xyzzy", "english", "klingon")

    assert manager.cache.size == 0


# Queued API


@pytest.mark.asyncio
async def test_enqueue_translation(manager: TransManager) -> None:
    result: TranslationResult = await manager.enqueue_translation("hello", "english", "hindi", "high")

    assert result.text == "नमस्ते"
    assert manager.cache.get(manager.cache.make_key("hello", "english", "hindi")) == result


@pytest.mark.asyncio
async def test_enqueue_transliteration(manager: TransManager) -> None:
    result: TranslationResult = await manager.enqueue_transliteration("namaste", "hindi")

    assert result.text == "नमसते"
    assert result.method == "transliteration"
    assert result.source_language == result.target_language == "hindi"
    assert result.confidence == 1.0
    assert manager.cache.get(manager.cache.make_key("namaste", "*", "hindi")) == result


@pytest.mark.asyncio
async def test_transliteration_to_latin_language_passes_through(manager: TransManager) -> None:
    result: TranslationResult = await manager.enqueue_transliteration("namaste", "english")

    assert result == TranslationResult.passthrough("namaste", "english", "english")


@pytest.mark.asyncio
async def test_identical_requests_are_computed_once(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    computed: list[TranslationTask] = []
    original = manager._compute  # noqa: SLF001

    def counting_compute(task: TranslationTask) -> TranslationResult:
        computed.append(task)
        return original(task)

    monkeypatch.setattr(manager, "_compute", counting_compute)

    results: list[TranslationResult] = await asyncio.gather(
        manager.enqueue_translation("good night", "english", "hindi"),
        manager.enqueue_translation("good night", "en", "hindi"),
        manager.enqueue_translation("good night", "english", "hi", "high"),
    )

    assert len(computed) == 1
    assert {result.text for result in results} == {"शुभ रात्रि"}
    assert manager.queue.coalesced_count == 2


@pytest.mark.asyncio
async def test_enqueue_rejects_invalid_input(manager: TransManager) -> None:
    with pytest.raises(TypeError):
        manager.enqueue_translation(None, "english", "hindi")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="empty"):
        manager.enqueue_transliteration("namaste", "")


@pytest.mark.asyncio
async def test_translate_async_degrades_failures(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_compute(task: TranslationTask) -> TranslationResult:
        msg = f"dictionary unavailable for {task.target_language}"
        raise RuntimeError(msg)

    monkeypatch.setattr(manager, "_compute", failing_compute)

    result: TranslationResult = await manager.translate_async("hello", "english", "hindi")

    assert result.is_translated is False
    assert result.text == "hello"
    assert result.error is not None
    assert "dictionary unavailable for hindi" in result.error


@pytest.mark.asyncio
async def test_translate_async_degrades_cleared_tasks(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    gate = asyncio.Event()

    async def blocked_runner(task: TranslationTask) -> TranslationResult:
        await gate.wait()
        return TranslationResult.passthrough(task.text, task.source_language, task.target_language)

    monkeypatch.setattr(manager.queue, "_runner", blocked_runner)
    monkeypatch.setattr(manager.queue, "_concurrency_limit", 1)
    blocker: asyncio.Future[TranslationResult] = manager.enqueue_translation("first", "english", "hindi")
    waiting: asyncio.Task[TranslationResult] = asyncio.create_task(manager.translate_async("second", "en", "hi"))
    await asyncio.sleep(0)

    assert await manager.queue.clear() == 1
    result: TranslationResult = await waiting

    assert result.error == "translation cancelled"
    assert result.text == "second"
    gate.set()
    await blocker


# Remote fallback


@pytest.mark.asyncio
async def test_weak_local_result_uses_remote_engine(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    remote = TranslationResult(
        text="Qapla'",
        original_text="success",
        source_language="english",
        target_language="klingon",
        is_translated=True,
        confidence=1.0,
        method="remote",
    )
    engine: MagicMock = _remote_engine(remote)
    monkeypatch.setattr(manager, "_remote_engine", engine)

    result: TranslationResult = await manager.translate_async("success", "english", "klingon")

    assert result is remote
    engine.translation.assert_awaited_once_with("success", "english", "klingon")
    assert manager.cache.get(manager.cache.make_key("success", "english", "klingon")) is remote


@pytest.mark.asyncio
async def test_strong_local_result_skips_remote_engine(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    engine: MagicMock = _remote_engine()
    monkeypatch.setattr(manager, "_remote_engine", engine)

    result: TranslationResult = await manager.translate_async("thank you", "english", "hindi")

    assert result.text == "धन्यवाद"
    engine.translation.assert_not_awaited()


@pytest.mark.asyncio
async def test_remote_failure_keeps_local_result(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    engine: MagicMock = _remote_engine(error=ExternalServiceUnavailableError("down"))
    monkeypatch.setattr(manager, "_remote_engine", engine)

    result: TranslationResult = await manager.translate_async("success", "english", "klingon")

    assert result == TranslationResult.passthrough("success", "english", "klingon", confidence=0.5)
    engine.translation.assert_awaited_once()


@pytest.mark.asyncio
async def test_translate_in_background_calls_back(manager: TransManager) -> None:
    received: list[TranslationResult] = []

    task: asyncio.Task[None] = manager.translate_in_background("yes", "english", "hindi", received.append)
    await task

    assert [result.text for result in received] == ["हाँ"]


@pytest.mark.asyncio
async def test_translate_in_background_reports_rejected_input(manager: TransManager) -> None:
    received: list[TranslationResult] = []

    await manager.translate_in_background(
        "yes", "english", "hindi", received.append, priority="urgent"  # type: ignore[arg-type]
    )

    assert received[0].is_translated is False
    assert received[0].error is not None


# Batch and chat


@pytest.mark.asyncio
async def test_batch_translate(manager: TransManager) -> None:
    messages: list[BatchMessage] = [
        BatchMessage(message_id="1", text="धन्यवाद", sender_id="asha"),
        BatchMessage(message_id="2", text="thank you", sender_id="me"),
        BatchMessage(message_id="3", text="पानी", sender_id="asha"),
    ]

    results: dict[str, TranslationResult] = await manager.batch_translate(messages, "me", "hindi", "english")

    assert set(results) == {"1", "2", "3"}
    assert results["1"].text == "thank you"
    assert results["2"] == TranslationResult.passthrough("thank you", "hindi", "english", confidence=1.0)
    assert results["3"].text == "water"


@pytest.mark.asyncio
async def test_batch_translate_same_language_passes_through(manager: TransManager) -> None:
    messages: list[BatchMessage] = [BatchMessage(message_id="1", text="hello", sender_id="asha")]

    results: dict[str, TranslationResult] = await manager.batch_translate(messages, "me", "en", "english")

    assert results["1"].is_translated is False
    assert results["1"].confidence == 1.0


@pytest.mark.asyncio
async def test_batch_translate_degrades_failed_messages(manager: TransManager, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_compute(task: TranslationTask) -> TranslationResult:
        msg = "broken"
        raise RuntimeError(msg)

    monkeypatch.setattr(manager, "_compute", failing_compute)
    messages: list[BatchMessage] = [BatchMessage(message_id="1", text="धन्यवाद", sender_id="asha")]

    results: dict[str, TranslationResult] = await manager.batch_translate(messages, "me", "hindi", "english")

    assert results["1"].text == "धन्यवाद"
    assert results["1"].error is not None


@pytest.mark.asyncio
async def test_batch_translate_rejects_invalid_message_before_queuing(manager: TransManager) -> None:
    messages: list[BatchMessage] = [
        BatchMessage(message_id="1", text="धन्यवाद", sender_id="asha"),
        BatchMessage(message_id="2", text=None, sender_id="asha"),  # type: ignore[arg-type]
    ]

    with pytest.raises(TypeError, match="must be str"):
        await manager.batch_translate(messages, "me", "hindi", "english")

    assert manager.queue.pending_count == 0
    assert manager.queue.active_count == 0


@pytest.mark.asyncio
async def test_chat_message_is_transliterated_for_sender_and_translated_for_receiver(manager: TransManager) -> None:
    views: ChatMessageViews = await manager.process_message_for_chat("namaste", "hindi", "english")

    assert views.original_text == "namaste"
    assert views.sender_view == "नमसते"
    assert views.was_transliterated is True
    assert views.receiver_view == "namasate"
    assert views.was_translated is True


@pytest.mark.asyncio
async def test_chat_message_from_latin_sender(manager: TransManager) -> None:
    views: ChatMessageViews = await manager.process_message_for_chat("thank you", "english", "hindi")

    assert views.sender_view == "thank you"
    assert views.was_transliterated is False
    assert views.receiver_view == "धन्यवाद"


@pytest.mark.asyncio
async def test_chat_message_typed_in_native_script(manager: TransManager) -> None:
    views: ChatMessageViews = await manager.process_message_for_chat("धन्यवाद", "hindi", "english")

    assert views.sender_view == "धन्यवाद"
    assert views.was_transliterated is False
    assert views.receiver_view == "thank you"


@pytest.mark.asyncio
async def test_chat_message_between_same_language(manager: TransManager) -> None:
    views: ChatMessageViews = await manager.process_message_for_chat("namaste", "hi", "hindi")

    assert views.sender_view == views.receiver_view == "नमसते"
    assert views.was_translated is False


# Maintenance


@pytest.mark.asyncio
async def test_status_statistics_and_clear(manager: TransManager) -> None:
    await manager.enqueue_translation("hello", "english", "hindi")
    manager.translate("hello", "english", "hindi")

    status: QueueStatus = manager.get_queue_status()
    assert status.pending == 0
    assert status.concurrency_limit == 5
    assert status.cache_size == 1
    assert manager.cache_statistics().total_hits == 1

    manager.clear_cache()
    assert manager.get_queue_status().cache_size == 0


@pytest.mark.asyncio
async def test_create_preview_debouncer_uses_config(manager: TransManager) -> None:
    debouncer = manager.create_preview_debouncer()

    assert debouncer.debounce_ms == 10
    assert debouncer.priority == "normal"
    assert debouncer.manager is manager
