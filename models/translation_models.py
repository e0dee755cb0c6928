"""Models for translation-related data.

Defines the immutable TranslationResult, the queued TranslationTask, and the small value objects
returned by the batch, chat, queue and preview APIs.
"""

from __future__ import annotations

import asyncio
import time
import uuid
from dataclasses import dataclass, field
from typing import Final, Literal

__all__: list[str] = [
    "PRIORITIES",
    "TASK_KINDS",
    "BatchMessage",
    "ChatMessageViews",
    "Priority",
    "PreviewState",
    "QueueStatus",
    "TaskKind",
    "TranslationMethod",
    "TranslationResult",
    "TranslationTask",
]

type Priority = Literal["high", "normal", "low"]
type TaskKind = Literal["translate", "transliterate"]
type TranslationMethod = Literal["passthrough", "dictionary", "transliteration", "romanization", "remote"]

# Dispatch order, highest first
PRIORITIES: Final[tuple[str, ...]] = ("high", "normal", "low")
TASK_KINDS: Final[tuple[str, ...]] = ("translate", "transliterate")


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of a translation or transliteration request.

    When is_translated is False, text equals original_text.

    Attributes:
        text (str): Output text.
        original_text (str): Input text.
        source_language (str): Canonical source language.
        target_language (str): Canonical target language.
        is_translated (bool): Whether the output differs from the input.
        confidence (float): Confidence of the output (0.0 to 1.0).
        method (TranslationMethod): How the output was produced.
        error (str | None): Failure description for degraded results.
    """

    text: str
    original_text: str
    source_language: str
    target_language: str
    is_translated: bool = False
    confidence: float = 0.0
    method: TranslationMethod = "passthrough"
    error: str | None = None

    @classmethod
    def passthrough(
        cls,
        text: str,
        source_language: str,
        target_language: str,
        *,
        confidence: float = 0.0,
        error: str | None = None,
    ) -> TranslationResult:
        """Create an untranslated result that returns the input unchanged."""
        return cls(
            text=text,
            original_text=text,
            source_language=source_language,
            target_language=target_language,
            is_translated=False,
            confidence=confidence,
            method="passthrough",
            error=error,
        )


@dataclass
class TranslationTask:
    """Unit of work scheduled on the translation queue.

    The outcome future is attached by the queue on enqueue and resolved exactly once.

    Attributes:
        text (str): Text to process.
        source_language (str): Source language (ignored for transliteration).
        target_language (str): Target language.
        priority (Priority): Dispatch tier.
        kind (TaskKind): 'translate' or 'transliterate'.
        task_id (str): Unique identifier.
        enqueued_at (float): Monotonic enqueue time in seconds.
        future (asyncio.Future[TranslationResult] | None): Outcome future.
    """

    text: str
    source_language: str
    target_language: str
    priority: Priority = "normal"
    kind: TaskKind = "translate"
    task_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    enqueued_at: float = field(default_factory=time.monotonic)
    future: asyncio.Future[TranslationResult] | None = field(default=None, repr=False, compare=False)

    @property
    def request_key(self) -> tuple[str, str, str, str]:
        """Exact identity of the requested work. Tasks with equal keys produce equal results."""
        return (self.kind, self.text, self.source_language, self.target_language)


@dataclass(frozen=True)
class BatchMessage:
    """A chat message submitted to batch translation.

    Attributes:
        message_id (str): Message identifier, the key of the batch result.
        text (str): Message text.
        sender_id (str): Identifier of the sending user.
    """

    message_id: str
    text: str
    sender_id: str


@dataclass(frozen=True)
class ChatMessageViews:
    """Renderings of one chat message for both participants.

    Attributes:
        original_text (str): Text as typed.
        sender_view (str): Text shown to the sender, in the sender's script.
        receiver_view (str): Text shown to the receiver, in the receiver's language.
        was_transliterated (bool): Whether the sender view differs from the typed text.
        was_translated (bool): Whether the receiver view is a translation.
    """

    original_text: str
    sender_view: str
    receiver_view: str
    was_transliterated: bool = False
    was_translated: bool = False


@dataclass(frozen=True)
class QueueStatus:
    """Snapshot of the translation queue.

    Attributes:
        pending (int): Tasks waiting for dispatch.
        active (int): Tasks currently running.
        concurrency_limit (int): Maximum number of concurrently running tasks.
        cache_size (int): Number of entries in the result cache.
    """

    pending: int
    active: int
    concurrency_limit: int
    cache_size: int


@dataclass(frozen=True)
class PreviewState:
    """Live preview shown under the input box.

    Attributes:
        text (str): Preview text, empty when there is nothing to show.
        is_loading (bool): Whether an evaluation is scheduled or running.
    """

    text: str = ""
    is_loading: bool = False
