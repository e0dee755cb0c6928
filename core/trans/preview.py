"""Live transliteration preview for the chat input box.

Each keystroke calls ``update``. The pending evaluation is cancelled and a new one is scheduled after
the debounce delay, so only the last text typed within the delay is evaluated. A generation counter
guards against late results: an evaluation only publishes if no newer update or cancel happened.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar

from core.script.detector import ScriptDetector
from core.trans.interface import TranslateExceptionError
from models.translation_models import PreviewState
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from core.trans.manager import TransManager
    from models.translation_models import Priority, TranslationResult

__all__: list[str] = ["LivePreviewDebouncer"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class LivePreviewDebouncer:
    """Debounced, cancellable preview of the native-script rendering of typed text.

    Attributes:
        DEFAULT_DEBOUNCE_MS (ClassVar[int]): Default debounce delay in milliseconds.
        manager (TransManager): Engine used for the queued transliteration.
        debounce_ms (int): Debounce delay in milliseconds.
        priority (Priority): Queue priority of preview evaluations.
        evaluation_count (int): Number of evaluations that reached the engine.
    """

    DEFAULT_DEBOUNCE_MS: ClassVar[int] = 300

    def __init__(
        self,
        manager: TransManager,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        priority: Priority = "normal",
    ) -> None:
        if debounce_ms < 0:
            msg: str = f"debounce_ms must not be negative, got {debounce_ms}"
            raise ValueError(msg)
        self.manager: TransManager = manager
        self.debounce_ms: int = debounce_ms
        self.priority: Priority = priority
        self.evaluation_count: int = 0
        self._state: PreviewState = PreviewState()
        self._generation: int = 0
        self._pending: asyncio.Task[None] | None = None
        self._subscribers: list[Callable[[PreviewState], None]] = []

    @property
    def generation(self) -> int:
        return self._generation

    def get_preview(self) -> PreviewState:
        return self._state

    def subscribe(self, callback: Callable[[PreviewState], None]) -> None:
        """Register an observer called with every new preview state."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[PreviewState], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def update(self, text: str, target_language: str) -> None:
        """Handle a change of the input text. Must be called from the event loop thread.

        Args:
            text (str): Current content of the input box.
            target_language (str): Language whose script the preview is rendered in.

        Raises:
            TypeError: If text is not a string.
            ValueError: If target_language is empty.
        """
        text = StringUtils.require_str(text)
        target: str = self.manager.registry.normalize(target_language)
        self._cancel_pending()
        self._generation += 1

        convertible: bool = self.manager.registry.needs_script_conversion(target)
        if not text.strip() or not convertible or not ScriptDetector.is_latin_text(text):
            self._set_state(PreviewState())
            return

        self._set_state(PreviewState(text=self._state.text, is_loading=True))
        self._pending = asyncio.create_task(self._evaluate(text, target, self._generation), name="preview-debounce")

    def cancel(self) -> None:
        """Drop the scheduled evaluation and any result still in flight, and clear the preview."""
        self._cancel_pending()
        self._generation += 1
        self._set_state(PreviewState())

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def _evaluate(self, text: str, target: str, generation: int) -> None:
        await asyncio.sleep(self.debounce_ms / 1000)
        if generation != self._generation:
            return

        self.evaluation_count += 1
        logger.debug("Preview evaluation #%d for generation %d", self.evaluation_count, generation)
        result: TranslationResult | None = None
        try:
            result = await self.manager.enqueue_transliteration(text, target, self.priority)
        except asyncio.CancelledError:
            current: asyncio.Task[object] | None = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            logger.debug("Preview task was cancelled by the queue")
        except TranslateExceptionError as err:
            logger.warning("Preview evaluation failed: %s", err)

        if generation != self._generation:
            return
        if result is not None and result.is_translated:
            self._set_state(PreviewState(text=result.text, is_loading=False))
        else:
            self._set_state(PreviewState())

    def _set_state(self, state: PreviewState) -> None:
        if state == self._state:
            return
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception as err:  # noqa: BLE001
                logger.error("Preview subscriber error: %r", err)
