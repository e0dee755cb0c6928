"""Priority queue for background translation work.

Pending tasks wait in one deque per priority tier and are dispatched high, normal, then low, FIFO
within a tier. At most ``concurrency_limit`` tasks run at once; each completion starts the next
pending task.

A task whose request key equals that of a pending or running task is not scheduled again. Its
caller gets a future of its own, resolved with the outcome of the earlier task, which moves up to
the higher of the two priorities while still pending. Every caller's future is resolved exactly
once and cancelling one caller's future never affects the others.
"""

from __future__ import annotations

import asyncio
from collections import deque
from typing import TYPE_CHECKING, ClassVar

from core.trans.interface import QueueTaskFailedError
from models.translation_models import PRIORITIES, TASK_KINDS
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Awaitable, Callable

    from models.translation_models import Priority, TranslationResult, TranslationTask

__all__: list[str] = ["TaskRunner", "TranslationQueue"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

type TaskRunner = Callable[[TranslationTask], Awaitable[TranslationResult]]
type RequestKey = tuple[str, str, str, str]


class TranslationQueue:
    """Bounded-concurrency scheduler running translation tasks on the event loop.

    Attributes:
        DEFAULT_CONCURRENCY_LIMIT (ClassVar[int]): Default number of concurrently running tasks.
    """

    DEFAULT_CONCURRENCY_LIMIT: ClassVar[int] = 5

    def __init__(self, runner: TaskRunner, concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT) -> None:
        """Initialize the queue.

        Args:
            runner (TaskRunner): Coroutine function producing the result of a task.
            concurrency_limit (int): Maximum number of concurrently running tasks.

        Raises:
            ValueError: If concurrency_limit is not positive.
        """
        if concurrency_limit <= 0:
            msg: str = f"concurrency_limit must be positive, got {concurrency_limit}"
            raise ValueError(msg)
        self._runner: TaskRunner = runner
        self._concurrency_limit: int = concurrency_limit
        self._pending: dict[str, deque[TranslationTask]] = {priority: deque() for priority in PRIORITIES}
        self._running: dict[asyncio.Task[None], TranslationTask] = {}
        # Scheduled task per request key, and the futures of callers coalesced into it
        self._scheduled: dict[RequestKey, TranslationTask] = {}
        self._followers: dict[str, list[asyncio.Future[TranslationResult]]] = {}
        self._coalesced_count: int = 0
        self._idle: asyncio.Event = asyncio.Event()
        self._idle.set()

    @property
    def concurrency_limit(self) -> int:
        return self._concurrency_limit

    @property
    def pending_count(self) -> int:
        return sum(len(tier) for tier in self._pending.values())

    @property
    def active_count(self) -> int:
        return len(self._running)

    @property
    def coalesced_count(self) -> int:
        """Number of enqueued tasks served by an identical scheduled task."""
        return self._coalesced_count

    def enqueue(self, task: TranslationTask) -> asyncio.Future[TranslationResult]:
        """Schedule a task without blocking. Must be called from the event loop thread.

        Args:
            task (TranslationTask): The task to schedule. Its future attribute is replaced.

        Returns:
            asyncio.Future[TranslationResult]: Future resolved with the task's result, or rejected with
            QueueTaskFailedError if the runner fails.

        Raises:
            ValueError: If the task's priority or kind is unknown.
            RuntimeError: If no event loop is running in the current thread.
        """
        msg: str
        if task.priority not in PRIORITIES:
            msg = f"Unknown priority '{task.priority}', expected one of {PRIORITIES}"
            raise ValueError(msg)
        if task.kind not in TASK_KINDS:
            msg = f"Unknown task kind '{task.kind}', expected one of {TASK_KINDS}"
            raise ValueError(msg)

        loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
        future: asyncio.Future[TranslationResult] = loop.create_future()
        task.future = future

        scheduled: TranslationTask | None = self._scheduled.get(task.request_key)
        if scheduled is not None:
            self._followers.setdefault(scheduled.task_id, []).append(future)
            self._promote(scheduled, task.priority)
            self._coalesced_count += 1
            logger.debug("Coalesced %s task %s into %s", task.kind, task.task_id[:8], scheduled.task_id[:8])
            return future

        self._scheduled[task.request_key] = task
        self._pending[task.priority].append(task)
        self._idle.clear()
        logger.debug("Enqueued %s task %s (priority=%s)", task.kind, task.task_id[:8], task.priority)
        self._dispatch()
        return future

    async def join(self) -> None:
        """Wait until no task is pending or running."""
        await self._idle.wait()

    async def clear(
        self, callback: Callable[[TranslationTask], None] | Callable[[TranslationTask], Awaitable[None]] | None = None
    ) -> int:
        """Cancel every pending task. Running tasks are unaffected.

        Args:
            callback (Callable[[TranslationTask], None] | Callable[[TranslationTask], Awaitable[None]] | None):
                Called with each removed task. May be synchronous or asynchronous.

        Returns:
            int: The number of tasks removed.
        """
        removed: list[TranslationTask] = []
        for tier in self._pending.values():
            removed.extend(tier)
            tier.clear()
        self._update_idle()

        for task in removed:
            for waiter in self._release(task):
                if not waiter.done():
                    waiter.cancel()
            if callback is not None:
                try:
                    result: Awaitable[None] | None = callback(task)
                    if asyncio.iscoroutine(result):
                        await result
                except Exception as err:  # noqa: BLE001
                    logger.error("Callback error for task %s: %r", task.task_id[:8], err)
        if removed:
            logger.info("Translation queue cleared (%d pending tasks cancelled)", len(removed))
        return len(removed)

    async def component_teardown(self) -> None:
        """Cancel pending and running tasks and wait for them to finish."""
        await self.clear()
        running: dict[asyncio.Task[None], TranslationTask] = dict(self._running)
        for worker in running:
            worker.cancel()
        if running:
            await asyncio.gather(*running, return_exceptions=True)
        # Workers cancelled before their first step never reach their own cleanup
        for task in running.values():
            for waiter in self._release(task):
                if not waiter.done():
                    waiter.cancel()
        self._running.clear()
        self._update_idle()
        logger.info("Translation queue shutdown completed")

    def _promote(self, task: TranslationTask, priority: Priority) -> None:
        if PRIORITIES.index(priority) >= PRIORITIES.index(task.priority):
            return
        tier: deque[TranslationTask] = self._pending[task.priority]
        if task not in tier:
            return
        tier.remove(task)
        logger.debug("Promoted task %s from %s to %s", task.task_id[:8], task.priority, priority)
        task.priority = priority
        self._pending[priority].append(task)

    def _waiters(self, task: TranslationTask) -> list[asyncio.Future[TranslationResult]]:
        waiters: list[asyncio.Future[TranslationResult]] = [] if task.future is None else [task.future]
        waiters.extend(self._followers.get(task.task_id, ()))
        return waiters

    def _release(self, task: TranslationTask) -> list[asyncio.Future[TranslationResult]]:
        """Stop coalescing into a task and return every future waiting on it."""
        waiters: list[asyncio.Future[TranslationResult]] = self._waiters(task)
        if self._scheduled.get(task.request_key) is task:
            del self._scheduled[task.request_key]
        self._followers.pop(task.task_id, None)
        return waiters

    def _next_pending(self) -> TranslationTask | None:
        for priority in PRIORITIES:
            tier: deque[TranslationTask] = self._pending[priority]
            while tier:
                task: TranslationTask = tier.popleft()
                waiters: list[asyncio.Future[TranslationResult]] = self._waiters(task)
                if waiters and all(waiter.cancelled() for waiter in waiters):
                    logger.debug("Skipping cancelled task %s", task.task_id[:8])
                    self._release(task)
                    continue
                return task
        return None

    def _dispatch(self) -> None:
        while len(self._running) < self._concurrency_limit:
            task: TranslationTask | None = self._next_pending()
            if task is None:
                break
            worker: asyncio.Task[None] = asyncio.create_task(self._run(task), name=f"translation-{task.task_id[:8]}")
            self._running[worker] = task
            worker.add_done_callback(self._on_worker_done)
            logger.debug("Dispatched task %s (active=%d)", task.task_id[:8], len(self._running))
        self._update_idle()

    def _on_worker_done(self, worker: asyncio.Task[None]) -> None:
        self._running.pop(worker, None)
        self._dispatch()

    def _update_idle(self) -> None:
        if not self._running and not self.pending_count:
            self._idle.set()
        else:
            self._idle.clear()

    async def _run(self, task: TranslationTask) -> None:
        waiter: asyncio.Future[TranslationResult]
        try:
            result: TranslationResult = await self._runner(task)
        except asyncio.CancelledError:
            for waiter in self._release(task):
                if not waiter.done():
                    waiter.cancel()
            raise
        except Exception as err:
            logger.warning("Translation task %s failed: %s", task.task_id[:8], err)
            failure: QueueTaskFailedError = QueueTaskFailedError(f"Translation task {task.task_id} failed: {err}")
            failure.__cause__ = err
            for waiter in self._release(task):
                if not waiter.done():
                    waiter.set_exception(failure)
        else:
            for waiter in self._release(task):
                if not waiter.done():
                    waiter.set_result(result)
