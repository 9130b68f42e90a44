"""Persistence collaborator contract and fire-and-forget save dispatch."""

import asyncio
import inspect
import logging
import threading
from typing import Protocol, runtime_checkable

from loggerfy.models import LogRecord

logger = logging.getLogger(__name__)

# Strong references to in-flight tasks so the event loop does not drop them.
_pending_tasks: set = set()
_pending_threads: set = set()
_threads_lock = threading.Lock()


@runtime_checkable
class LogRepository(Protocol):
    """Durable storage for finished records.

    Only ``save`` is required; it may be a plain method or a coroutine.
    Implementations may also offer ``get_by_id(record_id)`` and
    ``get_all(criteria)``, which the builder never calls.
    """

    def save(self, record: LogRecord): ...


def _run_save(repository, record: LogRecord):
    try:
        result = repository.save(record)
        if inspect.isawaitable(result):
            asyncio.run(_await(result))
    finally:
        with _threads_lock:
            _pending_threads.discard(threading.current_thread())


async def _await(awaitable):
    return await awaitable


def dispatch_save(repository, record: LogRecord):
    """Start repository.save(record) without waiting for it.

    Returns the asyncio.Task or threading.Thread carrying the save.
    """
    if inspect.iscoroutinefunction(repository.save):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is not None:
            task = loop.create_task(repository.save(record))
            _pending_tasks.add(task)
            task.add_done_callback(_pending_tasks.discard)
            logger.debug("Scheduled save of %s on running loop", record.id)
            return task

    t = threading.Thread(
        target=_run_save,
        args=(repository, record),
        name=f"loggerfy-save-{record.id}",
    )
    with _threads_lock:
        _pending_threads.add(t)
    t.start()
    logger.debug("Dispatched save of %s to worker thread", record.id)
    return t


def wait_for_saves(timeout: float | None = None) -> bool:
    """Join worker threads still running saves. Returns True if all finished.

    Saves scheduled as tasks on an event loop are not covered; await them on
    their loop instead.
    """
    with _threads_lock:
        threads = list(_pending_threads)
    for t in threads:
        t.join(timeout)
    return not any(t.is_alive() for t in threads)
