"""
Debounced auto-save.

Coalesces a burst of edits into one save call after a quiet period. The
content to save is read through ``get_content`` when the timer fires, never
captured when it is armed, so the newest edit is always the one persisted.
"""
import asyncio
from typing import Any, Awaitable, Callable, Generic, Optional, Set, TypeVar

from ..core.config import AUTOSAVE_DELAY_SECONDS
from ..core.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class DebouncedSaveController(Generic[T]):
    """
    One pending-save timer for one editing session.

    Args:
        save: Coroutine function persisting the content
        get_content: Returns the current content at call time
        delay: Quiet period in seconds; every ``touch`` restarts it
        on_error: Called with the exception when a save fails (no retry)

    Saves already in flight are not waited on by later ones; if two overlap
    the store's last write wins.
    """

    def __init__(
        self,
        save: Callable[[T], Awaitable[Any]],
        get_content: Callable[[], T],
        delay: float = AUTOSAVE_DELAY_SECONDS,
        on_error: Optional[Callable[[BaseException], None]] = None
    ):
        self._save = save
        self._get_content = get_content
        self.delay = delay
        self._on_error = on_error
        self._handle: Optional[asyncio.TimerHandle] = None
        self._in_flight: Set[asyncio.Task] = set()
        self._closed = False
        self.save_count = 0

    @property
    def pending(self) -> bool:
        """Whether a save is scheduled but has not fired yet."""
        return self._handle is not None

    def touch(self) -> None:
        """Record a local change and restart the quiet period."""
        if self._closed:
            raise RuntimeError("Auto-save controller is closed")
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending save, if any, without saving."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def flush(self) -> None:
        """Save now if a save is pending."""
        if self._handle is None:
            return
        self.cancel()
        await self._run_save(self._get_content())

    async def close(self, flush: bool = True) -> None:
        """
        Tear the session down.

        With ``flush`` a pending save runs before closing; without it the
        pending edit is discarded.
        """
        if flush:
            await self.flush()
        else:
            if self.pending:
                logger.warning("Closing auto-save with an unsaved pending edit")
            self.cancel()
        self._closed = True

    async def wait_idle(self) -> None:
        """Wait for saves already in flight to finish."""
        if self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    def _fire(self) -> None:
        self._handle = None
        content = self._get_content()
        task = asyncio.ensure_future(self._run_save(content))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _run_save(self, content: T) -> None:
        try:
            await self._save(content)
        except Exception as e:
            logger.error(f"Auto-save failed: {e}")
            if self._on_error is not None:
                self._on_error(e)
            return
        self.save_count += 1
        logger.debug("Auto-save completed")
