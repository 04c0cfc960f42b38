"""
CompletionTracker - outstanding-work counter with a single-fire signal.

The walker registers every visit before the visit can start and completes it
only after the visit and its whole subtree are done, so the count can only
reach zero once, when the root finishes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class CompletionTracker:
    """Count outstanding operations and fire once when none remain."""

    def __init__(self, on_complete: Optional[Callable[[], None]] = None):
        self._outstanding = 0
        self._registered = 0
        self._fired = False
        self._event = asyncio.Event()
        self._on_complete = on_complete

    @property
    def outstanding(self) -> int:
        return self._outstanding

    @property
    def registered(self) -> int:
        """Total registrations over the tracker's lifetime."""
        return self._registered

    @property
    def fired(self) -> bool:
        return self._fired

    def register(self) -> None:
        """Add one outstanding operation."""
        if self._fired:
            raise RuntimeError("CompletionTracker already fired; no further work may register")
        self._outstanding += 1
        self._registered += 1

    def complete(self) -> None:
        """Finish one operation; fire the completion signal on reaching zero."""
        if self._outstanding <= 0:
            raise RuntimeError("CompletionTracker.complete() called with no outstanding work")
        self._outstanding -= 1
        if self._outstanding == 0:
            self._fire()

    def _fire(self) -> None:
        self._fired = True
        logger.debug(f"Traversal quiescent after {self._registered} operations")
        self._event.set()
        if self._on_complete is not None:
            self._on_complete()

    async def wait(self) -> None:
        """Wait until the tracker has fired."""
        await self._event.wait()
