"""
Cancellation scope - one-shot completion signal for a form's lifetime.

Every subscription and in-flight task owned by a form registers here,
so a single `complete()` at teardown stops all of them together.

Key behaviors:
- `complete()` runs exactly once; later calls are no-ops
- Teardown callbacks registered after completion run immediately
- Tracked asyncio tasks are cancelled on completion
- Callers check `completed` before applying any effect
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Teardown = Callable[[], None]


class CancellationScope:
    """Completion signal shared by everything a form instance owns."""

    def __init__(self, name: str = "form") -> None:
        self.name = name
        self._completed = False
        self._teardowns: list[Teardown] = []
        self._tasks: set[asyncio.Future[Any]] = set()

    @property
    def completed(self) -> bool:
        return self._completed

    def add(self, teardown: Teardown) -> None:
        """Register a callback to run at completion."""
        if self._completed:
            teardown()
            return
        self._teardowns.append(teardown)

    def track(self, task: asyncio.Future[Any]) -> asyncio.Future[Any]:
        """Cancel `task` at completion if it is still running."""
        if self._completed:
            task.cancel()
            return task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def complete(self) -> None:
        """Signal completion. Idempotent."""
        if self._completed:
            return
        self._completed = True

        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        self._tasks.clear()

        teardowns, self._teardowns = self._teardowns, []
        for teardown in teardowns:
            teardown()

        logger.debug(
            "Scope %s completed (%d teardowns, %d tasks cancelled)",
            self.name,
            len(teardowns),
            len(pending),
        )
