"""Sequential, rate-limited task execution.

Runs a list of task factories strictly one after another. Factory ``i + 1``
is only invoked after the awaitable produced by factory ``i`` has settled,
so at most one operation is ever in flight.

Failure policy is fail-fast: the first task that raises stops the run, no
later factory is invoked, and the exception propagates unchanged.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from netflix_migrate.core.protocols import TaskFactory

logger = logging.getLogger(__name__)


@dataclass
class ExecutionStats:
    """Statistics from a sequential run."""

    total: int = 0
    completed: int = 0
    elapsed: float = 0.0


class SequentialExecutor:
    """Run task factories one at a time with a minimum per-task duration."""

    def __init__(
        self,
        min_interval: float = 0.0,
        *,
        on_progress: Callable[[int, int], None] | None = None,
    ):
        """Initialize executor.

        Args:
            min_interval: Minimum wall-clock seconds each task occupies, measured
                from the moment its factory is invoked. ``0`` disables the delay.
            on_progress: Optional callback invoked after each settled task.
                Called with (completed: int, total: int).
        """
        if min_interval < 0:
            raise ValueError(f"min_interval must be >= 0, got {min_interval}")
        self.min_interval = min_interval
        self.on_progress = on_progress

    async def run(self, factories: Sequence[TaskFactory]) -> ExecutionStats:
        """Run all factories in order.

        Args:
            factories: Ordered zero-argument callables, each returning an awaitable.

        Returns:
            ExecutionStats for the completed run.
        """
        loop = asyncio.get_running_loop()
        total = len(factories)
        stats = ExecutionStats(total=total)
        started = loop.time()

        for index, factory in enumerate(factories):
            task_started = loop.time()
            await factory()

            # Timers may fire up to one clock tick early
            remaining = self.min_interval - (loop.time() - task_started)
            while remaining > 0:
                await asyncio.sleep(remaining)
                remaining = self.min_interval - (loop.time() - task_started)

            stats.completed = index + 1
            if self.on_progress:
                self.on_progress(stats.completed, total)

        stats.elapsed = loop.time() - started
        if total:
            logger.debug("Ran %d tasks sequentially in %.2fs", total, stats.elapsed)
        return stats


async def waterfall(factories: Sequence[TaskFactory], *, min_interval: float = 0.0) -> ExecutionStats:
    """Run ``factories`` one after another; see :class:`SequentialExecutor`."""
    return await SequentialExecutor(min_interval).run(factories)


__all__ = ["SequentialExecutor", "ExecutionStats", "waterfall"]
