"""Tests for sequential task execution."""

import asyncio
from unittest.mock import MagicMock

import pytest

from netflix_migrate.pipeline.waterfall import ExecutionStats, SequentialExecutor, waterfall


def _make_tasks(count: int, events: list[str], delay: float = 0.01) -> list:
    """Build factories that log start/end events around a short sleep."""

    def make(i: int):
        async def task():
            events.append(f"start {i}")
            await asyncio.sleep(delay)
            events.append(f"end {i}")

        return MagicMock(side_effect=task)

    return [make(i) for i in range(count)]


class TestWaterfall:
    """Tests for the waterfall helper."""

    def test_returns_awaitable(self):
        """Should return a coroutine that can be awaited."""
        coro = waterfall([])
        assert asyncio.iscoroutine(coro)
        asyncio.run(coro)

    def test_empty_list_resolves(self):
        """Empty list should settle without invoking anything."""
        stats = asyncio.run(waterfall([]))
        assert isinstance(stats, ExecutionStats)
        assert stats.total == 0
        assert stats.completed == 0

    def test_executes_all_tasks_once(self):
        """Every factory should be invoked exactly once."""
        events: list[str] = []
        tasks = _make_tasks(10, events)
        asyncio.run(waterfall(tasks))
        for task in tasks:
            task.assert_called_once_with()

    def test_executes_in_order_without_overlap(self):
        """Task i+1 should only start after task i has ended."""
        events: list[str] = []
        asyncio.run(waterfall(_make_tasks(10, events)))

        expected = []
        for i in range(10):
            expected += [f"start {i}", f"end {i}"]
        assert events == expected

    def test_factory_not_invoked_before_previous_settles(self):
        """A factory should not even be called while the previous task runs."""
        events: list[str] = []

        def make(i: int):
            def factory():
                events.append(f"invoke {i}")

                async def work():
                    await asyncio.sleep(0.005)
                    events.append(f"settle {i}")

                return work()

            return factory

        asyncio.run(waterfall([make(i) for i in range(3)]))
        assert events == ["invoke 0", "settle 0", "invoke 1", "settle 1", "invoke 2", "settle 2"]

    def test_ignores_task_results(self):
        """Task return values should not affect the run."""

        async def returns_value():
            return {"ignored": True}

        stats = asyncio.run(waterfall([returns_value, returns_value]))
        assert stats.completed == 2


class TestFailFast:
    """Tests for the stop-on-first-failure policy."""

    def test_stops_at_first_failure(self):
        """Factories after a failing task should never be invoked."""
        events: list[str] = []
        tasks = _make_tasks(5, events)
        error = RuntimeError("boom")

        async def failing():
            events.append("fail")
            raise error

        tasks[2] = MagicMock(side_effect=failing)

        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(waterfall(tasks))

        assert exc_info.value is error
        assert events == ["start 0", "end 0", "start 1", "end 1", "fail"]
        tasks[3].assert_not_called()
        tasks[4].assert_not_called()

    def test_factory_raising_synchronously_propagates(self):
        """An exception raised by the factory itself should propagate unchanged."""
        error = ValueError("bad factory")
        later = MagicMock()

        def factory():
            raise error

        with pytest.raises(ValueError) as exc_info:
            asyncio.run(waterfall([factory, later]))

        assert exc_info.value is error
        later.assert_not_called()


class TestSequentialExecutor:
    """Tests for SequentialExecutor options."""

    def test_negative_interval_rejected(self):
        """Negative min_interval should raise ValueError."""
        with pytest.raises(ValueError):
            SequentialExecutor(-0.1)

    def test_min_interval_enforced(self):
        """Each task should occupy at least min_interval seconds."""
        starts: list[float] = []

        async def task():
            starts.append(asyncio.get_running_loop().time())

        async def run():
            loop = asyncio.get_running_loop()
            began = loop.time()
            await SequentialExecutor(0.05).run([task, task, task])
            return loop.time() - began

        elapsed = asyncio.run(run())
        assert elapsed >= 0.15
        for earlier, later in zip(starts, starts[1:]):
            assert later - earlier >= 0.05

    def test_zero_interval_does_not_sleep(self):
        """min_interval of zero should add no delay."""

        async def task():
            pass

        stats = asyncio.run(SequentialExecutor(0).run([task] * 50))
        assert stats.completed == 50
        assert stats.elapsed < 0.5

    def test_slow_tasks_not_padded(self):
        """Tasks slower than min_interval should not be delayed further."""

        async def slow():
            await asyncio.sleep(0.03)

        stats = asyncio.run(SequentialExecutor(0.01).run([slow, slow]))
        assert 0.06 <= stats.elapsed < 0.5

    def test_progress_callback(self):
        """on_progress should be called after each task with (completed, total)."""
        progress = MagicMock()

        async def task():
            pass

        asyncio.run(SequentialExecutor(on_progress=progress).run([task, task, task]))
        assert [c.args for c in progress.call_args_list] == [(1, 3), (2, 3), (3, 3)]

    def test_stats(self):
        """Stats should report totals for a completed run."""

        async def task():
            pass

        stats = asyncio.run(SequentialExecutor().run([task, task]))
        assert stats.total == 2
        assert stats.completed == 2
        assert stats.elapsed >= 0
