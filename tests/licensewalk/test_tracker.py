"""Tests for CompletionTracker."""

import asyncio

import pytest

from licensewalk.tracker import CompletionTracker


class TestCompletionTracker:

    def test_initial_state(self):
        tracker = CompletionTracker()

        assert tracker.outstanding == 0
        assert tracker.registered == 0
        assert tracker.fired is False

    def test_fires_once_on_zero(self):
        calls = []
        tracker = CompletionTracker(on_complete=lambda: calls.append(1))

        tracker.register()
        tracker.register()
        tracker.complete()
        assert calls == []
        tracker.complete()

        assert calls == [1]
        assert tracker.fired is True
        assert tracker.registered == 2

    def test_register_after_fire_rejected(self):
        tracker = CompletionTracker()
        tracker.register()
        tracker.complete()

        with pytest.raises(RuntimeError, match="already fired"):
            tracker.register()

    def test_complete_without_work_rejected(self):
        tracker = CompletionTracker()

        with pytest.raises(RuntimeError, match="no outstanding work"):
            tracker.complete()

    @pytest.mark.asyncio
    async def test_wait_released_by_interleaved_work(self):
        tracker = CompletionTracker()
        tracker.register()

        async def worker(depth):
            await asyncio.sleep(0)
            if depth < 3:
                tracker.register()
                tracker.register()
                await asyncio.gather(worker(depth + 1), worker(depth + 1))
            tracker.complete()

        waiter = asyncio.ensure_future(tracker.wait())
        await worker(0)
        await asyncio.wait_for(waiter, timeout=1)

        assert tracker.fired is True
        assert tracker.registered == 15
