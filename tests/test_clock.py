import pytest

from animation import Clock, MonotonicClock, TaskQueue, VirtualClock


class TestTaskQueue:

    def test_pops_in_due_order(self):
        q = TaskQueue()
        fired = []
        q.push(30, lambda: fired.append("c"))
        q.push(10, lambda: fired.append("a"))
        q.push(20, lambda: fired.append("b"))
        for _, action in q.pop_due(25):
            action()
        assert fired == ["a", "b"]
        assert len(q) == 1
        assert q.next_due() == 30

    def test_ties_keep_submission_order(self):
        q = TaskQueue()
        fired = []
        for name in "xyz":
            q.push(5, lambda n=name: fired.append(n))
        for _, action in q.pop_due(5):
            action()
        assert fired == ["x", "y", "z"]

    def test_empty_next_due_is_infinite(self):
        assert TaskQueue().next_due() == float("inf")


class TestClockBase:

    def test_base_clock_is_abstract(self):
        with pytest.raises(TypeError):
            Clock()

    def test_subclass_must_define_now(self):
        class NoTime(Clock):
            pass

        with pytest.raises(TypeError):
            NoTime()


class TestVirtualClock:

    def test_nothing_fires_before_advance(self):
        clock = VirtualClock()
        fired = []
        clock.call_later(0, lambda: fired.append(1))
        assert fired == []
        assert clock.pending == 1

    def test_advance_fires_due_actions_at_their_time(self):
        clock = VirtualClock()
        seen = []
        clock.call_later(100, lambda: seen.append(clock.now()))
        clock.call_later(250, lambda: seen.append(clock.now()))
        assert clock.advance(200) == 1
        assert seen == [100]
        assert clock.now() == 200
        clock.advance(50)
        assert seen == [100, 250]

    def test_actions_queued_while_firing(self):
        clock = VirtualClock()
        seen = []

        def first():
            seen.append("first")
            clock.call_later(10, lambda: seen.append("second"))

        clock.call_later(10, first)
        clock.advance(20)
        assert seen == ["first", "second"]

    def test_run_all_drains(self):
        clock = VirtualClock()
        for d in (5, 500, 5000):
            clock.call_later(d, lambda: None)
        assert clock.run_all() == 3
        assert clock.now() == 5000
        assert clock.pending == 0

    def test_rejects_negative(self):
        clock = VirtualClock()
        with pytest.raises(ValueError):
            clock.advance(-1)
        with pytest.raises(ValueError):
            clock.call_later(-1, lambda: None)


class TestMonotonicClock:

    def test_tick_fires_zero_delay(self):
        clock = MonotonicClock()
        fired = []
        clock.call_later(0, lambda: fired.append(1))
        assert clock.tick() == 1
        assert fired == [1]

    def test_tick_leaves_future_work(self):
        clock = MonotonicClock()
        clock.call_later(60_000, lambda: None)
        assert clock.tick() == 0
        assert clock.pending == 1
