# -*- coding: utf-8 -*-

import pytest

from core.phase_timer import Scheduler
from storage.db import Database


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeScheduler(Scheduler):
    """Deterministic scheduler driven by FakeClock."""

    def __init__(self, clock: FakeClock, honor_cancel: bool = True):
        self.clock = clock
        self.honor_cancel = honor_cancel
        self.pending = {}
        self.cancelled = []
        self._next_id = 0

    def schedule(self, delay_sec, callback):
        self._next_id += 1
        self.pending[self._next_id] = (self.clock.now + delay_sec, callback)
        return self._next_id

    def cancel(self, handle):
        self.cancelled.append(handle)
        if self.honor_cancel:
            self.pending.pop(handle, None)

    def fire(self, handle):
        due, callback = self.pending.pop(handle)
        self.clock.now = max(self.clock.now, due)
        callback()

    def fire_next(self):
        handle = min(self.pending, key=lambda h: (self.pending[h][0], h))
        self.fire(handle)
        return handle

    def advance(self, seconds: float):
        target = self.clock.now + seconds
        while self.pending:
            handle = min(self.pending, key=lambda h: (self.pending[h][0], h))
            if self.pending[handle][0] > target:
                break
            self.fire(handle)
        self.clock.now = target


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FakeScheduler(clock)


@pytest.fixture
def db():
    database = Database(db_path=":memory:")
    database.init_schema()
    yield database
    database.close()
