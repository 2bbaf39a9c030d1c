from __future__ import annotations

import pytest

from pytodos.app.todo_app import TodoApp, start
from pytodos.core.config import DEFAULTS, AppConfig
from pytodos.core.telemetry import MemorySink, Telemetry
from pytodos.runtime.storage import MemoryStorage


class FakeClock:
	"""
	Millisecond clock the tests move by hand.
	"""

	def __init__(self, now: int = 1_000_000) -> None:
		self.now = now

	def __call__(self) -> int:
		return self.now

	def advance(self, ms: int) -> None:
		self.now += ms


@pytest.fixture
def clock() -> FakeClock:
	return FakeClock()


@pytest.fixture
def storage() -> MemoryStorage:
	return MemoryStorage()


@pytest.fixture
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture
def cfg() -> AppConfig:
	return AppConfig(dict(DEFAULTS))


@pytest.fixture
def todo_app(cfg, storage, sink, clock) -> TodoApp:
	return start(cfg, storage=storage, telemetry=Telemetry(True, sink), clock=clock)
