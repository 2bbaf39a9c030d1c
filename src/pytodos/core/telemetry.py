# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry for the pytodos render cycle.
#
#   Emits:
#     - events	(app.mounted, action.dispatched, ...)
#     - counters	(action.ignored, ...)
#     - timers	(render.duration_ms)
#
# Notes:
#   - Backends are "sinks"; the default is NullSink (no-op).
#   - LogSink writes through Python logging, MemorySink backs the tests.
#   - Safe to call when disabled.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pytodos maintainers			Initial coding / release
# 10/09/2026	pytodos maintainers			Timer as contextmanager, cfg object support
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Protocol


# ---------------------------------------------------------------------------
# Telemetry data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	"""
	Discards everything.
	"""

	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to a logger at DEBUG level.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink for tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade handed to the mount orchestrator.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=attrs or {}))

	@contextmanager
	def timer(self, name: str, attrs: Optional[dict[str, Any]] = None) -> Iterator[None]:
		"""
		Time the body and emit the elapsed milliseconds as a metric.
		"""
		start = time.perf_counter()
		try:
			yield
		finally:
			elapsed_ms = (time.perf_counter() - start) * 1000.0
			self.counter(name, value=int(elapsed_ms), attrs=attrs)


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: logging.Logger | None = None) -> Telemetry:
	"""
	Initialize the process-wide telemetry instance.

	Expected cfg keys:
		telemetry_enabled: bool
		telemetry_sink: "null" | "log"
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink_name = cfg.get("telemetry_sink", "null")

	sink: TelemetrySink = NullSink()
	if enabled and sink_name == "log" and logger is not None:
		sink = LogSink(logger)

	_telemetry = Telemetry(enabled=enabled, sink=sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the process-wide instance (disabled until init_telemetry runs).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
