# ---------------------------------------------------------------------------
# File: document.py
# ---------------------------------------------------------------------------
# Description:
#	Document, Location and Scheduler: the host capabilities around the
#	element tree (focus, keyboard events, navigation, timers).
#
# Notes:
#	- Document is toolkit-agnostic; the Tk window drives it from outside.
#	- ManualScheduler is the headless timer (tests advance it explicitly).
#	- Location only notifies listeners when the hash actually changes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial coding / release
# 10/08/2026	pytodos maintainers			Autofocus retry scheduling on attach
# ---------------------------------------------------------------------------

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from pytodos.dom.node import Element, Node


DEFAULT_ROUTE = "#/"
AUTOFOCUS_RETRY_MS = 200

EventHandler = Callable[[Any], None]
RouteListener = Callable[[str], None]
FocusListener = Callable[[Element], None]


# ---------------------------------------------------------------------------
# Timers
# ---------------------------------------------------------------------------

@runtime_checkable
class Scheduler(Protocol):
	"""
	Minimal timer interface (Tk's after() satisfies it through TkScheduler).
	"""
	def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> None:
		...


class ManualScheduler:
	"""
	Deterministic scheduler driven by advance().
	"""

	def __init__(self) -> None:
		self.now_ms: int = 0
		self._queue: list[tuple[int, int, Callable[[], Any]]] = []
		self._seq = itertools.count()

	def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> None:
		heapq.heappush(self._queue, (self.now_ms + max(0, int(delay_ms)), next(self._seq), callback))

	@property
	def pending(self) -> int:
		return len(self._queue)

	def advance(self, delay_ms: int) -> int:
		"""
		Move time forward and run every callback that became due.
		Returns the number of callbacks run.
		"""
		target = self.now_ms + delay_ms
		ran = 0
		while self._queue and self._queue[0][0] <= target:
			due, _, callback = heapq.heappop(self._queue)
			self.now_ms = due
			callback()
			ran += 1
		self.now_ms = target
		return ran


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

class Location:
	"""
	Hash-style navigation state ("#/", "#/active", "#/completed").
	"""

	def __init__(self, hash: str = DEFAULT_ROUTE) -> None:
		self._hash = hash
		self._listeners: list[RouteListener] = []

	@property
	def hash(self) -> str:
		return self._hash

	def assign(self, hash: str) -> None:
		if hash == self._hash:
			return
		self._hash = hash
		for listener in list(self._listeners):
			listener(hash)

	def replace(self, hash: str) -> None:
		"""
		Set the hash without notifying listeners (initial sync).
		"""
		self._hash = hash

	def add_listener(self, listener: RouteListener) -> None:
		self._listeners.append(listener)

	def remove_listener(self, listener: RouteListener) -> None:
		if listener in self._listeners:
			self._listeners.remove(listener)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyEvent:
	key: str
	type: str = "keyup"


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Document:
	"""
	Document

	Owns the <body> element, the focused element, the location, a scheduler
	and event listeners keyed by event type.
	"""
	location: Location = field(default_factory=Location)
	scheduler: Scheduler = field(default_factory=ManualScheduler)
	autofocus_retry_ms: int = AUTOFOCUS_RETRY_MS

	body: Element = field(init=False)
	_active: Optional[Element] = field(default=None, init=False, repr=False)
	_listeners: dict[str, list[EventHandler]] = field(default_factory=dict, init=False, repr=False)
	_focus_listeners: list[FocusListener] = field(default_factory=list, init=False, repr=False)

	def __post_init__(self) -> None:
		self.body = Element(tag="body")
		self.body._document = self

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def get_element_by_id(self, element_id: str) -> Optional[Element]:
		return self.body.get_element_by_id(element_id)

	def get_elements_by_class_name(self, class_name: str) -> list[Element]:
		return self.body.get_elements_by_class_name(class_name)

	# -----------------------------------------------------------------------
	# Focus
	# -----------------------------------------------------------------------

	@property
	def active_element(self) -> Optional[Element]:
		"""
		The focused element, or None once it has been detached.
		"""
		if self._active is not None and self._active.owner_document is self:
			return self._active
		return None

	def focus(self, element: Element) -> None:
		self._active = element
		for listener in list(self._focus_listeners):
			listener(element)

	def add_focus_listener(self, listener: FocusListener) -> None:
		self._focus_listeners.append(listener)

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
		self._listeners.setdefault(event_type, []).append(handler)

	def remove_event_listener(self, event_type: str, handler: EventHandler) -> None:
		handlers = self._listeners.get(event_type, [])
		if handler in handlers:
			handlers.remove(handler)

	def dispatch_event(self, event_type: str, event: Any) -> None:
		for handler in list(self._listeners.get(event_type, [])):
			handler(event)

	def key_up(self, key: str) -> None:
		self.dispatch_event("keyup", KeyEvent(key=key))

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _on_attached(self, node: Node) -> None:
		if not isinstance(node, Element):
			return
		for el in node.iter():
			if el._refocus_pending:
				el._refocus_pending = False
				self.scheduler.call_later(self.autofocus_retry_ms, el.focus)
