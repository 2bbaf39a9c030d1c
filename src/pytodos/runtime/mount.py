# ---------------------------------------------------------------------------
# File: mount.py
# ---------------------------------------------------------------------------
# Description:
#	Mount orchestrator: load persisted model, render, dispatch, subscribe.
#
# Notes:
#	- Program is the single owned handle for one mounted app instance.
#	- Every render is a full teardown and rebuild of the container.
#	- dispatch() re-reads the persisted model before reducing, so the last
#	  committed state (possibly written by another copy) is the input.
#	- Cycles never overlap: dispatches fired during a cycle are queued.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pytodos maintainers			Initial coding / release
# 10/09/2026	pytodos maintainers			Queue re-entrant dispatches
# 10/09/2026	pytodos maintainers			Telemetry for mount/dispatch/render
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
from collections import deque
from typing import Any, Callable, Optional

from pytodos.app.model import Model
from pytodos.core.logging import get_app_logger
from pytodos.core.telemetry import Telemetry, get_telemetry
from pytodos.dom.document import Document
from pytodos.dom.elements import empty
from pytodos.dom.node import Element
from pytodos.runtime.storage import Storage


log = get_app_logger("mount")

STORE_PREFIX = "todos-elmish_"

Callback = Callable[..., None]
Dispatch = Callable[..., Callback]
UpdateFn = Callable[[str, Model, Any], Model]
ViewFn = Callable[[Model, Dispatch], Element]
SubscriptionsFn = Callable[[Dispatch], None]
RenderListener = Callable[[Model], None]


def store_name_for(root_element_id: str) -> str:
	return STORE_PREFIX + root_element_id


class Program:
	"""
	Program

	One mounted instance: container, storage key, update/view functions.
	"""

	def __init__(
		self,
		initial_model: Model,
		update: UpdateFn,
		view: ViewFn,
		root: Element,
		*,
		store_name: str,
		storage: Storage,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.initial_model = initial_model
		self.update = update
		self.view = view
		self.root = root
		self.store_name = store_name
		self.storage = storage
		self.telemetry = telemetry or get_telemetry()

		self._render_listeners: list[RenderListener] = []
		self._queue: deque[tuple[str, Any]] = deque()
		self._busy = False

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} store_name={self.store_name!r}>"

	# -----------------------------------------------------------------------
	# Persistence
	# -----------------------------------------------------------------------

	def load(self) -> Model:
		"""
		Return the persisted model, or the initial model when there is none
		or it cannot be decoded.
		"""
		raw = self.storage.get(self.store_name)
		if raw is None:
			return self.initial_model

		try:
			return Model.from_dict(json.loads(raw))
		except (ValueError, TypeError) as ex:
			# json.JSONDecodeError and ModelError are both ValueErrors.
			log.warning("Discarding malformed state in %s: %s", self.store_name, ex)
			return self.initial_model

	def save(self, model: Model) -> None:
		self.storage.set(self.store_name, json.dumps(model.to_dict()))

	@property
	def model(self) -> Model:
		return self.load()

	# -----------------------------------------------------------------------
	# Render cycle
	# -----------------------------------------------------------------------

	def render(self, model: Model) -> None:
		"""
		Persist model, clear the container and attach a freshly built tree.
		"""
		with self.telemetry.timer("render.duration_ms", {"store": self.store_name}):
			self.save(model)
			empty(self.root)
			self.root.append_child(self.view(model, self.dispatch))

		for listener in list(self._render_listeners):
			listener(model)

	def dispatch(self, action: str, data: Any = None) -> Callback:
		"""
		Return a callback that runs one reduce/persist/render cycle.

		Positional arguments passed to the callback (e.g. Tk events) are ignored.
		"""
		def callback(*_args: Any) -> None:
			self._enqueue(action, data)

		return callback

	def add_render_listener(self, listener: RenderListener) -> None:
		self._render_listeners.append(listener)

	def remove_render_listener(self, listener: RenderListener) -> None:
		if listener in self._render_listeners:
			self._render_listeners.remove(listener)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _enqueue(self, action: str, data: Any) -> None:
		self._queue.append((action, data))
		if self._busy:
			return

		self._busy = True
		try:
			while self._queue:
				self._cycle(*self._queue.popleft())
		finally:
			self._busy = False
			self._queue.clear()

	def _cycle(self, action: str, data: Any) -> None:
		model = self.load()
		updated = self.update(action, model, data)

		self.telemetry.event("action.dispatched", {"action": str(action), "changed": updated != model})
		log.debug("Dispatched %s data=%r", action, data)

		self.render(updated)


def mount(
	model: Model,
	update: UpdateFn,
	view: ViewFn,
	root_element_id: str,
	subscriptions: Optional[SubscriptionsFn] = None,
	*,
	document: Document,
	storage: Storage,
	telemetry: Optional[Telemetry] = None,
) -> Program:
	"""
	Mount an app into the element with id root_element_id.

	Raises:
		ValueError: if the document has no element with that id.
	"""
	root = document.get_element_by_id(root_element_id)
	if root is None:
		raise ValueError(f"No element with id {root_element_id!r} to mount into")

	program = Program(
		model,
		update,
		view,
		root,
		store_name=store_name_for(root_element_id),
		storage=storage,
		telemetry=telemetry,
	)

	program.render(program.load())

	if subscriptions is not None and callable(subscriptions):
		subscriptions(program.dispatch)

	program.telemetry.event("app.mounted", {"store": program.store_name})
	log.info("Mounted %s (%d todos)", program.store_name, len(program.model.todos))
	return program


__all__ = ["Program", "mount", "store_name_for", "STORE_PREFIX"]
