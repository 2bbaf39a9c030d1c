# ---------------------------------------------------------------------------
# File: update.py
# ---------------------------------------------------------------------------
# Description:
#	The reducer: update(action, model, data) -> new Model.
#
# Notes:
#	- Pure with respect to its inputs: the input Model is never mutated.
#	- Reads from the host (clock, input fields, route) go through UpdateEnv,
#	  so the reducer is deterministic under test.
#	- Unknown actions return the model unchanged.
#	- ADD rejects titles that are blank after trimming (model unchanged).
#	- TOGGLE / DELETE / SAVE / EDIT with an unknown id leave todos unchanged.
#	- TOGGLE_ALL on an empty list keeps all_done True.
#	- Host reads are scoped to the app's container when one is given, so
#	  several apps can share a document.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial coding / release
# 10/08/2026	pytodos maintainers			SAVE delegates to _delete (no re-entrant update)
# 10/10/2026	pytodos maintainers			Reject blank ADD titles
# 10/14/2026	pytodos maintainers			Scope host reads to the container
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from pytodos.app.model import Model, Todo, compute_all_done, next_id
from pytodos.core.logging import get_app_logger

if TYPE_CHECKING:
	from pytodos.dom.document import Document
	from pytodos.dom.node import Element


log = get_app_logger("update")

DOUBLE_CLICK_MS = 300
NEW_TODO_ID = "new-todo"
EDIT_CLASS = "edit"


class Action(str, Enum):
	ADD = "ADD"
	TOGGLE = "TOGGLE"
	TOGGLE_ALL = "TOGGLE_ALL"
	DELETE = "DELETE"
	EDIT = "EDIT"
	SAVE = "SAVE"
	CANCEL = "CANCEL"
	CLEAR_COMPLETED = "CLEAR_COMPLETED"
	ROUTE = "ROUTE"


def wall_clock_ms() -> int:
	return int(time.time() * 1000)


def _no_text() -> str:
	return ""


def _no_edit_field() -> tuple[Optional[int], str]:
	return None, ""


def _default_route() -> str:
	return "#/"


@dataclass(frozen=True, slots=True)
class UpdateEnv:
	"""
	Host reads available to the reducer.

	- clock:			milliseconds since the epoch.
	- new_todo_text:	current text of the new-item field.
	- edit_field:		(todo id, text) of the inline edit field.
	- route:			current navigation hash.
	- double_click_ms:	max gap between two EDIT clicks to enter edit mode.
	"""
	clock: Callable[[], int] = wall_clock_ms
	new_todo_text: Callable[[], str] = _no_text
	edit_field: Callable[[], tuple[Optional[int], str]] = _no_edit_field
	route: Callable[[], str] = _default_route
	double_click_ms: int = DOUBLE_CLICK_MS

	@classmethod
	def from_document(
		cls,
		document: "Document",
		*,
		root: Optional["Element"] = None,
		clock: Callable[[], int] = wall_clock_ms,
		double_click_ms: int = DOUBLE_CLICK_MS,
	) -> "UpdateEnv":
		"""
		Bind the host reads to a live document.

		With root, the input fields are looked up inside that container only.
		"""
		scope = root if root is not None else document.body

		def new_todo_text() -> str:
			field = scope.get_element_by_id(NEW_TODO_ID)
			return field.value if field is not None else ""

		def edit_field() -> tuple[Optional[int], str]:
			fields = scope.get_elements_by_class_name(EDIT_CLASS)
			if not fields:
				return None, ""
			field = fields[0]
			return _parse_id(field.id), field.value

		return cls(
			clock=clock,
			new_todo_text=new_todo_text,
			edit_field=edit_field,
			route=lambda: document.location.hash,
			double_click_ms=double_click_ms,
		)


_DEFAULT_ENV = UpdateEnv()


def _parse_id(raw: Any) -> Optional[int]:
	try:
		return int(str(raw).strip(), 10)
	except ValueError:
		return None


# ---------------------------------------------------------------------------
# Transformations (one per action)
# ---------------------------------------------------------------------------

def _with_todos(model: Model, todos: tuple[Todo, ...]) -> Model:
	"""
	Replace todos, recompute all_done and drop a dangling editing id.
	"""
	editing = model.editing
	if editing is not None and all(t.id != editing for t in todos):
		editing = None
	return replace(model, todos=todos, all_done=compute_all_done(todos), editing=editing)


def _add(model: Model, title: str) -> Model:
	title = title.strip()
	if not title:
		log.debug("ADD ignored: blank title")
		return model
	todo = Todo(id=next_id(model.todos), title=title, done=False)
	return _with_todos(model, model.todos + (todo,))


def _toggle(model: Model, todo_id: Any) -> Model:
	todos = tuple(replace(t, done=not t.done) if t.id == todo_id else t for t in model.todos)
	return _with_todos(model, todos)


def _toggle_all(model: Model) -> Model:
	if not model.todos:
		return replace(model, all_done=True)
	all_done = not model.all_done
	todos = tuple(replace(t, done=all_done) for t in model.todos)
	return replace(model, todos=todos, all_done=all_done)


def _delete(model: Model, todo_id: Any) -> Model:
	return _with_todos(model, tuple(t for t in model.todos if t.id != todo_id))


def _edit(model: Model, todo_id: Any, env: UpdateEnv) -> Model:
	if model.find(todo_id) is None:
		return model

	now = env.clock()
	if (
		model.clicked is not None
		and model.clicked == todo_id
		and model.click_time is not None
		and now - model.click_time < env.double_click_ms
	):
		return replace(model, editing=todo_id)

	return replace(model, clicked=todo_id, click_time=now, editing=None)


def _save(model: Model, env: UpdateEnv) -> Model:
	todo_id, value = env.edit_field()
	model = replace(model, clicked=None, editing=None)

	title = (value or "").strip()
	if not title:
		return _delete(model, todo_id)

	todos = tuple(replace(t, title=title) if t.id == todo_id else t for t in model.todos)
	return replace(model, todos=todos)


def _cancel(model: Model) -> Model:
	return replace(model, clicked=None, editing=None)


def _clear_completed(model: Model) -> Model:
	return _with_todos(model, tuple(t for t in model.todos if not t.done))


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------

def update(
	action: Union[Action, str],
	model: Model,
	data: Any = None,
	*,
	env: Optional[UpdateEnv] = None,
) -> Model:
	"""
	Compute the next Model for an action.

	ADD takes the title from data, falling back to the new-item field only
	when data is None.
	Titles that are blank after trimming are rejected and the model is
	returned unchanged.
	"""
	env = env or _DEFAULT_ENV

	try:
		act = Action(action)
	except ValueError:
		log.debug("Unknown action %r ignored", action)
		return model

	if act is Action.ADD:
		title = env.new_todo_text() if data is None else data
		if not isinstance(title, str):
			log.debug("ADD ignored: title %r is not a string", title)
			return model
		return _add(model, title or "")
	if act is Action.TOGGLE:
		return _toggle(model, data)
	if act is Action.TOGGLE_ALL:
		return _toggle_all(model)
	if act is Action.DELETE:
		return _delete(model, data)
	if act is Action.EDIT:
		return _edit(model, data, env)
	if act is Action.SAVE:
		return _save(model, env)
	if act is Action.CANCEL:
		return _cancel(model)
	if act is Action.CLEAR_COMPLETED:
		return _clear_completed(model)
	return replace(model, hash=env.route())
