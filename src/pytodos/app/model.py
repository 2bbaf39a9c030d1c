# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Todo and Model value types plus their JSON-compatible dict form.
#
# Notes:
#	- Both types are frozen; the reducer builds new values with replace().
#	- editing/clicked use None in Python and false in the persisted form.
#	- from_dict() raises ModelError for anything it cannot trust.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


ROUTE_ALL = "#/"
ROUTE_ACTIVE = "#/active"
ROUTE_COMPLETED = "#/completed"
ROUTES: tuple[str, ...] = (ROUTE_ALL, ROUTE_ACTIVE, ROUTE_COMPLETED)


class ModelError(ValueError):
	"""
	Raised when a persisted model cannot be decoded.
	"""


def _is_int(value: Any) -> bool:
	return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Todo:
	id: int
	title: str
	done: bool = False

	def to_dict(self) -> dict[str, Any]:
		return {"id": self.id, "title": self.title, "done": self.done}

	@classmethod
	def from_dict(cls, data: Any) -> "Todo":
		if not isinstance(data, dict):
			raise ModelError(f"Todo must be an object, got {type(data).__name__}")

		todo_id = data.get("id")
		title = data.get("title")
		done = data.get("done", False)

		if not _is_int(todo_id):
			raise ModelError(f"Todo id must be an integer, got {todo_id!r}")
		if not isinstance(title, str):
			raise ModelError(f"Todo title must be a string, got {title!r}")
		if not isinstance(done, bool):
			raise ModelError(f"Todo done must be a boolean, got {done!r}")

		return cls(id=todo_id, title=title, done=done)


def compute_all_done(todos: Iterable[Todo]) -> bool:
	"""
	True iff every todo is done (True for an empty list).
	"""
	return all(t.done for t in todos)


def next_id(todos: Iterable[Todo]) -> int:
	return max((t.id for t in todos), default=0) + 1


@dataclass(frozen=True, slots=True)
class Model:
	"""
	Model

	Complete application state at one point in time.
	"""
	todos: tuple[Todo, ...] = ()
	hash: str = ROUTE_ALL
	all_done: bool = True
	editing: Optional[int] = None
	clicked: Optional[int] = None
	click_time: Optional[int] = None

	def ids(self) -> list[int]:
		return [t.id for t in self.todos]

	def find(self, todo_id: Any) -> Optional[Todo]:
		for t in self.todos:
			if t.id == todo_id:
				return t
		return None

	@property
	def active_count(self) -> int:
		return sum(1 for t in self.todos if not t.done)

	@property
	def completed_count(self) -> int:
		return sum(1 for t in self.todos if t.done)

	def visible_todos(self) -> list[Todo]:
		"""
		Todos shown for the current route; unknown routes show everything.
		"""
		if self.hash == ROUTE_ACTIVE:
			return [t for t in self.todos if not t.done]
		if self.hash == ROUTE_COMPLETED:
			return [t for t in self.todos if t.done]
		return list(self.todos)

	# -----------------------------------------------------------------------
	# Serialization
	# -----------------------------------------------------------------------

	def to_dict(self) -> dict[str, Any]:
		return {
			"todos": [t.to_dict() for t in self.todos],
			"hash": self.hash,
			"all_done": self.all_done,
			"editing": self.editing if self.editing is not None else False,
			"clicked": self.clicked if self.clicked is not None else False,
			"click_time": self.click_time,
		}

	@classmethod
	def from_dict(cls, data: Any) -> "Model":
		if not isinstance(data, dict):
			raise ModelError(f"Model must be an object, got {type(data).__name__}")

		raw_todos = data.get("todos", [])
		if raw_todos is None:
			raw_todos = []
		if not isinstance(raw_todos, list):
			raise ModelError("Model todos must be a list")

		todos = tuple(Todo.from_dict(item) for item in raw_todos)
		if len({t.id for t in todos}) != len(todos):
			raise ModelError("Model todos contain duplicate ids")

		hash_value = data.get("hash", ROUTE_ALL)
		if not isinstance(hash_value, str):
			raise ModelError(f"Model hash must be a string, got {hash_value!r}")

		all_done = data.get("all_done")
		if all_done is None:
			all_done = compute_all_done(todos)
		elif not isinstance(all_done, bool):
			raise ModelError(f"Model all_done must be a boolean, got {all_done!r}")

		editing = _optional_id(data.get("editing"), "editing")
		if editing is not None and editing not in {t.id for t in todos}:
			editing = None

		click_time = data.get("click_time")
		if click_time is not None and not _is_int(click_time):
			raise ModelError(f"Model click_time must be an integer, got {click_time!r}")

		return cls(
			todos=todos,
			hash=hash_value,
			all_done=all_done,
			editing=editing,
			clicked=_optional_id(data.get("clicked"), "clicked"),
			click_time=click_time,
		)


def _optional_id(value: Any, name: str) -> Optional[int]:
	if value is None or value is False:
		return None
	if _is_int(value):
		return value
	raise ModelError(f"Model {name} must be an integer or false, got {value!r}")
