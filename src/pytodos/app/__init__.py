# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public surface of the todo application (model, update, view, wiring).
#
# Notes:
#   - Uses lazy exports to avoid circular imports between app <-> runtime.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Model", "Todo", "ModelError",
	"Action", "UpdateEnv", "update",
	"view",
	"subscriptions",
	"TodoApp", "start", "create_document",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Model": ("pytodos.app.model", "Model"),
	"Todo": ("pytodos.app.model", "Todo"),
	"ModelError": ("pytodos.app.model", "ModelError"),

	"Action": ("pytodos.app.update", "Action"),
	"UpdateEnv": ("pytodos.app.update", "UpdateEnv"),
	"update": ("pytodos.app.update", "update"),

	"view": ("pytodos.app.view", "view"),
	"subscriptions": ("pytodos.app.subscriptions", "subscriptions"),

	"TodoApp": ("pytodos.app.todo_app", "TodoApp"),
	"start": ("pytodos.app.todo_app", "start"),
	"create_document": ("pytodos.app.todo_app", "create_document"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pytodos.app.model import Model, Todo, ModelError
	from pytodos.app.update import Action, UpdateEnv, update
	from pytodos.app.view import view
	from pytodos.app.subscriptions import subscriptions
	from pytodos.app.todo_app import TodoApp, start, create_document
