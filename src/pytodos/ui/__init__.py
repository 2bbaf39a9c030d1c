# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pytodos (Tk host).
#
# Notes:
#   - Uses lazy exports (PEP 562) so importing pytodos.ui never imports Tk
#     until a name is actually used.
#   - Do NOT import from pytodos.ui inside ui modules; import modules directly.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"Component",
	"DocumentView",
	"KeyMap",
	"TkScheduler",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pytodos.ui.window", "App"),
	"Component": ("pytodos.ui.component", "Component"),
	"DocumentView": ("pytodos.ui.tk_renderer", "DocumentView"),
	"KeyMap": ("pytodos.ui.keys", "KeyMap"),
	"TkScheduler": ("pytodos.ui.tk_renderer", "TkScheduler"),
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
	from pytodos.ui.window import App
	from pytodos.ui.component import Component
	from pytodos.ui.tk_renderer import DocumentView, TkScheduler
	from pytodos.ui.keys import KeyMap
