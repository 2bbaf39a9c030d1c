# ---------------------------------------------------------------------------
# File: dom/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public surface of the pytodos rendering surface (element tree).
#
# Notes:
#   - Uses lazy exports (PEP 562), same as the other pytodos packages.
#   - Do NOT import from pytodos.dom inside dom modules; import modules directly.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Node", "Element", "Text",
	"Document", "Location", "KeyEvent", "ManualScheduler", "Scheduler",
	"apply_attributes", "parse_attribute",
	"create_element", "empty",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Node": ("pytodos.dom.node", "Node"),
	"Element": ("pytodos.dom.node", "Element"),
	"Text": ("pytodos.dom.node", "Text"),

	"Document": ("pytodos.dom.document", "Document"),
	"Location": ("pytodos.dom.document", "Location"),
	"KeyEvent": ("pytodos.dom.document", "KeyEvent"),
	"ManualScheduler": ("pytodos.dom.document", "ManualScheduler"),
	"Scheduler": ("pytodos.dom.document", "Scheduler"),

	"apply_attributes": ("pytodos.dom.attributes", "apply_attributes"),
	"parse_attribute": ("pytodos.dom.attributes", "parse_attribute"),

	"create_element": ("pytodos.dom.elements", "create_element"),
	"empty": ("pytodos.dom.elements", "empty"),
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
	from pytodos.dom.node import Node, Element, Text
	from pytodos.dom.document import Document, Location, KeyEvent, ManualScheduler, Scheduler
	from pytodos.dom.attributes import apply_attributes, parse_attribute
	from pytodos.dom.elements import create_element, empty
