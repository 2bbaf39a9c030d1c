# ---------------------------------------------------------------------------
# File: attributes.py
# ---------------------------------------------------------------------------
# Description:
#	Typed attribute records and the "key=value" token parser.
#
# Notes:
#	- Each record validates its value at construction (TypeError otherwise).
#	- parse_attribute() accepts records, callables (click handlers) and
#	  "key=value" / bare-key strings; unknown or empty tokens yield None.
#	- Values are split on the first "=" only, so "value=a=b" keeps "a=b".
#	- apply_attributes() applies tokens in order and returns the node.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial coding / release
# 10/07/2026	pytodos maintainers			Replace string switch with typed records
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Optional, Union

from pytodos.core.logging import get_app_logger
from pytodos.dom.node import ClickHandler, Element


log = get_app_logger("dom")


class Attribute:
	"""
	Base class for attribute records.
	"""
	key: ClassVar[str] = ""

	def apply(self, node: Element) -> None:
		raise NotImplementedError


@dataclass(frozen=True)
class _TextAttribute(Attribute):
	value: str

	def __post_init__(self) -> None:
		# ids are commonly built from integers; booleans are never valid.
		if isinstance(self.value, int) and not isinstance(self.value, bool):
			object.__setattr__(self, "value", str(self.value))
		if not isinstance(self.value, str):
			raise TypeError(f"{self.__class__.__name__} value must be str, got {type(self.value).__name__}")

	def apply(self, node: Element) -> None:
		node.set_attribute(self.key, self.value)


@dataclass(frozen=True)
class ClassName(_TextAttribute):
	key: ClassVar[str] = "class"

	def apply(self, node: Element) -> None:
		node.class_name = self.value


@dataclass(frozen=True)
class Id(_TextAttribute):
	key: ClassVar[str] = "id"

	def apply(self, node: Element) -> None:
		node.id = self.value


@dataclass(frozen=True)
class Style(_TextAttribute):
	key: ClassVar[str] = "style"


@dataclass(frozen=True)
class Type(_TextAttribute):
	key: ClassVar[str] = "type"


@dataclass(frozen=True)
class Placeholder(_TextAttribute):
	key: ClassVar[str] = "placeholder"


@dataclass(frozen=True)
class Href(_TextAttribute):
	key: ClassVar[str] = "href"


@dataclass(frozen=True)
class For(_TextAttribute):
	key: ClassVar[str] = "for"


@dataclass(frozen=True)
class DataId(_TextAttribute):
	key: ClassVar[str] = "data-id"


@dataclass(frozen=True)
class Value(_TextAttribute):
	key: ClassVar[str] = "value"

	def apply(self, node: Element) -> None:
		node.value = self.value


@dataclass(frozen=True)
class Checked(Attribute):
	key: ClassVar[str] = "checked"

	def apply(self, node: Element) -> None:
		node.checked = True
		node.set_attribute("checked", "true")


@dataclass(frozen=True)
class Autofocus(Attribute):
	"""
	Focus now, and again once the node is attached (render timing).
	"""
	key: ClassVar[str] = "autofocus"

	def apply(self, node: Element) -> None:
		node.autofocus = True
		node.focus()
		node.request_refocus()


@dataclass(frozen=True)
class OnClick(Attribute):
	key: ClassVar[str] = "onclick"

	handler: ClickHandler

	def __post_init__(self) -> None:
		if not callable(self.handler):
			raise TypeError("OnClick handler must be callable")

	def apply(self, node: Element) -> None:
		node.onclick = self.handler


AttributeToken = Union[Attribute, ClickHandler, str, None, bool]

_FACTORIES: dict[str, Callable[[str], Attribute]] = {
	cls.key: cls
	for cls in (ClassName, Id, Style, Type, Placeholder, Href, For, DataId, Value)
}
_FACTORIES["checked"] = lambda _value: Checked()
_FACTORIES["autofocus"] = lambda _value: Autofocus()


def parse_attribute(token: Any) -> Optional[Attribute]:
	"""
	Turn one attribute token into a record, or None when it is a no-op.
	"""
	if isinstance(token, Attribute):
		return token

	if callable(token):
		return OnClick(token)

	if not isinstance(token, str) or not token:
		return None

	key, _, value = token.partition("=")
	factory = _FACTORIES.get(key.strip())
	if factory is None:
		log.debug("Ignoring unknown attribute token %r", token)
		return None

	return factory(value)


def apply_attributes(tokens: Optional[Iterable[AttributeToken]], node: Element) -> Element:
	"""
	Apply attribute tokens to node in order; returns node for chaining.
	"""
	if not tokens:
		return node

	for token in tokens:
		attr = parse_attribute(token)
		if attr is not None:
			attr.apply(node)

	return node
