# ---------------------------------------------------------------------------
# File: elements.py
# ---------------------------------------------------------------------------
# Description:
#	Declarative element-tree builders.
#
# Notes:
#	- create_element() applies attributes first, then appends children.
#	- Every builder returns a single detached node, so trees compose freely
#	  and never refer to a previous render.
#	- Children: Node instances are appended as-is, None is skipped,
#	  str/int become Text nodes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial coding / release
# 10/09/2026	pytodos maintainers			Add route() helper
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Iterable, Optional, TypeVar, Union

from pytodos.dom.attributes import AttributeToken, apply_attributes
from pytodos.dom.node import Element, Node, Text

if TYPE_CHECKING:
	from pytodos.dom.document import Location


Child = Union[Node, str, int, None]
Attrs = Optional[Iterable[AttributeToken]]
Children = Optional[Iterable[Child]]

_M = TypeVar("_M")


def _to_node(child: Child) -> Optional[Node]:
	if child is None:
		return None
	if isinstance(child, Node):
		return child
	return Text(str(child))


def append_childnodes(children: Children, parent: Element) -> Element:
	"""
	Append children to parent in order; returns parent.
	"""
	for child in children or ():
		node = _to_node(child)
		if node is not None:
			parent.append_child(node)
	return parent


def create_element(tag: str, attrs: Attrs = None, children: Children = None) -> Element:
	"""
	Create any element with attributes and children.

	Example:
		create_element("div", ["class=todoapp"], [h1([], ["todos"])])
	"""
	return append_childnodes(children, apply_attributes(attrs, Element(tag=tag)))


def empty(node: Element) -> Element:
	"""
	Remove every child of node.
	"""
	while node.last_child is not None:
		node.remove_child(node.last_child)
	return node


def text(value: object) -> Text:
	return Text(str(value))


def strong(value: object) -> Element:
	return create_element("strong", None, [text(value)])


def a(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("a", attrs, children)


def button(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("button", attrs, children)


def div(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("div", attrs, children)


def footer(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("footer", attrs, children)


def header(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("header", attrs, children)


def h1(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("h1", attrs, children)


def input_(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("input", attrs, children)


def label(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("label", attrs, children)


def li(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("li", attrs, children)


def section(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("section", attrs, children)


def span(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("span", attrs, children)


def ul(attrs: Attrs = None, children: Children = None) -> Element:
	return create_element("ul", attrs, children)


def route(model: _M, title: str, hash: str, location: "Location") -> _M:
	"""
	Navigate to hash and return a copy of model (a dataclass) with that hash.

	title is accepted for history-style callers and otherwise unused.
	"""
	location.assign(hash)
	return replace(model, hash=hash)  # type: ignore[type-var]
