# ---------------------------------------------------------------------------
# File: node.py
# ---------------------------------------------------------------------------
# Description:
#	In-memory element tree used as the rendering surface.
#
# Notes:
#	- Composite pattern: an Element owns an ordered list of child nodes.
#	- A node knows its Document only through its root (see owner_document).
#	- click() runs the handler first, then the default action
#	  (checkbox toggle, anchor navigation, label forwarding).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial coding / release
# 10/08/2026	pytodos maintainers			Add click default actions + refocus flag
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional

if TYPE_CHECKING:
	from pytodos.dom.document import Document


ClickHandler = Callable[..., Any]


@dataclass(eq=False)
class Node:
	"""
	Base tree node.
	"""
	parent: Optional["Element"] = field(default=None, init=False, repr=False)

	@property
	def owner_document(self) -> Optional["Document"]:
		node: Node = self
		while node.parent is not None:
			node = node.parent
		return getattr(node, "_document", None)

	@property
	def text_content(self) -> str:
		return ""


@dataclass(eq=False)
class Text(Node):
	"""
	A text node.
	"""
	data: str = ""

	@property
	def text_content(self) -> str:
		return self.data

	def __repr__(self) -> str:
		return f"<Text {self.data!r}>"


@dataclass(eq=False)
class Element(Node):
	"""
	Element

	- tag:			lowercase tag name ("li", "input", ...).
	- attributes:	string attributes ("id", "class", "style", ...).
	- value:		live value of input elements (separate from attributes).
	- checked:		live checked state of checkboxes.
	- onclick:		primary click handler.
	"""
	tag: str = "div"
	attributes: dict[str, str] = field(default_factory=dict)
	children: list[Node] = field(default_factory=list)

	value: str = ""
	checked: bool = False
	autofocus: bool = False
	onclick: Optional[ClickHandler] = field(default=None, repr=False)

	_document: Optional["Document"] = field(default=None, init=False, repr=False)
	_refocus_pending: bool = field(default=False, init=False, repr=False)

	def __repr__(self) -> str:
		return f"<Element {self.tag} id={self.id!r} class={self.class_name!r}>"

	# -----------------------------------------------------------------------
	# Attributes
	# -----------------------------------------------------------------------

	def set_attribute(self, name: str, value: Any) -> None:
		self.attributes[name] = str(value)

	def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
		return self.attributes.get(name, default)

	def has_attribute(self, name: str) -> bool:
		return name in self.attributes

	def remove_attribute(self, name: str) -> None:
		self.attributes.pop(name, None)

	@property
	def id(self) -> str:
		return self.attributes.get("id", "")

	@id.setter
	def id(self, value: str) -> None:
		self.attributes["id"] = value

	@property
	def class_name(self) -> str:
		return self.attributes.get("class", "")

	@class_name.setter
	def class_name(self, value: str) -> None:
		self.attributes["class"] = value

	@property
	def class_list(self) -> list[str]:
		return self.class_name.split()

	@property
	def style(self) -> str:
		return self.attributes.get("style", "")

	@property
	def hidden(self) -> bool:
		"""
		True when the inline style sets display:none.
		"""
		for decl in self.style.split(";"):
			prop, _, val = decl.partition(":")
			if prop.strip().lower() == "display" and val.strip().lower() == "none":
				return True
		return False

	# -----------------------------------------------------------------------
	# Tree operations
	# -----------------------------------------------------------------------

	@property
	def first_child(self) -> Optional[Node]:
		return self.children[0] if self.children else None

	@property
	def last_child(self) -> Optional[Node]:
		return self.children[-1] if self.children else None

	def append_child(self, child: Node) -> Node:
		if child.parent is not None:
			child.parent.remove_child(child)

		child.parent = self
		self.children.append(child)

		doc = self.owner_document
		if doc is not None:
			doc._on_attached(child)
		return child

	def remove_child(self, child: Node) -> Node:
		if child.parent is not self:
			raise ValueError(f"{child!r} is not a child of {self!r}")

		self.children.remove(child)
		child.parent = None
		return child

	def iter(self) -> Iterator["Element"]:
		"""
		Yield this element and every descendant element, in document order.
		"""
		yield self
		for child in self.children:
			if isinstance(child, Element):
				yield from child.iter()

	def get_element_by_id(self, element_id: str) -> Optional["Element"]:
		for el in self.iter():
			if el.id == element_id:
				return el
		return None

	def get_elements_by_class_name(self, class_name: str) -> list["Element"]:
		return [el for el in self.iter() if class_name in el.class_list]

	@property
	def text_content(self) -> str:
		return "".join(child.text_content for child in self.children)

	# -----------------------------------------------------------------------
	# Interaction
	# -----------------------------------------------------------------------

	def focus(self) -> None:
		doc = self.owner_document
		if doc is not None:
			doc.focus(self)

	def request_refocus(self) -> None:
		"""
		Ask the owning document to focus this element again shortly after it
		has been attached.
		"""
		self._refocus_pending = True
		doc = self.owner_document
		if doc is not None:
			doc._on_attached(self)

	def click(self) -> None:
		doc = self.owner_document

		if self.tag == "input" and self.get_attribute("type") == "checkbox":
			self.checked = not self.checked

		if self.onclick is not None:
			self.onclick()

		if doc is None:
			return

		if self.tag == "a":
			href = self.get_attribute("href", "") or ""
			if href.startswith("#"):
				doc.location.assign(href)
		elif self.tag == "label":
			target_id = self.get_attribute("for")
			target = doc.get_element_by_id(target_id) if target_id else None
			if target is not None and target is not self:
				target.click()
