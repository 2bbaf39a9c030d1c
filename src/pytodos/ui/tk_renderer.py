# ---------------------------------------------------------------------------
# File: tk_renderer.py
# ---------------------------------------------------------------------------
# Description:
#	DocumentView: mirrors the document's container element into ttk widgets.
#
# Notes:
#	- Full rebuild on every redraw, same contract as the element tree.
#	- Redraws are deferred with after_idle so a widget is never destroyed
#	  inside its own command callback.
#	- Entry text is written back to the element's value as the user types;
#	  clicks go through Element.click() so default actions still apply.
#	- Elements styled display:none produce no widgets.
#	- widget_kind / is_horizontal / label_style / button_text are pure and
#	  testable without a display.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	pytodos maintainers			Initial coding / release
# 10/12/2026	pytodos maintainers			Focus follows document.active_element
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional

import tkinter as tk
from tkinter import ttk

from pytodos.core.logging import get_app_logger
from pytodos.dom.document import Document
from pytodos.dom.node import Element, Node, Text
from .component import Component


log = get_app_logger("ui")

WidgetKind = Literal["frame", "checkbox", "entry", "button", "label"]
PackSide = Literal["top", "left"]

HORIZONTAL_CLASSES = frozenset({"view", "filters", "todo-count"})
BUTTON_GLYPHS: dict[str, str] = {"destroy": "×"}
LABEL_TAGS = frozenset({"a", "label", "h1", "strong"})


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def widget_kind(el: Element) -> WidgetKind:
	if el.tag == "input":
		return "checkbox" if el.get_attribute("type") == "checkbox" else "entry"
	if el.tag == "button":
		return "button"
	if el.tag in LABEL_TAGS:
		return "label"
	return "frame"


def is_horizontal(el: Element) -> bool:
	"""
	Children of this element are laid out left-to-right.
	"""
	return el.tag == "span" or bool(HORIZONTAL_CLASSES.intersection(el.class_list))


def label_style(el: Element) -> str:
	if el.tag == "h1":
		return "H1.TLabel"
	if el.tag == "a" and "selected" in el.class_list:
		return "Selected.TLabel"
	if el.tag == "a":
		return "Link.TLabel"
	if el.tag == "strong":
		return "Strong.TLabel"

	node: Optional[Element] = el.parent
	while node is not None:
		if node.tag == "li" and "completed" in node.class_list:
			return "Completed.TLabel"
		node = node.parent
	return "TLabel"


def button_text(el: Element) -> str:
	text = el.text_content.strip()
	if text:
		return text
	for cls in el.class_list:
		if cls in BUTTON_GLYPHS:
			return BUTTON_GLYPHS[cls]
	return ""


def is_clickable(el: Element) -> bool:
	return el.onclick is not None or el.tag == "a" or el.has_attribute("for")


def configure_styles(style: ttk.Style) -> None:
	"""
	Register the named label styles used by DocumentView.
	"""
	style.configure("H1.TLabel", font=("TkDefaultFont", 28, "bold"), foreground="#b83f45")
	style.configure("Strong.TLabel", font=("TkDefaultFont", 10, "bold"))
	style.configure("Link.TLabel", foreground="#555555")
	style.configure("Selected.TLabel", foreground="#b83f45", font=("TkDefaultFont", 10, "underline"))
	style.configure("Completed.TLabel", foreground="#949494", font=("TkDefaultFont", 10, "overstrike"))


# ---------------------------------------------------------------------------
# DocumentView
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class DocumentView(Component):
	"""
	DocumentView

	Hosts the widgets for one container element of a Document.
	"""
	document: Optional[Document] = None
	container_id: str = "app"

	_widgets: dict[int, tk.Widget] = field(default_factory=dict, init=False, repr=False)
	_vars: list[tk.Variable] = field(default_factory=list, init=False, repr=False)
	_redraw_pending: bool = field(default=False, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		if self.document is not None:
			self.document.add_focus_listener(self._on_focus)
		return ttk.Frame(parent, padding=(16, 8))

	def schedule_redraw(self, *_args: Any) -> None:
		if self.root is None or self._redraw_pending:
			return
		self._redraw_pending = True
		self.root.after_idle(self.redraw)

	def redraw(self) -> None:
		self._redraw_pending = False
		if self.root is None or self.document is None:
			return

		for child in list(self.root.winfo_children()):
			child.destroy()
		self._widgets.clear()
		self._vars.clear()

		container = self.document.get_element_by_id(self.container_id)
		if container is None:
			log.warning("Container %r not found; nothing to draw", self.container_id)
			return

		for child in container.children:
			self._render(child, self.root, "top")

		active = self.document.active_element
		if active is not None:
			self._on_focus(active)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _render(self, node: Node, parent: tk.Misc, side: PackSide) -> None:
		if isinstance(node, Text):
			if node.data.strip():
				ttk.Label(parent, text=node.data).pack(side=side, anchor="w")
			return

		if not isinstance(node, Element) or node.hidden:
			return

		kind = widget_kind(node)
		widget = self._make_widget(node, kind, parent)
		self._widgets[id(node)] = widget

		if side == "left":
			widget.pack(side="left", padx=(0, 6))
		else:
			widget.pack(side="top", fill="x", pady=1)

		if kind == "frame":
			child_side: PackSide = "left" if is_horizontal(node) else "top"
			for child in node.children:
				self._render(child, widget, child_side)

	def _make_widget(self, el: Element, kind: WidgetKind, parent: tk.Misc) -> tk.Widget:
		if kind == "checkbox":
			var = tk.BooleanVar(master=parent, value=el.checked)
			self._vars.append(var)
			return ttk.Checkbutton(parent, variable=var, command=el.click)

		if kind == "entry":
			var = tk.StringVar(master=parent, value=el.value)
			self._vars.append(var)
			var.trace_add("write", _value_writer(el, var))
			return ttk.Entry(parent, textvariable=var)

		if kind == "button":
			return ttk.Button(parent, text=button_text(el), command=el.click)

		if kind == "label":
			lbl = ttk.Label(parent, text=el.text_content, style=label_style(el))
			if is_clickable(el):
				lbl.configure(cursor="hand2")
				lbl.bind("<Button-1>", lambda _e, target=el: target.click())
			return lbl

		return ttk.Frame(parent)

	def _on_focus(self, el: Element) -> None:
		widget = self._widgets.get(id(el))
		if widget is not None and widget.winfo_exists():
			widget.focus_set()


def _value_writer(el: Element, var: tk.StringVar) -> Callable[..., None]:
	def write(*_args: Any) -> None:
		el.value = var.get()
	return write


class TkScheduler:
	"""
	Scheduler backed by Tk's after().
	"""

	def __init__(self, widget: tk.Misc) -> None:
		self._widget = widget

	def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> None:
		self._widget.after(int(delay_ms), callback)
