# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#   Base Tk component for the pytodos window.
#
# Notes:
#   Composite pattern: every component can contain child components.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	pytodos maintainers			Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass(eq=False)
class Component:
	"""
	Base UI component.

	- id:	stable identifier (auto-generated when omitted).
	- name:	friendly label (defaults to class name).

	- mount() builds self.root and mounts children into it.
	- layout() packs root and children.
	- redraw() refreshes; default delegates to children.
	- destroy() destroys children then root.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.root)

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(fill="both", expand=True)

		for child in self.components:
			child.layout()

	def redraw(self) -> None:
		for child in self.components:
			child.redraw()

	def destroy(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

		if self.root is not None:
			self.root.destroy()
			self.root = None
