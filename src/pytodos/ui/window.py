# ---------------------------------------------------------------------------
# File: window.py
# ---------------------------------------------------------------------------
# Description:
#   Main window for pytodos.
#
# Notes:
#   - Owns the Tk root, the theme, the document view and key forwarding.
#   - The todo app itself is started through pytodos.app.todo_app.start();
#     this module only hosts it.
#   - Theme comes from ttkthemes (cfg "theme"); an unknown theme falls back
#     to the platform default with a warning.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	pytodos maintainers			Initial coding / release
# 10/11/2026	pytodos maintainers			Add ttkthemes theme selection
# 10/12/2026	pytodos maintainers			Scrollable root for long lists
# 10/14/2026	pytodos maintainers			Drop unused clear_components
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pytodos.app.todo_app import TodoApp, create_document, start
from pytodos.core.config import AppConfig
from pytodos.core.logging import get_app_logger
from pytodos.core.telemetry import Telemetry
from pytodos.dom.document import AUTOFOCUS_RETRY_MS
from pytodos.runtime.storage import Storage
from .component import Component
from .keys import KeyMap, build_default_keymap
from .tk_renderer import DocumentView, TkScheduler, configure_styles


log = get_app_logger("window")


class App(tk.Tk):
	"""
	App

	Top-level window hosting one mounted todo app.
	"""

	def __init__(
		self,
		cfg: AppConfig,
		*,
		storage: Optional[Storage] = None,
		telemetry: Optional[Telemetry] = None,
		keymap: Optional[KeyMap] = None,
	) -> None:
		super().__init__()

		self.cfg = cfg
		self.title_text = str(cfg.get("title", "todos"))
		self.title(self.title_text)

		self.components: list[Component] = []
		self.keymap = keymap or build_default_keymap()

		self._apply_theme(str(cfg.get("theme", "")))

		self.update_idletasks()
		self._apply_geometry(cfg.get("width"), cfg.get("height"))

		if bool(cfg.get("scrollable", False)):
			self._build_scrollable_root()
		else:
			self.root_frame = ttk.Frame(self)
			self.root_frame.pack(fill="both", expand=True)

		# -------------------------------------------------------------------
		# Document + mounted program
		# -------------------------------------------------------------------

		container_id = str(cfg.get("container_id", "app"))
		document = create_document(
			container_id,
			scheduler=TkScheduler(self),
			autofocus_retry_ms=cfg.get_int("autofocus_retry_ms", AUTOFOCUS_RETRY_MS),
		)

		self.todo: TodoApp = start(cfg, document=document, storage=storage, telemetry=telemetry)

		self.document_view = DocumentView(document=document, container_id=container_id, name="todoapp")
		self.add_component(self.document_view)
		self.todo.program.add_render_listener(self.document_view.schedule_redraw)
		self.document_view.redraw()

		self._bind_keys()

	# -----------------------------------------------------------------------
	# Components
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		self.components.append(component)
		component.mount(self.root_frame)
		component.layout()

	# -----------------------------------------------------------------------
	# Keys
	# -----------------------------------------------------------------------

	def _bind_keys(self) -> None:
		for keyseq in self.keymap.keys():
			self.bind_all(keyseq, lambda _e, k=keyseq: self._on_key(k))

	def _on_key(self, keyseq: str) -> None:
		key = self.keymap.resolve(keyseq)
		if key:
			self.todo.document.key_up(key)

	# -----------------------------------------------------------------------
	# Window & root setup
	# -----------------------------------------------------------------------

	def _apply_theme(self, theme: str) -> None:
		self.style = ThemedStyle(self)
		if theme:
			try:
				self.style.set_theme(theme)
			except tk.TclError as ex:
				log.warning("Theme %r unavailable, using default: %s", theme, ex)
		configure_styles(self.style)

	def _apply_geometry(self, width: Any, height: Any) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		req_w = int(width) if width else screen_w
		req_h = int(height) if height else screen_h

		win_w = max(1, min(req_w, screen_w))
		win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _build_scrollable_root(self) -> None:
		"""
		Canvas + inner Frame + Scrollbar, with mousewheel scrolling.
		"""
		container = ttk.Frame(self)
		container.pack(fill="both", expand=True)

		self.canvas = tk.Canvas(container, highlightthickness=0)
		self.v_scroll = ttk.Scrollbar(container, orient="vertical", command=self.canvas.yview)

		self.root_frame = ttk.Frame(self.canvas)
		self.root_frame.bind(
			"<Configure>",
			lambda _e: self.canvas.configure(scrollregion=self.canvas.bbox("all")),
		)

		window_id = self.canvas.create_window((0, 0), window=self.root_frame, anchor="nw")
		self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(window_id, width=e.width))
		self.canvas.configure(yscrollcommand=self.v_scroll.set)

		self.canvas.pack(side="left", fill="both", expand=True)
		self.v_scroll.pack(side="right", fill="y")

		def _on_mousewheel(event: tk.Event) -> None:
			delta = getattr(event, "delta", 0)
			if delta:
				self.canvas.yview_scroll(int(-1 * (delta / 120)), "units")

		self.bind_all("<MouseWheel>", _on_mousewheel)

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.mainloop()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
