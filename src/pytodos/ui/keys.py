# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#   Key mapping for pytodos (Tk key sequence -> document key name).
#
# Notes:
#   Pure mapping, no Tk dependency. The window binds every key sequence in
#   the map and forwards the resolved key name as a document keyup event.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	pytodos maintainers			Initial coding / release
# 10/11/2026	pytodos maintainers			Add keypad Enter
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pytodos.app.subscriptions import ENTER_KEY, ESCAPE_KEY


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of Tk key sequences (e.g., "<KeyRelease-Return>") to key
	names understood by subscriptions (e.g., "Enter").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, key: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not key:
			raise ValueError("key must be a non-empty string")

		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = key

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def clear(self) -> None:
		self._bindings.clear()


def build_default_keymap() -> KeyMap:
	km = KeyMap()

	km.bind("<KeyRelease-Return>", ENTER_KEY)
	km.bind("<KeyRelease-KP_Enter>", ENTER_KEY)
	km.bind("<KeyRelease-Escape>", ESCAPE_KEY)

	return km
