# ---------------------------------------------------------------------------
# File: storage.py
# ---------------------------------------------------------------------------
# Description:
#	Key/value string storage used to persist the model between runs.
#
# Notes:
#	- Storage is a Protocol: get / set / clear by string key.
#	- MemoryStorage backs tests and throwaway sessions.
#	- FileStorage keeps one JSON object on disk ({key: string}) and rewrites
#	  it atomically on every set/clear.
#	- An unreadable or corrupt file reads as empty (logged); write errors
#	  propagate.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pytodos maintainers			Initial coding / release
# 10/09/2026	pytodos maintainers			Atomic writes for FileStorage
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from pytodos.core.logging import get_app_logger


log = get_app_logger("storage")


@runtime_checkable
class Storage(Protocol):
	def get(self, key: str) -> Optional[str]: ...
	def set(self, key: str, value: str) -> None: ...
	def clear(self, key: str) -> None: ...


class MemoryStorage:
	"""
	Dict-backed storage.
	"""

	def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
		self._items: dict[str, str] = dict(initial or {})

	def get(self, key: str) -> Optional[str]:
		return self._items.get(key)

	def set(self, key: str, value: str) -> None:
		self._items[key] = value

	def clear(self, key: str) -> None:
		self._items.pop(key, None)

	def keys(self) -> list[str]:
		return list(self._items.keys())


class FileStorage:
	"""
	JSON-file-backed storage.

	The file is re-read on every get() so several app copies sharing one
	file always see each other's last write.
	"""

	def __init__(self, path: str | os.PathLike[str]) -> None:
		self.path = Path(path)

	def get(self, key: str) -> Optional[str]:
		return self._read().get(key)

	def set(self, key: str, value: str) -> None:
		items = self._read()
		items[key] = value
		self._write(items)

	def clear(self, key: str) -> None:
		items = self._read()
		if key in items:
			del items[key]
			self._write(items)

	def keys(self) -> list[str]:
		return list(self._read().keys())

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _read(self) -> dict[str, str]:
		if not self.path.exists():
			return {}

		try:
			with self.path.open("r", encoding="utf-8") as fh:
				data = json.load(fh)
		except (OSError, ValueError) as ex:
			log.warning("Storage file %s unreadable, treating as empty: %s", self.path, ex)
			return {}

		if not isinstance(data, dict):
			log.warning("Storage file %s is not a JSON object, treating as empty", self.path)
			return {}

		return {str(k): v for k, v in data.items() if isinstance(v, str)}

	def _write(self, items: dict[str, str]) -> None:
		self.path.parent.mkdir(parents=True, exist_ok=True)

		fd, tmp_name = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=self.path.parent)
		try:
			with os.fdopen(fd, "w", encoding="utf-8") as fh:
				json.dump(items, fh, indent=2, sort_keys=True)
			os.replace(tmp_name, self.path)
		except BaseException:
			if os.path.exists(tmp_name):
				os.unlink(tmp_name)
			raise
