# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration for pytodos.
#
# Notes:
#	- AppConfig is a read-only view over a flat dict (dotted keys allowed).
#	- Precedence: DEFAULTS < config file (JSON object) < explicit overrides.
#	- None overrides are ignored so argparse defaults don't clobber the file.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pytodos maintainers			Initial coding / release
# 10/08/2026	pytodos maintainers			Add JSON config file loading
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


DEFAULT_STORAGE_PATH = os.path.join("~", ".pytodos", "storage.json")

DEFAULTS: dict[str, Any] = {
	"container_id": "app",
	"storage.path": DEFAULT_STORAGE_PATH,
	"double_click_ms": 300,
	"autofocus_retry_ms": 200,
	"title": "todos",
	"theme": "arc",
	"width": 560,
	"height": 640,
	"scrollable": True,
	"telemetry_enabled": False,
	"telemetry_sink": "null",
	"log_level": "INFO",
}


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] = field(default_factory=dict)

	def get(self, key: str, default: Any = None) -> Any:
		return self.options.get(key, default)

	def get_int(self, key: str, default: int) -> int:
		value = self.options.get(key, default)
		try:
			return int(value)
		except (TypeError, ValueError):
			return default

	def storage_path(self) -> Path:
		return Path(os.path.expanduser(str(self.get("storage.path", DEFAULT_STORAGE_PATH))))

	def with_overrides(self, overrides: Mapping[str, Any]) -> "AppConfig":
		merged = dict(self.options)
		merged.update({k: v for k, v in overrides.items() if v is not None})
		return AppConfig(merged)


def load_config(
	path: str | os.PathLike[str] | None = None,
	overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
	"""
	Build an AppConfig from DEFAULTS, an optional JSON file and overrides.

	Raises:
		ValueError: if the file is not a JSON object.
		OSError: if the file cannot be read.
	"""
	cfg = AppConfig(dict(DEFAULTS))

	if path is not None:
		with open(path, "r", encoding="utf-8") as fh:
			data = json.load(fh)
		if not isinstance(data, dict):
			raise ValueError(f"Config file {str(path)!r} must contain a JSON object")
		cfg = cfg.with_overrides(data)

	if overrides:
		cfg = cfg.with_overrides(overrides)

	return cfg
