# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pytodos (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Safe to call before the window exists (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys (first match wins):
#	- Level:		"logging.level", "log_level"			(default: "INFO")
#	- Console:		"logging.console", "log_console"		(default: True)
#	- File:			"logging.file", "log_file"				(default: None)
#	- File mode:	"logging.file_mode", "log_file_mode"	(default: "a")
#	- Root reset:	"logging.reset_root", "log_reset_root"	(default: True)
#	- Format:		"logging.format", "log_format"
#	- Date format:	"logging.datefmt", "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pytodos maintainers			Initial coding / release
# 10/07/2026	pytodos maintainers			Table-driven cfg keys
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_BASE = "pytodos.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# setting -> (primary key, legacy key, default)
_CFG_KEYS: dict[str, tuple[str, str, Any]] = {
	"level": ("logging.level", "log_level", "INFO"),
	"console": ("logging.console", "log_console", True),
	"file": ("logging.file", "log_file", None),
	"file_mode": ("logging.file_mode", "log_file_mode", "a"),
	"reset_root": ("logging.reset_root", "log_reset_root", True),
	"format": ("logging.format", "log_format", DEFAULT_FORMAT),
	"datefmt": ("logging.datefmt", "log_datefmt", "%Y-%m-%d %H:%M:%S"),
}


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	"""
	Return a logger by explicit name.
	"""
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()			-> pytodos.app
		get_app_logger("mount")		-> pytodos.app.mount
		get_app_logger("update")	-> pytodos.app.update
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{component}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pytodos.

	Safe to call multiple times. Reconfiguration occurs only if the resolved
	settings change, so handlers are never duplicated.

	Args:
		cfg:
			Any object that supports cfg.get(key, default) (e.g., AppConfig) or a dict-like.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	settings = {name: _resolve(cfg, name) for name in _CFG_KEYS}

	level = _coerce_level(settings["level"])
	log_file = str(settings["file"]) if settings["file"] else None
	file_mode = _coerce_file_mode(settings["file_mode"])

	signature: tuple[Any, ...] = (
		level,
		bool(settings["console"]),
		log_file,
		file_mode,
		bool(settings["reset_root"]),
		str(settings["format"]),
		str(settings["datefmt"]),
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(
		level=level,
		console_enabled=bool(settings["console"]),
		log_file=log_file,
		file_mode=file_mode,
		fmt=str(settings["format"]),
		datefmt=str(settings["datefmt"]),
		reset_root=bool(settings["reset_root"]),
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _resolve(cfg: Any | None, setting: str) -> Any:
	primary, legacy, default = _CFG_KEYS[setting]

	value = _cfg_get(cfg, primary, None)
	if value is None:
		value = _cfg_get(cfg, legacy, default)
	return value


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	"""
	Best-effort config getter.

	Supports:
	- cfg.get(key, default)
	- dict-like objects
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		try:
			return getter(key, default)
		except Exception:
			return default

	try:
		return cfg[key]  # type: ignore[index]
	except Exception:
		return default


def _coerce_level(level: Any) -> int:
	"""
	Convert common representations of logging levels to an int.
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = getattr(logging, val, logging.INFO)
		return resolved if isinstance(resolved, int) else logging.INFO

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	"""
	Only "a" or "w" are accepted for the FileHandler.
	"""
	if isinstance(mode, str):
		val = mode.strip().lower()
		if val in ("a", "w"):
			return val
	return "a"


def _configure_root_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	"""
	Configure the root logger.

	If reset_root=True, existing handlers are removed first.
	"""
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (intended for unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
