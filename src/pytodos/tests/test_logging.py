# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pytodos.core.logging.
#
# Notes:
#	- Root handlers are saved and restored around every test.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pytodos maintainers			Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pytodos.core.config import AppConfig
from pytodos.core.logging import (
	_reset_logging_for_tests,
	get_app_logger,
	get_logger,
	init_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
	root = logging.getLogger()
	handlers = list(root.handlers)
	level = root.level
	_reset_logging_for_tests()
	yield
	for h in list(root.handlers):
		if h not in handlers:
			root.removeHandler(h)
			h.close()
	for h in handlers:
		if h not in root.handlers:
			root.addHandler(h)
	root.setLevel(level)
	_reset_logging_for_tests()


def _own_handlers(before: list[logging.Handler]) -> list[logging.Handler]:
	return [h for h in logging.getLogger().handlers if h not in before]


def test_app_logger_names():
	assert get_app_logger().name == "pytodos.app"
	assert get_app_logger("mount").name == "pytodos.app.mount"
	assert get_logger("x.y").name == "x.y"


def test_init_logging_sets_level_from_primary_or_legacy_key():
	init_logging({"logging.level": "DEBUG"})
	assert logging.getLogger().level == logging.DEBUG

	init_logging(AppConfig({"log_level": "warning"}))
	assert logging.getLogger().level == logging.WARNING


def test_unknown_level_falls_back_to_info():
	init_logging({"logging.level": "LOUD"})

	assert logging.getLogger().level == logging.INFO


def test_init_logging_is_idempotent():
	init_logging({"logging.level": "INFO", "logging.reset_root": False})
	before = list(logging.getLogger().handlers)

	init_logging({"logging.level": "INFO", "logging.reset_root": False})

	assert logging.getLogger().handlers == before


def test_init_logging_writes_log_file(tmp_path):
	log_file = tmp_path / "logs" / "pytodos.log"

	init_logging({"logging.file": str(log_file), "logging.console": False, "logging.file_mode": "w"})
	get_app_logger("test").info("hello file")
	for h in logging.getLogger().handlers:
		h.flush()

	assert "hello file" in log_file.read_text(encoding="utf-8")


def test_console_disabled_adds_no_stream_handler():
	before = [h for h in logging.getLogger().handlers]

	init_logging({"logging.console": False, "logging.reset_root": False})

	assert _own_handlers(before) == []
