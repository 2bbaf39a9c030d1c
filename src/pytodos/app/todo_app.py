# ---------------------------------------------------------------------------
# File: todo_app.py
# ---------------------------------------------------------------------------
# Description:
#	Composition root: wires document, storage, update, view and
#	subscriptions into a mounted Program.
#
# Notes:
#	- Toolkit-agnostic; the Tk window calls start() with its own scheduler.
#	- The document location is synced to the persisted route after mount.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	pytodos maintainers			Initial coding / release
# 10/14/2026	pytodos maintainers			Pass the container to env and subscriptions
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from pytodos.app.model import Model
from pytodos.app.subscriptions import subscriptions
from pytodos.app.update import DOUBLE_CLICK_MS, UpdateEnv, update, wall_clock_ms
from pytodos.app.view import view
from pytodos.core.config import DEFAULTS, AppConfig
from pytodos.core.logging import get_app_logger
from pytodos.core.telemetry import Telemetry
from pytodos.dom.document import AUTOFOCUS_RETRY_MS, Document, ManualScheduler, Scheduler
from pytodos.dom.elements import div
from pytodos.dom.attributes import Id
from pytodos.runtime.mount import Program, mount
from pytodos.runtime.storage import FileStorage, Storage


log = get_app_logger()

INITIAL_MODEL = Model()


@dataclass(slots=True)
class TodoApp:
	"""
	A started todo app: its document, mounted program and config.
	"""
	document: Document
	program: Program
	cfg: AppConfig

	@property
	def model(self) -> Model:
		return self.program.model


def create_document(
	container_id: str,
	*,
	scheduler: Optional[Scheduler] = None,
	autofocus_retry_ms: int = AUTOFOCUS_RETRY_MS,
) -> Document:
	"""
	New document whose body holds an empty container div.
	"""
	document = Document(scheduler=scheduler or ManualScheduler(), autofocus_retry_ms=autofocus_retry_ms)
	document.body.append_child(div([Id(container_id)]))
	return document


def start(
	cfg: Optional[AppConfig] = None,
	*,
	document: Optional[Document] = None,
	storage: Optional[Storage] = None,
	telemetry: Optional[Telemetry] = None,
	clock: Callable[[], int] = wall_clock_ms,
	initial_model: Model = INITIAL_MODEL,
) -> TodoApp:
	cfg = cfg or AppConfig(dict(DEFAULTS))
	container_id = str(cfg.get("container_id", "app"))

	if document is None:
		document = create_document(
			container_id,
			autofocus_retry_ms=cfg.get_int("autofocus_retry_ms", AUTOFOCUS_RETRY_MS),
		)
	elif document.get_element_by_id(container_id) is None:
		document.body.append_child(div([Id(container_id)]))

	if storage is None:
		storage = FileStorage(cfg.storage_path())
		log.info("Using storage file %s", storage.path)

	root = document.get_element_by_id(container_id)
	env = UpdateEnv.from_document(
		document,
		root=root,
		clock=clock,
		double_click_ms=cfg.get_int("double_click_ms", DOUBLE_CLICK_MS),
	)

	program = mount(
		initial_model,
		partial(update, env=env),
		view,
		container_id,
		partial(subscriptions, document=document, root=root),
		document=document,
		storage=storage,
		telemetry=telemetry,
	)

	document.location.replace(program.model.hash)
	return TodoApp(document=document, program=program, cfg=cfg)
