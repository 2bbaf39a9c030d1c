# ---------------------------------------------------------------------------
# File: subscriptions.py
# ---------------------------------------------------------------------------
# Description:
#	Host event listeners that feed actions into dispatch.
#
# Notes:
#	- Enter: SAVE when a row is being edited, then ADD when the new-item
#	  field holds non-blank text (field cleared and refocused afterwards).
#	- Escape: CANCEL.
#	- Route change: ROUTE.
#	- Every listener ends in dispatch(...)(), the factory/call pair.
#	- With root, Enter only looks at the edit row and new-item field inside
#	  that container, so apps sharing a document stay apart.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pytodos maintainers			Initial coding / release
# 10/14/2026	pytodos maintainers			Scope Enter handling to the container
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional

from pytodos.app.update import NEW_TODO_ID, Action
from pytodos.core.logging import get_app_logger
from pytodos.dom.document import Document, KeyEvent
from pytodos.dom.node import Element


log = get_app_logger("subscriptions")

ENTER_KEY = "Enter"
ESCAPE_KEY = "Escape"


def subscriptions(
	dispatch: Callable[..., Callable[..., Any]],
	document: Document,
	root: Optional[Element] = None,
) -> None:
	"""
	Register keyboard and navigation listeners on document.

	root is the mounted container; Enter reads only the fields inside it.
	"""
	scope = root if root is not None else document.body

	def on_keyup(event: KeyEvent) -> None:
		if event.key == ENTER_KEY:
			if scope.get_elements_by_class_name("editing"):
				dispatch(Action.SAVE.value)()

			new_todo = scope.get_element_by_id(NEW_TODO_ID)
			if new_todo is not None and new_todo.value.strip():
				dispatch(Action.ADD.value)()

				# The render above replaced the field; reset the fresh one.
				fresh = scope.get_element_by_id(NEW_TODO_ID)
				if fresh is not None:
					fresh.value = ""
					fresh.focus()

		elif event.key == ESCAPE_KEY:
			dispatch(Action.CANCEL.value)()

	def on_route(hash: str) -> None:
		log.debug("Route changed to %s", hash)
		dispatch(Action.ROUTE.value)()

	document.add_event_listener("keyup", on_keyup)
	document.location.add_listener(on_route)
