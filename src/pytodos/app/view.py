# ---------------------------------------------------------------------------
# File: view.py
# ---------------------------------------------------------------------------
# Description:
#	view(model, dispatch) -> element tree for the whole todo list.
#
# Notes:
#	- Pure: builds a fresh tree from the model and never touches it.
#	- dispatch(action, data) returns a zero-arg callback; the view installs
#	  those callbacks as click handlers and never calls update itself.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pytodos maintainers			Initial coding / release
# 10/08/2026	pytodos maintainers			Typed attribute records
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional

from pytodos.app.model import ROUTE_ACTIVE, ROUTE_ALL, ROUTE_COMPLETED, Model, Todo
from pytodos.app.update import Action
from pytodos.dom.attributes import (
	Autofocus,
	Checked,
	ClassName,
	DataId,
	For,
	Href,
	Id,
	OnClick,
	Placeholder,
	Style,
	Type,
	Value,
)
from pytodos.dom.elements import a, button, div, footer, h1, header, input_, label, li, section, span, strong, text, ul
from pytodos.dom.node import Element


Dispatch = Callable[..., Callable[..., Any]]

FILTER_LINKS: tuple[tuple[str, str, str], ...] = (
	(ROUTE_ALL, "all", "All"),
	(ROUTE_ACTIVE, "active", "Active"),
	(ROUTE_COMPLETED, "completed", "Completed"),
)


def _on(dispatch: Optional[Dispatch], action: Action, data: Any = None) -> Optional[OnClick]:
	if dispatch is None:
		return None
	return OnClick(dispatch(action.value, data))


def _display(visible: bool) -> Style:
	return Style("display:" + ("block" if visible else "none"))


def render_item(item: Todo, model: Model, dispatch: Optional[Dispatch] = None) -> Element:
	"""
	One <li> row: toggle checkbox, title label, destroy button and, while
	the row is being edited, the inline edit field.
	"""
	editing = model.editing is not None and model.editing == item.id

	return li([
		DataId(item.id),
		Id(item.id),
		ClassName("completed") if item.done else None,
		ClassName("editing") if editing else None,
	], [
		div([ClassName("view")], [
			input_([
				Checked() if item.done else None,
				ClassName("toggle"),
				Type("checkbox"),
				_on(dispatch, Action.TOGGLE, item.id),
			]),
			label([_on(dispatch, Action.EDIT, item.id)], [text(item.title)]),
			button([ClassName("destroy"), _on(dispatch, Action.DELETE, item.id)]),
		]),
		input_([ClassName("edit"), Id(item.id), Value(item.title), Autofocus()]) if editing else None,
	])


def render_main(model: Model, dispatch: Optional[Dispatch] = None) -> Element:
	"""
	<section class="main">: toggle-all control and the filtered list.
	"""
	return section([ClassName("main"), Id("main"), _display(bool(model.todos))], [
		input_([
			Id("toggle-all"),
			Type("checkbox"),
			_on(dispatch, Action.TOGGLE_ALL),
			Checked() if model.all_done else None,
			ClassName("toggle-all"),
		]),
		label([For("toggle-all")], [text("Mark all as complete")]),
		ul([ClassName("todo-list")], [
			render_item(item, model, dispatch) for item in model.visible_todos()
		]),
	])


def render_footer(model: Model, dispatch: Optional[Dispatch] = None) -> Element:
	"""
	<footer>: remaining count, route filters and "clear completed".
	"""
	count = model.active_count
	done = model.completed_count
	left = " item left" if count == 1 else " items left"

	return footer([ClassName("footer"), Id("footer"), _display(count > 0 or done > 0)], [
		span([ClassName("todo-count"), Id("count")], [strong(count), text(left)]),
		ul([ClassName("filters")], [
			li([], [
				a([Href(route), Id(link_id), ClassName("selected" if model.hash == route else "")], [text(title)]),
			])
			for route, link_id, title in FILTER_LINKS
		]),
		button([ClassName("clear-completed"), _display(done > 0), _on(dispatch, Action.CLEAR_COMPLETED)], [
			text("Clear completed ["),
			span([Id("completed-count")], [text(done)]),
			text("]"),
		]),
	])


def view(model: Model, dispatch: Optional[Dispatch] = None) -> Element:
	return section([ClassName("todoapp")], [
		header([ClassName("header")], [
			h1([], [text("todos")]),
			input_([
				Id("new-todo"),
				ClassName("new-todo"),
				Placeholder("What needs to be done?"),
				Autofocus(),
			]),
		]),
		render_main(model, dispatch),
		render_footer(model, dispatch),
	])
