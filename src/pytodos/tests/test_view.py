# ---------------------------------------------------------------------------
# File: test_view.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for view(), render_item(), render_main(), render_footer().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pytodos maintainers			Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

import pytest

from pytodos.app.model import Model, Todo
from pytodos.app.view import render_footer, render_item, render_main, view


class RecordingDispatch:
	"""
	dispatch(action, data) stand-in that records callbacks when invoked.
	"""

	def __init__(self) -> None:
		self.created: list[tuple[str, Any]] = []
		self.fired: list[tuple[str, Any]] = []

	def __call__(self, action: str, data: Any = None):
		self.created.append((action, data))

		def callback(*_args: Any) -> None:
			self.fired.append((action, data))

		return callback


def _model(**kwargs) -> Model:
	todos = (
		Todo(1, "Learn Elm Architecture", done=True),
		Todo(2, "Build Todo List App"),
		Todo(3, "Win the Internet!"),
	)
	kwargs.setdefault("all_done", False)
	return Model(todos=todos, **kwargs)


def test_empty_model_hides_main_and_footer():
	tree = view(Model())

	assert tree.get_element_by_id("main").hidden is True
	assert tree.get_element_by_id("footer").hidden is True
	assert tree.get_elements_by_class_name("todo-list")[0].children == []


def test_header_has_title_and_new_todo_field():
	tree = view(Model())

	assert tree.class_name == "todoapp"
	assert tree.get_elements_by_class_name("header")[0].text_content == "todos"

	field = tree.get_element_by_id("new-todo")
	assert field.tag == "input"
	assert field.get_attribute("placeholder") == "What needs to be done?"
	assert field.autofocus is True


def test_items_rendered_in_order():
	tree = view(_model())

	rows = tree.get_elements_by_class_name("todo-list")[0].children
	assert [r.get_attribute("data-id") for r in rows] == ["1", "2", "3"]
	assert [r.text_content for r in rows] == [
		"Learn Elm Architecture",
		"Build Todo List App",
		"Win the Internet!",
	]


@pytest.mark.parametrize(
	"route, ids",
	[
		("#/", ["1", "2", "3"]),
		("#/active", ["2", "3"]),
		("#/completed", ["1"]),
	],
)
def test_list_is_filtered_by_route(route, ids):
	tree = render_main(_model(hash=route))

	rows = tree.get_elements_by_class_name("todo-list")[0].children
	assert [r.id for r in rows] == ids


def test_completed_item_is_marked_and_checked():
	row = render_item(Todo(1, "done thing", True), Model())

	assert row.class_list == ["completed"]
	toggle = row.get_elements_by_class_name("toggle")[0]
	assert toggle.checked is True
	assert toggle.get_attribute("type") == "checkbox"


def test_active_item_is_unchecked():
	row = render_item(Todo(2, "open thing"), Model())

	assert row.class_list == []
	assert row.get_elements_by_class_name("toggle")[0].checked is False
	assert row.get_elements_by_class_name("edit") == []


def test_editing_item_has_edit_field():
	todo = Todo(2, "open thing")
	row = render_item(todo, Model(todos=(todo,), all_done=False, editing=2))

	assert row.class_list == ["editing"]
	field = row.get_elements_by_class_name("edit")[0]
	assert field.value == "open thing"
	assert field.id == "2"
	assert field.autofocus is True


def test_toggle_all_reflects_all_done():
	assert render_main(_model()).get_element_by_id("toggle-all").checked is False
	assert render_main(_model(all_done=True)).get_element_by_id("toggle-all").checked is True


@pytest.mark.parametrize(
	"todos, text",
	[
		((Todo(1, "a"),), "1 item left"),
		((Todo(1, "a"), Todo(2, "b")), "2 items left"),
		((Todo(1, "a", True),), "0 items left"),
	],
)
def test_footer_count_pluralizes(todos, text):
	tree = render_footer(Model(todos=todos))

	assert tree.get_element_by_id("count").text_content == text
	assert tree.hidden is False


def test_clear_completed_shows_completed_count():
	tree = render_footer(_model())

	button = tree.get_elements_by_class_name("clear-completed")[0]
	assert button.hidden is False
	assert button.text_content == "Clear completed [1]"
	assert tree.get_element_by_id("completed-count").text_content == "1"


def test_clear_completed_hidden_without_completed_items():
	tree = render_footer(Model(todos=(Todo(1, "a"),)))

	assert tree.get_elements_by_class_name("clear-completed")[0].hidden is True


@pytest.mark.parametrize("route, selected", [("#/", "all"), ("#/active", "active"), ("#/completed", "completed")])
def test_current_filter_link_is_selected(route, selected):
	tree = render_footer(_model(hash=route))

	links = {el.id: el for el in tree.iter() if el.tag == "a"}
	assert set(links) == {"all", "active", "completed"}
	assert [k for k, el in links.items() if "selected" in el.class_list] == [selected]
	assert links["active"].get_attribute("href") == "#/active"


def test_view_wires_dispatch_callbacks():
	dispatch = RecordingDispatch()
	tree = view(_model(), dispatch)

	row = tree.get_element_by_id("2")
	row.get_elements_by_class_name("toggle")[0].click()
	row.get_elements_by_class_name("destroy")[0].click()
	row.get_elements_by_class_name("view")[0].children[1].click()
	tree.get_element_by_id("toggle-all").click()
	tree.get_elements_by_class_name("clear-completed")[0].click()

	assert dispatch.fired == [
		("TOGGLE", 2),
		("DELETE", 2),
		("EDIT", 2),
		("TOGGLE_ALL", None),
		("CLEAR_COMPLETED", None),
	]


def test_view_does_not_fire_actions_while_rendering():
	dispatch = RecordingDispatch()

	view(_model(), dispatch)

	assert dispatch.created
	assert dispatch.fired == []


def test_view_without_dispatch_has_no_handlers():
	tree = view(_model())

	assert all(el.onclick is None for el in tree.iter())


def test_view_is_deterministic():
	model = _model(editing=2)

	first = view(model)
	second = view(model)

	assert first is not second
	assert [(el.tag, el.attributes) for el in first.iter()] == [(el.tag, el.attributes) for el in second.iter()]
	assert model == _model(editing=2)
