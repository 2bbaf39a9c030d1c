# ---------------------------------------------------------------------------
# File: test_update.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the reducer.
#
# Notes:
#	- Host reads are faked through UpdateEnv; no document needed except
#	  for the from_document() tests.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial tests
# 10/08/2026	pytodos maintainers			SAVE / double-click coverage
# 10/10/2026	pytodos maintainers			Blank ADD titles rejected
# 10/14/2026	pytodos maintainers			SAVE with unknown id, container-scoped env
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pytodos.app.model import Model, Todo
from pytodos.app.update import Action, UpdateEnv, update
from pytodos.dom.attributes import ClassName, Id, Value
from pytodos.dom.document import Document
from pytodos.dom.elements import div, input_


class FakeClock:
	def __init__(self, now: int = 1_000) -> None:
		self.now = now

	def __call__(self) -> int:
		return self.now


def _model(*todos: Todo, **kwargs) -> Model:
	all_done = all(t.done for t in todos)
	return Model(todos=tuple(todos), all_done=all_done, **kwargs)


# ---------------------------------------------------------------------------
# ADD
# ---------------------------------------------------------------------------

def test_add_to_empty_list():
	model = update("ADD", Model(), "Learn Elm Architecture")

	assert model.todos == (Todo(1, "Learn Elm Architecture", False),)
	assert model.all_done is False


def test_add_uses_max_id_plus_one():
	model = _model(Todo(1, "a"), Todo(5, "b"))

	assert update(Action.ADD, model, "c").todos[-1] == Todo(6, "c")


def test_add_trims_title():
	assert update("ADD", Model(), "  milk  ").todos[0].title == "milk"


def test_add_falls_back_to_new_todo_field():
	env = UpdateEnv(new_todo_text=lambda: "from field")

	model = update("ADD", Model(), None, env=env)

	assert model.todos[0].title == "from field"


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_add_rejects_blank_titles(title):
	model = Model()

	assert update("ADD", model, None, env=UpdateEnv(new_todo_text=lambda: title)) is model


@pytest.mark.parametrize("title", ["", "   "])
def test_add_blank_data_does_not_read_the_field(title):
	model = _model(Todo(1, "a"))
	env = UpdateEnv(new_todo_text=lambda: "from field")

	assert update("ADD", model, title, env=env) is model


def test_add_does_not_mutate_input():
	model = _model(Todo(1, "a"))

	update("ADD", model, "b")

	assert model.todos == (Todo(1, "a"),)


# ---------------------------------------------------------------------------
# TOGGLE / TOGGLE_ALL
# ---------------------------------------------------------------------------

def test_toggle_flips_one_item_and_recomputes_all_done():
	model = _model(Todo(1, "a"), Todo(2, "b", True))

	toggled = update("TOGGLE", model, 1)

	assert [t.done for t in toggled.todos] == [True, True]
	assert toggled.all_done is True

	back = update("TOGGLE", toggled, 1)
	assert back.todos == model.todos
	assert back.all_done is False


def test_toggle_unknown_id_leaves_todos():
	model = _model(Todo(1, "a"))

	assert update("TOGGLE", model, 42).todos == model.todos


def test_toggle_all_sets_every_item():
	model = _model(Todo(1, "a"), Todo(2, "b", True))

	toggled = update("TOGGLE_ALL", model)

	assert toggled.all_done is True
	assert all(t.done for t in toggled.todos)

	cleared = update("TOGGLE_ALL", toggled)
	assert cleared.all_done is False
	assert not any(t.done for t in cleared.todos)


def test_toggle_all_twice_is_identity_for_uniform_lists():
	model = _model(Todo(1, "a", True), Todo(2, "b", True))

	assert update("TOGGLE_ALL", update("TOGGLE_ALL", model)) == model


def test_toggle_all_on_empty_list_keeps_all_done():
	assert update("TOGGLE_ALL", Model()).all_done is True
	assert update("TOGGLE_ALL", Model(all_done=True)).all_done is True


# ---------------------------------------------------------------------------
# DELETE / CLEAR_COMPLETED
# ---------------------------------------------------------------------------

def test_delete_removes_item():
	model = _model(Todo(1, "a"), Todo(2, "b", True))

	deleted = update("DELETE", model, 1)

	assert deleted.ids() == [2]
	assert deleted.all_done is True


def test_delete_edited_item_clears_editing():
	model = _model(Todo(1, "a"), editing=1)

	assert update("DELETE", model, 1).editing is None


def test_delete_unknown_id_keeps_list():
	model = _model(Todo(1, "a"))

	assert update("DELETE", model, 9).ids() == [1]


def test_clear_completed_keeps_active_items():
	model = _model(Todo(1, "a", True), Todo(2, "b"), Todo(3, "c", True))

	cleared = update("CLEAR_COMPLETED", model)

	assert cleared.todos == (Todo(2, "b"),)
	assert update("CLEAR_COMPLETED", cleared).todos == cleared.todos


# ---------------------------------------------------------------------------
# EDIT (double click)
# ---------------------------------------------------------------------------

def test_single_click_records_click_only():
	clock = FakeClock(5_000)
	model = _model(Todo(1, "a"))

	clicked = update("EDIT", model, 1, env=UpdateEnv(clock=clock))

	assert clicked.clicked == 1
	assert clicked.click_time == 5_000
	assert clicked.editing is None


def test_double_click_enters_edit_mode():
	clock = FakeClock(5_000)
	env = UpdateEnv(clock=clock)
	model = update("EDIT", _model(Todo(1, "a")), 1, env=env)

	clock.now += 299
	editing = update("EDIT", model, 1, env=env)

	assert editing.editing == 1


def test_slow_second_click_does_not_edit():
	clock = FakeClock(5_000)
	env = UpdateEnv(clock=clock)
	model = update("EDIT", _model(Todo(1, "a")), 1, env=env)

	clock.now += 300
	again = update("EDIT", model, 1, env=env)

	assert again.editing is None
	assert again.click_time == 5_300


def test_clicks_on_different_items_do_not_edit():
	clock = FakeClock()
	env = UpdateEnv(clock=clock)
	model = update("EDIT", _model(Todo(1, "a"), Todo(2, "b")), 1, env=env)

	clock.now += 10
	other = update("EDIT", model, 2, env=env)

	assert other.editing is None
	assert other.clicked == 2


def test_double_click_window_is_configurable():
	clock = FakeClock()
	env = UpdateEnv(clock=clock, double_click_ms=50)
	model = update("EDIT", _model(Todo(1, "a")), 1, env=env)

	clock.now += 60

	assert update("EDIT", model, 1, env=env).editing is None


def test_edit_unknown_id_is_noop():
	model = _model(Todo(1, "a"))

	assert update("EDIT", model, 9) is model


# ---------------------------------------------------------------------------
# SAVE / CANCEL
# ---------------------------------------------------------------------------

def test_save_updates_title_and_leaves_edit_mode():
	model = _model(Todo(1, "a"), Todo(2, "b"), editing=2, clicked=2, click_time=1)
	env = UpdateEnv(edit_field=lambda: (2, "  bee "))

	saved = update("SAVE", model, env=env)

	assert saved.todos == (Todo(1, "a"), Todo(2, "bee"))
	assert saved.editing is None
	assert saved.clicked is None


def test_save_blank_title_deletes_item():
	model = _model(Todo(1, "a"), Todo(2, "b", True), editing=1)
	env = UpdateEnv(edit_field=lambda: (1, "   "))

	saved = update("SAVE", model, env=env)

	assert saved.ids() == [2]
	assert saved.all_done is True
	assert saved.editing is None


@pytest.mark.parametrize("text", ["x", ""])
def test_save_unknown_id_only_leaves_edit_mode(text):
	model = _model(Todo(1, "a"), Todo(2, "b"), editing=2, clicked=2, click_time=5)
	env = UpdateEnv(edit_field=lambda: (99, text))

	saved = update("SAVE", model, env=env)

	assert saved.todos == model.todos
	assert saved.editing is None
	assert saved.clicked is None


def test_cancel_leaves_titles_alone():
	model = _model(Todo(1, "a"), editing=1, clicked=1, click_time=10)

	cancelled = update("CANCEL", model)

	assert cancelled.todos == model.todos
	assert cancelled.editing is None
	assert cancelled.clicked is None


# ---------------------------------------------------------------------------
# ROUTE / unknown
# ---------------------------------------------------------------------------

def test_route_reads_current_hash():
	env = UpdateEnv(route=lambda: "#/completed")

	assert update("ROUTE", Model(), env=env).hash == "#/completed"


@pytest.mark.parametrize("action", ["UNKNOWN", "", "add"])
def test_unknown_actions_return_model_unchanged(action):
	model = _model(Todo(1, "a"))

	assert update(action, model, 1) is model


# ---------------------------------------------------------------------------
# UpdateEnv.from_document
# ---------------------------------------------------------------------------

def test_env_reads_live_document():
	doc = Document()
	new_todo = input_([Id("new-todo")])
	new_todo.value = "typed"
	doc.body.append_child(new_todo)
	doc.body.append_child(input_([ClassName("edit"), Id(3), Value("editing text")]))
	doc.location.replace("#/active")

	env = UpdateEnv.from_document(doc, clock=FakeClock(7))

	assert env.new_todo_text() == "typed"
	assert env.edit_field() == (3, "editing text")
	assert env.route() == "#/active"
	assert env.clock() == 7


def test_env_scoped_to_container_ignores_other_fields():
	doc = Document()
	other = div([Id("other")])
	mine = div([Id("mine")])
	doc.body.append_child(other)
	doc.body.append_child(mine)

	outside = input_([Id("new-todo")])
	outside.value = "not mine"
	other.append_child(outside)
	other.append_child(input_([ClassName("edit"), Id(1), Value("other edit")]))

	env = UpdateEnv.from_document(doc, root=mine)

	assert env.new_todo_text() == ""
	assert env.edit_field() == (None, "")

	inside = input_([Id("new-todo")])
	inside.value = "mine"
	mine.append_child(inside)

	assert env.new_todo_text() == "mine"


def test_env_without_fields_reads_empty():
	env = UpdateEnv.from_document(Document())

	assert env.new_todo_text() == ""
	assert env.edit_field() == (None, "")
