# ---------------------------------------------------------------------------
# File: test_elements.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the element-tree builders.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pytodos maintainers			Initial tests
# 10/09/2026	pytodos maintainers			Add route() coverage
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pytodos.app.model import Model
from pytodos.dom import elements as el
from pytodos.dom.document import Location
from pytodos.dom.node import Element, Text


def test_create_element_appends_children_in_order():
	first = el.span([], ["one"])
	second = el.span([], ["two"])

	parent = el.create_element("div", ["class=todoapp"], [first, second])

	assert parent.tag == "div"
	assert parent.class_name == "todoapp"
	assert parent.children == [first, second]
	assert first.parent is parent


@pytest.mark.parametrize("children", [None, []])
def test_create_element_without_children_is_leaf(children):
	node = el.create_element("input", ["type=checkbox"], children)

	assert node.children == []


def test_none_children_are_skipped_and_scalars_become_text():
	node = el.div([], [None, "left", 3, None])

	assert [type(c) for c in node.children] == [Text, Text]
	assert node.text_content == "left3"


@pytest.mark.parametrize(
	"builder, tag",
	[
		(el.a, "a"),
		(el.button, "button"),
		(el.div, "div"),
		(el.footer, "footer"),
		(el.header, "header"),
		(el.h1, "h1"),
		(el.input_, "input"),
		(el.label, "label"),
		(el.li, "li"),
		(el.section, "section"),
		(el.span, "span"),
		(el.ul, "ul"),
	],
)
def test_wrappers_create_their_tag(builder, tag):
	node = builder(["id=x"], [])

	assert isinstance(node, Element)
	assert node.tag == tag
	assert node.id == "x"


def test_strong_and_text():
	node = el.strong(4)

	assert node.tag == "strong"
	assert node.text_content == "4"
	assert el.text("hello").data == "hello"


def test_empty_removes_every_child():
	children = [el.li(), el.li(), el.li()]
	parent = el.ul([], children)

	el.empty(parent)

	assert parent.children == []
	assert all(c.parent is None for c in children)


def test_nested_trees_compose():
	tree = el.section(["class=main"], [
		el.ul(["class=todo-list"], [
			el.li(["id=1"], [el.label([], ["a"])]),
			el.li(["id=2"], [el.label([], ["b"])]),
		]),
	])

	assert tree.get_element_by_id("2").text_content == "b"
	assert len(tree.get_elements_by_class_name("todo-list")) == 1


def test_route_sets_location_and_returns_new_model():
	location = Location()
	seen: list[str] = []
	location.add_listener(seen.append)
	model = Model()

	routed = el.route(model, "Active", "#/active", location)

	assert routed.hash == "#/active"
	assert model.hash == "#/"
	assert location.hash == "#/active"
	assert seen == ["#/active"]
