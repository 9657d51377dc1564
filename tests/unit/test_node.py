"""Tests for node mutation: state, properties, children, depth."""

import pytest

from org_markdown_tree.core.tree.builder import parse
from org_markdown_tree.core.tree.query import create_node
from org_markdown_tree.errors import TreeStructureError
from org_markdown_tree.models.node import Node
from tests.unit.samples import STATES


def _task(line: str = "## TODO Task") -> Node:
    return parse([line], STATES).children[0]


def test_set_state_marks_dirty() -> None:
    node = _task()

    node.set_state("DONE")

    assert node.parsed is not None
    assert node.parsed.state == "DONE"
    assert node.dirty is True


def test_set_state_calls_hook_with_transition() -> None:
    node = _task()
    calls: list[tuple[Node, str | None, str | None]] = []

    node.set_state("DONE", hook=lambda n, old, new: calls.append((n, old, new)))

    assert calls == [(node, "TODO", "DONE")]


def test_set_state_does_not_touch_properties() -> None:
    node = _task()

    node.set_state("DONE")

    assert node.properties == {}


def test_set_state_can_clear_state() -> None:
    node = _task()

    node.set_state(None)

    assert node.parsed is not None
    assert node.parsed.state is None


def test_set_state_on_document_root_raises() -> None:
    root = parse([])

    with pytest.raises(TreeStructureError):
        root.set_state("DONE")


def test_set_and_remove_property() -> None:
    node = _task()

    node.set_property("OWNER", "alice")
    assert node.get_property("OWNER") == "alice"
    assert node.dirty is True

    node.set_property("OWNER", None)
    assert node.get_property("OWNER") is None


def test_removing_missing_property_is_harmless() -> None:
    node = _task()

    node.set_property("MISSING", None)

    assert node.properties == {}


def test_node_predicates() -> None:
    root = parse(["# TODO Parent", "## Child"], STATES)
    parent = root.children[0]

    assert root.is_heading() is False
    assert parent.is_heading() is True
    assert parent.has_state("TODO") is True
    assert parent.has_state("DONE") is False
    assert root.has_state("TODO") is False
    assert parent.has_children() is True
    assert parent.children[0].has_children() is False


def test_insert_child_appends_and_marks_parent_dirty() -> None:
    parent = _task("# Parent")
    child = create_node(2, "New")

    returned = parent.insert_child(child)

    assert returned is child
    assert parent.children == [child]
    assert parent.dirty is True


def test_insert_child_at_one_based_position() -> None:
    root = parse(["# P", "## A", "## B"], STATES)
    parent = root.children[0]
    first = create_node(2, "First")
    middle = create_node(2, "Middle")

    parent.insert_child(first, 1)
    parent.insert_child(middle, 3)

    assert [c.parsed.text for c in parent.children if c.parsed] == ["First", "A", "Middle", "B"]


def test_insert_child_position_out_of_range() -> None:
    parent = _task("# Parent")

    with pytest.raises(IndexError):
        parent.insert_child(create_node(2, "X"), 3)
    with pytest.raises(IndexError):
        parent.insert_child(create_node(2, "X"), 0)


def test_insert_ancestor_into_descendant_raises() -> None:
    root = parse(["# A", "## B", "### C"], STATES)
    a = root.children[0]
    c = a.children[0].children[0]

    with pytest.raises(TreeStructureError):
        c.insert_child(a)
    with pytest.raises(TreeStructureError):
        a.insert_child(a)


def test_insert_document_root_raises() -> None:
    parent = _task("# Parent")

    with pytest.raises(TreeStructureError):
        parent.insert_child(parse([]))


def test_remove_child_matches_identity() -> None:
    root = parse(["# P", "## Same", "## Same"], STATES)
    parent = root.children[0]
    first, second = parent.children

    assert parent.remove_child(second) is True
    assert parent.children == [first]
    assert parent.children[0] is first
    assert parent.dirty is True


def test_remove_child_not_found() -> None:
    root = parse(["# P", "## A"], STATES)
    parent = root.children[0]
    stranger = create_node(2, "A")

    assert parent.remove_child(stranger) is False
    assert len(parent.children) == 1
    assert parent.dirty is False


def test_remove_child_drops_whole_subtree() -> None:
    root = parse(["# P", "## A", "### A1", "## B"], STATES)
    parent = root.children[0]

    parent.remove_child(parent.children[0])

    texts = [n.parsed.text for n in root.walk() if n.parsed]
    assert texts == ["P", "B"]


def test_adjust_depth_recurses() -> None:
    root = parse(["# A", "## B", "### C"], STATES)
    a = root.children[0]

    a.adjust_depth(2)

    depths = [n.depth for n in a.walk()]
    assert depths == [3, 4, 5]
    assert all(n.dirty for n in a.walk())


def test_adjust_depth_negative() -> None:
    root = parse(["# A", "### C"], STATES)
    c = root.children[0].children[0]

    c.adjust_depth(-1)

    assert c.depth == 2
    assert root.children[0].dirty is False


def test_walk_is_document_order() -> None:
    root = parse(["# A", "## B", "# C"], STATES)

    assert [n.parsed.text for n in root.walk() if n.parsed] == ["A", "B", "C"]


def test_nodes_compare_by_identity() -> None:
    assert create_node(1, "X") != create_node(1, "X")
