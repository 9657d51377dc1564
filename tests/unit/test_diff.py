"""Tests for the line diff engine and applying edit scripts."""

import random

import pytest

from org_markdown_tree.buffer import LineBuffer
from org_markdown_tree.core.diff.engine import Edit, apply_edits, apply_to_lines, diff


def test_identical_lines_give_no_edits() -> None:
    lines = ["line 1", "line 2"]

    assert diff(lines, lines) == []


def test_both_empty() -> None:
    assert diff([], []) == []


def test_single_replace() -> None:
    assert diff(["a", "b", "c"], ["a", "x", "c"]) == [Edit("replace", 2, count=1, lines=("x",))]


def test_trailing_insert() -> None:
    assert diff(["a", "b"], ["a", "b", "c"]) == [Edit("insert", 3, lines=("c",))]


def test_insert_in_middle() -> None:
    edits = diff(["line 1", "line 2"], ["line 1", "inserted", "line 2"])

    assert edits == [Edit("insert", 2, lines=("inserted",))]


def test_delete_in_middle() -> None:
    edits = diff(["line 1", "to delete", "line 2"], ["line 1", "line 2"])

    assert edits == [Edit("delete", 2, count=1)]


def test_trailing_delete() -> None:
    assert diff(["a", "b", "c"], ["a"]) == [Edit("delete", 2, count=2)]


def test_from_empty_original() -> None:
    assert diff([], ["a", "b"]) == [Edit("insert", 1, lines=("a", "b"))]


def test_to_empty_modified() -> None:
    assert diff(["a", "b"], []) == [Edit("delete", 1, count=2)]


def test_smaller_skip_wins() -> None:
    # Deleting "x" (skip 1) beats inserting "a", "b", "c" (skip 3).
    original = ["x", "a", "b", "c", "x"]
    modified = ["a", "b", "c", "x"]

    assert diff(original, modified) == [Edit("delete", 1, count=1)]


def test_tie_prefers_delete() -> None:
    edits = diff(["a", "b"], ["b", "a"])

    assert edits[0].op == "delete"
    assert apply_to_lines(["a", "b"], edits) == ["b", "a"]


def test_lookahead_bound_falls_back_to_replace() -> None:
    original = ["keep"] + [f"old {n}" for n in range(5)]
    modified = ["keep"] + [f"new {n}" for n in range(3)] + ["old 0"]

    edits = diff(original, modified, lookahead=2)

    assert edits[0] == Edit("replace", 2, count=1, lines=("new 0",))
    assert apply_to_lines(original, edits) == modified


def test_edits_are_in_ascending_line_order() -> None:
    original = ["a", "b", "c", "d", "e"]
    modified = ["a", "B", "c", "e", "f"]

    edits = diff(original, modified)

    assert [e.at_line for e in edits] == sorted({e.at_line for e in edits})


def test_apply_edits_to_line_buffer() -> None:
    original = ["## TODO Task", "body", "## Next"]
    modified = ["## DONE Task", "body", "COMPLETED_AT: [2025-01-01]", "## Next"]
    buffer = LineBuffer(original)

    apply_edits(buffer, diff(original, modified))

    assert buffer.get_lines() == modified


def test_line_buffer_rejects_bad_range() -> None:
    buffer = LineBuffer(["a"])

    with pytest.raises(IndexError):
        buffer.set_lines(1, 3, [])


def _random_lines(rng: random.Random, max_len: int) -> list[str]:
    # Small alphabet so lines repeat and the lookahead has to choose.
    return [rng.choice("abcdef") for _ in range(rng.randint(0, max_len))]


@pytest.mark.parametrize("seed", range(200))
def test_applying_script_reproduces_target(seed: int) -> None:
    rng = random.Random(seed)
    original = _random_lines(rng, 30)
    modified = _random_lines(rng, 30)

    edits = diff(original, modified, lookahead=rng.choice([1, 3, 50]))

    assert apply_to_lines(original, edits) == modified
    buffer = LineBuffer(original)
    apply_edits(buffer, edits)
    assert buffer.get_lines() == modified
