"""Protocols for the collaborators around the tree model."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from org_markdown_tree.models.node import Node


@runtime_checkable
class TransitionHook(Protocol):
    """Callback invoked after a heading's state changes."""

    def __call__(self, node: "Node", old_state: str | None, new_state: str | None) -> None:
        """React to ``node`` moving from ``old_state`` to ``new_state``."""
        ...


@runtime_checkable
class LineStore(Protocol):
    """A live, line-addressable text store such as an editor buffer."""

    def line_count(self) -> int:
        """Return the number of lines in the store."""
        ...

    def get_lines(self) -> list[str]:
        """Return a copy of all lines."""
        ...

    def set_lines(self, start: int, end: int, lines: list[str]) -> None:
        """Replace lines ``[start, end)`` (0-based) with ``lines``."""
        ...
