"""Domain models for the outline document tree."""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from loguru import logger

from org_markdown_tree.errors import TreeStructureError

if TYPE_CHECKING:
    from org_markdown_tree.protocols import TransitionHook

_PROPERTY_KEY_RE = re.compile(r"^[A-Z_]+$")


@dataclass
class Timestamp:
    """One date block on a heading line, e.g. ``<2025-01-02 Thu 10:00-11:00>``."""

    date: str
    day_name: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    # Unrecognised trailing tokens (repeaters, warnings), kept verbatim.
    extra: str | None = None

    def render(self, *, tracked: bool = True) -> str:
        """Render the block with angle brackets (tracked) or square brackets."""
        parts = [self.date]
        if self.day_name:
            parts.append(self.day_name)
        if self.start_time:
            parts.append(f"{self.start_time}-{self.end_time}" if self.end_time else self.start_time)
        if self.extra:
            parts.append(self.extra)
        body = " ".join(parts)
        return f"<{body}>" if tracked else f"[{body}]"


@dataclass
class Headline:
    """Structured fields of a heading line.

    ``text`` is the free text left over once state, priority, dates and
    tags have been removed.
    """

    text: str = ""
    state: str | None = None
    priority: str | None = None
    tracked: Timestamp | None = None
    tracked_end: Timestamp | None = None
    untracked: Timestamp | None = None
    tags: list[str] = field(default_factory=list)

    @property
    def tracked_date(self) -> str | None:
        return self.tracked.date if self.tracked else None

    @property
    def untracked_date(self) -> str | None:
        return self.untracked.date if self.untracked else None

    @property
    def start_time(self) -> str | None:
        return self.tracked.start_time if self.tracked else None

    @property
    def end_time(self) -> str | None:
        if self.tracked is None:
            return None
        if self.tracked_end is not None and self.tracked.end_time is None:
            return self.tracked_end.start_time
        return self.tracked.end_time

    @property
    def is_all_day(self) -> bool:
        return self.tracked is not None and self.start_time is None


class NodeKind(StrEnum):
    DOCUMENT = "document"
    HEADING = "heading"


@dataclass(eq=False)
class Node:
    """A mutable node in a parsed document.

    The document root carries only ``content_lines`` (the preamble) and
    ``children``. Heading nodes keep their original line in ``raw_heading``;
    once ``dirty`` is set the serializer rebuilds the line from ``parsed``
    instead. Nodes compare by identity.
    """

    kind: NodeKind = NodeKind.HEADING
    depth: int | None = None
    raw_heading: str | None = None
    parsed: Headline | None = None
    content_lines: list[str] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)
    dirty: bool = False
    # 1-based inclusive line range in the parsed text. Stale after mutation.
    source_range: tuple[int, int] = (0, 0)

    def is_heading(self) -> bool:
        return self.kind is NodeKind.HEADING

    def has_state(self, state: str) -> bool:
        return self.parsed is not None and self.parsed.state == state

    def has_children(self) -> bool:
        return len(self.children) > 0

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def contains(self, other: "Node") -> bool:
        """True if ``other`` is this node or one of its descendants."""
        return any(node is other for node in self.walk())

    def set_state(self, new_state: str | None, *, hook: "TransitionHook | None" = None) -> None:
        """Replace the workflow state and mark the node dirty.

        ``hook`` is called with ``(node, old_state, new_state)`` after the
        change; transition policies (completion stamps and the like) live there.
        """
        if self.parsed is None:
            msg = f"Cannot set state on a {self.kind} node"
            raise TreeStructureError(msg)
        old_state = self.parsed.state
        self.parsed.state = new_state
        self.dirty = True
        logger.debug("State {!r} -> {!r} on {!r}", old_state, new_state, self.parsed.text)
        if hook is not None:
            hook(self, old_state, new_state)

    def set_property(self, key: str, value: str | None) -> None:
        """Set a property, or remove it when ``value`` is None."""
        if value is None:
            self.properties.pop(key, None)
        else:
            if not _PROPERTY_KEY_RE.match(key) or not value or "\n" in value:
                logger.warning("Property {}={!r} will not survive a re-parse", key, value)
            self.properties[key] = value
        self.dirty = True

    def insert_child(self, child: "Node", position: int | None = None) -> "Node":
        """Insert ``child`` at a 1-based position, or append when position is None."""
        if child.kind is NodeKind.DOCUMENT:
            msg = "A document root cannot become a child"
            raise TreeStructureError(msg)
        if child.contains(self):
            msg = "Cannot insert a node into its own subtree"
            raise TreeStructureError(msg)

        if position is None:
            self.children.append(child)
        else:
            if not 1 <= position <= len(self.children) + 1:
                msg = f"Insert position {position} out of range 1..{len(self.children) + 1}"
                raise IndexError(msg)
            self.children.insert(position - 1, child)

        self.dirty = True
        return child

    def remove_child(self, child: "Node") -> bool:
        """Detach ``child`` (matched by identity). Returns False if it is not a child."""
        for i, c in enumerate(self.children):
            if c is child:
                del self.children[i]
                self.dirty = True
                return True
        return False

    def adjust_depth(self, delta: int) -> None:
        """Shift this node and all its heading descendants by ``delta`` levels.

        No clamping: keeping depths at 1 or more is up to the caller.
        """
        for node in self.walk():
            if node.is_heading() and node.depth is not None:
                node.depth += delta
                node.dirty = True
