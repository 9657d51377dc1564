"""Tree lookups and node construction: parents, headings by text, line positions."""

from collections.abc import Iterable

from org_markdown_tree.errors import TreeStructureError
from org_markdown_tree.models.node import Headline, Node, NodeKind, Timestamp


def find_parent(root: Node, target: Node) -> Node | None:
    """Return the parent of ``target``, or None if it is ``root`` or not in the tree."""
    for child in root.children:
        if child is target:
            return root
        parent = find_parent(child, target)
        if parent is not None:
            return parent
    return None


def find_heading_by_text(scope: Node, text: str) -> Node | None:
    """Find the first descendant heading whose free text equals ``text`` exactly."""
    for child in scope.children:
        if child.is_heading() and child.parsed is not None and child.parsed.text == text:
            return child
        found = find_heading_by_text(child, text)
        if found is not None:
            return found
    return None


def find_node_at_line(root: Node, line: int) -> Node | None:
    """Return the innermost node covering a 1-based line of the parsed text.

    Preamble lines map to the document root; lines past the end give None.
    Only meaningful before the tree has been mutated.
    """
    if root.kind is NodeKind.DOCUMENT and not 1 <= line <= root.source_range[1]:
        return None
    for child in root.children:
        start, end = child.source_range
        if start <= line <= end:
            return find_node_at_line(child, line)
    return root


def create_node(
    depth: int,
    text: str,
    *,
    state: str | None = None,
    priority: str | None = None,
    tags: Iterable[str] | None = None,
    content_lines: Iterable[str] | None = None,
    tracked: Timestamp | None = None,
    untracked: Timestamp | None = None,
) -> Node:
    """Build a fresh heading node. It is always dirty since it has no source line."""
    if depth < 1:
        msg = f"Heading depth must be at least 1, got {depth}"
        raise TreeStructureError(msg)

    return Node(
        kind=NodeKind.HEADING,
        depth=depth,
        parsed=Headline(
            text=text,
            state=state,
            priority=priority,
            tracked=tracked,
            untracked=untracked,
            tags=list(dict.fromkeys(tags or ())),
        ),
        content_lines=list(content_lines or ()),
        dirty=True,
    )
