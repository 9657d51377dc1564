"""Turn a node tree back into document lines."""

from loguru import logger

from org_markdown_tree.config import MAX_HEADING_DEPTH
from org_markdown_tree.core.parser.properties import serialize_property
from org_markdown_tree.models.node import Headline, Node, NodeKind


def render_heading(node: Node) -> str:
    """Return the heading line for ``node``.

    Clean nodes reuse their original line. Dirty ones are rebuilt as
    markers, state, priority, text, tracked date, untracked date, tags.
    """
    if not node.dirty and node.raw_heading is not None:
        return node.raw_heading

    depth = node.depth or 0
    if not 1 <= depth <= MAX_HEADING_DEPTH:
        logger.warning("Heading depth {} will not re-parse as a heading", depth)

    p = node.parsed or Headline()
    parts = ["#" * depth]
    if p.state:
        parts.append(p.state)
    if p.priority:
        parts.append(f"[#{p.priority}]")
    if p.text:
        parts.append(p.text)
    if p.tracked:
        block = p.tracked.render(tracked=True)
        if p.tracked_end:
            block += "--" + p.tracked_end.render(tracked=True)
        parts.append(block)
    if p.untracked:
        parts.append(p.untracked.render(tracked=False))
    if p.tags:
        parts.append(":" + ":".join(p.tags) + ":")
    return " ".join(parts)


def _emit(node: Node, out: list[str]) -> None:
    out.append(render_heading(node))
    out.extend(node.content_lines)
    out.extend(serialize_property(key, node.properties[key]) for key in sorted(node.properties))
    for child in node.children:
        _emit(child, out)


def serialize(root: Node) -> list[str]:
    """Serialize a document (or a single heading subtree) to lines."""
    out: list[str] = []
    if root.kind is NodeKind.HEADING:
        _emit(root, out)
        return out

    out.extend(root.content_lines)
    for child in root.children:
        _emit(child, out)
    return out
