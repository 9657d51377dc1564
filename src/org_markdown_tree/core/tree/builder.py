"""Build a node tree from the flat lines of a document."""

from collections.abc import Collection, Sequence

from loguru import logger

from org_markdown_tree.config import DEFAULT_STATUS_STATES
from org_markdown_tree.core.parser.headline import classify_heading, parse_headline
from org_markdown_tree.core.parser.properties import parse_property_line
from org_markdown_tree.models.node import Node, NodeKind


def parse(
    lines: Sequence[str],
    valid_states: Collection[str] = DEFAULT_STATUS_STATES,
) -> Node:
    """Parse document lines into a tree rooted at a document node.

    A heading becomes a child of the nearest preceding heading with a
    smaller depth. Lines before the first heading are the root's preamble
    and are kept verbatim. Under a heading, ``KEY: [value]`` lines go into
    that heading's properties and everything else into its content.

    Args:
        lines: Document lines, one element per line, without newlines.
        valid_states: Keywords accepted as heading states.

    Returns:
        The document root node.
    """
    root = Node(kind=NodeKind.DOCUMENT, source_range=(1, len(lines)))
    # (node, depth) pairs; the document root sits at depth 0.
    stack: list[tuple[Node, int]] = [(root, 0)]

    for lineno, line in enumerate(lines, start=1):
        depth = classify_heading(line)
        if depth is not None:
            while stack[-1][1] >= depth:
                closed, _ = stack.pop()
                closed.source_range = (closed.source_range[0], lineno - 1)
            node = Node(
                kind=NodeKind.HEADING,
                depth=depth,
                raw_heading=line,
                parsed=parse_headline(line, valid_states),
                source_range=(lineno, lineno),
            )
            stack[-1][0].children.append(node)
            stack.append((node, depth))
            continue

        current = stack[-1][0]
        if current is root:
            root.content_lines.append(line)
            continue

        prop = parse_property_line(line)
        if prop is None:
            current.content_lines.append(line)
            continue

        key, value = prop
        if key in current.properties:
            logger.warning("Duplicate property {} on line {}, keeping the last one", key, lineno)
        current.properties[key] = value

    for node, _ in stack[1:]:
        node.source_range = (node.source_range[0], len(lines))

    logger.debug(
        "Parsed {} lines into {} headings", len(lines), sum(1 for _ in root.walk()) - 1
    )
    return root
