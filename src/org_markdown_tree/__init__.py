"""Editable document tree for org-style markdown outlines."""

from org_markdown_tree.buffer import LineBuffer
from org_markdown_tree.core.diff.engine import Edit, apply_edits, apply_to_lines, diff
from org_markdown_tree.core.parser.headline import classify_heading, parse_headline
from org_markdown_tree.core.parser.properties import parse_property_line, serialize_property
from org_markdown_tree.core.tree.builder import parse
from org_markdown_tree.core.tree.query import (
    create_node,
    find_heading_by_text,
    find_node_at_line,
    find_parent,
)
from org_markdown_tree.core.tree.serializer import render_heading, serialize
from org_markdown_tree.errors import OutlineError, TreeStructureError
from org_markdown_tree.models.node import Headline, Node, NodeKind, Timestamp
from org_markdown_tree.protocols import LineStore, TransitionHook
from org_markdown_tree.session import EditSession

__all__ = [
    "Edit",
    "EditSession",
    "Headline",
    "LineBuffer",
    "LineStore",
    "Node",
    "NodeKind",
    "OutlineError",
    "Timestamp",
    "TransitionHook",
    "TreeStructureError",
    "apply_edits",
    "apply_to_lines",
    "classify_heading",
    "create_node",
    "diff",
    "find_heading_by_text",
    "find_node_at_line",
    "find_parent",
    "parse",
    "parse_headline",
    "parse_property_line",
    "render_heading",
    "serialize",
    "serialize_property",
]
