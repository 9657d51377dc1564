"""Read documents from disk and write them back only when they changed."""

from collections.abc import Collection, Sequence
from pathlib import Path

from loguru import logger

from org_markdown_tree.config import DEFAULT_STATUS_STATES
from org_markdown_tree.core.tree.builder import parse
from org_markdown_tree.core.tree.serializer import serialize
from org_markdown_tree.models.node import Node


def read_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 file as lines. A final newline does not add an empty line."""
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def write_lines(path: str | Path, lines: Sequence[str]) -> bool:
    """Write ``lines`` to ``path`` unless the file already holds them.

    Returns:
        True if the file was created or changed.
    """
    contents = "\n".join(lines) + "\n" if lines else ""
    target = Path(path)
    try:
        if target.read_text(encoding="utf-8") == contents:
            logger.debug("Unchanged, not writing {}", target)
            return False
        action = "update"
    except (FileNotFoundError, UnicodeDecodeError):
        action = "create"

    logger.debug("Writing ({}) {}", action, target)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(contents, encoding="utf-8")
    return True


def read_document(
    path: str | Path,
    valid_states: Collection[str] = DEFAULT_STATUS_STATES,
) -> Node:
    """Read and parse a document file."""
    return parse(read_lines(path), valid_states)


def write_document(path: str | Path, root: Node) -> bool:
    """Serialize ``root`` and write it to ``path`` if the contents differ."""
    return write_lines(path, serialize(root))
