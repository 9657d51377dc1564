"""One parse, mutate, serialize, diff cycle over a document."""

from collections.abc import Collection, Sequence

from loguru import logger

from org_markdown_tree.config import resolve_status_states
from org_markdown_tree.core.diff.engine import Edit, apply_edits, diff
from org_markdown_tree.core.tree.builder import parse
from org_markdown_tree.core.tree.query import find_heading_by_text, find_parent
from org_markdown_tree.core.tree.serializer import serialize
from org_markdown_tree.errors import TreeStructureError
from org_markdown_tree.models.node import Node
from org_markdown_tree.protocols import LineStore, TransitionHook


class EditSession:
    """Edit a document as a tree and hand back a line edit script.

    The session keeps the lines it was created from, so ``edits()`` always
    diffs against the text the tree was parsed from. Hooks registered with
    ``register_hook`` run, in order, on every ``set_state`` call made
    through the session.

    Not thread-safe: one session per document at a time.
    """

    def __init__(
        self,
        lines: Sequence[str],
        *,
        valid_states: Collection[str] | None = None,
    ) -> None:
        self.original: list[str] = list(lines)
        self.valid_states = (
            frozenset(valid_states) if valid_states is not None else resolve_status_states()
        )
        self.root = parse(self.original, self.valid_states)
        self._hooks: list[TransitionHook] = []

    @classmethod
    def from_store(
        cls, store: LineStore, *, valid_states: Collection[str] | None = None
    ) -> "EditSession":
        return cls(store.get_lines(), valid_states=valid_states)

    def register_hook(self, hook: TransitionHook) -> None:
        self._hooks.append(hook)

    def _run_hooks(self, node: Node, old_state: str | None, new_state: str | None) -> None:
        for hook in self._hooks:
            hook(node, old_state, new_state)

    def find(self, text: str) -> Node | None:
        return find_heading_by_text(self.root, text)

    def set_state(self, node: Node, new_state: str | None) -> None:
        if new_state is not None and new_state not in self.valid_states:
            logger.warning("State {!r} is not in the configured vocabulary", new_state)
        node.set_state(new_state, hook=self._run_hooks)

    def refile(self, node: Node, target: Node) -> None:
        """Move ``node`` and its subtree to be the last child of ``target``."""
        if node.contains(target):
            msg = "Cannot refile a heading under itself or its own descendant"
            raise TreeStructureError(msg)
        parent = find_parent(self.root, node)
        if parent is None:
            msg = "Heading to refile is not part of this document"
            raise TreeStructureError(msg)

        parent.remove_child(node)
        node.adjust_depth((target.depth or 0) + 1 - (node.depth or 0))
        target.insert_child(node)

    def lines(self) -> list[str]:
        return serialize(self.root)

    def edits(self) -> list[Edit]:
        return diff(self.original, self.lines())

    def apply(self, store: LineStore) -> list[Edit]:
        """Apply this session's edits to ``store``, which must still hold the original text."""
        edits = self.edits()
        apply_edits(store, edits)
        logger.debug("Applied {} edit(s) to line store", len(edits))
        return edits
