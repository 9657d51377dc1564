"""Transition hooks that attach policy to state changes."""

from collections.abc import Callable, Collection
from datetime import date

from org_markdown_tree.config import COMPLETED_AT_KEY, DEFAULT_TERMINAL_STATES
from org_markdown_tree.models.node import Node
from org_markdown_tree.protocols import TransitionHook


def completion_stamp_hook(
    terminal_states: Collection[str] = DEFAULT_TERMINAL_STATES,
    *,
    key: str = COMPLETED_AT_KEY,
    today: Callable[[], date] = date.today,
) -> TransitionHook:
    """Build a hook that stamps ``key`` with today's date on completion.

    Entering any of ``terminal_states`` from outside the set sets the
    property; leaving the set removes it. Moves within the set leave it alone.
    """

    def hook(node: Node, old_state: str | None, new_state: str | None) -> None:
        was_terminal = old_state in terminal_states
        is_terminal = new_state in terminal_states
        if is_terminal and not was_terminal:
            node.set_property(key, today().isoformat())
        elif was_terminal and not is_terminal and key in node.properties:
            node.set_property(key, None)

    return hook


def completed_at(node: Node, *, key: str = COMPLETED_AT_KEY) -> date | None:
    """Return the completion date stored on ``node``, if it parses."""
    raw = node.get_property(key)
    if raw is None:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None
