"""Configuration constants for org-markdown-tree."""

import os

# Workflow keywords recognised at the start of a heading. Order matters for cycling.
DEFAULT_STATUS_STATES: tuple[str, ...] = (
    "TODO",
    "IN_PROGRESS",
    "WAITING",
    "CANCELLED",
    "DONE",
    "BLOCKED",
)

# Entering one of these states stamps COMPLETED_AT, leaving it clears the stamp.
DEFAULT_TERMINAL_STATES: frozenset[str] = frozenset({"DONE"})

COMPLETED_AT_KEY: str = "COMPLETED_AT"

# Headings deeper than this are plain content lines.
MAX_HEADING_DEPTH: int = 6

# How far the diff engine looks ahead to re-synchronize after a mismatch.
DIFF_LOOKAHEAD: int = 50

# Comma-separated override for the status vocabulary, e.g. "TODO,NEXT,DONE".
STATES_ENV_VAR: str = "ORG_MARKDOWN_STATES"


def resolve_status_states() -> frozenset[str]:
    """Return the status vocabulary, honouring the environment override."""
    raw = os.environ.get(STATES_ENV_VAR, "")
    states = {s.strip() for s in raw.split(",") if s.strip()}
    return frozenset(states) if states else frozenset(DEFAULT_STATUS_STATES)
