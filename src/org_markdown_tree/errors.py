"""Exceptions raised by the outline tree model."""


class OutlineError(Exception):
    """Base class for org-markdown-tree errors."""


class TreeStructureError(OutlineError, ValueError):
    """A mutation would break the single-owner tree invariant."""
