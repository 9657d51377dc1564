"""Line-level edit scripts between two versions of a document.

The diff is a greedy two-pointer walk with a bounded lookahead. It is fast
and always correct (applying the script reproduces the target), but it is
not guaranteed to be minimal: repeated lines further apart than the
lookahead window can produce a larger script than necessary.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from loguru import logger

from org_markdown_tree.config import DIFF_LOOKAHEAD
from org_markdown_tree.protocols import LineStore

EditOp = Literal["insert", "delete", "replace"]


@dataclass(frozen=True)
class Edit:
    """One operation of an edit script.

    ``at_line`` is a 1-based line number in the *original* text. The
    operation removes ``count`` original lines starting there and puts
    ``lines`` in their place.
    """

    op: EditOp
    at_line: int
    count: int = 0
    lines: tuple[str, ...] = field(default_factory=tuple)


def _find_ahead(needle: str, haystack: Sequence[str], start: int, lookahead: int) -> int | None:
    for k in range(start + 1, min(start + lookahead, len(haystack) - 1) + 1):
        if haystack[k] == needle:
            return k
    return None


def diff(
    original: Sequence[str],
    modified: Sequence[str],
    *,
    lookahead: int = DIFF_LOOKAHEAD,
) -> list[Edit]:
    """Compute an edit script turning ``original`` into ``modified``.

    On a mismatch the walk looks up to ``lookahead`` lines ahead on both
    sides. If the current modified line reappears in the original, the
    original lines in between are deleted; if the current original line
    reappears in the modified text, the lines in between are inserted.
    When both are possible the smaller skip wins (deletion on a tie).
    Otherwise the line is replaced and both sides advance.

    Returns:
        Edits in ascending ``at_line`` order. Apply them back to front.
    """
    edits: list[Edit] = []
    i, j = 0, 0
    orig_len, mod_len = len(original), len(modified)

    while i < orig_len or j < mod_len:
        if i >= orig_len:
            edits.append(Edit("insert", i + 1, lines=tuple(modified[j:])))
            break
        if j >= mod_len:
            edits.append(Edit("delete", i + 1, count=orig_len - i))
            break
        if original[i] == modified[j]:
            i += 1
            j += 1
            continue

        found_orig = _find_ahead(modified[j], original, i, lookahead)
        found_mod = _find_ahead(original[i], modified, j, lookahead)

        if found_orig is not None and (found_mod is None or found_orig - i <= found_mod - j):
            edits.append(Edit("delete", i + 1, count=found_orig - i))
            i = found_orig
        elif found_mod is not None:
            edits.append(Edit("insert", i + 1, lines=tuple(modified[j:found_mod])))
            j = found_mod
        else:
            edits.append(Edit("replace", i + 1, count=1, lines=(modified[j],)))
            i += 1
            j += 1

    logger.debug(
        "Diff {} -> {} lines: {} edit(s)", orig_len, mod_len, len(edits)
    )
    return edits


def apply_edits(store: LineStore, edits: Sequence[Edit]) -> None:
    """Apply an edit script to a live line store.

    Edits are applied from the last to the first so that line numbers,
    all computed against the original text, stay valid.
    """
    for edit in reversed(edits):
        start = edit.at_line - 1
        store.set_lines(start, start + edit.count, list(edit.lines))


def apply_to_lines(original: Sequence[str], edits: Sequence[Edit]) -> list[str]:
    """Return a new list with ``edits`` applied to a copy of ``original``."""
    result = list(original)
    for edit in reversed(edits):
        start = edit.at_line - 1
        result[start : start + edit.count] = edit.lines
    return result
