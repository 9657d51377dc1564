"""In-memory line store."""

from collections.abc import Iterable


class LineBuffer:
    """A list of lines with an editor-buffer style ``set_lines`` API."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def line_count(self) -> int:
        return len(self._lines)

    def get_lines(self) -> list[str]:
        return list(self._lines)

    def set_lines(self, start: int, end: int, lines: list[str]) -> None:
        """Replace lines ``[start, end)`` (0-based) with ``lines``."""
        if not 0 <= start <= end <= len(self._lines):
            msg = f"Line range [{start}, {end}) outside buffer of {len(self._lines)} lines"
            raise IndexError(msg)
        self._lines[start:end] = lines
