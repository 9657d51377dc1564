"""Classify heading lines and split them into structured fields.

The parser is permissive: any line that looks like a heading yields a
``Headline``, and features that fail to match (unknown state keyword,
malformed priority, missing dates) are simply absent.
"""

import re
from collections.abc import Collection

from org_markdown_tree.config import DEFAULT_STATUS_STATES, MAX_HEADING_DEPTH
from org_markdown_tree.models.node import Headline, Timestamp

HEADING_RE = re.compile(rf"^(#{{1,{MAX_HEADING_DEPTH}}}) ")
STATE_RE = re.compile(r"^([A-Z_]+)(?:\s+|$)")
PRIORITY_RE = re.compile(r"\[#([A-Z])\]")

_ISO_DATE = r"\d{4}-\d{2}-\d{2}"
TRACKED_RANGE_RE = re.compile(rf"<({_ISO_DATE})([^>]*)>--<({_ISO_DATE})([^>]*)>")
TRACKED_RE = re.compile(rf"<({_ISO_DATE})([^>]*)>")
UNTRACKED_RE = re.compile(rf"\[({_ISO_DATE})([^\]]*)\]")
TAG_BLOCK_RE = re.compile(r"(?:^|\s)(:(?:[\w-]+:)+)\s*$")

_TIME_RE = re.compile(r"^(\d{2}:\d{2})(?:-(\d{2}:\d{2}))?$")
_DAY_NAME_RE = re.compile(r"^[^\W\d_]+\.?$")


def classify_heading(line: str) -> int | None:
    """Return the heading depth of ``line``, or None if it is not a heading."""
    m = HEADING_RE.match(line)
    return len(m.group(1)) if m else None


def is_heading(line: str) -> bool:
    return classify_heading(line) is not None


def parse_timestamp(date: str, remainder: str) -> Timestamp:
    """Build a Timestamp from the date and whatever followed it inside the brackets."""
    stamp = Timestamp(date=date)
    extra: list[str] = []
    for token in remainder.split():
        time_match = _TIME_RE.match(token)
        if (
            stamp.day_name is None
            and stamp.start_time is None
            and not extra
            and _DAY_NAME_RE.match(token)
        ):
            stamp.day_name = token
        elif time_match and stamp.start_time is None:
            stamp.start_time, stamp.end_time = time_match.group(1), time_match.group(2)
        else:
            extra.append(token)
    stamp.extra = " ".join(extra) or None
    return stamp


def _cut(text: str, start: int, end: int) -> str:
    """Remove ``text[start:end]`` and fold the whitespace around the gap."""
    return f"{text[:start].rstrip()} {text[end:].lstrip()}".strip()


def _cut_all(pattern: re.Pattern[str], text: str) -> str:
    m = pattern.search(text)
    while m:
        text = _cut(text, m.start(), m.end())
        m = pattern.search(text)
    return text


def parse_headline(
    line: str,
    valid_states: Collection[str] = DEFAULT_STATUS_STATES,
) -> Headline | None:
    """Parse a heading line into a Headline.

    Only the first date block of each kind is recorded, but every date
    block is removed from the free text, so a rebuilt heading carries
    exactly the recorded dates.

    Args:
        line: The raw line.
        valid_states: Keywords accepted as the workflow state. A leading
            all-caps token outside this set stays part of the text.

    Returns:
        The parsed fields, or None if ``line`` is not a heading.
    """
    depth = classify_heading(line)
    if depth is None:
        return None

    headline = Headline()
    rest = line[depth + 1 :].lstrip()

    m = STATE_RE.match(rest)
    if m and m.group(1) in valid_states:
        headline.state = m.group(1)
        rest = rest[m.end() :]
    rest = rest.strip()

    m = PRIORITY_RE.search(rest)
    if m:
        headline.priority = m.group(1)
        rest = _cut(rest, m.start(), m.end())

    m = TAG_BLOCK_RE.search(rest)
    if m:
        headline.tags = list(dict.fromkeys(t for t in m.group(1).split(":") if t))
        rest = rest[: m.start()].rstrip()

    m = TRACKED_RANGE_RE.search(rest)
    if m:
        headline.tracked = parse_timestamp(m.group(1), m.group(2))
        headline.tracked_end = parse_timestamp(m.group(3), m.group(4))
    else:
        m = TRACKED_RE.search(rest)
        if m:
            headline.tracked = parse_timestamp(m.group(1), m.group(2))
    rest = _cut_all(TRACKED_RE, _cut_all(TRACKED_RANGE_RE, rest))

    m = UNTRACKED_RE.search(rest)
    if m:
        headline.untracked = parse_timestamp(m.group(1), m.group(2))
    rest = _cut_all(UNTRACKED_RE, rest)

    headline.text = rest.strip()
    return headline
