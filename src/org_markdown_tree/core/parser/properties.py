"""Read and write ``KEY: [value]`` property lines."""

import re

PROPERTY_RE = re.compile(r"([A-Z_]+): \[(.+)\]")


def parse_property_line(line: str) -> tuple[str, str] | None:
    """Return ``(key, value)`` if the whole line is a property line."""
    m = PROPERTY_RE.fullmatch(line)
    return (m.group(1), m.group(2)) if m else None


def serialize_property(key: str, value: str) -> str:
    return f"{key}: [{value}]"
