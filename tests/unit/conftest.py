"""Shared test fixtures."""

import pytest

from org_markdown_tree.core.tree.builder import parse
from org_markdown_tree.models.node import Node
from tests.unit.samples import SAMPLE_LINES, STATES


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_tree(sample_lines: list[str]) -> Node:
    """The sample document parsed with the default vocabulary."""
    return parse(sample_lines, STATES)
