"""Shared pytest fixtures."""

import pytest

from msconv import DurationParser, create_parser
from msconv.parser import default_parser


@pytest.fixture
def parser() -> DurationParser:
    """Create a fresh DurationParser for each test."""
    return create_parser()


@pytest.fixture(autouse=True)
def clear_default_cache():
    """Start every test with an empty shared parse cache."""
    default_parser().cache.clear()
    yield
    default_parser().cache.clear()
