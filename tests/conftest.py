"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment before any app code runs
os.environ["ENV"] = "test"
os.environ.setdefault("AUDIT_ENGINE", "lighthouse")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; clear around each test so env changes apply."""
    from analyzer.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def perfect_results():
    """Canned results scoring 100 with no issues in every category."""
    from analyzer.models import Category
    from tests.fixtures import perfect_lhr

    return {category: perfect_lhr(category) for category in Category}
