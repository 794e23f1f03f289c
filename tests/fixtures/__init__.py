"""Test fixtures for building raw audit results."""

from tests.fixtures.lighthouse import (
    FakeEngine,
    make_audit,
    make_lhr,
    perfect_lhr,
)

__all__ = [
    "FakeEngine",
    "make_audit",
    "make_lhr",
    "perfect_lhr",
]
