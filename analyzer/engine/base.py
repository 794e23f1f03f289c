"""Audit engine interface."""

from abc import ABC, abstractmethod

from analyzer.engine.lhr import LighthouseResult
from analyzer.models import Category


class AuditEngine(ABC):
    """Runs one category audit for a URL and returns the raw Lighthouse result.

    Implementations own their own resources (browser process, HTTP client)
    and timeouts; each ``run`` call is independent of every other.
    """

    name: str = "engine"

    @abstractmethod
    async def run(self, url: str, category: Category) -> LighthouseResult:
        """Audit ``url`` for a single category."""
        ...
