"""Table-driven rule evaluation.

Insights, action items and quick wins are each a fixed, ordered table of
rules. A rule pairs a predicate over the finished category reports with a
builder for its output; every rule is evaluated, in table order.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

from analyzer.models import (
    AccessibilityReport,
    BestPracticesReport,
    CategoryReports,
    Insight,
    PerformanceReport,
    PWAReport,
    SEOReport,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class AnalysisContext:
    """Inputs available to rule predicates."""

    reports: CategoryReports
    insights: tuple[Insight, ...] = ()

    @property
    def performance(self) -> PerformanceReport:
        return self.reports.performance

    @property
    def accessibility(self) -> AccessibilityReport:
        return self.reports.accessibility

    @property
    def seo(self) -> SEOReport:
        return self.reports.seo

    @property
    def best_practices(self) -> BestPracticesReport:
        return self.reports.best_practices

    @property
    def pwa(self) -> PWAReport:
        return self.reports.pwa


@dataclass(frozen=True)
class Rule(Generic[T]):
    """One row of a rule table."""

    name: str
    when: Callable[[AnalysisContext], bool]
    build: Callable[[AnalysisContext], T]


def literal(value: T) -> Callable[[AnalysisContext], T]:
    """Builder that always produces ``value``."""
    return lambda _context: value


def evaluate_rules(rules: Sequence[Rule[T]], context: AnalysisContext) -> list[T]:
    """Outputs of every matching rule, in table order."""
    outputs = []
    for rule in rules:
        if rule.when(context):
            logger.debug("rule_matched", rule=rule.name)
            outputs.append(rule.build(context))
    return outputs
