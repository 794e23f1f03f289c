"""Category adapters normalizing raw audit output into CategoryReports."""

from analyzer.adapters.accessibility import AccessibilityAdapter
from analyzer.adapters.base import (
    AdapterOutcome,
    AuditStatus,
    CategoryAdapter,
    classify_audit,
    prioritize_issues,
    severity_for_score,
)
from analyzer.adapters.best_practices import BestPracticesAdapter
from analyzer.adapters.performance import PerformanceAdapter
from analyzer.adapters.pwa import PWAAdapter
from analyzer.adapters.seo import SEOAdapter
from analyzer.engine.base import AuditEngine
from analyzer.models import Category

__all__ = [
    "AccessibilityAdapter",
    "AdapterOutcome",
    "AuditStatus",
    "BestPracticesAdapter",
    "CategoryAdapter",
    "PWAAdapter",
    "PerformanceAdapter",
    "SEOAdapter",
    "ADAPTERS",
    "build_adapters",
    "classify_audit",
    "prioritize_issues",
    "severity_for_score",
]

ADAPTERS: dict[Category, type[CategoryAdapter]] = {
    Category.PERFORMANCE: PerformanceAdapter,
    Category.ACCESSIBILITY: AccessibilityAdapter,
    Category.SEO: SEOAdapter,
    Category.BEST_PRACTICES: BestPracticesAdapter,
    Category.PWA: PWAAdapter,
}


def build_adapters(engine: AuditEngine) -> list[CategoryAdapter]:
    """One adapter per category, in Category order, sharing ``engine``."""
    return [ADAPTERS[category](engine) for category in Category]
