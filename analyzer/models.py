"""Report data structures for the comprehensive site analysis.

Every record here is built once per analysis and never mutated, so the
dataclasses are frozen and sequences are stored as tuples. ``to_dict()``
produces the JSON contract consumed by the HTTP/session layer: field names
and nesting are stable, including the per-category names of issue lists
("opportunities", "violations", "issues") and severity fields ("impact",
"severity").
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar


class Category(StrEnum):
    """The five audit categories, keyed as they appear in reports."""

    PERFORMANCE = "performance"
    ACCESSIBILITY = "accessibility"
    SEO = "seo"
    BEST_PRACTICES = "best_practices"
    PWA = "pwa"

    @property
    def lighthouse_id(self) -> str:
        """Category id as used by Lighthouse."""
        return self.value.replace("_", "-")


class Severity(StrEnum):
    """Severity/impact tier shared by every category."""

    CRITICAL = "critical"
    SERIOUS = "serious"
    MODERATE = "moderate"
    MINOR = "minor"


SEVERITY_ORDER: dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.SERIOUS: 1,
    Severity.MODERATE: 2,
    Severity.MINOR: 3,
}


class Effort(StrEnum):
    """Effort levels for implementing an action item."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class AuditCounts:
    """Partition of a category's audit entries into five buckets."""

    failed: int = 0
    passed: int = 0
    manual: int = 0
    informative: int = 0
    not_applicable: int = 0

    @property
    def total(self) -> int:
        return self.failed + self.passed + self.manual + self.informative + self.not_applicable

    def to_dict(self) -> dict:
        return {
            "failed": self.failed,
            "passed": self.passed,
            "manual": self.manual,
            "informative": self.informative,
            "not_applicable": self.not_applicable,
        }


@dataclass(frozen=True)
class Issue:
    """A failed audit entry."""

    id: str
    title: str
    description: str
    score: float | None
    severity: Severity
    group: str | None = None  # SEO sub-category (crawlability, content, mobile, ...)
    display_value: str | None = None

    def to_dict(self, severity_field: str = "severity") -> dict:
        data: dict = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "score": self.score,
            severity_field: self.severity.value,
        }
        if self.group is not None:
            data["category"] = self.group
        if self.display_value is not None:
            data["display_value"] = self.display_value
        return data


@dataclass(frozen=True)
class CategoryReport:
    """Normalized result of one category audit."""

    issues_field: ClassVar[str] = "issues"
    severity_field: ClassVar[str] = "severity"

    score: int = 0
    audit_counts: AuditCounts = field(default_factory=AuditCounts)
    issues: tuple[Issue, ...] = ()
    prioritized_recommendations: tuple[str, ...] = ()

    def has_issue(self, issue_id: str) -> bool:
        return any(issue.id == issue_id for issue in self.issues)

    def count_by_severity(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def _issues_to_list(self) -> list[dict]:
        return [issue.to_dict(self.severity_field) for issue in self.issues]

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "audit_counts": self.audit_counts.to_dict(),
            self.issues_field: self._issues_to_list(),
            "prioritized_recommendations": list(self.prioritized_recommendations),
        }


@dataclass(frozen=True)
class CoreWebVitals:
    """Core Web Vitals and lab metrics in Lighthouse units (ms, unitless CLS)."""

    lcp: float | None = None
    fcp: float | None = None
    cls: float | None = None
    tbt: float | None = None
    si: float | None = None
    tti: float | None = None

    def to_dict(self) -> dict:
        values = {
            "LCP": self.lcp,
            "FCP": self.fcp,
            "CLS": self.cls,
            "TBT": self.tbt,
            "SI": self.si,
            "TTI": self.tti,
        }
        return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class Metric:
    """A single lab metric."""

    id: str
    title: str
    value: float | None
    display_value: str | None
    score: float | None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "value": self.value,
            "display_value": self.display_value,
            "score": self.score,
        }


@dataclass(frozen=True)
class PerformanceReport(CategoryReport):
    issues_field: ClassVar[str] = "opportunities"
    severity_field: ClassVar[str] = "impact"

    core_web_vitals: CoreWebVitals = field(default_factory=CoreWebVitals)
    metrics: tuple[Metric, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @property
    def opportunities(self) -> tuple[Issue, ...]:
        return self.issues

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "audit_counts": self.audit_counts.to_dict(),
            "core_web_vitals": self.core_web_vitals.to_dict(),
            "metrics": [m.to_dict() for m in self.metrics],
            "opportunities": self._issues_to_list(),
            "diagnostics": list(self.diagnostics),
            "prioritized_recommendations": list(self.prioritized_recommendations),
        }


@dataclass(frozen=True)
class AccessibilityReport(CategoryReport):
    issues_field: ClassVar[str] = "violations"
    severity_field: ClassVar[str] = "impact"

    incomplete: tuple[str, ...] = ()
    manual_checks: tuple[str, ...] = ()

    @property
    def violations(self) -> tuple[Issue, ...]:
        return self.issues

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "audit_counts": self.audit_counts.to_dict(),
            "violations": self._issues_to_list(),
            "incomplete": list(self.incomplete),
            "manual_checks": list(self.manual_checks),
            "prioritized_recommendations": list(self.prioritized_recommendations),
        }


@dataclass(frozen=True)
class SEOCategorySummary:
    """Pass rate and open issue count for one SEO sub-category."""

    score: int
    issues_count: int

    def to_dict(self) -> dict:
        return {"score": self.score, "issues_count": self.issues_count}


@dataclass(frozen=True)
class SEOReport(CategoryReport):
    severity_field: ClassVar[str] = "impact"

    categories: dict[str, SEOCategorySummary] = field(default_factory=dict)

    def has_issue_in(self, group: str) -> bool:
        return any(issue.group == group for issue in self.issues)

    def issues_count(self, group: str) -> int:
        summary = self.categories.get(group)
        return summary.issues_count if summary else 0

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "audit_counts": self.audit_counts.to_dict(),
            "issues": self._issues_to_list(),
            "categories": {name: s.to_dict() for name, s in self.categories.items()},
            "prioritized_recommendations": list(self.prioritized_recommendations),
        }


@dataclass(frozen=True)
class BestPracticesReport(CategoryReport):
    pass


@dataclass(frozen=True)
class Installability:
    """PWA installability flags."""

    is_installable: bool = False
    has_manifest: bool = False
    has_service_worker: bool = False
    has_icons: bool = False
    issues: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "is_installable": self.is_installable,
            "has_manifest": self.has_manifest,
            "has_service_worker": self.has_service_worker,
            "has_icons": self.has_icons,
            "issues": list(self.issues),
        }


@dataclass(frozen=True)
class PWAReport(CategoryReport):
    installability: Installability = field(default_factory=Installability)
    offline_support: bool = False
    fast_reliable: bool = False
    optimized: bool = False

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "audit_counts": self.audit_counts.to_dict(),
            "installability": self.installability.to_dict(),
            "offline_support": self.offline_support,
            "fast_reliable": self.fast_reliable,
            "optimized": self.optimized,
            "issues": self._issues_to_list(),
            "prioritized_recommendations": list(self.prioritized_recommendations),
        }


REPORT_TYPES: dict[Category, type[CategoryReport]] = {
    Category.PERFORMANCE: PerformanceReport,
    Category.ACCESSIBILITY: AccessibilityReport,
    Category.SEO: SEOReport,
    Category.BEST_PRACTICES: BestPracticesReport,
    Category.PWA: PWAReport,
}


def empty_report(category: Category) -> CategoryReport:
    """Canonical empty report substituted when a category audit fails."""
    return REPORT_TYPES[category]()


@dataclass(frozen=True)
class CategoryReports:
    """The five category reports of one analysis."""

    performance: PerformanceReport
    accessibility: AccessibilityReport
    seo: SEOReport
    best_practices: BestPracticesReport
    pwa: PWAReport

    def get(self, category: Category) -> CategoryReport:
        report: CategoryReport = getattr(self, category.value)
        return report

    def items(self) -> list[tuple[Category, CategoryReport]]:
        return [(category, self.get(category)) for category in Category]

    def scores(self) -> dict[str, int]:
        return {category.value: report.score for category, report in self.items()}


@dataclass(frozen=True)
class Insight:
    """A problem spanning two or more categories."""

    id: str
    title: str
    description: str
    affected_categories: tuple[Category, ...]
    impact: Severity
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "affected_categories": [c.value for c in self.affected_categories],
            "impact": self.impact.value,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ActionItem:
    """A ranked remediation step."""

    rank: int
    title: str
    description: str
    categories: tuple[Category, ...]
    impact: Severity
    effort: Effort
    roi_score: int  # 0-100, used only for ordering
    action_steps: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "title": self.title,
            "description": self.description,
            "categories": [c.value for c in self.categories],
            "impact": self.impact.value,
            "effort": self.effort.value,
            "roi_score": self.roi_score,
            "action_steps": list(self.action_steps),
        }


@dataclass(frozen=True)
class QuickWin:
    """A low-effort fix tied to one specific issue id."""

    title: str
    category: Category
    impact: str
    estimated_time: str
    action: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "category": self.category.value,
            "impact": self.impact,
            "estimated_time": self.estimated_time,
            "action": self.action,
        }


@dataclass(frozen=True)
class Summary:
    """Issue and audit totals across the five categories."""

    total_issues: int = 0
    critical_issues: int = 0
    total_audits: int = 0
    passed_audits: int = 0
    failed_audits: int = 0

    def to_dict(self) -> dict:
        return {
            "total_issues": self.total_issues,
            "critical_issues": self.critical_issues,
            "total_audits": self.total_audits,
            "passed_audits": self.passed_audits,
            "failed_audits": self.failed_audits,
        }


@dataclass(frozen=True)
class ComprehensiveAnalysis:
    """Aggregate root of one analysis call."""

    url: str
    analyzed_at: datetime
    overall_score: int
    category_scores: dict[str, int]
    reports: CategoryReports
    cross_category_insights: tuple[Insight, ...]
    prioritized_action_items: tuple[ActionItem, ...]
    quick_wins: tuple[QuickWin, ...]
    summary: Summary

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

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "analyzed_at": self.analyzed_at.isoformat(),
            "overall_score": self.overall_score,
            "category_scores": dict(self.category_scores),
            "performance": self.performance.to_dict(),
            "accessibility": self.accessibility.to_dict(),
            "seo": self.seo.to_dict(),
            "best_practices": self.best_practices.to_dict(),
            "pwa": self.pwa.to_dict(),
            "cross_category_insights": [i.to_dict() for i in self.cross_category_insights],
            "prioritized_action_items": [a.to_dict() for a in self.prioritized_action_items],
            "quick_wins": [q.to_dict() for q in self.quick_wins],
            "summary": self.summary.to_dict(),
        }
