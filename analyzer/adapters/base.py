"""Shared normalization for category adapters.

An adapter runs the audit engine for its category and turns the raw
Lighthouse result into a CategoryReport. Every audit referenced by the
category lands in exactly one bucket, checked in this order:

    manual -> informative -> not_applicable -> passed (score == 1) -> failed

Failed audits become issues with a severity derived from their score.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum

import structlog

from analyzer.engine.base import AuditEngine
from analyzer.engine.lhr import AuditRef, LighthouseAudit, LighthouseCategory, LighthouseResult
from analyzer.exceptions import AdapterInvocationFailed, AnalyzerError, AuditCategoryMissing
from analyzer.models import (
    SEVERITY_ORDER,
    AuditCounts,
    Category,
    CategoryReport,
    Issue,
    Severity,
)
from analyzer.scoring import round_half_up

logger = structlog.get_logger(__name__)

MAX_RECOMMENDATIONS = 5


class AuditStatus(StrEnum):
    """Bucket an audit entry is counted in."""

    FAILED = "failed"
    PASSED = "passed"
    MANUAL = "manual"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "not_applicable"


_DISPLAY_MODE_STATUS = {
    "manual": AuditStatus.MANUAL,
    "informative": AuditStatus.INFORMATIVE,
    "notApplicable": AuditStatus.NOT_APPLICABLE,
}


def classify_audit(audit: LighthouseAudit) -> AuditStatus:
    """Place one audit entry in its bucket."""
    status = _DISPLAY_MODE_STATUS.get(audit.score_display_mode)
    if status is not None:
        return status
    if audit.score == 1:
        return AuditStatus.PASSED
    return AuditStatus.FAILED


def severity_for_score(score: float | None) -> Severity:
    """Severity of a failed audit.

    0 is critical, up to and including 0.5 is serious, above 0.7 is minor.
    Everything else, including (0.5, 0.7] and a null score, is moderate.
    """
    if score == 0:
        return Severity.CRITICAL
    if score is not None and score <= 0.5:
        return Severity.SERIOUS
    if score is not None and score > 0.7:
        return Severity.MINOR
    return Severity.MODERATE


def prioritize_issues(issues: list[Issue], limit: int = MAX_RECOMMENDATIONS) -> tuple[str, ...]:
    """Top issues by severity, rendered as "SEVERITY: title"."""
    ranked = sorted(issues, key=lambda issue: SEVERITY_ORDER[issue.severity])
    return tuple(f"{issue.severity.value.upper()}: {issue.title}" for issue in ranked[:limit])


@dataclass(frozen=True)
class ClassifiedAudit:
    """An audit entry together with its bucket."""

    ref: AuditRef
    audit: LighthouseAudit
    status: AuditStatus


@dataclass
class AuditWalk:
    """Result of classifying every audit referenced by a category."""

    entries: list[ClassifiedAudit] = field(default_factory=list)
    issues: list[Issue] = field(default_factory=list)

    def with_status(self, status: AuditStatus) -> list[ClassifiedAudit]:
        return [entry for entry in self.entries if entry.status == status]

    @property
    def counts(self) -> AuditCounts:
        return AuditCounts(
            failed=len(self.with_status(AuditStatus.FAILED)),
            passed=len(self.with_status(AuditStatus.PASSED)),
            manual=len(self.with_status(AuditStatus.MANUAL)),
            informative=len(self.with_status(AuditStatus.INFORMATIVE)),
            not_applicable=len(self.with_status(AuditStatus.NOT_APPLICABLE)),
        )


@dataclass(frozen=True)
class AdapterOutcome:
    """Explicit result of one adapter run: a report or a typed failure."""

    category: Category
    report: CategoryReport | None = None
    error: AuditCategoryMissing | AdapterInvocationFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CategoryAdapter(ABC):
    """Converts one category's raw audit output into a CategoryReport."""

    category: Category
    include_display_value: bool = False

    def __init__(self, engine: AuditEngine):
        self.engine = engine

    async def run(self, url: str) -> CategoryReport:
        """Audit ``url`` and normalize the result.

        Raises:
            AuditCategoryMissing: the engine result lacks this category
            AdapterInvocationFailed: the engine or normalization failed
        """
        logger.info("category_audit_starting", url=url, category=self.category.value)

        try:
            result = await self.engine.run(url, self.category)
        except Exception as e:
            raise AdapterInvocationFailed(self.category.value, _describe(e)) from e

        lh_category = result.categories.get(self.category.lighthouse_id)
        if lh_category is None:
            raise AuditCategoryMissing(self.category.value)

        try:
            report = self.normalize(result, lh_category)
        except Exception as e:
            raise AdapterInvocationFailed(self.category.value, _describe(e)) from e

        logger.info(
            "category_audit_complete",
            url=url,
            category=self.category.value,
            score=report.score,
            issues=len(report.issues),
        )
        return report

    async def run_safely(self, url: str) -> AdapterOutcome:
        """Like ``run`` but returns the failure instead of raising it."""
        try:
            report = await self.run(url)
        except (AuditCategoryMissing, AdapterInvocationFailed) as e:
            return AdapterOutcome(category=self.category, error=e)
        return AdapterOutcome(category=self.category, report=report)

    def normalize(
        self, result: LighthouseResult, lh_category: LighthouseCategory
    ) -> CategoryReport:
        score = round_half_up((lh_category.score or 0) * 100)
        walk = self.walk(result, lh_category)
        return self.build_report(result, walk, score)

    def walk(self, result: LighthouseResult, lh_category: LighthouseCategory) -> AuditWalk:
        walk = AuditWalk()
        for ref in lh_category.audit_refs:
            audit = result.audit(ref.id)
            if audit is None:
                continue

            status = classify_audit(audit)
            walk.entries.append(ClassifiedAudit(ref=ref, audit=audit, status=status))
            if status != AuditStatus.FAILED:
                continue

            walk.issues.append(
                Issue(
                    id=ref.id,
                    title=audit.title,
                    description=audit.description,
                    score=audit.score,
                    severity=severity_for_score(audit.score),
                    group=self.issue_group(ref.id),
                    display_value=audit.display_value if self.include_display_value else None,
                )
            )
        return walk

    def issue_group(self, audit_id: str) -> str | None:
        """Sub-category tag for an issue; only SEO uses one."""
        return None

    @abstractmethod
    def build_report(self, result: LighthouseResult, walk: AuditWalk, score: int) -> CategoryReport:
        """Assemble the category-specific report."""
        ...


def _describe(error: Exception) -> str:
    if isinstance(error, AnalyzerError):
        return error.message
    return str(error) or type(error).__name__
