"""Accessibility category adapter."""

from analyzer.adapters.base import AuditStatus, AuditWalk, CategoryAdapter, prioritize_issues
from analyzer.engine.lhr import LighthouseResult
from analyzer.models import AccessibilityReport, Category


class AccessibilityAdapter(CategoryAdapter):
    """Failed accessibility audits are reported as violations."""

    category = Category.ACCESSIBILITY

    def build_report(
        self, result: LighthouseResult, walk: AuditWalk, score: int
    ) -> AccessibilityReport:
        # A failed audit without a score errored out rather than finding a violation
        incomplete = tuple(issue.id for issue in walk.issues if issue.score is None)
        manual_checks = tuple(entry.audit.title for entry in walk.with_status(AuditStatus.MANUAL))

        return AccessibilityReport(
            score=score,
            audit_counts=walk.counts,
            issues=tuple(walk.issues),
            prioritized_recommendations=prioritize_issues(walk.issues),
            incomplete=incomplete,
            manual_checks=manual_checks,
        )
