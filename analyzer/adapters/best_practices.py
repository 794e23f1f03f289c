"""Best-practices category adapter."""

from analyzer.adapters.base import AuditWalk, CategoryAdapter, prioritize_issues
from analyzer.engine.lhr import LighthouseResult
from analyzer.models import BestPracticesReport, Category


class BestPracticesAdapter(CategoryAdapter):
    category = Category.BEST_PRACTICES

    def build_report(
        self, result: LighthouseResult, walk: AuditWalk, score: int
    ) -> BestPracticesReport:
        return BestPracticesReport(
            score=score,
            audit_counts=walk.counts,
            issues=tuple(walk.issues),
            prioritized_recommendations=prioritize_issues(walk.issues),
        )
