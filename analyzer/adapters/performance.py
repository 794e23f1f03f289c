"""Performance category adapter."""

from analyzer.adapters.base import AuditStatus, AuditWalk, CategoryAdapter, prioritize_issues
from analyzer.engine.lhr import LighthouseResult
from analyzer.models import Category, CoreWebVitals, Metric, PerformanceReport

# Lighthouse audit ids carrying each lab metric's numericValue
VITALS_AUDITS = {
    "lcp": "largest-contentful-paint",
    "fcp": "first-contentful-paint",
    "cls": "cumulative-layout-shift",
    "tbt": "total-blocking-time",
    "si": "speed-index",
    "tti": "interactive",
}

METRICS_GROUP = "metrics"


def extract_core_web_vitals(result: LighthouseResult) -> CoreWebVitals:
    values = {}
    for name, audit_id in VITALS_AUDITS.items():
        audit = result.audit(audit_id)
        values[name] = audit.numeric_value if audit else None
    return CoreWebVitals(**values)


class PerformanceAdapter(CategoryAdapter):
    """Failed performance audits are reported as opportunities."""

    category = Category.PERFORMANCE
    include_display_value = True

    def build_report(
        self, result: LighthouseResult, walk: AuditWalk, score: int
    ) -> PerformanceReport:
        metrics = tuple(
            Metric(
                id=entry.ref.id,
                title=entry.audit.title,
                value=entry.audit.numeric_value,
                display_value=entry.audit.display_value,
                score=entry.audit.score,
            )
            for entry in walk.entries
            if entry.ref.group == METRICS_GROUP
        )
        diagnostics = tuple(
            entry.audit.title for entry in walk.with_status(AuditStatus.INFORMATIVE)
        )

        return PerformanceReport(
            score=score,
            audit_counts=walk.counts,
            issues=tuple(walk.issues),
            prioritized_recommendations=prioritize_issues(walk.issues),
            core_web_vitals=extract_core_web_vitals(result),
            metrics=metrics,
            diagnostics=diagnostics,
        )
