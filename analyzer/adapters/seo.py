"""SEO category adapter.

Each SEO audit belongs to a sub-category (crawlability, content, mobile,
structured_data). Issues carry that tag, and the report summarizes the
pass rate and open issue count per sub-category.
"""

from analyzer.adapters.base import AuditStatus, AuditWalk, CategoryAdapter, prioritize_issues
from analyzer.engine.lhr import LighthouseResult
from analyzer.models import Category, SEOCategorySummary, SEOReport
from analyzer.scoring import round_half_up

SEO_GROUPS: dict[str, frozenset[str]] = {
    "crawlability": frozenset(
        {
            "is-crawlable",
            "robots-txt",
            "http-status-code",
            "canonical",
            "hreflang",
            "crawlable-anchors",
        }
    ),
    "content": frozenset({"document-title", "meta-description", "link-text", "image-alt"}),
    "mobile": frozenset({"viewport", "font-size", "tap-targets"}),
    "structured_data": frozenset({"structured-data"}),
}

OTHER_GROUP = "other"


def seo_group(audit_id: str) -> str:
    for group, audit_ids in SEO_GROUPS.items():
        if audit_id in audit_ids:
            return group
    return OTHER_GROUP


def summarize_groups(walk: AuditWalk) -> dict[str, SEOCategorySummary]:
    """Per sub-category pass rate over scored (passed or failed) audits."""
    tallies: dict[str, list[int]] = {}
    for entry in walk.entries:
        if entry.status not in (AuditStatus.PASSED, AuditStatus.FAILED):
            continue
        tally = tallies.setdefault(seo_group(entry.ref.id), [0, 0])
        tally[0 if entry.status == AuditStatus.PASSED else 1] += 1

    summaries = {}
    for group in [*SEO_GROUPS, OTHER_GROUP]:
        if group not in tallies:
            continue
        passed, failed = tallies[group]
        summaries[group] = SEOCategorySummary(
            score=round_half_up(passed / (passed + failed) * 100),
            issues_count=failed,
        )
    return summaries


class SEOAdapter(CategoryAdapter):
    category = Category.SEO

    def issue_group(self, audit_id: str) -> str | None:
        return seo_group(audit_id)

    def build_report(self, result: LighthouseResult, walk: AuditWalk, score: int) -> SEOReport:
        return SEOReport(
            score=score,
            audit_counts=walk.counts,
            issues=tuple(walk.issues),
            prioritized_recommendations=prioritize_issues(walk.issues),
            categories=summarize_groups(walk),
        )
