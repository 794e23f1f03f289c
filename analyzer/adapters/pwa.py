"""Progressive Web App category adapter.

Besides the common buckets, derives installability from a handful of named
audits. Note that Lighthouse 12 dropped the PWA category; against newer
engines this adapter fails with AuditCategoryMissing and the report
degrades to the empty PWA report.
"""

from analyzer.adapters.base import AuditWalk, CategoryAdapter, prioritize_issues
from analyzer.engine.lhr import LighthouseResult
from analyzer.models import Category, Installability, PWAReport

FAST_RELIABLE_SCORE = 70
OPTIMIZED_SCORE = 90


def _scored_one(result: LighthouseResult, audit_id: str) -> bool:
    audit = result.audit(audit_id)
    return audit is not None and audit.score == 1


def assess_installability(result: LighthouseResult) -> Installability:
    has_manifest = _scored_one(result, "installable-manifest")
    has_service_worker = _scored_one(result, "service-worker")
    has_icons = _scored_one(result, "apple-touch-icon")

    issues = []
    if not has_manifest:
        issues.append("Missing or invalid web app manifest (manifest.json)")
    if not has_service_worker:
        issues.append("No service worker registered (required for offline support)")
    if not has_icons:
        issues.append("Missing app icons (required for installation)")

    # Only reported when the engine ran these audits at all
    splash_screen = result.audit("splash-screen")
    if splash_screen is not None and splash_screen.score != 1:
        issues.append("Splash screen configuration incomplete")
    themed_omnibox = result.audit("themed-omnibox")
    if themed_omnibox is not None and themed_omnibox.score != 1:
        issues.append("Themed omnibox (theme-color) not configured")

    return Installability(
        is_installable=has_manifest and has_service_worker,
        has_manifest=has_manifest,
        has_service_worker=has_service_worker,
        has_icons=has_icons,
        issues=tuple(issues),
    )


class PWAAdapter(CategoryAdapter):
    category = Category.PWA

    def build_report(self, result: LighthouseResult, walk: AuditWalk, score: int) -> PWAReport:
        installability = assess_installability(result)

        return PWAReport(
            score=score,
            audit_counts=walk.counts,
            issues=tuple(walk.issues),
            prioritized_recommendations=prioritize_issues(walk.issues),
            installability=installability,
            offline_support=installability.has_service_worker,
            fast_reliable=score >= FAST_RELIABLE_SCORE,
            optimized=score >= OPTIMIZED_SCORE,
        )
