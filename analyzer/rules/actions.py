"""Prioritized action items.

Candidate actions are gated on the category reports. Their ROI scores and
effort levels are fixed per candidate; there is no derivation formula.
Candidates are ranked by ROI score (stable, highest first), numbered from 1
and capped at MAX_ACTION_ITEMS.
"""

from dataclasses import replace

import structlog

from analyzer.models import ActionItem, Category, Effort, Severity
from analyzer.rules.base import AnalysisContext, Rule, evaluate_rules, literal

logger = structlog.get_logger(__name__)

MAX_ACTION_ITEMS = 10
LCP_THRESHOLD_MS = 2500
PWA_SCORE_THRESHOLD = 50


def _https_critical(ctx: AnalysisContext) -> bool:
    return any(
        issue.id == "is-on-https" and issue.severity == Severity.CRITICAL
        for issue in ctx.best_practices.issues
    )


def _slow_lcp(ctx: AnalysisContext) -> bool:
    lcp = ctx.performance.core_web_vitals.lcp
    return bool(lcp) and lcp > LCP_THRESHOLD_MS


def _critical_a11y_count(ctx: AnalysisContext) -> int:
    return ctx.accessibility.count_by_severity(Severity.CRITICAL)


def _critical_accessibility_action(ctx: AnalysisContext) -> ActionItem:
    return ActionItem(
        rank=0,
        title=f"Fix {_critical_a11y_count(ctx)} critical accessibility issues",
        description=(
            "Address WCAG violations that prevent users with disabilities from accessing content."
        ),
        categories=(Category.ACCESSIBILITY,),
        impact=Severity.CRITICAL,
        effort=Effort.LOW,
        roi_score=85,
        action_steps=(
            "1. Add alt text to all images",
            "2. Ensure proper color contrast (4.5:1 minimum)",
            "3. Add labels to form inputs",
            "4. Ensure keyboard navigation works",
            "5. Use semantic HTML elements",
        ),
    )


def _pwa_not_installable(ctx: AnalysisContext) -> bool:
    return (
        not ctx.pwa.installability.is_installable
        and ctx.pwa.score < PWA_SCORE_THRESHOLD
    )


ACTION_RULES: tuple[Rule[ActionItem], ...] = (
    Rule(
        name="migrate-to-https",
        when=_https_critical,
        build=literal(
            ActionItem(
                rank=0,
                title="Migrate to HTTPS",
                description=(
                    "Implement SSL/TLS encryption for all pages to secure user data and meet "
                    "security best practices."
                ),
                categories=(Category.BEST_PRACTICES, Category.SEO),
                impact=Severity.CRITICAL,
                effort=Effort.MEDIUM,
                roi_score=95,
                action_steps=(
                    "1. Obtain SSL certificate (Let's Encrypt is free)",
                    "2. Configure server to use HTTPS",
                    "3. Update all internal links to use HTTPS",
                    "4. Implement 301 redirects from HTTP to HTTPS",
                    "5. Update sitemap and robots.txt",
                ),
            )
        ),
    ),
    Rule(
        name="optimize-lcp",
        when=_slow_lcp,
        build=literal(
            ActionItem(
                rank=0,
                title="Optimize Largest Contentful Paint (LCP)",
                description=(
                    "Improve page load speed by optimizing the largest visible element's load "
                    "time (currently exceeds 2.5s threshold)."
                ),
                categories=(Category.PERFORMANCE, Category.SEO),
                impact=Severity.SERIOUS,
                effort=Effort.MEDIUM,
                roi_score=90,
                action_steps=(
                    "1. Optimize and compress the LCP element (image/text block)",
                    "2. Use CDN for faster content delivery",
                    "3. Preload critical resources",
                    "4. Remove render-blocking JavaScript",
                    "5. Consider lazy loading non-critical content",
                ),
            )
        ),
    ),
    Rule(
        name="fix-critical-accessibility",
        when=lambda ctx: _critical_a11y_count(ctx) > 0,
        build=_critical_accessibility_action,
    ),
    Rule(
        name="add-meta-descriptions",
        when=lambda ctx: ctx.seo.has_issue("meta-description"),
        build=literal(
            ActionItem(
                rank=0,
                title="Add meta descriptions",
                description=(
                    "Create compelling meta descriptions to improve click-through rates from "
                    "search results."
                ),
                categories=(Category.SEO,),
                impact=Severity.MODERATE,
                effort=Effort.LOW,
                roi_score=80,
                action_steps=(
                    "1. Write unique, descriptive meta descriptions (150-160 chars)",
                    "2. Include target keywords naturally",
                    "3. Add compelling call-to-action",
                    "4. Ensure each page has a unique meta description",
                ),
            )
        ),
    ),
    Rule(
        name="implement-pwa",
        when=_pwa_not_installable,
        build=literal(
            ActionItem(
                rank=0,
                title="Implement Progressive Web App features",
                description=(
                    "Add PWA capabilities to enable offline support, faster load times, and "
                    "home screen installation."
                ),
                categories=(Category.PWA, Category.PERFORMANCE),
                impact=Severity.MODERATE,
                effort=Effort.HIGH,
                roi_score=70,
                action_steps=(
                    "1. Create web app manifest (manifest.json)",
                    "2. Add app icons (multiple sizes)",
                    "3. Implement service worker for caching",
                    "4. Test offline functionality",
                    "5. Configure theme color and splash screen",
                ),
            )
        ),
    ),
)


def rank_action_items(candidates: list[ActionItem]) -> list[ActionItem]:
    """Sort by ROI (stable, descending), assign 1-based ranks, keep the top 10."""
    ordered = sorted(candidates, key=lambda item: item.roi_score, reverse=True)
    ranked = [replace(item, rank=position) for position, item in enumerate(ordered, start=1)]
    return ranked[:MAX_ACTION_ITEMS]


def generate_action_items(ctx: AnalysisContext) -> list[ActionItem]:
    """Ranked remediation plan.

    ``ctx.insights`` is available to gates; none of the current candidates
    depend on it.
    """
    items = rank_action_items(evaluate_rules(ACTION_RULES, ctx))
    logger.debug("action_items_ranked", count=len(items), insights=len(ctx.insights))
    return items
