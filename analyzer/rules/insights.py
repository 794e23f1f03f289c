"""Cross-category insights.

Each rule detects one problem that shows up in two or more categories and
emits a fixed insight. Rules may co-fire; output follows table order.
"""

from analyzer.models import Category, Insight, Severity
from analyzer.rules.base import AnalysisContext, Rule, evaluate_rules, literal

LAYOUT_SHIFT_THRESHOLD = 0.1
PWA_PERFORMANCE_THRESHOLD = 70
SEMANTIC_VIOLATIONS = ("heading-order", "document-title")


def _images_unoptimized_and_unlabelled(ctx: AnalysisContext) -> bool:
    return ctx.performance.has_issue("uses-optimized-images") and ctx.accessibility.has_issue(
        "image-alt"
    )


def _layout_shift_with_mobile_issues(ctx: AnalysisContext) -> bool:
    cls = ctx.performance.core_web_vitals.cls
    return bool(cls) and cls > LAYOUT_SHIFT_THRESHOLD and ctx.seo.issues_count("mobile") > 0


def _pwa_missing_on_slow_site(ctx: AnalysisContext) -> bool:
    return (
        not ctx.pwa.installability.is_installable
        and ctx.performance.score < PWA_PERFORMANCE_THRESHOLD
        and not ctx.pwa.offline_support
    )


def _insecure_and_crawl_issues(ctx: AnalysisContext) -> bool:
    return ctx.best_practices.has_issue("is-on-https") and ctx.seo.has_issue_in("crawlability")


def _weak_semantic_structure(ctx: AnalysisContext) -> bool:
    return any(
        ctx.accessibility.has_issue(issue_id) for issue_id in SEMANTIC_VIOLATIONS
    ) and ctx.seo.has_issue_in("content")


INSIGHT_RULES: tuple[Rule[Insight], ...] = (
    Rule(
        name="large-images-multi-impact",
        when=_images_unoptimized_and_unlabelled,
        build=literal(
            Insight(
                id="large-images-multi-impact",
                title="Image optimization affects multiple areas",
                description=(
                    "Unoptimized images are impacting page load speed, accessibility "
                    "(missing alt text), and potentially SEO rankings."
                ),
                affected_categories=(Category.PERFORMANCE, Category.ACCESSIBILITY, Category.SEO),
                impact=Severity.SERIOUS,
                recommendation=(
                    "Compress images, add descriptive alt text, and use next-gen formats "
                    "(WebP, AVIF) to improve performance, accessibility, and SEO simultaneously."
                ),
            )
        ),
    ),
    Rule(
        name="mobile-optimization-needed",
        when=_layout_shift_with_mobile_issues,
        build=literal(
            Insight(
                id="mobile-optimization-needed",
                title="Mobile experience needs improvement",
                description=(
                    "Layout shifts (CLS) and mobile usability issues are impacting Core Web "
                    "Vitals, SEO rankings, and user experience on mobile devices."
                ),
                affected_categories=(Category.PERFORMANCE, Category.SEO, Category.ACCESSIBILITY),
                impact=Severity.SERIOUS,
                recommendation=(
                    "Fix layout shifts by reserving space for images/ads, optimize viewport "
                    "settings, and ensure touch targets are appropriately sized."
                ),
            )
        ),
    ),
    Rule(
        name="pwa-capabilities-missing",
        when=_pwa_missing_on_slow_site,
        build=literal(
            Insight(
                id="pwa-capabilities-missing",
                title="PWA features could improve performance and engagement",
                description=(
                    "Adding PWA capabilities (service worker, manifest) would enable offline "
                    "support, faster repeat visits, and installability."
                ),
                affected_categories=(Category.PWA, Category.PERFORMANCE),
                impact=Severity.MODERATE,
                recommendation=(
                    "Implement a service worker for caching, create a web app manifest, and "
                    "add app icons to enable PWA installation."
                ),
            )
        ),
    ),
    Rule(
        name="https-security-seo",
        when=_insecure_and_crawl_issues,
        build=literal(
            Insight(
                id="https-security-seo",
                title="HTTPS migration needed for security and SEO",
                description=(
                    "Non-HTTPS pages are flagged by browsers as insecure and may be penalized "
                    "in search rankings."
                ),
                affected_categories=(Category.BEST_PRACTICES, Category.SEO),
                impact=Severity.CRITICAL,
                recommendation=(
                    "Migrate entire site to HTTPS, update internal links, and implement proper "
                    "redirects from HTTP to HTTPS."
                ),
            )
        ),
    ),
    Rule(
        name="semantic-html-structure",
        when=_weak_semantic_structure,
        build=literal(
            Insight(
                id="semantic-html-structure",
                title="HTML structure impacts both accessibility and SEO",
                description=(
                    "Proper heading hierarchy and semantic HTML help screen readers and search "
                    "engines understand page content."
                ),
                affected_categories=(Category.ACCESSIBILITY, Category.SEO),
                impact=Severity.MODERATE,
                recommendation=(
                    "Use proper heading hierarchy (h1→h2→h3), semantic HTML5 elements, "
                    "and descriptive page titles."
                ),
            )
        ),
    ),
)


def generate_insights(ctx: AnalysisContext) -> list[Insight]:
    """Insights for every matching rule, in rule order."""
    return evaluate_rules(INSIGHT_RULES, ctx)
