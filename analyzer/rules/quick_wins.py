"""Quick wins: low-effort fixes tied to one specific issue id each."""

from analyzer.models import Category, QuickWin
from analyzer.rules.base import AnalysisContext, Rule, evaluate_rules, literal

MAX_QUICK_WINS = 6


def _quick_win(category: Category, issue_id: str, win: QuickWin) -> Rule[QuickWin]:
    """Rule emitting ``win`` when ``issue_id`` is among ``category``'s issues."""
    return Rule(
        name=f"{category.value}:{issue_id}",
        when=lambda ctx: ctx.reports.get(category).has_issue(issue_id),
        build=literal(win),
    )


QUICK_WIN_RULES: tuple[Rule[QuickWin], ...] = (
    _quick_win(
        Category.SEO,
        "meta-description",
        QuickWin(
            title="Add meta description",
            category=Category.SEO,
            impact="Improves click-through rate from search results",
            estimated_time="5 minutes",
            action='Add <meta name="description" content="Your page description here"> to <head>',
        ),
    ),
    _quick_win(
        Category.ACCESSIBILITY,
        "image-alt",
        QuickWin(
            title="Add alt text to images",
            category=Category.ACCESSIBILITY,
            impact="Improves accessibility for screen readers and SEO",
            estimated_time="10 minutes",
            action='Add alt="descriptive text" attribute to all <img> tags',
        ),
    ),
    _quick_win(
        Category.PERFORMANCE,
        "uses-text-compression",
        QuickWin(
            title="Enable Gzip/Brotli compression",
            category=Category.PERFORMANCE,
            impact="Reduces file transfer size by 70-90%",
            estimated_time="15 minutes",
            action="Configure server to enable Gzip or Brotli compression for text files",
        ),
    ),
    _quick_win(
        Category.SEO,
        "viewport",
        QuickWin(
            title="Add viewport meta tag",
            category=Category.SEO,
            impact="Improves mobile rendering and SEO",
            estimated_time="2 minutes",
            action=(
                'Add <meta name="viewport" content="width=device-width, initial-scale=1"> '
                "to <head>"
            ),
        ),
    ),
    _quick_win(
        Category.SEO,
        "document-title",
        QuickWin(
            title="Add descriptive page title",
            category=Category.SEO,
            impact="Improves SEO and browser tab identification",
            estimated_time="5 minutes",
            action="Add <title>Your Page Title - Site Name</title> to <head> section",
        ),
    ),
    _quick_win(
        Category.ACCESSIBILITY,
        "color-contrast",
        QuickWin(
            title="Fix color contrast issues",
            category=Category.ACCESSIBILITY,
            impact="Improves readability for users with vision impairments",
            estimated_time="20 minutes",
            action="Adjust text and background colors to meet 4.5:1 contrast ratio",
        ),
    ),
)


def generate_quick_wins(ctx: AnalysisContext) -> list[QuickWin]:
    """Matching quick wins in rule order, at most six."""
    return evaluate_rules(QUICK_WIN_RULES, ctx)[:MAX_QUICK_WINS]
