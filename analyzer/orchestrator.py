"""Comprehensive site analysis.

Runs the five category audits concurrently, waits for all of them, swaps
any failed category for its empty report, and then derives the overall
score, insights, action items, quick wins and summary from the five
reports.
"""

import asyncio
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

import structlog

from analyzer.adapters import AdapterOutcome, CategoryAdapter, build_adapters
from analyzer.engine import AuditEngine, build_engine
from analyzer.exceptions import AnalysisFailed
from analyzer.models import (
    ActionItem,
    Category,
    CategoryReport,
    CategoryReports,
    ComprehensiveAnalysis,
    Insight,
    QuickWin,
    empty_report,
)
from analyzer.rules import (
    AnalysisContext,
    generate_action_items,
    generate_insights,
    generate_quick_wins,
)
from analyzer.scoring import calculate_overall_score
from analyzer.summary import calculate_summary

logger = structlog.get_logger(__name__)


def resolve_reports(outcomes: Iterable[AdapterOutcome]) -> CategoryReports:
    """Collect adapter outcomes into the five reports.

    A failed or missing category gets its canonical empty report.
    """
    reports: dict[Category, CategoryReport] = {c: empty_report(c) for c in Category}

    for outcome in outcomes:
        if outcome.ok and outcome.report is not None:
            reports[outcome.category] = outcome.report
            continue

        error = outcome.error
        logger.warning(
            "category_audit_failed",
            category=outcome.category.value,
            error_code=error.code if error else None,
            error=error.message if error else None,
        )

    return CategoryReports(**{category.value: report for category, report in reports.items()})


def build_analysis(
    url: str,
    reports: CategoryReports,
    analyzed_at: datetime | None = None,
    any_audited: bool = True,
) -> ComprehensiveAnalysis:
    """Derive the full analysis from five finished reports (no I/O).

    With ``any_audited`` false every category failed; the result keeps the
    zero scores but carries no insights, action items or quick wins.
    """
    category_scores = reports.scores()
    overall_score = calculate_overall_score(category_scores)

    insights: tuple[Insight, ...] = ()
    action_items: tuple[ActionItem, ...] = ()
    quick_wins: tuple[QuickWin, ...] = ()
    if any_audited:
        insights = tuple(generate_insights(AnalysisContext(reports=reports)))
        ctx = AnalysisContext(reports=reports, insights=insights)
        action_items = tuple(generate_action_items(ctx))
        quick_wins = tuple(generate_quick_wins(ctx))
    summary = calculate_summary(reports)

    return ComprehensiveAnalysis(
        url=url,
        analyzed_at=analyzed_at or datetime.now(UTC),
        overall_score=overall_score,
        category_scores=category_scores,
        reports=reports,
        cross_category_insights=insights,
        prioritized_action_items=action_items,
        quick_wins=quick_wins,
        summary=summary,
    )


class SiteAnalyzer:
    """Runs a comprehensive analysis for one URL per call.

    Holds no per-call state; one instance can serve any number of
    concurrent ``analyze`` calls.
    """

    def __init__(
        self,
        engine: AuditEngine | None = None,
        adapters: Sequence[CategoryAdapter] | None = None,
    ):
        if adapters is None:
            adapters = build_adapters(engine or build_engine())
        self.adapters = list(adapters)

    async def analyze(self, url: str) -> ComprehensiveAnalysis:
        """Analyze ``url`` across all five categories.

        Category failures degrade to empty reports and never fail the call.

        Raises:
            AnalysisFailed: the post-audit computation itself failed
        """
        logger.info("comprehensive_analysis_starting", url=url)

        # Full barrier: run_safely never raises for category failures
        outcomes = await asyncio.gather(*(adapter.run_safely(url) for adapter in self.adapters))

        try:
            analysis = build_analysis(
                url,
                resolve_reports(outcomes),
                any_audited=any(outcome.ok for outcome in outcomes),
            )
        except Exception as e:
            logger.error("comprehensive_analysis_failed", url=url, error=str(e))
            raise AnalysisFailed(str(e)) from e

        logger.info(
            "comprehensive_analysis_complete",
            url=url,
            overall_score=analysis.overall_score,
            failed_categories=[o.category.value for o in outcomes if not o.ok],
            insights=len(analysis.cross_category_insights),
            action_items=len(analysis.prioritized_action_items),
            quick_wins=len(analysis.quick_wins),
        )
        return analysis


async def run_comprehensive_analysis(
    url: str,
    engine: AuditEngine | None = None,
) -> ComprehensiveAnalysis:
    """
    Run a comprehensive site analysis.

    Args:
        url: Absolute URL to analyze
        engine: Audit engine to use (defaults to the one selected in settings)

    Returns:
        ComprehensiveAnalysis; call ``to_dict()`` for the JSON contract

    Example:
        analysis = await run_comprehensive_analysis("https://example.com")
        print(analysis.overall_score)
    """
    return await SiteAnalyzer(engine=engine).analyze(url)
