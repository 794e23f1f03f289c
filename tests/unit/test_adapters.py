"""Tests for category adapters."""

import pytest

from analyzer.adapters import (
    AccessibilityAdapter,
    AuditStatus,
    BestPracticesAdapter,
    PerformanceAdapter,
    PWAAdapter,
    SEOAdapter,
    classify_audit,
    prioritize_issues,
    severity_for_score,
)
from analyzer.engine.lhr import LighthouseAudit
from analyzer.exceptions import AdapterInvocationFailed, AuditCategoryMissing, EngineError
from analyzer.models import Category, Issue, Severity
from tests.fixtures import FakeEngine, make_audit, make_lhr


def _issue(issue_id: str, severity: Severity) -> Issue:
    return Issue(id=issue_id, title=issue_id.title(), description="", score=0.3, severity=severity)


class TestClassification:
    """Tests for bucketing audit entries."""

    @pytest.mark.parametrize(
        "mode,score,expected",
        [
            ("manual", None, AuditStatus.MANUAL),
            ("informative", 0, AuditStatus.INFORMATIVE),
            ("notApplicable", 1, AuditStatus.NOT_APPLICABLE),
            ("binary", 1, AuditStatus.PASSED),
            ("numeric", 1, AuditStatus.PASSED),
            ("binary", 0, AuditStatus.FAILED),
            ("numeric", 0.9, AuditStatus.FAILED),
            ("error", None, AuditStatus.FAILED),
        ],
    )
    def test_classify(self, mode, score, expected):
        audit = LighthouseAudit(id="a", score=score, scoreDisplayMode=mode)
        assert classify_audit(audit) == expected

    def test_display_mode_checked_before_score(self):
        """A manual audit is manual even if it somehow scored 1."""
        audit = LighthouseAudit(id="a", score=1, scoreDisplayMode="manual")
        assert classify_audit(audit) == AuditStatus.MANUAL


class TestSeverity:
    """Tests for failed-audit severity."""

    def test_zero_is_critical(self):
        assert severity_for_score(0) == Severity.CRITICAL
        assert severity_for_score(0.0) == Severity.CRITICAL

    def test_low_scores_are_serious(self):
        assert severity_for_score(0.01) == Severity.SERIOUS
        assert severity_for_score(0.3) == Severity.SERIOUS

    def test_half_is_serious_inclusive(self):
        assert severity_for_score(0.5) == Severity.SERIOUS

    def test_between_half_and_point_seven_is_moderate(self):
        assert severity_for_score(0.6) == Severity.MODERATE

    def test_point_seven_is_moderate_not_minor(self):
        """The minor test is strict, so exactly 0.7 falls to the default."""
        assert severity_for_score(0.7) == Severity.MODERATE

    def test_above_point_seven_is_minor(self):
        assert severity_for_score(0.71) == Severity.MINOR
        assert severity_for_score(0.99) == Severity.MINOR

    def test_null_score_is_moderate(self):
        assert severity_for_score(None) == Severity.MODERATE


class TestPrioritizedRecommendations:
    def test_sorted_by_severity_and_capped(self):
        issues = [
            _issue("minor-one", Severity.MINOR),
            _issue("serious-one", Severity.SERIOUS),
            _issue("critical-one", Severity.CRITICAL),
            _issue("moderate-one", Severity.MODERATE),
            _issue("critical-two", Severity.CRITICAL),
            _issue("minor-two", Severity.MINOR),
        ]

        recommendations = prioritize_issues(issues)

        assert recommendations == (
            "CRITICAL: Critical-One",
            "CRITICAL: Critical-Two",
            "SERIOUS: Serious-One",
            "MODERATE: Moderate-One",
            "MINOR: Minor-One",
        )

    def test_empty(self):
        assert prioritize_issues([]) == ()


class TestCategoryAdapter:
    """Behaviour shared by all adapters."""

    @pytest.mark.asyncio
    async def test_audit_counts_partition_entries(self):
        audits = [
            make_audit("passes", score=1),
            make_audit("fails", score=0),
            make_audit("fails-partly", score=0.6),
            make_audit("check-by-hand", score=None, mode="manual"),
            make_audit("just-info", score=None, mode="informative"),
            make_audit("does-not-apply", score=None, mode="notApplicable"),
        ]
        engine = FakeEngine({Category.BEST_PRACTICES: make_lhr(Category.BEST_PRACTICES, audits)})

        report = await BestPracticesAdapter(engine).run("https://example.com")

        counts = report.audit_counts
        assert (counts.passed, counts.failed) == (1, 2)
        assert (counts.manual, counts.informative, counts.not_applicable) == (1, 1, 1)
        assert counts.total == len(audits)

    @pytest.mark.asyncio
    async def test_unknown_audit_refs_are_skipped(self):
        lhr = make_lhr(Category.BEST_PRACTICES, [make_audit("present", score=0)])
        lhr["categories"]["best-practices"]["auditRefs"].append({"id": "ghost", "weight": 1})
        engine = FakeEngine({Category.BEST_PRACTICES: lhr})

        report = await BestPracticesAdapter(engine).run("https://example.com")

        assert report.audit_counts.total == 1
        assert [i.id for i in report.issues] == ["present"]

    @pytest.mark.asyncio
    async def test_issues_keep_audit_order(self):
        audits = [
            make_audit("first", score=0.9),
            make_audit("second", score=0),
            make_audit("third", score=0.4),
        ]
        engine = FakeEngine({Category.BEST_PRACTICES: make_lhr(Category.BEST_PRACTICES, audits)})

        report = await BestPracticesAdapter(engine).run("https://example.com")

        assert [i.id for i in report.issues] == ["first", "second", "third"]
        assert [i.severity for i in report.issues] == [
            Severity.MINOR,
            Severity.CRITICAL,
            Severity.SERIOUS,
        ]
        assert report.prioritized_recommendations[0] == "CRITICAL: Second"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw,expected",
        [(0.874, 87), (0.875, 88), (0.5, 50), (1.0, 100), (0, 0), (None, 0)],
    )
    async def test_category_score_rounding(self, raw, expected):
        engine = FakeEngine(
            {Category.BEST_PRACTICES: make_lhr(Category.BEST_PRACTICES, [], score=raw)}
        )

        report = await BestPracticesAdapter(engine).run("https://example.com")

        assert report.score == expected

    @pytest.mark.asyncio
    async def test_missing_category_raises(self):
        lhr = make_lhr(Category.SEO, [make_audit("viewport")])
        engine = FakeEngine({Category.PWA: lhr})

        with pytest.raises(AuditCategoryMissing) as exc_info:
            await PWAAdapter(engine).run("https://example.com")

        assert exc_info.value.category == "pwa"
        assert exc_info.value.code == "audit_category_missing"

    @pytest.mark.asyncio
    async def test_engine_failure_raises_invocation_failed(self):
        engine = FakeEngine({Category.SEO: EngineError("lighthouse", "exited with code 1")})

        with pytest.raises(AdapterInvocationFailed) as exc_info:
            await SEOAdapter(engine).run("https://example.com")

        assert exc_info.value.category == "seo"
        assert "exited with code 1" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, EngineError)

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_wrapped(self):
        engine = FakeEngine({Category.SEO: ConnectionResetError("browser went away")})

        with pytest.raises(AdapterInvocationFailed):
            await SEOAdapter(engine).run("https://example.com")

    @pytest.mark.asyncio
    async def test_run_safely_returns_failure_outcome(self):
        engine = FakeEngine({Category.SEO: RuntimeError("boom")})

        outcome = await SEOAdapter(engine).run_safely("https://example.com")

        assert outcome.ok is False
        assert outcome.report is None
        assert isinstance(outcome.error, AdapterInvocationFailed)
        assert outcome.category == Category.SEO

    @pytest.mark.asyncio
    async def test_run_safely_returns_report(self):
        engine = FakeEngine({Category.SEO: make_lhr(Category.SEO, [make_audit("viewport")])})

        outcome = await SEOAdapter(engine).run_safely("https://example.com")

        assert outcome.ok is True
        assert outcome.report is not None
        assert outcome.report.score == 100

    @pytest.mark.asyncio
    async def test_requests_own_category(self):
        engine = FakeEngine(
            {Category.BEST_PRACTICES: make_lhr(Category.BEST_PRACTICES, [make_audit("x")])}
        )

        await BestPracticesAdapter(engine).run("https://example.com")

        assert engine.calls == [("https://example.com", Category.BEST_PRACTICES)]


class TestPerformanceAdapter:
    @pytest.mark.asyncio
    async def test_vitals_metrics_and_opportunities(self):
        audits = [
            make_audit("largest-contentful-paint", score=0.4, mode="numeric",
                       numeric_value=3200.5, display_value="3.2 s"),
            make_audit("cumulative-layout-shift", score=0.8, mode="numeric",
                       numeric_value=0.15, display_value="0.15"),
            make_audit("first-contentful-paint", score=1, mode="numeric", numeric_value=900),
            make_audit("uses-optimized-images", score=0.5, mode="metricSavings",
                       display_value="Potential savings of 120 KiB"),
            make_audit("mainthread-work-breakdown", score=None, mode="informative",
                       title="Minimize main-thread work"),
        ]
        groups = {
            "largest-contentful-paint": "metrics",
            "cumulative-layout-shift": "metrics",
            "first-contentful-paint": "metrics",
        }
        lhr = make_lhr(Category.PERFORMANCE, audits, score=0.62, groups=groups)
        engine = FakeEngine({Category.PERFORMANCE: lhr})

        report = await PerformanceAdapter(engine).run("https://example.com")

        assert report.score == 62
        assert report.core_web_vitals.lcp == 3200.5
        assert report.core_web_vitals.cls == 0.15
        assert report.core_web_vitals.fcp == 900
        assert report.core_web_vitals.tbt is None
        assert [m.id for m in report.metrics] == [
            "largest-contentful-paint",
            "cumulative-layout-shift",
            "first-contentful-paint",
        ]
        assert [o.id for o in report.opportunities] == [
            "largest-contentful-paint",
            "cumulative-layout-shift",
            "uses-optimized-images",
        ]
        assert report.opportunities[2].display_value == "Potential savings of 120 KiB"
        assert report.diagnostics == ("Minimize main-thread work",)

    @pytest.mark.asyncio
    async def test_to_dict_uses_opportunities_and_impact(self):
        audits = [make_audit("uses-text-compression", score=0)]
        engine = FakeEngine({Category.PERFORMANCE: make_lhr(Category.PERFORMANCE, audits)})

        data = (await PerformanceAdapter(engine).run("https://example.com")).to_dict()

        assert "issues" not in data
        assert data["opportunities"][0]["id"] == "uses-text-compression"
        assert data["opportunities"][0]["impact"] == "critical"
        assert data["core_web_vitals"] == {}


class TestAccessibilityAdapter:
    @pytest.mark.asyncio
    async def test_violations_incomplete_and_manual(self):
        audits = [
            make_audit("image-alt", score=0),
            make_audit("color-contrast", score=None, mode="binary"),
            make_audit("focus-traps", score=None, mode="manual", title="Focus is not trapped"),
            make_audit("label", score=1),
        ]
        engine = FakeEngine({Category.ACCESSIBILITY: make_lhr(Category.ACCESSIBILITY, audits)})

        report = await AccessibilityAdapter(engine).run("https://example.com")

        assert [v.id for v in report.violations] == ["image-alt", "color-contrast"]
        assert report.violations[0].severity == Severity.CRITICAL
        assert report.violations[1].severity == Severity.MODERATE
        assert report.incomplete == ("color-contrast",)
        assert report.manual_checks == ("Focus is not trapped",)
        assert report.to_dict()["violations"][0]["impact"] == "critical"


class TestSEOAdapter:
    @pytest.mark.asyncio
    async def test_issue_groups_and_category_summary(self):
        audits = [
            make_audit("is-crawlable", score=0),
            make_audit("robots-txt", score=1),
            make_audit("meta-description", score=0),
            make_audit("document-title", score=1),
            make_audit("viewport", score=0),
            make_audit("structured-data", score=None, mode="manual"),
            make_audit("some-new-audit", score=0.8),
        ]
        engine = FakeEngine({Category.SEO: make_lhr(Category.SEO, audits, score=0.58)})

        report = await SEOAdapter(engine).run("https://example.com")

        assert {i.id: i.group for i in report.issues} == {
            "is-crawlable": "crawlability",
            "meta-description": "content",
            "viewport": "mobile",
            "some-new-audit": "other",
        }
        assert list(report.categories) == ["crawlability", "content", "mobile", "other"]
        assert report.categories["crawlability"].score == 50
        assert report.categories["crawlability"].issues_count == 1
        assert report.categories["mobile"].score == 0
        assert report.issues_count("mobile") == 1
        assert report.issues_count("structured_data") == 0
        assert report.has_issue_in("content") is True

        data = report.to_dict()
        assert data["issues"][0]["category"] == "crawlability"
        assert data["issues"][0]["impact"] == "critical"
        assert data["categories"]["content"] == {"score": 50, "issues_count": 1}


class TestPWAAdapter:
    @pytest.mark.asyncio
    async def test_installable_app(self):
        audits = [
            make_audit("installable-manifest", score=1),
            make_audit("service-worker", score=1),
            make_audit("apple-touch-icon", score=1),
        ]
        engine = FakeEngine({Category.PWA: make_lhr(Category.PWA, audits, score=0.92)})

        report = await PWAAdapter(engine).run("https://example.com")

        assert report.installability.is_installable is True
        assert report.installability.issues == ()
        assert report.offline_support is True
        assert report.fast_reliable is True
        assert report.optimized is True

    @pytest.mark.asyncio
    async def test_missing_service_worker(self):
        audits = [
            make_audit("installable-manifest", score=1),
            make_audit("service-worker", score=0),
            make_audit("splash-screen", score=0),
        ]
        engine = FakeEngine({Category.PWA: make_lhr(Category.PWA, audits, score=0.71)})

        report = await PWAAdapter(engine).run("https://example.com")

        assert report.installability.has_manifest is True
        assert report.installability.has_service_worker is False
        assert report.installability.is_installable is False
        assert report.installability.issues == (
            "No service worker registered (required for offline support)",
            "Missing app icons (required for installation)",
            "Splash screen configuration incomplete",
        )
        assert report.offline_support is False
        assert report.fast_reliable is True
        assert report.optimized is False

    @pytest.mark.asyncio
    async def test_flags_read_from_unreferenced_audits(self):
        """Installability looks at the whole audit map, not just the category refs."""
        lhr = make_lhr(
            Category.PWA,
            [make_audit("viewport", score=1)],
            score=0.3,
            extra_audits=[
                make_audit("installable-manifest", score=1),
                make_audit("service-worker", score=1),
                make_audit("themed-omnibox", score=0),
            ],
        )
        engine = FakeEngine({Category.PWA: lhr})

        report = await PWAAdapter(engine).run("https://example.com")

        assert report.installability.is_installable is True
        assert report.audit_counts.total == 1
        assert report.installability.issues[-1] == "Themed omnibox (theme-color) not configured"
