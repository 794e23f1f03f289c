"""Audit engines producing raw Lighthouse results."""

from analyzer.config import Settings, get_settings
from analyzer.engine.base import AuditEngine
from analyzer.engine.lhr import (
    AuditRef,
    LighthouseAudit,
    LighthouseCategory,
    LighthouseResult,
    ScoreDisplayMode,
)
from analyzer.engine.lighthouse import LighthouseCLIEngine, LighthouseConfig
from analyzer.engine.pagespeed import PageSpeedConfig, PageSpeedEngine

__all__ = [
    "AuditEngine",
    "AuditRef",
    "LighthouseAudit",
    "LighthouseCategory",
    "LighthouseResult",
    "ScoreDisplayMode",
    "LighthouseCLIEngine",
    "LighthouseConfig",
    "PageSpeedConfig",
    "PageSpeedEngine",
    "build_engine",
]


def build_engine(settings: Settings | None = None) -> AuditEngine:
    """Create the audit engine selected by settings."""
    settings = settings or get_settings()

    if settings.audit_engine == "pagespeed":
        return PageSpeedEngine(
            PageSpeedConfig(
                api_key=settings.pagespeed_api_key,
                api_url=settings.pagespeed_api_url,
                strategy=settings.pagespeed_strategy,
                timeout_seconds=settings.pagespeed_timeout_seconds,
            )
        )

    return LighthouseCLIEngine(
        LighthouseConfig(
            binary=settings.lighthouse_path,
            chrome_flags=list(settings.lighthouse_chrome_flags),
            timeout_seconds=settings.lighthouse_timeout_seconds,
        )
    )
