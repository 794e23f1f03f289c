"""Site Quality Analyzer - consolidated Lighthouse category report."""

# Lazy imports so importing the package does not pull in the engines
# Use explicit imports when needed:
# from analyzer.orchestrator import SiteAnalyzer, run_comprehensive_analysis
# from analyzer.models import ComprehensiveAnalysis

__all__ = [
    "ComprehensiveAnalysis",
    "SiteAnalyzer",
    "run_comprehensive_analysis",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for the public entry points."""
    if name in ("SiteAnalyzer", "run_comprehensive_analysis"):
        from analyzer.orchestrator import SiteAnalyzer, run_comprehensive_analysis

        return locals()[name]
    elif name == "ComprehensiveAnalysis":
        from analyzer.models import ComprehensiveAnalysis

        return ComprehensiveAnalysis
    raise AttributeError(f"module 'analyzer' has no attribute '{name}'")
