"""Fixed rule tables over the finished category reports."""

from analyzer.rules.actions import ACTION_RULES, generate_action_items, rank_action_items
from analyzer.rules.base import AnalysisContext, Rule, evaluate_rules
from analyzer.rules.insights import INSIGHT_RULES, generate_insights
from analyzer.rules.quick_wins import QUICK_WIN_RULES, generate_quick_wins

__all__ = [
    "ACTION_RULES",
    "INSIGHT_RULES",
    "QUICK_WIN_RULES",
    "AnalysisContext",
    "Rule",
    "evaluate_rules",
    "generate_action_items",
    "generate_insights",
    "generate_quick_wins",
    "rank_action_items",
]
