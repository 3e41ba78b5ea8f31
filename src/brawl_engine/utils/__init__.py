"""Utility modules."""

from .scoring import TIER_THRESHOLDS, BattleOutcome, calculate_score, get_tier, summarize_battle

__all__ = [
    "TIER_THRESHOLDS",
    "BattleOutcome",
    "calculate_score",
    "get_tier",
    "summarize_battle",
]
