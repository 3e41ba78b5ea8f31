"""Match scoring and tier ranking."""

from dataclasses import dataclass

from ..engine.types import BattleSession
from ..models.enums import CharacterKind, Side, Tier

WIN_BASE_SCORE = 100
LOSS_SCORE = 25

# Minimum score for each tier, highest first
TIER_THRESHOLDS: dict[Tier, int] = {
    Tier.DIAMOND: 5000,
    Tier.PLATINUM: 3000,
    Tier.GOLD: 1500,
    Tier.SILVER: 500,
    Tier.BRONZE: 0,
}


@dataclass
class BattleOutcome:
    """Result of a finished battle from the player's point of view."""

    won: bool
    score: int
    tier: Tier
    opponent_kind: CharacterKind
    damage_dealt: int


def calculate_score(won: bool, remaining_hp: int) -> int:
    """Calculate the score for one battle.

    A win is worth 100 plus the player's remaining health; a loss is a flat 25.

    Args:
        won: Whether the player won
        remaining_hp: Player health at the end of the battle

    Returns:
        Score for the battle
    """
    if won:
        return WIN_BASE_SCORE + max(0, remaining_hp)
    return LOSS_SCORE


def get_tier(score: int) -> Tier:
    """Get the tier a score falls into."""
    for tier, threshold in TIER_THRESHOLDS.items():
        if score >= threshold:
            return tier
    return Tier.BRONZE


def summarize_battle(session: BattleSession) -> BattleOutcome:
    """Build the outcome of a finished battle.

    Raises:
        ValueError: If the battle is still running.
    """
    if not session.is_game_over:
        raise ValueError("Battle is not over yet")

    won = session.winner is Side.PLAYER
    score = calculate_score(won, session.player_state.hp)
    return BattleOutcome(
        won=won,
        score=score,
        tier=get_tier(score),
        opponent_kind=session.opponent.kind,
        damage_dealt=session.opponent_state.max_hp - session.opponent_state.hp,
    )
