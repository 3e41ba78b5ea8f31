"""Opponent selection and computer-controlled opponent behavior."""

import random

from ..engine.battle import BattleEngine
from ..engine.rules import FIGHTING_RULES, TURN_BASED_RULES, FightingRules, TurnBasedRules
from ..engine.types import BattleSession
from ..models.enums import AttackKind, CharacterKind, GuardStance, Side, TurnAction


def pick_opponent_kind(rng: random.Random) -> CharacterKind:
    """Draw an opponent uniformly from the whole roster (mirror matches allowed)."""
    return rng.choice(list(CharacterKind))


def choose_turn_action(
    session: BattleSession,
    rng: random.Random,
    rules: TurnBasedRules = TURN_BASED_RULES,
) -> TurnAction:
    """Pick the computer opponent's turn-based action.

    70% attack. Otherwise, while its own health is below 30% of max, a 20%
    band defends; everything else attacks.
    """
    roll = rng.random()
    if roll < rules.ai_attack_chance:
        return TurnAction.ATTACK
    low_health = session.opponent_state.hp < session.opponent.max_hp * rules.ai_low_health_ratio
    if roll < rules.ai_defend_window and low_health:
        return TurnAction.DEFEND
    return TurnAction.ATTACK


def choose_counter_attack(rng: random.Random, rules: FightingRules = FIGHTING_RULES) -> AttackKind:
    """Pick the computer opponent's fighting-mode counter-attack."""
    if rng.random() > rules.ai_special_threshold:
        return AttackKind.SPECIAL
    return AttackKind.LIGHT


class OpponentAI:
    """Drives the computer opponent through a BattleEngine."""

    def __init__(self, engine: BattleEngine) -> None:
        self.engine = engine

    def take_turn(self, session: BattleSession) -> BattleSession:
        """Turn-based: act if the opponent holds the turn, otherwise return the session unchanged."""
        if self.engine.is_terminal(session) or session.turn is not Side.OPPONENT:
            return session
        action = choose_turn_action(session, self.engine.rng, self.engine.turn_rules)
        return self.engine.execute_turn(session, action)

    def counter(self, session: BattleSession, defended: bool) -> BattleSession:
        """Fighting mode: answer a player attack with a counter-attack.

        Args:
            session: Snapshot after the player's attack
            defended: Whether the player won the defense timing challenge; if so
                the player guards high before the counter lands

        Returns:
            Snapshot after the counter-attack
        """
        if self.engine.is_terminal(session):
            return session
        attack = choose_counter_attack(self.engine.rng, self.engine.fighting_rules)
        if defended:
            session = self.engine.execute_block(session, GuardStance.HIGH, True)
        return self.engine.execute_attack(session, attack, False)
