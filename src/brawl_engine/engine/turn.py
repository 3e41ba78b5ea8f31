"""Turn resolver - processes one turn-based action for whoever holds the turn."""

import logging
import random

from ..errors import ModeMismatchError
from ..models.enums import BattleMode, Side, TurnAction
from .damage import roll_damage
from .logging import CombatLogger, LogEventType
from .rules import TURN_BASED_RULES, TurnBasedRules
from .types import BattleSession

log = logging.getLogger(__name__)


class TurnResolver:
    """Resolves turn-based actions."""

    def __init__(
        self,
        rng: random.Random,
        rules: TurnBasedRules = TURN_BASED_RULES,
        logger: CombatLogger | None = None,
    ) -> None:
        self.rng = rng
        self.rules = rules
        self.logger = logger

    def execute_turn(self, session: BattleSession, action: TurnAction) -> BattleSession:
        """Resolve one action for the side holding the turn.

        Turn flow:
        1. Resolve the action (attack, special or defend)
        2. Apply damage to the defender, clamped at zero
        3. Charge the player's power-up if the player acted
        4. Check game over (player first), otherwise pass the turn

        A special the player cannot afford is logged and still consumes the turn.

        Args:
            session: Current snapshot
            action: Action for the acting side

        Returns:
            New snapshot; the input is never modified
        """
        if session.mode is not BattleMode.TURN_BASED:
            raise ModeMismatchError(f"execute_turn needs a turn-based session, got {session.mode.value}")
        action = TurnAction(action)
        if session.is_game_over or session.turn is None:
            return session

        new = session.copy()
        actor = new.turn
        attacker = new.combatant(actor)
        defender = new.combatant(actor.other)
        defender_state = new.fighter(actor.other)

        damage = 0
        critical = False
        rejected = False

        match action:
            case TurnAction.ATTACK:
                roll = roll_damage(attacker, defender, None, 0, False, self.rules.damage, self.rng)
                damage, critical = roll.amount, roll.critical
                message = f"{attacker.name} attacks for {damage} damage!"

            case TurnAction.SPECIAL:
                # Only the player's charge gates specials
                if actor is Side.PLAYER and not new.power_up.is_full():
                    rejected = True
                    message = "Not enough power-up charges!"
                else:
                    roll = roll_damage(attacker, defender, None, 0, True, self.rules.damage, self.rng)
                    damage, critical = roll.amount, roll.critical
                    message = f"{attacker.name} uses {attacker.special_ability} for {damage} damage!"
                    if actor is Side.PLAYER:
                        new.power_up.charges = 0

            case TurnAction.DEFEND:
                attacker.defense += self.rules.defend_bonus
                message = f"{attacker.name} defends! Defense increased."

        hp_before = defender_state.hp
        defender_state.apply_damage(damage)

        if actor is Side.PLAYER:
            new.power_up.add_charge()

        new.log(message)
        new.last_action = action.value
        log.debug(
            "turn %s: %s %s dmg=%d crit=%s hp %d->%d",
            actor.value,
            attacker.name,
            action.value,
            damage,
            critical,
            hp_before,
            defender_state.hp,
        )

        if self.logger:
            if rejected:
                self.logger.log_action_rejected(new.frame_count, actor, action.value, message)
            else:
                self.logger.log_action(
                    LogEventType.TURN_ACTION,
                    new.frame_count,
                    actor,
                    action.value,
                    message,
                    value=damage,
                    target=actor.other,
                )

        if not new.player_state.is_alive():
            new.declare_winner(Side.OPPONENT)
            new.log("You lost the battle!")
        elif not new.opponent_state.is_alive():
            new.declare_winner(Side.PLAYER)
            new.log("You won the battle!")
        else:
            new.flip_turn(actor)

        if new.is_game_over:
            log.info("Turn-based battle over, winner: %s", new.winner.value)
            if self.logger:
                self.logger.log_winner(new.frame_count, new.winner)

        return new

