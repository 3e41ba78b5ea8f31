"""Fighting-mode resolver - attacks, guards, movement and the per-frame tick."""

import copy
import logging
import random

from ..errors import ModeMismatchError
from ..models.enums import AttackKind, BattleMode, Direction, GuardStance, MoveKind, MoveState, Side
from .damage import compute_throw_damage, roll_damage
from .guard import apply_block, resolve_guard
from .logging import CombatLogger, LogEventType
from .rules import ATTACK_PROPERTIES, FIGHTING_RULES, FightingRules
from .types import BattleSession, ComboHit

log = logging.getLogger(__name__)

MOVE_VERBS = {MoveKind.WALK: "walks", MoveKind.DASH: "dashes", MoveKind.JUMP: "jumps"}


class FightingResolver:
    """Resolves fighting-mode actions and frame ticks.

    Turn ownership is flipped after every resolved action but never checked:
    counter-attacks arrive out of sequence, so the field is bookkeeping only.
    """

    def __init__(
        self,
        rng: random.Random,
        rules: FightingRules = FIGHTING_RULES,
        logger: CombatLogger | None = None,
    ) -> None:
        self.rng = rng
        self.rules = rules
        self.logger = logger

    def execute_attack(self, session: BattleSession, attack_kind: AttackKind, is_player: bool) -> BattleSession:
        """Resolve one attack.

        Stunned attackers and supers without a full meter are logged no-ops.
        A throw against a blocking defender skips the guard check and deals
        fixed damage. Everything else goes through guard resolution: clean hits
        extend the attacker's combo and build meter for both fighters, blocked
        hits deal chip damage and may break the guard.

        Args:
            session: Current snapshot
            attack_kind: Attack to perform
            is_player: True if the player is attacking

        Returns:
            New snapshot; the input is never modified
        """
        self._require_fighting(session, "execute_attack")
        attack_kind = AttackKind(attack_kind)
        if session.is_game_over:
            return session

        actor = Side.PLAYER if is_player else Side.OPPONENT
        new = session.copy()
        attacker = new.combatant(actor)
        defender = new.combatant(actor.other)
        attacker_state = new.fighter(actor)
        defender_state = new.fighter(actor.other)

        if attacker_state.is_stunned():
            return self._reject(new, actor, attack_kind.value, f"{attacker.name} is stunned!")

        if attack_kind is AttackKind.SUPER and attacker_state.super_meter < self.rules.meter_max:
            return self._reject(new, actor, attack_kind.value, f"{attacker.name} needs full super meter!")

        before = copy.copy(defender_state)
        hp_before = defender_state.hp

        if attack_kind is AttackKind.THROW and defender_state.is_blocking:
            damage = compute_throw_damage(attacker, self.rules.throw_damage_base, self.rules.throw_attack_ratio)
            defender_state.apply_damage(damage)
            defender_state.stun(self.rules.stun_frames, MoveState.THROWN)
            defender_state.drop_guard()
            attacker_state.gain_meter(ATTACK_PROPERTIES[AttackKind.THROW].meter_gain, self.rules.meter_max)

            message = f"{attacker.name} throws {defender.name} for {damage} damage!"
            event = LogEventType.THROW
        else:
            blocked = resolve_guard(attack_kind, defender_state.guard_stance, defender_state.is_airborne)
            combo_index = len(attacker_state.current_combo)
            roll = roll_damage(attacker, defender, attack_kind, combo_index, False, self.rules.damage, self.rng)
            damage = roll.amount

            if blocked:
                result = apply_block(defender_state, attack_kind, damage, self.rules)
                damage = result.damage
                if result.guard_broken:
                    message = f"{defender.name} GUARD BROKEN!"
                    event = LogEventType.GUARD_BREAK
                else:
                    message = f"{defender.name} blocks! {damage} chip damage"
                    event = LogEventType.BLOCK
            else:
                message = f"{attacker.name} hits with {attack_kind.value.upper()} attack! {damage} damage"
                attacker_state.current_combo.append(
                    ComboHit(
                        damage=damage,
                        attack_kind=attack_kind,
                        can_cancel=ATTACK_PROPERTIES[attack_kind].can_cancel,
                    )
                )
                attacker_state.combo_counter += 1
                if attacker_state.combo_counter > 1:
                    message += f" ({attacker_state.combo_counter} HIT COMBO!)"

                attacker_state.gain_meter(self.rules.meter_gain_on_hit, self.rules.meter_max)
                defender_state.gain_meter(self.rules.meter_gain_on_damage, self.rules.meter_max)
                event = LogEventType.HIT

            defender_state.apply_damage(damage)

            if attack_kind is AttackKind.SUPER:
                attacker_state.super_meter = 0

        new.log(message)
        new.last_action = attack_kind.value
        log.debug("%s %s: %s (hp %d->%d)", actor.value, attack_kind.value, message, hp_before, defender_state.hp)

        if self.logger:
            self.logger.log_action(
                event,
                new.frame_count,
                actor,
                attack_kind.value,
                message,
                value=hp_before - defender_state.hp,
                target=actor.other,
                state_before=before,
                state_after=defender_state,
            )

        if not defender_state.is_alive():
            new.declare_winner(actor)
            new.log(f"{attacker.name} wins! K.O.!")
            log.info("K.O. - %s wins as %s", attacker.name, actor.value)
            if self.logger:
                self.logger.log_winner(new.frame_count, actor)
        else:
            new.flip_turn(actor)

        return new

    def execute_block(self, session: BattleSession, stance: GuardStance, is_player: bool) -> BattleSession:
        """Raise a guard: sets the stance, regenerates a little guard gauge, passes the turn."""
        self._require_fighting(session, "execute_block")
        stance = GuardStance(stance)
        if session.is_game_over:
            return session

        actor = Side.PLAYER if is_player else Side.OPPONENT
        new = session.copy()
        character = new.combatant(actor)
        state = new.fighter(actor)

        state.is_blocking = True
        state.guard_stance = stance
        state.move_state = MoveState.BLOCKING
        state.restore_guard(self.rules.guard_regen_on_block, self.rules.guard_max)

        message = f"{character.name} guards {stance.value}!"
        new.log(message)
        new.flip_turn(actor)
        new.last_action = "block"

        if self.logger:
            self.logger.log_action(LogEventType.GUARD_UP, new.frame_count, actor, "block", message)

        return new

    def execute_movement(
        self,
        session: BattleSession,
        move_kind: MoveKind,
        direction: Direction,
        is_player: bool,
    ) -> BattleSession:
        """Move a fighter. Any movement drops the running combo.

        Walks and dashes shift the position by the character's speed; a jump
        makes the fighter airborne and drops the guard instead.
        """
        self._require_fighting(session, "execute_movement")
        move_kind = MoveKind(move_kind)
        direction = Direction(direction)
        if session.is_game_over:
            return session

        actor = Side.PLAYER if is_player else Side.OPPONENT
        new = session.copy()
        character = new.combatant(actor)
        state = new.fighter(actor)

        state.reset_combo()
        sign = 1 if direction is Direction.FORWARD else -1

        match move_kind:
            case MoveKind.WALK:
                state.position += character.walk_speed * sign
                state.move_state = MoveState.WALKING
            case MoveKind.DASH:
                state.position += character.dash_speed * sign
                state.move_state = MoveState.DASHING
            case MoveKind.JUMP:
                state.is_airborne = True
                state.move_state = MoveState.JUMPING
                state.drop_guard()

        limit = self.rules.position_limit
        state.position = max(-limit, min(limit, state.position))

        message = f"{character.name} {MOVE_VERBS[move_kind]} {direction.value}!"
        new.log(message)
        new.flip_turn(actor)
        new.last_action = move_kind.value

        if self.logger:
            self.logger.log_action(LogEventType.MOVEMENT, new.frame_count, actor, move_kind.value, message)

        return new

    def update_frame_state(self, session: BattleSession) -> BattleSession:
        """Advance one simulation frame.

        Decays stun on both fighters (back to idle when it runs out) and,
        every landing interval, brings airborne fighters back down.
        Terminal sessions are returned unchanged.
        """
        if session.is_game_over:
            return session

        new = session.copy()
        new.frame_count += 1
        landing = new.frame_count % self.rules.landing_interval_frames == 0

        for side in (Side.PLAYER, Side.OPPONENT):
            state = new.fighter(side)

            if state.stun_frames > 0:
                state.stun_frames -= 1
                if state.stun_frames == 0:
                    state.move_state = MoveState.IDLE
                    if self.logger:
                        self.logger.log_status_change(
                            LogEventType.STATUS_EXPIRED, new.frame_count, side, "recovered from stun"
                        )

            if landing and state.is_airborne:
                state.is_airborne = False
                state.move_state = MoveState.IDLE
                if self.logger:
                    self.logger.log_status_change(LogEventType.LANDED, new.frame_count, side, "landed")

        return new

    def _reject(self, new: BattleSession, actor: Side, action: str, reason: str) -> BattleSession:
        """Turn an illegal action into a logged no-op (turn is kept)."""
        new.log(reason)
        log.debug("%s %s rejected: %s", actor.value, action, reason)
        if self.logger:
            self.logger.log_action_rejected(new.frame_count, actor, action, reason)
        return new

    @staticmethod
    def _require_fighting(session: BattleSession, operation: str) -> None:
        if session.mode is not BattleMode.FIGHTING:
            raise ModeMismatchError(f"{operation} needs a fighting session, got {session.mode.value}")
