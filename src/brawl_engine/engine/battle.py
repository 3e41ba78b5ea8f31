"""Battle engine - creates sessions and routes actions to the mode resolvers."""

import logging
import random

from ..models.characters import CharacterArchetype, get_archetype
from ..models.enums import AttackKind, BattleMode, CharacterKind, Direction, GuardStance, MoveKind, Side, TurnAction
from .fighting import FightingResolver
from .logging import CombatLogger
from .rules import FIGHTING_RULES, TURN_BASED_RULES, FightingRules, TurnBasedRules
from .turn import TurnResolver
from .types import BattleSession, Combatant, FighterState, PowerUp

log = logging.getLogger(__name__)


class BattleEngine:
    """Main battle engine - the contract consumed by presentation layers.

    Every operation takes a session snapshot and returns a new one. The engine
    holds no battle state of its own; the only shared things are the injected
    random source and the optional combat logger.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        logger: CombatLogger | None = None,
        turn_rules: TurnBasedRules = TURN_BASED_RULES,
        fighting_rules: FightingRules = FIGHTING_RULES,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger
        self.turn_rules = turn_rules
        self.fighting_rules = fighting_rules
        self.turn_resolver = TurnResolver(self.rng, turn_rules, logger=logger)
        self.fighting_resolver = FightingResolver(self.rng, fighting_rules, logger=logger)

    def initialize_turn_based(
        self,
        player_kind: CharacterKind | str,
        opponent_kind: CharacterKind | str,
    ) -> BattleSession:
        """Start a turn-based battle between two roster characters.

        Both fighters start at their archetype's full health. The faster
        character moves first; ties go to the player.

        Raises:
            UnknownCharacterKind: If either kind is not on the roster.
        """
        player = get_archetype(player_kind)
        opponent = get_archetype(opponent_kind)
        rules = self.turn_rules

        session = BattleSession(
            mode=BattleMode.TURN_BASED,
            player=Combatant.from_archetype(player),
            opponent=Combatant.from_archetype(opponent),
            player_state=FighterState(hp=player.max_hp, max_hp=player.max_hp),
            opponent_state=FighterState(hp=opponent.max_hp, max_hp=opponent.max_hp),
            power_up=PowerUp(
                name=rules.power_up_name,
                effect=rules.power_up_effect,
                charges=0,
                max_charges=rules.power_up_max_charges,
            ),
            turn=Side.PLAYER if player.speed >= opponent.speed else Side.OPPONENT,
            battle_log=[rules.opening_line],
        )
        self._log_start(session)
        return session

    def initialize_fighting(
        self,
        player_archetype: CharacterArchetype,
        opponent_archetype: CharacterArchetype,
    ) -> BattleSession:
        """Start a fighting-mode battle.

        Health is capped (50 by default) regardless of the archetypes' max
        health; the first turn is a coin flip.
        """
        rules = self.fighting_rules
        player_hp = min(player_archetype.max_hp, rules.hp_cap)
        opponent_hp = min(opponent_archetype.max_hp, rules.hp_cap)

        session = BattleSession(
            mode=BattleMode.FIGHTING,
            player=Combatant.from_archetype(player_archetype),
            opponent=Combatant.from_archetype(opponent_archetype),
            player_state=FighterState(hp=player_hp, max_hp=player_hp, guard_gauge=rules.guard_max),
            opponent_state=FighterState(hp=opponent_hp, max_hp=opponent_hp, guard_gauge=rules.guard_max),
            power_up=PowerUp(
                name=rules.power_up_name,
                effect=rules.power_up_effect,
                charges=0,
                max_charges=rules.meter_max,
            ),
            turn=Side.PLAYER if self.rng.random() > 0.5 else Side.OPPONENT,
            battle_log=[rules.opening_line],
        )
        self._log_start(session)
        return session

    def execute_turn(self, session: BattleSession, action: TurnAction | str) -> BattleSession:
        """Turn-based: the side holding the turn performs ``action``."""
        return self.turn_resolver.execute_turn(session, action)

    def execute_attack(
        self,
        session: BattleSession,
        attack_kind: AttackKind | str,
        is_player_acting: bool,
    ) -> BattleSession:
        """Fighting mode: perform an attack."""
        return self.fighting_resolver.execute_attack(session, attack_kind, is_player_acting)

    def execute_block(
        self,
        session: BattleSession,
        stance: GuardStance | str,
        is_player_acting: bool,
    ) -> BattleSession:
        """Fighting mode: raise a guard."""
        return self.fighting_resolver.execute_block(session, stance, is_player_acting)

    def execute_movement(
        self,
        session: BattleSession,
        move_kind: MoveKind | str,
        direction: Direction | str,
        is_player_acting: bool,
    ) -> BattleSession:
        """Fighting mode: walk, dash or jump."""
        return self.fighting_resolver.execute_movement(session, move_kind, direction, is_player_acting)

    def advance_frame(self, session: BattleSession) -> BattleSession:
        """Advance one simulation frame (stun decay, landing)."""
        return self.fighting_resolver.update_frame_state(session)

    @staticmethod
    def is_terminal(session: BattleSession) -> bool:
        """Check if the battle is over."""
        return session.is_game_over or not session.player_state.is_alive() or not session.opponent_state.is_alive()

    def _log_start(self, session: BattleSession) -> None:
        log.info(
            "%s battle: %s vs %s, first turn %s",
            session.mode.value,
            session.player.name,
            session.opponent.name,
            session.turn.value if session.turn else "-",
        )
        if self.logger:
            self.logger.log_battle_start(
                session.frame_count,
                f"{session.player.name} vs {session.opponent.name} ({session.mode.value})",
            )
