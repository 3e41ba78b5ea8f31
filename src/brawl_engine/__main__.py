"""Entry point for running a headless exhibition battle."""

import logging
import sys

from brawl_engine.config import Settings, get_settings, make_rng
from brawl_engine.engine import BattleEngine, BattleSession, CombatLogger
from brawl_engine.models import (
    AttackKind,
    BattleMode,
    CharacterKind,
    Direction,
    MoveKind,
    Side,
    TurnAction,
    get_archetype,
)
from brawl_engine.services import FrameDriver, OpponentAI, pick_opponent_kind
from brawl_engine.utils import summarize_battle

MAX_EXCHANGES = 500
MAX_COMBO = 3


def play_turn_based(engine: BattleEngine, player_kind: CharacterKind, opponent_kind: CharacterKind) -> BattleSession:
    """Player specials whenever charged, otherwise attacks; the AI handles the opponent."""
    ai = OpponentAI(engine)
    session = engine.initialize_turn_based(player_kind, opponent_kind)

    for _ in range(MAX_EXCHANGES):
        if engine.is_terminal(session):
            break
        if session.turn is Side.PLAYER:
            action = TurnAction.SPECIAL if session.power_up.is_full() else TurnAction.ATTACK
            session = engine.execute_turn(session, action)
        else:
            session = ai.take_turn(session)
    return session


def play_fighting(
    engine: BattleEngine,
    player_kind: CharacterKind,
    opponent_kind: CharacterKind,
    settings: Settings,
) -> BattleSession:
    """Player strings light attacks into a super; the AI counters every exchange."""
    ai = OpponentAI(engine)
    driver = FrameDriver(engine, settings.frame_interval_ms)
    session = engine.initialize_fighting(get_archetype(player_kind), get_archetype(opponent_kind))

    for _ in range(MAX_EXCHANGES):
        if engine.is_terminal(session):
            break
        if session.player_state.combo_counter >= MAX_COMBO:
            # Step in to reset combo scaling
            session = engine.execute_movement(session, MoveKind.WALK, Direction.FORWARD, True)
        else:
            attack = AttackKind.SUPER if session.player_state.super_meter >= 100 else AttackKind.LIGHT
            session = engine.execute_attack(session, attack, True)
        defended = engine.rng.random() < 0.5
        session = ai.counter(session, defended)
        # Let stuns wear off between exchanges
        session = driver.step(session, frames=30)
    return session


def main() -> None:
    """Run one exhibition battle and log the outcome."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = make_rng(settings)
    combat_logger = CombatLogger(battle_id="exhibition") if settings.combat_log_enabled else None
    engine = BattleEngine(rng=rng, logger=combat_logger)

    player_kind = pick_opponent_kind(rng)
    opponent_kind = pick_opponent_kind(rng)

    if settings.exhibition_mode is BattleMode.FIGHTING:
        session = play_fighting(engine, player_kind, opponent_kind, settings)
    else:
        session = play_turn_based(engine, player_kind, opponent_kind)

    for line in session.battle_log:
        logging.info(line)

    if combat_logger and settings.debug:
        logging.debug("\n%s", combat_logger.get_log().format_readable())

    if not session.is_game_over:
        logging.warning("Exhibition stopped after %d exchanges without a winner", MAX_EXCHANGES)
        return

    outcome = summarize_battle(session)
    logging.info(
        "Result: %s, score %d (%s), damage dealt %d",
        "win" if outcome.won else "loss",
        outcome.score,
        outcome.tier.value,
        outcome.damage_dealt,
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
