"""Tests for the combat logging system."""

import pytest
from conftest import FixedRandom

from brawl_engine.engine import BattleEngine
from brawl_engine.engine.logging import CombatLog, CombatLogger, FighterSnapshot, LogEntry, LogEventType
from brawl_engine.engine.types import FighterState
from brawl_engine.models import (
    AttackKind,
    CharacterKind,
    Direction,
    GuardStance,
    MoveKind,
    Side,
    TurnAction,
    get_archetype,
)


class TestFighterSnapshot:
    """Tests for FighterSnapshot data class."""

    def test_snapshot_from_state(self):
        """Test creating a snapshot from a live fighter state."""
        state = FighterState(hp=30, max_hp=50, super_meter=12, guard_stance=GuardStance.LOW, stun_frames=4)

        snapshot = CombatLogger.snapshot_state(state)

        assert snapshot.hp == 30
        assert snapshot.max_hp == 50
        assert snapshot.super_meter == 12
        assert snapshot.guard_stance == "low"
        assert snapshot.move_state == "idle"
        assert snapshot.stun_frames == 4

    def test_snapshot_is_detached(self):
        """Test that later changes to the state do not leak into the snapshot."""
        state = FighterState(hp=30, max_hp=50)
        snapshot = CombatLogger.snapshot_state(state)

        state.hp = 10

        assert snapshot.hp == 30

    def test_snapshot_to_dict(self):
        """Test converting snapshot to dictionary."""
        snapshot = CombatLogger.snapshot_state(FighterState(hp=50, max_hp=50, position=-4.0))

        result = snapshot.to_dict()

        assert result["hp"] == 50
        assert result["position"] == -4.0
        assert result["guard_stance"] == "none"
        assert result["is_airborne"] is False


class TestLogEntry:
    """Tests for LogEntry data class."""

    def test_minimal_entry_to_dict(self):
        """Test that unset optional fields are left out."""
        entry = LogEntry(event_type=LogEventType.BATTLE_START, frame=0, timestamp_order=1)

        assert entry.to_dict() == {"event_type": "battle_start", "frame": 0, "timestamp_order": 1}

    def test_full_entry_to_dict(self):
        """Test converting a complete entry to dictionary."""
        before = FighterSnapshot(50, 50, 0, 100, 0, False, "none", "idle", 0.0, False, 0)
        after = FighterSnapshot(43, 50, 3, 100, 0, False, "none", "idle", 0.0, False, 0)
        entry = LogEntry(
            event_type=LogEventType.HIT,
            frame=7,
            timestamp_order=3,
            actor=Side.PLAYER,
            target=Side.OPPONENT,
            action="light",
            value=7,
            description="Fire Warrior hits with LIGHT attack! 7 damage",
            state_before=before,
            state_after=after,
        )

        result = entry.to_dict()

        assert result["actor"] == "player"
        assert result["target"] == "opponent"
        assert result["value"] == 7
        assert result["state_before"]["hp"] == 50
        assert result["state_after"]["hp"] == 43
        assert "winner" not in result


class TestCombatLog:
    """Tests for CombatLog queries and formatting."""

    @pytest.fixture
    def combat_log(self) -> CombatLog:
        """Create a log with a few entries."""
        logger = CombatLogger(battle_id="test")
        logger.log_battle_start(0, "Fire Warrior vs Iced Out (fighting)")
        logger.log_action(LogEventType.GUARD_UP, 0, Side.OPPONENT, "block", "Iced Out guards high!")
        logger.log_action_rejected(0, Side.PLAYER, "super", "Fire Warrior needs full super meter!")
        logger.log_status_change(LogEventType.LANDED, 20, Side.PLAYER, "landed")
        logger.log_winner(25, Side.PLAYER)
        return logger.get_log()

    def test_filter_by_type(self, combat_log):
        assert len(combat_log.get_entries_by_type(LogEventType.ACTION_REJECTED)) == 1
        assert combat_log.get_entries_by_type(LogEventType.HIT) == []

    def test_filter_by_actor(self, combat_log):
        player_entries = combat_log.get_entries_for_actor(Side.PLAYER)

        assert [e.event_type for e in player_entries] == [LogEventType.ACTION_REJECTED, LogEventType.LANDED]

    def test_order_is_sequential(self, combat_log):
        assert [e.timestamp_order for e in combat_log.entries] == [1, 2, 3, 4, 5]

    def test_to_dict(self, combat_log):
        result = combat_log.to_dict()

        assert result["battle_id"] == "test"
        assert len(result["entries"]) == 5

    def test_format_readable(self, combat_log):
        """Test the human-readable rendering."""
        text = combat_log.format_readable()

        assert text.splitlines()[0] == "=== Combat Log (test) ==="
        assert "Fire Warrior vs Iced Out (fighting)" in text
        assert "x player super: Fire Warrior needs full super meter!" in text
        assert "player: landed" in text
        assert "*** WINNER: player ***" in text


class TestCombatLogger:
    """Tests for CombatLogger itself."""

    def test_clear(self):
        logger = CombatLogger()
        logger.log_battle_start(0, "start")

        logger.clear()

        assert logger.get_log().entries == []
        logger.log_battle_start(0, "again")
        assert logger.get_log().entries[0].timestamp_order == 1


class TestEngineIntegration:
    """Tests that engine operations write structured entries."""

    @pytest.fixture
    def logger(self) -> CombatLogger:
        return CombatLogger(battle_id="integration")

    @pytest.fixture
    def logged_engine(self, logger: CombatLogger) -> BattleEngine:
        return BattleEngine(rng=FixedRandom(roll=0.9), logger=logger)

    def test_fighting_hit_records_states(self, logger, logged_engine):
        """Test that a clean hit logs the defender's before/after health."""
        session = logged_engine.initialize_fighting(
            get_archetype(CharacterKind.FIRE), get_archetype(CharacterKind.ICE)
        )
        logged_engine.execute_attack(session, AttackKind.LIGHT, True)

        hits = logger.get_log().get_entries_by_type(LogEventType.HIT)
        assert len(hits) == 1
        assert hits[0].actor == Side.PLAYER
        assert hits[0].target == Side.OPPONENT
        assert hits[0].value == 7
        assert hits[0].state_before.hp == 50
        assert hits[0].state_after.hp == 43

    def test_block_and_guard_up(self, logger, logged_engine):
        session = logged_engine.initialize_fighting(
            get_archetype(CharacterKind.FIRE), get_archetype(CharacterKind.ICE)
        )
        session = logged_engine.execute_block(session, GuardStance.HIGH, False)
        logged_engine.execute_attack(session, AttackKind.HEAVY, True)

        log = logger.get_log()
        assert len(log.get_entries_by_type(LogEventType.GUARD_UP)) == 1
        blocks = log.get_entries_by_type(LogEventType.BLOCK)
        assert len(blocks) == 1
        assert blocks[0].value == 1

    def test_frame_events(self, logger, logged_engine):
        session = logged_engine.initialize_fighting(
            get_archetype(CharacterKind.FIRE), get_archetype(CharacterKind.ICE)
        )
        session = logged_engine.execute_movement(session, MoveKind.JUMP, Direction.FORWARD, True)
        session.opponent_state.stun_frames = 2
        for _ in range(20):
            session = logged_engine.advance_frame(session)

        log = logger.get_log()
        expired = log.get_entries_by_type(LogEventType.STATUS_EXPIRED)
        landed = log.get_entries_by_type(LogEventType.LANDED)
        assert [(e.actor, e.frame) for e in expired] == [(Side.OPPONENT, 2)]
        assert [(e.actor, e.frame) for e in landed] == [(Side.PLAYER, 20)]

    def test_turn_based_battle_log(self, logger, logged_engine):
        """Test that a whole turn-based battle is recorded start to finish."""
        session = logged_engine.initialize_turn_based(CharacterKind.PUNCH, CharacterKind.ICE)
        session = logged_engine.execute_turn(session, TurnAction.SPECIAL)
        session = logged_engine.execute_turn(session, TurnAction.ATTACK)
        session = logged_engine.execute_turn(session, TurnAction.ATTACK)
        session = logged_engine.execute_turn(session, TurnAction.ATTACK)
        session = logged_engine.execute_turn(session, TurnAction.ATTACK)

        log = logger.get_log()
        types = [e.event_type for e in log.entries]
        assert types == [
            LogEventType.BATTLE_START,
            LogEventType.ACTION_REJECTED,
            LogEventType.TURN_ACTION,
            LogEventType.TURN_ACTION,
            LogEventType.TURN_ACTION,
            LogEventType.TURN_ACTION,
            LogEventType.WINNER_DETERMINED,
        ]
        assert log.entries[-1].winner == Side.PLAYER
        assert session.is_game_over
