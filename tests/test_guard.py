"""Tests for guard resolution."""

from brawl_engine.engine.guard import apply_block, resolve_guard
from brawl_engine.engine.types import FighterState
from brawl_engine.models import AttackKind, GuardStance, MoveState


class TestResolveGuard:
    """Tests for the block check."""

    def test_throws_are_never_blocked(self):
        assert resolve_guard(AttackKind.THROW, GuardStance.HIGH, False) is False
        assert resolve_guard(AttackKind.THROW, GuardStance.LOW, False) is False

    def test_airborne_cannot_block(self):
        assert resolve_guard(AttackKind.LIGHT, GuardStance.HIGH, True) is False

    def test_no_stance_blocks_nothing(self):
        assert resolve_guard(AttackKind.HEAVY, GuardStance.NONE, False) is False

    def test_high_guard_blocks_high_attacks(self):
        """Every attack in the table hits high."""
        for kind in (AttackKind.LIGHT, AttackKind.MEDIUM, AttackKind.HEAVY, AttackKind.SPECIAL, AttackKind.SUPER):
            assert resolve_guard(kind, GuardStance.HIGH, False) is True

    def test_low_guard_misses_high_attacks(self):
        assert resolve_guard(AttackKind.LIGHT, GuardStance.LOW, False) is False

    def test_accepts_string_values(self):
        assert resolve_guard("medium", "high", False) is True


class TestApplyBlock:
    """Tests for chip damage and guard breaks."""

    def test_chip_damage_and_drain(self):
        """A blocked hit deals 10% chip and drains the attack's guard damage."""
        defender = FighterState(hp=50, max_hp=50, is_blocking=True, guard_stance=GuardStance.HIGH)

        result = apply_block(defender, AttackKind.SPECIAL, 45)

        assert result.damage == 4
        assert result.guard_damage == 15
        assert result.guard_gauge == 85
        assert result.guard_broken is False
        assert defender.is_blocking is True
        assert defender.hp == 50

    def test_guard_break(self):
        """Dropping below 20 breaks the guard with a 45 frame stun."""
        defender = FighterState(
            hp=50, max_hp=50, guard_gauge=21, is_blocking=True, guard_stance=GuardStance.HIGH
        )

        result = apply_block(defender, AttackKind.HEAVY, 13)

        assert result.damage == 1
        assert result.guard_gauge == 13
        assert result.guard_broken is True
        assert defender.stun_frames == 45
        assert defender.move_state == MoveState.STUNNED
        assert defender.is_blocking is False
        assert defender.guard_stance == GuardStance.NONE

    def test_break_threshold_is_strict(self):
        """A gauge of exactly 20 holds; 19 breaks."""
        holding = FighterState(hp=50, max_hp=50, guard_gauge=23, is_blocking=True)
        breaking = FighterState(hp=50, max_hp=50, guard_gauge=22, is_blocking=True)

        assert apply_block(holding, AttackKind.LIGHT, 7).guard_broken is False
        assert holding.guard_gauge == 20
        assert apply_block(breaking, AttackKind.LIGHT, 7).guard_broken is True
        assert breaking.guard_gauge == 19

    def test_gauge_floors_at_zero(self):
        defender = FighterState(hp=50, max_hp=50, guard_gauge=10, is_blocking=True)

        result = apply_block(defender, AttackKind.SUPER, 49)

        assert result.guard_gauge == 0
        assert result.guard_broken is True

    def test_small_hits_chip_nothing(self):
        defender = FighterState(hp=50, max_hp=50, is_blocking=True)

        assert apply_block(defender, AttackKind.LIGHT, 7).damage == 0
