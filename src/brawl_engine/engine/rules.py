"""Rule presets for the two battle modes.

Turn-based and fighting mode share the data model but are tuned
independently, so each gets its own frozen parameter struct instead of
branching on the mode inside the formulas.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..models.enums import AttackKind, BattleMode


@dataclass(frozen=True)
class AttackProperties:
    """Fixed properties of a fighting-mode attack."""

    damage: int
    guard_damage: int
    meter_gain: int
    startup_frames: int
    can_cancel: bool
    hits_high: bool


ATTACK_PROPERTIES: Mapping[AttackKind, AttackProperties] = MappingProxyType(
    {
        AttackKind.LIGHT: AttackProperties(
            damage=7, guard_damage=3, meter_gain=3, startup_frames=5, can_cancel=True, hits_high=True
        ),
        AttackKind.MEDIUM: AttackProperties(
            damage=10, guard_damage=5, meter_gain=4, startup_frames=8, can_cancel=True, hits_high=True
        ),
        AttackKind.HEAVY: AttackProperties(
            damage=12, guard_damage=8, meter_gain=5, startup_frames=12, can_cancel=False, hits_high=True
        ),
        AttackKind.SPECIAL: AttackProperties(
            damage=45, guard_damage=15, meter_gain=0, startup_frames=15, can_cancel=True, hits_high=True
        ),
        AttackKind.SUPER: AttackProperties(
            damage=45, guard_damage=25, meter_gain=0, startup_frames=8, can_cancel=False, hits_high=True
        ),
        AttackKind.THROW: AttackProperties(
            damage=15, guard_damage=0, meter_gain=4, startup_frames=6, can_cancel=False, hits_high=True
        ),
    }
)


@dataclass(frozen=True)
class DamageRules:
    """Constants of the damage formula for one mode."""

    # True: base is the attack table value scaled by attack / 100.
    # False: base is the attacker's raw attack stat.
    uses_attack_table: bool
    variance: tuple[float, float]
    crit_chance: float = 0.0
    crit_multiplier: float = 2.0
    empower_multiplier: float = 1.5
    combo_scaling: float = 0.85


@dataclass(frozen=True)
class TurnBasedRules:
    """Rules for turn-based battles."""

    damage: DamageRules = field(
        default_factory=lambda: DamageRules(uses_attack_table=False, variance=(0.9, 1.1), crit_chance=0.15)
    )
    defend_bonus: int = 20
    power_up_name: str = "Power Up"
    power_up_effect: str = "Increased damage"
    power_up_max_charges: int = 3
    opening_line: str = "Battle started!"

    # AI weights
    ai_attack_chance: float = 0.7
    ai_defend_window: float = 0.9
    ai_low_health_ratio: float = 0.3

    mode: BattleMode = BattleMode.TURN_BASED


@dataclass(frozen=True)
class FightingRules:
    """Rules for fighting-mode battles."""

    damage: DamageRules = field(default_factory=lambda: DamageRules(uses_attack_table=True, variance=(0.95, 1.05)))
    hp_cap: int = 50
    meter_max: int = 100
    guard_max: int = 100

    chip_damage_ratio: float = 0.1
    guard_break_threshold: int = 20
    guard_regen_on_block: int = 2
    meter_gain_on_hit: int = 5
    meter_gain_on_damage: int = 3

    throw_damage_base: int = 20
    throw_attack_ratio: float = 0.3
    stun_frames: int = 30
    guard_break_stun_multiplier: float = 1.5

    landing_interval_frames: int = 20
    position_limit: float = 100.0

    power_up_name: str = "Super Meter"
    power_up_effect: str = "Enables super moves"
    opening_line: str = "Fight begins!"

    # Counter-attack AI
    ai_special_threshold: float = 0.6

    mode: BattleMode = BattleMode.FIGHTING

    @property
    def guard_break_stun_frames(self) -> int:
        return int(self.stun_frames * self.guard_break_stun_multiplier)


TURN_BASED_RULES = TurnBasedRules()
FIGHTING_RULES = FightingRules()
