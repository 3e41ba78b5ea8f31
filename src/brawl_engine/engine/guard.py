"""Guard resolution - decides blocks and applies chip damage and guard breaks."""

import math
from dataclasses import dataclass

from ..models.enums import AttackKind, GuardStance
from .rules import ATTACK_PROPERTIES, FIGHTING_RULES, FightingRules
from .types import FighterState


@dataclass
class GuardResult:
    """Outcome of an attack meeting a guard."""

    damage: int  # Chip damage that still goes through
    guard_damage: int
    guard_gauge: int
    guard_broken: bool = False


def resolve_guard(attack_kind: AttackKind, guard_stance: GuardStance, is_airborne: bool) -> bool:
    """Check whether an attack is blocked.

    First match wins: throws are never blocked, airborne fighters cannot
    block, no stance blocks nothing, otherwise the stance must match the
    height of the attack.
    """
    attack_kind = AttackKind(attack_kind)
    guard_stance = GuardStance(guard_stance)

    if attack_kind is AttackKind.THROW:
        return False
    if is_airborne:
        return False
    if guard_stance is GuardStance.NONE:
        return False

    hits_high = ATTACK_PROPERTIES[attack_kind].hits_high
    if hits_high:
        return guard_stance is GuardStance.HIGH
    return guard_stance is GuardStance.LOW


def apply_block(
    defender: FighterState,
    attack_kind: AttackKind,
    damage: int,
    rules: FightingRules = FIGHTING_RULES,
) -> GuardResult:
    """Apply a blocked hit to the defender's guard.

    Reduces the incoming damage to chip damage and drains the guard gauge.
    A gauge below the break threshold stuns the defender and drops the guard.
    Health is not touched here.
    """
    chip = math.floor(damage * rules.chip_damage_ratio)
    guard_damage = ATTACK_PROPERTIES[AttackKind(attack_kind)].guard_damage
    gauge = defender.drain_guard(guard_damage)

    broken = gauge < rules.guard_break_threshold
    if broken:
        defender.stun(rules.guard_break_stun_frames)
        defender.drop_guard()

    return GuardResult(damage=chip, guard_damage=guard_damage, guard_gauge=gauge, guard_broken=broken)
