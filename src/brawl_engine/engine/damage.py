"""Damage model - pure damage formulas shared by both battle modes."""

import math
import random
from dataclasses import dataclass

from ..models.characters import get_effectiveness
from ..models.enums import AttackKind
from .rules import ATTACK_PROPERTIES, DamageRules
from .types import Combatant


@dataclass
class DamageRoll:
    """Breakdown of a single damage computation."""

    amount: int
    effectiveness: float
    variance: float
    critical: bool = False


def defense_multiplier(defense: int) -> float:
    """Mitigation factor: 100 / (100 + defense)."""
    return 100 / (100 + defense)


def combo_multiplier(combo_hit_index: int, scaling: float = 0.85) -> float:
    """Diminishing return for the n-th consecutive combo hit (0 = first hit)."""
    if combo_hit_index <= 0:
        return 1.0
    return scaling**combo_hit_index


def roll_damage(
    attacker: Combatant,
    defender: Combatant,
    attack_kind: AttackKind | None,
    combo_hit_index: int,
    is_empowered: bool,
    rules: DamageRules,
    rng: random.Random,
) -> DamageRoll:
    """Compute damage for one hit and report how it was reached.

    Args:
        attacker: Stats of the acting fighter
        defender: Stats of the target
        attack_kind: Fighting-mode attack; ignored when the rules use the raw attack stat
        combo_hit_index: Number of clean hits already in the attacker's combo
        is_empowered: Turn-based special flag
        rules: Mode preset
        rng: Injected random source (variance and crits)

    Returns:
        DamageRoll with the floored, non-negative amount
    """
    if rules.uses_attack_table:
        if attack_kind is None:
            raise ValueError("attack_kind is required when damage comes from the attack table")
        damage = ATTACK_PROPERTIES[AttackKind(attack_kind)].damage * (attacker.attack / 100)
    else:
        damage = float(attacker.attack)

    effectiveness = get_effectiveness(attacker.kind, defender.kind)
    damage *= effectiveness
    damage *= combo_multiplier(combo_hit_index, rules.combo_scaling)
    damage *= defense_multiplier(defender.defense)

    if is_empowered:
        damage *= rules.empower_multiplier

    variance = rng.uniform(*rules.variance)
    damage *= variance

    critical = False
    if rules.crit_chance > 0 and rng.random() < rules.crit_chance:
        critical = True
        damage *= rules.crit_multiplier

    return DamageRoll(
        amount=max(0, math.floor(damage)),
        effectiveness=effectiveness,
        variance=variance,
        critical=critical,
    )


def compute_damage(
    attacker: Combatant,
    defender: Combatant,
    attack_kind: AttackKind | None,
    combo_hit_index: int,
    is_empowered: bool,
    rules: DamageRules,
    rng: random.Random,
) -> int:
    """Integer damage for one hit. See roll_damage."""
    return roll_damage(attacker, defender, attack_kind, combo_hit_index, is_empowered, rules, rng).amount


def compute_throw_damage(attacker: Combatant, base: int = 20, attack_ratio: float = 0.3) -> int:
    """Fixed damage of a throw landing on a blocking defender."""
    return math.floor(base + attacker.attack * attack_ratio)
