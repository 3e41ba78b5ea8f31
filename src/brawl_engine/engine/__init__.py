"""Battle engine module - handles damage, guards, turn and frame transitions."""

from .battle import BattleEngine
from .damage import DamageRoll, compute_damage, compute_throw_damage, roll_damage
from .fighting import FightingResolver
from .guard import GuardResult, apply_block, resolve_guard
from .logging import CombatLog, CombatLogger, FighterSnapshot, LogEntry, LogEventType
from .rules import (
    ATTACK_PROPERTIES,
    FIGHTING_RULES,
    TURN_BASED_RULES,
    AttackProperties,
    DamageRules,
    FightingRules,
    TurnBasedRules,
)
from .turn import TurnResolver
from .types import BattleSession, Combatant, ComboHit, FighterState, PowerUp

__all__ = [
    "BattleEngine",
    "TurnResolver",
    "FightingResolver",
    "DamageRoll",
    "compute_damage",
    "compute_throw_damage",
    "roll_damage",
    "GuardResult",
    "apply_block",
    "resolve_guard",
    "ATTACK_PROPERTIES",
    "FIGHTING_RULES",
    "TURN_BASED_RULES",
    "AttackProperties",
    "DamageRules",
    "FightingRules",
    "TurnBasedRules",
    "BattleSession",
    "Combatant",
    "ComboHit",
    "FighterState",
    "PowerUp",
    "CombatLogger",
    "CombatLog",
    "LogEntry",
    "LogEventType",
    "FighterSnapshot",
]
