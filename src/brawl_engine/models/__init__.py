"""Battle models - roster data and enums."""

from .characters import (
    CHARACTERS,
    TYPE_EFFECTIVENESS,
    CharacterArchetype,
    get_archetype,
    get_effectiveness,
    get_effectiveness_message,
    to_character_kind,
)
from .enums import (
    AttackKind,
    BattleMode,
    CharacterKind,
    Direction,
    GuardStance,
    MoveKind,
    MoveState,
    Side,
    Tier,
    TurnAction,
)

__all__ = [
    "CHARACTERS",
    "TYPE_EFFECTIVENESS",
    "CharacterArchetype",
    "get_archetype",
    "get_effectiveness",
    "get_effectiveness_message",
    "to_character_kind",
    "AttackKind",
    "BattleMode",
    "CharacterKind",
    "Direction",
    "GuardStance",
    "MoveKind",
    "MoveState",
    "Side",
    "Tier",
    "TurnAction",
]
