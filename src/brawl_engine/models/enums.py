"""Enums for battle models."""

from enum import Enum


class CharacterKind(str, Enum):
    """Fighter archetypes - the fixed roster."""

    FIRE = "fire"
    ICE = "ice"
    SPIDER = "spider"
    FART = "fart"
    STONE = "stone"
    PUNCH = "punch"
    JELLY = "jelly"
    ELECTRO = "electro"


class AttackKind(str, Enum):
    """Attacks available in fighting mode."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    SPECIAL = "special"
    SUPER = "super"  # Requires a full super meter
    THROW = "throw"  # Bypasses guard


class GuardStance(str, Enum):
    """Which height a fighter is guarding."""

    HIGH = "high"
    LOW = "low"
    NONE = "none"


class MoveState(str, Enum):
    """Movement/status state of a fighter."""

    IDLE = "idle"
    WALKING = "walking"
    DASHING = "dashing"
    JUMPING = "jumping"
    ATTACKING = "attacking"
    BLOCKING = "blocking"
    STUNNED = "stunned"
    THROWN = "thrown"


class MoveKind(str, Enum):
    """Movement actions."""

    WALK = "walk"
    DASH = "dash"
    JUMP = "jump"


class Direction(str, Enum):
    """Horizontal direction of a movement."""

    FORWARD = "forward"
    BACK = "back"


class Side(str, Enum):
    """Which participant of a battle."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class TurnAction(str, Enum):
    """Actions available in turn-based mode."""

    ATTACK = "attack"
    SPECIAL = "special"  # Requires a fully charged power-up (player only)
    DEFEND = "defend"  # Permanent +20 defense for the battle


class BattleMode(str, Enum):
    """Rule set a battle session was created with."""

    TURN_BASED = "turn_based"
    FIGHTING = "fighting"


class Tier(str, Enum):
    """Ranking tiers by score."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"
