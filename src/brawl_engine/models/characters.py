"""Character catalog - archetype base stats and the type effectiveness matrix."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownCharacterKind
from .enums import CharacterKind


@dataclass(frozen=True)
class CharacterArchetype:
    """Static base stats of a fighter archetype."""

    kind: CharacterKind
    name: str
    attack: int
    defense: int
    speed: int
    max_hp: int
    special_ability: str
    description: str
    walk_speed: float
    dash_speed: float
    jump_height: float


CHARACTERS: Mapping[CharacterKind, CharacterArchetype] = MappingProxyType(
    {
        CharacterKind.FIRE: CharacterArchetype(
            kind=CharacterKind.FIRE,
            name="Fire Warrior",
            attack=90,
            defense=50,
            speed=75,
            max_hp=85,
            special_ability="Flame Burst",
            description="High damage dealer with burning attacks",
            walk_speed=4,
            dash_speed=8,
            jump_height=6,
        ),
        CharacterKind.ICE: CharacterArchetype(
            kind=CharacterKind.ICE,
            name="Iced Out",
            attack=70,
            defense=65,
            speed=60,
            max_hp=80,
            special_ability="Frost Nova",
            description="Freezes enemies and controls the battlefield",
            walk_speed=3,
            dash_speed=6,
            jump_height=5,
        ),
        CharacterKind.SPIDER: CharacterArchetype(
            kind=CharacterKind.SPIDER,
            name="Spider Assassin",
            attack=85,
            defense=45,
            speed=95,
            max_hp=70,
            special_ability="Web Trap",
            description="Lightning fast with multi-hit attacks",
            walk_speed=5,
            dash_speed=10,
            jump_height=8,
        ),
        CharacterKind.FART: CharacterArchetype(
            kind=CharacterKind.FART,
            name="Fart Cloud",
            attack=60,
            defense=55,
            speed=70,
            max_hp=90,
            special_ability="Toxic Gas",
            description="Poison damage over time specialist",
            walk_speed=3.5,
            dash_speed=7,
            jump_height=4,
        ),
        CharacterKind.STONE: CharacterArchetype(
            kind=CharacterKind.STONE,
            name="Stoner",
            attack=65,
            defense=85,
            speed=30,
            max_hp=120,
            special_ability="Earthquake",
            description="Massive tank that absorbs damage",
            walk_speed=2,
            dash_speed=4,
            jump_height=3,
        ),
        CharacterKind.PUNCH: CharacterArchetype(
            kind=CharacterKind.PUNCH,
            name="Power Puncher",
            attack=95,
            defense=50,
            speed=60,
            max_hp=95,
            special_ability="Mega Punch",
            description="Critical strike focused berserker",
            walk_speed=3,
            dash_speed=7,
            jump_height=5,
        ),
        CharacterKind.JELLY: CharacterArchetype(
            kind=CharacterKind.JELLY,
            name="Jello",
            attack=50,
            defense=75,
            speed=55,
            max_hp=100,
            special_ability="Absorb",
            description="Self-healing support character",
            walk_speed=2.5,
            dash_speed=5,
            jump_height=4,
        ),
        CharacterKind.ELECTRO: CharacterArchetype(
            kind=CharacterKind.ELECTRO,
            name="Electro",
            attack=88,
            defense=55,
            speed=90,
            max_hp=82,
            special_ability="Thunder Strike",
            description="Electric speedster with shocking attacks",
            walk_speed=4.5,
            dash_speed=9,
            jump_height=7,
        ),
    }
)


def _row(**multipliers: float) -> dict[CharacterKind, float]:
    return {CharacterKind(kind): value for kind, value in multipliers.items()}


# Attacker -> defender -> damage multiplier
TYPE_EFFECTIVENESS: Mapping[CharacterKind, Mapping[CharacterKind, float]] = MappingProxyType(
    {
        CharacterKind.FIRE: _row(
            fire=1.0, ice=2.0, spider=1.5, fart=1.0, stone=0.5, punch=1.0, jelly=1.0, electro=1.0
        ),
        CharacterKind.ICE: _row(
            fire=0.5, ice=1.0, spider=1.0, fart=1.0, stone=1.5, punch=1.0, jelly=0.5, electro=1.5
        ),
        CharacterKind.SPIDER: _row(
            fire=0.5, ice=1.0, spider=1.0, fart=1.5, stone=1.5, punch=0.5, jelly=1.5, electro=0.5
        ),
        CharacterKind.FART: _row(
            fire=1.0, ice=1.0, spider=0.5, fart=1.0, stone=1.0, punch=1.5, jelly=1.0, electro=1.0
        ),
        CharacterKind.STONE: _row(
            fire=2.0, ice=0.5, spider=0.5, fart=1.0, stone=1.0, punch=0.5, jelly=1.5, electro=0.5
        ),
        CharacterKind.PUNCH: _row(
            fire=1.0, ice=1.0, spider=1.5, fart=0.5, stone=2.0, punch=1.0, jelly=0.5, electro=1.0
        ),
        CharacterKind.JELLY: _row(
            fire=1.0, ice=1.5, spider=0.5, fart=1.0, stone=0.5, punch=1.5, jelly=1.0, electro=1.5
        ),
        CharacterKind.ELECTRO: _row(
            fire=1.0, ice=0.5, spider=2.0, fart=1.5, stone=2.0, punch=1.0, jelly=0.5, electro=1.0
        ),
    }
)


def to_character_kind(kind: CharacterKind | str) -> CharacterKind:
    """Coerce a kind or its string value, raising UnknownCharacterKind otherwise."""
    try:
        return CharacterKind(kind)
    except ValueError:
        raise UnknownCharacterKind(kind) from None


def get_archetype(kind: CharacterKind | str) -> CharacterArchetype:
    """Look up an archetype by kind.

    Raises:
        UnknownCharacterKind: If the kind is not one of the eight roster entries.
    """
    return CHARACTERS[to_character_kind(kind)]


def get_effectiveness(attacker_kind: CharacterKind, defender_kind: CharacterKind) -> float:
    """Damage multiplier for an attacker kind hitting a defender kind."""
    return TYPE_EFFECTIVENESS[attacker_kind][defender_kind]


def get_effectiveness_message(attacker_kind: CharacterKind, defender_kind: CharacterKind) -> str:
    """Flavor text for a matchup, empty for neutral ones."""
    effectiveness = get_effectiveness(attacker_kind, defender_kind)
    if effectiveness > 1.5:
        return "It's super effective!"
    if effectiveness < 0.75:
        return "It's not very effective..."
    return ""
