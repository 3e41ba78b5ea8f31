"""Shared fixtures for engine tests."""

import random

import pytest

from brawl_engine.engine import BattleEngine, BattleSession, Combatant
from brawl_engine.models import CharacterKind, get_archetype


class FixedRandom(random.Random):
    """Random source with pinned draws.

    ``random()`` always returns ``roll`` and ``uniform()`` always returns
    ``variance``, so damage variance and crit checks are fully controlled.
    """

    def __init__(self, roll: float = 0.5, variance: float = 1.0) -> None:
        super().__init__(0)
        self.roll = roll
        self.variance = variance

    def random(self) -> float:
        return self.roll

    def uniform(self, a: float, b: float) -> float:
        return self.variance


def make_combatant(kind: CharacterKind = CharacterKind.FIRE, attack: int = 100, defense: int = 0) -> Combatant:
    """Build a combatant with custom attack and defense."""
    combatant = Combatant.from_archetype(get_archetype(kind))
    combatant.attack = attack
    combatant.defense = defense
    return combatant


@pytest.fixture
def fixed_rng() -> FixedRandom:
    """No crits, variance pinned to 1.0, coin flips go to the player."""
    return FixedRandom(roll=0.9, variance=1.0)


@pytest.fixture
def engine(fixed_rng: FixedRandom) -> BattleEngine:
    """Engine with deterministic randomness."""
    return BattleEngine(rng=fixed_rng)


@pytest.fixture
def fighting_session(engine: BattleEngine) -> BattleSession:
    """Fire Warrior (player) vs Iced Out (opponent), fighting mode."""
    return engine.initialize_fighting(get_archetype(CharacterKind.FIRE), get_archetype(CharacterKind.ICE))


@pytest.fixture
def turn_session(engine: BattleEngine) -> BattleSession:
    """Power Puncher (player) vs Iced Out (opponent), turn-based. Equal speed, player first."""
    return engine.initialize_turn_based(CharacterKind.PUNCH, CharacterKind.ICE)
