"""Type definitions for the battle engine."""

import copy
from dataclasses import dataclass, field

from ..models.characters import CharacterArchetype
from ..models.enums import AttackKind, BattleMode, CharacterKind, GuardStance, MoveState, Side


@dataclass
class Combatant:
    """Per-battle copy of an archetype's stats.

    Turn-based defend actions raise ``defense`` on this copy, so it must
    never be shared with the catalog.
    """

    kind: CharacterKind
    name: str
    attack: int
    defense: int
    speed: int
    max_hp: int
    special_ability: str
    walk_speed: float
    dash_speed: float
    jump_height: float

    @classmethod
    def from_archetype(cls, archetype: CharacterArchetype) -> "Combatant":
        return cls(
            kind=archetype.kind,
            name=archetype.name,
            attack=archetype.attack,
            defense=archetype.defense,
            speed=archetype.speed,
            max_hp=archetype.max_hp,
            special_ability=archetype.special_ability,
            walk_speed=archetype.walk_speed,
            dash_speed=archetype.dash_speed,
            jump_height=archetype.jump_height,
        )


@dataclass
class ComboHit:
    """A clean hit recorded in the attacker's running combo."""

    damage: int
    attack_kind: AttackKind
    can_cancel: bool


@dataclass
class FighterState:
    """Live state of one fighter during a battle."""

    hp: int
    max_hp: int
    super_meter: int = 0
    guard_gauge: int = 100
    combo_counter: int = 0
    current_combo: list[ComboHit] = field(default_factory=list)
    is_blocking: bool = False
    guard_stance: GuardStance = GuardStance.NONE
    move_state: MoveState = MoveState.IDLE
    position: float = 0.0
    is_airborne: bool = False
    stun_frames: int = 0

    def is_alive(self) -> bool:
        """Check if the fighter still has health."""
        return self.hp > 0

    def is_stunned(self) -> bool:
        return self.stun_frames > 0

    def apply_damage(self, amount: int) -> int:
        """Apply damage, clamping health at zero. Returns actual damage dealt."""
        actual = min(self.hp, max(0, amount))
        self.hp -= actual
        return actual

    def gain_meter(self, amount: int, meter_max: int = 100) -> int:
        """Add super meter, capped. Returns actual gain."""
        before = self.super_meter
        self.super_meter = min(meter_max, self.super_meter + amount)
        return self.super_meter - before

    def drain_guard(self, amount: int) -> int:
        """Reduce the guard gauge, floored at zero. Returns the new gauge."""
        self.guard_gauge = max(0, self.guard_gauge - amount)
        return self.guard_gauge

    def restore_guard(self, amount: int, guard_max: int = 100) -> int:
        """Regenerate the guard gauge, capped. Returns the new gauge."""
        self.guard_gauge = min(guard_max, self.guard_gauge + amount)
        return self.guard_gauge

    def drop_guard(self) -> None:
        """Leave blocking and clear the stance."""
        self.is_blocking = False
        self.guard_stance = GuardStance.NONE

    def stun(self, frames: int, move_state: MoveState = MoveState.STUNNED) -> None:
        self.stun_frames = frames
        self.move_state = move_state

    def reset_combo(self) -> None:
        self.current_combo.clear()
        self.combo_counter = 0


@dataclass
class PowerUp:
    """Charge-based power-up shown to the player."""

    name: str
    effect: str
    charges: int
    max_charges: int

    def is_full(self) -> bool:
        return self.charges >= self.max_charges

    def add_charge(self) -> None:
        self.charges = min(self.charges + 1, self.max_charges)


@dataclass
class BattleSession:
    """Snapshot of a battle.

    Engine transitions never mutate a session they receive; they work on
    ``copy()`` and return the copy.
    """

    mode: BattleMode
    player: Combatant
    opponent: Combatant
    player_state: FighterState
    opponent_state: FighterState
    power_up: PowerUp
    turn: Side | None
    battle_log: list[str] = field(default_factory=list)
    is_game_over: bool = False
    winner: Side | None = None
    frame_count: int = 0
    last_action: str | None = None

    def copy(self) -> "BattleSession":
        return copy.deepcopy(self)

    def combatant(self, side: Side) -> Combatant:
        return self.player if side is Side.PLAYER else self.opponent

    def fighter(self, side: Side) -> FighterState:
        return self.player_state if side is Side.PLAYER else self.opponent_state

    def log(self, message: str) -> None:
        self.battle_log.append(message)

    def flip_turn(self, actor: Side) -> None:
        self.turn = actor.other

    def declare_winner(self, side: Side) -> None:
        self.is_game_over = True
        self.winner = side
