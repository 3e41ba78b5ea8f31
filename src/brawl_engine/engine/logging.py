"""Combat logging system for tracking and verifying engine output.

Provides structured logging of battle events including:
- Actions taken and actions rejected
- Hits, blocks, guard breaks and throws with before/after fighter state
- Frame-driven status changes (stun expiry, landing)
- Winner determination
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models.enums import Side
from .types import FighterState


class LogEventType(str, Enum):
    """Types of log events."""

    BATTLE_START = "battle_start"

    # Actions
    TURN_ACTION = "turn_action"
    ACTION_REJECTED = "action_rejected"
    HIT = "hit"
    BLOCK = "block"
    GUARD_BREAK = "guard_break"
    THROW = "throw"
    GUARD_UP = "guard_up"
    MOVEMENT = "movement"

    # Frame ticks
    STATUS_EXPIRED = "status_expired"
    LANDED = "landed"

    WINNER_DETERMINED = "winner_determined"


@dataclass
class FighterSnapshot:
    """Snapshot of a fighter's state at a point in time."""

    hp: int
    max_hp: int
    super_meter: int
    guard_gauge: int
    combo_counter: int
    is_blocking: bool
    guard_stance: str
    move_state: str
    position: float
    is_airborne: bool
    stun_frames: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "hp": self.hp,
            "max_hp": self.max_hp,
            "super_meter": self.super_meter,
            "guard_gauge": self.guard_gauge,
            "combo_counter": self.combo_counter,
            "is_blocking": self.is_blocking,
            "guard_stance": self.guard_stance,
            "move_state": self.move_state,
            "position": self.position,
            "is_airborne": self.is_airborne,
            "stun_frames": self.stun_frames,
        }


@dataclass
class LogEntry:
    """A single log entry representing a combat event."""

    event_type: LogEventType
    frame: int
    timestamp_order: int = 0  # Order within the battle for deterministic sorting

    actor: Side | None = None
    target: Side | None = None
    action: str | None = None
    value: int | None = None
    description: str | None = None

    state_before: FighterSnapshot | None = None
    state_after: FighterSnapshot | None = None

    winner: Side | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "event_type": self.event_type.value,
            "frame": self.frame,
            "timestamp_order": self.timestamp_order,
        }

        if self.actor is not None:
            result["actor"] = self.actor.value
        if self.target is not None:
            result["target"] = self.target.value
        if self.action is not None:
            result["action"] = self.action
        if self.value is not None:
            result["value"] = self.value
        if self.description is not None:
            result["description"] = self.description
        if self.state_before is not None:
            result["state_before"] = self.state_before.to_dict()
        if self.state_after is not None:
            result["state_after"] = self.state_after.to_dict()
        if self.winner is not None:
            result["winner"] = self.winner.value

        return result


@dataclass
class CombatLog:
    """Complete structured log of a battle."""

    battle_id: str
    entries: list[LogEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "battle_id": self.battle_id,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    def get_entries_by_type(self, event_type: LogEventType) -> list[LogEntry]:
        """Get all entries of a specific type."""
        return [e for e in self.entries if e.event_type == event_type]

    def get_entries_for_actor(self, side: Side) -> list[LogEntry]:
        """Get all entries where the given side acted."""
        return [e for e in self.entries if e.actor == side]

    def format_readable(self) -> str:
        """Format the log in a human-readable format."""
        lines = [f"=== Combat Log ({self.battle_id}) ==="]
        lines.extend(self._format_entry(entry) for entry in self.entries)
        return "\n".join(lines)

    def _format_entry(self, entry: LogEntry) -> str:
        """Format a single log entry."""
        prefix = f"[{entry.frame:>5}]"
        who = entry.actor.value if entry.actor else "-"

        match entry.event_type:
            case LogEventType.BATTLE_START:
                return f"{prefix} {entry.description}"

            case LogEventType.ACTION_REJECTED:
                return f"{prefix} x {who} {entry.action}: {entry.description}"

            case LogEventType.HIT | LogEventType.BLOCK | LogEventType.GUARD_BREAK | LogEventType.THROW:
                hp_change = ""
                if entry.state_before and entry.state_after:
                    if entry.state_before.hp != entry.state_after.hp:
                        hp_change = f" [HP: {entry.state_before.hp} -> {entry.state_after.hp}]"
                return f"{prefix} {who} {entry.action} = {entry.value}{hp_change} ({entry.description})"

            case LogEventType.STATUS_EXPIRED | LogEventType.LANDED:
                return f"{prefix}   {who}: {entry.description}"

            case LogEventType.WINNER_DETERMINED:
                winner = entry.winner.value if entry.winner else "?"
                return f"{prefix} *** WINNER: {winner} ***"

            case _:
                return f"{prefix} {who} {entry.action or entry.event_type.value}: {entry.description or ''}"


class CombatLogger:
    """Logger for tracking battle events.

    Usage:
        logger = CombatLogger(battle_id="exhibition")
        engine = BattleEngine(rng=rng, logger=logger)
        session = engine.initialize_fighting(fire, ice)
        session = engine.execute_attack(session, AttackKind.LIGHT, True)

        # Get the complete log
        print(logger.get_log().format_readable())
    """

    def __init__(self, battle_id: str = "battle") -> None:
        """Initialize the logger for a battle."""
        self.battle_id = battle_id
        self._log = CombatLog(battle_id=battle_id)
        self._order_counter = 0

    def _next_order(self) -> int:
        """Get the next timestamp order value."""
        self._order_counter += 1
        return self._order_counter

    def _append(self, entry: LogEntry) -> None:
        entry.timestamp_order = self._next_order()
        self._log.entries.append(entry)

    def get_log(self) -> CombatLog:
        """Get the complete combat log."""
        return self._log

    def clear(self) -> None:
        """Clear all log entries."""
        self._log.entries.clear()
        self._order_counter = 0

    @staticmethod
    def snapshot_state(state: FighterState) -> FighterSnapshot:
        """Create a snapshot from a FighterState."""
        return FighterSnapshot(
            hp=state.hp,
            max_hp=state.max_hp,
            super_meter=state.super_meter,
            guard_gauge=state.guard_gauge,
            combo_counter=state.combo_counter,
            is_blocking=state.is_blocking,
            guard_stance=state.guard_stance.value,
            move_state=state.move_state.value,
            position=state.position,
            is_airborne=state.is_airborne,
            stun_frames=state.stun_frames,
        )

    def log_battle_start(self, frame: int, description: str) -> None:
        """Log the start of a battle."""
        self._append(LogEntry(event_type=LogEventType.BATTLE_START, frame=frame, description=description))

    def log_action(
        self,
        event_type: LogEventType,
        frame: int,
        actor: Side,
        action: str,
        description: str,
        value: int | None = None,
        target: Side | None = None,
        state_before: FighterState | None = None,
        state_after: FighterState | None = None,
    ) -> None:
        """Log a resolved action, optionally with the target's before/after state."""
        self._append(
            LogEntry(
                event_type=event_type,
                frame=frame,
                actor=actor,
                target=target,
                action=action,
                value=value,
                description=description,
                state_before=self.snapshot_state(state_before) if state_before else None,
                state_after=self.snapshot_state(state_after) if state_after else None,
            )
        )

    def log_action_rejected(self, frame: int, actor: Side, action: str, reason: str) -> None:
        """Log an action that was turned into a no-op."""
        self._append(
            LogEntry(
                event_type=LogEventType.ACTION_REJECTED,
                frame=frame,
                actor=actor,
                action=action,
                description=reason,
            )
        )

    def log_status_change(self, event_type: LogEventType, frame: int, side: Side, description: str) -> None:
        """Log a frame-driven status change."""
        self._append(LogEntry(event_type=event_type, frame=frame, actor=side, description=description))

    def log_winner(self, frame: int, winner: Side) -> None:
        """Log the winner determination."""
        self._append(LogEntry(event_type=LogEventType.WINNER_DETERMINED, frame=frame, winner=winner))
