"""Service layer around the battle engine."""

from .frame_driver import FrameDriver
from .opponents import OpponentAI, choose_counter_attack, choose_turn_action, pick_opponent_kind

__all__ = [
    "FrameDriver",
    "OpponentAI",
    "choose_counter_attack",
    "choose_turn_action",
    "pick_opponent_kind",
]
