"""Frame driver - ticks a session on a fixed cadence outside the engine."""

import asyncio
import logging
from typing import Awaitable, Callable

from ..engine.battle import BattleEngine
from ..engine.types import BattleSession

logger = logging.getLogger(__name__)

FrameCallback = Callable[[BattleSession], Awaitable[None] | None]


class FrameDriver:
    """Calls ``BattleEngine.advance_frame`` at a fixed interval.

    The engine never owns a timer; whoever renders the battle owns one of these.
    """

    def __init__(self, engine: BattleEngine, interval_ms: int = 16) -> None:
        if interval_ms < 0:
            raise ValueError("interval_ms must not be negative")
        self.engine = engine
        self.interval_ms = interval_ms
        self._stopped = False

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000

    def step(self, session: BattleSession, frames: int = 1) -> BattleSession:
        """Advance ``frames`` ticks synchronously, stopping early on a terminal session."""
        for _ in range(frames):
            if self.engine.is_terminal(session):
                break
            session = self.engine.advance_frame(session)
        return session

    def stop(self) -> None:
        """Ask a running ``run`` loop to exit after the current tick."""
        self._stopped = True

    async def run(
        self,
        session: BattleSession,
        max_frames: int | None = None,
        on_frame: FrameCallback | None = None,
    ) -> BattleSession:
        """Tick until the session is terminal, ``max_frames`` elapsed, or ``stop()`` is called.

        Args:
            session: Starting snapshot
            max_frames: Optional cap on ticks
            on_frame: Called with each new snapshot; may be a coroutine function

        Returns:
            The last snapshot produced
        """
        self._stopped = False
        frames = 0
        logger.debug("Frame driver started (%d ms)", self.interval_ms)

        while not self._stopped and not self.engine.is_terminal(session):
            if max_frames is not None and frames >= max_frames:
                break
            await asyncio.sleep(self.interval_seconds)
            session = self.engine.advance_frame(session)
            frames += 1
            if on_frame is not None:
                result = on_frame(session)
                if asyncio.iscoroutine(result):
                    await result

        logger.debug("Frame driver stopped after %d frames", frames)
        return session
