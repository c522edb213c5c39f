"""
Auto-run scheduler - issues one randomized event per tick.

Each tick calls TestRunner.run_random() synchronously inside a single
asyncio task, so ticks are strictly sequential and never overlap.
Stopping sets the cancellation event and cancels the task; no event is
ever in flight across ticks, so there is nothing to unwind.

Example usage:
    scheduler = AutoRunScheduler(runner, interval_ms=1000)
    scheduler.start()
    ...
    scheduler.stop()
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import structlog

from dutcheck.config import settings
from dutcheck.engine.test_runner import TestRunner
from dutcheck.exceptions import AutoRunError
from dutcheck.logging import bind_run_context
from dutcheck.models import AutoRunStatus

logger = structlog.get_logger()


@dataclass
class AutoRunState:
    """Runtime state for one auto-run loop."""
    task: Optional[asyncio.Task] = None
    stop_event: asyncio.Event = field(default_factory=asyncio.Event)
    ticks: int = 0
    max_ticks: Optional[int] = None
    last_packet_id: Optional[int] = None
    last_tick_at: Optional[datetime] = None


class AutoRunScheduler:
    """
    Timer-driven driver for a single TestRunner.

    Args:
        runner: The runner to drive
        interval_ms: Delay between ticks
    """

    def __init__(self, runner: TestRunner, interval_ms: Optional[int] = None):
        self.runner = runner
        self.interval_ms = self._check_interval(
            interval_ms if interval_ms is not None else settings.autorun_interval_ms
        )
        self._state: Optional[AutoRunState] = None

    @staticmethod
    def _check_interval(interval_ms: int) -> int:
        if interval_ms <= 0:
            raise AutoRunError("interval_ms must be positive", {"interval_ms": interval_ms})
        return interval_ms

    def start(self, interval_ms: Optional[int] = None, max_ticks: Optional[int] = None) -> None:
        """
        Start ticking. Restarts the loop if it is already running.

        Must be called from within a running event loop.

        Args:
            interval_ms: Overrides the configured interval
            max_ticks: Stop automatically after this many ticks
        """
        if interval_ms is not None:
            self.interval_ms = self._check_interval(interval_ms)
        if max_ticks is not None and max_ticks <= 0:
            raise AutoRunError("max_ticks must be positive", {"max_ticks": max_ticks})

        if self.is_running():
            self.stop()

        state = AutoRunState(max_ticks=max_ticks)
        state.stop_event = asyncio.Event()
        self._state = state
        state.task = asyncio.create_task(self._run_loop(state))

        logger.info("autorun_started", interval_ms=self.interval_ms, max_ticks=max_ticks)

    def stop(self) -> None:
        """Stop ticking. No-op when not running."""
        state = self._state
        if not state:
            return

        state.stop_event.set()
        if state.task and not state.task.done():
            state.task.cancel()

        logger.info("autorun_stopped", ticks=state.ticks)

    def is_running(self) -> bool:
        state = self._state
        if not state:
            return False
        return state.task is not None and not state.task.done()

    def get_status(self) -> AutoRunStatus:
        state = self._state
        if not state:
            return AutoRunStatus(running=False, interval_ms=self.interval_ms)

        return AutoRunStatus(
            running=self.is_running(),
            interval_ms=self.interval_ms,
            ticks=state.ticks,
            max_ticks=state.max_ticks,
            last_packet_id=state.last_packet_id,
            last_tick_at=state.last_tick_at.isoformat() if state.last_tick_at else None,
        )

    async def wait_stopped(self) -> None:
        """Wait until the current loop exits (e.g. after max_ticks)."""
        state = self._state
        if state and state.task:
            try:
                await asyncio.shield(state.task)
            except asyncio.CancelledError:
                # Only absorb the loop's own cancellation, not the caller's
                if not state.task.cancelled():
                    raise

    async def _run_loop(self, state: AutoRunState) -> None:
        """Tick until stopped or max_ticks is reached."""
        # Task-local: each asyncio task runs in its own context copy
        bind_run_context(autorun_interval_ms=self.interval_ms, autorun_max_ticks=state.max_ticks)
        try:
            while not state.stop_event.is_set():
                try:
                    await asyncio.wait_for(
                        state.stop_event.wait(),
                        timeout=self.interval_ms / 1000,
                    )
                    break
                except asyncio.TimeoutError:
                    pass

                packet = self.runner.run_random()
                state.ticks += 1
                state.last_packet_id = packet.id
                state.last_tick_at = datetime.utcnow()

                logger.debug(
                    "autorun_tick",
                    tick=state.ticks,
                    packet_id=packet.id,
                    state=self.runner.current_state().value,
                )

                if state.max_ticks is not None and state.ticks >= state.max_ticks:
                    logger.info("autorun_completed", ticks=state.ticks)
                    break
        except asyncio.CancelledError:
            logger.debug("autorun_loop_cancelled", ticks=state.ticks)
