"""
Simulation clock - owns the world and drives it at a fixed tick rate.
NO UI DEPENDENCIES.

The periodic tick runs as an asyncio task on the caller's event loop. Only
one task exists at a time; it is cancelled before a new one is created.
Cancellation lands on the sleep between ticks, so a tick always completes.
"""
import asyncio
import logging
import random
import time
from enum import Enum, auto
from typing import Callable, List, Optional

from ..config import Settings, get_settings
from .entities import Environment
from .errors import SimulationNotStartedError, SimulationStateError
from .world import GameEvent, World, WorldSnapshot

logger = logging.getLogger(__name__)

RenderCallback = Callable[[WorldSnapshot], None]


class ClockState(Enum):
    """Lifecycle of the simulation clock."""
    UNINITIALIZED = auto()  # start() not called yet
    RUNNING = auto()        # Tick task armed
    STOPPED = auto()        # Paused, state preserved
    FINISHED = auto()       # Stopped for good; only reset() revives it


class Simulation:
    """
    Owns the world, the tick task and the render collaborator.

    Usage:
        simulation = Simulation(settings)
        simulation.start(render=renderer.draw)   # inside a running event loop
        ...
        simulation.stop()
        simulation.resume()
        simulation.reset()

    tick() can also be called directly to step the world without the clock.
    """

    def __init__(self, settings: Optional[Settings] = None, rng: Optional[random.Random] = None):
        self.settings = settings if settings else get_settings()
        self._rng = rng if rng else random.Random(self.settings.random_seed)

        self.state = ClockState.UNINITIALIZED
        self.world: Optional[World] = None
        self.last_events: List[GameEvent] = []

        self._render: Optional[RenderCallback] = None
        self._task: Optional[asyncio.Task] = None

    # =========================================================================
    # CLOCK DRIVER
    # =========================================================================

    def start(self, render: Optional[RenderCallback] = None) -> None:
        """
        First entry: bind the render collaborator and reset.
        Calling start() again is a no-op.
        """
        if self.state != ClockState.UNINITIALIZED:
            logger.debug("start() ignored, simulation already started")
            return

        self._render = render
        self.state = ClockState.STOPPED
        try:
            self.reset()
        except Exception:
            self.state = ClockState.UNINITIALIZED
            raise
        logger.info("Simulation started")

    def stop(self) -> None:
        """Cancel the periodic tick. All state is kept. Safe to call repeatedly."""
        self._cancel_task()
        if self.state == ClockState.RUNNING:
            self.state = ClockState.STOPPED
            logger.info(f"Simulation stopped at tick {self.tick_number}")

    def resume(self) -> None:
        """Re-arm the periodic tick without touching the world."""
        self._require_started("resume")
        if self.state == ClockState.FINISHED:
            raise SimulationStateError("Cannot resume a finished simulation, reset it instead")
        if self.state == ClockState.RUNNING:
            return

        self._arm_task()
        self.state = ClockState.RUNNING
        logger.info(f"Simulation resumed at tick {self.tick_number}")

    def reset(self, settings: Optional[Settings] = None) -> None:
        """
        Regenerate the city and gorillas, clear projectiles and explosions,
        launch the configured bananas and re-arm the tick.

        settings replaces the current configuration for this and later runs.
        If the new world cannot be built, the error propagates and the
        previous world, settings and clock are left as they were.
        """
        self._require_started("reset")
        candidate = settings if settings is not None else self.settings
        world = self._build_world(candidate)

        self._cancel_task()
        self.settings = candidate
        self.world = world
        self.last_events = []

        self._arm_task()
        self.state = ClockState.RUNNING
        logger.info(
            f"Simulation reset ({len(self.world.buildings)} buildings, "
            f"{len(self.world.bananas)} bananas, wind={self.settings.wind_speed}, "
            f"gravity={self.settings.gravity})"
        )

    def finish(self) -> None:
        """Stop with terminal intent. Only reset() can start a new run afterwards."""
        if self.state == ClockState.UNINITIALIZED:
            return

        self._cancel_task()
        self.state = ClockState.FINISHED
        logger.info(f"Simulation finished at tick {self.tick_number}")

    # =========================================================================
    # TICKING
    # =========================================================================

    @property
    def dt(self) -> float:
        """Seconds simulated per tick."""
        return 1.0 / self.settings.frames_per_second

    @property
    def tick_number(self) -> int:
        return self.world.tick_number if self.world else 0

    @property
    def is_running(self) -> bool:
        return self.state == ClockState.RUNNING

    def tick(self) -> List[GameEvent]:
        """
        Execute exactly one tick and hand the new state to the renderer.
        Returns the events produced by the tick.
        """
        if self.world is None:
            raise SimulationNotStartedError("tick() called before start()")
        if self.state == ClockState.FINISHED:
            raise SimulationStateError("Cannot tick a finished simulation")

        self.last_events = self.world.advance(self.dt)
        if self._render is not None:
            self._render(self.world.snapshot())
        return self.last_events

    def simulate(self, ticks: int) -> List[GameEvent]:
        """
        Run a number of ticks back to back.
        Returns all events that occurred.
        """
        all_events: List[GameEvent] = []
        for _ in range(ticks):
            all_events.extend(self.tick())
        return all_events

    def snapshot(self) -> WorldSnapshot:
        """Immutable view of the current world for readers outside the tick."""
        if self.world is None:
            raise SimulationNotStartedError("snapshot() called before start()")
        return self.world.snapshot()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_started(self, operation: str) -> None:
        if self.state == ClockState.UNINITIALIZED:
            raise SimulationNotStartedError(f"{operation}() called before start()")

    def _build_world(self, settings: Settings) -> World:
        environment = Environment(
            wind_speed=settings.wind_speed,
            gravity=settings.gravity,
        )
        world = World.generate(
            settings.canvas_width,
            settings.canvas_height,
            environment,
            settings.explosion_ttl_seconds,
            self._rng,
        )
        world.launch(
            settings.launch_velocity,
            settings.launch_angle_dg,
            settings.number_of_bananas,
            self._rng,
        )
        return world

    def _arm_task(self) -> None:
        """Create the tick task. Requires a running event loop."""
        self._cancel_task()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run_loop())
        self._task.add_done_callback(self._on_task_done)

    def _cancel_task(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        self._task = None

    async def _run_loop(self) -> None:
        """
        Main tick loop.
        Fail-fast: errors raised by a tick end the loop.
        """
        interval = self.dt
        while True:
            tick_start = time.perf_counter()

            self.tick()

            tick_duration = time.perf_counter() - tick_start
            if tick_duration > interval:
                logger.warning(
                    f"Tick {self.tick_number} took {tick_duration * 1000:.1f}ms "
                    f"(target: {interval * 1000:.1f}ms)"
                )

            await asyncio.sleep(max(0.0, interval - tick_duration))

    def _on_task_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            logger.error(f"Tick loop crashed at tick {self.tick_number}: {error!r}")
            if task is self._task:
                self._task = None
                self.state = ClockState.STOPPED
