"""
World state - owns every collection and advances it one tick at a time.
NO UI DEPENDENCIES.
"""
import logging
import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .entities import Actor, Banana, Building, Environment, Explosion, Sun
from .city import generate_city
from .placement import place_gorillas, place_sun
from .physics import launch_banana, step_banana
from .collision import TargetKind, detect_collisions
from .constants import DEFAULT_EXPLOSION_TTL

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """An event that occurred during a tick (for UI to react to)."""
    pass


@dataclass
class BananaHitGorillaEvent(GameEvent):
    """A banana struck a gorilla hitbox. There is no damage model yet."""
    gorilla_index: int
    x: float
    y: float


@dataclass
class BananaHitBuildingEvent(GameEvent):
    """A banana struck a building."""
    building_index: int
    x: float
    y: float


@dataclass
class BananaLostEvent(GameEvent):
    """A banana fell below the bottom of the canvas."""
    x: float
    y: float


@dataclass
class ExplosionExpiredEvent(GameEvent):
    """An explosion ran out of time and was removed."""
    x: float
    y: float


@dataclass(frozen=True)
class WorldSnapshot:
    """
    Read-only copy of the world handed to render collaborators.
    Mutable entities are copied, so drawing can never change the world.
    """
    tick_number: int
    canvas_width: int
    canvas_height: int
    buildings: Tuple[Building, ...]
    actors: Tuple[Actor, ...]
    bananas: Tuple[Banana, ...]
    explosions: Tuple[Explosion, ...]
    sun: Sun
    environment: Environment


class World:
    """
    The simulation state aggregate.

    Usage:
        world = World.generate(640, 350, Environment(wind_speed=2.0), rng=rng)
        world.launch(speed=50, angle_dg=45)
        events = world.advance(0.1)
    """

    def __init__(
        self,
        canvas_width: int,
        canvas_height: int,
        buildings: Sequence[Building],
        actors: Sequence[Actor],
        sun: Sun,
        environment: Optional[Environment] = None,
        explosion_ttl: float = DEFAULT_EXPLOSION_TTL,
    ):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.buildings: Tuple[Building, ...] = tuple(buildings)
        self.actors: Tuple[Actor, ...] = tuple(actors)
        self.sun = sun
        self.environment = environment if environment else Environment()
        self.explosion_ttl = explosion_ttl

        self.bananas: List[Banana] = []
        self.explosions: List[Explosion] = []
        self.tick_number: int = 0

    @classmethod
    def generate(
        cls,
        canvas_width: int,
        canvas_height: int,
        environment: Optional[Environment] = None,
        explosion_ttl: float = DEFAULT_EXPLOSION_TTL,
        rng: Optional[random.Random] = None,
    ) -> 'World':
        """Build a fresh city with both gorillas and the sun in place."""
        if rng is None:
            rng = random.Random()

        buildings = generate_city(canvas_width, canvas_height, rng)
        actors = place_gorillas(buildings, rng)
        sun = place_sun(canvas_width)
        return cls(canvas_width, canvas_height, buildings, actors, sun, environment, explosion_ttl)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def launch(self, speed: float, angle_dg: float, count: int = 1, rng: Optional[random.Random] = None) -> List[Banana]:
        """
        Throw count bananas, alternating between the left and right gorilla.
        The right gorilla mirrors the angle so both throw toward each other.
        """
        launched = []
        for i in range(count):
            thrower = i % len(self.actors)
            facing = 1 if thrower == 0 else -1
            banana = launch_banana(self.actors[thrower], speed, angle_dg, thrower, facing, rng)
            launched.append(banana)

        self.bananas.extend(launched)
        return launched

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def process_input(self) -> None:
        """Hook for player input. Nothing to process in the core yet."""
        pass

    def advance(self, dt: float) -> List[GameEvent]:
        """
        Advance the world by one tick of dt seconds.

        Order: input, collisions against current positions, movement,
        explosion ageing. Returns the events that occurred.
        """
        events: List[GameEvent] = []

        self.process_input()

        result = detect_collisions(self.bananas, self.actors, self.buildings, self.explosion_ttl)
        self.bananas = result.surviving

        for banana in self.bananas:
            step_banana(banana, self.environment.wind_speed, self.environment.gravity, dt)
        self._drop_lost_bananas(events)

        # Age what was already on screen before adding this tick's blasts
        self._age_explosions(dt, events)

        for hit in result.hits:
            self.explosions.append(hit.explosion)
            if hit.target_kind == TargetKind.GORILLA:
                events.append(BananaHitGorillaEvent(hit.target_index, hit.explosion.x, hit.explosion.y))
            else:
                events.append(BananaHitBuildingEvent(hit.target_index, hit.explosion.x, hit.explosion.y))

        self.tick_number += 1
        return events

    def _drop_lost_bananas(self, events: List[GameEvent]) -> None:
        """Remove bananas that are below the canvas and still falling."""
        kept = []
        for banana in self.bananas:
            if banana.bounds.top > self.canvas_height and banana.velocity_y <= 0:
                events.append(BananaLostEvent(banana.x, banana.y))
                logger.debug(f"Banana lost at ({banana.x:.1f}, {banana.y:.1f})")
            else:
                kept.append(banana)
        self.bananas = kept

    def _age_explosions(self, dt: float, events: List[GameEvent]) -> None:
        """Count down explosion lifetimes and prune the expired ones."""
        kept = []
        for explosion in self.explosions:
            explosion.age(dt)
            if explosion.expired:
                events.append(ExplosionExpiredEvent(explosion.x, explosion.y))
            else:
                kept.append(explosion)
        self.explosions = kept

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def snapshot(self) -> WorldSnapshot:
        """Return an immutable copy of the current state."""
        return WorldSnapshot(
            tick_number=self.tick_number,
            canvas_width=self.canvas_width,
            canvas_height=self.canvas_height,
            buildings=self.buildings,
            actors=self.actors,
            bananas=tuple(replace(b) for b in self.bananas),
            explosions=tuple(replace(e) for e in self.explosions),
            sun=self.sun,
            environment=self.environment,
        )

    @property
    def is_quiet(self) -> bool:
        """True when nothing is in flight and no explosion is showing."""
        return not self.bananas and not self.explosions

    def __repr__(self) -> str:
        return (
            f"World({self.canvas_width}x{self.canvas_height}, "
            f"buildings={len(self.buildings)}, bananas={len(self.bananas)}, "
            f"explosions={len(self.explosions)})"
        )
