"""
END-TO-END WORLD TESTS

Ticks of the world aggregate: collisions, movement, explosion lifetimes,
events and snapshots. NO UI DEPENDENCIES.
"""
import dataclasses
import random

import pytest
from gorillas.gameplay.entities import Banana, Building, Environment, Explosion, Sun
from gorillas.gameplay.placement import actor_on_building
from gorillas.gameplay.world import (
    World, BananaHitBuildingEvent, BananaHitGorillaEvent, BananaLostEvent,
    ExplosionExpiredEvent,
)


def duel_world(explosion_ttl: float = 1.0) -> World:
    """
    A short building on the left and a tall one in the banana's path.
    The left gorilla's level throw travels at y=161 toward x=202.
    """
    buildings = [
        Building(10, 200, 40, 140, "#aaaaaa"),
        Building(202, 100, 40, 240, "#aa0000"),
    ]
    actors = [actor_on_building(buildings, 0), actor_on_building(buildings, 1)]
    return World(
        400, 350, buildings, actors, Sun(200, 25),
        Environment(wind_speed=0.0, gravity=0.0),
        explosion_ttl=explosion_ttl,
    )


class TestLevelThrow:
    """1 banana, no wind, no gravity, speed 50, angle 0."""

    def test_straight_line_until_impact(self):
        """The banana flies level and is consumed exactly at the building."""
        world = duel_world()
        world.launch(50.0, 0.0, count=1, rng=random.Random(0))
        banana = world.bananas[0]
        start_y = banana.y

        # x goes 30, 35, ... 200; bounds first reach past x=202 at x=200
        for _ in range(34):
            events = world.advance(0.1)
            assert events == []
            assert world.bananas == [banana]
            assert banana.y == start_y

        events = world.advance(0.1)

        assert world.bananas == []
        assert len(world.explosions) == 1
        assert events == [BananaHitBuildingEvent(building_index=1, x=200.0, y=start_y)]

    def test_no_second_explosion(self):
        """Once consumed, nothing more is spawned."""
        world = duel_world()
        world.launch(50.0, 0.0, count=1, rng=random.Random(0))

        all_events = []
        for _ in range(40):
            all_events.extend(world.advance(0.1))

        hits = [e for e in all_events if isinstance(e, BananaHitBuildingEvent)]
        assert len(hits) == 1


class TestExplosions:
    """Explosion lifetimes."""

    def test_explosions_expire(self):
        """An explosion is pruned once its time-to-live runs out."""
        world = duel_world(explosion_ttl=0.3)
        world.launch(50.0, 0.0, count=1, rng=random.Random(0))
        for _ in range(35):
            world.advance(0.1)
        assert len(world.explosions) == 1

        expired = []
        for _ in range(5):
            expired.extend(e for e in world.advance(0.1) if isinstance(e, ExplosionExpiredEvent))

        assert world.explosions == []
        assert len(expired) == 1
        assert world.is_quiet

    def test_default_ttl_lasts_exactly_ten_ticks(self):
        """A 1 s explosion at 10 ticks per second is gone on the tenth tick."""
        world = World(400, 350, [], [], Sun(200, 25))
        world.explosions.append(Explosion(50.0, 50.0, ttl=1.0))

        for _ in range(9):
            assert world.advance(0.1) == []
        assert len(world.explosions) == 1

        events = world.advance(0.1)

        assert world.explosions == []
        assert events == [ExplosionExpiredEvent(50.0, 50.0)]

    def test_new_explosion_not_aged_on_spawn_tick(self):
        world = duel_world(explosion_ttl=0.3)
        world.launch(50.0, 0.0, count=1, rng=random.Random(0))
        for _ in range(35):
            world.advance(0.1)
        assert world.explosions[0].ttl == 0.3


class TestGorillaHits:
    """Hits on gorillas are reported but change nothing else."""

    def test_hit_event(self):
        world = duel_world()
        target = world.actors[1].hitbox
        world.bananas.append(Banana(x=target.x + 5, y=target.y + 5))

        events = world.advance(0.1)

        assert events == [BananaHitGorillaEvent(gorilla_index=1, x=target.x + 5, y=target.y + 5)]
        assert len(world.actors) == 2


class TestLostBananas:
    """Bananas that fall out of the world."""

    def test_falling_below_canvas(self):
        world = World(400, 350, [], [], Sun(200, 25))
        world.bananas.append(Banana(x=100.0, y=400.0, velocity_y=-10.0))

        events = world.advance(0.1)

        assert world.bananas == []
        assert isinstance(events[0], BananaLostEvent)

    def test_rising_banana_below_canvas_kept(self):
        """A banana still climbing back into view is not dropped."""
        world = World(400, 350, [], [], Sun(200, 25), Environment(gravity=0.0))
        world.bananas.append(Banana(x=100.0, y=400.0, velocity_y=10.0))

        world.advance(0.1)

        assert len(world.bananas) == 1

    def test_banana_off_the_side_kept(self):
        """Leaving through the sides does not remove a banana."""
        world = World(400, 350, [], [], Sun(200, 25), Environment(gravity=0.0))
        world.bananas.append(Banana(x=500.0, y=100.0, velocity_x=10.0))

        world.advance(0.1)

        assert len(world.bananas) == 1


class TestLaunch:
    """Throwing from the generated world."""

    def test_generate(self):
        world = World.generate(640, 350, rng=random.Random(5))
        assert len(world.actors) == 2
        assert world.sun.x == 320
        assert world.bananas == []
        assert world.tick_number == 0

    def test_throwers_alternate(self):
        """Bananas alternate between gorillas and fly toward each other."""
        world = World.generate(640, 350, rng=random.Random(5))
        bananas = world.launch(30.0, 45.0, count=3, rng=random.Random(0))

        assert [b.thrower for b in bananas] == [0, 1, 0]
        assert bananas[0].velocity_x > 0
        assert bananas[1].velocity_x < 0
        assert world.bananas == bananas

    def test_tick_counter(self):
        world = World.generate(640, 350, rng=random.Random(5))
        world.advance(0.1)
        world.advance(0.1)
        assert world.tick_number == 2


class TestSnapshot:
    """Read-only views for the renderer."""

    def test_snapshot_is_frozen(self):
        world = duel_world()
        snapshot = world.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.tick_number = 5

    def test_snapshot_copies_bananas(self):
        """Changing a snapshot banana leaves the world alone."""
        world = duel_world()
        world.launch(50.0, 0.0, rng=random.Random(0))
        snapshot = world.snapshot()

        snapshot.bananas[0].x = -999.0

        assert world.bananas[0].x != -999.0

    def test_snapshot_contents(self):
        world = duel_world()
        world.launch(50.0, 0.0, rng=random.Random(0))
        world.advance(0.1)
        snapshot = world.snapshot()

        assert snapshot.tick_number == 1
        assert snapshot.buildings == world.buildings
        assert snapshot.actors == world.actors
        assert len(snapshot.bananas) == 1
        assert snapshot.environment == Environment(wind_speed=0.0, gravity=0.0)
