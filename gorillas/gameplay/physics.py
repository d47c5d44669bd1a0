"""
Projectile dynamics for bananas.
NO UI DEPENDENCIES.

Physics y points up while screen y points down, so vertical motion is
applied with a sign flip.
"""
import math
import random
from typing import Optional

from .entities import Actor, Banana
from .constants import BANANA_OUTER_RADIUS, BANANA_SPIN_DG


def step_banana(banana: Banana, wind_speed: float, gravity: float, dt: float) -> Banana:
    """
    Advance a banana by one tick of dt seconds.

    Wind shifts the position but is never added to velocity_x. The spin is a
    fixed visual step per tick, not derived from the velocity.
    """
    banana.x += (banana.velocity_x + wind_speed) * dt
    banana.y -= banana.velocity_y * dt
    banana.velocity_y -= gravity * dt
    banana.rotation_dg = (banana.rotation_dg - BANANA_SPIN_DG) % 360
    return banana


def launch_banana(
    actor: Actor,
    speed: float,
    angle_dg: float,
    thrower: int = 0,
    facing: int = 1,
    rng: Optional[random.Random] = None,
) -> Banana:
    """
    Create a banana thrown by actor.

    The banana starts centred over the gorilla, just clear of its hitbox.
    facing is +1 to throw to the right and -1 to throw to the left.
    """
    if rng is None:
        rng = random.Random()

    angle = math.radians(angle_dg)
    x = actor.model.x
    y = actor.hitbox.top - BANANA_OUTER_RADIUS - 1

    return Banana(
        x=x,
        y=y,
        velocity_x=facing * speed * math.cos(angle),
        velocity_y=speed * math.sin(angle),
        rotation_dg=rng.random() * 360,
        thrower=thrower,
    )
