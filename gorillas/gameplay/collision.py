"""
Collision resolution between bananas, gorillas and buildings.
NO UI DEPENDENCIES.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

from .entities import Actor, Banana, Building, Explosion
from .constants import DEFAULT_EXPLOSION_TTL

logger = logging.getLogger(__name__)


class TargetKind(Enum):
    """What a banana ran into."""
    GORILLA = auto()
    BUILDING = auto()


@dataclass
class Hit:
    """A banana consumed by a collision this tick."""
    banana: Banana
    target_kind: TargetKind
    target_index: int
    explosion: Explosion


@dataclass
class CollisionResult:
    """Result of resolving one tick of collisions."""
    surviving: List[Banana] = field(default_factory=list)
    hits: List[Hit] = field(default_factory=list)

    @property
    def explosions(self) -> List[Explosion]:
        return [hit.explosion for hit in self.hits]


def find_target(
    banana: Banana,
    actors: Sequence[Actor],
    buildings: Sequence[Building],
) -> Optional[Tuple[TargetKind, int]]:
    """
    Return the first thing the banana overlaps, or None.
    Gorilla hitboxes are tested before buildings.
    """
    bounds = banana.bounds

    for index, actor in enumerate(actors):
        if bounds.overlaps(actor.hitbox):
            return TargetKind.GORILLA, index

    for index, building in enumerate(buildings):
        if bounds.overlaps(building.rect):
            return TargetKind.BUILDING, index

    return None


def detect_collisions(
    bananas: Sequence[Banana],
    actors: Sequence[Actor],
    buildings: Sequence[Building],
    explosion_ttl: float = DEFAULT_EXPLOSION_TTL,
) -> CollisionResult:
    """
    Resolve collisions for every active banana.

    Each banana is consumed by its first hit and leaves one explosion at its
    position. Bananas that hit nothing are returned in their original order.
    A gorilla being hit has no further consequence here.
    """
    surviving = list(bananas)
    hits: List[Hit] = []

    # Walk backwards so removals don't shift the indices still to visit
    for index in range(len(surviving) - 1, -1, -1):
        banana = surviving[index]
        target = find_target(banana, actors, buildings)
        if target is None:
            continue

        kind, target_index = target
        explosion = Explosion(banana.x, banana.y, ttl=explosion_ttl)
        del surviving[index]
        hits.append(Hit(banana, kind, target_index, explosion))

        logger.debug(
            f"Banana at ({banana.x:.1f}, {banana.y:.1f}) hit "
            f"{kind.name.lower()} {target_index}"
        )

    return CollisionResult(surviving=surviving, hits=hits)
