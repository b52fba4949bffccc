from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...core.primitives import roll_percent
from ...models.enums import CARDINAL_OFFSETS, NpcType, TileType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...core.primitives import RandomSource
    from ...models.entities import Npc
    from ...models.world import World

logger = logging.getLogger(__name__)

IDLE_CHANCE = 10
WEB_CHANCE = 15


def processing_order(world: World, order: Sequence[int] | None) -> list[Npc]:
    if order is None:
        return list(world.npcs)
    if sorted(order) != list(range(len(world.npcs))):
        raise ValueError(f"order must be a permutation of 0..{len(world.npcs) - 1}")
    return [world.npcs[i] for i in order]


def step_npc(world: World, npc: Npc, rng: RandomSource) -> bool:
    """Random-walk one NPC a single cell onto its home tile. Returns True if it moved."""
    if roll_percent(rng, IDLE_CHANCE):
        return False
    if npc.kind == NpcType.SPIDER and roll_percent(rng, WEB_CHANCE):
        world.terrain.set_tile(npc.pos, TileType.SPIDER_WEB)
        logger.debug("spider spun a web at %s", npc.pos)

    offsets = list(CARDINAL_OFFSETS)
    rng.shuffle(offsets)
    x, y = npc.pos
    for dx, dy in offsets:
        dst = (x + dx, y + dy)
        if dst == world.player.pos:
            continue
        if not world.terrain.in_bounds(dst):
            continue
        if world.terrain.tile(dst) != npc.kind.home_tile:
            continue
        npc.pos = dst
        return True
    return False


def move_npcs(
    world: World, rng: RandomSource, order: Sequence[int] | None = None
) -> int:
    """Move every NPC in turn; later NPCs see the terrain and positions left by earlier ones.

    NPCs are not blocked by each other. `order` is an optional permutation of
    indices into world.npcs. Returns the number of NPCs that moved.
    """
    return sum(step_npc(world, npc, rng) for npc in processing_order(world, order))
