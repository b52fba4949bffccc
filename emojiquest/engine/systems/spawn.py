from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...config import Settings
from ...errors import SpawnError
from ...models.entities import Npc, Player
from ...models.enums import Coord, ItemType, NpcType, TileType
from ...models.world import World
from . import terrain as terrain_gen

if TYPE_CHECKING:
    from ...core.primitives import RandomSource
    from ...models.map import Terrain

logger = logging.getLogger(__name__)

MAX_SPAWN_ATTEMPTS = 100_000


def find_spawn_location(
    terrain: Terrain,
    tile: TileType,
    rng: RandomSource,
    taken: set[Coord] | None = None,
    max_attempts: int = MAX_SPAWN_ATTEMPTS,
) -> Coord:
    """Pick random cells until one of the wanted tile type (and not taken) comes up."""
    taken = taken or set()
    for _ in range(max_attempts):
        c = (rng.randint(0, terrain.width - 1), rng.randint(0, terrain.height - 1))
        if terrain.tile(c) == tile and c not in taken:
            return c
    raise SpawnError(f"no free {tile.value} tile found in {max_attempts} attempts")


def occupied(world: World) -> set[Coord]:
    return {world.player.pos} | {n.pos for n in world.npcs}


def spawn_npc(world: World, kind: NpcType, rng: RandomSource) -> Npc:
    pos = find_spawn_location(world.terrain, kind.home_tile, rng, occupied(world))
    npc = Npc(kind=kind, pos=pos)
    world.npcs.append(npc)
    logger.debug("spawned %s at %s", kind.value, pos)
    return npc


def new_world(rng: RandomSource, settings: Settings | None = None) -> World:
    """Generate terrain, drop the player on grass with a sword, then populate NPCs."""
    settings = settings or Settings()
    terrain = terrain_gen.generate(rng)
    player = Player(
        name=settings.player_name,
        pos=find_spawn_location(terrain, TileType.GRASS, rng),
        inventory=[ItemType.SWORD],
    )
    world = World(terrain=terrain, player=player)
    for kind, count in (
        (NpcType.FISH, settings.fish),
        (NpcType.TROLL, settings.trolls),
        (NpcType.SPIDER, settings.spiders),
    ):
        for _ in range(count):
            spawn_npc(world, kind, rng)
    logger.info(
        "new world: player %r at %s, %d npc(s)",
        player.name,
        player.pos,
        len(world.npcs),
    )
    return world
