from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.glyphs import ITEM_GLYPHS, NPC_GLYPHS, PLAYER_GLYPH, TILE_GLYPHS
from ...models.api import Snapshot

if TYPE_CHECKING:
    from ...models.world import World


def render_snapshot(world: World, status: str = "") -> Snapshot:
    """One glyph per cell, player over NPC over tile. Reads the world, never mutates it."""
    terrain = world.terrain
    npc_glyphs = {}
    for npc in world.npcs:
        # first NPC listed wins a shared cell
        npc_glyphs.setdefault(npc.pos, NPC_GLYPHS[npc.kind])

    grid = [
        [
            PLAYER_GLYPH
            if (x, y) == world.player.pos
            else npc_glyphs.get((x, y)) or TILE_GLYPHS[terrain.tile((x, y))]
            for x in range(terrain.width)
        ]
        for y in range(terrain.height)
    ]
    return Snapshot(
        grid=grid,
        inventory=[ITEM_GLYPHS[item] for item in world.player.inventory],
        status=status,
    )
