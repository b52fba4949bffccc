from __future__ import annotations

from ...models.api import Resolution
from ...models.enums import ItemType, NpcType, TileType
from .base import TileContext, TileHandler

WALK_TEXT = {
    TileType.GRASS: "You stroll through the grass.",
    TileType.SAND: "Sand crunches under your feet.",
}


class GroundHandler(TileHandler):
    """Grass and sand: always walkable. Combat with whatever stands there happens after the step."""

    tile_types = (TileType.GRASS, TileType.SAND)

    def resolve(self, ctx: TileContext) -> Resolution:
        npc = ctx.npc
        if npc is not None and npc.kind == NpcType.TROLL:
            return self._fight_troll(ctx)
        if npc is not None and npc.kind == NpcType.SPIDER:
            return Resolution(
                status="You squashed the spider and found a snorkel!",
                move_to=ctx.destination,
                remove_npc=True,
                items_gained=[ItemType.SNORKEL],
            )
        return Resolution(status=WALK_TEXT[ctx.tile], move_to=ctx.destination)

    def _fight_troll(self, ctx: TileContext) -> Resolution:
        if not ctx.has(ItemType.SWORD):
            # the player ends up on the troll's cell anyway
            return Resolution(
                status="A troll blocks your way! You need a sword to defeat it.",
                move_to=ctx.destination,
            )
        if ctx.has(ItemType.AXE):
            return Resolution(
                status="You defeated the troll. It had nothing you need.",
                move_to=ctx.destination,
                remove_npc=True,
            )
        return Resolution(
            status="You defeated the troll and found an axe!",
            move_to=ctx.destination,
            remove_npc=True,
            items_gained=[ItemType.AXE],
        )
