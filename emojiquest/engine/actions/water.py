from __future__ import annotations

from ...models.api import Resolution, refused
from ...models.enums import ItemType, NpcType, TileType
from .base import TileContext, TileHandler


class WaterHandler(TileHandler):
    tile_types = (TileType.WATER,)

    def resolve(self, ctx: TileContext) -> Resolution:
        if ctx.npc is not None and ctx.npc.kind == NpcType.FISH:
            return self._fish(ctx)
        if ctx.has(ItemType.SNORKEL):
            return Resolution(
                status="You swim through the water with your snorkel.",
                move_to=ctx.destination,
            )
        return refused("You can't enter the water without a snorkel.")

    def _fish(self, ctx: TileContext) -> Resolution:
        if not ctx.has(ItemType.HARPOON):
            return refused("A fish swims by. You need a harpoon to catch it.")
        if ctx.has(ItemType.KEY):
            return refused("The fish is no longer interested in you.")
        return Resolution(
            status="You caught the fish! It had swallowed a key.",
            remove_npc=True,
            items_gained=[ItemType.KEY],
        )
