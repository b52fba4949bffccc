from __future__ import annotations

from ...models.api import Resolution
from ...models.enums import ItemType, TileType
from .base import TileContext, TileHandler


class ChestHandler(TileHandler):
    tile_types = (TileType.CHEST,)

    def resolve(self, ctx: TileContext) -> Resolution:
        # only one chest exists, so holding a harpoon means it was looted
        if ctx.has(ItemType.HARPOON):
            return Resolution(status="The chest is empty.", move_to=ctx.destination)
        return Resolution(
            status="You opened the chest and found a harpoon!",
            move_to=ctx.destination,
            items_gained=[ItemType.HARPOON],
        )
