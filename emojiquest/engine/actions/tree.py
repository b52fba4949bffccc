from __future__ import annotations

from ...core.primitives import roll_percent
from ...models.api import Resolution, refused
from ...models.enums import ItemType, TileType
from .base import TileContext, TileHandler

CHEST_CHANCE = 15


class TreeHandler(TileHandler):
    """Chopping clears the tree but the player stays put."""

    tile_types = (TileType.TREE,)

    def resolve(self, ctx: TileContext) -> Resolution:
        if not ctx.has(ItemType.AXE):
            return refused("The forest is too dense. You need an axe.")
        if not ctx.chest_found and roll_percent(ctx.rng, CHEST_CHANCE):
            return Resolution(
                status="You chopped down the tree and found a chest!",
                new_tile=TileType.CHEST,
                chest_found=True,
            )
        return Resolution(status="You chopped down the tree.", new_tile=TileType.GRASS)
