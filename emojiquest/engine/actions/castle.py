from __future__ import annotations

from ...models.api import Resolution, refused
from ...models.enums import ItemType, TileType
from .base import TileContext, TileHandler


class CastleHandler(TileHandler):
    tile_types = (TileType.CASTLE,)

    def resolve(self, ctx: TileContext) -> Resolution:
        if not ctx.has(ItemType.KEY):
            return refused("The castle gate is locked. You need a key.")
        return Resolution(
            status=(
                "You unlocked the castle and found its heart! "
                "You may now quit the game (Esc)."
            ),
            new_tile=TileType.HEART,
        )
