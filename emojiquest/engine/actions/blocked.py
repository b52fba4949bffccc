from __future__ import annotations

from ...models.api import Resolution, refused
from ...models.enums import TileType
from .base import TileContext, TileHandler

BLOCKED_TEXT = {
    TileType.MOUNTAIN: "The mountains are too steep to climb.",
    TileType.HEART: "You already claimed the castle's heart.",
}


class BlockedHandler(TileHandler):
    """Fallback for every tile nobody else handles: the player cannot go there."""

    tile_types = (TileType.MOUNTAIN, TileType.HEART)

    def resolve(self, ctx: TileContext) -> Resolution:
        return refused(BLOCKED_TEXT.get(ctx.tile, "You can't go there."))
