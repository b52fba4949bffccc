from __future__ import annotations

from ...models.api import Resolution
from ...models.enums import TileType
from .base import TileContext, TileHandler


class SpiderWebHandler(TileHandler):
    tile_types = (TileType.SPIDER_WEB,)

    def resolve(self, ctx: TileContext) -> Resolution:
        return Resolution(
            status="You got caught in a spider web and died! Press Enter to continue.",
            move_to=ctx.destination,
            player_dies=True,
        )
