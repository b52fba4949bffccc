from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ...core.primitives import RandomSource
    from ...models.api import Resolution
    from ...models.entities import Npc
    from ...models.enums import Coord, ItemType, TileType


@dataclass(frozen=True)
class TileContext:
    """Everything a tile rule may look at when the player steps toward a cell."""

    destination: Coord
    tile: TileType
    inventory: frozenset[ItemType]
    npc: Npc | None
    chest_found: bool
    rng: RandomSource

    def has(self, item: ItemType) -> bool:
        return item in self.inventory


class TileHandler(Protocol):
    tile_types: tuple[TileType, ...]

    def resolve(self, ctx: TileContext) -> Resolution: ...


Registry = dict["TileType", TileHandler]
