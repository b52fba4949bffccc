from __future__ import annotations

from pydantic import BaseModel, model_validator

from .enums import Coord, TileType

TERRAIN_WIDTH = 100
TERRAIN_HEIGHT = 50


class Terrain(BaseModel):
    width: int = TERRAIN_WIDTH
    height: int = TERRAIN_HEIGHT
    tiles: list[TileType]  # row-major, tiles[y * width + x]
    # at most one chest may ever appear per game
    chest_found: bool = False

    @model_validator(mode="after")
    def _check_size(self) -> Terrain:
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} tiles, got {len(self.tiles)}"
            )
        return self

    @classmethod
    def filled(
        cls,
        tile: TileType = TileType.GRASS,
        width: int = TERRAIN_WIDTH,
        height: int = TERRAIN_HEIGHT,
    ) -> Terrain:
        return cls(width=width, height=height, tiles=[tile] * (width * height))

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, c: Coord) -> int:
        x, y = c
        return y * self.width + x

    def tile(self, c: Coord) -> TileType:
        return self.tiles[self.index(c)]

    def set_tile(self, c: Coord, tile: TileType) -> None:
        self.tiles[self.index(c)] = tile

    def neighbors8(self, c: Coord) -> list[Coord]:
        x, y = c
        return [
            (nx, ny)
            for ny in range(max(0, y - 1), min(self.height - 1, y + 1) + 1)
            for nx in range(max(0, x - 1), min(self.width - 1, x + 1) + 1)
            if (nx, ny) != c
        ]

    def coords(self):
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def find(self, tile: TileType) -> list[Coord]:
        return [c for c in self.coords() if self.tile(c) == tile]

    def count(self, tile: TileType) -> int:
        return self.tiles.count(tile)
