from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...errors import TerrainGenerationError
from ...models.enums import Coord, TileType
from ...models.map import TERRAIN_HEIGHT, TERRAIN_WIDTH, Terrain

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ...core.primitives import RandomSource

logger = logging.getLogger(__name__)

FOREST_RADIUS = 10
FOREST_MARGIN = 2
POND_RADIUS = 15
POND_MARGIN = 4
# upper bound on pond centre samples
MAX_POND_ATTEMPTS = 10_000


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def dist_sq(a: Coord, b: Coord) -> int:
    dx, dy = a[0] - b[0], a[1] - b[1]
    return dx * dx + dy * dy


def square(terrain: Terrain, center: Coord, r: int) -> Iterator[Coord]:
    """Cells of the (2r+1)^2 square around center, clamped to the grid."""
    cx, cy = center
    for y in range(max(0, cy - r), min(terrain.height - 1, cy + r) + 1):
        for x in range(max(0, cx - r), min(terrain.width - 1, cx + r) + 1):
            yield (x, y)


def in_forest(c: Coord, forest_center: Coord) -> bool:
    return manhattan(c, forest_center) <= FOREST_RADIUS


def in_pond(c: Coord, pond_center: Coord) -> bool:
    return dist_sq(c, pond_center) <= POND_RADIUS * POND_RADIUS


def in_island(c: Coord, castle: Coord) -> bool:
    return abs(c[0] - castle[0]) <= 1 and abs(c[1] - castle[1]) <= 1


def stamp_border(terrain: Terrain) -> None:
    for x, y in terrain.coords():
        if x in (0, terrain.width - 1) or y in (0, terrain.height - 1):
            terrain.set_tile((x, y), TileType.MOUNTAIN)


def pick_forest_center(terrain: Terrain, rng: RandomSource) -> Coord:
    edge = FOREST_RADIUS + FOREST_MARGIN
    return (
        rng.randint(edge, terrain.width - edge),
        rng.randint(edge, terrain.height - edge),
    )


def stamp_forest(terrain: Terrain, center: Coord) -> None:
    for c in square(terrain, center, FOREST_RADIUS):
        if in_forest(c, center):
            terrain.set_tile(c, TileType.TREE)


def pond_overlaps_forest(terrain: Terrain, pond_center: Coord, forest_center: Coord) -> bool:
    return any(
        in_pond(c, pond_center) and in_forest(c, forest_center)
        for c in square(terrain, pond_center, POND_RADIUS)
    )


def pick_pond_center(
    terrain: Terrain,
    rng: RandomSource,
    forest_center: Coord,
    max_attempts: int = MAX_POND_ATTEMPTS,
) -> Coord:
    """Rejection-sample a pond centre whose circle stays clear of the forest diamond."""
    edge = POND_RADIUS + POND_MARGIN
    for attempt in range(1, max_attempts + 1):
        center = (
            rng.randint(edge, terrain.width - edge),
            rng.randint(edge, terrain.height - edge),
        )
        if not pond_overlaps_forest(terrain, center, forest_center):
            logger.debug("pond placed at %s after %d attempt(s)", center, attempt)
            return center
    raise TerrainGenerationError(
        f"no pond position clear of the forest at {forest_center} "
        f"after {max_attempts} attempts"
    )


def stamp_pond(terrain: Terrain, center: Coord) -> None:
    # trees are never overwritten
    for c in square(terrain, center, POND_RADIUS):
        if in_pond(c, center) and terrain.tile(c) == TileType.GRASS:
            terrain.set_tile(c, TileType.WATER)


def place_castle(terrain: Terrain, center: Coord) -> None:
    """Castle on a dry 3x3 island in the middle of the pond."""
    terrain.set_tile(center, TileType.CASTLE)
    for c in terrain.neighbors8(center):
        terrain.set_tile(c, TileType.GRASS)


def stamp_island_beach(terrain: Terrain, castle: Coord) -> None:
    """Sand on every cell outside the island that touches one of its grass tiles."""
    for c in square(terrain, castle, POND_RADIUS + 2):
        if in_island(c, castle):
            continue
        if any(
            in_island(n, castle) and terrain.tile(n) == TileType.GRASS
            for n in terrain.neighbors8(c)
        ):
            terrain.set_tile(c, TileType.SAND)


def stamp_pond_beach(terrain: Terrain, center: Coord) -> None:
    inner, outer = POND_RADIUS * POND_RADIUS, (POND_RADIUS + 1) * (POND_RADIUS + 1)
    for c in square(terrain, center, POND_RADIUS + 1):
        if inner < dist_sq(c, center) <= outer and terrain.tile(c) in (
            TileType.GRASS,
            TileType.WATER,
        ):
            terrain.set_tile(c, TileType.SAND)


def generate(rng: RandomSource) -> Terrain:
    """Build the static map: mountain border, diamond forest, pond with a castle island."""
    terrain = Terrain.filled(TileType.GRASS, TERRAIN_WIDTH, TERRAIN_HEIGHT)
    stamp_border(terrain)

    forest_center = pick_forest_center(terrain, rng)
    stamp_forest(terrain, forest_center)

    pond_center = pick_pond_center(terrain, rng, forest_center)
    stamp_pond(terrain, pond_center)
    place_castle(terrain, pond_center)
    stamp_island_beach(terrain, pond_center)
    stamp_pond_beach(terrain, pond_center)

    logger.info(
        "generated terrain: forest at %s, castle at %s", forest_center, pond_center
    )
    return terrain
