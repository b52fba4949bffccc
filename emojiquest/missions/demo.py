from __future__ import annotations

from collections.abc import Iterable

from ..models.entities import Npc, Player
from ..models.enums import ItemType, NpcType, TileType
from ..models.map import Terrain
from ..models.world import World

TILE_CHARS: dict[str, TileType] = {
    ".": TileType.GRASS,
    "T": TileType.TREE,
    "~": TileType.WATER,
    "M": TileType.MOUNTAIN,
    ":": TileType.SAND,
    "C": TileType.CASTLE,
    "X": TileType.CHEST,
    "#": TileType.SPIDER_WEB,
    "H": TileType.HEART,
}

# entity markers and the tile they stand on
ENTITY_CHARS: dict[str, tuple[NpcType | None, TileType]] = {
    "@": (None, TileType.GRASS),
    "f": (NpcType.FISH, TileType.WATER),
    "t": (NpcType.TROLL, TileType.GRASS),
    "s": (NpcType.SPIDER, TileType.GRASS),
}

DEMO_LAYOUT = [
    "MMMMMMMMMMMMMMMM",
    "M..TTTT....~~~~M",
    "M..TTTT...:~f~~M",
    "M.@..t....:~~~~M",
    "M.........:~:C:M",
    "M....s....:~~~~M",
    "M.........::::.M",
    "MMMMMMMMMMMMMMMM",
]


def world_from_layout(
    layout: Iterable[str],
    inventory: Iterable[ItemType] = (ItemType.SWORD,),
    name: str = "alk",
    chest_found: bool = False,
) -> World:
    """Build a world from an ASCII map; rows must all have the same width.

    Tiles use TILE_CHARS. '@' marks the player and f/t/s mark fish, trolls and
    spiders, each standing on its usual tile.
    """
    rows = list(layout)
    width = len(rows[0]) if rows else 0
    if any(len(r) != width for r in rows):
        raise ValueError("layout rows must have equal length")

    tiles: list[TileType] = []
    npcs: list[Npc] = []
    player_pos = None
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in ENTITY_CHARS:
                kind, tile = ENTITY_CHARS[ch]
                if kind is None:
                    player_pos = (x, y)
                else:
                    npcs.append(Npc(kind=kind, pos=(x, y)))
                tiles.append(tile)
            elif ch in TILE_CHARS:
                tiles.append(TILE_CHARS[ch])
            else:
                raise ValueError(f"unknown layout character {ch!r} at {(x, y)}")
    if player_pos is None:
        raise ValueError("layout has no player '@'")

    terrain = Terrain(
        width=width, height=len(rows), tiles=tiles, chest_found=chest_found
    )
    player = Player(name=name, pos=player_pos, inventory=list(inventory))
    return World(terrain=terrain, player=player, npcs=npcs)


def demo_world(name: str = "alk") -> World:
    """Small hand-made map with every feature close together."""
    return world_from_layout(DEMO_LAYOUT, name=name)
