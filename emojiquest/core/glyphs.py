from ..models.enums import ItemType, NpcType, TileType

# a trailing VS16 asks the terminal for the two-column emoji form
VS16 = "\ufe0f"

PLAYER_GLYPH = "🏃"

TILE_GLYPHS: dict[TileType, str] = {
    TileType.GRASS: "🟩",
    TileType.TREE: "🌲",
    TileType.WATER: "💧",
    TileType.MOUNTAIN: "🗻",
    TileType.SAND: "🟨",
    TileType.CASTLE: "🏰",
    TileType.CHEST: "📦",
    TileType.SPIDER_WEB: "🕸" + VS16,
    TileType.HEART: "💖",
}

NPC_GLYPHS: dict[NpcType, str] = {
    NpcType.FISH: "🐠",
    NpcType.TROLL: "👹",
    NpcType.SPIDER: "🕷" + VS16,
}

ITEM_GLYPHS: dict[ItemType, str] = {
    ItemType.SWORD: "🗡" + VS16,
    ItemType.AXE: "🪓",
    ItemType.HARPOON: "🔱",
    ItemType.SNORKEL: "🤿",
    ItemType.KEY: "🔑",
}
