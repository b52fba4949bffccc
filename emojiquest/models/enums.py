from enum import Enum

Coord = tuple[int, int]  # (x, y)

# up, right, down, left
CARDINAL_OFFSETS: tuple[Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class TileType(str, Enum):
    GRASS = "grass"
    TREE = "tree"
    WATER = "water"
    MOUNTAIN = "mountain"
    SAND = "sand"
    CASTLE = "castle"
    CHEST = "chest"
    SPIDER_WEB = "spider_web"
    HEART = "heart"


class ItemType(str, Enum):
    SWORD = "sword"
    AXE = "axe"
    HARPOON = "harpoon"
    SNORKEL = "snorkel"
    KEY = "key"


class NpcType(str, Enum):
    FISH = "fish"
    TROLL = "troll"
    SPIDER = "spider"

    @property
    def home_tile(self) -> TileType:
        """Tile type this NPC spawns on and is allowed to move onto."""
        return _HOME_TILES[self]


_HOME_TILES: dict[NpcType, TileType] = {
    NpcType.FISH: TileType.WATER,
    NpcType.TROLL: TileType.GRASS,
    NpcType.SPIDER: TileType.GRASS,
}


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Coord:
        return _OFFSETS[self]


_OFFSETS: dict[Direction, Coord] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class InputKind(str, Enum):
    MOVE = "move"
    IDLE = "idle"
    QUIT = "quit"
    CONFIRM = "confirm"


class SessionState(str, Enum):
    RUNNING = "running"
    DEAD = "dead"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    TERMINATED = "terminated"


class OutcomeKind(str, Enum):
    """
    How a player action resolved:
    - APPLIED: the world changed (moved, fought, chopped, looted)
    - REFUSED: nothing changed, the status explains why
    - IDLE: no movement was requested this turn
    """

    APPLIED = "applied"
    REFUSED = "refused"
    IDLE = "idle"
