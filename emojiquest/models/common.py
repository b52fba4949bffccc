# Re-export models for convenient imports
from .api import (
    ConfirmInput,
    IdleInput,
    InputEvent,
    MoveInput,
    QuitInput,
    Resolution,
    Snapshot,
    TurnInput,
    TurnOutcome,
)
from .entities import Npc, Player
from .enums import (
    CARDINAL_OFFSETS,
    Coord,
    Direction,
    InputKind,
    ItemType,
    NpcType,
    OutcomeKind,
    SessionState,
    TileType,
)
from .map import TERRAIN_HEIGHT, TERRAIN_WIDTH, Terrain
from .world import World

__all__ = [
    "CARDINAL_OFFSETS",
    "ConfirmInput",
    "Coord",
    "Direction",
    "IdleInput",
    "InputEvent",
    "InputKind",
    "ItemType",
    "MoveInput",
    "Npc",
    "NpcType",
    "OutcomeKind",
    "Player",
    "QuitInput",
    "Resolution",
    "SessionState",
    "Snapshot",
    "TERRAIN_HEIGHT",
    "TERRAIN_WIDTH",
    "Terrain",
    "TileType",
    "TurnInput",
    "TurnOutcome",
    "World",
]
