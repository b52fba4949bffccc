from pydantic import BaseModel, Field

from .enums import Coord, ItemType, NpcType


class Player(BaseModel):
    name: str = "alk"
    pos: Coord = (0, 0)
    # ordered as collected, duplicates allowed
    inventory: list[ItemType] = Field(default_factory=list)
    dead: bool = False


class Npc(BaseModel):
    kind: NpcType
    pos: Coord = (0, 0)
