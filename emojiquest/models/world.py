from __future__ import annotations

from pydantic import BaseModel, Field

from .entities import Npc, Player
from .enums import Coord
from .map import Terrain


class World(BaseModel):
    """Terrain, player and NPCs of one game. Mutated only by the turn engine."""

    terrain: Terrain
    player: Player
    npcs: list[Npc] = Field(default_factory=list)
    turn: int = 0

    def npc_at(self, c: Coord) -> Npc | None:
        return next((n for n in self.npcs if n.pos == c), None)

    def remove_npc(self, npc: Npc) -> None:
        self.npcs = [n for n in self.npcs if n is not npc]
