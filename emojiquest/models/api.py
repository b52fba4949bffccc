from __future__ import annotations

from pydantic import BaseModel, Field

from .enums import Coord, Direction, InputKind, ItemType, OutcomeKind, TileType

# ----- Inputs (discriminated union) -----


class MoveInput(BaseModel):
    kind: InputKind = InputKind.MOVE
    direction: Direction


class IdleInput(BaseModel):
    kind: InputKind = InputKind.IDLE


class QuitInput(BaseModel):
    kind: InputKind = InputKind.QUIT


class ConfirmInput(BaseModel):
    kind: InputKind = InputKind.CONFIRM


InputEvent = MoveInput | IdleInput | QuitInput | ConfirmInput
TurnInput = MoveInput | IdleInput


# ----- Player action resolution -----


class Resolution(BaseModel):
    """What a tile rule decided. The engine applies it to the world."""

    status: str
    result: OutcomeKind = OutcomeKind.APPLIED
    move_to: Coord | None = None
    new_tile: TileType | None = None
    items_gained: list[ItemType] = Field(default_factory=list)
    # removes the NPC standing on the destination cell
    remove_npc: bool = False
    chest_found: bool = False
    player_dies: bool = False


def refused(status: str) -> Resolution:
    return Resolution(status=status, result=OutcomeKind.REFUSED)


class TurnOutcome(BaseModel):
    turn: int
    status: str
    result: OutcomeKind
    player_pos: Coord


# ----- Rendering -----


class Snapshot(BaseModel):
    grid: list[list[str]]  # grid[y][x]
    inventory: list[str] = Field(default_factory=list)
    status: str = ""

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]
