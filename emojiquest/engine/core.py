from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.api import IdleInput, MoveInput, Resolution, TurnOutcome, refused
from ..models.enums import OutcomeKind
from .actions.base import TileContext
from .actions.blocked import BlockedHandler
from .actions.castle import CastleHandler
from .actions.chest import ChestHandler
from .actions.ground import GroundHandler
from .actions.tree import TreeHandler
from .actions.water import WaterHandler
from .actions.web import SpiderWebHandler
from .logging.logger import log_event
from .systems.npc_movement import move_npcs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..core.primitives import RandomSource
    from ..models.api import TurnInput
    from ..models.enums import Coord, Direction
    from ..models.world import World
    from .actions.base import Registry, TileHandler

IDLE_STATUS = "You wait and look around."
OFF_MAP_STATUS = "You can't leave the map!"
DEAD_STATUS = "You are dead."


def _build_registry(*handlers: TileHandler) -> Registry:
    return {t: h for h in handlers for t in h.tile_types}


default_handlers: Registry = _build_registry(
    GroundHandler(),
    WaterHandler(),
    TreeHandler(),
    ChestHandler(),
    CastleHandler(),
    SpiderWebHandler(),
    BlockedHandler(),
)
fallback_handler = BlockedHandler()


def destination(world: World, direction: Direction) -> Coord:
    dx, dy = direction.offset
    x, y = world.player.pos
    return (x + dx, y + dy)


class TurnEngine:
    def __init__(self, handlers: Registry | None = None):
        self.handlers: Registry = handlers or default_handlers

    def evaluate(
        self, world: World, direction: Direction | None, rng: RandomSource
    ) -> Resolution:
        """Decide what the player's step does without touching the world."""
        if world.player.dead:
            return refused(DEAD_STATUS)
        if direction is None:
            return Resolution(status=IDLE_STATUS, result=OutcomeKind.IDLE)
        dst = destination(world, direction)
        if not world.terrain.in_bounds(dst):
            return refused(OFF_MAP_STATUS)

        tile = world.terrain.tile(dst)
        ctx = TileContext(
            destination=dst,
            tile=tile,
            inventory=frozenset(world.player.inventory),
            npc=world.npc_at(dst),
            chest_found=world.terrain.chest_found,
            rng=rng,
        )
        return self.handlers.get(tile, fallback_handler).resolve(ctx)

    def apply(self, world: World, dst: Coord, res: Resolution) -> None:
        """Write an applied resolution for the cell at dst into the world."""
        if res.result != OutcomeKind.APPLIED:
            return
        if res.new_tile is not None:
            world.terrain.set_tile(dst, res.new_tile)
        if res.chest_found:
            world.terrain.chest_found = True
        if res.remove_npc:
            npc = world.npc_at(dst)
            if npc is not None:
                world.remove_npc(npc)
        world.player.inventory.extend(res.items_gained)
        if res.move_to is not None:
            world.player.pos = res.move_to
        if res.player_dies:
            world.player.dead = True

    def resolve_player(
        self, world: World, direction: Direction | None, rng: RandomSource
    ) -> Resolution:
        res = self.evaluate(world, direction, rng)
        tile = None
        if direction is not None:
            dst = destination(world, direction)
            if world.terrain.in_bounds(dst):
                tile = world.terrain.tile(dst)
                self.apply(world, dst, res)
        log_event(world, direction, tile, res)
        return res

    def take_turn(
        self,
        world: World,
        event: TurnInput,
        rng: RandomSource,
        order: Sequence[int] | None = None,
    ) -> TurnOutcome:
        """Resolve the player's input, then move every NPC, then advance the turn counter."""
        if not isinstance(event, (MoveInput, IdleInput)):
            raise TypeError(f"not a turn input: {event!r}")
        direction = event.direction if isinstance(event, MoveInput) else None
        res = self.resolve_player(world, direction, rng)
        move_npcs(world, rng, order)
        world.turn += 1
        return TurnOutcome(
            turn=world.turn,
            status=res.status,
            result=res.result,
            player_pos=world.player.pos,
        )
