from __future__ import annotations

from typing import TYPE_CHECKING

from ...events import SessionEvent, TurnEvent, event_bus

if TYPE_CHECKING:
    from ...models.api import Resolution
    from ...models.enums import Direction, SessionState, TileType
    from ...models.world import World


def log_event(
    world: World,
    direction: Direction | None,
    tile: TileType | None,
    resolution: Resolution,
) -> None:
    event_bus.emit(
        TurnEvent(
            turn=world.turn,
            direction=direction,
            tile=tile,
            result=resolution.result,
            status=resolution.status,
            player_pos=world.player.pos,
        )
    )


def log_transition(world: World, previous: SessionState, state: SessionState) -> None:
    event_bus.emit(SessionEvent(turn=world.turn, previous=previous, state=state))
